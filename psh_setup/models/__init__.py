from psh_setup.models.integration import GithubIntegration
from psh_setup.models.site import SiteInfo
from psh_setup.models.user_input import UserInput
from psh_setup.models.variable import ProjectVariable

__all__ = ["GithubIntegration", "ProjectVariable", "SiteInfo", "UserInput"]
