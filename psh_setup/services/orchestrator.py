# stdlib
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

# first party
from psh_setup.config import Settings
from psh_setup.interfaces.auth import AuthClientProtocol
from psh_setup.interfaces.orchestrator import OrchestratorProtocol
from psh_setup.interfaces.platform import PlatformClientProtocol
from psh_setup.models.site import SiteInfo
from psh_setup.models.user_input import UserInput
from psh_setup.prompts import Prompter, collect_user_input
from psh_setup.services.auth_client import AuthClient
from psh_setup.services.platform_client import PlatformClient
from psh_setup.site import inspect_site

logger = logging.getLogger(__name__)


@dataclass
class SetupOrchestrator(OrchestratorProtocol):
    """
    Orchestrates wiring a site's GitHub repository into a platform.sh project.

    This class implements the OrchestratorProtocol interface, running each
    stage once and in order:
    - Finding the site in the monorepo
    - Asking the operator for credentials and identifiers
    - Exchanging the API token for a bearer token
    - Registering the GitHub integration and creating project variables

    Errors are not handled here; the first one ends the run.

    Attributes:
        settings: Settings for endpoints, paths and the worker pool
        prompter: Prompter connected to the operator's terminal
        auth_client: Client for the token exchange
        platform_client_factory: Builds a projects API client from a bearer token
    """

    settings: Settings
    prompter: Optional[Prompter] = None
    auth_client: Optional[AuthClientProtocol] = None
    platform_client_factory: Callable[
        [Settings, Optional[str]], PlatformClientProtocol
    ] = field(default=PlatformClient)

    def __post_init__(self) -> None:
        """Initialize the prompter and auth client if not provided."""
        if self.prompter is None:
            self.prompter = Prompter()
        if self.auth_client is None:
            self.auth_client = AuthClient(self.settings)

    def inspect_site(self) -> SiteInfo:
        return inspect_site(self.settings.sites_dir)

    def collect_user_input(self, site: SiteInfo) -> UserInput:
        return collect_user_input(self.prompter, site.dir_name)

    def get_bearer_token(self, user_input: UserInput) -> Optional[str]:
        return self.auth_client.get_bearer_token(user_input.api_token)

    def provision(self, user_input: UserInput, bearer_token: Optional[str]) -> None:
        """
        Register the GitHub integration, then create the project variables.

        Variables are only created once the integration call has succeeded.
        """
        platform_client = self.platform_client_factory(self.settings, bearer_token)
        platform_client.create_github_integration(user_input)
        platform_client.create_project_variables(user_input)

    def run(self) -> None:
        """
        Run the entire setup process.

        Raises:
            Exception: Whatever the failing stage raised
        """
        site = self.inspect_site()
        user_input = self.collect_user_input(site)
        bearer_token = self.get_bearer_token(user_input)
        self.provision(user_input, bearer_token)
        logger.info(
            "Setup complete",
            extra={"project_id": user_input.project_id, "site": site.name},
        )
