# stdlib
from dataclasses import dataclass, field


@dataclass(frozen=True)
class UserInput:
    """
    Values collected from the operator, plus the site directory name.

    Nothing here is validated: empty answers are kept as empty strings and
    passed on to the platform.sh API as-is.

    Attributes:
        project_id: platform.sh project ID
        api_token: platform.sh API token, exchanged for a bearer token
        github_token: GitHub personal access token (PAT)
        github_owner: GitHub user or organization owning the repository
        github_repo: GitHub repository name
        site_dir_name: Directory of the site under `sites/`
    """

    project_id: str
    api_token: str = field(repr=False)
    github_token: str = field(repr=False)
    github_owner: str
    github_repo: str
    site_dir_name: str

    @property
    def repository(self) -> str:
        return f"{self.github_owner}/{self.github_repo}"

    @property
    def remote_url(self) -> str:
        return f"https://github.com/{self.repository}.git"
