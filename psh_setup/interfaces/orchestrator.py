# stdlib
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover
    from psh_setup.models.site import SiteInfo
    from psh_setup.models.user_input import UserInput


@runtime_checkable
class OrchestratorProtocol(Protocol):
    """Protocol defining the interface for the setup workflow."""

    def inspect_site(self) -> "SiteInfo":
        """Find the site in the monorepo."""
        ...

    def collect_user_input(self, site: "SiteInfo") -> "UserInput":
        """Ask the operator for credentials and identifiers."""
        ...

    def get_bearer_token(self, user_input: "UserInput") -> Optional[str]:
        """Exchange the operator's API token for a bearer token."""
        ...

    def provision(self, user_input: "UserInput", bearer_token: Optional[str]) -> None:
        """Register the integration and create the project variables."""
        ...

    def run(self) -> None:
        """Run the entire setup process."""
        ...
