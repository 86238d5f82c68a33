# stdlib
from typing import TYPE_CHECKING, List, Protocol, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover
    from psh_setup.models.user_input import UserInput


@runtime_checkable
class PlatformClientProtocol(Protocol):
    """Protocol defining the interface for platform.sh project provisioning."""

    def create_github_integration(self, user_input: "UserInput") -> int:
        """Register a GitHub integration on the project."""
        ...

    def create_project_variables(self, user_input: "UserInput") -> List[int]:
        """Create the project variables the site build relies on."""
        ...
