# stdlib
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class AuthClientProtocol(Protocol):
    """Protocol defining the interface for platform.sh token exchange."""

    def get_bearer_token(self, api_token: str) -> Optional[str]:
        """Exchange an API token for a short-lived bearer access token."""
        ...
