# stdlib
import logging
from dataclasses import dataclass
from typing import Optional

# third party
import requests

# first party
from psh_setup.config import Settings
from psh_setup.interfaces.auth import AuthClientProtocol

logger = logging.getLogger(__name__)

CLIENT_ID = "platform-api-user"
GRANT_TYPE = "api_token"


def _access_token(response: requests.Response) -> Optional[str]:
    # Empty, non-JSON and non-object bodies carry no token
    try:
        body = response.json()
    except ValueError:
        return None

    if not isinstance(body, dict):
        return None
    return body.get("access_token")


@dataclass
class AuthClient(AuthClientProtocol):
    """
    Client for the platform.sh OAuth2 token endpoint.

    Attributes:
        settings: Settings holding the token endpoint URL
    """

    settings: Settings

    def get_bearer_token(self, api_token: str) -> Optional[str]:
        """
        Exchange an API token for a bearer access token.

        Args:
            api_token: platform.sh API token generated in the console

        Returns:
            Optional[str]: The `access_token` from the response, or None when
                the response does not carry one

        Raises:
            requests.HTTPError: If the endpoint answers with a non-2xx status
        """
        logger.debug("Requesting access token", extra={"url": self.settings.auth_url})

        response = requests.post(
            self.settings.auth_url,
            json={
                "client_id": CLIENT_ID,
                "grant_type": GRANT_TYPE,
                "api_token": api_token,
            },
            timeout=self.settings.http_timeout,
        )
        response.raise_for_status()

        access_token = _access_token(response)
        if access_token is None:
            logger.warning("Token response did not include an access token")
        else:
            logger.info("Retrieved access token")

        return access_token
