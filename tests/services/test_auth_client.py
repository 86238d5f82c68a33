# stdlib
from unittest.mock import patch

# third party
import pytest
import requests

# first party
from psh_setup.services.auth_client import AuthClient

TOKEN_URL = "https://auth.api.platform.sh/oauth2/token"


@pytest.fixture
def auth_client(settings) -> AuthClient:
    """Create an AuthClient with default settings."""
    return AuthClient(settings=settings)


def test_get_bearer_token(auth_client: AuthClient, make_response) -> None:
    """Test the API token is exchanged for the response's access token."""
    with patch("psh_setup.services.auth_client.requests.post") as mock_post:
        mock_post.return_value = make_response(
            200, {"access_token": "abc", "expires_in": 900}, url=TOKEN_URL
        )

        token = auth_client.get_bearer_token("tok1")

    assert token == "abc"
    mock_post.assert_called_once_with(
        TOKEN_URL,
        json={
            "client_id": "platform-api-user",
            "grant_type": "api_token",
            "api_token": "tok1",
        },
        timeout=None,
    )


def test_get_bearer_token_missing_access_token(
    auth_client: AuthClient, make_response
) -> None:
    """Test a 2xx response without an access token yields None."""
    with patch("psh_setup.services.auth_client.requests.post") as mock_post:
        mock_post.return_value = make_response(200, {"token_type": "bearer"})

        assert auth_client.get_bearer_token("tok1") is None


@pytest.mark.parametrize(
    "content", [b"", b"null", b"[]", b'"abc"', b"<html>ok</html>"]
)
def test_get_bearer_token_body_without_token_object(
    auth_client: AuthClient, make_response, content: bytes
) -> None:
    """Test 2xx bodies that are not a JSON object yield None instead of raising."""
    response = make_response(200, url=TOKEN_URL)
    response._content = content

    with patch("psh_setup.services.auth_client.requests.post") as mock_post:
        mock_post.return_value = response

        assert auth_client.get_bearer_token("tok1") is None


def test_get_bearer_token_unauthorized(auth_client: AuthClient, make_response) -> None:
    """Test HTTP errors propagate unmodified."""
    response = make_response(401, {"error": "invalid_grant"}, url=TOKEN_URL)

    with patch("psh_setup.services.auth_client.requests.post") as mock_post:
        mock_post.return_value = response

        with pytest.raises(requests.HTTPError) as exc_info:
            auth_client.get_bearer_token("bad-token")

    assert exc_info.value.response is response
    mock_post.assert_called_once()


def test_get_bearer_token_connection_error(auth_client: AuthClient) -> None:
    with patch("psh_setup.services.auth_client.requests.post") as mock_post:
        mock_post.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(requests.ConnectionError):
            auth_client.get_bearer_token("tok1")

    mock_post.assert_called_once()


def test_get_bearer_token_uses_configured_endpoint(settings, make_response) -> None:
    settings.auth_url = "https://auth.example.test/token"
    settings.http_timeout = 5.0

    with patch("psh_setup.services.auth_client.requests.post") as mock_post:
        mock_post.return_value = make_response(200, {"access_token": "abc"})
        AuthClient(settings).get_bearer_token("tok1")

    assert mock_post.call_args.args == ("https://auth.example.test/token",)
    assert mock_post.call_args.kwargs["timeout"] == 5.0
