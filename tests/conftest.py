# stdlib
import json
from typing import Any, Callable, Optional
from unittest.mock import MagicMock

# third party
import pytest
import requests

# first party
from psh_setup.config import Settings
from psh_setup.interfaces.auth import AuthClientProtocol
from psh_setup.interfaces.platform import PlatformClientProtocol
from psh_setup.models.user_input import UserInput


@pytest.fixture
def settings() -> Settings:
    """Create settings pointing at the default platform.sh endpoints."""
    return Settings()


@pytest.fixture
def user_input() -> UserInput:
    """Create a complete set of operator answers."""
    return UserInput(
        project_id="proj1",
        api_token="tok1",
        github_token="pat1",
        github_owner="octocat",
        github_repo="myrepo",
        site_dir_name="mysite",
    )


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    """Build real `requests.Response` objects so `raise_for_status` behaves."""

    def _make_response(
        status_code: int = 200,
        body: Optional[Any] = None,
        url: str = "https://api.platform.sh/",
        method: str = "POST",
        reason: str = "",
    ) -> requests.Response:
        response = requests.Response()
        response.status_code = status_code
        response.reason = reason
        response.url = url
        response._content = json.dumps(body if body is not None else {}).encode()
        response.headers["Content-Type"] = "application/json"
        response.request = requests.Request(method, url).prepare()
        return response

    return _make_response


@pytest.fixture
def site_tree(tmp_path):
    """Create a monorepo sites directory holding a single site."""

    def _site_tree(dir_name: str = "mysite", manifest: Optional[Any] = None):
        sites_dir = tmp_path / "sites"
        site_dir = sites_dir / dir_name
        site_dir.mkdir(parents=True)
        if manifest is None:
            manifest = {"name": f"@sites/{dir_name}"}
        contents = manifest if isinstance(manifest, str) else json.dumps(manifest)
        (site_dir / "package.json").write_text(contents)
        return sites_dir

    return _site_tree


@pytest.fixture
def mock_auth_client() -> AuthClientProtocol:
    """Create a mock token exchange client."""
    client = MagicMock(spec=AuthClientProtocol)
    client.get_bearer_token.return_value = "abc"
    return client


@pytest.fixture
def mock_platform_client() -> PlatformClientProtocol:
    """Create a mock projects API client."""
    client = MagicMock(spec=PlatformClientProtocol)
    client.create_github_integration.return_value = 201
    client.create_project_variables.return_value = [201, 201, 201, 201]
    return client
