# stdlib
import logging
from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

# third party
import requests

# first party
from psh_setup.config import Settings
from psh_setup.interfaces.platform import PlatformClientProtocol
from psh_setup.models.integration import GithubIntegration
from psh_setup.models.user_input import UserInput
from psh_setup.models.variable import ProjectVariable
from psh_setup.utils import bearer_headers

logger = logging.getLogger(__name__)


def build_project_variables(user_input: UserInput) -> List[ProjectVariable]:
    """Variables the site build reads to push back to its GitHub remote."""
    return [
        ProjectVariable(
            name="env:APP_GIT_PW", value=user_input.github_token, is_sensitive=True
        ),
        ProjectVariable(name="env:APP_GIT_REMOTE_URL", value=user_input.remote_url),
        ProjectVariable(name="env:APP_GIT_USER", value=user_input.github_owner),
        ProjectVariable(name="env:APP_SITE_DIR_NAME", value=user_input.site_dir_name),
    ]


@dataclass
class PlatformClient(PlatformClientProtocol):
    """
    Client for the platform.sh projects API.

    Every request is authorized with the bearer token obtained from the token
    exchange. Errors are raised as-is: nothing is retried and nothing already
    created is rolled back.

    Attributes:
        settings: Settings holding the API base URL and pool size
        bearer_token: Access token for the `Authorization` header
    """

    settings: Settings
    bearer_token: Optional[str]

    def _project_url(self, project_id: str, resource: str) -> str:
        return f"{self.settings.api_url}/projects/{project_id}/{resource}"

    def _post(self, url: str, payload: Dict[str, Any]) -> requests.Response:
        response = requests.post(
            url,
            json=payload,
            headers=bearer_headers(self.bearer_token),
            timeout=self.settings.http_timeout,
        )
        response.raise_for_status()
        return response

    def create_github_integration(self, user_input: UserInput) -> int:
        """
        Register a GitHub integration on the project.

        Args:
            user_input: Answers holding the project ID, PAT and repository

        Returns:
            int: HTTP status code of the response

        Raises:
            requests.HTTPError: If the API answers with a non-2xx status,
                including a conflict when an integration already exists
        """
        integration = GithubIntegration(
            token=user_input.github_token, repository=user_input.repository
        )
        logger.info(
            "Creating GitHub integration",
            extra={
                "project_id": user_input.project_id,
                "repository": integration.repository,
            },
        )

        response = self._post(
            self._project_url(user_input.project_id, "integrations"),
            integration.to_payload(),
        )

        logger.info(
            "Created GitHub integration", extra={"status": response.status_code}
        )
        return response.status_code

    def create_project_variables(self, user_input: UserInput) -> List[int]:
        """
        Create the project variables concurrently.

        All requests are sent at once. The first failure is raised as soon as
        it is seen and requests that have not started yet are cancelled.

        Args:
            user_input: Answers holding the project ID and variable values

        Returns:
            List[int]: HTTP status codes, in the order the variables are built
        """
        url = self._project_url(user_input.project_id, "variables")
        variables = build_project_variables(user_input)

        logger.info(
            "Creating project variables",
            extra={
                "project_id": user_input.project_id,
                "variables": [v.name for v in variables],
            },
        )

        executor = ThreadPoolExecutor(
            max_workers=max(1, min(self.settings.max_workers, len(variables)))
        )
        try:
            futures = [
                executor.submit(self._post, url, variable.to_payload())
                for variable in variables
            ]
            done, _ = wait(futures, return_when=FIRST_EXCEPTION)
            for future in futures:
                if future in done and future.exception() is not None:
                    raise future.exception()

            statuses = [future.result().status_code for future in futures]
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        logger.info("Created project variables", extra={"statuses": statuses})
        return statuses
