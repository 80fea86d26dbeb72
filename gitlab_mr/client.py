"""
gitlab-mr API client.

Provides the interface to the GitLab REST API used by the merge request
workflow.
"""

import os
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from gitlab_mr.clients import BranchesClient, MergeRequestsClient, UsersClient
from gitlab_mr.config import Configuration
from gitlab_mr.logging import get_logger
from gitlab_mr.transport import HTTPTransport

logger = get_logger()

TOKEN_ENV_VAR = "GITLAB_API_TOKEN"


class GitlabClient:
    """
    Client for one GitLab project.

    Aggregates the resource clients the workflow needs.

    Example:
        ```python
        from gitlab_mr.client import GitlabClient

        client = GitlabClient(
            base_url="https://gitlab.example.com",
            project_id="group/project",
            access_token="glpat-...",
        )
        for mr in client.merge_requests.list_open("feature-x"):
            print(mr.web_url)
        ```
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        base_url: str,
        project_id: str,
        access_token: str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize the GitLab client.

        Args:
            base_url: GitLab instance URL
            project_id: Numeric id or full path ("group/project") of the project
            access_token: Token sent as bearer credential
            timeout: Request timeout in seconds (default: 30.0)
        """
        self.base_url = base_url
        self.project_id = project_id
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=base_url,
            access_token=access_token,
            timeout=timeout,
        )

        project_path = f"/projects/{quote(str(project_id), safe='')}"
        self.merge_requests = MergeRequestsClient(self._transport, project_path)
        self.branches = BranchesClient(self._transport, project_path)
        self.users = UsersClient(self._transport)

    @classmethod
    def from_config(
        cls,
        config: Configuration,
        environ: Mapping[str, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> "GitlabClient":
        """
        Create a client from a loaded configuration.

        The token comes from the configuration file; when it is absent the
        GITLAB_API_TOKEN environment variable is used instead.
        """
        environ = environ if environ is not None else os.environ
        access_token = config.access_token or environ.get(TOKEN_ENV_VAR, "")
        if not access_token:
            logger.warning(
                "No access token configured; set gitlabApiToken or %s", TOKEN_ENV_VAR
            )

        return cls(
            base_url=config.remote_base_url,
            project_id=config.project_id,
            access_token=access_token,
            timeout=timeout,
        )

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitlabClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
