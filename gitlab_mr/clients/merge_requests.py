"""Merge requests resource client."""

from typing import TYPE_CHECKING, Any

from gitlab_mr.types.merge_requests import CreateMergeRequest, MergeRequest

if TYPE_CHECKING:
    from gitlab_mr.transport import HTTPTransport


class MergeRequestsClient:
    """Client for merge request operations on one project."""

    def __init__(self, transport: "HTTPTransport", project_path: str) -> None:
        """
        Initialize the merge requests client.

        Args:
            transport: HTTP transport for making requests
            project_path: URL path of the project (e.g., "/projects/42")
        """
        self.transport = transport
        self.project_path = project_path

    def list_open(self, source_branch: str) -> list[MergeRequest]:
        """
        List open merge requests whose source branch is ``source_branch``.

        Returns:
            List of MergeRequest objects (possibly empty)
        """
        response = self.transport.request(
            method="GET",
            path=f"{self.project_path}/merge_requests",
            params={"state": "opened", "source_branch": source_branch},
        )
        return [self._parse_merge_request(mr) for mr in response or []]

    def create(self, request: CreateMergeRequest) -> MergeRequest:
        """
        Create a merge request.

        Args:
            request: Source/target branches, title and merge options

        Returns:
            The created MergeRequest

        Raises:
            ConflictError: If an open merge request already exists for the branches
            ValidationError: If a branch does not exist
        """
        response = self.transport.request(
            method="POST",
            path=f"{self.project_path}/merge_requests",
            body=request.to_dict(),
        )
        return self._parse_merge_request(response)

    def update(self, iid: int, title: str | None = None) -> MergeRequest:
        """
        Update a merge request. Only the given fields are sent.

        Args:
            iid: Project-scoped merge request id
            title: New title
        """
        body: dict[str, Any] = {}
        if title is not None:
            body["title"] = title

        response = self.transport.request(
            method="PUT",
            path=f"{self.project_path}/merge_requests/{iid}",
            body=body,
        )
        return self._parse_merge_request(response)

    def _parse_merge_request(self, data: dict) -> MergeRequest:
        """Parse merge request data from API response."""
        return MergeRequest(
            iid=data["iid"],
            title=data["title"],
            source_branch=data["source_branch"],
            target_branch=data["target_branch"],
            web_url=data["web_url"],
            state=data.get("state", "opened"),
            description=data.get("description"),
        )
