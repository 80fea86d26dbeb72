"""Merge request-related data models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class MergeRequest:
    """Merge request information."""

    iid: int
    title: str
    source_branch: str
    target_branch: str
    web_url: str
    state: str  # "opened", "closed", "locked", "merged"
    description: str | None = None


@dataclass
class CreateMergeRequest:
    """Body of a merge request creation call."""

    source_branch: str
    target_branch: str
    title: str
    description: str = ""
    reviewer_ids: list[int] = field(default_factory=list)
    assignee_id: int | None = None
    labels: list[str] = field(default_factory=list)
    remove_source_branch: bool = True
    squash: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Request body; empty reviewer and assignee fields are left out."""
        body: dict[str, Any] = {
            "source_branch": self.source_branch,
            "target_branch": self.target_branch,
            "title": self.title,
            "description": self.description,
            "labels": self.labels,
            "remove_source_branch": self.remove_source_branch,
            "squash": self.squash,
        }
        if self.reviewer_ids:
            body["reviewer_ids"] = self.reviewer_ids
        if self.assignee_id is not None:
            body["assignee_id"] = self.assignee_id
        return body


@dataclass
class MergeRequestHandle:
    """Outcome of synchronizing the current branch with its merge request."""

    merge_request: MergeRequest
    created: bool
    title_updated: bool = False

    @property
    def web_url(self) -> str:
        return self.merge_request.web_url
