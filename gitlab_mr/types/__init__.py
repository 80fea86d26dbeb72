"""gitlab-mr type definitions.

This module exports all data model types used by the tool.
"""

from gitlab_mr.types.merge_requests import (
    CreateMergeRequest,
    MergeRequest,
    MergeRequestHandle,
)
from gitlab_mr.types.users import User

__all__ = [
    # Merge request types
    "MergeRequest",
    "CreateMergeRequest",
    "MergeRequestHandle",
    # User types
    "User",
]
