"""gitlab-mr resource clients."""

from gitlab_mr.clients.branches import BranchesClient
from gitlab_mr.clients.merge_requests import MergeRequestsClient
from gitlab_mr.clients.users import UsersClient

__all__ = [
    "MergeRequestsClient",
    "BranchesClient",
    "UsersClient",
]
