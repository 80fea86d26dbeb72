"""gitlab-mr - publish local branches as GitLab merge requests."""

from gitlab_mr.anchor import DiffAnchorLocator, diff_anchor
from gitlab_mr.client import GitlabClient
from gitlab_mr.config import ConfigResolver, Configuration
from gitlab_mr.draft import DRAFT_MARKER, toggled_title
from gitlab_mr.exceptions import (
    AmbiguousReviewerError,
    AuthenticationError,
    AuthorizationError,
    ConfigParseError,
    ConfigurationError,
    ConflictError,
    FileOutsideRepositoryError,
    GitCommandError,
    GitlabMrError,
    MultipleMergeRequestsError,
    NoTargetBranchError,
    NotAGitRepositoryError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from gitlab_mr.git import GitHelper
from gitlab_mr.logging import configure_logging, get_logger
from gitlab_mr.sync import MergeRequestSync, SyncState
from gitlab_mr.transport import HTTPTransport

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main components
    "Configuration",
    "ConfigResolver",
    "GitlabClient",
    "GitHelper",
    "MergeRequestSync",
    "SyncState",
    "DiffAnchorLocator",
    "diff_anchor",
    "DRAFT_MARKER",
    "toggled_title",
    # Exceptions
    "GitlabMrError",
    "ConfigurationError",
    "ConfigParseError",
    "NotAGitRepositoryError",
    "FileOutsideRepositoryError",
    "MultipleMergeRequestsError",
    "NoTargetBranchError",
    "AmbiguousReviewerError",
    "GitCommandError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    # Transport
    "HTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
