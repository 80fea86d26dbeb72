"""gitlab-mr exception classes."""


class GitlabMrError(Exception):
    """Base exception for all gitlab-mr errors.

    The ``message`` is meant to be shown to the user as-is.
    """

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")

    @property
    def readable_message(self) -> str:
        return self.message


class ConfigurationError(GitlabMrError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class ConfigParseError(ConfigurationError):
    """Raised when a configuration file exists but cannot be loaded."""

    def __init__(self, path: str, reason: str) -> None:
        GitlabMrError.__init__(
            self,
            "CONFIG_PARSE_FAILURE",
            f"Failed to load config file: {path} ({reason})",
        )
        self.path = path
        self.reason = reason


class NotAGitRepositoryError(GitlabMrError):
    """Raised when a repository-scoped command runs outside a git work tree."""

    def __init__(self, message: str = "Not inside a git repository") -> None:
        super().__init__("NOT_A_GIT_REPOSITORY", message)


class FileOutsideRepositoryError(GitlabMrError):
    """Raised when a file path does not lie under the repository root."""

    def __init__(self, file_path: str, git_root: str) -> None:
        super().__init__(
            "FILE_OUTSIDE_REPOSITORY",
            f"File {file_path} is not inside the repository {git_root}",
        )
        self.file_path = file_path
        self.git_root = git_root


class MultipleMergeRequestsError(GitlabMrError):
    """Raised when more than one open merge request exists for a branch."""

    def __init__(self, source_branch: str, count: int) -> None:
        super().__init__(
            "MULTIPLE_MERGE_REQUESTS",
            f"Multiple merge requests found for branch {source_branch} ({count})",
        )
        self.source_branch = source_branch
        self.count = count


class NoTargetBranchError(GitlabMrError):
    """Raised when no target branch is available or none was selected."""

    def __init__(
        self,
        message: str = (
            "No target branch was selected. It is not possible to create a "
            "merge request without a target branch"
        ),
    ) -> None:
        super().__init__("NO_TARGET_BRANCH", message)


class AmbiguousReviewerError(GitlabMrError):
    """Raised when a reviewer username matches more than one remote user."""

    def __init__(self, username: str, count: int) -> None:
        super().__init__(
            "AMBIGUOUS_REVIEWER",
            f"Multiple users with name {username} found ({count})",
        )
        self.username = username
        self.count = count


class GitCommandError(GitlabMrError):
    """Raised when a mutating git command fails."""

    def __init__(self, command: list[str], stderr: str) -> None:
        super().__init__(
            "GIT_COMMAND_FAILED",
            f"'{' '.join(command)}' failed: {stderr.strip()}",
        )
        self.command = command
        self.stderr = stderr


class AuthenticationError(GitlabMrError):
    """Raised when the access token is missing or rejected (401)."""

    pass


class AuthorizationError(GitlabMrError):
    """Raised when access is denied (403)."""

    pass


class NotFoundError(GitlabMrError):
    """Raised when a resource is not found (404)."""

    pass


class ConflictError(GitlabMrError):
    """Raised on conflicts, e.g. a merge request that already exists (409)."""

    pass


class RateLimitedError(GitlabMrError):
    """Raised when rate limited (429)."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.retry_after = retry_after


class ValidationError(GitlabMrError):
    """Raised on other client errors (400, 422, ...)."""

    pass


class ServerError(GitlabMrError):
    """Raised on server errors (5xx) and connection failures."""

    pass
