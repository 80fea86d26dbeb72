"""
Git helper utilities for gitlab-mr.

Wraps the handful of git queries and mutations the merge request workflow
needs. Queries return None (or an empty string) when git fails; mutations
return the CommandResult so the caller can decide how to react.
"""

from collections.abc import Callable
from pathlib import Path

from gitlab_mr.cmd import CommandResult, run_command

DEFAULT_REMOTE = "origin"


class GitHelper:
    """
    Helper for git operations in the current working tree.

    Example:
        ```python
        git = GitHelper()
        git.fetch()
        branch = git.get_local_branch()
        tracking = git.get_remote_branch()  # "feature-x", not "origin/feature-x"
        ```
    """

    def __init__(
        self,
        cwd: str | Path | None = None,
        remote: str = DEFAULT_REMOTE,
        runner: Callable[..., CommandResult] = run_command,
    ) -> None:
        """
        Initialize GitHelper.

        Args:
            cwd: Working directory for git commands (default: process cwd)
            remote: Remote name used for pushes and prefix stripping
            runner: Command runner (replaceable in tests)
        """
        self.cwd = cwd
        self.remote = remote
        self._run = runner

    def fetch(self) -> CommandResult:
        """Refresh remote-tracking information."""
        return self._git("fetch")

    def get_git_root(self) -> str | None:
        """Absolute path of the repository root, or None outside a repository."""
        result = self._git("rev-parse", "--show-toplevel")
        return result.stdout.strip() if result.success else None

    def get_local_branch(self) -> str | None:
        result = self._git("rev-parse", "--symbolic-full-name", "--abbrev-ref", "HEAD")
        return result.stdout.strip() if result.success else None

    def get_remote_branch(self) -> str | None:
        """
        Name of the upstream branch with the remote prefix stripped.

        Returns:
            The branch name, or None if the current branch has no upstream
        """
        result = self._git(
            "rev-parse", "--symbolic-full-name", "--abbrev-ref", "HEAD@{u}"
        )
        if not result.success:
            return None
        return self.strip_remote_prefix(result.stdout.strip()) or None

    def strip_remote_prefix(self, branch: str) -> str:
        prefix = f"{self.remote}/"
        if branch.startswith(prefix):
            return branch[len(prefix):]
        return branch

    def get_commit_title(self) -> str:
        """Subject line of HEAD."""
        result = self._git("show", "--pretty=format:%s", "-s", "HEAD")
        return result.stdout.strip() if result.success else ""

    def get_commit_body(self) -> str:
        """Message body of HEAD (everything after the subject)."""
        result = self._git("show", "--pretty=format:%b", "-s", "HEAD")
        return result.stdout if result.success else ""

    def create_remote_branch(self, branch_name: str) -> CommandResult:
        """Push a branch and set it as upstream of the local branch."""
        return self._git("push", "--set-upstream", self.remote, branch_name)

    def push(self, force: bool = False) -> CommandResult:
        """
        Push the current branch to its upstream.

        Args:
            force: Overwrite the remote branch (``git push --force``)
        """
        if force:
            return self._git("push", "--force")
        return self._git("push")

    def _git(self, *args: str) -> CommandResult:
        return self._run(["git", *args], cwd=self.cwd)
