"""
Links to a single file's diff inside a merge request.

GitLab's diff view identifies each file by the SHA-1 of its path relative to
the repository root, so ``<merge request url>/diffs#<sha1>`` scrolls straight
to that file.
"""

import hashlib
import os
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from gitlab_mr.exceptions import FileOutsideRepositoryError, NotAGitRepositoryError

if TYPE_CHECKING:
    from gitlab_mr.git import GitHelper
    from gitlab_mr.sync import MergeRequestSync

DIFFS_FRAGMENT = "/diffs#"


def diff_anchor(relative_path: str) -> str:
    """Lowercase hex SHA-1 of the UTF-8 encoded path."""
    return hashlib.sha1(relative_path.encode("utf-8")).hexdigest()


def relative_to_root(absolute_path: PurePath, git_root: PurePath) -> str:
    """
    Path of ``absolute_path`` relative to ``git_root``, joined with ``/``.

    Raises:
        FileOutsideRepositoryError: If the path does not lie under the root
    """
    root_parts = git_root.parts
    path_parts = absolute_path.parts
    if path_parts[: len(root_parts)] != root_parts:
        raise FileOutsideRepositoryError(str(absolute_path), str(git_root))
    return "/".join(path_parts[len(root_parts):])


class DiffAnchorLocator:
    """Builds the URL of a file's diff in the current merge request."""

    def __init__(self, git: "GitHelper", sync: "MergeRequestSync") -> None:
        self.git = git
        self.sync = sync

    def relative_path(self, file_path: str | Path) -> str:
        git_root = self.git.get_git_root()
        if not git_root:
            raise NotAGitRepositoryError()

        base = Path(self.git.cwd) if self.git.cwd is not None else Path.cwd()
        # Symlinked directories are resolved, the file itself is not: the
        # diff lists a tracked symlink under its own path.
        lexical_path = Path(os.path.abspath(base / file_path))
        absolute_path = lexical_path.parent.resolve() / lexical_path.name
        return relative_to_root(absolute_path, Path(git_root).resolve())

    def locate(self, file_path: str | Path) -> str | None:
        """
        URL of the file's diff.

        Returns:
            The URL, or None if the current branch has no open merge request

        Raises:
            NotAGitRepositoryError: If not inside a git repository
            FileOutsideRepositoryError: If the file is not inside the repository
            MultipleMergeRequestsError: If the branch has several open merge requests
        """
        relative_path = self.relative_path(file_path)
        merge_request = self.sync.find_merge_request()
        if merge_request is None:
            return None
        return merge_request.web_url + DIFFS_FRAGMENT + diff_anchor(relative_path)
