"""
Merge request reconciliation.

Brings the remote merge request for the current branch in line with the local
state: creates the remote branch and the merge request when missing, toggles
the draft marker and pushes new commits otherwise.
"""

from enum import Enum
from typing import TYPE_CHECKING

from gitlab_mr.draft import draft_title, toggled_title
from gitlab_mr.exceptions import (
    AmbiguousReviewerError,
    GitCommandError,
    MultipleMergeRequestsError,
    NoTargetBranchError,
)
from gitlab_mr.logging import get_logger
from gitlab_mr.types.merge_requests import (
    CreateMergeRequest,
    MergeRequest,
    MergeRequestHandle,
)

if TYPE_CHECKING:
    from gitlab_mr.client import GitlabClient
    from gitlab_mr.cmd import CommandResult
    from gitlab_mr.config import Configuration
    from gitlab_mr.git import GitHelper
    from gitlab_mr.prompts import Prompter

logger = get_logger()


class SyncState(Enum):
    """Where the current branch stands relative to the remote."""

    NO_TRACKING_BRANCH = "no_tracking_branch"
    TRACKING_BRANCH_NO_MR = "tracking_branch_no_mr"
    TRACKING_BRANCH_SINGLE_MR = "tracking_branch_single_mr"
    TRACKING_BRANCH_MULTIPLE_MR = "tracking_branch_multiple_mr"


def classify(remote_branch: str | None, merge_requests: list[MergeRequest]) -> SyncState:
    if remote_branch is None:
        return SyncState.NO_TRACKING_BRANCH
    if not merge_requests:
        return SyncState.TRACKING_BRANCH_NO_MR
    if len(merge_requests) == 1:
        return SyncState.TRACKING_BRANCH_SINGLE_MR
    return SyncState.TRACKING_BRANCH_MULTIPLE_MR


class MergeRequestSync:
    """
    Reconciles the current branch with its GitLab merge request.

    Example:
        ```python
        sync = MergeRequestSync(config, GitHelper(), client, QuestionaryPrompter())
        handle = sync.synchronize(draft=True, force=False)
        print(handle.web_url)
        ```
    """

    def __init__(
        self,
        config: "Configuration",
        git: "GitHelper",
        client: "GitlabClient",
        prompter: "Prompter",
    ) -> None:
        self.config = config
        self.git = git
        self.client = client
        self.prompter = prompter

    def synchronize(self, draft: bool, force: bool) -> MergeRequestHandle:
        """
        Publish the current branch as a merge request.

        Args:
            draft: Whether the merge request should be marked as draft
            force: Force push (``git push --force``) instead of a plain push

        Returns:
            Handle with the resulting merge request

        Raises:
            MultipleMergeRequestsError: If more than one open merge request exists
            NoTargetBranchError: If no target branch is available or selected
            AmbiguousReviewerError: If the chosen reviewer matches several users
            GitCommandError: If creating the remote branch or pushing fails
        """
        fetch = self.git.fetch()
        if not fetch.success:
            logger.warning("git fetch failed: %s", fetch.stderr.strip())

        local_branch = self.git.get_local_branch() or ""
        remote_branch = self.git.get_remote_branch()

        if remote_branch is None:
            logger.debug("State: %s", SyncState.NO_TRACKING_BRANCH.value)
            logger.info("Creating remote branch %s", local_branch)
            self._check(
                self.git.create_remote_branch(local_branch),
                ["git", "push", "--set-upstream", self.git.remote, local_branch],
            )
            remote_branch = local_branch

        merge_requests = self.client.merge_requests.list_open(remote_branch)
        state = classify(remote_branch, merge_requests)
        logger.debug("Branch %s -> %s: %s", local_branch, remote_branch, state.value)

        if state is SyncState.TRACKING_BRANCH_MULTIPLE_MR:
            raise MultipleMergeRequestsError(remote_branch, len(merge_requests))

        if state is SyncState.TRACKING_BRANCH_SINGLE_MR:
            return self._update(merge_requests[0], draft, force)

        return self._create(remote_branch, draft, force)

    def find_merge_request(self) -> MergeRequest | None:
        """
        Open merge request for the current tracking branch.

        Returns:
            The merge request, or None if the branch has no upstream or no
            open merge request

        Raises:
            MultipleMergeRequestsError: If more than one open merge request exists
        """
        remote_branch = self.git.get_remote_branch()
        if remote_branch is None:
            return None

        merge_requests = self.client.merge_requests.list_open(remote_branch)
        state = classify(remote_branch, merge_requests)
        if state is SyncState.TRACKING_BRANCH_MULTIPLE_MR:
            raise MultipleMergeRequestsError(remote_branch, len(merge_requests))
        if state is SyncState.TRACKING_BRANCH_SINGLE_MR:
            return merge_requests[0]
        return None

    def target_branch(self) -> str | None:
        """Target branch of the current merge request, if there is one."""
        merge_request = self.find_merge_request()
        return merge_request.target_branch if merge_request else None

    def _update(
        self, merge_request: MergeRequest, draft: bool, force: bool
    ) -> MergeRequestHandle:
        new_title = toggled_title(merge_request.title, draft)
        if new_title is not None:
            logger.info("Updating title of !%s to %r", merge_request.iid, new_title)
            merge_request = self.client.merge_requests.update(
                merge_request.iid, title=new_title
            )

        self._push(force)
        return MergeRequestHandle(
            merge_request=merge_request,
            created=False,
            title_updated=new_title is not None,
        )

    def _create(self, source_branch: str, draft: bool, force: bool) -> MergeRequestHandle:
        self._push(force)

        reviewer_id = self._select_reviewer_id()
        title = draft_title(self.git.get_commit_title(), draft)
        target_branch = self._select_target_branch()

        request = CreateMergeRequest(
            source_branch=source_branch,
            target_branch=target_branch,
            title=title,
            description=self.git.get_commit_body(),
            reviewer_ids=[reviewer_id] if reviewer_id is not None else [],
            assignee_id=self.client.users.current().id,
            labels=list(self.config.default_labels),
            remove_source_branch=True,
            squash=self.prompter.confirm_squash(),
        )
        logger.info("Creating merge request %s -> %s", source_branch, target_branch)
        merge_request = self.client.merge_requests.create(request)
        return MergeRequestHandle(merge_request=merge_request, created=True)

    def _select_target_branch(self) -> str:
        candidates = list(self.config.default_target_branches)
        if not candidates:
            candidates = self.client.branches.list_names()
        if not candidates:
            raise NoTargetBranchError("No target branch candidates are available")

        target_branch = self.prompter.select_target_branch(candidates)
        if not target_branch:
            raise NoTargetBranchError()
        return target_branch

    def _select_reviewer_id(self) -> int | None:
        username = self.prompter.select_reviewer(list(self.config.reviewers))
        if not username:
            return None

        users = self.client.users.find_by_username(username)
        if len(users) > 1:
            raise AmbiguousReviewerError(username, len(users))
        if not users:
            logger.warning("Reviewer %s not found; creating without reviewer", username)
            return None
        return users[0].id

    def _push(self, force: bool) -> None:
        command = ["git", "push", "--force"] if force else ["git", "push"]
        self._check(self.git.push(force), command)

    def _check(self, result: "CommandResult", command: list[str]) -> None:
        if not result.success:
            raise GitCommandError(command, result.stderr)
