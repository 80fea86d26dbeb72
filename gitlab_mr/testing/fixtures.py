"""
Pytest fixtures for gitlab-mr testing.
"""

from collections.abc import Generator

import pytest

from gitlab_mr.config import Configuration
from gitlab_mr.sync import MergeRequestSync
from gitlab_mr.testing.mock import (
    CallLog,
    FakeGit,
    MockGitlabClient,
    ScriptedPrompter,
    create_mock_merge_request,
)
from gitlab_mr.types.merge_requests import MergeRequest


@pytest.fixture
def call_log() -> CallLog:
    """Shared, ordered record of calls to all test doubles."""
    return CallLog()


@pytest.fixture
def mock_client(call_log: CallLog) -> Generator[MockGitlabClient, None, None]:
    """
    Provide a MockGitlabClient for testing.

    Example:
        ```python
        def test_my_feature(mock_client):
            mock_client.merge_requests.configure_list_open(response=[...])
            ...
            assert mock_client.was_called("merge_requests.update")
        ```
    """
    client = MockGitlabClient(calls=call_log)
    yield client
    client.reset()


@pytest.fixture
def fake_git(call_log: CallLog) -> FakeGit:
    """A repository on branch feature-x that has been pushed before."""
    return FakeGit(local_branch="feature-x", remote_branch="feature-x", calls=call_log)


@pytest.fixture
def prompter(call_log: CallLog) -> ScriptedPrompter:
    return ScriptedPrompter(calls=call_log)


@pytest.fixture
def sample_config() -> Configuration:
    """Configuration with one target branch and two reviewers."""
    return Configuration(
        remote_base_url="https://gitlab.example.com",
        project_id="42",
        access_token="test-token",
        reviewers=("alice", "bob"),
        default_target_branches=("main",),
        default_labels=("backend",),
    )


@pytest.fixture
def sample_merge_request() -> MergeRequest:
    return create_mock_merge_request(iid=7, title="Add feature")


@pytest.fixture
def merge_request_sync(
    sample_config: Configuration,
    fake_git: FakeGit,
    mock_client: MockGitlabClient,
    prompter: ScriptedPrompter,
) -> MergeRequestSync:
    """MergeRequestSync wired to the test doubles above."""
    return MergeRequestSync(
        config=sample_config,
        git=fake_git,
        client=mock_client,
        prompter=prompter,
    )
