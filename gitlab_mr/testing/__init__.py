"""gitlab-mr testing utilities.

Provides test doubles and fixtures for code that drives the merge request
workflow.
"""

from gitlab_mr.testing.mock import (
    CallLog,
    FakeGit,
    MockCall,
    MockGitlabClient,
    MockResponse,
    ScriptedPrompter,
    create_mock_merge_request,
)

__all__ = [
    "MockGitlabClient",
    "MockCall",
    "MockResponse",
    "CallLog",
    "FakeGit",
    "ScriptedPrompter",
    "create_mock_merge_request",
]
