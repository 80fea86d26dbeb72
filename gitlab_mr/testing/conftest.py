"""
Pytest plugin for gitlab-mr testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["gitlab_mr.testing.conftest"]
"""

from gitlab_mr.testing.fixtures import (
    call_log,
    fake_git,
    merge_request_sync,
    mock_client,
    prompter,
    sample_config,
    sample_merge_request,
)

__all__ = [
    "call_log",
    "mock_client",
    "fake_git",
    "prompter",
    "sample_config",
    "sample_merge_request",
    "merge_request_sync",
]
