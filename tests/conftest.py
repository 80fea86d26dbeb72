from gitlab_mr.testing.fixtures import (  # noqa: F401
    call_log,
    fake_git,
    merge_request_sync,
    mock_client,
    prompter,
    sample_config,
    sample_merge_request,
)
