"""
gitlab-mr logging utilities.

Provides configurable logging for HTTP requests/responses and git commands.
Access tokens and authorization headers are never logged in clear text.
"""

import logging
import re
from typing import Any

_tool_logger = logging.getLogger("gitlab_mr")
_http_logger = logging.getLogger("gitlab_mr.http")
_git_logger = logging.getLogger("gitlab_mr.git")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Bearer credentials in headers or error text
    (re.compile(r"(Bearer\s+)[A-Za-z0-9\-_.=]+"), r"\1[REDACTED]"),
    # GitLab personal/project access tokens
    (re.compile(r"glpat-[A-Za-z0-9\-_]{10,}"), "[TOKEN_REDACTED]"),
    # Secret/token patterns
    (re.compile(r"(secret|token|password|api_key)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

_DEFAULT_SENSITIVE_KEYS = {
    "authorization",
    "private-token",
    "token",
    "secret",
    "password",
    "api_key",
}


def configure_logging(
    level: int = logging.WARNING,
    http_level: int | None = None,
    git_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure gitlab-mr logging.

    Args:
        level: Default log level for all gitlab-mr loggers (default: WARNING)
        http_level: Log level for HTTP request/response logging (default: same as level)
        git_level: Log level for git command logging (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from gitlab_mr.logging import configure_logging

        # Show every API call, keep git quiet
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    # Replace rather than stack handlers when called more than once
    for existing in list(_tool_logger.handlers):
        _tool_logger.removeHandler(existing)

    _tool_logger.setLevel(level)
    _tool_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)
    _git_logger.setLevel(git_level if git_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a gitlab-mr logger.

    Args:
        name: Logger name suffix (e.g., "http", "git"). If None, returns the main logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _tool_logger
    return logging.getLogger(f"gitlab_mr.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask sensitive data in a string.

    Args:
        text: Text that may contain tokens or credentials

    Returns:
        Text with sensitive data masked
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Set of keys to mask (default: authorization, private-token, token, ...)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = _DEFAULT_SENSITIVE_KEYS

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = key.lower()
        if key_lower in sensitive_keys or any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_http_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    body: dict[str, Any] | None = None,
) -> None:
    """Log an HTTP request at DEBUG level with sensitive data masked."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {url}"]

    if headers:
        log_parts.append(f"headers={safe_log_dict(headers)}")

    if body:
        log_parts.append(f"body={safe_log_dict(body)}")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    elapsed_ms: float | None = None,
) -> None:
    """Log an HTTP response at DEBUG level."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {url}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    _http_logger.debug(" | ".join(log_parts))


def log_git_command(cmd: list[str], returncode: int, stderr: str = "") -> None:
    """
    Log a finished git command at DEBUG level.

    Failed commands also log their (masked) stderr, since git may echo
    remote URLs that carry credentials.
    """
    if not _git_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{' '.join(cmd)}", f"exit={returncode}"]
    if returncode != 0 and stderr:
        log_parts.append(f"stderr={mask_sensitive_data(stderr.strip())}")

    _git_logger.debug(" | ".join(log_parts))


__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
    "log_git_command",
]
