"""
HTTP Transport for gitlab-mr.

Handles authenticated HTTP communication with the GitLab REST API and maps
error responses onto typed exceptions. Failed requests are not retried.
"""

import time
from typing import Any

import httpx

from gitlab_mr.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    GitlabMrError,
    NotFoundError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from gitlab_mr.logging import log_http_request, log_http_response

API_PREFIX = "/api/v4"


class HTTPTransport:
    """
    HTTP transport layer with bearer authentication.

    Handles:
    - Bearer token authentication on every request
    - JSON request/response bodies
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str,
        access_token: str,
        timeout: float = 30.0,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: GitLab instance URL (e.g., "https://gitlab.com")
            access_token: Personal or project access token
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.api_url = self.base_url + API_PREFIX
        self.timeout = timeout

        self._client = httpx.Client(
            base_url=self.api_url,
            timeout=timeout,
            headers={
                "Authorization": f"Bearer {access_token}",
                "Content-Type": "application/json",
            },
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make an API request.

        Args:
            method: HTTP method (GET, POST, PUT, ...)
            path: API path below /api/v4 (e.g., "/user")
            params: Query parameters
            body: JSON request body (for POST/PUT)

        Returns:
            Decoded JSON response (object or list)

        Raises:
            GitlabMrError: On API or connection errors
        """
        log_http_request(method, self.api_url + path, body=body)
        started = time.monotonic()

        try:
            response = self._client.request(method, path, params=params, json=body)
        except httpx.RequestError as e:
            raise ServerError("CONNECTION_ERROR", str(e)) from e

        log_http_response(
            response.status_code,
            self.api_url + path,
            elapsed_ms=(time.monotonic() - started) * 1000,
        )

        if response.status_code >= 400:
            raise self._parse_error_response(response)

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ServerError(
                "INVALID_RESPONSE",
                f"Expected JSON from {path}, got: {response.text[:200]}",
            ) from e

    def _parse_error_response(self, response: httpx.Response) -> GitlabMrError:
        """
        Parse an error response into a typed exception.

        GitLab reports errors as ``{"message": ...}`` (string, list or field
        map) or as OAuth-style ``{"error": ..., "error_description": ...}``.
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status_code = response.status_code
        raw_message = data.get("message") or data.get("error_description") or data.get("error")
        message = _format_message(raw_message) or f"HTTP {status_code}"
        code = f"HTTP_{status_code}"
        request_id = response.headers.get("X-Request-Id")

        if status_code == 401:
            return AuthenticationError(code, message, request_id)
        elif status_code == 403:
            return AuthorizationError(code, message, request_id)
        elif status_code == 404:
            return NotFoundError(code, message, request_id)
        elif status_code == 409:
            return ConflictError(code, message, request_id)
        elif status_code == 429:
            retry_after_str = response.headers.get("Retry-After", "60")
            try:
                retry_after = int(retry_after_str)
            except ValueError:
                retry_after = 60
            return RateLimitedError(code, message, retry_after, request_id)
        elif status_code >= 500:
            return ServerError(code, message, request_id)
        else:
            return ValidationError(code, message, request_id)


def _format_message(raw: Any) -> str:
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, list):
        return "; ".join(_format_message(item) for item in raw)
    if isinstance(raw, dict):
        return "; ".join(f"{key}: {_format_message(value)}" for key, value in raw.items())
    return str(raw)
