"""
Tests for the HTTP transport.
"""

from unittest.mock import MagicMock, patch

import httpx
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from gitlab_mr.exceptions import (
    AuthenticationError,
    RateLimitedError,
    ServerError,
    ValidationError,
)
from gitlab_mr.transport import HTTPTransport


def make_transport() -> HTTPTransport:
    return HTTPTransport(base_url="https://gitlab.example.com/", access_token="glpat-secret")


def make_response(
    status_code: int = 200,
    json_data: object = None,
    headers: dict[str, str] | None = None,
    content: bytes = b"{}",
) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = json_data
    response.headers = headers or {}
    response.content = content
    response.text = content.decode()
    return response


def test_bearer_authentication_header() -> None:
    transport = make_transport()

    assert transport._client.headers["Authorization"] == "Bearer glpat-secret"
    assert transport.api_url == "https://gitlab.example.com/api/v4"


def test_request_passes_params_and_body() -> None:
    transport = make_transport()
    response = make_response(json_data={"id": 1})

    with patch.object(transport._client, "request", return_value=response) as mock_request:
        result = transport.request("PUT", "/projects/1/merge_requests/2", body={"title": "x"})

    assert result == {"id": 1}
    mock_request.assert_called_once_with(
        "PUT", "/projects/1/merge_requests/2", params=None, json={"title": "x"}
    )


def test_empty_response_returns_none() -> None:
    transport = make_transport()

    with patch.object(transport._client, "request", return_value=make_response(204, content=b"")):
        assert transport.request("DELETE", "/x") is None


def test_invalid_json_is_a_server_error() -> None:
    transport = make_transport()
    response = make_response(content=b"<html>")
    response.json.side_effect = ValueError("no json")

    with patch.object(transport._client, "request", return_value=response):
        with pytest.raises(ServerError) as exc_info:
            transport.request("GET", "/user")

    assert exc_info.value.code == "INVALID_RESPONSE"


def test_connection_failure_is_a_server_error() -> None:
    transport = make_transport()

    with patch.object(transport._client, "request", side_effect=httpx.ConnectError("refused")):
        with pytest.raises(ServerError) as exc_info:
            transport.request("GET", "/user")

    assert exc_info.value.code == "CONNECTION_ERROR"


@pytest.mark.parametrize("status_code", [429, 500, 502, 503])
def test_failed_requests_are_not_retried(status_code: int) -> None:
    transport = make_transport()
    response = make_response(status_code, json_data={"message": "try later"})

    with patch.object(transport._client, "request", return_value=response) as mock_request:
        with pytest.raises(Exception):
            transport.request("GET", "/user")

    assert mock_request.call_count == 1


def test_error_response_parsing() -> None:
    """Error responses are parsed into the matching exception types."""
    transport = make_transport()

    test_cases = [
        (401, "AuthenticationError"),
        (403, "AuthorizationError"),
        (404, "NotFoundError"),
        (409, "ConflictError"),
        (429, "RateLimitedError"),
        (500, "ServerError"),
        (400, "ValidationError"),
    ]

    for status_code, expected_type in test_cases:
        response = make_response(
            status_code,
            json_data={"message": "Test message"},
            headers={"Retry-After": "60", "X-Request-Id": "req-123"},
        )

        error = transport._parse_error_response(response)

        assert type(error).__name__ == expected_type, (
            f"Expected {expected_type} for status {status_code}, got {type(error).__name__}"
        )
        assert error.code == f"HTTP_{status_code}"
        assert error.message == "Test message"
        assert error.request_id == "req-123"


def test_field_errors_are_flattened() -> None:
    transport = make_transport()
    response = make_response(400, json_data={"message": {"title": ["can't be blank"], "base": "bad"}})

    error = transport._parse_error_response(response)

    assert isinstance(error, ValidationError)
    assert error.message == "title: can't be blank; base: bad"


def test_oauth_style_error() -> None:
    transport = make_transport()
    response = make_response(
        401, json_data={"error": "invalid_token", "error_description": "Token was revoked"}
    )

    error = transport._parse_error_response(response)

    assert isinstance(error, AuthenticationError)
    assert error.message == "Token was revoked"


def test_non_json_error_body() -> None:
    transport = make_transport()
    response = make_response(502, content=b"Bad Gateway")
    response.json.side_effect = ValueError("no json")

    error = transport._parse_error_response(response)

    assert isinstance(error, ServerError)
    assert error.message == "HTTP 502"


def test_invalid_retry_after_defaults() -> None:
    transport = make_transport()
    response = make_response(429, json_data={"message": "slow down"}, headers={"Retry-After": "soon"})

    error = transport._parse_error_response(response)

    assert isinstance(error, RateLimitedError)
    assert error.retry_after == 60


STATUS_CODE_TO_EXCEPTION = {
    401: "AuthenticationError",
    403: "AuthorizationError",
    404: "NotFoundError",
    409: "ConflictError",
    429: "RateLimitedError",
    500: "ServerError",
    502: "ServerError",
    503: "ServerError",
    400: "ValidationError",
    422: "ValidationError",
}


@given(
    status_code=st.sampled_from(list(STATUS_CODE_TO_EXCEPTION)),
    error_message=st.text(min_size=1, max_size=200),
    request_id=st.text(min_size=1, max_size=50, alphabet=st.characters(
        whitelist_categories=("Lu", "Ll", "Nd"),
        whitelist_characters="-"
    )),
    retry_after=st.integers(min_value=1, max_value=3600),
)
@settings(max_examples=100)
def test_property_error_response_parsing(
    status_code: int,
    error_message: str,
    request_id: str,
    retry_after: int,
) -> None:
    """
    Any error response becomes a typed exception carrying the status code,
    the message and the request id; rate limits also carry retry_after.
    """
    transport = make_transport()
    response = make_response(
        status_code,
        json_data={"message": error_message},
        headers={"Retry-After": str(retry_after), "X-Request-Id": request_id},
    )

    error = transport._parse_error_response(response)

    assert type(error).__name__ == STATUS_CODE_TO_EXCEPTION[status_code]
    assert error.code == f"HTTP_{status_code}"
    assert error.message == error_message
    assert error.request_id == request_id

    if status_code == 429:
        assert isinstance(error, RateLimitedError)
        assert error.retry_after == retry_after
