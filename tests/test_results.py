"""Failure value tests."""

import pytest

from shoper_api.clients.results import (
    ApiError,
    AuthenticationFailure,
    CallFailure,
    DecodeError,
    EncodeError,
    TransportFailure,
    is_failure,
)


@pytest.mark.parametrize(
    "failure",
    [
        AuthenticationFailure(),
        ApiError(status_code=500, status_line="HTTP/1.1 500 Internal Server Error"),
        DecodeError(message="unexpected character"),
        EncodeError(message="Type is not JSON serializable: set"),
        TransportFailure(reason="connection refused"),
    ],
)
def test_failures_are_tagged(failure: CallFailure) -> None:
    assert is_failure(failure)
    assert failure.ok is False


@pytest.mark.parametrize("payload", [None, {}, [], 0, "", {"error": "looks like one"}])
def test_payloads_are_not_failures(payload: object) -> None:
    assert not is_failure(payload)


def test_api_error_message_embeds_status_line() -> None:
    error = ApiError(status_code=403, status_line="HTTP/1.1 403 Forbidden")

    assert str(error) == "Error: HTTP/1.1 403 Forbidden"
