"""Failure values returned (not raised) by resource calls.

A successful call returns the decoded JSON payload as-is, so ``None`` remains a
legitimate payload. Anything that went wrong is reported as one of the frozen
dataclasses below; callers branch with ``isinstance(result, CallFailure)`` or
:func:`is_failure`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional


@dataclass(frozen=True)
class CallFailure:
    """Base class for every failure value produced by a client call."""

    ok: ClassVar[bool] = False


@dataclass(frozen=True)
class AuthenticationFailure(CallFailure):
    """No access token could be obtained before the call."""

    reason: Optional[str] = None

    def __str__(self) -> str:
        return "Authentication failed"


@dataclass(frozen=True)
class ApiError(CallFailure):
    """The API answered with a non-2xx status."""

    status_code: int
    status_line: str

    def __str__(self) -> str:
        return f"Error: {self.status_line}"


@dataclass(frozen=True)
class DecodeError(CallFailure):
    """The API answered 2xx but the body was not valid JSON."""

    message: str
    body: bytes = b""

    def __str__(self) -> str:
        return f"Invalid JSON response: {self.message}"


@dataclass(frozen=True)
class EncodeError(CallFailure):
    """The request body could not be serialised to JSON."""

    message: str

    def __str__(self) -> str:
        return f"Invalid request body: {self.message}"


@dataclass(frozen=True)
class TransportFailure(CallFailure):
    """The request never produced an HTTP response."""

    reason: str

    def __str__(self) -> str:
        return f"Request failed: {self.reason}"


def is_failure(value: Any) -> bool:
    """Return True if ``value`` is a failure produced by a client call."""

    return isinstance(value, CallFailure)
