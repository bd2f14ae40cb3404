"""Client adapters for the Shoper REST API."""

from shoper_api.clients.base import APIClientError, AuthenticationError, ConfigurationError
from shoper_api.clients.results import (
    ApiError,
    AuthenticationFailure,
    CallFailure,
    DecodeError,
    EncodeError,
    TransportFailure,
    is_failure,
)
from shoper_api.clients.shoper_client import ShoperClient
from shoper_api.clients.token import SessionToken
from shoper_api.clients.transport import HttpResult, HttpTransport

__all__ = [
    "ShoperClient",
    "SessionToken",
    "HttpResult",
    "HttpTransport",
    "APIClientError",
    "AuthenticationError",
    "ConfigurationError",
    "CallFailure",
    "ApiError",
    "AuthenticationFailure",
    "DecodeError",
    "EncodeError",
    "TransportFailure",
    "is_failure",
]
