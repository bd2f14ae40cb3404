"""Client for the Shoper REST API (``/webapi/rest``)."""

from __future__ import annotations

import time
from threading import Lock
from typing import Any, Callable, Dict, Optional

import orjson
import requests
from loguru import logger

from shoper_api.clients.base import AuthenticationError, BaseClient, ConfigurationError
from shoper_api.clients.results import (
    ApiError,
    AuthenticationFailure,
    DecodeError,
    EncodeError,
    TransportFailure,
)
from shoper_api.clients.token import SessionToken
from shoper_api.clients.transport import HttpResult, HttpTransport
from shoper_api.settings import Settings

REST_PATH = "/webapi/rest/"
AUTH_ENDPOINT = "auth"
SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE")
BODY_METHODS = ("POST", "PUT")


class ShoperClient(BaseClient):
    """Authenticates with client credentials and forwards calls to the shop API.

    The access token is fetched on construction and refreshed lazily whenever
    it is missing or expired. Resource calls never raise for HTTP-level
    problems; they return a :class:`~shoper_api.clients.results.CallFailure`
    value instead.
    """

    def __init__(
        self,
        shop_url: str,
        client_id: str,
        client_secret: str,
        *,
        timeout: float = 30.0,
        transport: Optional[HttpTransport] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not client_id or not client_secret:
            raise ConfigurationError("client_id and client_secret cannot be empty.")

        super().__init__("shoper")
        self._base_url = normalize_shop_url(shop_url)
        self._client_id = client_id
        self._client_secret = client_secret
        self._owns_transport = transport is None
        self._transport = transport or HttpTransport(timeout=timeout)
        self._clock = clock
        self._token: Optional[SessionToken] = None
        self._last_auth_failure: Optional[str] = None
        self._auth_lock = Lock()
        self._context["shop"] = self._base_url

        try:
            self.authenticate()
        except AuthenticationError:
            if self._owns_transport:
                self._transport.close()
            raise

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "ShoperClient":
        return cls(
            settings.shop_url,
            settings.client_id,
            settings.client_secret,
            timeout=settings.timeout,
            **kwargs,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def token(self) -> Optional[SessionToken]:
        return self._token

    @property
    def last_auth_failure(self) -> Optional[str]:
        return self._last_auth_failure

    # Authentication ---------------------------------------------------------------

    def authenticate(self) -> bool:
        """Make sure a valid access token is held, requesting one if needed.

        Returns False when the token endpoint answered but no usable token
        came back. Raises AuthenticationError if the request itself failed.
        """

        with self._auth_lock:
            if self._token_valid():
                return True
            return self._request_token()

    def _token_valid(self) -> bool:
        return self._token is not None and not self._token.is_expired(self._clock())

    def _request_token(self) -> bool:
        params = {"client_id": self._client_id, "client_secret": self._client_secret}
        try:
            result = self._transport.send(
                "POST",
                self._base_url + AUTH_ENDPOINT,
                headers=self._headers(include_token=False),
                params=params,
            )
        except requests.RequestException as exc:
            logger.exception("Exception during authentication", shop=self._base_url)
            raise AuthenticationError("Authentication failed") from exc

        if not result.is_success:
            return self._auth_failed(f"{result.status_line}: {result.body[:200]!r}")

        try:
            payload = orjson.loads(result.body)
        except orjson.JSONDecodeError:
            payload = None

        if not isinstance(payload, dict) or not payload.get("access_token"):
            return self._auth_failed(f"{result.status_line}: {result.body[:200]!r}")

        expires_in = payload.get("expires_in")
        if expires_in is not None:
            try:
                expires_in = float(expires_in)
            except (TypeError, ValueError):
                return self._auth_failed(f"invalid expires_in {expires_in!r}")

        self._token = SessionToken.issued(str(payload["access_token"]), expires_in, self._clock())
        self._last_auth_failure = None
        self._log("Obtained access token", expires_at=self._token.expires_at)
        return True

    def _auth_failed(self, reason: str) -> bool:
        logger.warning("Authentication failed. Response: {}", reason)
        self._last_auth_failure = reason
        return False

    def _headers(self, include_token: bool = True) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if include_token and self._token is not None:
            headers["Authorization"] = f"Bearer {self._token.access_token}"
        return headers

    # Resource calls ---------------------------------------------------------------

    def call(self, endpoint: str, method: str = "GET", body: Any = None) -> Any:
        """Call ``endpoint`` and return the decoded JSON payload or a failure value."""

        verb = method.upper()
        if verb not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        if not self.authenticate():
            return AuthenticationFailure(reason=self._last_auth_failure)

        data = None
        if verb in BODY_METHODS:
            try:
                data = orjson.dumps({} if body is None else body, option=orjson.OPT_NON_STR_KEYS)
            except orjson.JSONEncodeError as exc:
                logger.warning("Could not encode request body", endpoint=endpoint, method=verb)
                return EncodeError(message=str(exc))

        url = self._base_url + endpoint.lstrip("/")
        try:
            result = self._transport.send(verb, url, headers=self._headers(), data=data)
        except requests.RequestException as exc:
            logger.exception("Shoper request failed", endpoint=endpoint, method=verb)
            return TransportFailure(reason=str(exc))

        return self._handle_result(result, endpoint=endpoint, method=verb)

    def _handle_result(self, result: HttpResult, *, endpoint: str, method: str) -> Any:
        if not result.is_success:
            logger.warning("Shoper API returned {}", result.status_line, endpoint=endpoint, method=method)
            return ApiError(status_code=result.status_code, status_line=result.status_line)

        self._log("Shoper call completed", endpoint=endpoint, method=method, status=result.status_code)
        if not result.body.strip():
            return None
        try:
            return orjson.loads(result.body)
        except orjson.JSONDecodeError as exc:
            logger.warning("Could not decode Shoper response", endpoint=endpoint, method=method)
            return DecodeError(message=str(exc), body=result.body)

    def get(self, endpoint: str) -> Any:
        return self.call(endpoint, "GET")

    def post(self, endpoint: str, body: Any = None) -> Any:
        return self.call(endpoint, "POST", body)

    def put(self, endpoint: str, body: Any = None) -> Any:
        return self.call(endpoint, "PUT", body)

    def delete(self, endpoint: str) -> Any:
        return self.call(endpoint, "DELETE")

    # Lifecycle --------------------------------------------------------------------

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "ShoperClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def normalize_shop_url(shop_url: str) -> str:
    """Return the REST base for a shop URL, e.g. ``https://shop.pl/webapi/rest/``."""

    return shop_url.rstrip("/") + REST_PATH
