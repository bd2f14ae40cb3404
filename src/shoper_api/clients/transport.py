"""Thin HTTP transport over a ``requests`` session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

import requests

_PROTOCOLS = {9: "HTTP/0.9", 10: "HTTP/1.0", 11: "HTTP/1.1", 20: "HTTP/2"}


@dataclass(frozen=True)
class HttpResult:
    """Status and body of a single HTTP exchange."""

    status_code: int
    status_line: str
    body: bytes = b""

    @property
    def is_success(self) -> bool:
        return str(self.status_code).startswith("2")


class HttpTransport:
    """Sends requests and hands back an :class:`HttpResult`.

    Non-2xx responses are returned, not raised; only connection-level problems
    surface as ``requests.RequestException``.
    """

    def __init__(self, timeout: float = 30.0, session: Optional[requests.Session] = None) -> None:
        self.timeout = timeout
        self._session = session or requests.Session()

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        params: Optional[Mapping[str, Any]] = None,
        data: Optional[bytes] = None,
    ) -> HttpResult:
        response = self._session.request(
            method,
            url,
            headers=dict(headers),
            params=params,
            data=data,
            timeout=self.timeout,
        )
        return HttpResult(
            status_code=response.status_code,
            status_line=_status_line(response),
            body=response.content or b"",
        )

    def close(self) -> None:
        self._session.close()


def _status_line(response: requests.Response) -> str:
    version = getattr(response.raw, "version", None)
    prefix = _PROTOCOLS.get(version, "HTTP/1.1") if isinstance(version, int) else "HTTP/1.1"
    reason = response.reason or ""
    return f"{prefix} {response.status_code} {reason}".rstrip()
