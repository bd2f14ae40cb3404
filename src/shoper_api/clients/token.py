"""Access token bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SessionToken:
    """Bearer token plus its absolute expiry (epoch seconds).

    ``expires_at`` of ``None`` means the server did not say, and the token is
    treated as never expiring.
    """

    access_token: str
    expires_at: Optional[float] = None

    @classmethod
    def issued(cls, access_token: str, expires_in: Optional[float], now: float) -> "SessionToken":
        expires_at = None if expires_in is None else now + expires_in
        return cls(access_token=access_token, expires_at=expires_at)

    def is_expired(self, now: float) -> bool:
        return self.expires_at is not None and self.expires_at <= now
