# This module issues opaque bearer tokens and resolves them back to the requesting email.
# It exists so authentication stays a lookup against tokens this process handed out.
# Tokens are random UUID4 strings held in memory; an optional TTL expires old ones.
# A lock guards the mapping because API handlers run on a shared threadpool.

from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(frozen=True)
class IssuedToken:
    token: str
    email: str
    issued_at: datetime
    expires_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and now >= self.expires_at


class TokenStore:
    """In-memory registry of issued bearer tokens."""

    def __init__(
        self,
        *,
        ttl_seconds: int = 0,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        if ttl_seconds < 0:
            raise ValueError("ttl_seconds must be nonnegative.")
        self._ttl = timedelta(seconds=ttl_seconds) if ttl_seconds else None
        self._clock = clock
        self._tokens: dict[str, IssuedToken] = {}
        self._lock = threading.Lock()

    def issue(self, email: str) -> IssuedToken:
        cleaned = email.strip()
        if not cleaned:
            raise ValueError("Email is required")

        now = self._clock()
        issued = IssuedToken(
            token=str(uuid.uuid4()),
            email=cleaned,
            issued_at=now,
            expires_at=now + self._ttl if self._ttl is not None else None,
        )
        with self._lock:
            self._tokens[issued.token] = issued
        logger.info("Issued token for %s (expires_at=%s)", cleaned, issued.expires_at)
        return issued

    def resolve(self, token: str) -> IssuedToken | None:
        """Return the issued token record, or None when unknown or expired."""

        with self._lock:
            issued = self._tokens.get(token)
            if issued is None:
                return None
            if issued.is_expired(self._clock()):
                del self._tokens[token]
                return None
            return issued

    def register(self, token: str, email: str) -> IssuedToken:
        """Store a caller-chosen token, used by fixtures and admin seeding."""

        issued = IssuedToken(token=token, email=email, issued_at=self._clock())
        with self._lock:
            self._tokens[token] = issued
        return issued

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.resolve(token) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)

    def clear(self) -> None:
        with self._lock:
            self._tokens.clear()
