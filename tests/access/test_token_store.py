# This test file validates bearer token issuance and expiry.
# It exists to ensure tokens are unique, resolvable, and dropped once their TTL passes.

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from src.access.token_store import TokenStore


class FakeClock:
    def __init__(self) -> None:
        self.now = datetime(2025, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now


def test_issue_and_resolve_token() -> None:
    store = TokenStore()
    issued = store.issue("  user@example.com ")

    resolved = store.resolve(issued.token)
    assert resolved is not None
    assert resolved.email == "user@example.com"
    assert resolved.expires_at is None
    assert issued.token in store
    assert len(store) == 1


def test_tokens_are_unique_per_issue() -> None:
    store = TokenStore()
    tokens = {store.issue("same@example.com").token for _ in range(5)}
    assert len(tokens) == 5


def test_unknown_token_does_not_resolve() -> None:
    store = TokenStore()
    assert store.resolve("nope") is None
    assert "nope" not in store


def test_blank_email_is_rejected() -> None:
    with pytest.raises(ValueError, match="Email is required"):
        TokenStore().issue("   ")


def test_token_expires_after_ttl() -> None:
    clock = FakeClock()
    store = TokenStore(ttl_seconds=60, clock=clock)
    issued = store.issue("ttl@example.com")
    assert issued.expires_at == clock.now + timedelta(seconds=60)

    clock.now += timedelta(seconds=59)
    assert store.resolve(issued.token) is not None

    clock.now += timedelta(seconds=1)
    assert store.resolve(issued.token) is None
    assert len(store) == 0


def test_register_and_clear() -> None:
    store = TokenStore()
    store.register("fixed-token", "fixed@example.com")
    assert "fixed-token" in store
    store.clear()
    assert len(store) == 0
