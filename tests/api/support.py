# This file provides shared helpers for API endpoint tests.
# It exists so tests get a fresh token store and quota limiter instead of process-wide singletons.
# The helpers build consistent config objects and scoped TestClient contexts.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from fastapi.testclient import TestClient

from src.access.token_store import TokenStore
from src.access.word_quota import WordQuotaLimiter
from src.api.api_config import ApiConfig
from src.api.app import app
from src.api.dependencies import (
    get_config,
    get_justify_config,
    get_quota_limiter,
    get_token_store,
)
from src.justification.justify_config import JustifyConfig

TEST_TOKEN = "test-token-123"
TEST_EMAIL = "test@example.com"


def build_test_config(*, daily_word_limit: int = 80_000, max_body_bytes: int = 1_048_576) -> ApiConfig:
    """Create deterministic API config for tests."""

    return ApiConfig(
        api_name="Test Justify API",
        api_prefix="/api",
        schema_version="1.0.0",
        host="0.0.0.0",
        port=3000,
        environment="test",
        app_version="0.1.0",
        enable_request_logging=False,
        allowed_origins=[],
        daily_word_limit=daily_word_limit,
        token_ttl_seconds=0,
        max_body_bytes=max_body_bytes,
    )


@dataclass
class ApiHarness:
    client: TestClient
    config: ApiConfig
    token_store: TokenStore
    quota: WordQuotaLimiter

    def auth_headers(self, token: str = TEST_TOKEN) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}", "Content-Type": "text/plain"}


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    justify_config: JustifyConfig | None = None,
    token_store: TokenStore | None = None,
    quota: WordQuotaLimiter | None = None,
    seed_token: bool = True,
) -> Iterator[ApiHarness]:
    """Yield a TestClient with scoped dependency overrides."""

    resolved_config = config if config is not None else build_test_config()
    resolved_justify_config = justify_config if justify_config is not None else JustifyConfig()
    resolved_store = token_store if token_store is not None else TokenStore()
    resolved_quota = (
        quota if quota is not None else WordQuotaLimiter(daily_limit=resolved_config.daily_word_limit)
    )
    if seed_token:
        resolved_store.register(TEST_TOKEN, TEST_EMAIL)

    app.dependency_overrides[get_config] = lambda: resolved_config
    app.dependency_overrides[get_justify_config] = lambda: resolved_justify_config
    app.dependency_overrides[get_token_store] = lambda: resolved_store
    app.dependency_overrides[get_quota_limiter] = lambda: resolved_quota

    try:
        with TestClient(app) as client:
            yield ApiHarness(
                client=client,
                config=resolved_config,
                token_store=resolved_store,
                quota=resolved_quota,
            )
    finally:
        app.dependency_overrides.clear()
