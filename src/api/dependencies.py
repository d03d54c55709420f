# This file provides dependency factories for FastAPI routes and middleware.
# It exists so the token store and quota limiter are created once and shared through dependency injection.
# The setup keeps routers thin and makes endpoint tests easy to override.
# Request-level helpers here also resolve the caller identity and the plain-text request body.

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header, Request

from src.access.token_store import IssuedToken, TokenStore
from src.access.word_quota import WordQuotaLimiter
from src.api.api_config import ApiConfig, get_api_config
from src.api.error_handlers import APIError
from src.api.services.justify_service import JustifyService
from src.justification.justify_config import JustifyConfig, load_justify_config

PLAIN_TEXT_MEDIA_TYPE = "text/plain"


@lru_cache(maxsize=1)
def get_token_store() -> TokenStore:
    config = get_api_config()
    return TokenStore(ttl_seconds=config.token_ttl_seconds)


@lru_cache(maxsize=1)
def get_quota_limiter() -> WordQuotaLimiter:
    config = get_api_config()
    return WordQuotaLimiter(daily_limit=config.daily_word_limit)


@lru_cache(maxsize=1)
def get_justify_config() -> JustifyConfig:
    return load_justify_config()


def get_config() -> ApiConfig:
    return get_api_config()


def get_justify_service(
    config: Annotated[ApiConfig, Depends(get_config)],
    justify_config: Annotated[JustifyConfig, Depends(get_justify_config)],
    token_store: Annotated[TokenStore, Depends(get_token_store)],
    quota: Annotated[WordQuotaLimiter, Depends(get_quota_limiter)],
) -> JustifyService:
    return JustifyService(
        config=config,
        justify_config=justify_config,
        token_store=token_store,
        quota=quota,
    )


def get_identity(
    service: Annotated[JustifyService, Depends(get_justify_service)],
    authorization: Annotated[str | None, Header()] = None,
) -> IssuedToken:
    return service.authenticate(authorization)


async def read_plain_text_body(
    request: Request,
    config: Annotated[ApiConfig, Depends(get_config)],
) -> str:
    """Return the request body decoded as UTF-8 text/plain."""

    raw = await request.body()
    if not raw:
        return ""

    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type != PLAIN_TEXT_MEDIA_TYPE:
        raise APIError(
            status_code=415,
            error_code="UNSUPPORTED_MEDIA_TYPE",
            message=f"Content-Type must be {PLAIN_TEXT_MEDIA_TYPE}",
            details={"content_type": media_type or None},
        )
    if len(raw) > config.max_body_bytes:
        raise APIError(
            status_code=413,
            error_code="PAYLOAD_TOO_LARGE",
            message=f"Request body exceeds {config.max_body_bytes} bytes",
        )
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise APIError(
            status_code=400,
            error_code="INVALID_ENCODING",
            message="Request body must be UTF-8 encoded text",
        ) from exc
