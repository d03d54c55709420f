# This file defines liveness, readiness, and version endpoints for API operations.
# It exists so orchestration and monitoring systems can verify service health quickly.
# The readiness check confirms the justification policy loaded and reports quota settings.
# Version details here help clients track API and schema compatibility over time.

from __future__ import annotations

import subprocess
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.access.token_store import TokenStore
from src.access.word_quota import WordQuotaLimiter
from src.api.api_config import ApiConfig
from src.api.dependencies import get_config, get_justify_config, get_quota_limiter, get_token_store
from src.api.schemas.health_schemas import HealthResponse, ReadinessResponse, VersionResponse
from src.justification.justify_config import JustifyConfig

router = APIRouter(tags=["health"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]
JustifyConfigDep = Annotated[JustifyConfig, Depends(get_justify_config)]
TokenStoreDep = Annotated[TokenStore, Depends(get_token_store)]
QuotaDep = Annotated[WordQuotaLimiter, Depends(get_quota_limiter)]


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def _git_commit() -> str | None:
    try:
        completed = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            check=True,
            capture_output=True,
            text=True,
        )
        value = completed.stdout.strip()
        return value or None
    except (OSError, subprocess.CalledProcessError):
        return None


@router.get("/health", response_model=HealthResponse)
def health(
    request: Request,
    config: ConfigDep,
) -> dict[str, object]:
    return {
        "schema_version": config.schema_version,
        "request_id": request.state.request_id,
        "status": "ok",
        "environment": config.environment,
        "service_name": config.api_name,
        "timestamp": _utc_now(),
    }


@router.get("/ready", response_model=ReadinessResponse)
def ready(
    request: Request,
    config: ConfigDep,
    justify_config: JustifyConfigDep,
    token_store: TokenStoreDep,
    quota: QuotaDep,
) -> dict[str, object]:
    return {
        "schema_version": config.schema_version,
        "request_id": request.state.request_id,
        "ready": True,
        "issued_token_count": len(token_store),
        "daily_word_limit": quota.daily_limit,
        "line_width": justify_config.line_width,
        "paragraph_separator": justify_config.paragraph_separator,
        "timestamp": _utc_now(),
    }


@router.get("/version", response_model=VersionResponse)
def version(
    request: Request,
    config: ConfigDep,
) -> dict[str, object]:
    return {
        "schema_version": config.schema_version,
        "request_id": request.state.request_id,
        "api_prefix": config.api_prefix,
        "app_version": config.app_version,
        "git_commit": _git_commit(),
        "project": config.api_name,
        "version": config.app_version,
        "timestamp": _utc_now(),
    }
