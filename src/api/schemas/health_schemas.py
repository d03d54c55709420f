# This file defines response schemas for health, readiness, and version endpoints.
# It exists to keep operational status contracts explicit for platform consumers.
# The models include request tracing and version metadata for observability.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    schema_version: str
    request_id: str
    status: str
    environment: str
    service_name: str
    timestamp: datetime


class ReadinessResponse(BaseModel):
    schema_version: str
    request_id: str
    ready: bool
    issued_token_count: int
    daily_word_limit: int
    line_width: int
    paragraph_separator: str
    timestamp: datetime


class VersionResponse(BaseModel):
    schema_version: str
    request_id: str
    api_prefix: str
    app_version: str
    git_commit: str | None = None
    project: str
    version: str
    timestamp: datetime
