# This file defines runtime settings for the API layer in one place.
# It exists so routing prefix, quota size, token lifetime, and body limits can be configured without code edits.
# The config loader reads environment variables and applies safe defaults for local development.
# Validators reject values that would make the quota or token store misbehave at startup.

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.access.word_quota import DEFAULT_DAILY_WORD_LIMIT


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "Text Justification API"
    api_prefix: str = "/api"
    schema_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 3000
    environment: str = "local"
    app_version: str = "0.1.0"
    enable_request_logging: bool = False
    allowed_origins: list[str] = Field(default_factory=list)
    daily_word_limit: int = DEFAULT_DAILY_WORD_LIMIT
    token_ttl_seconds: int = 0
    max_body_bytes: int = 1_048_576

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("api_prefix must start with '/'.")
        cleaned = value.rstrip("/")
        if not cleaned:
            raise ValueError("api_prefix must name at least one path segment, e.g. '/api'.")
        return cleaned

    @field_validator("daily_word_limit", "max_body_bytes", "port")
    @classmethod
    def validate_positive_ints(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be greater than 0.")
        return value

    @field_validator("token_ttl_seconds")
    @classmethod
    def validate_ttl(cls, value: int) -> int:
        if value < 0:
            raise ValueError("token_ttl_seconds must be 0 (no expiry) or positive.")
        return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be boolean-like, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    config_values: dict[str, object] = {
        "api_name": os.getenv("API_NAME", "Text Justification API"),
        "api_prefix": os.getenv("API_PREFIX", "/api"),
        "schema_version": os.getenv("API_SCHEMA_VERSION", "1.0.0"),
        "host": os.getenv("API_HOST", "0.0.0.0"),
        "port": _env_int("API_PORT", 3000),
        "environment": os.getenv("ENV", "local"),
        "app_version": os.getenv("APP_VERSION", "0.1.0"),
        "enable_request_logging": _env_bool("API_ENABLE_REQUEST_LOGGING", False),
        "allowed_origins": _env_list("API_ALLOWED_ORIGINS", []),
        "daily_word_limit": _env_int("API_DAILY_WORD_LIMIT", DEFAULT_DAILY_WORD_LIMIT),
        "token_ttl_seconds": _env_int("API_TOKEN_TTL_SECONDS", 0),
        "max_body_bytes": _env_int("API_MAX_BODY_BYTES", 1_048_576),
    }

    return ApiConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for API config."""

    return load_api_config()
