# This file defines request and response schemas for bearer token issuance.
# It exists so the token contract is validated by Pydantic before the service runs.

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class TokenRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: StrictStr = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("Email is required")
        return cleaned


class TokenResponse(BaseModel):
    token: str
