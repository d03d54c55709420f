# This file defines the bearer token issuance endpoint.
# It exists so clients can trade an email address for a credential accepted by /justify.
# Every call issues a fresh token; earlier tokens for the same email remain valid.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_justify_service
from src.api.schemas.common import ErrorResponse
from src.api.schemas.token_schemas import TokenRequest, TokenResponse
from src.api.services.justify_service import JustifyService

router = APIRouter(tags=["auth"])
JustifyServiceDep = Annotated[JustifyService, Depends(get_justify_service)]


@router.post(
    "/token",
    response_model=TokenResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def issue_token(payload: TokenRequest, service: JustifyServiceDep) -> dict[str, str]:
    issued = service.issue_token(payload.email)
    return {"token": issued.token}
