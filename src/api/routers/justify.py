# This file defines the text justification endpoint.
# It exists to expose the justifier over HTTP behind bearer auth and the daily word quota.
# Dependencies run in declaration order: identity first, then the plain-text body.
# The response body is the justified text itself, returned as text/plain without an envelope.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from src.access.token_store import IssuedToken
from src.api.dependencies import get_identity, get_justify_service, read_plain_text_body
from src.api.schemas.common import ErrorResponse
from src.api.services.justify_service import JustifyService

router = APIRouter(tags=["justify"])
IdentityDep = Annotated[IssuedToken, Depends(get_identity)]
BodyDep = Annotated[str, Depends(read_plain_text_body)]
JustifyServiceDep = Annotated[JustifyService, Depends(get_justify_service)]

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    status: {"model": ErrorResponse} for status in (400, 401, 402, 413, 415)
}


@router.post(
    "/justify",
    response_class=PlainTextResponse,
    responses=_ERROR_RESPONSES,
)
def justify(
    identity: IdentityDep,
    text: BodyDep,
    service: JustifyServiceDep,
) -> PlainTextResponse:
    justified = service.justify(identity=identity, text=text)
    return PlainTextResponse(content=justified)
