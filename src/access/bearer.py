"""
Parsing for `Authorization: Bearer <token>` headers.
Messages here are surfaced verbatim to API clients on 401 responses.
"""

from __future__ import annotations

from typing import Final

BEARER_SCHEME: Final[str] = "Bearer"

MISSING_HEADER_MESSAGE: Final[str] = "Please provide an Authorization header with a valid token"
BAD_FORMAT_MESSAGE: Final[str] = "Authorization header must be in format: Bearer <token>"
EMPTY_TOKEN_MESSAGE: Final[str] = "Token cannot be empty"
UNSUPPORTED_SCHEME_MESSAGE: Final[str] = "Only Bearer token authentication is supported"
INVALID_TOKEN_MESSAGE: Final[str] = "The provided token is not valid. Please request a new token."


class CredentialError(ValueError):
    """Raised when an Authorization header cannot yield a usable token."""


def parse_authorization_header(value: str | None) -> str:
    """Return the bearer token carried by `value`."""

    if value is None or value.strip() == "":
        raise CredentialError(MISSING_HEADER_MESSAGE)

    parts = value.strip().split()
    if len(parts) == 1 and parts[0] == BEARER_SCHEME:
        # "Bearer" alone is a format error; "Bearer   " lost its token to trimming.
        raise CredentialError(BAD_FORMAT_MESSAGE if value == BEARER_SCHEME else EMPTY_TOKEN_MESSAGE)
    if len(parts) != 2:
        raise CredentialError(BAD_FORMAT_MESSAGE)

    scheme, token = parts
    if scheme != BEARER_SCHEME:
        raise CredentialError(UNSUPPORTED_SCHEME_MESSAGE)
    return token
