"""
Unit tests for Authorization header parsing.
It asserts expected behavior and guards against regressions in the corresponding component.
"""

from __future__ import annotations

import pytest

from src.access.bearer import (
    BAD_FORMAT_MESSAGE,
    EMPTY_TOKEN_MESSAGE,
    MISSING_HEADER_MESSAGE,
    UNSUPPORTED_SCHEME_MESSAGE,
    CredentialError,
    parse_authorization_header,
)


def test_valid_bearer_header_returns_token() -> None:
    assert parse_authorization_header("Bearer abc-123") == "abc-123"
    assert parse_authorization_header("  Bearer   abc-123  ") == "abc-123"


@pytest.mark.parametrize(
    ("header", "message"),
    [
        (None, MISSING_HEADER_MESSAGE),
        ("", MISSING_HEADER_MESSAGE),
        ("Bearer", BAD_FORMAT_MESSAGE),
        ("Bearer   ", EMPTY_TOKEN_MESSAGE),
        ("Bearer a b", BAD_FORMAT_MESSAGE),
        ("abc-123", BAD_FORMAT_MESSAGE),
        ("Basic abc-123", UNSUPPORTED_SCHEME_MESSAGE),
        ("bearer abc-123", UNSUPPORTED_SCHEME_MESSAGE),
    ],
)
def test_invalid_headers_raise_credential_error(header: str | None, message: str) -> None:
    with pytest.raises(CredentialError) as excinfo:
        parse_authorization_header(header)
    assert str(excinfo.value) == message
