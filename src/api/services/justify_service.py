# This file implements the service behind the token and justify endpoints.
# It exists so route handlers can focus on HTTP concerns while auth and quota rules stay centralized.
# The service authenticates bearer headers, charges the daily word quota, and runs the justifier.
# Failures surface as APIError so the global handlers render one consistent error shape.

from __future__ import annotations

import logging

from prometheus_client import Counter

from src.access.bearer import INVALID_TOKEN_MESSAGE, CredentialError, parse_authorization_header
from src.access.token_store import IssuedToken, TokenStore
from src.access.word_quota import WordQuotaLimiter, count_words
from src.api.api_config import ApiConfig
from src.api.error_handlers import APIError
from src.justification.justifier import justify_text
from src.justification.justify_config import JustifyConfig

logger = logging.getLogger(__name__)

JUSTIFY_WORDS_TOTAL = Counter(
    "justify_words_total",
    "Total number of words accepted for justification.",
)
QUOTA_DENIALS_TOTAL = Counter(
    "quota_denials_total",
    "Number of justify requests rejected by the daily word quota.",
)
TOKENS_ISSUED_TOTAL = Counter(
    "tokens_issued_total",
    "Number of bearer tokens issued.",
)


def _format_word_limit(limit: int) -> str:
    return f"{limit:,}"


class JustifyService:
    """Token issuance, authentication, quota, and justification for API routes."""

    def __init__(
        self,
        *,
        config: ApiConfig,
        justify_config: JustifyConfig,
        token_store: TokenStore,
        quota: WordQuotaLimiter,
    ) -> None:
        self.config = config
        self.justify_config = justify_config
        self.token_store = token_store
        self.quota = quota

    def issue_token(self, email: str) -> IssuedToken:
        try:
            issued = self.token_store.issue(email)
        except ValueError as exc:
            raise APIError(status_code=400, error_code="INVALID_EMAIL", message=str(exc)) from exc
        TOKENS_ISSUED_TOTAL.inc()
        return issued

    def authenticate(self, authorization: str | None) -> IssuedToken:
        try:
            token = parse_authorization_header(authorization)
        except CredentialError as exc:
            raise APIError(
                status_code=401,
                error_code="UNAUTHORIZED",
                message=str(exc),
                headers={"WWW-Authenticate": "Bearer"},
            ) from exc

        issued = self.token_store.resolve(token)
        if issued is None:
            raise APIError(
                status_code=401,
                error_code="UNAUTHORIZED",
                message=INVALID_TOKEN_MESSAGE,
                headers={"WWW-Authenticate": "Bearer"},
            )
        return issued

    def justify(self, *, identity: IssuedToken, text: str) -> str:
        if not text.strip():
            raise APIError(
                status_code=400,
                error_code="EMPTY_BODY",
                message="Request body must contain text to justify",
            )

        words = count_words(text)
        decision = self.quota.consume(identity.token, words)
        if not decision.allowed:
            QUOTA_DENIALS_TOTAL.inc()
            raise APIError(
                status_code=402,
                error_code="QUOTA_EXCEEDED",
                message=f"Daily limit of {_format_word_limit(decision.daily_limit)} words exceeded",
                details={
                    "requested_words": decision.requested_words,
                    "used_words": decision.used_words,
                    "daily_limit": decision.daily_limit,
                },
            )

        JUSTIFY_WORDS_TOTAL.inc(words)
        logger.debug(
            "Justifying %s words for %s (%s remaining today)",
            words,
            identity.email,
            decision.remaining_words,
        )
        return justify_text(
            text,
            width=self.justify_config.line_width,
            paragraph_separator=self.justify_config.separator_text(),
        )
