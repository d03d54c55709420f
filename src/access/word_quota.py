# This module enforces a per-token daily word budget for justification requests.
# It exists to cap how much text one credential can push through the service each day.
# Usage is keyed by token and resets whenever the UTC calendar date changes.
# A denied request leaves the stored usage untouched so clients can retry smaller payloads.

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Final

logger = logging.getLogger(__name__)

DEFAULT_DAILY_WORD_LIMIT: Final[int] = 80_000


def _utc_today() -> date:
    return datetime.now(tz=UTC).date()


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens in the raw request text."""

    return len(text.split())


@dataclass
class WordUsage:
    words: int
    usage_date: date


@dataclass(frozen=True)
class QuotaDecision:
    allowed: bool
    requested_words: int
    used_words: int
    daily_limit: int

    @property
    def remaining_words(self) -> int:
        return max(self.daily_limit - self.used_words, 0)


class WordQuotaLimiter:
    """In-memory daily word counter keyed by bearer token."""

    def __init__(
        self,
        *,
        daily_limit: int = DEFAULT_DAILY_WORD_LIMIT,
        today: Callable[[], date] = _utc_today,
    ) -> None:
        if daily_limit <= 0:
            raise ValueError("daily_limit must be greater than 0.")
        self.daily_limit = daily_limit
        self._today = today
        self._usage: dict[str, WordUsage] = {}
        self._lock = threading.Lock()

    def _current_usage(self, token: str, today: date) -> WordUsage:
        usage = self._usage.get(token)
        if usage is None or usage.usage_date != today:
            usage = WordUsage(words=0, usage_date=today)
            self._usage[token] = usage
        return usage

    def consume(self, token: str, words: int) -> QuotaDecision:
        """Atomically check `words` against today's budget and record them if allowed."""

        if words < 0:
            raise ValueError("words must be nonnegative.")

        with self._lock:
            usage = self._current_usage(token, self._today())
            if usage.words + words > self.daily_limit:
                logger.info(
                    "Word quota denied: requested=%s used=%s limit=%s",
                    words,
                    usage.words,
                    self.daily_limit,
                )
                return QuotaDecision(
                    allowed=False,
                    requested_words=words,
                    used_words=usage.words,
                    daily_limit=self.daily_limit,
                )
            usage.words += words
            return QuotaDecision(
                allowed=True,
                requested_words=words,
                used_words=usage.words,
                daily_limit=self.daily_limit,
            )

    def usage(self, token: str) -> WordUsage | None:
        with self._lock:
            stored = self._usage.get(token)
            if stored is None:
                return None
            return WordUsage(words=stored.words, usage_date=stored.usage_date)

    def remaining(self, token: str) -> int:
        with self._lock:
            usage = self._usage.get(token)
            if usage is None or usage.usage_date != self._today():
                return self.daily_limit
            return max(self.daily_limit - usage.words, 0)

    def set_usage(self, token: str, *, words: int, usage_date: date) -> None:
        with self._lock:
            self._usage[token] = WordUsage(words=words, usage_date=usage_date)
