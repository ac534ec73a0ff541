"""Rate-limit snapshot read from Finnhub response headers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Mapping

LIMIT_HEADER = "x-ratelimit-limit"
REMAINING_HEADER = "x-ratelimit-remaining"
RESET_HEADER = "x-ratelimit-reset"


@dataclass(frozen=True)
class RateLimit:
    """Server-reported rate-limit counters for one response.

    Attributes:
        limit: Maximum weighted calls per window.
        remaining: Weighted calls left in the current window.
        reset: When the window rolls over (UTC).
    """

    limit: int
    remaining: int
    reset: datetime

    def time_until_reset(self, now: datetime | None = None) -> timedelta:
        """Time left until ``reset``. Negative once the reset has passed."""
        return self.reset - (now or datetime.now(timezone.utc))

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> RateLimit | None:
        """Build a snapshot, or ``None`` when any header is absent or garbled."""
        limit = _unsigned(headers.get(LIMIT_HEADER))
        remaining = _unsigned(headers.get(REMAINING_HEADER))
        reset = _unsigned(headers.get(RESET_HEADER))
        if limit is None or remaining is None or reset is None:
            return None
        try:
            reset_at = datetime.fromtimestamp(reset, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
        return cls(limit=limit, remaining=remaining, reset=reset_at)


def _unsigned(raw: str | None) -> int | None:
    if raw is None:
        return None
    raw = raw.strip()
    if not (raw.isascii() and raw.isdigit()):
        return None
    return int(raw)
