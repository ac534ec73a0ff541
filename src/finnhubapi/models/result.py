"""Successful API call result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from finnhubapi.ratelimit import RateLimit

T = TypeVar("T")


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """Decoded payload plus the rate-limit snapshot of its response.

    Attributes:
        value: Decoded payload.
        rate_limit: Counters from the response headers, ``None`` when the
            headers were missing or unreadable.
    """

    value: T
    rate_limit: RateLimit | None = None
