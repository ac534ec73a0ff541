"""Finnhub client error types."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from finnhubapi.ratelimit import RateLimit


class FinnhubErrorCode(Enum):
    """Error classification codes."""

    MALFORMED_URL = "malformed_url"
    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    AUTH_FAILED = "auth_failed"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    HTTP_STATUS = "http_status"
    DESERIALIZATION = "deserialization"
    MISSING_KEY = "missing_key"
    INVALID_CATEGORY = "invalid_category"
    CONFIG = "config"


class FinnhubError(Exception):
    """Finnhub exception with error code and retryable flag.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
        retryable: Whether a later retry could succeed. Informational only,
            the client never retries by itself.
        status_code: HTTP status of the response, when one was received.
        rate_limit: Rate-limit snapshot of the failing response, if any.
    """

    def __init__(
        self,
        message: str,
        code: FinnhubErrorCode = FinnhubErrorCode.TRANSPORT,
        retryable: bool = False,
        status_code: int | None = None,
        rate_limit: RateLimit | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.retryable = retryable
        self.status_code = status_code
        self.rate_limit = rate_limit
