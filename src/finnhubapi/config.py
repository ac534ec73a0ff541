"""Finnhub client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

from finnhubapi.errors import FinnhubError, FinnhubErrorCode

DEFAULT_BASE_URL = "https://finnhub.io/api/v1"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class FinnhubConfig:
    """Configuration for FinnhubClient.

    Attributes:
        token: Finnhub API token, sent as the ``token`` query parameter.
        base_url: Service root every endpoint path is appended to.
        timeout: Per-request timeout in seconds.
    """

    token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> FinnhubConfig:
        """Read settings from environment variables.

        Environment variables:
            FINNHUB_TOKEN: API token (``FINNHUB_API_KEY`` is accepted too).
            FINNHUB_BASE_URL: Service root (default: ``https://finnhub.io/api/v1``).
            FINNHUB_TIMEOUT: Request timeout in seconds (default: 30).
        """
        token = os.getenv("FINNHUB_TOKEN") or os.getenv("FINNHUB_API_KEY")
        if not token:
            raise FinnhubError(
                "Finnhub API token required. Set FINNHUB_TOKEN env var or pass token.",
                code=FinnhubErrorCode.AUTH_FAILED,
            )
        raw_timeout = os.getenv("FINNHUB_TIMEOUT") or str(DEFAULT_TIMEOUT)
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise FinnhubError(
                f"FINNHUB_TIMEOUT must be a number of seconds, got {raw_timeout!r}",
                code=FinnhubErrorCode.CONFIG,
            ) from exc
        return cls(
            token=token,
            base_url=os.getenv("FINNHUB_BASE_URL") or DEFAULT_BASE_URL,
            timeout=timeout,
        )
