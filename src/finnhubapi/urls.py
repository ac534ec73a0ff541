"""Request URL construction.

Every Finnhub request URL is ``<base>/<path segments>?token=<token>&...``.
Building one is pure: no I/O, and equal inputs always give equal URLs.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Any, Iterable

import httpx

from finnhubapi.errors import FinnhubError, FinnhubErrorCode

QueryParams = Iterable[tuple[str, Any]]

_BAD_SEGMENT = re.compile(r"[?#\s\x00-\x1f\x7f]")


def _split_path(path: str) -> list[str]:
    segments = path[1:].split("/") if path.startswith("/") else path.split("/")
    for segment in segments:
        if not segment or segment in (".", "..") or _BAD_SEGMENT.search(segment):
            raise FinnhubError(
                f"Invalid path {path!r}: bad segment {segment!r}",
                code=FinnhubErrorCode.MALFORMED_URL,
            )
    return segments


def _param_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def build_url(
    base_url: str,
    path: str,
    token: str,
    params: QueryParams | None = None,
) -> httpx.URL:
    """Assemble an absolute request URL.

    Args:
        base_url: Service root, e.g. ``https://finnhub.io/api/v1``.
        path: Endpoint path relative to the root, e.g. ``/stock/peers``.
        token: API token, always sent as the first query parameter.
        params: Extra ``(key, value)`` pairs, kept in order. Duplicate keys
            are all sent. Pairs whose value is ``None`` are skipped.

    Raises:
        FinnhubError: ``MALFORMED_URL`` if the path or base is unusable.
    """
    segments = _split_path(path)
    query: list[tuple[str, str]] = [("token", token)]
    for key, value in params or ():
        if value is None:
            continue
        query.append((key, _param_value(value)))

    try:
        url = httpx.URL(f"{base_url.rstrip('/')}/{'/'.join(segments)}", params=query)
    except httpx.InvalidURL as exc:
        raise FinnhubError(
            f"Invalid URL for base {base_url!r} and path {path!r}: {exc}",
            code=FinnhubErrorCode.MALFORMED_URL,
        ) from exc

    if url.scheme not in ("http", "https") or not url.host:
        raise FinnhubError(
            f"Base URL must be absolute http(s): {base_url!r}",
            code=FinnhubErrorCode.MALFORMED_URL,
        )
    return url


def redact_token(url: httpx.URL) -> str:
    """Render *url* for logs with the token value masked."""
    query = [
        (key, "REDACTED" if key == "token" else value)
        for key, value in url.params.multi_items()
    ]
    return str(url.copy_with(params=query))
