"""Request executor: one GET, rate-limit headers, typed decoding.

Each endpoint declares how its payload sits in the response body:

* :class:`Direct` - the body is the payload.
* :class:`Extract` - the payload is nested under a top-level key.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from finnhubapi.errors import FinnhubError, FinnhubErrorCode
from finnhubapi.models.result import ApiResult
from finnhubapi.ratelimit import RateLimit
from finnhubapi.urls import redact_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Direct:
    """Decode the whole response body."""


@dataclass(frozen=True)
class Extract:
    """Decode the value stored under ``key`` in a JSON object body."""

    key: str


DecodeStrategy = Union[Direct, Extract]

DIRECT = Direct()


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _location(loc: tuple) -> str:
    return "$" + "".join(f"[{part}]" if isinstance(part, int) else f".{part}" for part in loc)


def decode(target: Any, payload: Any) -> Any:
    """Validate parsed JSON *payload* as *target*, e.g. ``list[Exchange]``.

    Raises:
        FinnhubError: ``DESERIALIZATION`` listing each offending JSON path.
    """
    try:
        return _adapter(target).validate_python(payload)
    except ValidationError as exc:
        problems = "; ".join(
            f"{_location(error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise FinnhubError(
            f"Response does not match {target!r}: {problems}",
            code=FinnhubErrorCode.DESERIALIZATION,
        ) from exc


def apply_strategy(strategy: DecodeStrategy, document: Any) -> Any:
    """Locate the payload inside a parsed JSON *document*.

    Raises:
        FinnhubError: ``MISSING_KEY`` when an :class:`Extract` key is absent.
    """
    if isinstance(strategy, Direct):
        return document
    if isinstance(strategy, Extract):
        if not isinstance(document, dict) or strategy.key not in document:
            raise FinnhubError(
                f"Response has no top-level {strategy.key!r} key",
                code=FinnhubErrorCode.MISSING_KEY,
            )
        return document[strategy.key]
    raise TypeError(f"Unknown decode strategy: {strategy!r}")


_STATUS_CODES: dict[int, FinnhubErrorCode] = {
    401: FinnhubErrorCode.AUTH_FAILED,
    403: FinnhubErrorCode.AUTH_FAILED,
    404: FinnhubErrorCode.NOT_FOUND,
    429: FinnhubErrorCode.RATE_LIMITED,
}


class RequestExecutor:
    """Issue GET requests and decode their JSON bodies.

    Holds no per-call state, so calls may run concurrently. Connection
    reuse is whatever the wrapped ``httpx.AsyncClient`` provides.
    """

    def __init__(self, http: httpx.AsyncClient) -> None:
        self.http = http

    async def fetch(self, url: httpx.URL, target: Any) -> ApiResult[Any]:
        """GET *url* and decode the body directly into *target*."""
        return await self.fetch_with(url, target, DIRECT)

    async def fetch_with(
        self,
        url: httpx.URL,
        target: Any,
        strategy: DecodeStrategy,
    ) -> ApiResult[Any]:
        """GET *url*, apply *strategy* to the JSON body, decode into *target*."""
        response = await self._get(url)
        rate_limit = RateLimit.from_headers(response.headers)
        document = self._parse_json(response)
        payload = apply_strategy(strategy, document)
        return ApiResult(value=decode(target, payload), rate_limit=rate_limit)

    async def _get(self, url: httpx.URL) -> httpx.Response:
        logger.debug("GET %s", redact_token(url))
        try:
            response = await self.http.get(url)
        except httpx.TimeoutException as exc:
            raise FinnhubError(
                f"Request timed out: {exc}",
                code=FinnhubErrorCode.TIMEOUT,
                retryable=True,
            ) from exc
        except httpx.HTTPError as exc:
            raise FinnhubError(
                f"Request failed: {exc}",
                code=FinnhubErrorCode.TRANSPORT,
                retryable=True,
            ) from exc

        logger.debug("%s -> %d", url.path, response.status_code)
        if not response.is_success:
            self._raise_for_status(response)
        return response

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        status = response.status_code
        code = _STATUS_CODES.get(status, FinnhubErrorCode.HTTP_STATUS)
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error"):
            detail = str(body["error"])
        else:
            detail = response.reason_phrase
        logger.debug("Finnhub returned %d for %s: %s", status, response.url.path, detail)
        raise FinnhubError(
            f"HTTP {status}: {detail}",
            code=code,
            retryable=status == 429 or status >= 500,
            status_code=status,
            rate_limit=RateLimit.from_headers(response.headers),
        )

    @staticmethod
    def _parse_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise FinnhubError(
                f"Invalid JSON from {response.url.path}: {exc}",
                code=FinnhubErrorCode.DESERIALIZATION,
            ) from exc
