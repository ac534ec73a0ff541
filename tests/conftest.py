"""Shared fixtures for finnhubapi tests."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from finnhubapi.client import FinnhubClient

TOKEN = "T1"

RATE_LIMIT_HEADERS = {
    "x-ratelimit-limit": "60",
    "x-ratelimit-remaining": "59",
    "x-ratelimit-reset": "1700000000",
}

PAYLOADS: dict[str, Any] = {
    "/api/v1/stock/exchange": [
        {"code": "US", "currency": "USD", "name": "US exchanges"},
        {"code": "VN", "currency": "VND", "name": "HSX and HOSE"},
    ],
    "/api/v1/stock/symbol": [
        {
            "description": "APPLE INC",
            "displaySymbol": "AAPL",
            "symbol": "AAPL",
            "type": "Common Stock",
            "currency": "USD",
            "figi": "BBG000B9XRY4",
            "mic": "XNAS",
        },
        {"description": "SPDR S&P 500", "displaySymbol": "SPY", "symbol": "SPY"},
    ],
    "/api/v1/quote": {
        "c": 261.74, "h": 263.31, "l": 260.68, "o": 261.07, "pc": 259.45,
        "d": 2.29, "dp": 0.8826, "t": 1700000000,
    },
    "/api/v1/news": [
        {
            "category": "merger",
            "datetime": 1700000000,
            "headline": "Deal announced",
            "id": 7041234,
            "image": "https://example.com/a.png",
            "related": "",
            "source": "Reuters",
            "summary": "Two companies agree to merge.",
            "url": "https://example.com/a",
        }
    ],
    "/api/v1/company-news": [
        {
            "category": "company",
            "datetime": 1699990000,
            "headline": "Apple ships new chip",
            "id": 124,
            "image": "",
            "related": "AAPL",
            "source": "MarketWatch",
            "summary": "",
            "url": "https://example.com/b",
        }
    ],
    "/api/v1/news-sentiment": {
        "buzz": {"articlesInLastWeek": 20, "buzz": 0.8888, "weeklyAverage": 22.5},
        "companyNewsScore": 0.9166,
        "sectorAverageBullishPercent": 0.6482,
        "sectorAverageNewsScore": 0.5191,
        "sentiment": {"bearishPercent": 0, "bullishPercent": 1},
        "symbol": "V",
    },
    "/api/v1/stock/peers": ["AAPL", "DELL", "HPQ"],
    "/api/v1/stock/executive": {
        "executive": [
            {
                "age": 56,
                "compensation": 25209637,
                "currency": "USD",
                "name": "Mr. Timothy Cook",
                "position": "Chief Executive Officer and Director",
                "sex": "male",
                "since": "2011",
            },
            {
                "age": None,
                "compensation": None,
                "currency": "USD",
                "name": "Ms. Kate Adams",
                "position": "General Counsel",
                "sex": "female",
            },
        ]
    },
    "/api/v1/stock/price-target": {
        "symbol": "NFLX",
        "targetHigh": 760,
        "targetLow": 400,
        "targetMean": 584.65,
        "targetMedian": 600,
        "lastUpdated": "2023-11-14 00:00:00",
    },
    "/api/v1/stock/recommendation": [
        {
            "symbol": "AAPL", "period": "2023-11-01",
            "strongBuy": 13, "buy": 24, "hold": 7, "sell": 0, "strongSell": 0,
        },
        {"symbol": "AAPL", "period": "2023-10-01", "buy": 22},
    ],
}


def json_response(
    payload: Any,
    status: int = 200,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    return httpx.Response(
        status,
        content=json.dumps(payload).encode(),
        headers={"content-type": "application/json", **(headers or {})},
    )


class RecordingHandler:
    """MockTransport handler serving PAYLOADS by path and recording requests."""

    def __init__(
        self,
        payloads: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.payloads = PAYLOADS if payloads is None else payloads
        self.headers = RATE_LIMIT_HEADERS if headers is None else headers
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path not in self.payloads:
            return json_response({"error": "Not found"}, status=404)
        return json_response(self.payloads[request.url.path], headers=self.headers)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def call_api() -> Callable[..., Any]:
    """Run one client method against a mock transport and return its result."""

    def _call(handler: Callable[[httpx.Request], httpx.Response], method: str, *args, **kwargs):
        async def go():
            transport = httpx.MockTransport(handler)
            async with FinnhubClient(token=TOKEN, transport=transport) as client:
                return await getattr(client, method)(*args, **kwargs)

        return asyncio.run(go())

    return _call


@pytest.fixture
def payloads() -> dict[str, Any]:
    return PAYLOADS


@pytest.fixture
def rate_limit_headers() -> dict[str, str]:
    return dict(RATE_LIMIT_HEADERS)
