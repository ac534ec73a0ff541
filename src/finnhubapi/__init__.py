"""finnhubapi: typed asynchronous client for the Finnhub REST API.

Typed records for every endpoint, rate-limit counters from each response,
and one error type for everything that can go wrong.

Quick start::

    from finnhubapi import FinnhubClient, Symbol
    async with FinnhubClient.from_env() as client:
        result = await client.quote(Symbol("AAPL"))
"""

from __future__ import annotations

from finnhubapi.client import FinnhubClient
from finnhubapi.config import DEFAULT_BASE_URL, FinnhubConfig
from finnhubapi.errors import FinnhubError, FinnhubErrorCode
from finnhubapi.executor import DIRECT, DecodeStrategy, Direct, Extract, RequestExecutor, decode
from finnhubapi.models.company import Executive
from finnhubapi.models.estimates import PriceRecommendation, PriceTarget
from finnhubapi.models.exchange import Exchange, StockDescriptor
from finnhubapi.models.identifiers import ExchangeCode, Symbol
from finnhubapi.models.news import Buzz, NewsArticle, NewsCategory, NewsSentiment, Sentiment
from finnhubapi.models.quote import Quote
from finnhubapi.models.result import ApiResult
from finnhubapi.ratelimit import RateLimit
from finnhubapi.urls import build_url

__version__ = "0.1.0"

__all__ = [
    # Client
    "FinnhubClient",
    "RequestExecutor",
    "build_url",
    # Decode strategies
    "DecodeStrategy",
    "Direct",
    "Extract",
    "DIRECT",
    "decode",
    # Config
    "FinnhubConfig",
    "DEFAULT_BASE_URL",
    # Errors
    "FinnhubError",
    "FinnhubErrorCode",
    # Results
    "ApiResult",
    "RateLimit",
    # Identifiers
    "Symbol",
    "ExchangeCode",
    # Models
    "Exchange",
    "StockDescriptor",
    "Quote",
    "NewsCategory",
    "NewsArticle",
    "NewsSentiment",
    "Buzz",
    "Sentiment",
    "Executive",
    "PriceTarget",
    "PriceRecommendation",
]
