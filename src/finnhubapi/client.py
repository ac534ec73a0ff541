"""Asynchronous Finnhub REST client.

Quick start::

    async with FinnhubClient.from_env() as client:
        result = await client.quote(Symbol("AAPL"))
        print(result.value.current, result.rate_limit)
"""

from __future__ import annotations

from datetime import date
from typing import Any

import httpx

from finnhubapi.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, FinnhubConfig
from finnhubapi.errors import FinnhubError, FinnhubErrorCode
from finnhubapi.executor import DIRECT, DecodeStrategy, Extract, RequestExecutor
from finnhubapi.models.identifiers import ExchangeCode, Symbol
from finnhubapi.models.company import Executive
from finnhubapi.models.estimates import PriceRecommendation, PriceTarget
from finnhubapi.models.exchange import Exchange, StockDescriptor
from finnhubapi.models.news import NewsArticle, NewsCategory, NewsSentiment
from finnhubapi.models.quote import Quote
from finnhubapi.models.result import ApiResult
from finnhubapi.urls import QueryParams, build_url


class FinnhubClient:
    """Typed access to the Finnhub REST API.

    The token and base URL are fixed at construction. The client keeps no
    per-call state, so any number of calls may be awaited concurrently.
    Use it as an async context manager, or call :meth:`aclose` when done.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not token:
            raise FinnhubError(
                "Finnhub API token required. Pass token or use FinnhubClient.from_env().",
                code=FinnhubErrorCode.AUTH_FAILED,
            )
        self._token = token
        self._base_url = base_url
        self.http = httpx.AsyncClient(timeout=timeout, transport=transport)
        self.executor = RequestExecutor(self.http)

    @classmethod
    def from_config(
        cls,
        config: FinnhubConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> FinnhubClient:
        return cls(
            token=config.token,
            base_url=config.base_url,
            timeout=config.timeout,
            transport=transport,
        )

    @classmethod
    def from_env(cls) -> FinnhubClient:
        """Build a client from ``FINNHUB_*`` environment variables."""
        return cls.from_config(FinnhubConfig.from_env())

    @property
    def token(self) -> str:
        return self._token

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> FinnhubClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"FinnhubClient(base_url={self._base_url!r})"

    # ------------------------------------------------------------------ core

    def url_for(self, path: str, params: QueryParams | None = None) -> httpx.URL:
        """Build the request URL for *path* with this client's token."""
        return build_url(self._base_url, path, self._token, params)

    async def _call(
        self,
        path: str,
        target: Any,
        params: QueryParams | None = None,
        strategy: DecodeStrategy = DIRECT,
    ) -> ApiResult[Any]:
        url = self.url_for(path, params)
        return await self.executor.fetch_with(url, target, strategy)

    # ------------------------------------------------------------- reference

    async def exchanges(self) -> ApiResult[list[Exchange]]:
        """List supported stock exchanges."""
        return await self._call("/stock/exchange", list[Exchange])

    async def symbols(self, exchange: ExchangeCode) -> ApiResult[list[StockDescriptor]]:
        """List supported stocks for an exchange."""
        return await self._call(
            "/stock/symbol", list[StockDescriptor], [("exchange", str(exchange))]
        )

    async def peers(self, symbol: Symbol) -> ApiResult[list[Symbol]]:
        """Company peers in the same country and GICS sub-industry."""
        return await self._call("/stock/peers", list[Symbol], [("symbol", str(symbol))])

    async def executives(self, symbol: Symbol) -> ApiResult[list[Executive]]:
        """Company executives and board members."""
        return await self._call(
            "/stock/executive",
            list[Executive],
            [("symbol", str(symbol))],
            strategy=Extract("executive"),
        )

    # ---------------------------------------------------------------- prices

    async def quote(self, symbol: Symbol) -> ApiResult[Quote]:
        """Real-time quote. Constant polling is not recommended."""
        return await self._call("/quote", Quote, [("symbol", str(symbol))])

    async def price_target(self, symbol: Symbol) -> ApiResult[PriceTarget]:
        """Latest analyst price-target consensus."""
        return await self._call("/stock/price-target", PriceTarget, [("symbol", str(symbol))])

    async def recommendations(self, symbol: Symbol) -> ApiResult[list[PriceRecommendation]]:
        """Analyst recommendation trends, latest period first."""
        return await self._call(
            "/stock/recommendation", list[PriceRecommendation], [("symbol", str(symbol))]
        )

    # ------------------------------------------------------------------ news

    async def news(self, category: NewsCategory | str) -> ApiResult[list[NewsArticle]]:
        """Latest market news for a category.

        A string category is parsed first, so an invalid one fails with
        ``INVALID_CATEGORY`` before any request is sent.
        """
        if not isinstance(category, NewsCategory):
            category = NewsCategory.parse(category)
        return await self._call("/news", list[NewsArticle], [("category", category.value)])

    async def company_news(
        self,
        symbol: Symbol,
        start: date | None = None,
        end: date | None = None,
    ) -> ApiResult[list[NewsArticle]]:
        """Company news (US companies only), optionally limited to a date range."""
        return await self._call(
            "/company-news",
            list[NewsArticle],
            [("symbol", str(symbol)), ("from", start), ("to", end)],
        )

    async def news_sentiment(self, symbol: Symbol) -> ApiResult[NewsSentiment]:
        """Company news sentiment and statistics (US companies only)."""
        return await self._call("/news-sentiment", NewsSentiment, [("symbol", str(symbol))])
