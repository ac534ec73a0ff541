"""News, news-sentiment and news-category models."""

from __future__ import annotations

from datetime import datetime as _datetime, timezone
from enum import Enum

from pydantic import Field

from finnhubapi.errors import FinnhubError, FinnhubErrorCode
from finnhubapi.models.base import WireModel


class NewsCategory(Enum):
    """Market-news category accepted by the ``news`` endpoint."""

    GENERAL = "general"
    FOREX = "forex"
    CRYPTO = "crypto"
    MERGER = "merger"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, raw: str) -> NewsCategory:
        """Parse the lowercase wire name. Matching is case-sensitive.

        Raises:
            FinnhubError: ``INVALID_CATEGORY`` for any other string.
        """
        for member in cls:
            if member.value == raw:
                return member
        raise FinnhubError(
            f"{raw!r} is not a valid news category. "
            f"Valid: {', '.join(m.value for m in cls)}",
            code=FinnhubErrorCode.INVALID_CATEGORY,
        )


class NewsArticle(WireModel):
    """Market or company news article."""

    category: str
    datetime: int = Field(description="Published time as unix seconds")
    headline: str
    id: int
    image: str = Field(description="Thumbnail image URL (may be empty)")
    related: str = Field(description="Related symbols, comma separated")
    source: str
    summary: str
    url: str

    @property
    def published_at(self) -> _datetime:
        return _datetime.fromtimestamp(self.datetime, tz=timezone.utc)


class Buzz(WireModel):
    """Statistics of company news in the past week."""

    articles_in_last_week: float | None = Field(default=None, alias="articlesInLastWeek")
    buzz: float | None = Field(default=None)
    weekly_average: float | None = Field(default=None, alias="weeklyAverage")


class Sentiment(WireModel):
    """Share of bullish and bearish news."""

    bearish_percent: float | None = Field(default=None, alias="bearishPercent")
    bullish_percent: float | None = Field(default=None, alias="bullishPercent")


class NewsSentiment(WireModel):
    """Company news sentiment and statistics (US companies only).

    Every statistic is optional; the service omits them inconsistently.
    """

    symbol: str
    buzz: Buzz | None = Field(default=None)
    company_news_score: float | None = Field(default=None, alias="companyNewsScore")
    sector_average_bullish_percent: float | None = Field(
        default=None, alias="sectorAverageBullishPercent"
    )
    sector_average_news_score: float | None = Field(default=None, alias="sectorAverageNewsScore")
    sentiment: Sentiment | None = Field(default=None)
