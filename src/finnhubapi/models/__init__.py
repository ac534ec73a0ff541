"""Finnhub data models."""

from finnhubapi.models.base import WireModel
from finnhubapi.models.company import Executive
from finnhubapi.models.estimates import PriceRecommendation, PriceTarget
from finnhubapi.models.exchange import Exchange, StockDescriptor
from finnhubapi.models.identifiers import ExchangeCode, Identifier, Symbol
from finnhubapi.models.news import Buzz, NewsArticle, NewsCategory, NewsSentiment, Sentiment
from finnhubapi.models.quote import Quote
from finnhubapi.models.result import ApiResult

__all__ = [
    "WireModel",
    "Identifier",
    "Symbol",
    "ExchangeCode",
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
    "ApiResult",
]
