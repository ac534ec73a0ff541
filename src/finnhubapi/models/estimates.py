"""Analyst price-target and recommendation models."""

from __future__ import annotations

from pydantic import Field

from finnhubapi.models.base import WireModel


class PriceTarget(WireModel):
    """Latest analyst price-target consensus."""

    symbol: str
    target_high: float | None = Field(default=None, alias="targetHigh")
    target_low: float | None = Field(default=None, alias="targetLow")
    target_mean: float | None = Field(default=None, alias="targetMean")
    target_median: float | None = Field(default=None, alias="targetMedian")
    last_updated: str | None = Field(default=None, alias="lastUpdated")


class PriceRecommendation(WireModel):
    """Analyst recommendation counts for one period."""

    symbol: str
    period: str = Field(description="Period start date (YYYY-MM-DD)")
    strong_buy: int | None = Field(default=None, alias="strongBuy")
    buy: int | None = Field(default=None)
    hold: int | None = Field(default=None)
    sell: int | None = Field(default=None)
    strong_sell: int | None = Field(default=None, alias="strongSell")

    @property
    def total(self) -> int:
        """Number of analysts counted in this period."""
        counts = (self.strong_buy, self.buy, self.hold, self.sell, self.strong_sell)
        return sum(c or 0 for c in counts)
