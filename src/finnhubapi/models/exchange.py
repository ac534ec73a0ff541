"""Exchange and listed-symbol data models."""

from __future__ import annotations

from pydantic import Field

from finnhubapi.models.base import WireModel


class Exchange(WireModel):
    """Supported stock exchange."""

    code: str = Field(description="Exchange code (e.g. 'US', 'VN')")
    currency: str = Field(description="Trading currency (e.g. 'USD', 'VND')")
    name: str = Field(description="Full exchange name (e.g. 'US exchanges')")


class StockDescriptor(WireModel):
    """Symbol listed on an exchange."""

    description: str = Field(description="Company or instrument description")
    display_symbol: str = Field(alias="displaySymbol")
    symbol: str = Field(description="Unique symbol accepted by the other endpoints")
    type: str | None = Field(default=None, description="Security type (e.g. 'Common Stock')")
    currency: str | None = Field(default=None)
    figi: str | None = Field(default=None)
    mic: str | None = Field(default=None, description="Primary exchange MIC")
