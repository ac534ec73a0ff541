"""Quote data model."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import Field

from finnhubapi.models.base import WireModel


class Quote(WireModel):
    """Real-time quote for a symbol.

    Field aliases are the service's one- and two-letter keys.
    """

    current: float = Field(alias="c", description="Current price")
    high: float = Field(alias="h", description="High price of the day")
    low: float = Field(alias="l", description="Low price of the day")
    open: float = Field(alias="o", description="Open price of the day")
    previous_close: float = Field(alias="pc", description="Previous close price")
    change: float | None = Field(default=None, alias="d")
    percent_change: float | None = Field(default=None, alias="dp")
    timestamp: int | None = Field(default=None, alias="t", description="Unix seconds")

    @property
    def quoted_at(self) -> datetime | None:
        """Quote time as an aware UTC datetime."""
        if self.timestamp is None:
            return None
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)
