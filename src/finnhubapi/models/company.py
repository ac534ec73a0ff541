"""Company executive data model."""

from __future__ import annotations

from pydantic import Field

from finnhubapi.models.base import WireModel


class Executive(WireModel):
    """Company executive or board member."""

    name: str
    position: str
    sex: str
    currency: str = Field(description="Currency of compensation")
    age: int | None = Field(default=None)
    compensation: float | None = Field(default=None)
    since: str | None = Field(default=None, description="Year or date the position started")
