"""Base model for records decoded from Finnhub responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class WireModel(BaseModel):
    """Read-only record whose aliases are the service's JSON keys.

    Unknown keys are ignored, and fields can be set by alias or by name.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_wire(self) -> dict:
        """Dump with JSON key names, leaving out absent optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
