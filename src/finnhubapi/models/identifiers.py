"""Identifier wrapper types."""

from __future__ import annotations

from pydantic import ConfigDict, RootModel


class Identifier(RootModel[str]):
    """Raw string identifier tagged with its kind. Not validated."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root


class Symbol(Identifier):
    """Ticker symbol, e.g. ``AAPL``."""


class ExchangeCode(Identifier):
    """Exchange code, e.g. ``US``."""
