"""Volatility statistics data model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from coinstats.models.price_point import PricePoint


@dataclass(frozen=True)
class Stats:
    """Aggregated statistics of one symbol within a timeframe.

    Attributes:
        symbol: Canonical symbol.
        normalized_range: ``(max - min) / min`` rounded half-up to 2 places.
        min: Lowest-priced point in the timeframe.
        max: Highest-priced point in the timeframe.
        oldest: Earliest point in the timeframe.
        newest: Latest point in the timeframe.
        from_date: Timeframe start (inclusive).
        to_date: Timeframe end (inclusive).
    """

    symbol: str
    normalized_range: Decimal
    min: PricePoint
    max: PricePoint
    oldest: PricePoint
    newest: PricePoint
    from_date: date
    to_date: date

    def __post_init__(self) -> None:
        if not self.symbol or not self.symbol.strip():
            raise ValueError("Symbol must not be blank")
        if self.normalized_range < 0:
            raise ValueError("Normalized range must be non-negative")
        if self.from_date > self.to_date:
            raise ValueError("Timeframe start must not be after end")
