"""Price series data model."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterator
from dataclasses import dataclass, field

from coinstats.models.price_point import PricePoint


def _timestamp(point: PricePoint) -> int:
    return point.timestamp


@dataclass(frozen=True)
class PriceSeries:
    """Full price history of one symbol, ascending by timestamp.

    Attributes:
        symbol: Canonical (uppercase) symbol.
        points: Price points ordered by timestamp, earliest first.
    """

    symbol: str
    points: tuple[PricePoint, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.symbol or not self.symbol.strip():
            raise ValueError("Symbol must not be blank")
        if not isinstance(self.points, tuple):
            object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[PricePoint]:
        return iter(self.points)

    def between(self, start_ms: int, end_ms: int) -> PriceSeries:
        """Return the points with ``start_ms <= timestamp <= end_ms``."""
        lo = bisect_left(self.points, start_ms, key=_timestamp)
        hi = bisect_right(self.points, end_ms, key=_timestamp)
        return PriceSeries(self.symbol, self.points[lo:hi])
