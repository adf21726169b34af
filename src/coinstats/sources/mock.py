"""Mock source for testing and CI: no files or network required."""

from __future__ import annotations

from datetime import datetime, time, timedelta, timezone
from decimal import Decimal

from coinstats.errors import CoinStatsError, CoinStatsErrorCode
from coinstats.models.price_point import PricePoint
from coinstats.sources.base import BasePriceSource


class MockPriceSource(BasePriceSource):
    """In-memory source that returns configurable static histories.

    Use ``set_history`` to pre-load data, or leave a symbol unset for an
    auto-generated synthetic daily series ending today.
    """

    def __init__(self, synthetic_days: int = 90) -> None:
        self.synthetic_days = synthetic_days
        self._history: dict[str, list[PricePoint]] = {}
        self._unavailable: set[str] = set()
        self.fetch_count: dict[str, int] = {}

    # --- Pre-load helpers ---

    def set_history(self, symbol: str, points: list[PricePoint]) -> None:
        self._history[symbol.upper()] = list(points)

    def set_unavailable(self, symbol: str) -> None:
        self._unavailable.add(symbol.upper())

    # --- Source implementation ---

    def fetch_history(self, symbol: str) -> list[PricePoint]:
        key = symbol.upper()
        self.fetch_count[key] = self.fetch_count.get(key, 0) + 1
        if key in self._unavailable:
            raise CoinStatsError(
                f"Mock source has no data for {key}",
                code=CoinStatsErrorCode.SOURCE_UNAVAILABLE,
            )
        if key in self._history:
            return list(self._history[key])
        return self._generate_history(key)

    def available_symbols(self) -> list[str]:
        return sorted(self._history)

    # --- Synthetic data generation ---

    def _generate_history(self, symbol: str) -> list[PricePoint]:
        """One point per day at midnight UTC, oldest first."""
        today = datetime.now(timezone.utc).date()
        base = Decimal(100 + 10 * (sum(map(ord, symbol)) % 50))
        points: list[PricePoint] = []
        for i in range(self.synthetic_days):
            day = today - timedelta(days=self.synthetic_days - 1 - i)
            ts = datetime.combine(day, time.min, tzinfo=timezone.utc)
            points.append(PricePoint(
                timestamp=int(ts.timestamp() * 1000),
                price=base + Decimal(i % 7) * Decimal("1.25"),
            ))
        return points
