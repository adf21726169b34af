"""Abstract base class for price history sources."""

from __future__ import annotations

from abc import ABC, abstractmethod

from coinstats.models.price_point import PricePoint


class BasePriceSource(ABC):
    """Abstract base for all price history sources.

    Subclasses must implement ``fetch_history``. Catalog discovery via
    ``available_symbols`` is optional and defaults to
    ``NotImplementedError``.
    """

    @abstractmethod
    def fetch_history(self, symbol: str) -> list[PricePoint]:
        """Fetch the full USD price history of a symbol.

        Args:
            symbol: Canonical (uppercase) symbol.

        Returns:
            Price points in source order; the store sorts them.

        Raises:
            CoinStatsError: ``SOURCE_UNAVAILABLE`` when the history cannot
                be read.
        """
        ...

    def available_symbols(self) -> list[str]:
        """List the symbols this source can serve."""
        raise NotImplementedError
