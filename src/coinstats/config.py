"""Coin stats configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_SYMBOLS = ("BTC", "ETH", "LTC", "DOGE", "XRP")


class PriceSourceType(Enum):
    """Supported price history backends."""

    CSV = "csv"
    REST = "rest"
    MOCK = "mock"


@dataclass
class CoinStatsConfig:
    """Configuration for RecommendationEngine.

    Attributes:
        source: Price history backend.
        symbols: Symbols to load at startup, or None to discover them
            from the source.
        csv_directory: Directory holding ``{SYMBOL}_values.csv`` files.
        api_base_url: Base URL of the remote price history API.
        api_timeout_seconds: Per-request timeout for the remote API.
        validate: Whether to run quality checks on loaded series.
    """

    source: PriceSourceType = PriceSourceType.CSV
    symbols: list[str] | None = field(default_factory=lambda: list(DEFAULT_SYMBOLS))
    csv_directory: str = "prices"
    api_base_url: str | None = None
    api_timeout_seconds: float = 10.0
    validate: bool = True
