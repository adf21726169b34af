"""Shared fixtures for coinstats tests."""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from coinstats.config import CoinStatsConfig, PriceSourceType
from coinstats.engine import RecommendationEngine
from coinstats.models.price_point import PricePoint
from coinstats.sources.mock import MockPriceSource


def ms(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> int:
    """Epoch milliseconds of a UTC wall-clock time."""
    dt = datetime(year, month, day, hour, minute, tzinfo=timezone.utc)
    return int(dt.timestamp()) * 1000


def point(year: int, month: int, day: int, price: str, hour: int = 0) -> PricePoint:
    return PricePoint(timestamp=ms(year, month, day, hour), price=Decimal(price))


# January 2022 normalized ranges:
#   DOGE 1.00, LTC 0.50, BTC 0.25, XRP 0.20, ETH 0.03
JANUARY_HISTORY: dict[str, list[PricePoint]] = {
    "BTC": [
        point(2022, 1, 1, "46813.21"),
        point(2022, 1, 10, "40000"),
        point(2022, 1, 20, "50000"),
        point(2022, 1, 31, "45000", hour=23),
        point(2022, 2, 10, "80000"),
    ],
    "ETH": [
        point(2022, 1, 1, "3000"),
        point(2022, 1, 31, "3100"),
    ],
    "LTC": [
        point(2022, 1, 5, "100"),
        point(2022, 1, 6, "150"),
    ],
    "DOGE": [
        point(2022, 1, 2, "0.10"),
        point(2022, 1, 3, "0.20"),
    ],
    "XRP": [
        point(2022, 1, 4, "0.50"),
        point(2022, 1, 7, "0.60"),
    ],
}

CATALOG = ["BTC", "ETH", "LTC", "DOGE", "XRP"]


@pytest.fixture
def mock_source() -> MockPriceSource:
    source = MockPriceSource()
    for symbol, points in JANUARY_HISTORY.items():
        source.set_history(symbol, points)
    return source


@pytest.fixture
def engine(mock_source) -> RecommendationEngine:
    config = CoinStatsConfig(source=PriceSourceType.MOCK, symbols=list(CATALOG))
    return RecommendationEngine(config, source=mock_source)
