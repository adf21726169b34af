"""coinstats: cryptocurrency volatility statistics over in-memory price histories.

Loads each symbol's USD price history once from a pluggable source (CSV
files, a remote API, or an in-memory mock), then ranks symbols by
normalized range ``(max - min) / min`` over any timeframe.

Quick start::

    from coinstats import create_engine_from_env
    engine = create_engine_from_env()
    top = engine.top_recommendation(period_months=3)
"""

from __future__ import annotations

import os

from coinstats.config import DEFAULT_SYMBOLS, CoinStatsConfig, PriceSourceType
from coinstats.engine import RecommendationEngine, paginate
from coinstats.errors import CoinStatsError, CoinStatsErrorCode
from coinstats.models.page import Page
from coinstats.models.price_point import PricePoint
from coinstats.models.price_series import PriceSeries
from coinstats.models.stats import Stats
from coinstats.models.timeframe import Timeframe
from coinstats.sorting import SortDirection, SortField, SortSpec
from coinstats.sources import create_source
from coinstats.sources.base import BasePriceSource
from coinstats.stats import calculate_stats, normalized_range
from coinstats.store import PriceStore
from coinstats.timeframe import resolve_timeframe

__version__ = "0.1.0"

__all__ = [
    # Engine
    "RecommendationEngine",
    "create_engine_from_env",
    "paginate",
    # Core components
    "PriceStore",
    "resolve_timeframe",
    "calculate_stats",
    "normalized_range",
    "SortSpec",
    "SortField",
    "SortDirection",
    # Sources
    "BasePriceSource",
    "create_source",
    # Config
    "CoinStatsConfig",
    "PriceSourceType",
    "DEFAULT_SYMBOLS",
    # Errors
    "CoinStatsError",
    "CoinStatsErrorCode",
    # Models
    "PricePoint",
    "PriceSeries",
    "Timeframe",
    "Stats",
    "Page",
]


def create_engine_from_env() -> RecommendationEngine:
    """Zero-config factory that reads source settings from env vars.

    Environment variables:
        COINSTATS_SOURCE: Price source, one of "csv", "rest", "mock" (default: "csv").
        COINSTATS_SYMBOLS: Comma-separated symbols, or "*" to discover them
            from the source (default: BTC,ETH,LTC,DOGE,XRP).
        COINSTATS_CSV_DIR: Directory of ``{SYMBOL}_values.csv`` files (default: "prices").
        COINSTATS_API_URL: Base URL of the remote price API.
        COINSTATS_API_TIMEOUT: Remote API timeout in seconds (default: 10).
        COINSTATS_VALIDATE: "0"/"false" disables load-time quality checks.
    """
    symbols_str = os.getenv("COINSTATS_SYMBOLS", ",".join(DEFAULT_SYMBOLS))
    symbols: list[str] | None
    if symbols_str.strip() == "*":
        symbols = None
    else:
        symbols = [s.strip().upper() for s in symbols_str.split(",") if s.strip()]

    config = CoinStatsConfig(
        source=PriceSourceType(os.getenv("COINSTATS_SOURCE", "csv").strip().lower()),
        symbols=symbols,
        csv_directory=os.getenv("COINSTATS_CSV_DIR", "prices"),
        api_base_url=os.getenv("COINSTATS_API_URL"),
        api_timeout_seconds=float(os.getenv("COINSTATS_API_TIMEOUT", "10")),
        validate=os.getenv("COINSTATS_VALIDATE", "1").strip().lower() not in ("0", "false", "no"),
    )

    return RecommendationEngine(config)
