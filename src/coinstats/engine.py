"""RecommendationEngine: ranks symbols by volatility over a timeframe."""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Any

from coinstats.config import CoinStatsConfig, PriceSourceType
from coinstats.errors import CoinStatsError, CoinStatsErrorCode
from coinstats.models.page import Page
from coinstats.models.stats import Stats
from coinstats.models.timeframe import Timeframe
from coinstats.sorting import SortSpec
from coinstats.sources import create_source
from coinstats.sources.base import BasePriceSource
from coinstats.stats import calculate_stats
from coinstats.store import PriceStore
from coinstats.timeframe import resolve_timeframe

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """Central orchestrator: timeframe -> store -> stats -> sort/paginate.

    The store is fully loaded when the constructor returns, so every
    query afterwards is a read-only computation over memory.

    Usage::

        from coinstats import create_engine_from_env
        engine = create_engine_from_env()
        page = engine.recommendations(0, 10, period_months=6)
        top = engine.top_recommendation(date(2022, 1, 1), date(2022, 1, 31))
    """

    def __init__(
        self,
        config: CoinStatsConfig | None = None,
        source: BasePriceSource | None = None,
    ) -> None:
        self.config = config or CoinStatsConfig()

        if source is None:
            kwargs: dict[str, Any] = {}
            if self.config.source is PriceSourceType.CSV:
                kwargs["directory"] = self.config.csv_directory
            elif self.config.source is PriceSourceType.REST:
                kwargs["base_url"] = self.config.api_base_url
                kwargs["timeout"] = self.config.api_timeout_seconds
            source = create_source(self.config.source, **kwargs)
        self.source = source

        self.store = PriceStore(
            source,
            symbols=self.config.symbols,
            validate=self.config.validate,
        )
        self.store.initialize()

    def symbols(self) -> list[str]:
        """Symbols available for queries."""
        return self.store.list_symbols()

    # ----------------------------------------------------- recommendations

    def recommendations(
        self,
        page: int,
        size: int,
        sort_by: str | None = None,
        from_date: date | None = None,
        to_date: date | None = None,
        period_months: int | None = None,
    ) -> Page:
        """Stats for every symbol, sorted and sliced into one page.

        Symbols without usable data in the timeframe are left out rather
        than failing the request.

        Raises:
            CoinStatsError: ``INVALID_TIMEFRAME``, ``INVALID_SORT`` or
                ``INVALID_PAGINATION``.
        """
        if page < 0 or size < 0:
            raise CoinStatsError(
                f"page and size must be non-negative, got page={page}, size={size}",
                code=CoinStatsErrorCode.INVALID_PAGINATION,
            )

        timeframe = resolve_timeframe(from_date, to_date, period_months)
        sort = SortSpec.parse(sort_by)
        logger.debug(
            "recommendations: page=%d, size=%d, sort=%s, from=%s, to=%s",
            page, size, sort, timeframe.from_date, timeframe.to_date,
        )

        ranked = sort.apply(self._collect_stats(timeframe))
        return paginate(ranked, page, size)

    # ------------------------------------------------------------- single

    def stats_for(
        self,
        symbol: str,
        from_date: date | None = None,
        to_date: date | None = None,
        period_months: int | None = None,
    ) -> Stats:
        """Stats of one symbol.

        Raises:
            CoinStatsError: ``INVALID_TIMEFRAME``, ``NOT_FOUND`` or
                ``NO_DATA``.
        """
        timeframe = resolve_timeframe(from_date, to_date, period_months)
        logger.debug(
            "stats_for: symbol=%s, from=%s, to=%s",
            symbol, timeframe.from_date, timeframe.to_date,
        )
        return self._stats(symbol, timeframe)

    # ---------------------------------------------------------------- top

    def top_recommendation(
        self,
        from_date: date | None = None,
        to_date: date | None = None,
        period_months: int | None = None,
    ) -> Stats:
        """The symbol with the highest normalized range.

        Ties go to the symbol loaded first.

        Raises:
            CoinStatsError: ``INVALID_TIMEFRAME``, or ``NO_DATA`` when no
                symbol has data in the timeframe.
        """
        timeframe = resolve_timeframe(from_date, to_date, period_months)
        logger.debug("top_recommendation: from=%s, to=%s", timeframe.from_date, timeframe.to_date)

        stats = self._collect_stats(timeframe)
        if not stats:
            raise CoinStatsError(
                f"No price data available between {timeframe.from_date} and {timeframe.to_date}",
                code=CoinStatsErrorCode.NO_DATA,
            )
        return max(stats, key=lambda s: s.normalized_range)

    # ------------------------------------------------------------ internal

    def _stats(self, symbol: str, timeframe: Timeframe) -> Stats:
        series = self.store.get_in_range(symbol, timeframe.from_date, timeframe.to_date)
        return calculate_stats(series.symbol, series.points, timeframe.from_date, timeframe.to_date)

    def _collect_stats(self, timeframe: Timeframe) -> list[Stats]:
        """Stats for every catalog symbol, in catalog order, skipping failures."""
        stats: list[Stats] = []
        for symbol in self.store.list_symbols():
            try:
                stats.append(self._stats(symbol, timeframe))
            except CoinStatsError as e:
                logger.warning("Failed to calculate stats for %s: %s", symbol, e)
        return stats


def paginate(items: list[Stats], page: int, size: int) -> Page:
    """Slice ``items`` into page ``page`` of ``size`` entries."""
    total = len(items)
    start = min(page * size, total)
    end = min(start + size, total)
    total_pages = math.ceil(total / size) if size > 0 else 0
    return Page(
        items=tuple(items[start:end]),
        page=page,
        size=size,
        total_elements=total,
        total_pages=total_pages,
    )
