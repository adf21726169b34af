"""Volatility statistics over a price series."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from coinstats.errors import CoinStatsError, CoinStatsErrorCode
from coinstats.models.price_point import PricePoint
from coinstats.models.stats import Stats

# USD precision: results carry 2 fractional digits, rounded half-up.
USD_SCALE = 2
_QUANTUM = Decimal(1).scaleb(-USD_SCALE)


def normalized_range(min_price: Decimal, max_price: Decimal) -> Decimal:
    """``(max - min) / min`` rounded half-up to 2 places.

    The division is done on integers so the rounding sees the exact
    quotient, not a 28-digit approximation of it.

    Raises:
        CoinStatsError: ``NO_DATA`` when ``min_price`` is zero or either
            price is negative.
    """
    if min_price < 0 or max_price < 0:
        raise CoinStatsError("Prices must be non-negative", code=CoinStatsErrorCode.NO_DATA)
    if min_price == 0:
        raise CoinStatsError("Minimum price cannot be zero", code=CoinStatsErrorCode.NO_DATA)

    scaled = (max_price - min_price).scaleb(USD_SCALE)
    quotient, remainder = divmod(scaled, min_price)
    if 2 * remainder >= min_price:
        quotient += 1
    return quotient.scaleb(-USD_SCALE).quantize(_QUANTUM)


def find_min(points: Sequence[PricePoint]) -> PricePoint:
    """Lowest-priced point; the first one wins ties."""
    if not points:
        raise CoinStatsError("Cannot find minimum of no prices", code=CoinStatsErrorCode.NO_DATA)
    best = points[0]
    for p in points[1:]:
        if p.price < best.price:
            best = p
    return best


def find_max(points: Sequence[PricePoint]) -> PricePoint:
    """Highest-priced point; the first one wins ties."""
    if not points:
        raise CoinStatsError("Cannot find maximum of no prices", code=CoinStatsErrorCode.NO_DATA)
    best = points[0]
    for p in points[1:]:
        if p.price > best.price:
            best = p
    return best


def calculate_stats(
    symbol: str,
    points: Sequence[PricePoint],
    from_date: date,
    to_date: date,
) -> Stats:
    """Aggregate a chronologically sorted price sequence into ``Stats``.

    Args:
        symbol: Symbol the points belong to.
        points: Price points, ascending by timestamp.
        from_date: Timeframe start, recorded on the result.
        to_date: Timeframe end, recorded on the result.

    Raises:
        CoinStatsError: ``NO_DATA`` for an empty sequence or a zero minimum.
    """
    if not points:
        raise CoinStatsError(
            f"No price data available for {symbol} between {from_date} and {to_date}",
            code=CoinStatsErrorCode.NO_DATA,
        )

    low = find_min(points)
    high = find_max(points)

    return Stats(
        symbol=symbol,
        normalized_range=normalized_range(low.price, high.price),
        min=low,
        max=high,
        oldest=points[0],
        newest=points[-1],
        from_date=from_date,
        to_date=to_date,
    )
