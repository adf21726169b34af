"""Timeframe resolution for request date parameters."""

from __future__ import annotations

from datetime import date, datetime, timezone

from dateutil.relativedelta import relativedelta

from coinstats.errors import CoinStatsError, CoinStatsErrorCode
from coinstats.models.timeframe import Timeframe

DEFAULT_PERIOD_MONTHS = 1
MIN_PERIOD_MONTHS = 1
MAX_PERIOD_MONTHS = 60


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def resolve_timeframe(
    from_date: date | None = None,
    to_date: date | None = None,
    period_months: int | None = None,
    *,
    today: date | None = None,
) -> Timeframe:
    """Turn optional request parameters into a concrete timeframe.

    Explicit dates and ``period_months`` are mutually exclusive. With
    explicit dates ``from_date`` is required and ``to_date`` defaults to
    today. Otherwise the timeframe covers the last ``period_months``
    calendar months (1 by default, at most 60) ending today.

    Args:
        from_date: Explicit start date.
        to_date: Explicit end date.
        period_months: Months to look back from today.
        today: Reference date; defaults to the current UTC date.

    Raises:
        CoinStatsError: ``INVALID_TIMEFRAME`` for ambiguous or out-of-range
            parameters.
    """
    if period_months is not None and (from_date is not None or to_date is not None):
        raise CoinStatsError(
            "Cannot use periodMonths together with explicit fromDate/toDate",
            code=CoinStatsErrorCode.INVALID_TIMEFRAME,
        )

    today = today or utc_today()

    if from_date is not None or to_date is not None:
        if from_date is None:
            raise CoinStatsError(
                "fromDate must be provided if toDate is specified",
                code=CoinStatsErrorCode.INVALID_TIMEFRAME,
            )
        resolved_to = to_date if to_date is not None else today
        if from_date > resolved_to:
            raise CoinStatsError(
                f"fromDate {from_date} cannot be after toDate {resolved_to}",
                code=CoinStatsErrorCode.INVALID_TIMEFRAME,
            )
        return Timeframe(from_date, resolved_to)

    months = DEFAULT_PERIOD_MONTHS if period_months is None else period_months
    if (
        isinstance(months, bool)
        or not isinstance(months, int)
        or not MIN_PERIOD_MONTHS <= months <= MAX_PERIOD_MONTHS
    ):
        raise CoinStatsError(
            f"periodMonths must be between {MIN_PERIOD_MONTHS} and "
            f"{MAX_PERIOD_MONTHS}, got {months!r}",
            code=CoinStatsErrorCode.INVALID_TIMEFRAME,
        )

    return Timeframe(today - relativedelta(months=months), today)
