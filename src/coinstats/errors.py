"""Coin stats error types."""

from __future__ import annotations

from enum import Enum


class CoinStatsErrorCode(Enum):
    """Error classification codes."""

    NOT_FOUND = "not_found"
    INVALID_TIMEFRAME = "invalid_timeframe"
    INVALID_SORT = "invalid_sort"
    INVALID_PAGINATION = "invalid_pagination"
    NO_DATA = "no_data"
    SOURCE_UNAVAILABLE = "source_unavailable"


class CoinStatsError(Exception):
    """Coin stats exception with error code.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
    """

    def __init__(
        self,
        message: str,
        code: CoinStatsErrorCode = CoinStatsErrorCode.NO_DATA,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
