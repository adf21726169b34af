"""Sort specifications of the form ``<field>_<direction>``."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from coinstats.errors import CoinStatsError, CoinStatsErrorCode
from coinstats.models.stats import Stats

DEFAULT_SORT = "normalizedRange_desc"


class SortField(Enum):
    """Stats fields a listing can be ordered by."""

    NORMALIZED_RANGE = "normalizedRange"
    SYMBOL = "symbol"
    MIN = "min"
    MAX = "max"


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"


_SORT_KEYS: dict[SortField, Callable[[Stats], Any]] = {
    SortField.NORMALIZED_RANGE: lambda s: s.normalized_range,
    SortField.SYMBOL: lambda s: s.symbol,
    SortField.MIN: lambda s: s.min.price,
    SortField.MAX: lambda s: s.max.price,
}


def _lookup(enum_cls: type[Enum], raw: str) -> Enum | None:
    wanted = raw.lower()
    for member in enum_cls:
        if member.value.lower() == wanted:
            return member
    return None


@dataclass(frozen=True)
class SortSpec:
    """Validated ``(field, direction)`` pair."""

    field: SortField = SortField.NORMALIZED_RANGE
    direction: SortDirection = SortDirection.DESC

    @classmethod
    def parse(cls, sort_by: str | None) -> SortSpec:
        """Parse ``"normalizedRange_desc"``-style strings, case-insensitively.

        ``None`` or an empty string selects the default ordering.

        Raises:
            CoinStatsError: ``INVALID_SORT`` for malformed strings or unknown
                fields/directions.
        """
        if not sort_by:
            sort_by = DEFAULT_SORT

        parts = sort_by.split("_")
        if len(parts) != 2:
            raise CoinStatsError(
                f"Invalid sort format {sort_by!r}. Expected 'field_direction' "
                f"(e.g., {DEFAULT_SORT})",
                code=CoinStatsErrorCode.INVALID_SORT,
            )

        field = _lookup(SortField, parts[0])
        if field is None:
            raise CoinStatsError(
                f"Invalid sort field: {parts[0]!r}. "
                f"Expected one of {[f.value for f in SortField]}",
                code=CoinStatsErrorCode.INVALID_SORT,
            )
        direction = _lookup(SortDirection, parts[1])
        if direction is None:
            raise CoinStatsError(
                f"Invalid sort direction: {parts[1]!r}. Expected 'asc' or 'desc'",
                code=CoinStatsErrorCode.INVALID_SORT,
            )
        return cls(field, direction)  # type: ignore[arg-type]

    def apply(self, stats: Iterable[Stats]) -> list[Stats]:
        """Return ``stats`` sorted; equal keys keep their input order."""
        return sorted(
            stats,
            key=_SORT_KEYS[self.field],
            reverse=self.direction is SortDirection.DESC,
        )

    def __str__(self) -> str:
        return f"{self.field.value}_{self.direction.value}"
