"""Timeframe data model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Timeframe:
    """Inclusive ``[from_date, to_date]`` interval."""

    from_date: date
    to_date: date

    def __post_init__(self) -> None:
        if self.from_date > self.to_date:
            raise ValueError(
                f"Timeframe start {self.from_date} is after end {self.to_date}"
            )
