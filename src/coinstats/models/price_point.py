"""Price point data model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import ClassVar


@dataclass(frozen=True)
class PricePoint:
    """Single USD price observation.

    Attributes:
        timestamp: Epoch milliseconds (UTC) when the price was recorded.
        price: Price in USD.
    """

    CURRENCY: ClassVar[str] = "USD"

    timestamp: int
    price: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.price, Decimal):
            # str() keeps floats like 0.1 from dragging in binary noise
            value = str(self.price) if isinstance(self.price, float) else self.price
            try:
                object.__setattr__(self, "price", Decimal(value))
            except (InvalidOperation, TypeError) as e:
                raise ValueError(f"Price is not a number: {self.price!r}") from e
        if not self.price.is_finite() or self.price < 0:
            raise ValueError(f"Price must be non-negative, got {self.price}")
        if self.timestamp < 0:
            raise ValueError(f"Timestamp must be non-negative, got {self.timestamp}")

    @property
    def day(self) -> date:
        """UTC calendar date of the observation."""
        return datetime.fromtimestamp(self.timestamp / 1000, tz=timezone.utc).date()
