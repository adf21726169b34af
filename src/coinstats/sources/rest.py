"""Remote price history API source.

Expects ``GET {base_url}/{SYMBOL}/history`` to answer with a JSON array of
``{"timestamp": <epoch ms>, "price": <USD>}`` objects.
"""

from __future__ import annotations

import os
from decimal import Decimal, InvalidOperation
from typing import Any

import requests

from coinstats.errors import CoinStatsError, CoinStatsErrorCode
from coinstats.models.price_point import PricePoint
from coinstats.sources.base import BasePriceSource


class RestPriceSource(BasePriceSource):
    """Fetch price histories over HTTP.

    The base URL falls back to the ``COINSTATS_API_URL`` env var.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        base_url = base_url or os.getenv("COINSTATS_API_URL")
        if not base_url:
            raise CoinStatsError(
                "Price API URL required. Set COINSTATS_API_URL env var or pass base_url.",
                code=CoinStatsErrorCode.SOURCE_UNAVAILABLE,
            )
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_history(self, symbol: str) -> list[PricePoint]:
        url = f"{self.base_url}/{symbol.upper()}/history"
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
            payload = resp.json(parse_float=Decimal)
        except requests.RequestException as e:
            raise CoinStatsError(
                f"Price API request failed for {symbol}: {e}",
                code=CoinStatsErrorCode.SOURCE_UNAVAILABLE,
            ) from e
        except ValueError as e:
            raise CoinStatsError(
                f"Price API returned invalid JSON for {symbol}: {e}",
                code=CoinStatsErrorCode.SOURCE_UNAVAILABLE,
            ) from e

        if not isinstance(payload, list):
            raise CoinStatsError(
                f"Price API returned {type(payload).__name__} for {symbol}, expected a list",
                code=CoinStatsErrorCode.SOURCE_UNAVAILABLE,
            )
        return [self._parse_point(symbol, item) for item in payload]

    @staticmethod
    def _parse_point(symbol: str, item: Any) -> PricePoint:
        try:
            return PricePoint(
                timestamp=int(item["timestamp"]),
                price=Decimal(str(item["price"])),
            )
        except (KeyError, TypeError, ValueError, InvalidOperation) as e:
            raise CoinStatsError(
                f"Malformed price entry for {symbol}: {item!r}",
                code=CoinStatsErrorCode.SOURCE_UNAVAILABLE,
            ) from e
