"""CSV price source: one ``{SYMBOL}_values.csv`` file per symbol.

Expected columns: ``timestamp`` (epoch ms), ``symbol``, ``price`` (USD).
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path

import pandas as pd

from coinstats.errors import CoinStatsError, CoinStatsErrorCode
from coinstats.models.price_point import PricePoint
from coinstats.sources.base import BasePriceSource

logger = logging.getLogger(__name__)

CSV_SUFFIX = "_values.csv"
REQUIRED_COLUMNS = ("timestamp", "price")


class CsvPriceSource(BasePriceSource):
    """Read price histories from a directory of CSV files."""

    def __init__(self, directory: Path | str = "prices") -> None:
        self.directory = Path(directory)

    def _file_path(self, symbol: str) -> Path:
        return self.directory / f"{symbol.upper()}{CSV_SUFFIX}"

    def fetch_history(self, symbol: str) -> list[PricePoint]:
        fp = self._file_path(symbol)
        if not fp.exists():
            raise CoinStatsError(
                f"CSV file not found: {fp}",
                code=CoinStatsErrorCode.SOURCE_UNAVAILABLE,
            )

        try:
            # Prices stay strings so Decimal sees the exact text.
            df = pd.read_csv(fp, dtype={"price": str}, skip_blank_lines=True)
        except (OSError, ValueError, pd.errors.ParserError) as e:
            # EmptyDataError is a ValueError subclass
            raise CoinStatsError(
                f"Unreadable CSV file {fp}: {e}",
                code=CoinStatsErrorCode.SOURCE_UNAVAILABLE,
            ) from e

        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise CoinStatsError(
                f"CSV file {fp} is missing columns: {missing}",
                code=CoinStatsErrorCode.SOURCE_UNAVAILABLE,
            )

        return self._df_to_points(df, fp)

    def available_symbols(self) -> list[str]:
        if not self.directory.is_dir():
            return []
        names = (
            f.name[: -len(CSV_SUFFIX)].strip().upper()
            for f in self.directory.glob(f"*{CSV_SUFFIX}")
        )
        return sorted(name for name in names if name)

    # ---- helpers ----

    @staticmethod
    def _df_to_points(df: pd.DataFrame, fp: Path) -> list[PricePoint]:
        points: list[PricePoint] = []
        for row in df.itertuples(index=False):
            try:
                points.append(PricePoint(
                    timestamp=int(row.timestamp),
                    price=Decimal(str(row.price).strip()),
                ))
            except (ValueError, TypeError, InvalidOperation) as e:
                raise CoinStatsError(
                    f"Malformed row in {fp}: {e}",
                    code=CoinStatsErrorCode.SOURCE_UNAVAILABLE,
                ) from e
        logger.debug("Parsed %d rows from %s", len(points), fp)
        return points
