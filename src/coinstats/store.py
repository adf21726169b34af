"""PriceStore: in-memory catalog of price histories, loaded once."""

from __future__ import annotations

import logging
import threading
from datetime import date, datetime, time, timezone

from coinstats.errors import CoinStatsError, CoinStatsErrorCode
from coinstats.models.price_series import PriceSeries
from coinstats.quality import validate_series
from coinstats.sources.base import BasePriceSource

logger = logging.getLogger(__name__)

MILLIS_PER_DAY = 24 * 60 * 60 * 1000


def start_of_day_millis(day: date) -> int:
    """Epoch milliseconds of 00:00:00.000 UTC on ``day``."""
    midnight = datetime.combine(day, time.min, tzinfo=timezone.utc)
    return int(midnight.timestamp()) * 1000


def end_of_day_millis(day: date) -> int:
    """Epoch milliseconds of 23:59:59.999 UTC on ``day``."""
    return start_of_day_millis(day) + MILLIS_PER_DAY - 1


class PriceStore:
    """Per-symbol price histories, read-only once initialized.

    ``initialize`` runs at most once, even when several threads hit a
    fresh store at the same time. After that, lookups take no lock.

    Usage::

        store = PriceStore(CsvPriceSource("prices"), symbols=["BTC", "ETH"])
        store.initialize()
        series = store.get_in_range("btc", date(2022, 1, 1), date(2022, 1, 31))
    """

    def __init__(
        self,
        source: BasePriceSource,
        symbols: list[str] | None = None,
        validate: bool = True,
    ) -> None:
        self.source = source
        self.symbols = symbols
        self.validate = validate
        self._series: dict[str, PriceSeries] = {}
        self._init_lock = threading.Lock()
        self._initialized = threading.Event()

    @property
    def initialized(self) -> bool:
        return self._initialized.is_set()

    # ------------------------------------------------------------ loading

    def initialize(self) -> None:
        """Load every catalog symbol; failing symbols are logged and skipped."""
        if self._initialized.is_set():
            return
        with self._init_lock:
            if self._initialized.is_set():
                return

            symbols = self._catalog_symbols()
            logger.info(
                "Initializing price store from %s with %d symbols",
                type(self.source).__name__, len(symbols),
            )
            for symbol in symbols:
                try:
                    self.load(symbol)
                except CoinStatsError as e:
                    logger.warning("Failed to load prices for %s: %s", symbol, e)
                except Exception as e:
                    logger.warning(
                        "Failed to load prices for %s: %s: %s",
                        symbol, type(e).__name__, e,
                    )

            self._initialized.set()
            logger.info("Price store initialized with %d symbols", len(self._series))

    def load(self, symbol: str) -> PriceSeries:
        """Fetch, check, sort and store one symbol's history.

        Quality problems in the fetched history are logged, not fatal; an
        empty history stays in the catalog and answers queries with
        ``NO_DATA``. Called by ``initialize``; not meant for use once
        readers are live.
        """
        key = symbol.strip().upper()
        if not key:
            raise CoinStatsError(
                "Symbol must not be blank",
                code=CoinStatsErrorCode.SOURCE_UNAVAILABLE,
            )
        fetched = list(self.source.fetch_history(key))

        if self.validate:
            for check in validate_series(fetched).failed_checks:
                logger.warning("Quality check %s failed for %s: %s", check.name, key, check.message)

        points = sorted(fetched, key=lambda p: p.timestamp)
        series = PriceSeries(key, tuple(points))
        self._series[key] = series
        logger.debug("Loaded %d price points for %s", len(series), key)
        return series

    def _catalog_symbols(self) -> list[str]:
        if self.symbols is not None:
            return list(dict.fromkeys(s.strip().upper() for s in self.symbols if s.strip()))
        try:
            return self.source.available_symbols()
        except NotImplementedError:
            logger.warning(
                "%s cannot list symbols and none were configured",
                type(self.source).__name__,
            )
            return []

    # ------------------------------------------------------------ lookups

    def list_symbols(self) -> list[str]:
        """Successfully loaded symbols, in load order."""
        self.initialize()
        return list(self._series)

    def get_all(self, symbol: str) -> PriceSeries:
        """Full history of a symbol (case-insensitive)."""
        self.initialize()
        series = self._series.get(symbol.strip().upper())
        if series is None:
            raise CoinStatsError(
                f"Cryptocurrency not found: {symbol}. Available: {sorted(self._series)}",
                code=CoinStatsErrorCode.NOT_FOUND,
            )
        return series

    def get_in_range(self, symbol: str, from_date: date, to_date: date) -> PriceSeries:
        """History restricted to ``[from_date 00:00, to_date 23:59:59.999]`` UTC.

        An empty series is a valid result.
        """
        series = self.get_all(symbol)
        return series.between(start_of_day_millis(from_date), end_of_day_millis(to_date))
