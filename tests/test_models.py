"""Tests for data models."""

from datetime import date
from decimal import Decimal

import pytest

from coinstats.models.page import Page
from coinstats.models.price_point import PricePoint
from coinstats.models.price_series import PriceSeries
from coinstats.models.stats import Stats
from coinstats.models.timeframe import Timeframe
from conftest import ms, point


class TestPricePoint:
    def test_create(self):
        p = PricePoint(timestamp=1641009600000, price=Decimal("46813.21"))
        assert p.price == Decimal("46813.21")
        assert p.CURRENCY == "USD"

    def test_coerces_str_and_float(self):
        assert PricePoint(0, "1.10").price == Decimal("1.10")
        assert PricePoint(0, 0.1).price == Decimal("0.1")
        assert PricePoint(0, 3).price == Decimal(3)

    def test_negative_price_rejected(self):
        with pytest.raises(ValueError):
            PricePoint(timestamp=0, price=Decimal("-0.01"))

    def test_nan_price_rejected(self):
        with pytest.raises(ValueError):
            PricePoint(timestamp=0, price=Decimal("NaN"))

    def test_non_numeric_price_rejected(self):
        with pytest.raises(ValueError):
            PricePoint(timestamp=0, price="abc")  # type: ignore[arg-type]
        with pytest.raises(ValueError):
            PricePoint(timestamp=0, price=None)  # type: ignore[arg-type]

    def test_negative_timestamp_rejected(self):
        with pytest.raises(ValueError):
            PricePoint(timestamp=-1, price=Decimal("1"))

    def test_zero_price_allowed(self):
        assert PricePoint(timestamp=0, price=Decimal("0")).price == 0

    def test_day_is_utc(self):
        assert point(2022, 1, 31, "1", hour=23).day == date(2022, 1, 31)

    def test_frozen(self):
        p = PricePoint(timestamp=0, price=Decimal("1"))
        with pytest.raises(AttributeError):
            p.price = Decimal("2")  # type: ignore[misc]


class TestPriceSeries:
    def test_blank_symbol_rejected(self):
        with pytest.raises(ValueError):
            PriceSeries("  ", ())

    def test_points_become_tuple(self):
        series = PriceSeries("BTC", [point(2022, 1, 1, "1")])  # type: ignore[arg-type]
        assert isinstance(series.points, tuple)
        assert len(series) == 1

    def test_between_is_inclusive(self):
        points = tuple(point(2022, 1, d, str(d)) for d in range(1, 6))
        series = PriceSeries("BTC", points)
        sub = series.between(ms(2022, 1, 2), ms(2022, 1, 4))
        assert [p.price for p in sub] == [Decimal(2), Decimal(3), Decimal(4)]
        assert sub.symbol == "BTC"

    def test_between_empty(self):
        series = PriceSeries("BTC", (point(2022, 1, 1, "1"),))
        assert len(series.between(ms(2023, 1, 1), ms(2023, 2, 1))) == 0


class TestTimeframe:
    def test_reversed_rejected(self):
        with pytest.raises(ValueError):
            Timeframe(date(2022, 2, 1), date(2022, 1, 1))

    def test_single_day(self):
        tf = Timeframe(date(2022, 1, 1), date(2022, 1, 1))
        assert tf.from_date == tf.to_date


class TestStats:
    def _stats(self, **overrides):
        p = point(2022, 1, 1, "1")
        kwargs = dict(
            symbol="BTC", normalized_range=Decimal("0.00"),
            min=p, max=p, oldest=p, newest=p,
            from_date=date(2022, 1, 1), to_date=date(2022, 1, 31),
        )
        kwargs.update(overrides)
        return Stats(**kwargs)

    def test_create(self):
        assert self._stats().symbol == "BTC"

    def test_negative_range_rejected(self):
        with pytest.raises(ValueError):
            self._stats(normalized_range=Decimal("-0.01"))

    def test_blank_symbol_rejected(self):
        with pytest.raises(ValueError):
            self._stats(symbol="")


class TestPage:
    def test_negative_fields_rejected(self):
        with pytest.raises(ValueError):
            Page(items=(), page=-1, size=1, total_elements=0, total_pages=0)

    def test_items_exceeding_size_rejected(self):
        p = point(2022, 1, 1, "1")
        s = Stats("BTC", Decimal("0"), p, p, p, p, date(2022, 1, 1), date(2022, 1, 1))
        with pytest.raises(ValueError):
            Page(items=(s, s), page=0, size=1, total_elements=2, total_pages=2)
