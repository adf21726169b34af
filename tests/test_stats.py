"""Tests for stats calculation."""

from datetime import date
from decimal import Decimal

import pytest

from coinstats.errors import CoinStatsError, CoinStatsErrorCode
from coinstats.stats import calculate_stats, find_max, find_min, normalized_range
from conftest import point

FROM = date(2022, 1, 1)
TO = date(2022, 1, 31)


class TestNormalizedRange:
    def test_basic(self):
        assert normalized_range(Decimal("100.00"), Decimal("150.00")) == Decimal("0.50")

    def test_two_decimal_places(self):
        assert str(normalized_range(Decimal("3000"), Decimal("3100"))) == "0.03"
        assert str(normalized_range(Decimal("5"), Decimal("5"))) == "0.00"

    def test_round_half_up(self):
        # 0.125 exactly -> 0.13 (banker's rounding would give 0.12)
        assert normalized_range(Decimal("8"), Decimal("9")) == Decimal("0.13")
        # 0.115 exactly -> 0.12
        assert normalized_range(Decimal("200"), Decimal("223")) == Decimal("0.12")

    def test_just_below_half_rounds_down(self):
        # 1/3 = 0.333... -> 0.33
        assert normalized_range(Decimal("3"), Decimal("4")) == Decimal("0.33")

    def test_large_ratio(self):
        assert normalized_range(Decimal("0.01"), Decimal("100")) == Decimal("9999.00")

    def test_zero_min(self):
        for high in (Decimal("0"), Decimal("10")):
            with pytest.raises(CoinStatsError) as exc_info:
                normalized_range(Decimal("0"), high)
            assert exc_info.value.code == CoinStatsErrorCode.NO_DATA

    def test_negative_price(self):
        with pytest.raises(CoinStatsError):
            normalized_range(Decimal("-1"), Decimal("10"))


class TestFindMinMax:
    def test_first_occurrence_wins_ties(self):
        points = [
            point(2022, 1, 1, "5"),
            point(2022, 1, 2, "1"),
            point(2022, 1, 3, "5"),
            point(2022, 1, 4, "1"),
        ]
        assert find_min(points) is points[1]
        assert find_max(points) is points[0]

    def test_empty(self):
        with pytest.raises(CoinStatsError):
            find_min([])
        with pytest.raises(CoinStatsError):
            find_max([])


class TestCalculateStats:
    def test_full_record(self):
        points = [
            point(2022, 1, 1, "120"),
            point(2022, 1, 2, "100"),
            point(2022, 1, 3, "150"),
            point(2022, 1, 4, "130"),
        ]
        stats = calculate_stats("BTC", points, FROM, TO)
        assert stats.symbol == "BTC"
        assert stats.min is points[1]
        assert stats.max is points[2]
        assert stats.oldest is points[0]
        assert stats.newest is points[3]
        assert stats.normalized_range == Decimal("0.50")
        assert (stats.from_date, stats.to_date) == (FROM, TO)

    def test_single_point(self):
        p = point(2022, 1, 1, "42")
        stats = calculate_stats("BTC", [p], FROM, TO)
        assert stats.min is stats.max is stats.oldest is stats.newest is p
        assert stats.normalized_range == Decimal("0.00")

    def test_empty(self):
        with pytest.raises(CoinStatsError) as exc_info:
            calculate_stats("BTC", [], FROM, TO)
        assert exc_info.value.code == CoinStatsErrorCode.NO_DATA

    def test_zero_minimum(self):
        with pytest.raises(CoinStatsError) as exc_info:
            calculate_stats("BTC", [point(2022, 1, 1, "0"), point(2022, 1, 2, "3")], FROM, TO)
        assert exc_info.value.code == CoinStatsErrorCode.NO_DATA
