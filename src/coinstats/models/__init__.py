"""Coin stats models."""

from coinstats.models.page import Page
from coinstats.models.price_point import PricePoint
from coinstats.models.price_series import PriceSeries
from coinstats.models.stats import Stats
from coinstats.models.timeframe import Timeframe

__all__ = [
    "PricePoint",
    "PriceSeries",
    "Timeframe",
    "Stats",
    "Page",
]
