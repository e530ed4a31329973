"""Data models for Blue Lock Terminal."""

from bluelock.models.ego import EgoEntry
from bluelock.models.trade import TRADE_RESULTS, TradeEntry, TradeResult
from bluelock.models.drill import DRILL_CATEGORIES, DrillCategory, DrillEntry
from bluelock.models.settings import Settings

__all__ = [
    "EgoEntry",
    "TradeEntry",
    "TradeResult",
    "TRADE_RESULTS",
    "DrillEntry",
    "DrillCategory",
    "DRILL_CATEGORIES",
    "Settings",
]
