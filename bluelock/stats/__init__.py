"""Classification and derived statistics."""

from bluelock.stats.classify import EGO_TIERS, EgoTier, classify, ego_color, ego_label
from bluelock.stats.derived import (
    STREAK_MIN_INTENSITY,
    StatsSummary,
    average_ego,
    average_loss,
    average_win,
    capital_remaining,
    category_breakdown,
    drill_streak,
    ego_trend,
    progress_percent,
    summarize,
    total_pnl,
    win_rate,
)

__all__ = [
    "EGO_TIERS",
    "EgoTier",
    "classify",
    "ego_color",
    "ego_label",
    "STREAK_MIN_INTENSITY",
    "StatsSummary",
    "average_ego",
    "average_loss",
    "average_win",
    "capital_remaining",
    "category_breakdown",
    "drill_streak",
    "ego_trend",
    "progress_percent",
    "summarize",
    "total_pnl",
    "win_rate",
]
