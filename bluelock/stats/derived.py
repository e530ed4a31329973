"""Derived statistics over the record collections.

All functions are pure and recomputed on every view; nothing here is
cached or persisted.
"""

import math
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from bluelock.models import DRILL_CATEGORIES, DrillEntry, EgoEntry, Settings, TradeEntry

STREAK_MIN_INTENSITY = 5


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return int(math.floor(value + 0.5))


def latest_ego(entries: Sequence[EgoEntry]) -> Optional[EgoEntry]:
    """Get the most recently added ego entry, if any."""
    return entries[-1] if entries else None


def previous_ego(entries: Sequence[EgoEntry]) -> Optional[EgoEntry]:
    """Get the ego entry added before the latest one, if any."""
    return entries[-2] if len(entries) > 1 else None


def ego_trend(entries: Sequence[EgoEntry]) -> int:
    """Calculate score change between the last two ego entries.

    Args:
        entries: Ego entries in insertion order.

    Returns:
        latest.score - previous.score, or 0 with fewer than two entries.
    """
    if len(entries) < 2:
        return 0
    return entries[-1].score - entries[-2].score


def average_ego(entries: Sequence[EgoEntry]) -> int:
    """Calculate the mean ego score, rounded. 0 if no entries."""
    if not entries:
        return 0
    return round_half_up(sum(e.score for e in entries) / len(entries))


def count_results(trades: Sequence[TradeEntry], result: str) -> int:
    """Count trades tagged with the given result."""
    return sum(1 for t in trades if t.result == result)


def win_rate(trades: Sequence[TradeEntry]) -> int:
    """Calculate percentage of trades tagged WIN, rounded. 0 if no trades."""
    if not trades:
        return 0
    return round_half_up(count_results(trades, "WIN") / len(trades) * 100)


def total_pnl(trades: Sequence[TradeEntry]) -> float:
    """Sum pnl across all trades regardless of result."""
    return sum((t.pnl for t in trades), 0.0)


def average_win(trades: Sequence[TradeEntry]) -> float:
    """Mean pnl over WIN trades. 0 if there are none."""
    wins = [t.pnl for t in trades if t.result == "WIN"]
    if not wins:
        return 0.0
    return sum(wins) / len(wins)


def average_loss(trades: Sequence[TradeEntry]) -> float:
    """Absolute value of the mean pnl over LOSS trades. 0 if there are none.

    Losses are averaged with their signs first, so a LOSS trade with a
    positive pnl offsets the others instead of adding to them.
    """
    losses = [t.pnl for t in trades if t.result == "LOSS"]
    if not losses:
        return 0.0
    return abs(sum(losses) / len(losses))


def drill_streak(
    drills: Sequence[DrillEntry], min_intensity: int = STREAK_MIN_INTENSITY
) -> int:
    """Count consecutive qualifying drills, newest first.

    Counts entries, not calendar days: several drills on one day each
    count, and skipped days do not break the streak.

    Args:
        drills: Drill entries in insertion order.
        min_intensity: Minimum intensity for a drill to qualify.

    Returns:
        Length of the trailing run of drills with intensity >= min_intensity.
    """
    count = 0
    for drill in reversed(drills):
        if drill.intensity < min_intensity:
            break
        count += 1
    return count


def progress_percent(settings: Settings) -> float:
    """Calculate progress from starting to target capital, clamped to 0-100.

    When target equals starting capital there is no range to measure, so
    progress is 100 once current capital reaches the target and 0 before.
    """
    span = settings.target_capital - settings.starting_capital
    if span == 0:
        return 100.0 if settings.current_capital >= settings.target_capital else 0.0
    percent = (settings.current_capital - settings.starting_capital) / span * 100
    return min(100.0, max(0.0, percent))


def capital_remaining(settings: Settings) -> float:
    """Amount still needed to reach the target capital."""
    return settings.target_capital - settings.current_capital


def category_breakdown(drills: Sequence[DrillEntry]) -> dict[str, int]:
    """Count drills per category. Every category is present."""
    counts = {category: 0 for category in DRILL_CATEGORIES}
    for drill in drills:
        counts[drill.category] = counts.get(drill.category, 0) + 1
    return counts


class StatsSummary(BaseModel):
    """Every derived value for one view of the store."""

    latest_ego: Optional[EgoEntry] = Field(default=None, description="Latest ego entry")
    previous_ego: Optional[EgoEntry] = Field(default=None, description="Previous ego entry")
    ego_trend: int = Field(default=0, description="Latest minus previous score")
    average_ego: int = Field(default=0, description="Mean ego score")
    ego_count: int = Field(default=0, ge=0, description="Number of ego entries")
    trade_count: int = Field(default=0, ge=0, description="Number of trades")
    wins: int = Field(default=0, ge=0, description="Trades tagged WIN")
    losses: int = Field(default=0, ge=0, description="Trades tagged LOSS")
    win_rate: int = Field(default=0, ge=0, le=100, description="Win rate percentage")
    total_pnl: float = Field(default=0.0, description="Total P&L")
    average_win: float = Field(default=0.0, description="Mean P&L of wins")
    average_loss: float = Field(default=0.0, ge=0, description="Mean loss magnitude")
    drill_count: int = Field(default=0, ge=0, description="Number of drills")
    streak: int = Field(default=0, ge=0, description="Trailing qualifying drill count")
    progress_percent: float = Field(default=0.0, ge=0, le=100, description="Capital goal progress")
    capital_remaining: float = Field(default=0.0, description="Capital still needed")
    categories: dict[str, int] = Field(default_factory=dict, description="Drills per category")

    model_config = {"frozen": True}


def summarize(
    ego_entries: Sequence[EgoEntry],
    trades: Sequence[TradeEntry],
    drills: Sequence[DrillEntry],
    settings: Settings,
) -> StatsSummary:
    """Compute all derived statistics from a store snapshot.

    Args:
        ego_entries: Ego entries in insertion order.
        trades: Trades in insertion order.
        drills: Drills in insertion order.
        settings: Current settings record.

    Returns:
        StatsSummary with every derived value.
    """
    return StatsSummary(
        latest_ego=latest_ego(ego_entries),
        previous_ego=previous_ego(ego_entries),
        ego_trend=ego_trend(ego_entries),
        average_ego=average_ego(ego_entries),
        ego_count=len(ego_entries),
        trade_count=len(trades),
        wins=count_results(trades, "WIN"),
        losses=count_results(trades, "LOSS"),
        win_rate=win_rate(trades),
        total_pnl=total_pnl(trades),
        average_win=average_win(trades),
        average_loss=average_loss(trades),
        drill_count=len(drills),
        streak=drill_streak(drills),
        progress_percent=progress_percent(settings),
        capital_remaining=capital_remaining(settings),
        categories=category_breakdown(drills),
    )
