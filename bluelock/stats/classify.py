"""Ego score classification.

Maps a 0-100 self-rating onto seven ordered tiers. Labels are stored on
entries at creation time, so thresholds and labels must stay stable.
"""

from typing import NamedTuple


class EgoTier(NamedTuple):
    """One classification bucket."""

    rank: int
    label: str
    color: str
    upper: int  # inclusive upper bound of the score range


EGO_TIERS: tuple[EgoTier, ...] = (
    EgoTier(1, "DONKEY", "#8B0000", 20),
    EgoTier(2, "HALF-BAKED", "#CD853F", 40),
    EgoTier(3, "PUPPET", "#808080", 55),
    EgoTier(4, "HUNGRY", "#FF8C00", 70),
    EgoTier(5, "EGOIST", "#00F0FF", 85),
    EgoTier(6, "MONSTER", "#00FF7F", 95),
    EgoTier(7, "DEVOUR", "#FFD700", 100),
)


def classify(score: int) -> EgoTier:
    """Get the tier for an ego score.

    Scores above 100 fall into the top tier.

    Args:
        score: Ego score, normally 0-100.

    Returns:
        The matching EgoTier.
    """
    for tier in EGO_TIERS[:-1]:
        if score <= tier.upper:
            return tier
    return EGO_TIERS[-1]


def ego_label(score: int) -> str:
    """Get the display label for an ego score."""
    return classify(score).label


def ego_color(score: int) -> str:
    """Get the hex color for an ego score."""
    return classify(score).color
