"""DrillEntry data model."""

from datetime import datetime
from typing import Literal, get_args
from pydantic import BaseModel, Field

DrillCategory = Literal["TRADING", "FITNESS", "SKILL", "MINDSET"]

DRILL_CATEGORIES: tuple[str, ...] = get_args(DrillCategory)


class DrillEntry(BaseModel):
    """Represents one practice session."""

    id: str = Field(..., min_length=1, description="Unique entry identifier")
    timestamp: datetime = Field(..., alias="date", description="Creation timestamp")
    weapon: str = Field(..., min_length=1, description="Skill or activity practiced")
    intensity: int = Field(..., ge=1, le=10, description="Session intensity")
    category: DrillCategory = Field(..., description="Drill category")

    model_config = {"frozen": True, "populate_by_name": True}
