"""EgoEntry data model."""

from datetime import datetime
from pydantic import BaseModel, Field


class EgoEntry(BaseModel):
    """Represents one ego self-rating."""

    id: str = Field(..., min_length=1, description="Unique entry identifier")
    timestamp: datetime = Field(..., alias="date", description="Creation timestamp")
    score: int = Field(..., ge=0, le=100, description="Self-rating score")
    label: str = Field(..., description="Tier label at creation time")
    notes: str = Field(default="", description="User notes")

    model_config = {"frozen": True, "populate_by_name": True}
