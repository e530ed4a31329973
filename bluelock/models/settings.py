"""Settings data model."""

from typing import Any
from pydantic import BaseModel, Field

DEFAULT_STARTING_CAPITAL = 4705.0
DEFAULT_TARGET_CAPITAL = 10000.0
DEFAULT_WEEKLY_INJECTION = 60.0


class Settings(BaseModel):
    """Capital goal settings. Exactly one instance exists per store."""

    starting_capital: float = Field(
        default=DEFAULT_STARTING_CAPITAL, alias="startingCapital", description="Starting capital"
    )
    target_capital: float = Field(
        default=DEFAULT_TARGET_CAPITAL, alias="targetCapital", description="Capital goal"
    )
    weekly_injection: float = Field(
        default=DEFAULT_WEEKLY_INJECTION, alias="weeklyInjection", description="Weekly deposit"
    )
    current_capital: float = Field(
        default=DEFAULT_STARTING_CAPITAL, alias="currentCapital", description="Current capital"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    def replace(self, **changes: Any) -> "Settings":
        """Return a copy with the given fields (snake_case names) replaced."""
        return Settings.model_validate({**self.model_dump(), **changes})
