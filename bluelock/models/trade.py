"""TradeEntry data model."""

from datetime import datetime
from typing import Literal, get_args
from pydantic import BaseModel, Field

TradeResult = Literal["WIN", "LOSS", "BREAKEVEN"]

TRADE_RESULTS: tuple[str, ...] = get_args(TradeResult)


class TradeEntry(BaseModel):
    """Represents one completed trade.

    The result is chosen by the user and is never reconciled against
    the sign of pnl.
    """

    id: str = Field(..., min_length=1, description="Unique entry identifier")
    timestamp: datetime = Field(..., alias="date", description="Creation timestamp")
    ticker: str = Field(default="", description="Trading symbol")
    entry_price: float = Field(..., alias="entryPrice", ge=0, description="Entry price")
    exit_price: float = Field(..., alias="exitPrice", ge=0, description="Exit price")
    shares: int = Field(..., gt=0, description="Number of shares")
    result: TradeResult = Field(..., description="Trade outcome (WIN/LOSS/BREAKEVEN)")
    pnl: float = Field(..., description="Realized P&L at creation time")
    notes: str = Field(default="", description="User notes")

    model_config = {"frozen": True, "populate_by_name": True}
