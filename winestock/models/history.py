"""Inventory history models."""

import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class HistoryType(str, enum.Enum):
    """Direction of a stock movement."""

    STOCK_IN = "STOCK_IN"
    STOCK_OUT = "STOCK_OUT"


class HistoryEntry(BaseModel):
    """Immutable audit record of one stock change.

    ``quantity_changed`` is always the unsigned number of bottles moved;
    the direction is carried by ``history_type``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    wine_id: str
    history_type: HistoryType
    quantity_changed: int = Field(..., ge=0)
    modified_by: str = ""
    timestamp: datetime
