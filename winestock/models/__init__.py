"""Domain models for WineStock."""

from winestock.models.history import HistoryEntry, HistoryType
from winestock.models.wine import WineRecord

__all__ = [
    "HistoryEntry",
    "HistoryType",
    "WineRecord",
]
