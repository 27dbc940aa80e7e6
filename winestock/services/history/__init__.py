"""History ledger backends."""

from winestock.services.history.base import HistoryLedger, default_id_generator
from winestock.services.history.memory import InMemoryHistoryLedger
from winestock.services.history.sql import SqlHistoryLedger

__all__ = [
    "HistoryLedger",
    "InMemoryHistoryLedger",
    "SqlHistoryLedger",
    "default_id_generator",
]
