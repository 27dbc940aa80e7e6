"""Wine store backends."""

from winestock.services.store.base import WineStore
from winestock.services.store.memory import InMemoryWineStore
from winestock.services.store.sql import SqlWineStore

__all__ = [
    "InMemoryWineStore",
    "SqlWineStore",
    "WineStore",
]
