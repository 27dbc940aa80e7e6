"""In-memory wine store."""

import logging

from winestock.errors import DuplicateIdError
from winestock.models import WineRecord
from winestock.services.store.base import WineStore

logger = logging.getLogger(__name__)


class InMemoryWineStore(WineStore):
    """Wine store backed by a dict keyed by record id.

    Records are immutable, so snapshots can share them safely.
    """

    def __init__(self) -> None:
        self._wines: dict[str, WineRecord] = {}

    def save(self, record: WineRecord) -> WineRecord:
        if record.id in self._wines:
            raise DuplicateIdError(record.id)
        self._wines[record.id] = record
        return record

    def find_by_id(self, wine_id: str) -> WineRecord | None:
        return self._wines.get(wine_id)

    def update(self, record: WineRecord) -> WineRecord:
        self._wines[record.id] = record
        return record

    def delete(self, wine_id: str) -> None:
        self._wines.pop(wine_id, None)

    def find_all(self) -> list[WineRecord]:
        return list(self._wines.copy().values())
