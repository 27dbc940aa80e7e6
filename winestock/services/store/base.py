"""Base wine store interface."""

from abc import ABC, abstractmethod

from winestock.models import WineRecord


class WineStore(ABC):
    """Keyed collection of wine stock records.

    Stores perform no locking and no history logging; the inventory
    service is responsible for both.
    """

    @abstractmethod
    def save(self, record: WineRecord) -> WineRecord:
        """Insert a new record.

        Raises:
            DuplicateIdError: If a record with the same id already exists.
        """

    @abstractmethod
    def find_by_id(self, wine_id: str) -> WineRecord | None:
        """Look up a record by id, returning None if absent."""

    @abstractmethod
    def update(self, record: WineRecord) -> WineRecord:
        """Replace the record stored under ``record.id``.

        The caller must have verified the record exists.
        """

    @abstractmethod
    def delete(self, wine_id: str) -> None:
        """Remove a record. Deleting an absent id is a no-op."""

    @abstractmethod
    def find_all(self) -> list[WineRecord]:
        """Return a snapshot of all records."""
