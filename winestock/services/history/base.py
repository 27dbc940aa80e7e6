"""Base history ledger interface."""

import uuid
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime, timezone

from winestock.models import HistoryEntry, HistoryType
from winestock.schemas.history import HistoryFilter

IdGenerator = Callable[[], str]
Clock = Callable[[], datetime]


def default_id_generator() -> str:
    """Generate a fresh history entry id."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat a naive datetime as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class HistoryLedger(ABC):
    """Append-only log of stock change events.

    Entries are never mutated or removed once written. Timestamps come from
    the injected clock and never decrease in insertion order, even if the
    clock steps backwards. Naive clock values are taken as UTC.
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        """Initialize the ledger.

        Args:
            clock: Zero-argument callable returning the current time.
        """
        self._clock = clock
        self._last_timestamp: datetime | None = None

    def _next_timestamp(self) -> datetime:
        now = as_utc(self._clock())
        if self._last_timestamp is not None and now < self._last_timestamp:
            now = self._last_timestamp
        return now

    def log_change(
        self,
        wine_id: str,
        history_type: HistoryType,
        quantity_changed: int,
        modified_by: str = "",
        id_generator: IdGenerator | None = None,
    ) -> HistoryEntry:
        """Append one entry to the ledger.

        Args:
            wine_id: Id of the affected wine.
            history_type: Direction of the movement.
            quantity_changed: Number of bottles moved (unsigned).
            modified_by: Actor responsible for the change.
            id_generator: Optional generator for the entry id. Defaults to UUID4.

        Returns:
            The entry that was written.

        Raises:
            DuplicateIdError: If an entry with the generated id exists.
        """
        entry = HistoryEntry(
            id=(id_generator or default_id_generator)(),
            wine_id=wine_id,
            history_type=history_type,
            quantity_changed=quantity_changed,
            modified_by=modified_by,
            timestamp=self._next_timestamp(),
        )
        self._append(entry)
        self._last_timestamp = entry.timestamp
        return entry

    @abstractmethod
    def _append(self, entry: HistoryEntry) -> None:
        """Persist a new entry, raising DuplicateIdError if its id is taken."""

    @abstractmethod
    def get_all_histories(self) -> list[HistoryEntry]:
        """Return every entry in insertion order."""

    @abstractmethod
    def get_histories_by_filter(self, *filters: HistoryFilter) -> list[HistoryEntry]:
        """Return the entries matching every filter, in insertion order.

        With no filters, every entry is returned.
        """
