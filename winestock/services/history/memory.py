"""In-memory history ledger."""

from winestock.errors import DuplicateIdError
from winestock.models import HistoryEntry
from winestock.schemas.history import HistoryFilter, apply_history_filters
from winestock.services.history.base import Clock, HistoryLedger, utc_now


class InMemoryHistoryLedger(HistoryLedger):
    """History ledger kept in a list for the lifetime of the process."""

    def __init__(self, clock: Clock = utc_now) -> None:
        super().__init__(clock)
        self._entries: list[HistoryEntry] = []
        self._ids: set[str] = set()

    def _append(self, entry: HistoryEntry) -> None:
        if entry.id in self._ids:
            raise DuplicateIdError(entry.id)
        self._entries.append(entry)
        self._ids.add(entry.id)

    def get_all_histories(self) -> list[HistoryEntry]:
        return list(self._entries)

    def get_histories_by_filter(self, *filters: HistoryFilter) -> list[HistoryEntry]:
        return apply_history_filters(list(self._entries), filters)
