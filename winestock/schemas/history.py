"""Filters for querying the history ledger."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from winestock.models.history import HistoryEntry, HistoryType


class HistoryFilter(BaseModel):
    """Predicate on a single HistoryEntry field.

    Filters can be built positionally, e.g. ``ModifiedByFilter("alice")``.
    """

    model_config = ConfigDict(frozen=True)

    field: ClassVar[str]
    value: Any

    def __init__(self, value: Any = None, /, **data: Any) -> None:
        if value is not None:
            data["value"] = value
        super().__init__(**data)

    def matches(self, entry: HistoryEntry) -> bool:
        """Check whether the entry satisfies this filter."""
        return getattr(entry, self.field) == self.value


class EntryIdFilter(HistoryFilter):
    field: ClassVar[str] = "id"
    value: str


class HistoryTypeFilter(HistoryFilter):
    field: ClassVar[str] = "history_type"
    value: HistoryType


class WineIdFilter(HistoryFilter):
    field: ClassVar[str] = "wine_id"
    value: str


class QuantityChangedFilter(HistoryFilter):
    field: ClassVar[str] = "quantity_changed"
    value: int


class ModifiedByFilter(HistoryFilter):
    field: ClassVar[str] = "modified_by"
    value: str


def apply_history_filters(
    entries: list[HistoryEntry], filters: tuple[HistoryFilter, ...]
) -> list[HistoryEntry]:
    """Keep the entries that satisfy every filter, preserving order.

    With no filters every entry is returned.
    """
    return [entry for entry in entries if all(f.matches(entry) for f in filters)]
