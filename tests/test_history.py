"""Tests for history ledger backends."""

from datetime import timedelta, timezone

import pytest

from winestock.errors import DuplicateIdError, ErrorKind
from winestock.models import HistoryType
from winestock.schemas import (
    EntryIdFilter,
    HistoryTypeFilter,
    ModifiedByFilter,
    QuantityChangedFilter,
    WineIdFilter,
)
from winestock.services.history import SqlHistoryLedger


@pytest.fixture
def populated_ledger(any_ledger, id_generator, clock):
    """Ledger with entries from two actors over two wines."""
    rows = [
        ("w1", HistoryType.STOCK_IN, 10, "alice"),
        ("w1", HistoryType.STOCK_OUT, 3, "bob"),
        ("w2", HistoryType.STOCK_IN, 3, "alice"),
        ("w2", HistoryType.STOCK_OUT, 1, "alice"),
        ("w1", HistoryType.STOCK_IN, 5, "bob"),
    ]
    for wine_id, history_type, quantity, actor in rows:
        any_ledger.log_change(wine_id, history_type, quantity, actor, id_generator=id_generator)
        clock.advance()
    return any_ledger


class TestLogChange:
    """Tests for appending entries."""

    def test_log_change_appends_entry(self, any_ledger, clock):
        entry = any_ledger.log_change(
            "w1", HistoryType.STOCK_IN, 4, "alice", id_generator=lambda: "fixed-id"
        )

        assert entry.id == "fixed-id"
        assert entry.timestamp == clock.now
        assert any_ledger.get_all_histories() == [entry]

    def test_default_ids_are_unique(self, any_ledger):
        for _ in range(3):
            any_ledger.log_change("w1", HistoryType.STOCK_IN, 1)

        ids = [e.id for e in any_ledger.get_all_histories()]
        assert len(set(ids)) == 3
        assert all(e.modified_by == "" for e in any_ledger.get_all_histories())

    def test_insertion_order_preserved(self, populated_ledger):
        entries = populated_ledger.get_all_histories()
        assert [e.id for e in entries] == ["h-1", "h-2", "h-3", "h-4", "h-5"]

    def test_timestamps_never_decrease(self, any_ledger, clock):
        first = any_ledger.log_change("w1", HistoryType.STOCK_IN, 1)
        clock.advance(-60)
        second = any_ledger.log_change("w1", HistoryType.STOCK_IN, 1)

        assert second.timestamp == first.timestamp
        stored = [e.timestamp for e in any_ledger.get_all_histories()]
        assert stored == sorted(stored)

    def test_duplicate_entry_id_rejected(self, any_ledger):
        """Both backends refuse a second entry with an existing id."""
        first = any_ledger.log_change("w1", HistoryType.STOCK_IN, 4, id_generator=lambda: "same-id")

        with pytest.raises(DuplicateIdError) as exc_info:
            any_ledger.log_change("w2", HistoryType.STOCK_IN, 2, id_generator=lambda: "same-id")

        assert exc_info.value.kind == ErrorKind.DUPLICATE_ID
        assert any_ledger.get_all_histories() == [first]

    def test_ledger_usable_after_rejected_entry(self, any_ledger):
        any_ledger.log_change("w1", HistoryType.STOCK_IN, 1, id_generator=lambda: "h-1")
        with pytest.raises(DuplicateIdError):
            any_ledger.log_change("w1", HistoryType.STOCK_IN, 1, id_generator=lambda: "h-1")

        any_ledger.log_change("w1", HistoryType.STOCK_OUT, 1, id_generator=lambda: "h-2")

        assert [e.id for e in any_ledger.get_all_histories()] == ["h-1", "h-2"]

    def test_naive_clock_values_taken_as_utc(self, any_ledger, clock):
        any_ledger.log_change("w1", HistoryType.STOCK_IN, 1)
        clock.now = clock.now.replace(tzinfo=None) + timedelta(minutes=1)

        entry = any_ledger.log_change("w1", HistoryType.STOCK_IN, 1)

        assert entry.timestamp == clock.now.replace(tzinfo=timezone.utc)
        assert entry.timestamp.tzinfo == timezone.utc

    def test_returned_entries_are_copies(self, ledger):
        ledger.log_change("w1", HistoryType.STOCK_IN, 1)

        ledger.get_all_histories().clear()

        assert len(ledger.get_all_histories()) == 1


class TestFilters:
    """Tests for filtered history queries."""

    def test_filters_intersect(self, populated_ledger):
        entries = populated_ledger.get_histories_by_filter(
            HistoryTypeFilter(HistoryType.STOCK_IN), ModifiedByFilter("alice")
        )
        assert [e.id for e in entries] == ["h-1", "h-3"]

    def test_single_filters(self, populated_ledger):
        assert [e.id for e in populated_ledger.get_histories_by_filter(WineIdFilter("w2"))] == [
            "h-3",
            "h-4",
        ]
        assert [e.id for e in populated_ledger.get_histories_by_filter(EntryIdFilter("h-2"))] == [
            "h-2"
        ]
        assert [
            e.id for e in populated_ledger.get_histories_by_filter(QuantityChangedFilter(3))
        ] == ["h-2", "h-3"]

    def test_three_way_intersection(self, populated_ledger):
        entries = populated_ledger.get_histories_by_filter(
            WineIdFilter("w1"), ModifiedByFilter("bob"), HistoryTypeFilter("STOCK_IN")
        )
        assert [e.id for e in entries] == ["h-5"]

    def test_disjoint_filters_return_empty(self, populated_ledger):
        entries = populated_ledger.get_histories_by_filter(
            WineIdFilter("w2"), ModifiedByFilter("bob")
        )
        assert entries == []

    def test_no_filters_returns_everything(self, populated_ledger):
        assert populated_ledger.get_histories_by_filter() == populated_ledger.get_all_histories()

    def test_filter_keyword_construction(self):
        assert ModifiedByFilter(value="alice") == ModifiedByFilter("alice")
        assert HistoryTypeFilter("STOCK_OUT").value is HistoryType.STOCK_OUT


class TestSqlHistoryLedger:
    """SQL-specific ledger behaviour."""

    def test_entries_are_timezone_aware(self, sql_ledger):
        sql_ledger.log_change("w1", HistoryType.STOCK_IN, 1)
        assert sql_ledger.get_all_histories()[0].timestamp.tzinfo == timezone.utc

    def test_new_ledger_resumes_last_timestamp(self, session_factory, clock):
        SqlHistoryLedger(session_factory, clock).log_change("w1", HistoryType.STOCK_IN, 1)
        later = clock.now

        clock.advance(-3600)
        reopened = SqlHistoryLedger(session_factory, clock)
        entry = reopened.log_change("w1", HistoryType.STOCK_OUT, 1)

        assert entry.timestamp == later
        assert len(reopened.get_all_histories()) == 2

    def test_resumed_ledger_accepts_naive_clock(self, session_factory, clock):
        SqlHistoryLedger(session_factory, clock).log_change("w1", HistoryType.STOCK_IN, 1)
        naive_later = clock.now.replace(tzinfo=None) + timedelta(seconds=30)

        reopened = SqlHistoryLedger(session_factory, lambda: naive_later)
        entry = reopened.log_change("w1", HistoryType.STOCK_OUT, 1)

        assert entry.timestamp == naive_later.replace(tzinfo=timezone.utc)
        assert reopened.get_all_histories()[-1].timestamp == entry.timestamp
