"""SQLAlchemy-backed history ledger."""

import logging
from datetime import timezone

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from winestock.errors import DuplicateIdError
from winestock.models import HistoryEntry
from winestock.models.tables import HistoryRow
from winestock.schemas.history import HistoryFilter
from winestock.services.history.base import Clock, HistoryLedger, as_utc, utc_now

logger = logging.getLogger(__name__)


def _to_entry(row: HistoryRow) -> HistoryEntry:
    return HistoryEntry(
        id=row.id,
        wine_id=row.wine_id,
        history_type=row.history_type,
        quantity_changed=row.quantity_changed,
        modified_by=row.modified_by,
        timestamp=as_utc(row.timestamp),
    )


class SqlHistoryLedger(HistoryLedger):
    """History ledger persisted to the ``inventory_history`` table.

    Timestamps are written in UTC.
    """

    def __init__(self, session_factory: sessionmaker[Session], clock: Clock = utc_now) -> None:
        super().__init__(clock)
        self._session_factory = session_factory
        # Resume the non-decreasing timestamp guarantee across restarts
        with self._session_factory() as session:
            latest = session.scalar(select(func.max(HistoryRow.timestamp)))
        # SQLite drops tzinfo on the way back; stored values are UTC
        self._last_timestamp = as_utc(latest) if latest is not None else None

    def _append(self, entry: HistoryEntry) -> None:
        row = HistoryRow(**entry.model_dump())
        row.timestamp = entry.timestamp.astimezone(timezone.utc)
        try:
            with self._session_factory.begin() as session:
                session.add(row)
        except IntegrityError as e:
            logger.debug("Insert of history entry %s rejected: %s", entry.id, e)
            raise DuplicateIdError(entry.id) from e

    def get_all_histories(self) -> list[HistoryEntry]:
        return self.get_histories_by_filter()

    def get_histories_by_filter(self, *filters: HistoryFilter) -> list[HistoryEntry]:
        stmt = select(HistoryRow)
        for f in filters:
            stmt = stmt.where(getattr(HistoryRow, f.field) == f.value)
        with self._session_factory() as session:
            rows = session.scalars(stmt.order_by(HistoryRow.seq))
            return [_to_entry(row) for row in rows]
