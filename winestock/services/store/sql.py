"""SQLAlchemy-backed wine store."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from winestock.errors import DuplicateIdError
from winestock.models import WineRecord
from winestock.models.tables import WineRow
from winestock.services.store.base import WineStore

logger = logging.getLogger(__name__)


def _to_record(row: WineRow) -> WineRecord:
    return WineRecord(
        id=row.id,
        name=row.name,
        country_code=row.country_code,
        vintage=row.vintage,
        price=row.price,
        quantity=row.quantity,
    )


class SqlWineStore(WineStore):
    """Wine store persisting one row per record in the ``wines`` table.

    Each call runs in its own transaction.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def save(self, record: WineRecord) -> WineRecord:
        try:
            with self._session_factory.begin() as session:
                session.add(WineRow(**record.model_dump()))
        except IntegrityError as e:
            logger.debug("Insert of wine %s rejected: %s", record.id, e)
            raise DuplicateIdError(record.id) from e
        return record

    def find_by_id(self, wine_id: str) -> WineRecord | None:
        with self._session_factory() as session:
            row = session.get(WineRow, wine_id)
            return _to_record(row) if row is not None else None

    def update(self, record: WineRecord) -> WineRecord:
        with self._session_factory.begin() as session:
            session.merge(WineRow(**record.model_dump()))
        return record

    def delete(self, wine_id: str) -> None:
        with self._session_factory.begin() as session:
            session.execute(delete(WineRow).where(WineRow.id == wine_id))

    def find_all(self) -> list[WineRecord]:
        with self._session_factory() as session:
            rows = session.scalars(select(WineRow).order_by(WineRow.name, WineRow.vintage))
            return [_to_record(row) for row in rows]
