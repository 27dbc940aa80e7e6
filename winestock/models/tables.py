"""SQLAlchemy table mappings for persisted inventory state."""

from datetime import datetime

from sqlalchemy import DateTime, Enum, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from winestock.database import Base
from winestock.models.history import HistoryType


class WineRow(Base):
    """One row per WineRecord, keyed by its id."""

    __tablename__ = "wines"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    country_code: Mapped[str] = mapped_column(String(2), nullable=False, index=True)
    vintage: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<WineRow(id={self.id}, name={self.name}, quantity={self.quantity})>"


class HistoryRow(Base):
    """Append-only history entry row.

    ``seq`` preserves insertion order since timestamps are not unique.
    ``wine_id`` is a back-reference without a FOREIGN KEY constraint since
    entries outlive the wines they describe.
    """

    __tablename__ = "inventory_history"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(64), nullable=False, unique=True, index=True)
    wine_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    history_type: Mapped[HistoryType] = mapped_column(
        Enum(HistoryType),
        nullable=False,
        index=True,
    )
    quantity_changed: Mapped[int] = mapped_column(Integer, nullable=False)
    modified_by: Mapped[str] = mapped_column(String(255), nullable=False, default="", index=True)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"<HistoryRow(id={self.id}, type={self.history_type}, quantity={self.quantity_changed})>"
