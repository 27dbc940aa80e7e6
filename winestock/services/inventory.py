"""Inventory mutation core.

Registers, deletes, stocks in and stocks out wines. Every mutation runs
under one process-wide lock acquired with a bounded wait, writes exactly one
history entry, and store/retrieve finish with a low-stock check.
"""

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from winestock.errors import (
    DuplicateWineError,
    InvalidQuantityError,
    NotEnoughStockError,
    WineNotFoundError,
)
from winestock.models import HistoryEntry, HistoryType, WineRecord
from winestock.schemas.history import HistoryFilter
from winestock.schemas.search import WineFilter, find_wines_by_filter
from winestock.services.alerts.base import AlertSink
from winestock.services.history.base import IdGenerator, HistoryLedger
from winestock.services.low_stock import CheckLowStockUseCase
from winestock.services.store.base import WineStore

if TYPE_CHECKING:
    from winestock.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_LOCK_TIMEOUT = 1.0


class InventoryService:
    """Lock-guarded inventory operations over a wine store and history ledger.

    Mutations return True when applied and False when the lock could not be
    acquired within ``lock_timeout`` seconds; callers may retry on False.
    Domain rule violations raise ``InventoryError`` subclasses and leave the
    store and ledger untouched. The store change is written first and is
    reverted if the history write then fails, so a mutation either lands
    with its history entry or not at all.
    """

    def __init__(
        self,
        wine_store: WineStore,
        history: HistoryLedger,
        low_stock: CheckLowStockUseCase,
        lock_timeout: float = DEFAULT_LOCK_TIMEOUT,
        id_generator: IdGenerator | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            wine_store: Store holding the wine records.
            history: Ledger receiving one entry per mutation.
            low_stock: Use case run after store and retrieve.
            lock_timeout: Seconds to wait for the mutation lock.
            id_generator: Optional generator for history entry ids.
        """
        self.wine_store = wine_store
        self.history = history
        self.low_stock = low_stock
        self.lock_timeout = lock_timeout
        self._id_generator = id_generator
        self._lock = threading.Lock()

    def _run_locked(self, operation: str, wine_id: str, block: Callable[[], None]) -> bool:
        if not self._lock.acquire(timeout=self.lock_timeout):
            logger.warning(
                "%s of wine %s not applied: lock not acquired within %.2fs",
                operation,
                wine_id,
                self.lock_timeout,
            )
            return False
        try:
            block()
        finally:
            self._lock.release()
        return True

    def _get_existing(self, wine_id: str) -> WineRecord:
        wine = self.wine_store.find_by_id(wine_id)
        if wine is None:
            raise WineNotFoundError(wine_id)
        return wine

    def _log(self, wine_id: str, history_type: HistoryType, quantity: int, modified_by: str) -> None:
        self.history.log_change(
            wine_id=wine_id,
            history_type=history_type,
            quantity_changed=quantity,
            modified_by=modified_by,
            id_generator=self._id_generator,
        )

    def _log_or_revert(
        self,
        revert: Callable[[], object],
        wine_id: str,
        history_type: HistoryType,
        quantity: int,
        modified_by: str,
    ) -> None:
        try:
            self._log(wine_id, history_type, quantity, modified_by)
        except Exception:
            logger.error("History write for wine %s failed, reverting store change", wine_id)
            revert()
            raise

    def register(self, wine: WineRecord, modified_by: str = "") -> bool:
        """Register a new wine; its initial quantity is logged as STOCK_IN.

        Raises:
            DuplicateWineError: If a wine with the same id is registered.
        """

        def apply() -> None:
            if self.wine_store.find_by_id(wine.id) is not None:
                raise DuplicateWineError(wine.id)
            self.wine_store.save(wine)
            self._log_or_revert(
                lambda: self.wine_store.delete(wine.id),
                wine.id,
                HistoryType.STOCK_IN,
                wine.quantity,
                modified_by,
            )
            logger.info("Registered wine %s with %d bottles", wine.id, wine.quantity)

        return self._run_locked("Register", wine.id, apply)

    def delete(self, wine_id: str, modified_by: str = "") -> bool:
        """Delete a wine; its remaining quantity is logged as STOCK_OUT.

        Raises:
            WineNotFoundError: If the wine does not exist.
        """

        def apply() -> None:
            wine = self._get_existing(wine_id)
            self.wine_store.delete(wine_id)
            self._log_or_revert(
                lambda: self.wine_store.save(wine),
                wine_id,
                HistoryType.STOCK_OUT,
                wine.quantity,
                modified_by,
            )
            logger.info("Deleted wine %s (%d bottles removed)", wine_id, wine.quantity)

        return self._run_locked("Delete", wine_id, apply)

    def store(self, wine_id: str, quantity: int, modified_by: str = "") -> bool:
        """Add bottles to a wine's stock.

        Raises:
            InvalidQuantityError: If quantity is less than 1.
            WineNotFoundError: If the wine does not exist.
        """
        if quantity < 1:
            raise InvalidQuantityError(quantity)

        def apply() -> None:
            wine = self._get_existing(wine_id)
            new_quantity = wine.quantity + quantity
            self.wine_store.update(wine.with_quantity(new_quantity))
            self._log_or_revert(
                lambda: self.wine_store.update(wine),
                wine_id,
                HistoryType.STOCK_IN,
                quantity,
                modified_by,
            )
            logger.info("Stored %d bottles of wine %s (now %d)", quantity, wine_id, new_quantity)
            self.low_stock.execute(wine_id)

        return self._run_locked("Store", wine_id, apply)

    def retrieve(self, wine_id: str, quantity: int, modified_by: str = "") -> bool:
        """Remove bottles from a wine's stock.

        Raises:
            InvalidQuantityError: If quantity is less than 1.
            WineNotFoundError: If the wine does not exist.
            NotEnoughStockError: If fewer than ``quantity`` bottles are left.
        """
        if quantity < 1:
            raise InvalidQuantityError(quantity)

        def apply() -> None:
            wine = self._get_existing(wine_id)
            new_quantity = wine.quantity - quantity
            if new_quantity < 0:
                raise NotEnoughStockError(stock_left=wine.quantity, requested=quantity)
            self.wine_store.update(wine.with_quantity(new_quantity))
            self._log_or_revert(
                lambda: self.wine_store.update(wine),
                wine_id,
                HistoryType.STOCK_OUT,
                quantity,
                modified_by,
            )
            logger.info("Retrieved %d bottles of wine %s (now %d)", quantity, wine_id, new_quantity)
            self.low_stock.execute(wine_id)

        return self._run_locked("Retrieve", wine_id, apply)

    def get_all(self) -> list[WineRecord]:
        """List all wines. Not serialized with concurrent mutations."""
        return self.wine_store.find_all()

    def get_wine(self, wine_id: str) -> WineRecord | None:
        return self.wine_store.find_by_id(wine_id)

    def search(self, *filters: WineFilter) -> list[WineRecord]:
        """Find wines matching every filter."""
        return find_wines_by_filter(self.get_all(), *filters)

    def find_low_stock(self, threshold: int | None = None) -> list[WineRecord]:
        """List wines at or below the threshold (default: the alert threshold)."""
        if threshold is None:
            threshold = self.low_stock.low_stock_threshold
        return [wine for wine in self.get_all() if wine.quantity <= threshold]

    def get_history(self, *filters: HistoryFilter) -> list[HistoryEntry]:
        """Query the history ledger; no filters returns every entry."""
        return self.history.get_histories_by_filter(*filters)


def create_inventory_service(
    settings: "Settings | None" = None,
    alert_sink: AlertSink | None = None,
) -> InventoryService:
    """Build an inventory service wired to the configured backends.

    Args:
        settings: Optional settings. Defaults to the global settings.
        alert_sink: Optional alert sink. Defaults to the configured backend.

    Returns:
        Ready-to-use InventoryService.
    """
    from winestock.services.alerts.base import get_alert_sink

    if settings is None:
        from winestock.config import get_settings

        settings = get_settings()

    if settings.storage_backend == "sqlite":
        from winestock.database import create_db_engine, get_session_factory, init_db
        from winestock.services.history.sql import SqlHistoryLedger
        from winestock.services.store.sql import SqlWineStore

        db_path = settings.database_path
        if db_path is not None:
            db_path.parent.mkdir(parents=True, exist_ok=True)

        engine = create_db_engine(settings.database_url, echo=settings.echo_sql)
        init_db(engine)
        session_factory = get_session_factory(engine)
        wine_store: WineStore = SqlWineStore(session_factory)
        history: HistoryLedger = SqlHistoryLedger(session_factory)
        logger.info("Using SQL storage at %s", settings.database_url)
    else:
        from winestock.services.history.memory import InMemoryHistoryLedger
        from winestock.services.store.memory import InMemoryWineStore

        wine_store = InMemoryWineStore()
        history = InMemoryHistoryLedger()
        logger.info("Using in-memory storage (data is lost on exit)")

    low_stock = CheckLowStockUseCase(
        wine_store,
        alert_sink or get_alert_sink(settings),
        low_stock_threshold=settings.low_stock_threshold,
    )
    return InventoryService(
        wine_store,
        history,
        low_stock,
        lock_timeout=settings.lock_timeout_seconds,
    )
