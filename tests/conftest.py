"""Pytest configuration and fixtures for WineStock tests."""

import itertools
from collections.abc import Callable, Generator
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from winestock.database import create_db_engine, get_session_factory, init_db
from winestock.models import WineRecord
from winestock.services.alerts import AlertSink
from winestock.services.history import InMemoryHistoryLedger, SqlHistoryLedger
from winestock.services.inventory import InventoryService
from winestock.services.low_stock import CheckLowStockUseCase
from winestock.services.store import InMemoryWineStore, SqlWineStore

TEST_THRESHOLD = 5


class FakeClock:
    """Controllable clock for deterministic history timestamps."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 1) -> None:
        self.now += timedelta(seconds=seconds)


def build_wine(**overrides) -> WineRecord:
    """Build a WineRecord with sensible defaults."""
    fields = {
        "id": "w1",
        "name": "Chateau Margaux",
        "country_code": "FR",
        "vintage": 2015,
        "price": 450.0,
        "quantity": 10,
    }
    fields.update(overrides)
    return WineRecord(**fields)


@pytest.fixture
def make_wine() -> Callable[..., WineRecord]:
    return build_wine


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def id_generator() -> Callable[[], str]:
    """Sequential history entry ids: h-1, h-2, ..."""
    counter = itertools.count(1)
    return lambda: f"h-{next(counter)}"


@pytest.fixture
def alert_sink() -> MagicMock:
    return MagicMock(spec=AlertSink)


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine with the inventory tables created."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return get_session_factory(engine)


@pytest.fixture
def wine_store() -> InMemoryWineStore:
    return InMemoryWineStore()


@pytest.fixture
def ledger(clock: FakeClock) -> InMemoryHistoryLedger:
    return InMemoryHistoryLedger(clock)


@pytest.fixture
def sql_wine_store(session_factory) -> SqlWineStore:
    return SqlWineStore(session_factory)


@pytest.fixture
def sql_ledger(session_factory, clock: FakeClock) -> SqlHistoryLedger:
    return SqlHistoryLedger(session_factory, clock)


@pytest.fixture(params=["memory", "sql"])
def any_store(request):
    """Each wine store backend."""
    if request.param == "memory":
        return request.getfixturevalue("wine_store")
    return request.getfixturevalue("sql_wine_store")


@pytest.fixture(params=["memory", "sql"])
def any_ledger(request):
    """Each history ledger backend."""
    if request.param == "memory":
        return request.getfixturevalue("ledger")
    return request.getfixturevalue("sql_ledger")


def _build_service(store, ledger, alert_sink, id_generator) -> InventoryService:
    low_stock = CheckLowStockUseCase(store, alert_sink, low_stock_threshold=TEST_THRESHOLD)
    return InventoryService(store, ledger, low_stock, lock_timeout=1.0, id_generator=id_generator)


@pytest.fixture
def service(wine_store, ledger, alert_sink, id_generator) -> InventoryService:
    """Inventory service over in-memory backends."""
    return _build_service(wine_store, ledger, alert_sink, id_generator)


@pytest.fixture
def sql_service(sql_wine_store, sql_ledger, alert_sink, id_generator) -> InventoryService:
    """Inventory service over SQLite backends."""
    return _build_service(sql_wine_store, sql_ledger, alert_sink, id_generator)


@pytest.fixture(params=["memory", "sql"])
def any_service(request) -> InventoryService:
    """Inventory service over each backend pair."""
    if request.param == "memory":
        return request.getfixturevalue("service")
    return request.getfixturevalue("sql_service")
