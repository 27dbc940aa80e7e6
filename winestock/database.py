"""SQLAlchemy engine and session setup for persisted inventory state."""

import logging

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all table mappings."""


def _is_memory_url(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for the given database URL.

    SQLite connections are shared across threads; in-memory databases use a
    single static connection so every session sees the same data.

    Args:
        database_url: SQLAlchemy database URL.
        echo: Log emitted SQL.

    Returns:
        Configured Engine.
    """
    if database_url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if _is_memory_url(database_url):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)
    return create_engine(database_url, echo=echo)


def init_db(engine: Engine) -> None:
    """Create all inventory tables if they don't exist."""
    # Import mappings so they register with Base.metadata
    from winestock.models import tables  # noqa: F401

    Base.metadata.create_all(engine)
    logger.debug("Database tables ensured on %s", engine.url)


def get_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Get a session factory bound to the engine."""
    return sessionmaker(engine, expire_on_commit=False)
