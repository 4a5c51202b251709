"""Database connection and session management."""

import logging
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from househunt.config import settings
from househunt.models import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    """Turn on FK enforcement so ON DELETE CASCADE / SET NULL are applied by SQLite."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine; SQLite gets StaticPool and foreign keys switched on."""
    if database_url.startswith("sqlite"):
        db_engine = create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        event.listen(db_engine, "connect", _enable_sqlite_foreign_keys)
    else:
        db_engine = create_engine(database_url, echo=echo, pool_pre_ping=True)
    return db_engine


engine = create_db_engine(settings.database_url, echo=settings.database_echo)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_database(bind: Engine | None = None, seed: bool | None = None) -> None:
    """Create tables and, when enabled, seed demonstration data into an empty store.

    Args:
        bind: Engine to initialize (default: module engine)
        seed: Override settings.seed_demo_data
    """
    bind = bind or engine

    # SQLite will not create missing parent directories for the database file
    db_path = bind.url.database
    if bind.url.get_backend_name() == "sqlite" and db_path and db_path != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    Base.metadata.create_all(bind=bind)
    logger.info(f"Database tables checked/created at {bind.url.render_as_string(hide_password=True)}")

    if seed is None:
        seed = settings.seed_demo_data
    if not seed:
        return

    from househunt.services.seeding import seed_demo_data

    session = Session(bind=bind)
    try:
        seed_demo_data(session)
    finally:
        session.close()


def get_db() -> Generator[Session, None, None]:
    """Get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


__all__ = [
    "engine",
    "SessionLocal",
    "create_db_engine",
    "init_database",
    "get_db",
]
