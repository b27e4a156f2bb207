"""SQLAlchemy engine factory for database connections.

Backends, chosen from configuration:
- PostgreSQL (via DATABASE_URL environment variable)
- SQLite file-based (via PRICES_DB_PATH or default var/prices.db)
- SQLite in-memory (for testing, db_path=":memory:")
"""

import logging
from pathlib import Path
from typing import Optional, Union

from sqlalchemy import create_engine, Engine, event
from sqlalchemy.pool import StaticPool

from ....configuration.settings import Settings

logger = logging.getLogger(__name__)


def create_engine_from_config(
    db_path: Optional[Union[str, Path]] = None,
    config: Optional[Settings] = None
) -> Engine:
    """
    Create SQLAlchemy engine from configuration.

    - DATABASE_URL set to postgresql:// -> PostgreSQL
    - db_path=":memory:" -> SQLite in-memory (for tests)
    - Otherwise -> SQLite file-based

    Args:
        db_path: Optional explicit database path. Use ":memory:" for
                 in-memory SQLite. None uses the configured path.
        config: Settings to read from; defaults to the environment

    Returns:
        Configured SQLAlchemy Engine instance
    """
    config = config or Settings.from_env()
    database_url = config.database_url

    if database_url and database_url.startswith("postgresql://"):
        logger.info(f"Creating PostgreSQL engine: {database_url.split('@')[-1]}")  # Hide credentials

        return create_engine(
            database_url,
            pool_size=5,
            max_overflow=10,
            pool_pre_ping=True,
            echo=False,
        )

    sqlite_path = db_path if db_path is not None else config.db_path

    if str(sqlite_path) == ":memory:":
        # StaticPool keeps one connection; otherwise every connection
        # would open a fresh empty database
        logger.info("Creating SQLite in-memory engine (testing mode)")

        return create_engine(
            "sqlite:///:memory:",
            connect_args={'check_same_thread': False},
            poolclass=StaticPool,
            echo=False,
        )

    sqlite_path = Path(sqlite_path)
    sqlite_path.parent.mkdir(parents=True, exist_ok=True)

    logger.info(f"Creating SQLite file engine: {sqlite_path}")

    engine = create_engine(
        f"sqlite:///{sqlite_path}",
        connect_args={'check_same_thread': False},
        echo=False,
    )

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return engine


def get_database_url(config: Optional[Settings] = None) -> str:
    """
    Get the database URL that create_engine_from_config() would use.

    Returns:
        Database URL string
    """
    config = config or Settings.from_env()

    if config.database_url and config.database_url.startswith("postgresql://"):
        return config.database_url
    if str(config.db_path) == ":memory:":
        return "sqlite:///:memory:"
    return f"sqlite:///{config.db_path}"
