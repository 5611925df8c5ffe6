"""SQLAlchemy engine for the balance snapshot store.

Snapshots live in a single table reachable through ``BALANCE_DB_URL``. The
load CLI writes to it and the Streamlit dashboard reads from it, so the
engine is created once per process and shared by both the repository and
the connection check.
"""

import os

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort

BALANCE_DB_URL_VAR = "BALANCE_DB_URL"


def _get_env_var(name: str) -> str:
    """Return a required setting, reading a local ``.env`` first.

    Raises:
        RuntimeError: If the variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name, "").strip()
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _engine_options(db_url: str) -> dict:
    """Return engine keyword arguments suited to the snapshot backend.

    SQLite files are opened from Streamlit worker threads as well as the
    main thread, so the same-thread check is disabled and the default pool
    is kept. Server databases get a small pool with pre-ping, since the
    dashboard can sit idle longer than the server keeps connections.
    """
    if make_url(db_url).get_backend_name() == "sqlite":
        return {
            "connect_args": {"check_same_thread": False},
            "future": True,
        }
    return {
        "poolclass": QueuePool,
        "pool_size": 5,
        "max_overflow": 5,
        "pool_pre_ping": True,
        "future": True,
    }


def _create_engine(db_url: str) -> Engine:
    """Create the engine for the snapshot store.

    Args:
        db_url: SQLAlchemy URL of the snapshot database, e.g.
            ``sqlite:///balance.db`` or a PostgreSQL URL.

    Returns:
        Engine: Engine configured by ``_engine_options``.
    """
    return create_engine(db_url, **_engine_options(db_url))


_balance_engine: Engine | None = None


def get_balance_engine() -> Engine:
    """Return the process-wide snapshot store engine, creating it once."""
    global _balance_engine
    if _balance_engine is None:
        _balance_engine = _create_engine(_get_env_var(BALANCE_DB_URL_VAR))
    return _balance_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Expose the shared snapshot store engine through the database port."""

    def get_balance_engine(self) -> Engine:
        return get_balance_engine()


__all__ = [
    "BALANCE_DB_URL_VAR",
    "get_balance_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
