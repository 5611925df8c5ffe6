"""Database ports for the balance dashboard.

This module defines the application-layer protocol for accessing the
snapshot database engine. Infrastructure implementations are expected to
provide concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine that stores balance snapshots.

    Application use cases can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_balance_engine(self) -> Engine:
        """Get the engine for the snapshot database.

        Returns:
            Engine: SQLAlchemy engine connected to the snapshot store.
        """


__all__ = ["DatabaseEnginePort"]
