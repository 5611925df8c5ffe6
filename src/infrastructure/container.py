"""Composition root for wiring infrastructure adapters."""

from src.application.ports.balance_source import BalanceSourcePort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.laudus_client import LaudusBalanceSource
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings, LaudusSettings
from src.infrastructure.snapshot_repository import (
    SqlAlchemySnapshotRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_snapshot_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SnapshotRepositoryPort:
    """Return the snapshot repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemySnapshotRepository(resolved_db)


def build_balance_source(
    settings: LaudusSettings | None = None,
) -> BalanceSourcePort:
    """Return the ERP balance source configured from the environment."""
    resolved_settings = settings or LaudusSettings.from_env()
    return LaudusBalanceSource(resolved_settings, logger=get_app_logger())


def build_report_type() -> str:
    """Return the report type the dashboard derives statements from."""
    return DashboardSettings.from_env().report_type


__all__ = [
    "build_database_adapter",
    "build_snapshot_repository",
    "build_balance_source",
    "build_report_type",
]
