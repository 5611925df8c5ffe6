"""Application ports package."""

from .balance_source import BalanceSourcePort
from .database import DatabaseEnginePort
from .snapshot_repository import SnapshotRepositoryPort

__all__ = [
    "BalanceSourcePort",
    "DatabaseEnginePort",
    "SnapshotRepositoryPort",
]
