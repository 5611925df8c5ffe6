"""Port for storing and reading balance snapshots."""

from datetime import date
from typing import Protocol

from src.domain.models import BalanceSnapshot


class SnapshotRepositoryPort(Protocol):
    """Port exposing snapshot storage keyed by date and report type."""

    def prepare_storage(self) -> None:
        """Ensure the snapshot storage is ready to receive data."""

    def save_snapshot(self, snapshot: BalanceSnapshot) -> int:
        """Replace the stored snapshot for the same date and report type."""

    def fetch_snapshot(
        self,
        snapshot_date: date,
        report_type: str,
    ) -> BalanceSnapshot | None:
        """Return the snapshot stored for a date, if any."""

    def fetch_snapshots(
        self,
        report_type: str,
        year: int | None = None,
    ) -> list[BalanceSnapshot]:
        """Return stored snapshots ordered by descending date."""

    def fetch_available_years(self, report_type: str) -> list[int]:
        """Return the years having snapshots, most recent first."""

    def delete_snapshots(self, report_type: str) -> int:
        """Delete every snapshot of a report type."""


__all__ = ["SnapshotRepositoryPort"]
