"""Use case for loading ERP balance reports into the snapshot store.

This module defines a simple ETL-style use case that:

* validates the requested date and report types;
* reads each balance report from the ERP as of that date;
* replaces the stored snapshot for the date with the fresh rows.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
import re

from src.application.ports.balance_source import BalanceSourcePort
from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.domain.constants import DEFAULT_REPORT_TYPE, REPORT_TYPES
from src.domain.models import BalanceSnapshot
from src.domain.services.normalization import normalize_account_rows
from src.infrastructure.logging.logger import get_app_logger


_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True)
class LoadBalanceSnapshotResult:
    """Result of loading one report type for one date.

    Attributes:
        date: Snapshot date.
        report_type: ERP report that was loaded.
        record_count: Number of rows stored for the snapshot.
    """

    date: date
    report_type: str
    record_count: int


def parse_snapshot_date(value: str) -> date:
    """Parse a YYYY-MM-DD string into a date.

    Args:
        value: Raw date string.

    Returns:
        date: Parsed date.

    Raises:
        ValueError: If the value is not a valid YYYY-MM-DD date.
    """
    candidate = (value or "").strip()
    if not _DATE_PATTERN.match(candidate):
        raise ValueError(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
    return date.fromisoformat(candidate)


class LoadBalanceSnapshotUseCase:
    """Load ERP balance reports and overwrite the stored snapshots.

    The use case depends on ports only, so the ERP client and the storage
    engine can be swapped without touching the workflow.
    """

    def __init__(
        self,
        balance_source: BalanceSourcePort,
        snapshot_repository: SnapshotRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            balance_source: Port providing raw ERP report rows.
            snapshot_repository: Port storing snapshots by date.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._balance_source = balance_source
        self._snapshot_repository = snapshot_repository
        self._logger = logger or get_app_logger()

    def run(
        self,
        snapshot_date: date,
        report_types: Iterable[str] | None = None,
        today: date | None = None,
    ) -> list[LoadBalanceSnapshotResult]:
        """Execute the load job.

        Args:
            snapshot_date: Date the reports are requested for.
            report_types: ERP reports to load; defaults to the 8-columns one.
            today: Reference date for the future-date check.

        Returns:
            list[LoadBalanceSnapshotResult]: One result per report type.

        Raises:
            ValueError: If the date is in the future or a report type is
                unknown or none is given.
        """
        selected = self._validate(snapshot_date, report_types, today)
        self._snapshot_repository.prepare_storage()

        results = []
        for report_type in selected:
            payload = self._balance_source.fetch_balance_rows(
                report_type,
                snapshot_date,
            )
            rows = normalize_account_rows(payload)
            self._logger.info(
                f"Fetched {len(rows)} rows from {report_type} "
                f"for {snapshot_date.isoformat()}"
            )
            stored = self._snapshot_repository.save_snapshot(
                BalanceSnapshot(
                    date=snapshot_date,
                    rows=rows,
                    report_type=report_type,
                )
            )
            results.append(
                LoadBalanceSnapshotResult(
                    date=snapshot_date,
                    report_type=report_type,
                    record_count=stored,
                )
            )
        return results

    def _validate(
        self,
        snapshot_date: date,
        report_types: Iterable[str] | None,
        today: date | None,
    ) -> list[str]:
        reference = today or date.today()
        if snapshot_date > reference:
            raise ValueError("Cannot load data from future dates")

        selected = list(
            report_types if report_types is not None else [DEFAULT_REPORT_TYPE]
        )
        if not selected:
            raise ValueError("No report types specified")
        unknown = [name for name in selected if name not in REPORT_TYPES]
        if unknown:
            raise ValueError(
                f"Unsupported report types: {', '.join(unknown)}. "
                f"Expected one of {', '.join(REPORT_TYPES)}."
            )
        # Preserve order, drop duplicates.
        return list(dict.fromkeys(selected))


__all__ = [
    "LoadBalanceSnapshotUseCase",
    "LoadBalanceSnapshotResult",
    "parse_snapshot_date",
]
