"""Use case to compute debt and autonomy percentages per snapshot."""

from datetime import date

from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.application.use_cases.snapshot_batches import (
    derive_per_snapshot,
    select_snapshots,
)
from src.domain.constants import DEFAULT_REPORT_TYPE
from src.domain.models import FinancialStructureRecord
from src.domain.services.profitability import compute_financial_structure
from src.infrastructure.logging.logger import get_app_logger


class GetFinancialStructureUseCase:
    """Compute financial structure records from stored snapshots."""

    def __init__(
        self,
        snapshot_repository: SnapshotRepositoryPort,
        logger=None,
        report_type: str = DEFAULT_REPORT_TYPE,
    ) -> None:
        self._snapshot_repository = snapshot_repository
        self._logger = logger or get_app_logger()
        self._report_type = report_type

    def execute(
        self,
        snapshot_date: date | None = None,
    ) -> list[FinancialStructureRecord]:
        """Return financial structure records ordered by descending date."""
        snapshots = select_snapshots(
            self._snapshot_repository,
            self._report_type,
            snapshot_date=snapshot_date,
        )
        records = derive_per_snapshot(snapshots, compute_financial_structure)
        self._logger.info(
            f"Computed {len(records)} financial structure records"
        )
        return records


__all__ = ["GetFinancialStructureUseCase", "FinancialStructureRecord"]
