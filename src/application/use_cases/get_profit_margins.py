"""Use case to compute profit margins per stored snapshot."""

from datetime import date

from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.application.use_cases.snapshot_batches import (
    derive_per_snapshot,
    select_snapshots,
)
from src.domain.constants import DEFAULT_REPORT_TYPE
from src.domain.models import ProfitMarginRecord
from src.domain.services.income_statement import compute_profit_margins
from src.infrastructure.logging.logger import get_app_logger


class GetProfitMarginsUseCase:
    """Compute net, operating and gross margins from stored snapshots."""

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
    ) -> list[ProfitMarginRecord]:
        """Return margin records ordered by descending date."""
        snapshots = select_snapshots(
            self._snapshot_repository,
            self._report_type,
            snapshot_date=snapshot_date,
        )
        records = derive_per_snapshot(snapshots, compute_profit_margins)
        self._logger.info(f"Computed {len(records)} profit margin records")
        return records


__all__ = ["GetProfitMarginsUseCase", "ProfitMarginRecord"]
