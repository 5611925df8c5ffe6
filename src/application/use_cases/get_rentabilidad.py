"""Use case to compute ROA and ROI per stored snapshot."""

from datetime import date

from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.application.use_cases.snapshot_batches import (
    derive_per_snapshot,
    select_snapshots,
)
from src.domain.constants import DEFAULT_REPORT_TYPE
from src.domain.models import RentabilidadRecord
from src.domain.services.profitability import compute_rentabilidad
from src.infrastructure.logging.logger import get_app_logger


class GetRentabilidadUseCase:
    """Compute profitability records from stored snapshots."""

    def __init__(
        self,
        snapshot_repository: SnapshotRepositoryPort,
        logger=None,
        report_type: str = DEFAULT_REPORT_TYPE,
    ) -> None:
        """Initialize the use case.

        Args:
            snapshot_repository: Port providing stored report snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
            report_type: Report type holding the "Sumas" row.
        """
        self._snapshot_repository = snapshot_repository
        self._logger = logger or get_app_logger()
        self._report_type = report_type

    def execute(
        self,
        snapshot_date: date | None = None,
    ) -> list[RentabilidadRecord]:
        """Return profitability records ordered by descending date.

        Args:
            snapshot_date: Optional single date; None selects every date.

        Returns:
            list[RentabilidadRecord]: One record per snapshot.
        """
        snapshots = select_snapshots(
            self._snapshot_repository,
            self._report_type,
            snapshot_date=snapshot_date,
        )
        records = derive_per_snapshot(snapshots, compute_rentabilidad)
        self._logger.info(f"Computed {len(records)} profitability records")
        return records


__all__ = ["GetRentabilidadUseCase", "RentabilidadRecord"]
