"""Use case to compute collection and payment days per stored snapshot."""

from datetime import date

from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.application.use_cases.snapshot_batches import (
    derive_with_previous,
    select_snapshots,
)
from src.domain.constants import DEFAULT_REPORT_TYPE
from src.domain.models import CollectionDaysRecord
from src.domain.services.collection_days import compute_collection_days
from src.infrastructure.logging.logger import get_app_logger


class GetCollectionDaysUseCase:
    """Compute días de cobro y pago from stored snapshots.

    Unlike the other indicators, each record also reads the next older
    snapshot to adjust the cost of sales by the inventory change.
    """

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
            report_type: Report type holding debit and credit movements.
        """
        self._snapshot_repository = snapshot_repository
        self._logger = logger or get_app_logger()
        self._report_type = report_type

    def execute(
        self,
        snapshot_date: date | None = None,
    ) -> list[CollectionDaysRecord]:
        """Return collection days records ordered by descending date.

        Args:
            snapshot_date: Optional single date; None selects every date.
                The previous snapshot is still looked up among every
                stored date.

        Returns:
            list[CollectionDaysRecord]: One record per selected snapshot.
        """
        snapshots = select_snapshots(
            self._snapshot_repository,
            self._report_type,
        )
        records = derive_with_previous(snapshots, compute_collection_days)
        if snapshot_date is not None:
            records = [
                record for record in records if record.date == snapshot_date
            ]
        self._logger.info(f"Computed {len(records)} collection days records")
        return records


__all__ = ["GetCollectionDaysUseCase", "CollectionDaysRecord"]
