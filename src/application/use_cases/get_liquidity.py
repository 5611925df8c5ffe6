"""Use case to compute working capital per stored snapshot."""

from datetime import date

from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.application.use_cases.snapshot_batches import (
    derive_per_snapshot,
    select_snapshots,
)
from src.domain.constants import DEFAULT_REPORT_TYPE
from src.domain.models import LiquidityRecord
from src.domain.services.liquidity import compute_liquidity
from src.infrastructure.logging.logger import get_app_logger


class GetLiquidityUseCase:
    """Compute liquidity records from stored snapshots."""

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
    ) -> list[LiquidityRecord]:
        """Return liquidity records ordered by descending date."""
        snapshots = select_snapshots(
            self._snapshot_repository,
            self._report_type,
            snapshot_date=snapshot_date,
        )
        records = derive_per_snapshot(snapshots, compute_liquidity)
        self._logger.info(f"Computed {len(records)} liquidity records")
        return records


__all__ = ["GetLiquidityUseCase", "LiquidityRecord"]
