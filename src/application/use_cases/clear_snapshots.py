"""Use case to remove every stored snapshot of one report type."""

from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.domain.constants import REPORT_TYPES
from src.infrastructure.logging.logger import get_app_logger


class ClearSnapshotsUseCase:
    """Delete the stored snapshots of a report type before a full reload."""

    def __init__(
        self,
        snapshot_repository: SnapshotRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            snapshot_repository: Port storing snapshots by date.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._snapshot_repository = snapshot_repository
        self._logger = logger or get_app_logger()

    def run(self, report_type: str) -> int:
        """Delete every snapshot of ``report_type``.

        Args:
            report_type: ERP report whose snapshots are removed.

        Returns:
            int: Number of deleted snapshots.

        Raises:
            ValueError: If the report type is unknown.
        """
        if report_type not in REPORT_TYPES:
            raise ValueError(
                f"Unsupported report type: {report_type}. "
                f"Expected one of {', '.join(REPORT_TYPES)}."
            )
        self._snapshot_repository.prepare_storage()
        deleted = self._snapshot_repository.delete_snapshots(report_type)
        self._logger.warning(f"Deleted {deleted} snapshots of {report_type}")
        return deleted


__all__ = ["ClearSnapshotsUseCase"]
