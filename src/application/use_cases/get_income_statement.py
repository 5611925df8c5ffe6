"""Use case to build the income statement from stored snapshots."""

from datetime import date

from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.application.use_cases.snapshot_batches import (
    derive_per_snapshot,
    select_snapshots,
)
from src.domain.constants import DEFAULT_REPORT_TYPE
from src.domain.models import IncomeStatement
from src.domain.services.income_statement import build_income_statement
from src.infrastructure.logging.logger import get_app_logger


class GetIncomeStatementUseCase:
    """Build the Estado de Resultados for one date or every stored date."""

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
            report_type: Report type holding the result accounts.
        """
        self._snapshot_repository = snapshot_repository
        self._logger = logger or get_app_logger()
        self._report_type = report_type

    def execute(
        self,
        snapshot_date: date | None = None,
        year: int | None = None,
    ) -> list[IncomeStatement]:
        """Return one income statement per selected snapshot.

        Args:
            snapshot_date: Optional single date; None selects every date.
            year: Optional year filter used when no date is given.

        Returns:
            list[IncomeStatement]: Statements ordered by descending date.
        """
        snapshots = select_snapshots(
            self._snapshot_repository,
            self._report_type,
            snapshot_date=snapshot_date,
            year=year,
        )
        statements = derive_per_snapshot(snapshots, build_income_statement)
        self._logger.info(f"Built {len(statements)} income statements")
        return statements


__all__ = ["GetIncomeStatementUseCase", "IncomeStatement"]
