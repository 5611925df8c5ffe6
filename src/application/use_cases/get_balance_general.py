"""Use case to derive the Balance General from stored snapshots."""

from datetime import date

from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.application.use_cases.snapshot_batches import (
    derive_per_snapshot,
    select_snapshots,
)
from src.domain.constants import DEFAULT_REPORT_TYPE
from src.domain.models import AccountRow, BalanceGeneralView
from src.domain.services.balance_general import build_balance_general
from src.domain.services.validation import validate_balance_check
from src.infrastructure.logging.logger import get_app_logger


class GetBalanceGeneralUseCase:
    """Build the Balance General for one date or every stored date."""

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
            report_type: Report type the balance is derived from.
        """
        self._snapshot_repository = snapshot_repository
        self._logger = logger or get_app_logger()
        self._report_type = report_type

    def execute(
        self,
        snapshot_date: date | None = None,
        year: int | None = None,
    ) -> list[BalanceGeneralView]:
        """Return one Balance General per selected snapshot.

        Args:
            snapshot_date: Optional single date; None selects every date.
            year: Optional year filter used when no date is given.

        Returns:
            list[BalanceGeneralView]: Balances ordered by descending date.
        """
        snapshots = select_snapshots(
            self._snapshot_repository,
            self._report_type,
            snapshot_date=snapshot_date,
            year=year,
        )
        self._logger.info(
            f"Deriving balance general for {len(snapshots)} snapshots"
        )
        return derive_per_snapshot(snapshots, self._derive)

    def _derive(
        self,
        snapshot_date: date,
        rows: list[AccountRow],
    ) -> BalanceGeneralView:
        balance = build_balance_general(rows)
        validate_balance_check(snapshot_date, balance.totals, self._logger)
        return BalanceGeneralView(date=snapshot_date, balance=balance)

    def available_years(self) -> list[int]:
        """Return the years having snapshots, most recent first."""
        return self._snapshot_repository.fetch_available_years(
            self._report_type
        )


__all__ = ["GetBalanceGeneralUseCase", "BalanceGeneralView"]
