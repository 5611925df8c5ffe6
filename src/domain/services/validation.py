"""Domain validation helpers."""

from datetime import date
from logging import Logger

from src.domain.constants import BALANCE_CHECK_TOLERANCE
from src.domain.models import BalanceTotals


def validate_balance_check(
    snapshot_date: date,
    totals: BalanceTotals,
    logger: Logger,
    tolerance: float = BALANCE_CHECK_TOLERANCE,
) -> bool:
    """Warn when assets do not equal liabilities plus equity.

    Args:
        snapshot_date: Date of the derived balance.
        totals: Totals of the derived Balance General.
        logger: Logger used for warnings.
        tolerance: Absolute difference accepted as rounding noise.

    Returns:
        bool: True when the accounting identity holds.
    """
    if abs(totals.balance_check) <= tolerance:
        return True
    logger.warning(
        f"Balance check failed for {snapshot_date}: "
        f"difference={totals.balance_check}"
    )
    return False


__all__ = ["validate_balance_check"]
