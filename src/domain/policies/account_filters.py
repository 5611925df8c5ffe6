"""Policies deciding which report rows are real accounts."""

from src.domain.constants import SUMMARY_ROW_NAMES
from src.domain.models import AccountRow


def is_summary_row_name(name: str) -> bool:
    """Return True when the label marks an aggregate row such as "Sumas".

    Args:
        name: Account name to evaluate.

    Returns:
        bool: True for one of the summary sentinel labels.
    """
    return name in SUMMARY_ROW_NAMES


def is_reportable_account(row: AccountRow) -> bool:
    """Return True when the row is a real account of the Balance General.

    Rows without an account number and summary rows are excluded; accounts
    with a zero balance are kept.
    """
    if not row.account_number:
        return False
    return not is_summary_row_name(row.account_name)


__all__ = ["is_summary_row_name", "is_reportable_account"]
