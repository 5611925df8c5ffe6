"""Domain normalization helpers for ERP report rows."""

from collections.abc import Mapping
from typing import Any

from src.domain.models import AccountRow
from src.utils.number_utils import coerce_float


def normalize_account_number(account_number: Any) -> str:
    """Normalize account codes to stripped strings.

    Args:
        account_number: Raw code from the ERP (string, int or None).

    Returns:
        str: Normalized code, empty when absent.
    """
    if account_number is None:
        return ""
    return str(account_number).strip()


def normalize_account_name(account_name: Any) -> str:
    """Normalize account labels.

    Args:
        account_name: Raw label from the ERP.

    Returns:
        str: Stripped label, empty when absent.
    """
    if account_name is None:
        return ""
    return str(account_name).strip()


def normalize_account_row(raw: Mapping[str, Any]) -> AccountRow:
    """Build an AccountRow from an ERP payload item.

    Args:
        raw: Mapping using the ERP field names (accountNumber, assets, ...).

    Returns:
        AccountRow: Row with normalized labels and float amounts.
    """
    return AccountRow(
        account_number=normalize_account_number(raw.get("accountNumber")),
        account_name=normalize_account_name(raw.get("accountName")),
        assets=coerce_float(raw.get("assets")),
        liabilities=coerce_float(raw.get("liabilities")),
        incomes=coerce_float(raw.get("incomes")),
        expenses=coerce_float(raw.get("expenses")),
        debit=coerce_float(raw.get("debit")),
        credit=coerce_float(raw.get("credit")),
    )


def normalize_account_rows(
    payload: list[Mapping[str, Any]] | None,
) -> list[AccountRow]:
    """Convert an ERP payload to rows, skipping non-mapping items."""
    if not payload:
        return []
    return [
        normalize_account_row(item)
        for item in payload
        if isinstance(item, Mapping)
    ]


__all__ = [
    "normalize_account_number",
    "normalize_account_name",
    "normalize_account_row",
    "normalize_account_rows",
]
