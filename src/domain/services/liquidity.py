"""Domain service for working capital and liquidity ratios."""

from collections.abc import Iterable
from datetime import date

from src.domain.constants import (
    CURRENT_ASSETS_ACCOUNT,
    CURRENT_LIABILITIES_ACCOUNT,
    INVENTORY_ACCOUNT,
)
from src.domain.models import AccountRow, LiquidityRecord
from src.utils.number_utils import coerce_float


def _find_account(
    rows: list[AccountRow],
    account_number: str,
) -> AccountRow | None:
    for row in rows:
        if row.account_number == account_number:
            return row
    return None


def compute_liquidity(
    snapshot_date: date,
    rows: Iterable[AccountRow],
) -> LiquidityRecord:
    """Compute working capital from the current asset and liability groups.

    Current assets come from the asset column of account "11", current
    liabilities from the liability column of account "21". Missing accounts
    count as zero, which cannot be told apart from a zero balance.

    Args:
        snapshot_date: Date of the snapshot the rows belong to.
        rows: Report rows of that date.

    Returns:
        LiquidityRecord: Working capital and its inputs.
    """
    row_list = list(rows)
    current_assets_row = _find_account(row_list, CURRENT_ASSETS_ACCOUNT)
    current_liabilities_row = _find_account(
        row_list,
        CURRENT_LIABILITIES_ACCOUNT,
    )
    inventory_row = _find_account(row_list, INVENTORY_ACCOUNT)

    activos = (
        coerce_float(current_assets_row.assets)
        if current_assets_row is not None
        else 0.0
    )
    pasivos = (
        coerce_float(current_liabilities_row.liabilities)
        if current_liabilities_row is not None
        else 0.0
    )
    inventarios = (
        coerce_float(inventory_row.assets)
        if inventory_row is not None
        else 0.0
    )
    return LiquidityRecord(
        date=snapshot_date,
        working_capital=activos - pasivos,
        activos_corrientes=activos,
        pasivos_corrientes=pasivos,
        inventarios=inventarios,
    )


__all__ = ["compute_liquidity"]
