"""Domain service for days of collection and payment (días de cobro/pago)."""

import re
from collections.abc import Iterable
from datetime import date

from src.domain.constants import (
    DAYS_PER_YEAR,
    INVENTORY_NAMES,
    PAYABLES_NAME,
    RECEIVABLES_NAME,
)
from src.domain.models import AccountRow, CollectionDaysRecord
from src.utils.number_utils import coerce_float

_LEADING_DIGITS = re.compile(r"^\s*(\d+)")


def _account_code_number(account_number: str) -> int | None:
    match = _LEADING_DIGITS.match(account_number)
    if match is None:
        return None
    return int(match.group(1))


def _name_contains(row: AccountRow, *fragments: str) -> bool:
    name = row.account_name.lower()
    return any(fragment in name for fragment in fragments)


def _inventory(rows: list[AccountRow]) -> float:
    return sum(
        coerce_float(row.debit) - coerce_float(row.credit)
        for row in rows
        if _name_contains(row, *INVENTORY_NAMES)
    )


def compute_collection_days(
    snapshot_date: date,
    rows: Iterable[AccountRow],
    previous_rows: Iterable[AccountRow] | None = None,
) -> CollectionDaysRecord:
    """Compute collection and payment days over a 360 day year.

    Receivables and payables are matched by account name. Income sums the
    income column of accounts 4000 to 4999 and purchases the expense
    column of accounts 3000 to 3999. Cost of sales adds the inventory
    decrease against the previous snapshot when one is given.

    Args:
        snapshot_date: Date of the snapshot the rows belong to.
        rows: Report rows of that date.
        previous_rows: Rows of the next older snapshot, if any.

    Returns:
        CollectionDaysRecord: Days are zero when their denominator is not
        positive.
    """
    row_list = list(rows)
    cuentas_por_cobrar = 0.0
    cuentas_por_pagar = 0.0
    ingresos = 0.0
    compras = 0.0
    for row in row_list:
        debit = coerce_float(row.debit)
        credit = coerce_float(row.credit)
        if _name_contains(row, RECEIVABLES_NAME):
            cuentas_por_cobrar += debit - credit
        if _name_contains(row, PAYABLES_NAME):
            cuentas_por_pagar += credit - debit
        code = _account_code_number(row.account_number)
        if code is None:
            continue
        if 4000 <= code < 5000:
            ingresos += coerce_float(row.incomes)
        elif 3000 <= code < 4000:
            compras += coerce_float(row.expenses)

    inventario = _inventory(row_list)
    if previous_rows is not None:
        costo_ventas = compras + (_inventory(list(previous_rows)) - inventario)
    else:
        costo_ventas = compras

    dias_cobro = (
        cuentas_por_cobrar * DAYS_PER_YEAR / ingresos if ingresos > 0 else 0.0
    )
    dias_pago = (
        cuentas_por_pagar * DAYS_PER_YEAR / costo_ventas
        if costo_ventas > 0
        else 0.0
    )
    return CollectionDaysRecord(
        date=snapshot_date,
        dias_cobro=dias_cobro,
        dias_pago=dias_pago,
        cuentas_por_cobrar=cuentas_por_cobrar,
        cuentas_por_pagar=cuentas_por_pagar,
        ingresos=ingresos,
        costo_ventas=costo_ventas,
        inventario=inventario,
    )


__all__ = ["compute_collection_days"]
