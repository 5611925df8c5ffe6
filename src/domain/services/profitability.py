"""Domain services for profitability, EBITDA and financial structure."""

from collections.abc import Iterable
from datetime import date

from src.domain.constants import (
    DEPRECIATION_ACCOUNT,
    FINANCIAL_EXPENSES_ACCOUNT,
    INCOME_TAX_ACCOUNT,
    OPERATING_COST_ACCOUNT,
    OPERATING_EXPENSES_ACCOUNT,
    TOTALS_ROW_NAME,
)
from src.domain.models import (
    AccountRow,
    EbitdaRecord,
    FinancialStructureRecord,
    RentabilidadRecord,
)
from src.utils.number_utils import coerce_float


def find_totals_row(rows: Iterable[AccountRow]) -> AccountRow | None:
    """Return the first "Sumas" row of the report, if any."""
    for row in rows:
        if row.account_name == TOTALS_ROW_NAME:
            return row
    return None


def compute_rentabilidad(
    snapshot_date: date,
    rows: Iterable[AccountRow],
) -> RentabilidadRecord:
    """Compute ROA and ROI (ROE) from the report totals row.

    Args:
        snapshot_date: Date of the snapshot the rows belong to.
        rows: Report rows of that date.

    Returns:
        RentabilidadRecord: Ratios in percent. A zero-filled record is
        returned when the report has no "Sumas" row.
    """
    totals_row = find_totals_row(rows)
    if totals_row is None:
        return RentabilidadRecord(
            date=snapshot_date,
            roa=0.0,
            roi=0.0,
            utilidad_neta=0.0,
            activo_total=0.0,
            patrimonio=0.0,
        )

    ingresos = coerce_float(totals_row.incomes)
    gastos = coerce_float(totals_row.expenses)
    activo_total = coerce_float(totals_row.assets)
    pasivo_total = coerce_float(totals_row.liabilities)

    utilidad_neta = ingresos - gastos
    patrimonio = activo_total - pasivo_total
    roa = (utilidad_neta / activo_total) * 100 if activo_total > 0 else 0.0
    # Zero or negative equity yields an ROI of 0.
    roi = (utilidad_neta / patrimonio) * 100 if patrimonio > 0 else 0.0

    return RentabilidadRecord(
        date=snapshot_date,
        roa=roa,
        roi=roi,
        utilidad_neta=utilidad_neta,
        activo_total=activo_total,
        patrimonio=patrimonio,
        ingresos=ingresos,
        gastos=gastos,
        pasivo_total=pasivo_total,
    )


def compute_financial_structure(
    snapshot_date: date,
    rows: Iterable[AccountRow],
) -> FinancialStructureRecord:
    """Compute debt (endeudamiento) and autonomy percentages.

    Args:
        snapshot_date: Date of the snapshot the rows belong to.
        rows: Report rows of that date.

    Returns:
        FinancialStructureRecord: Percentages over total assets, zero when
        the totals row is missing or total assets are not positive.
    """
    totals_row = find_totals_row(rows)
    if totals_row is None:
        return FinancialStructureRecord(
            date=snapshot_date,
            activo_total=0.0,
            pasivo_total=0.0,
            patrimonio=0.0,
            endeudamiento=0.0,
            autonomia=0.0,
        )
    activo_total = coerce_float(totals_row.assets)
    pasivo_total = coerce_float(totals_row.liabilities)
    patrimonio = activo_total - pasivo_total
    if activo_total > 0:
        endeudamiento = (pasivo_total / activo_total) * 100
        autonomia = (patrimonio / activo_total) * 100
    else:
        endeudamiento = 0.0
        autonomia = 0.0
    return FinancialStructureRecord(
        date=snapshot_date,
        activo_total=activo_total,
        pasivo_total=pasivo_total,
        patrimonio=patrimonio,
        endeudamiento=endeudamiento,
        autonomia=autonomia,
    )


def _account_expenses(
    rows: list[AccountRow],
    account_number: str,
) -> float:
    for row in rows:
        if row.account_number == account_number:
            return coerce_float(row.expenses)
    return 0.0


def compute_ebitda(
    snapshot_date: date,
    rows: Iterable[AccountRow],
) -> EbitdaRecord:
    """Compute EBITDA and the EBITDA margin.

    Income comes from the "Sumas" row. Operating costs ("31"), operating
    expenses ("32"), depreciation ("3301"), financial expenses ("3401")
    and income tax ("36") are read from the expense column of those exact
    accounts; missing accounts count as zero.

    Args:
        snapshot_date: Date of the snapshot the rows belong to.
        rows: Report rows of that date.

    Returns:
        EbitdaRecord: A zero-filled record when the report has no "Sumas"
        row. The margin is zero when income is not positive.
    """
    row_list = list(rows)
    totals_row = find_totals_row(row_list)
    if totals_row is None:
        return EbitdaRecord(
            date=snapshot_date,
            ebitda=0.0,
            margen_ebitda=0.0,
            ingresos=0.0,
            costo_explotacion=0.0,
            gastos_operacionales=0.0,
            total_gastos_operacionales=0.0,
            utilidad_operacional=0.0,
            depreciacion=0.0,
            gastos_financieros=0.0,
            impuestos=0.0,
        )

    ingresos = coerce_float(totals_row.incomes)
    costo_explotacion = _account_expenses(row_list, OPERATING_COST_ACCOUNT)
    gastos_operacionales = _account_expenses(
        row_list,
        OPERATING_EXPENSES_ACCOUNT,
    )
    depreciacion = _account_expenses(row_list, DEPRECIATION_ACCOUNT)
    total_gastos = costo_explotacion + gastos_operacionales
    utilidad_operacional = ingresos - total_gastos
    ebitda = utilidad_operacional + depreciacion
    margen = (ebitda / ingresos) * 100 if ingresos > 0 else 0.0

    return EbitdaRecord(
        date=snapshot_date,
        ebitda=ebitda,
        margen_ebitda=margen,
        ingresos=ingresos,
        costo_explotacion=costo_explotacion,
        gastos_operacionales=gastos_operacionales,
        total_gastos_operacionales=total_gastos,
        utilidad_operacional=utilidad_operacional,
        depreciacion=depreciacion,
        gastos_financieros=_account_expenses(
            row_list,
            FINANCIAL_EXPENSES_ACCOUNT,
        ),
        impuestos=_account_expenses(row_list, INCOME_TAX_ACCOUNT),
    )


__all__ = [
    "find_totals_row",
    "compute_rentabilidad",
    "compute_financial_structure",
    "compute_ebitda",
]
