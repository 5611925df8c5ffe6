"""Domain service building the income statement (Estado de Resultados).

Result accounts are grouped by their two-digit prefix. Accounts starting
with 4 contribute their income column and accounts starting with 3 their
expense column; only positive amounts are added to a group.
"""

from collections.abc import Iterable
from datetime import date

from src.domain.constants import INCOME_STATEMENT_GROUPS
from src.domain.models import (
    AccountRow,
    BalanceLine,
    IncomeStatement,
    IncomeStatementGroup,
    LineVariation,
    ProfitMarginRecord,
)
from src.domain.policies.account_filters import is_reportable_account
from src.utils.number_utils import coerce_float


def _result_amount(row: AccountRow) -> float:
    if row.account_number.startswith("4"):
        return coerce_float(row.incomes)
    if row.account_number.startswith("3"):
        return coerce_float(row.expenses)
    return 0.0


def group_result_accounts(
    rows: Iterable[AccountRow],
) -> dict[str, IncomeStatementGroup]:
    """Group result accounts by their two-digit prefix.

    Parent and child accounts sharing a prefix are both added, matching
    how the ERP report lists them.

    Args:
        rows: Report rows of one snapshot.

    Returns:
        dict[str, IncomeStatementGroup]: One group per known prefix, in the
        order of ``INCOME_STATEMENT_GROUPS``. Groups without positive
        amounts have a zero total and no details.
    """
    amounts = {code: 0.0 for code in INCOME_STATEMENT_GROUPS}
    details: dict[str, list[BalanceLine]] = {
        code: [] for code in INCOME_STATEMENT_GROUPS
    }
    for row in rows:
        if not is_reportable_account(row):
            continue
        prefix = row.account_number[:2]
        if prefix not in INCOME_STATEMENT_GROUPS:
            continue
        amount = _result_amount(row)
        if amount <= 0:
            continue
        amounts[prefix] += amount
        details[prefix].append(
            BalanceLine(row.account_number, row.account_name, amount)
        )
    return {
        code: IncomeStatementGroup(
            code=code,
            label=label,
            amount=amounts[code],
            details=details[code],
        )
        for code, label in INCOME_STATEMENT_GROUPS.items()
    }


def build_income_statement(
    snapshot_date: date,
    rows: Iterable[AccountRow],
) -> IncomeStatement:
    """Build the income statement of one snapshot.

    Args:
        snapshot_date: Date of the snapshot the rows belong to.
        rows: Report rows of that date.

    Returns:
        IncomeStatement: Group totals and the derived subtotals.
    """
    groups = group_result_accounts(rows)

    def total(code: str) -> float:
        return groups[code].amount

    margen_bruto = total("41") - total("31")
    resultado_operacional = margen_bruto - total("32") - total("33")
    resultado_antes_impuestos = (
        resultado_operacional + total("42") - total("34") - total("35")
    )
    utilidad_perdida = resultado_antes_impuestos - total("36")

    return IncomeStatement(
        date=snapshot_date,
        groups=groups,
        ingresos_operacionales=total("41"),
        costo_ventas=total("31"),
        margen_bruto=margen_bruto,
        gastos_admin=total("32"),
        depreciacion=total("33"),
        resultado_operacional=resultado_operacional,
        ingresos_no_operacionales=total("42"),
        gastos_no_operacionales=total("34"),
        correccion_monetaria=total("35"),
        resultado_antes_impuestos=resultado_antes_impuestos,
        impuesto_renta=total("36"),
        utilidad_perdida=utilidad_perdida,
    )


def compute_line_variation(current: float, previous: float) -> LineVariation:
    """Return the horizontal variation of a line.

    The percentage is taken over the absolute previous amount. Without a
    previous amount it is 100 when the line appeared and 0 otherwise.
    """
    absolute = current - previous
    if previous != 0:
        percentage = (absolute / abs(previous)) * 100
    elif current != 0:
        percentage = 100.0
    else:
        percentage = 0.0
    return LineVariation(absolute=absolute, percentage=percentage)


def compare_income_statements(
    current: IncomeStatement,
    previous: IncomeStatement | None,
) -> dict[str, LineVariation]:
    """Return the variation of every statement line against ``previous``.

    Args:
        current: Statement being displayed.
        previous: Statement of the period before, or None for the first.

    Returns:
        dict[str, LineVariation]: Variations keyed by line key. Empty when
        there is no previous statement.
    """
    if previous is None:
        return {}
    previous_amounts = {line.key: line.amount for line in previous.lines()}
    return {
        line.key: compute_line_variation(
            line.amount,
            previous_amounts[line.key],
        )
        for line in current.lines()
    }


def compute_profit_margins(
    snapshot_date: date,
    rows: Iterable[AccountRow],
) -> ProfitMarginRecord:
    """Compute net, operating and gross margins from the income statement.

    Margins are zero when operating income is not positive.
    """
    statement = build_income_statement(snapshot_date, rows)
    return ProfitMarginRecord(
        date=snapshot_date,
        margen_neto=statement.margen_neto_pct,
        margen_operacional=statement.margen_operacional_pct,
        margen_bruto=statement.margen_bruto_pct,
        ingresos=statement.ingresos_operacionales,
        utilidad_neta=statement.utilidad_perdida,
        utilidad_operacional=statement.resultado_operacional,
    )


__all__ = [
    "group_result_accounts",
    "build_income_statement",
    "compute_line_variation",
    "compare_income_statements",
    "compute_profit_margins",
]
