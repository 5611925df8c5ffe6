"""Domain models package."""

from .balance_rows import AccountRow, BalanceSnapshot
from .income_statement import (
    IncomeStatement,
    IncomeStatementGroup,
    IncomeStatementLine,
    LineVariation,
)
from .statements import (
    BalanceGeneral,
    BalanceGeneralView,
    BalanceLine,
    BalanceTotals,
    CollectionDaysRecord,
    EbitdaRecord,
    FinancialStructureRecord,
    LiquidityRecord,
    ProfitMarginRecord,
    RentabilidadRecord,
)

__all__ = [
    "AccountRow",
    "BalanceSnapshot",
    "BalanceLine",
    "BalanceTotals",
    "BalanceGeneral",
    "BalanceGeneralView",
    "RentabilidadRecord",
    "LiquidityRecord",
    "FinancialStructureRecord",
    "EbitdaRecord",
    "ProfitMarginRecord",
    "CollectionDaysRecord",
    "IncomeStatementGroup",
    "IncomeStatementLine",
    "LineVariation",
    "IncomeStatement",
]
