"""Domain package for business rules and core models."""

from .constants import (
    DEFAULT_REPORT_TYPE,
    REPORT_TYPES,
    SUMMARY_ROW_NAMES,
    TOTALS_ROW_NAME,
)
from .models import (
    AccountRow,
    BalanceGeneral,
    BalanceGeneralView,
    BalanceLine,
    BalanceSnapshot,
    BalanceTotals,
    CollectionDaysRecord,
    EbitdaRecord,
    FinancialStructureRecord,
    IncomeStatement,
    LiquidityRecord,
    ProfitMarginRecord,
    RentabilidadRecord,
)
from .policies import is_reportable_account, is_summary_row_name
from .services import (
    build_balance_general,
    build_income_statement,
    compute_collection_days,
    compute_ebitda,
    compute_financial_structure,
    compute_liquidity,
    compute_profit_margins,
    compute_rentabilidad,
    normalize_account_row,
    normalize_account_rows,
    validate_balance_check,
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
    "IncomeStatement",
    "DEFAULT_REPORT_TYPE",
    "REPORT_TYPES",
    "SUMMARY_ROW_NAMES",
    "TOTALS_ROW_NAME",
    "build_balance_general",
    "build_income_statement",
    "compute_collection_days",
    "compute_ebitda",
    "compute_financial_structure",
    "compute_liquidity",
    "compute_profit_margins",
    "compute_rentabilidad",
    "normalize_account_row",
    "normalize_account_rows",
    "validate_balance_check",
    "is_reportable_account",
    "is_summary_row_name",
]
