"""Domain services package."""

from .balance_general import build_balance_general
from .collection_days import compute_collection_days
from .income_statement import (
    build_income_statement,
    compare_income_statements,
    compute_line_variation,
    compute_profit_margins,
    group_result_accounts,
)
from .liquidity import compute_liquidity
from .normalization import (
    normalize_account_name,
    normalize_account_number,
    normalize_account_row,
    normalize_account_rows,
)
from .profitability import (
    compute_ebitda,
    compute_financial_structure,
    compute_rentabilidad,
    find_totals_row,
)
from .validation import validate_balance_check

__all__ = [
    "build_balance_general",
    "build_income_statement",
    "compare_income_statements",
    "compute_collection_days",
    "compute_ebitda",
    "compute_line_variation",
    "compute_liquidity",
    "compute_profit_margins",
    "compute_rentabilidad",
    "compute_financial_structure",
    "find_totals_row",
    "group_result_accounts",
    "normalize_account_name",
    "normalize_account_number",
    "normalize_account_row",
    "normalize_account_rows",
    "validate_balance_check",
]
