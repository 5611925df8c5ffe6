"""Domain constants for the Laudus balance reports."""

TOTALS_ROW_NAME = "Sumas"

SUMMARY_ROW_NAMES = (
    TOTALS_ROW_NAME,
    "Sumas totales",
    "Resultado positivo",
    "Resultado negativo",
)

CURRENT_ASSETS_ACCOUNT = "11"
CURRENT_LIABILITIES_ACCOUNT = "21"
INVENTORY_ACCOUNT = "1109"

EXERCISE_RESULT_CODE = "RES-EJER"
EXERCISE_RESULT_NAME = "Resultado del Ejercicio"

DEFAULT_REPORT_TYPE = "8Columns"
REPORT_TYPES = ("totals", "standard", "8Columns")

BALANCE_CHECK_TOLERANCE = 0.01

# Income statement groups keyed by the two-digit account prefix. Accounts
# starting with 4 contribute their income column, with 3 their expenses.
INCOME_STATEMENT_GROUPS = {
    "41": "Ingresos Operacionales",
    "31": "Costo de Ventas",
    "32": "Gastos de Administración y Ventas",
    "33": "Depreciación",
    "42": "Ingresos No Operacionales",
    "34": "Gastos No Operacionales",
    "35": "Corrección Monetaria",
    "36": "Impuesto a la Renta",
}

OPERATING_COST_ACCOUNT = "31"
OPERATING_EXPENSES_ACCOUNT = "32"
DEPRECIATION_ACCOUNT = "3301"
FINANCIAL_EXPENSES_ACCOUNT = "3401"
INCOME_TAX_ACCOUNT = "36"

RECEIVABLES_NAME = "cuentas por cobrar"
PAYABLES_NAME = "cuentas por pagar"
INVENTORY_NAMES = ("inventario", "existencia")
DAYS_PER_YEAR = 360


__all__ = [
    "TOTALS_ROW_NAME",
    "SUMMARY_ROW_NAMES",
    "CURRENT_ASSETS_ACCOUNT",
    "CURRENT_LIABILITIES_ACCOUNT",
    "INVENTORY_ACCOUNT",
    "EXERCISE_RESULT_CODE",
    "EXERCISE_RESULT_NAME",
    "DEFAULT_REPORT_TYPE",
    "REPORT_TYPES",
    "BALANCE_CHECK_TOLERANCE",
    "INCOME_STATEMENT_GROUPS",
    "OPERATING_COST_ACCOUNT",
    "OPERATING_EXPENSES_ACCOUNT",
    "DEPRECIATION_ACCOUNT",
    "FINANCIAL_EXPENSES_ACCOUNT",
    "INCOME_TAX_ACCOUNT",
    "RECEIVABLES_NAME",
    "PAYABLES_NAME",
    "INVENTORY_NAMES",
    "DAYS_PER_YEAR",
]
