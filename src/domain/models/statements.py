"""Domain models for derived statements and ratios."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class BalanceLine:
    """Single account line of the Balance General."""

    account_code: str
    account_name: str
    amount: float


@dataclass(frozen=True)
class BalanceTotals:
    """Totals of the Balance General.

    Attributes:
        total_assets: Sum of the asset column of every account.
        total_liabilities: Sum of the liability column of every account.
        total_equity: Result of the exercise.
        balance_check: Assets minus liabilities and equity; zero when the
            accounting identity holds.
    """

    total_assets: float
    total_liabilities: float
    total_equity: float
    balance_check: float


@dataclass(frozen=True)
class BalanceGeneral:
    """Assets, liabilities and equity derived from one snapshot."""

    assets: list[BalanceLine]
    liabilities: list[BalanceLine]
    equity: list[BalanceLine]
    totals: BalanceTotals


@dataclass(frozen=True)
class BalanceGeneralView:
    """Balance General tagged with its snapshot date."""

    date: date
    balance: BalanceGeneral


@dataclass(frozen=True)
class RentabilidadRecord:
    """Profitability figures for one snapshot (percentages for ROA/ROI)."""

    date: date
    roa: float
    roi: float
    utilidad_neta: float
    activo_total: float
    patrimonio: float
    ingresos: float = 0.0
    gastos: float = 0.0
    pasivo_total: float = 0.0


@dataclass(frozen=True)
class LiquidityRecord:
    """Working capital inputs for one snapshot."""

    date: date
    working_capital: float
    activos_corrientes: float
    pasivos_corrientes: float
    inventarios: float = 0.0

    @property
    def current_ratio(self) -> float:
        """Return current assets over current liabilities, 0 without debt."""
        if self.pasivos_corrientes <= 0:
            return 0.0
        return self.activos_corrientes / self.pasivos_corrientes

    @property
    def acid_test(self) -> float:
        """Return the quick ratio (current assets net of inventory)."""
        if self.pasivos_corrientes <= 0:
            return 0.0
        return (
            self.activos_corrientes - self.inventarios
        ) / self.pasivos_corrientes


@dataclass(frozen=True)
class FinancialStructureRecord:
    """Debt and autonomy percentages for one snapshot."""

    date: date
    activo_total: float
    pasivo_total: float
    patrimonio: float
    endeudamiento: float
    autonomia: float


@dataclass(frozen=True)
class EbitdaRecord:
    """EBITDA and its operating inputs for one snapshot."""

    date: date
    ebitda: float
    margen_ebitda: float
    ingresos: float
    costo_explotacion: float
    gastos_operacionales: float
    total_gastos_operacionales: float
    utilidad_operacional: float
    depreciacion: float
    gastos_financieros: float
    impuestos: float


@dataclass(frozen=True)
class ProfitMarginRecord:
    """Net, operating and gross margins (percent of operating income)."""

    date: date
    margen_neto: float
    margen_operacional: float
    margen_bruto: float
    ingresos: float
    utilidad_neta: float
    utilidad_operacional: float


@dataclass(frozen=True)
class CollectionDaysRecord:
    """Days sales outstanding and days payable for one snapshot.

    Attributes:
        dias_cobro: Receivables over income, times a 360 day year.
        dias_pago: Payables over cost of sales, times a 360 day year.
        costo_ventas: Purchases adjusted by the inventory change against the
            previous snapshot.
    """

    date: date
    dias_cobro: float
    dias_pago: float
    cuentas_por_cobrar: float
    cuentas_por_pagar: float
    ingresos: float
    costo_ventas: float
    inventario: float = 0.0

    @property
    def gap(self) -> float:
        """Return collection days minus payment days."""
        return self.dias_cobro - self.dias_pago


__all__ = [
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
]
