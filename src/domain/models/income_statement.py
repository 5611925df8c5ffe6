"""Domain models for the income statement (Estado de Resultados)."""

from dataclasses import dataclass, field
from datetime import date

from src.domain.models.statements import BalanceLine


@dataclass(frozen=True)
class IncomeStatementGroup:
    """Accounts of one two-digit prefix and their positive total."""

    code: str
    label: str
    amount: float
    details: list[BalanceLine] = field(default_factory=list)


@dataclass(frozen=True)
class IncomeStatementLine:
    """Display line of the income statement.

    Attributes:
        key: Stable identifier, e.g. ``margen_bruto``.
        label: Spanish display label.
        amount: Line amount.
        vertical_analysis: Amount as a percentage of operating income.
        code: Account prefix for group lines, None for subtotals.
    """

    key: str
    label: str
    amount: float
    vertical_analysis: float
    code: str | None = None

    @property
    def is_subtotal(self) -> bool:
        return self.code is None


@dataclass(frozen=True)
class LineVariation:
    """Change of a line against the previous statement."""

    absolute: float
    percentage: float


@dataclass(frozen=True)
class IncomeStatement:
    """Income statement derived from the result accounts of one snapshot.

    Subtotals follow the Chilean layout: gross margin, operating result,
    result before taxes and the result of the exercise.
    """

    date: date
    groups: dict[str, IncomeStatementGroup]
    ingresos_operacionales: float
    costo_ventas: float
    margen_bruto: float
    gastos_admin: float
    depreciacion: float
    resultado_operacional: float
    ingresos_no_operacionales: float
    gastos_no_operacionales: float
    correccion_monetaria: float
    resultado_antes_impuestos: float
    impuesto_renta: float
    utilidad_perdida: float

    def vertical_analysis(self, amount: float) -> float:
        """Return ``amount`` over operating income in percent, 0 without it."""
        if self.ingresos_operacionales <= 0:
            return 0.0
        return (amount / self.ingresos_operacionales) * 100

    @property
    def margen_bruto_pct(self) -> float:
        return self.vertical_analysis(self.margen_bruto)

    @property
    def margen_operacional_pct(self) -> float:
        return self.vertical_analysis(self.resultado_operacional)

    @property
    def margen_neto_pct(self) -> float:
        return self.vertical_analysis(self.utilidad_perdida)

    def lines(self) -> list[IncomeStatementLine]:
        """Return the statement lines in display order."""
        entries = [
            ("ingresos_operacionales", "Ingresos Operacionales", "41"),
            ("costo_ventas", "(-) Costo de Ventas", "31"),
            ("margen_bruto", "MARGEN BRUTO", None),
            ("gastos_admin", "(-) Gastos de Administración y Ventas", "32"),
            ("depreciacion", "(-) Depreciación", "33"),
            ("resultado_operacional", "RESULTADO OPERACIONAL", None),
            (
                "ingresos_no_operacionales",
                "(+) Ingresos No Operacionales",
                "42",
            ),
            ("gastos_no_operacionales", "(-) Gastos No Operacionales", "34"),
            ("correccion_monetaria", "(-) Corrección Monetaria", "35"),
            (
                "resultado_antes_impuestos",
                "RESULTADO ANTES DE IMPUESTOS",
                None,
            ),
            ("impuesto_renta", "(-) Impuesto a la Renta", "36"),
            ("utilidad_perdida", "UTILIDAD/PÉRDIDA DEL EJERCICIO", None),
        ]
        return [
            IncomeStatementLine(
                key=key,
                label=label,
                amount=getattr(self, key),
                vertical_analysis=self.vertical_analysis(getattr(self, key)),
                code=code,
            )
            for key, label, code in entries
        ]


__all__ = [
    "IncomeStatementGroup",
    "IncomeStatementLine",
    "LineVariation",
    "IncomeStatement",
]
