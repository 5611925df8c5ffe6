"""Ratio chart presentation logic for the Streamlit UI.

This module contains pure, testable transformations from the records produced
by the read use cases to chart series and Plotly figures.

The UI is responsible for:
    - loading the records (no IO here),
    - choosing between every snapshot and one snapshot per month,
    - rendering the figures.

Use cases return records newest first; every series built here is
chronological.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.domain.models import (
    CollectionDaysRecord,
    EbitdaRecord,
    FinancialStructureRecord,
    IncomeStatement,
    LiquidityRecord,
    ProfitMarginRecord,
    RentabilidadRecord,
)

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


WORKING_CAPITAL_LABEL = "Capital de Trabajo"
CURRENT_ASSETS_LABEL = "Activos Corrientes"
CURRENT_LIABILITIES_LABEL = "Pasivos Corrientes"
CURRENT_RATIO_LABEL = "Ratio Corriente"
ACID_TEST_LABEL = "Prueba Ácida"
ROA_LABEL = "ROA %"
ROI_LABEL = "ROI %"
DEBT_LABEL = "Endeudamiento %"
AUTONOMY_LABEL = "Autonomía %"
EBITDA_LABEL = "EBITDA"
EBITDA_MARGIN_LABEL = "Margen EBITDA %"
NET_MARGIN_LABEL = "Margen Neto %"
OPERATING_MARGIN_LABEL = "Margen Operacional %"
GROSS_MARGIN_LABEL = "Margen Bruto %"
INCOME_LABEL = "Ingresos Operacionales"
NET_RESULT_LABEL = "Utilidad/Pérdida"
COLLECTION_DAYS_LABEL = "Días de Cobro"
PAYMENT_DAYS_LABEL = "Días de Pago"


@dataclass(frozen=True)
class ChartSeries:
    """Named series of values aligned on shared x labels."""

    name: str
    values: list[float]


@dataclass(frozen=True)
class ChartData:
    """Chart-ready x labels and series."""

    labels: list[str]
    series: list[ChartSeries]

    def series_by_name(self, name: str) -> ChartSeries:
        """Return the series with the given name.

        Raises:
            KeyError: If no series has that name.
        """
        for item in self.series:
            if item.name == name:
                return item
        raise KeyError(name)


def _chronological(records: Sequence) -> list:
    return sorted(records, key=lambda record: record.date)


def build_working_capital_data(
    records: Sequence[LiquidityRecord],
) -> ChartData:
    """Build working capital series with its current asset and debt inputs."""
    ordered = _chronological(records)
    return ChartData(
        labels=[record.date.isoformat() for record in ordered],
        series=[
            ChartSeries(
                WORKING_CAPITAL_LABEL,
                [record.working_capital for record in ordered],
            ),
            ChartSeries(
                CURRENT_ASSETS_LABEL,
                [record.activos_corrientes for record in ordered],
            ),
            ChartSeries(
                CURRENT_LIABILITIES_LABEL,
                [record.pasivos_corrientes for record in ordered],
            ),
        ],
    )


def build_current_ratio_data(
    records: Sequence[LiquidityRecord],
) -> ChartData:
    """Build current ratio and acid test series rounded to 2 decimals."""
    ordered = _chronological(records)
    return ChartData(
        labels=[record.date.isoformat() for record in ordered],
        series=[
            ChartSeries(
                CURRENT_RATIO_LABEL,
                [round(record.current_ratio, 2) for record in ordered],
            ),
            ChartSeries(
                ACID_TEST_LABEL,
                [round(record.acid_test, 2) for record in ordered],
            ),
        ],
    )


def build_profitability_data(
    records: Sequence[RentabilidadRecord],
) -> ChartData:
    """Build ROA and ROI series in percent."""
    ordered = _chronological(records)
    return ChartData(
        labels=[record.date.isoformat() for record in ordered],
        series=[
            ChartSeries(ROA_LABEL, [record.roa for record in ordered]),
            ChartSeries(ROI_LABEL, [record.roi for record in ordered]),
        ],
    )


def build_financial_structure_data(
    records: Sequence[FinancialStructureRecord],
) -> ChartData:
    """Build debt and autonomy percentage series."""
    ordered = _chronological(records)
    return ChartData(
        labels=[record.date.isoformat() for record in ordered],
        series=[
            ChartSeries(
                DEBT_LABEL,
                [record.endeudamiento for record in ordered],
            ),
            ChartSeries(
                AUTONOMY_LABEL,
                [record.autonomia for record in ordered],
            ),
        ],
    )


def build_ebitda_data(records: Sequence[EbitdaRecord]) -> ChartData:
    """Build EBITDA amount and margin series."""
    ordered = _chronological(records)
    return ChartData(
        labels=[record.date.isoformat() for record in ordered],
        series=[
            ChartSeries(EBITDA_LABEL, [record.ebitda for record in ordered]),
            ChartSeries(
                EBITDA_MARGIN_LABEL,
                [record.margen_ebitda for record in ordered],
            ),
        ],
    )


def build_profit_margin_data(
    records: Sequence[ProfitMarginRecord],
) -> ChartData:
    """Build net, operating and gross margin series in percent."""
    ordered = _chronological(records)
    return ChartData(
        labels=[record.date.isoformat() for record in ordered],
        series=[
            ChartSeries(
                NET_MARGIN_LABEL,
                [record.margen_neto for record in ordered],
            ),
            ChartSeries(
                OPERATING_MARGIN_LABEL,
                [record.margen_operacional for record in ordered],
            ),
            ChartSeries(
                GROSS_MARGIN_LABEL,
                [record.margen_bruto for record in ordered],
            ),
        ],
    )


def build_income_statement_data(
    statements: Sequence[IncomeStatement],
) -> ChartData:
    """Build operating income and result of the exercise series."""
    ordered = _chronological(statements)
    return ChartData(
        labels=[statement.date.isoformat() for statement in ordered],
        series=[
            ChartSeries(
                INCOME_LABEL,
                [statement.ingresos_operacionales for statement in ordered],
            ),
            ChartSeries(
                NET_RESULT_LABEL,
                [statement.utilidad_perdida for statement in ordered],
            ),
        ],
    )


def build_collection_days_data(
    records: Sequence[CollectionDaysRecord],
) -> ChartData:
    """Build collection and payment days series rounded to 1 decimal."""
    ordered = _chronological(records)
    return ChartData(
        labels=[record.date.isoformat() for record in ordered],
        series=[
            ChartSeries(
                COLLECTION_DAYS_LABEL,
                [round(record.dias_cobro, 1) for record in ordered],
            ),
            ChartSeries(
                PAYMENT_DAYS_LABEL,
                [round(record.dias_pago, 1) for record in ordered],
            ),
        ],
    )


def average(values: Sequence[float]) -> float:
    """Return the mean of the values, 0 for an empty sequence."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def build_line_figure(
    data: ChartData,
    *,
    reference_series: str | None = None,
    height: int = 380,
) -> "go.Figure":
    """Build a Plotly line chart, with an optional average reference line.

    Args:
        data: Chart labels and series.
        reference_series: Series whose average is drawn as a dashed line.
        height: Figure height in pixels.

    Returns:
        go.Figure: Plotly figure ready for ``st.plotly_chart``.
    """
    import plotly.graph_objects as go

    fig = go.Figure()
    for item in data.series:
        fig.add_trace(
            go.Scatter(
                x=data.labels,
                y=item.values,
                name=item.name,
                mode="lines+markers",
            )
        )
    if reference_series is not None and data.labels:
        mean = average(data.series_by_name(reference_series).values)
        fig.add_hline(
            y=mean,
            line_dash="dash",
            annotation_text=f"Promedio {mean:,.2f}",
        )
    fig.update_layout(
        margin=dict(l=8, r=8, t=8, b=8),
        height=height,
        legend=dict(orientation="h"),
    )
    return fig


def build_bar_figure(
    data: ChartData,
    *,
    stacked: bool = False,
    height: int = 380,
) -> "go.Figure":
    """Build a Plotly grouped (or stacked) bar chart.

    Args:
        data: Chart labels and series.
        stacked: Stack the series instead of grouping them.
        height: Figure height in pixels.

    Returns:
        go.Figure: Plotly figure ready for ``st.plotly_chart``.
    """
    import plotly.graph_objects as go

    fig = go.Figure(
        data=[
            go.Bar(x=data.labels, y=item.values, name=item.name)
            for item in data.series
        ]
    )
    fig.update_layout(
        barmode="stack" if stacked else "group",
        margin=dict(l=8, r=8, t=8, b=8),
        height=height,
        legend=dict(orientation="h"),
    )
    return fig


__all__ = [
    "ChartSeries",
    "ChartData",
    "build_working_capital_data",
    "build_current_ratio_data",
    "build_profitability_data",
    "build_financial_structure_data",
    "build_ebitda_data",
    "build_profit_margin_data",
    "build_income_statement_data",
    "build_collection_days_data",
    "build_line_figure",
    "build_bar_figure",
    "average",
]
