"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date

import altair as alt
import streamlit as st

from src.adapters.interface.streamlit.ratio_charts import (
    EBITDA_LABEL,
    WORKING_CAPITAL_LABEL,
    build_bar_figure,
    build_collection_days_data,
    build_current_ratio_data,
    build_ebitda_data,
    build_financial_structure_data,
    build_income_statement_data,
    build_line_figure,
    build_profit_margin_data,
    build_profitability_data,
    build_working_capital_data,
)
from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.application.use_cases.get_balance_general import (
    BalanceGeneralView,
    GetBalanceGeneralUseCase,
)
from src.application.use_cases.get_collection_days import (
    CollectionDaysRecord,
    GetCollectionDaysUseCase,
)
from src.application.use_cases.get_ebitda import (
    EbitdaRecord,
    GetEbitdaUseCase,
)
from src.application.use_cases.get_financial_structure import (
    FinancialStructureRecord,
    GetFinancialStructureUseCase,
)
from src.application.use_cases.get_income_statement import (
    GetIncomeStatementUseCase,
    IncomeStatement,
)
from src.application.use_cases.get_liquidity import (
    GetLiquidityUseCase,
    LiquidityRecord,
)
from src.application.use_cases.get_profit_margins import (
    GetProfitMarginsUseCase,
    ProfitMarginRecord,
)
from src.application.use_cases.get_rentabilidad import (
    GetRentabilidadUseCase,
    RentabilidadRecord,
)
from src.application.use_cases.snapshot_batches import latest_per_month
from src.domain.models import BalanceLine
from src.domain.services.income_statement import compare_income_statements
from src.infrastructure.container import (
    build_report_type,
    build_snapshot_repository,
)
from src.infrastructure.logging.logger import get_usage_logger


PAGES = [
    "Balance General",
    "Rentabilidad",
    "Capital de Trabajo",
    "Ratio Circulante",
    "Estructura Financiera",
    "Estado de Resultados",
    "EBITDA",
    "Margen de Rentabilidad",
    "Días de Cobro y Pago",
]


@st.cache_resource(show_spinner=False)
def _get_repository() -> SnapshotRepositoryPort:
    """Return the snapshot repository shared by Streamlit sessions."""
    return build_snapshot_repository()


def _load_available_years() -> list[int]:
    """Return the years having stored snapshots."""
    use_case = GetBalanceGeneralUseCase(
        _get_repository(),
        report_type=build_report_type(),
    )
    return use_case.available_years()


def _load_balance_general(year: int | None) -> list[BalanceGeneralView]:
    """Derive the Balance General of every snapshot of a year."""
    use_case = GetBalanceGeneralUseCase(
        _get_repository(),
        report_type=build_report_type(),
    )
    return use_case.execute(year=year)


def _load_rentabilidad() -> list[RentabilidadRecord]:
    """Derive profitability records for every snapshot."""
    use_case = GetRentabilidadUseCase(
        _get_repository(),
        report_type=build_report_type(),
    )
    return use_case.execute()


def _load_liquidity() -> list[LiquidityRecord]:
    """Derive liquidity records for every snapshot."""
    use_case = GetLiquidityUseCase(
        _get_repository(),
        report_type=build_report_type(),
    )
    return use_case.execute()


def _load_financial_structure() -> list[FinancialStructureRecord]:
    """Derive financial structure records for every snapshot."""
    use_case = GetFinancialStructureUseCase(
        _get_repository(),
        report_type=build_report_type(),
    )
    return use_case.execute()


def _load_income_statements(year: int | None) -> list[IncomeStatement]:
    """Build the income statement of every snapshot of a year."""
    use_case = GetIncomeStatementUseCase(
        _get_repository(),
        report_type=build_report_type(),
    )
    return use_case.execute(year=year)


def _load_ebitda() -> list[EbitdaRecord]:
    """Derive EBITDA records for every snapshot."""
    use_case = GetEbitdaUseCase(
        _get_repository(),
        report_type=build_report_type(),
    )
    return use_case.execute()


def _load_profit_margins() -> list[ProfitMarginRecord]:
    """Derive margin records for every snapshot."""
    use_case = GetProfitMarginsUseCase(
        _get_repository(),
        report_type=build_report_type(),
    )
    return use_case.execute()


def _load_collection_days() -> list[CollectionDaysRecord]:
    """Derive collection and payment days for every snapshot."""
    use_case = GetCollectionDaysUseCase(
        _get_repository(),
        report_type=build_report_type(),
    )
    return use_case.execute()


def _format_currency(value: float) -> str:
    """Format amounts for display (Chilean pesos, no decimals)."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}".replace(",", ".")


def _format_percent(value: float) -> str:
    """Format percentages for display."""
    return f"{value:.2f}%"


def _format_ratio(value: float) -> str:
    """Format plain ratios for display."""
    return f"{value:.2f}"


def _monthly_toggle(key: str) -> bool:
    """Return True when the user wants one snapshot per month."""
    return st.sidebar.checkbox(
        "Un registro por mes",
        value=True,
        key=key,
    )


def _select_records(records: Sequence, monthly: bool) -> list:
    """Return chart records: one per month or every snapshot."""
    if monthly:
        return latest_per_month(records)
    return sorted(records, key=lambda record: record.date)


def _balance_lines_table(lines: Sequence[BalanceLine]) -> list[dict]:
    """Return table rows for balance lines."""
    return [
        {
            "Código": line.account_code,
            "Cuenta": line.account_name,
            "Monto": _format_currency(line.amount),
        }
        for line in lines
    ]


def _prepare_donut_chart_data(
    lines: Sequence[BalanceLine],
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], float]:
    """Prepare donut chart data with a Top-N + Otros grouping.

    Only positive amounts are charted.

    Args:
        lines: Balance lines of one side of the Balance General.
        max_categories: Maximum accounts to keep before grouping into Otros.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    positive = [line for line in lines if line.amount > 0]
    sorted_items = sorted(
        positive,
        key=lambda item: item.amount,
        reverse=True,
    )
    top_items = [
        (item.account_name or item.account_code, item.amount)
        for item in sorted_items[:max_categories]
    ]
    other_amount = sum(item.amount for item in sorted_items[max_categories:])
    if other_amount:
        top_items.append(("Otros", other_amount))
    total_amount = sum(item.amount for item in sorted_items)
    data: list[dict[str, str | float]] = []
    for category, amount in top_items:
        share = (amount / total_amount) * 100 if total_amount else 0.0
        data.append(
            {
                "category": category,
                "amount": float(amount),
                "amount_label": _format_currency(amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _render_donut_chart(
    lines: Sequence[BalanceLine],
    title: str,
    max_categories: int = 6,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of the largest accounts of a balance side."""
    data, _ = _prepare_donut_chart_data(lines, max_categories=max_categories)
    st.subheader(title)
    if not data:
        st.info("No hay montos positivos para graficar.")
        return

    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.3)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    chart = base.add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )
    st.altair_chart(chart, use_container_width=True)


def _render_balance_general() -> None:
    """Render the Balance General of a selected snapshot date."""
    years = _load_available_years()
    if not years:
        st.warning("No hay balances cargados. Ejecute la carga primero.")
        return
    year = st.sidebar.selectbox("Año", years, index=0)
    views = _load_balance_general(year)
    if not views:
        st.warning(f"No hay balances para {year}.")
        return
    dates = [view.date for view in views]
    selected_date = st.sidebar.selectbox(
        "Fecha",
        dates,
        index=0,
        format_func=date.isoformat,
    )
    view = next(item for item in views if item.date == selected_date)
    totals = view.balance.totals

    assets_col, liabilities_col, equity_col, check_col = st.columns(4)
    assets_col.metric("Total Activos", _format_currency(totals.total_assets))
    liabilities_col.metric(
        "Total Pasivos",
        _format_currency(totals.total_liabilities),
    )
    equity_col.metric("Patrimonio", _format_currency(totals.total_equity))
    check_col.metric("Cuadratura", _format_currency(totals.balance_check))

    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_donut_chart(view.balance.assets, "Composición de Activos")
    with chart_right:
        _render_donut_chart(
            view.balance.liabilities,
            "Composición de Pasivos",
        )

    st.subheader("Activos")
    st.dataframe(
        _balance_lines_table(view.balance.assets),
        use_container_width=True,
        hide_index=True,
    )
    st.subheader("Pasivos")
    st.dataframe(
        _balance_lines_table(view.balance.liabilities),
        use_container_width=True,
        hide_index=True,
    )
    st.subheader("Patrimonio")
    st.dataframe(
        _balance_lines_table(view.balance.equity),
        use_container_width=True,
        hide_index=True,
    )


def _render_rentabilidad() -> None:
    """Render ROA and ROI over time."""
    records = _load_rentabilidad()
    if not records:
        st.warning("No hay datos de rentabilidad disponibles.")
        return
    latest = records[0]
    roa_col, roi_col, income_col = st.columns(3)
    roa_col.metric("ROA", _format_percent(latest.roa))
    roi_col.metric("ROI", _format_percent(latest.roi))
    income_col.metric(
        "Utilidad Neta",
        _format_currency(latest.utilidad_neta),
    )
    selected = _select_records(records, _monthly_toggle("roa_monthly"))
    st.plotly_chart(
        build_line_figure(build_profitability_data(selected)),
        use_container_width=True,
    )


def _render_capital_trabajo() -> None:
    """Render working capital with its inputs."""
    records = _load_liquidity()
    if not records:
        st.warning("No hay datos de liquidez disponibles.")
        return
    st.caption(f"Última actualización: {records[0].date.isoformat()}")
    st.metric(
        "Capital de Trabajo",
        _format_currency(records[0].working_capital),
    )
    selected = _select_records(records, _monthly_toggle("wc_monthly"))
    st.plotly_chart(
        build_line_figure(
            build_working_capital_data(selected),
            reference_series=WORKING_CAPITAL_LABEL,
        ),
        use_container_width=True,
    )


def _render_ratio_circulante() -> None:
    """Render current ratio and acid test."""
    records = _load_liquidity()
    if not records:
        st.warning("No hay datos de liquidez disponibles.")
        return
    latest = records[0]
    ratio_col, acid_col = st.columns(2)
    ratio_col.metric("Ratio Corriente", _format_ratio(latest.current_ratio))
    acid_col.metric("Prueba Ácida", _format_ratio(latest.acid_test))
    selected = _select_records(records, _monthly_toggle("cr_monthly"))
    st.plotly_chart(
        build_bar_figure(build_current_ratio_data(selected)),
        use_container_width=True,
    )


def _render_estructura_financiera() -> None:
    """Render debt and autonomy percentages."""
    records = _load_financial_structure()
    if not records:
        st.warning("No hay datos de estructura financiera disponibles.")
        return
    latest = records[0]
    debt_col, autonomy_col = st.columns(2)
    debt_col.metric("Endeudamiento", _format_percent(latest.endeudamiento))
    autonomy_col.metric("Autonomía", _format_percent(latest.autonomia))
    selected = _select_records(records, _monthly_toggle("fs_monthly"))
    st.plotly_chart(
        build_bar_figure(
            build_financial_structure_data(selected),
            stacked=True,
        ),
        use_container_width=True,
    )


def _income_statement_table(
    statement: IncomeStatement,
    previous: IncomeStatement | None,
) -> list[dict]:
    """Return table rows with vertical and horizontal analysis."""
    variations = compare_income_statements(statement, previous)
    table = []
    for line in statement.lines():
        row = {
            "Concepto": line.label,
            "Monto": _format_currency(line.amount),
            "% Ingresos": _format_percent(line.vertical_analysis),
        }
        variation = variations.get(line.key)
        if variation is not None:
            row["Variación"] = _format_currency(variation.absolute)
            row["Variación %"] = _format_percent(variation.percentage)
        table.append(row)
    return table


def _render_estado_resultados() -> None:
    """Render the income statement of a selected snapshot date."""
    years = _load_available_years()
    if not years:
        st.warning("No hay balances cargados. Ejecute la carga primero.")
        return
    year = st.sidebar.selectbox("Año", years, index=0)
    statements = _load_income_statements(year)
    if not statements:
        st.warning(f"No hay estados de resultados para {year}.")
        return
    dates = [statement.date for statement in statements]
    selected_date = st.sidebar.selectbox(
        "Fecha",
        dates,
        index=0,
        format_func=date.isoformat,
    )
    position = dates.index(selected_date)
    statement = statements[position]
    # Statements are newest first, so the previous period comes next.
    previous = (
        statements[position + 1] if position + 1 < len(statements) else None
    )

    income_col, gross_col, result_col, margin_col = st.columns(4)
    income_col.metric(
        "Ingresos Operacionales",
        _format_currency(statement.ingresos_operacionales),
    )
    gross_col.metric("Margen Bruto", _format_currency(statement.margen_bruto))
    result_col.metric(
        "Utilidad/Pérdida",
        _format_currency(statement.utilidad_perdida),
    )
    margin_col.metric(
        "Margen Neto",
        _format_percent(statement.margen_neto_pct),
    )

    st.subheader("Estado de Resultados")
    st.dataframe(
        _income_statement_table(statement, previous),
        use_container_width=True,
        hide_index=True,
    )
    st.plotly_chart(
        build_bar_figure(build_income_statement_data(statements)),
        use_container_width=True,
    )


def _render_ebitda() -> None:
    """Render EBITDA and the EBITDA margin."""
    records = _load_ebitda()
    if not records:
        st.warning("No hay datos de EBITDA disponibles.")
        return
    latest = records[0]
    ebitda_col, margin_col, operating_col = st.columns(3)
    ebitda_col.metric("EBITDA", _format_currency(latest.ebitda))
    margin_col.metric("Margen EBITDA", _format_percent(latest.margen_ebitda))
    operating_col.metric(
        "Utilidad Operacional",
        _format_currency(latest.utilidad_operacional),
    )
    selected = _select_records(records, _monthly_toggle("ebitda_monthly"))
    st.plotly_chart(
        build_line_figure(
            build_ebitda_data(selected),
            reference_series=EBITDA_LABEL,
        ),
        use_container_width=True,
    )


def _render_margen_rentabilidad() -> None:
    """Render net, operating and gross margins."""
    records = _load_profit_margins()
    if not records:
        st.warning("No hay datos de márgenes disponibles.")
        return
    latest = records[0]
    net_col, operating_col, gross_col = st.columns(3)
    net_col.metric("Margen Neto", _format_percent(latest.margen_neto))
    operating_col.metric(
        "Margen Operacional",
        _format_percent(latest.margen_operacional),
    )
    gross_col.metric("Margen Bruto", _format_percent(latest.margen_bruto))
    selected = _select_records(records, _monthly_toggle("pm_monthly"))
    st.plotly_chart(
        build_line_figure(build_profit_margin_data(selected)),
        use_container_width=True,
    )


def _render_dias_cobro_pago() -> None:
    """Render collection and payment days with their gap."""
    records = _load_collection_days()
    if not records:
        st.warning("No hay datos de cobro y pago disponibles.")
        return
    latest = records[0]
    collect_col, pay_col, gap_col = st.columns(3)
    collect_col.metric("Días de Cobro", f"{latest.dias_cobro:.1f}")
    pay_col.metric("Días de Pago", f"{latest.dias_pago:.1f}")
    gap_col.metric("Brecha", f"{latest.gap:.1f}")
    selected = _select_records(records, _monthly_toggle("days_monthly"))
    st.plotly_chart(
        build_bar_figure(build_collection_days_data(selected)),
        use_container_width=True,
    )


_RENDERERS = {
    "Balance General": _render_balance_general,
    "Rentabilidad": _render_rentabilidad,
    "Capital de Trabajo": _render_capital_trabajo,
    "Ratio Circulante": _render_ratio_circulante,
    "Estructura Financiera": _render_estructura_financiera,
    "Estado de Resultados": _render_estado_resultados,
    "EBITDA": _render_ebitda,
    "Margen de Rentabilidad": _render_margen_rentabilidad,
    "Días de Cobro y Pago": _render_dias_cobro_pago,
}


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Balance Dashboard", layout="wide")
    st.title("Balance Dashboard")

    page = st.sidebar.selectbox("Página", PAGES)
    get_usage_logger().info(f"Page viewed: {page}")
    _RENDERERS[page]()


if __name__ == "__main__":  # pragma: no cover
    main()
