"""Tests for profitability and financial structure services."""

from datetime import date

import pytest

from src.domain.models import AccountRow
from src.domain.services.profitability import (
    compute_ebitda,
    compute_financial_structure,
    compute_rentabilidad,
    find_totals_row,
)


SNAPSHOT_DATE = date(2024, 3, 31)


def _sumas(assets, liabilities, incomes=0.0, expenses=0.0) -> AccountRow:
    return AccountRow(
        account_number="",
        account_name="Sumas",
        assets=assets,
        liabilities=liabilities,
        incomes=incomes,
        expenses=expenses,
    )


def test_find_totals_row_returns_first_sumas_row() -> None:
    first = _sumas(1.0, 0.0)
    rows = [
        AccountRow(account_number="11", account_name="Caja"),
        first,
        _sumas(2.0, 0.0),
    ]

    assert find_totals_row(rows) is first
    assert find_totals_row([]) is None


def test_compute_rentabilidad_from_totals_row() -> None:
    """ROA and ROI are computed from the "Sumas" row in percent."""
    rows = [
        AccountRow(account_number="11", account_name="Caja", assets=5.0),
        _sumas(1000.0, 400.0, incomes=500.0, expenses=300.0),
    ]

    record = compute_rentabilidad(SNAPSHOT_DATE, rows)

    assert record.date == SNAPSHOT_DATE
    assert record.utilidad_neta == pytest.approx(200.0)
    assert record.activo_total == pytest.approx(1000.0)
    assert record.patrimonio == pytest.approx(600.0)
    assert record.roa == pytest.approx(20.0)
    assert record.roi == pytest.approx(33.3333, rel=1e-4)
    assert record.ingresos == 500.0
    assert record.gastos == 300.0
    assert record.pasivo_total == 400.0


def test_compute_rentabilidad_zero_assets_yield_zero_roa() -> None:
    """Non-positive total assets give an ROA of 0."""
    record = compute_rentabilidad(
        SNAPSHOT_DATE,
        [_sumas(0.0, 0.0, incomes=100.0, expenses=20.0)],
    )

    assert record.roa == 0.0
    assert record.roi == 0.0
    assert record.utilidad_neta == 80.0


def test_compute_rentabilidad_non_positive_equity_yields_zero_roi() -> None:
    """Negative equity does not produce a misleading ROI."""
    record = compute_rentabilidad(
        SNAPSHOT_DATE,
        [_sumas(100.0, 150.0, incomes=10.0, expenses=0.0)],
    )

    assert record.patrimonio == -50.0
    assert record.roa == pytest.approx(10.0)
    assert record.roi == 0.0


def test_compute_rentabilidad_without_totals_row_is_zero() -> None:
    """A report without "Sumas" yields a zero-filled record."""
    rows = [AccountRow(account_number="11", account_name="Caja", assets=9.0)]

    record = compute_rentabilidad(SNAPSHOT_DATE, rows)

    assert record.date == SNAPSHOT_DATE
    assert record.roa == 0.0
    assert record.roi == 0.0
    assert record.utilidad_neta == 0.0
    assert record.activo_total == 0.0
    assert record.patrimonio == 0.0


def test_compute_financial_structure_percentages() -> None:
    record = compute_financial_structure(
        SNAPSHOT_DATE,
        [_sumas(1000.0, 400.0)],
    )

    assert record.endeudamiento == pytest.approx(40.0)
    assert record.autonomia == pytest.approx(60.0)
    assert record.patrimonio == pytest.approx(600.0)


def test_compute_financial_structure_guards_zero_assets() -> None:
    record = compute_financial_structure(SNAPSHOT_DATE, [_sumas(0.0, 10.0)])

    assert record.endeudamiento == 0.0
    assert record.autonomia == 0.0


def test_compute_financial_structure_without_totals_row() -> None:
    record = compute_financial_structure(SNAPSHOT_DATE, [])

    assert record.activo_total == 0.0
    assert record.endeudamiento == 0.0


def test_compute_ebitda_from_exact_accounts() -> None:
    rows = [
        AccountRow(account_number="31", expenses=400.0),
        # Children of "31" are not read; only the exact account counts.
        AccountRow(account_number="3101", expenses=999.0),
        AccountRow(account_number="32", expenses=200.0),
        AccountRow(account_number="3301", expenses=50.0),
        AccountRow(account_number="3401", expenses=30.0),
        AccountRow(account_number="36", expenses=25.0),
        _sumas(0.0, 0.0, incomes=1000.0, expenses=700.0),
    ]

    record = compute_ebitda(SNAPSHOT_DATE, rows)

    assert record.ingresos == 1000.0
    assert record.total_gastos_operacionales == 600.0
    assert record.utilidad_operacional == 400.0
    assert record.ebitda == 450.0
    assert record.margen_ebitda == pytest.approx(45.0)
    assert record.gastos_financieros == 30.0
    assert record.impuestos == 25.0


def test_compute_ebitda_without_totals_row_is_zero() -> None:
    record = compute_ebitda(
        SNAPSHOT_DATE,
        [AccountRow(account_number="31", expenses=400.0)],
    )

    assert record.ebitda == 0.0
    assert record.costo_explotacion == 0.0
    assert record.margen_ebitda == 0.0


def test_ebitda_margin_is_zero_without_income() -> None:
    rows = [
        AccountRow(account_number="32", expenses=100.0),
        _sumas(0.0, 0.0, incomes=0.0, expenses=100.0),
    ]

    record = compute_ebitda(SNAPSHOT_DATE, rows)

    assert record.ebitda == -100.0
    assert record.margen_ebitda == 0.0
