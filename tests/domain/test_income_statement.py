"""Tests for the income statement and profit margin services."""

from datetime import date

import pytest

from src.domain.models import AccountRow
from src.domain.services.income_statement import (
    build_income_statement,
    compare_income_statements,
    compute_line_variation,
    compute_profit_margins,
    group_result_accounts,
)


SNAPSHOT_DATE = date(2024, 6, 30)


def _income(code: str, amount: float, name: str = "") -> AccountRow:
    return AccountRow(
        account_number=code,
        account_name=name or f"Cuenta {code}",
        incomes=amount,
    )


def _expense(code: str, amount: float, name: str = "") -> AccountRow:
    return AccountRow(
        account_number=code,
        account_name=name or f"Cuenta {code}",
        expenses=amount,
    )


def _rows() -> list[AccountRow]:
    return [
        _income("4101", 1000.0, "Ventas"),
        _expense("3101", 400.0, "Costo de Ventas"),
        _expense("3201", 150.0, "Remuneraciones"),
        _expense("3301", 50.0, "Depreciación"),
        _income("4201", 30.0, "Intereses Ganados"),
        _expense("3401", 20.0, "Gastos Financieros"),
        _expense("3501", 10.0, "Corrección Monetaria"),
        _expense("3601", 80.0, "Impuesto Renta"),
    ]


def test_groups_use_income_column_for_4x_and_expenses_for_3x() -> None:
    rows = [
        # The wrong column is ignored for each family.
        AccountRow(account_number="4101", incomes=100.0, expenses=999.0),
        AccountRow(account_number="3101", incomes=999.0, expenses=40.0),
    ]

    groups = group_result_accounts(rows)

    assert groups["41"].amount == 100.0
    assert groups["31"].amount == 40.0
    assert list(groups) == ["41", "31", "32", "33", "42", "34", "35", "36"]


def test_groups_skip_non_positive_and_unknown_accounts() -> None:
    rows = [
        _income("4101", 100.0),
        _income("4102", -20.0),
        _income("4103", 0.0),
        _expense("3901", 500.0),
        AccountRow(account_number="1101", assets=900.0),
        AccountRow(account_name="Sumas", incomes=100.0),
        AccountRow(account_number="", incomes=100.0),
    ]

    groups = group_result_accounts(rows)

    assert groups["41"].amount == 100.0
    assert [line.account_code for line in groups["41"].details] == ["4101"]
    assert groups["32"].amount == 0.0
    assert groups["32"].details == []


def test_groups_add_parent_and_child_accounts() -> None:
    groups = group_result_accounts(
        [_income("41", 100.0), _income("4101", 60.0)]
    )

    assert groups["41"].amount == 160.0


def test_build_income_statement_subtotals() -> None:
    statement = build_income_statement(SNAPSHOT_DATE, _rows())

    assert statement.date == SNAPSHOT_DATE
    assert statement.ingresos_operacionales == 1000.0
    assert statement.margen_bruto == 600.0
    assert statement.resultado_operacional == 400.0
    assert statement.resultado_antes_impuestos == 400.0
    assert statement.impuesto_renta == 80.0
    assert statement.utilidad_perdida == 320.0
    assert statement.margen_neto_pct == pytest.approx(32.0)
    assert statement.margen_operacional_pct == pytest.approx(40.0)


def test_lines_carry_vertical_analysis_in_display_order() -> None:
    lines = build_income_statement(SNAPSHOT_DATE, _rows()).lines()

    assert lines[0].key == "ingresos_operacionales"
    assert lines[0].vertical_analysis == pytest.approx(100.0)
    assert lines[-1].key == "utilidad_perdida"
    assert lines[-1].is_subtotal
    assert not lines[1].is_subtotal
    by_key = {line.key: line for line in lines}
    assert by_key["costo_ventas"].vertical_analysis == pytest.approx(40.0)
    assert by_key["margen_bruto"].vertical_analysis == pytest.approx(60.0)


def test_vertical_analysis_is_zero_without_operating_income() -> None:
    statement = build_income_statement(
        SNAPSHOT_DATE,
        [_expense("3101", 400.0), _income("4201", 50.0)],
    )

    assert statement.ingresos_operacionales == 0.0
    assert statement.utilidad_perdida == -350.0
    assert all(line.vertical_analysis == 0.0 for line in statement.lines())
    assert statement.margen_bruto_pct == 0.0
    assert statement.margen_neto_pct == 0.0


def test_compute_line_variation_rules() -> None:
    assert compute_line_variation(150.0, 100.0).percentage == 50.0
    assert compute_line_variation(-50.0, -100.0).percentage == 50.0
    assert compute_line_variation(150.0, 100.0).absolute == 50.0
    assert compute_line_variation(10.0, 0.0).percentage == 100.0
    assert compute_line_variation(0.0, 0.0).percentage == 0.0


def test_compare_income_statements() -> None:
    current = build_income_statement(SNAPSHOT_DATE, _rows())
    previous = build_income_statement(
        date(2024, 5, 31),
        [_income("4101", 800.0)],
    )

    variations = compare_income_statements(current, previous)

    assert variations["ingresos_operacionales"].absolute == 200.0
    assert variations["ingresos_operacionales"].percentage == 25.0
    assert variations["costo_ventas"].percentage == 100.0
    assert compare_income_statements(current, None) == {}


def test_compute_profit_margins() -> None:
    record = compute_profit_margins(SNAPSHOT_DATE, _rows())

    assert record.date == SNAPSHOT_DATE
    assert record.ingresos == 1000.0
    assert record.utilidad_neta == 320.0
    assert record.utilidad_operacional == 400.0
    assert record.margen_neto == pytest.approx(32.0)
    assert record.margen_operacional == pytest.approx(40.0)
    assert record.margen_bruto == pytest.approx(60.0)


def test_profit_margins_are_zero_without_income() -> None:
    record = compute_profit_margins(SNAPSHOT_DATE, [_expense("3201", 10.0)])

    assert record.margen_neto == 0.0
    assert record.margen_operacional == 0.0
    assert record.utilidad_neta == -10.0
