"""Tests for the LoadBalanceSnapshotUseCase."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.load_balance_snapshot import (
    LoadBalanceSnapshotResult,
    LoadBalanceSnapshotUseCase,
    parse_snapshot_date,
)
from src.domain.models import AccountRow


TODAY = date(2024, 6, 30)


def _build_use_case(payload=None):
    balance_source = MagicMock()
    balance_source.fetch_balance_rows.return_value = payload or []
    repository = MagicMock()
    repository.save_snapshot.side_effect = lambda snapshot: len(
        snapshot.rows
    )
    use_case = LoadBalanceSnapshotUseCase(
        balance_source=balance_source,
        snapshot_repository=repository,
        logger=MagicMock(),
    )
    return use_case, balance_source, repository


def test_parse_snapshot_date_accepts_iso_dates() -> None:
    assert parse_snapshot_date("2024-01-31") == date(2024, 1, 31)
    assert parse_snapshot_date(" 2024-02-29 ") == date(2024, 2, 29)


@pytest.mark.parametrize("value", ["2024/01/31", "31-01-2024", "", "abc"])
def test_parse_snapshot_date_rejects_other_formats(value) -> None:
    with pytest.raises(ValueError, match="Expected format YYYY-MM-DD"):
        parse_snapshot_date(value)


def test_parse_snapshot_date_rejects_impossible_dates() -> None:
    with pytest.raises(ValueError):
        parse_snapshot_date("2024-02-30")


def test_run_fetches_normalizes_and_saves_snapshot() -> None:
    """The default report is fetched, normalized and stored for the date."""
    payload = [
        {"accountNumber": "11", "accountName": "Caja", "assets": "100"},
        {"accountName": "Sumas", "assets": 100, "liabilities": 0},
        "not-a-row",
    ]
    use_case, balance_source, repository = _build_use_case(payload)

    results = use_case.run(date(2024, 1, 31), today=TODAY)

    assert results == [
        LoadBalanceSnapshotResult(
            date=date(2024, 1, 31),
            report_type="8Columns",
            record_count=2,
        )
    ]
    repository.prepare_storage.assert_called_once()
    balance_source.fetch_balance_rows.assert_called_once_with(
        "8Columns",
        date(2024, 1, 31),
    )
    saved = repository.save_snapshot.call_args.args[0]
    assert saved.snapshot_id == "2024-01-31-8Columns"
    assert saved.rows[0] == AccountRow(
        account_number="11",
        account_name="Caja",
        assets=100.0,
    )


def test_run_loads_each_report_type_once() -> None:
    use_case, balance_source, repository = _build_use_case()

    results = use_case.run(
        date(2024, 1, 31),
        report_types=["totals", "8Columns", "totals"],
        today=TODAY,
    )

    assert [result.report_type for result in results] == [
        "totals",
        "8Columns",
    ]
    assert balance_source.fetch_balance_rows.call_count == 2
    assert repository.save_snapshot.call_count == 2


def test_run_rejects_future_dates() -> None:
    use_case, balance_source, repository = _build_use_case()

    with pytest.raises(ValueError, match="future"):
        use_case.run(date(2024, 7, 1), today=TODAY)

    balance_source.fetch_balance_rows.assert_not_called()
    repository.prepare_storage.assert_not_called()


def test_run_accepts_today() -> None:
    use_case, _, _ = _build_use_case()

    results = use_case.run(TODAY, today=TODAY)

    assert results[0].date == TODAY


def test_run_rejects_unknown_report_types() -> None:
    use_case, balance_source, _ = _build_use_case()

    with pytest.raises(ValueError, match="Unsupported report types: bogus"):
        use_case.run(date(2024, 1, 31), report_types=["bogus"], today=TODAY)

    balance_source.fetch_balance_rows.assert_not_called()


def test_run_rejects_empty_report_list() -> None:
    use_case, _, _ = _build_use_case()

    with pytest.raises(ValueError, match="No report types specified"):
        use_case.run(date(2024, 1, 31), report_types=[], today=TODAY)


def test_run_propagates_source_errors() -> None:
    """ERP failures surface to the caller and nothing is saved."""
    use_case, balance_source, repository = _build_use_case()
    balance_source.fetch_balance_rows.side_effect = RuntimeError("down")

    with pytest.raises(RuntimeError, match="down"):
        use_case.run(date(2024, 1, 31), today=TODAY)

    repository.save_snapshot.assert_not_called()
