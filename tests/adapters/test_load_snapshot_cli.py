"""Tests for the load_snapshot_cli adapter."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from src.adapters import load_snapshot_cli
from src.application.use_cases.load_balance_snapshot import (
    LoadBalanceSnapshotResult,
)


@pytest.fixture
def fake_logger(monkeypatch) -> MagicMock:
    logger = MagicMock()
    monkeypatch.setattr(load_snapshot_cli, "get_app_logger", lambda: logger)
    return logger


@pytest.fixture
def wired(monkeypatch):
    """Replace infrastructure builders and the use case with fakes."""
    captured = {}

    class _FakeUseCase:
        def __init__(self, balance_source, snapshot_repository, logger):
            captured["balance_source"] = balance_source
            captured["snapshot_repository"] = snapshot_repository

        def run(self, snapshot_date, report_types=None):
            captured["snapshot_date"] = snapshot_date
            captured["report_types"] = report_types
            return [
                LoadBalanceSnapshotResult(
                    date=snapshot_date,
                    report_type=name,
                    record_count=3,
                )
                for name in report_types or ["8Columns"]
            ]

    monkeypatch.setattr(
        load_snapshot_cli,
        "build_balance_source",
        lambda: "source",
    )
    monkeypatch.setattr(
        load_snapshot_cli,
        "build_snapshot_repository",
        lambda: "repository",
    )
    monkeypatch.setattr(
        load_snapshot_cli,
        "LoadBalanceSnapshotUseCase",
        _FakeUseCase,
    )
    return captured


def test_main_loads_default_report(wired, fake_logger, capsys) -> None:
    exit_code = load_snapshot_cli.main(["--date", "2024-01-31"])

    assert exit_code == 0
    assert wired["snapshot_date"] == date(2024, 1, 31)
    assert wired["report_types"] is None
    assert wired["balance_source"] == "source"
    assert wired["snapshot_repository"] == "repository"
    out = capsys.readouterr().out
    assert "Loaded 3 rows from 8Columns for 2024-01-31." in out


def test_main_accepts_repeated_reports(wired, fake_logger, capsys) -> None:
    exit_code = load_snapshot_cli.main(
        ["--date", "2024-01-31", "--report", "totals", "--report", "standard"]
    )

    assert exit_code == 0
    assert wired["report_types"] == ["totals", "standard"]
    out = capsys.readouterr().out
    assert "from totals" in out
    assert "from standard" in out


def test_main_returns_error_on_invalid_date(wired, fake_logger) -> None:
    exit_code = load_snapshot_cli.main(["--date", "31/01/2024"])

    assert exit_code == 1
    fake_logger.error.assert_called_once()
    assert "YYYY-MM-DD" in fake_logger.error.call_args.args[0]
    assert "snapshot_date" not in wired


def test_main_returns_error_on_configuration_failure(
    monkeypatch,
    fake_logger,
) -> None:
    def _missing_settings():
        raise RuntimeError("Missing environment variables: LAUDUS_API_URL")

    monkeypatch.setattr(
        load_snapshot_cli,
        "build_balance_source",
        _missing_settings,
    )

    exit_code = load_snapshot_cli.main(["--date", "2024-01-31"])

    assert exit_code == 1
    assert "LAUDUS_API_URL" in fake_logger.error.call_args.args[0]


def test_parser_rejects_unknown_report() -> None:
    with pytest.raises(SystemExit):
        load_snapshot_cli._build_parser().parse_args(
            ["--date", "2024-01-31", "--report", "monthly"]
        )


def test_parser_requires_date_or_clear() -> None:
    with pytest.raises(SystemExit):
        load_snapshot_cli._build_parser().parse_args([])
    with pytest.raises(SystemExit):
        load_snapshot_cli._build_parser().parse_args(
            ["--date", "2024-01-31", "--clear", "totals"]
        )


def test_main_clears_report_snapshots(
    monkeypatch,
    fake_logger,
    capsys,
) -> None:
    repository = MagicMock()
    repository.delete_snapshots.return_value = 4
    monkeypatch.setattr(
        load_snapshot_cli,
        "build_snapshot_repository",
        lambda: repository,
    )
    monkeypatch.setattr(
        load_snapshot_cli,
        "build_balance_source",
        MagicMock(side_effect=AssertionError("source not needed")),
    )

    exit_code = load_snapshot_cli.main(["--clear", "totals"])

    assert exit_code == 0
    repository.prepare_storage.assert_called_once_with()
    repository.delete_snapshots.assert_called_once_with("totals")
    out = capsys.readouterr().out
    assert "Deleted 4 snapshots of totals." in out


def test_main_clear_returns_error_on_configuration_failure(
    monkeypatch,
    fake_logger,
) -> None:
    def _missing_settings():
        raise RuntimeError("Missing environment variables: DB_NAME")

    monkeypatch.setattr(
        load_snapshot_cli,
        "build_snapshot_repository",
        _missing_settings,
    )

    exit_code = load_snapshot_cli.main(["--clear", "8Columns"])

    assert exit_code == 1
    assert "DB_NAME" in fake_logger.error.call_args.args[0]
