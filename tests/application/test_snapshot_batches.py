"""Tests for snapshot selection and per-snapshot derivation helpers."""

from datetime import date
from types import SimpleNamespace
from unittest.mock import MagicMock

from src.application.use_cases.snapshot_batches import (
    derive_per_snapshot,
    derive_with_previous,
    latest_per_month,
    order_by_date_desc,
    select_snapshots,
)
from src.domain.models import AccountRow, BalanceSnapshot


def _snapshot(day: date, assets: float = 0.0) -> BalanceSnapshot:
    return BalanceSnapshot(
        date=day,
        rows=[AccountRow(account_number="11", assets=assets)],
    )


def test_order_by_date_desc_sorts_newest_first() -> None:
    snapshots = [
        _snapshot(date(2024, 1, 1)),
        _snapshot(date(2024, 3, 1)),
        _snapshot(date(2024, 2, 1)),
    ]

    ordered = order_by_date_desc(snapshots)

    assert [item.date for item in ordered] == [
        date(2024, 3, 1),
        date(2024, 2, 1),
        date(2024, 1, 1),
    ]


def test_derive_per_snapshot_applies_derivation_independently() -> None:
    """Each snapshot is derived from its own rows, newest first."""
    calls: list[tuple[date, float]] = []

    def _derive(snapshot_date, rows):
        calls.append((snapshot_date, rows[0].assets))
        return snapshot_date

    snapshots = [
        _snapshot(date(2024, 1, 1), 1.0),
        _snapshot(date(2024, 3, 1), 3.0),
        _snapshot(date(2024, 2, 1), 2.0),
    ]

    result = derive_per_snapshot(snapshots, _derive)

    assert result == [date(2024, 3, 1), date(2024, 2, 1), date(2024, 1, 1)]
    assert calls == [
        (date(2024, 3, 1), 3.0),
        (date(2024, 2, 1), 2.0),
        (date(2024, 1, 1), 1.0),
    ]


def test_derive_per_snapshot_empty_input() -> None:
    assert derive_per_snapshot([], lambda day, rows: day) == []


def test_select_snapshots_single_date_uses_fetch_snapshot() -> None:
    repository = MagicMock()
    snapshot = _snapshot(date(2024, 1, 31))
    repository.fetch_snapshot.return_value = snapshot

    result = select_snapshots(
        repository,
        "8Columns",
        snapshot_date=date(2024, 1, 31),
    )

    assert result == [snapshot]
    repository.fetch_snapshot.assert_called_once_with(
        date(2024, 1, 31),
        "8Columns",
    )
    repository.fetch_snapshots.assert_not_called()


def test_select_snapshots_missing_date_returns_empty_list() -> None:
    repository = MagicMock()
    repository.fetch_snapshot.return_value = None

    assert select_snapshots(
        repository,
        "8Columns",
        snapshot_date=date(2024, 1, 31),
    ) == []


def test_select_snapshots_reorders_repository_results() -> None:
    """Results are newest first whatever order storage returns."""
    repository = MagicMock()
    repository.fetch_snapshots.return_value = [
        _snapshot(date(2023, 12, 31)),
        _snapshot(date(2024, 1, 31)),
    ]

    result = select_snapshots(repository, "8Columns", year=2024)

    repository.fetch_snapshots.assert_called_once_with("8Columns", year=2024)
    assert [item.date for item in result] == [
        date(2024, 1, 31),
        date(2023, 12, 31),
    ]


def test_latest_per_month_keeps_last_date_of_each_month() -> None:
    records = [
        SimpleNamespace(date=date(2024, 2, 29), value="feb-end"),
        SimpleNamespace(date=date(2024, 2, 10), value="feb-mid"),
        SimpleNamespace(date=date(2024, 1, 15), value="jan-mid"),
        SimpleNamespace(date=date(2024, 1, 31), value="jan-end"),
        SimpleNamespace(date=date(2023, 12, 31), value="dec"),
    ]

    result = latest_per_month(records)

    assert [item.value for item in result] == ["dec", "jan-end", "feb-end"]


def test_derive_with_previous_pairs_next_older_snapshot() -> None:
    snapshots = [
        _snapshot(date(2024, 1, 1), assets=1.0),
        _snapshot(date(2024, 3, 1), assets=3.0),
        _snapshot(date(2024, 2, 1), assets=2.0),
    ]

    pairs = derive_with_previous(
        snapshots,
        lambda day, rows, previous: (
            day,
            rows[0].assets,
            previous[0].assets if previous is not None else None,
        ),
    )

    assert pairs == [
        (date(2024, 3, 1), 3.0, 2.0),
        (date(2024, 2, 1), 2.0, 1.0),
        (date(2024, 1, 1), 1.0, None),
    ]
