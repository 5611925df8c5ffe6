"""Shared helpers applying a derivation to one or many snapshots."""

from collections.abc import Callable, Iterable
from datetime import date
from typing import TypeVar

from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.domain.models import AccountRow, BalanceSnapshot

T = TypeVar("T")


def select_snapshots(
    repository: SnapshotRepositoryPort,
    report_type: str,
    snapshot_date: date | None = None,
    year: int | None = None,
) -> list[BalanceSnapshot]:
    """Return the snapshots a read request targets.

    Args:
        repository: Snapshot storage.
        report_type: Report type of the snapshots.
        snapshot_date: Single date to read; None means every stored date.
        year: Optional year filter applied when no date is given.

    Returns:
        list[BalanceSnapshot]: Snapshots ordered by descending date.
    """
    if snapshot_date is not None:
        snapshot = repository.fetch_snapshot(snapshot_date, report_type)
        return [snapshot] if snapshot is not None else []
    snapshots = repository.fetch_snapshots(report_type, year=year)
    return order_by_date_desc(snapshots)


def order_by_date_desc(
    snapshots: Iterable[BalanceSnapshot],
) -> list[BalanceSnapshot]:
    """Return snapshots sorted from the most recent date."""
    return sorted(snapshots, key=lambda snapshot: snapshot.date, reverse=True)


def derive_per_snapshot(
    snapshots: Iterable[BalanceSnapshot],
    derive: Callable[[date, list[AccountRow]], T],
) -> list[T]:
    """Apply ``derive`` to each snapshot independently, newest first."""
    return [
        derive(snapshot.date, snapshot.rows)
        for snapshot in order_by_date_desc(snapshots)
    ]


def derive_with_previous(
    snapshots: Iterable[BalanceSnapshot],
    derive: Callable[[date, list[AccountRow], list[AccountRow] | None], T],
) -> list[T]:
    """Apply ``derive`` to each snapshot along with the next older one.

    Args:
        snapshots: Snapshots to derive from.
        derive: Callable receiving the date, the rows and the rows of the
            previous snapshot in time, or None for the oldest.

    Returns:
        list: Derived records, newest first.
    """
    ordered = order_by_date_desc(snapshots)
    results = []
    for index, snapshot in enumerate(ordered):
        previous = ordered[index + 1] if index + 1 < len(ordered) else None
        previous_rows = previous.rows if previous is not None else None
        results.append(derive(snapshot.date, snapshot.rows, previous_rows))
    return results


def latest_per_month(records: Iterable[T]) -> list[T]:
    """Keep the most recent record of each month, in chronological order.

    Args:
        records: Records exposing a ``date`` attribute.

    Returns:
        list: One record per (year, month), oldest month first.
    """
    by_month: dict[tuple[int, int], T] = {}
    for record in records:
        key = (record.date.year, record.date.month)
        current = by_month.get(key)
        if current is None or record.date > current.date:
            by_month[key] = record
    return [by_month[key] for key in sorted(by_month)]


__all__ = [
    "select_snapshots",
    "order_by_date_desc",
    "derive_per_snapshot",
    "derive_with_previous",
    "latest_per_month",
]
