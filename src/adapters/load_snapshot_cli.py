"""CLI adapter to load ERP balance reports into the snapshot store.

This module wires the LoadBalanceSnapshotUseCase to the Laudus client and the
SQLAlchemy snapshot repository, and provides a command-line entry point for
running the load job for one date. ``--clear`` removes the stored snapshots
of one report type instead, so a full history can be reloaded.
"""

import argparse
from collections.abc import Sequence
import sys

from src.application.use_cases.clear_snapshots import ClearSnapshotsUseCase
from src.application.use_cases.load_balance_snapshot import (
    LoadBalanceSnapshotUseCase,
    parse_snapshot_date,
)
from src.domain.constants import DEFAULT_REPORT_TYPE, REPORT_TYPES
from src.infrastructure.container import (
    build_balance_source,
    build_snapshot_repository,
)
from src.infrastructure.logging.logger import get_app_logger


def _build_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="python -m src.adapters.load_snapshot_cli",
        description=(
            "Load Laudus balance sheet reports for one date and overwrite "
            "the stored snapshot."
        ),
    )
    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument(
        "--date",
        dest="snapshot_date",
        help="Report date in YYYY-MM-DD format.",
    )
    action.add_argument(
        "--clear",
        dest="clear_report",
        choices=REPORT_TYPES,
        help="Delete every stored snapshot of this report type.",
    )
    parser.add_argument(
        "--report",
        dest="report_types",
        action="append",
        choices=REPORT_TYPES,
        help=(
            "Report type to load. Repeat to load several; "
            f"defaults to {DEFAULT_REPORT_TYPE}."
        ),
    )
    return parser


def _clear(report_type: str, logger) -> int:
    try:
        use_case = ClearSnapshotsUseCase(
            snapshot_repository=build_snapshot_repository(),
            logger=logger,
        )
        deleted = use_case.run(report_type)
    except (ValueError, RuntimeError) as exc:
        logger.error(str(exc))
        return 1

    print(f"Deleted {deleted} snapshots of {report_type}.")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the snapshot load use case, or clear a report type.

    Args:
        argv: Optional argument list; defaults to ``sys.argv[1:]``.

    Returns:
        int: Process exit status.
    """
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()

    if args.clear_report is not None:
        return _clear(args.clear_report, logger)

    try:
        snapshot_date = parse_snapshot_date(args.snapshot_date)
        use_case = LoadBalanceSnapshotUseCase(
            balance_source=build_balance_source(),
            snapshot_repository=build_snapshot_repository(),
            logger=logger,
        )
        results = use_case.run(
            snapshot_date,
            report_types=args.report_types,
        )
    except (ValueError, RuntimeError) as exc:
        logger.error(str(exc))
        return 1

    for result in results:
        print(
            f"Loaded {result.record_count} rows from {result.report_type} "
            f"for {result.date.isoformat()}."
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
