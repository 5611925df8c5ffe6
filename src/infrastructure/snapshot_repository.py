"""SQLAlchemy-backed storage for balance report snapshots."""

from datetime import date, datetime, timezone
import json

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.domain.models import BalanceSnapshot
from src.domain.services.normalization import normalize_account_rows


CREATE_SNAPSHOTS_SQL = """
CREATE TABLE IF NOT EXISTS balance_snapshots (
    snapshot_id TEXT PRIMARY KEY,
    snapshot_date TEXT NOT NULL,
    report_type TEXT NOT NULL,
    record_count INTEGER NOT NULL,
    inserted_at TEXT NOT NULL,
    payload TEXT NOT NULL
)
"""

DELETE_SNAPSHOT_SQL = text(
    """
    DELETE FROM balance_snapshots
    WHERE snapshot_id = :snapshot_id
    """
)

INSERT_SNAPSHOT_SQL = text(
    """
    INSERT INTO balance_snapshots (
        snapshot_id,
        snapshot_date,
        report_type,
        record_count,
        inserted_at,
        payload
    )
    VALUES (
        :snapshot_id,
        :snapshot_date,
        :report_type,
        :record_count,
        :inserted_at,
        :payload
    )
    """
)

SELECT_SNAPSHOT_SQL = text(
    """
    SELECT snapshot_date, report_type, payload
    FROM balance_snapshots
    WHERE snapshot_id = :snapshot_id
    """
)

SELECT_SNAPSHOTS_SQL = """
    SELECT snapshot_date, report_type, payload
    FROM balance_snapshots
    WHERE report_type = :report_type
"""

SELECT_DATES_SQL = text(
    """
    SELECT DISTINCT snapshot_date
    FROM balance_snapshots
    WHERE report_type = :report_type
    """
)

DELETE_SNAPSHOTS_SQL = text(
    """
    DELETE FROM balance_snapshots
    WHERE report_type = :report_type
    """
)


class SqlAlchemySnapshotRepository(SnapshotRepositoryPort):
    """Snapshot repository storing each report as a JSON payload.

    Dates are stored as ISO strings so lexical order is chronological.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the snapshot engine.
        """
        self._db_port = db_port

    def prepare_storage(self) -> None:
        """Ensure the snapshots table exists."""
        engine = self._db_port.get_balance_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_SNAPSHOTS_SQL)

    def save_snapshot(self, snapshot: BalanceSnapshot) -> int:
        """Replace the stored snapshot with the same date and report type.

        Args:
            snapshot: Snapshot to write.

        Returns:
            int: Number of rows stored in the snapshot payload.
        """
        payload = json.dumps(
            [row.to_mapping() for row in snapshot.rows],
            ensure_ascii=False,
        )
        engine = self._db_port.get_balance_engine()
        with engine.begin() as conn:
            conn.execute(
                DELETE_SNAPSHOT_SQL,
                {"snapshot_id": snapshot.snapshot_id},
            )
            conn.execute(
                INSERT_SNAPSHOT_SQL,
                {
                    "snapshot_id": snapshot.snapshot_id,
                    "snapshot_date": snapshot.date.isoformat(),
                    "report_type": snapshot.report_type,
                    "record_count": len(snapshot.rows),
                    "inserted_at": datetime.now(timezone.utc).isoformat(),
                    "payload": payload,
                },
            )
        return len(snapshot.rows)

    def fetch_snapshot(
        self,
        snapshot_date: date,
        report_type: str,
    ) -> BalanceSnapshot | None:
        snapshot_id = f"{snapshot_date.isoformat()}-{report_type}"
        engine = self._db_port.get_balance_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_SNAPSHOT_SQL,
                {"snapshot_id": snapshot_id},
            ).first()
        if row is None:
            return None
        return self._to_snapshot(row)

    def fetch_snapshots(
        self,
        report_type: str,
        year: int | None = None,
    ) -> list[BalanceSnapshot]:
        sql = SELECT_SNAPSHOTS_SQL
        params: dict[str, str] = {"report_type": report_type}
        if year is not None:
            sql += " AND snapshot_date LIKE :year_prefix"
            params["year_prefix"] = f"{year:04d}-%"
        sql += " ORDER BY snapshot_date DESC"
        engine = self._db_port.get_balance_engine()
        with engine.connect() as conn:
            rows = conn.execute(text(sql), params).all()
        return [self._to_snapshot(row) for row in rows]

    def fetch_available_years(self, report_type: str) -> list[int]:
        engine = self._db_port.get_balance_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_DATES_SQL,
                {"report_type": report_type},
            ).all()
        years = {int(str(row.snapshot_date)[:4]) for row in rows}
        return sorted(years, reverse=True)

    def delete_snapshots(self, report_type: str) -> int:
        engine = self._db_port.get_balance_engine()
        with engine.begin() as conn:
            result = conn.execute(
                DELETE_SNAPSHOTS_SQL,
                {"report_type": report_type},
            )
        return result.rowcount

    @staticmethod
    def _to_snapshot(row) -> BalanceSnapshot:
        raw_date = row.snapshot_date
        snapshot_date = (
            raw_date
            if isinstance(raw_date, date)
            else date.fromisoformat(str(raw_date))
        )
        payload = json.loads(row.payload) if row.payload else []
        return BalanceSnapshot(
            date=snapshot_date,
            rows=normalize_account_rows(payload),
            report_type=row.report_type,
        )


__all__ = [
    "SqlAlchemySnapshotRepository",
    "CREATE_SNAPSHOTS_SQL",
    "DELETE_SNAPSHOT_SQL",
    "INSERT_SNAPSHOT_SQL",
]
