"""Port for reading balance reports from the ERP."""

from datetime import date
from typing import Any, Protocol


class BalanceSourcePort(Protocol):
    """Port exposing raw balance report rows for a date."""

    def fetch_balance_rows(
        self,
        report_type: str,
        date_to: date,
    ) -> list[dict[str, Any]]:
        """Return the raw report rows as of ``date_to``."""


__all__ = ["BalanceSourcePort"]
