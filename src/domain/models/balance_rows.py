"""Domain models for raw balance report rows."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from src.domain.constants import DEFAULT_REPORT_TYPE


@dataclass(frozen=True)
class AccountRow:
    """One row of an ERP balance report.

    Attributes:
        account_number: Hierarchical account code; empty for summary rows.
        account_name: Account label or a summary sentinel such as "Sumas".
        assets: Debit-side balance at the snapshot date.
        liabilities: Credit-side balance at the snapshot date.
        incomes: Income (credit) column of result accounts.
        expenses: Expense (debit) column of result accounts.
        debit: Period debit movements.
        credit: Period credit movements.
    """

    account_number: str = ""
    account_name: str = ""
    assets: float = 0.0
    liabilities: float = 0.0
    incomes: float = 0.0
    expenses: float = 0.0
    debit: float = 0.0
    credit: float = 0.0

    def to_mapping(self) -> dict[str, Any]:
        """Return the row using the ERP field names."""
        return {
            "accountNumber": self.account_number,
            "accountName": self.account_name,
            "assets": self.assets,
            "liabilities": self.liabilities,
            "incomes": self.incomes,
            "expenses": self.expenses,
            "debit": self.debit,
            "credit": self.credit,
        }


@dataclass(frozen=True)
class BalanceSnapshot:
    """Raw report rows stored for one calendar date."""

    date: date
    rows: list[AccountRow] = field(default_factory=list)
    report_type: str = DEFAULT_REPORT_TYPE

    @property
    def snapshot_id(self) -> str:
        """Return the storage key, e.g. ``2024-01-31-8Columns``."""
        return f"{self.date.isoformat()}-{self.report_type}"


__all__ = ["AccountRow", "BalanceSnapshot"]
