"""Domain service building the Balance General from report rows."""

from collections.abc import Iterable

from src.domain.constants import EXERCISE_RESULT_CODE, EXERCISE_RESULT_NAME
from src.domain.models import (
    AccountRow,
    BalanceGeneral,
    BalanceLine,
    BalanceTotals,
)
from src.domain.policies.account_filters import is_reportable_account
from src.utils.number_utils import coerce_float


def build_balance_general(rows: Iterable[AccountRow]) -> BalanceGeneral:
    """Derive assets, liabilities and equity from one snapshot.

    Every real account is listed on both sides with its asset and liability
    columns respectively, zero amounts included. The exercise result
    (total assets minus total liabilities) is the only equity line, so the
    balance check is zero for any input.

    Args:
        rows: Report rows of a single date. The iterable is only read.

    Returns:
        BalanceGeneral: Lines sorted by account code and the totals.
    """
    assets: list[BalanceLine] = []
    liabilities: list[BalanceLine] = []
    total_assets = 0.0
    total_liabilities = 0.0

    for row in rows:
        if not is_reportable_account(row):
            continue
        asset_amount = coerce_float(row.assets)
        liability_amount = coerce_float(row.liabilities)
        assets.append(
            BalanceLine(
                account_code=row.account_number,
                account_name=row.account_name,
                amount=asset_amount,
            )
        )
        liabilities.append(
            BalanceLine(
                account_code=row.account_number,
                account_name=row.account_name,
                amount=liability_amount,
            )
        )
        total_assets += asset_amount
        total_liabilities += liability_amount

    result_of_exercise = total_assets - total_liabilities
    equity = [
        BalanceLine(
            account_code=EXERCISE_RESULT_CODE,
            account_name=EXERCISE_RESULT_NAME,
            amount=result_of_exercise,
        )
    ]
    total_equity = result_of_exercise

    # sorted() is stable: equal codes keep their report order.
    return BalanceGeneral(
        assets=sorted(assets, key=_by_account_code),
        liabilities=sorted(liabilities, key=_by_account_code),
        equity=equity,
        totals=BalanceTotals(
            total_assets=total_assets,
            total_liabilities=total_liabilities,
            total_equity=total_equity,
            balance_check=total_assets - (total_liabilities + total_equity),
        ),
    )


def _by_account_code(line: BalanceLine) -> str:
    return line.account_code


__all__ = ["build_balance_general"]
