"""Application use cases package."""

from .clear_snapshots import ClearSnapshotsUseCase
from .get_balance_general import GetBalanceGeneralUseCase, BalanceGeneralView
from .get_collection_days import (
    GetCollectionDaysUseCase,
    CollectionDaysRecord,
)
from .get_ebitda import GetEbitdaUseCase, EbitdaRecord
from .get_financial_structure import (
    GetFinancialStructureUseCase,
    FinancialStructureRecord,
)
from .get_income_statement import GetIncomeStatementUseCase, IncomeStatement
from .get_liquidity import GetLiquidityUseCase, LiquidityRecord
from .get_profit_margins import GetProfitMarginsUseCase, ProfitMarginRecord
from .get_rentabilidad import GetRentabilidadUseCase, RentabilidadRecord
from .load_balance_snapshot import (
    LoadBalanceSnapshotUseCase,
    LoadBalanceSnapshotResult,
    parse_snapshot_date,
)
from .snapshot_batches import latest_per_month

__all__ = [
    "ClearSnapshotsUseCase",
    "GetBalanceGeneralUseCase",
    "BalanceGeneralView",
    "GetCollectionDaysUseCase",
    "CollectionDaysRecord",
    "GetEbitdaUseCase",
    "EbitdaRecord",
    "GetFinancialStructureUseCase",
    "FinancialStructureRecord",
    "GetIncomeStatementUseCase",
    "IncomeStatement",
    "GetLiquidityUseCase",
    "LiquidityRecord",
    "GetProfitMarginsUseCase",
    "ProfitMarginRecord",
    "GetRentabilidadUseCase",
    "RentabilidadRecord",
    "LoadBalanceSnapshotUseCase",
    "LoadBalanceSnapshotResult",
    "parse_snapshot_date",
    "latest_per_month",
]
