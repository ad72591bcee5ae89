"""
Pydantic schemas package.
"""

from tally.schemas.budget import (
    BudgetStatusKind,
    BudgetBase,
    BudgetCreate,
    BudgetUpdate,
    BudgetRecord,
    BudgetStatus,
    BudgetProgress,
)
from tally.schemas.category import (
    Category,
    CategoryList,
)
from tally.schemas.dashboard import (
    MonthlyData,
    CategoryTotal,
    MonthSummary,
)
from tally.schemas.insights import (
    TrendDirection,
    Severity,
    ComplianceOutcome,
    SpendingTrend,
    BudgetOverage,
    BudgetCompliance,
    Insights,
)
from tally.schemas.transaction import (
    TransactionBase,
    TransactionCreate,
    TransactionRecord,
    TransactionListResponse,
)

__all__ = [
    "BudgetStatusKind",
    "BudgetBase",
    "BudgetCreate",
    "BudgetUpdate",
    "BudgetRecord",
    "BudgetStatus",
    "BudgetProgress",
    "Category",
    "CategoryList",
    "MonthlyData",
    "CategoryTotal",
    "MonthSummary",
    "TrendDirection",
    "Severity",
    "ComplianceOutcome",
    "SpendingTrend",
    "BudgetOverage",
    "BudgetCompliance",
    "Insights",
    "TransactionBase",
    "TransactionCreate",
    "TransactionRecord",
    "TransactionListResponse",
]
