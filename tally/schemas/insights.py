"""
Insight schemas.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from tally.schemas.common import Amount, Percent
from tally.schemas.dashboard import CategoryTotal


class TrendDirection(str, Enum):
    INCREASE = "increase"
    DECREASE = "decrease"


class Severity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ATTENTION = "attention"


class ComplianceOutcome(str, Enum):
    OVER_BUDGET = "over-budget"
    ALL_ON_TRACK = "all-on-track"
    NO_BUDGETS = "no-budgets"


class SpendingTrend(BaseModel):
    month: str
    previous_month: str
    current_expenses: Amount
    previous_expenses: Amount
    change_pct: Percent
    direction: TrendDirection
    severity: Severity


class BudgetOverage(BaseModel):
    budget_id: str
    category_id: str
    category_name: str
    overage: Amount


class BudgetCompliance(BaseModel):
    outcome: ComplianceOutcome
    budget_count: int
    over_budget_count: int
    overages: List[BudgetOverage]


class Insights(BaseModel):
    month: str
    previous_month: str
    spending_trend: SpendingTrend
    top_category: Optional[CategoryTotal]
    budget_compliance: BudgetCompliance
