"""
Dashboard schemas.
"""

from pydantic import BaseModel

from tally.schemas.common import Amount, Percent


class MonthlyData(BaseModel):
    month: str
    income: Amount
    expenses: Amount
    net: Amount


class CategoryTotal(BaseModel):
    category_id: str
    category_name: str
    total: Amount
    color: str
    icon: str


class MonthSummary(BaseModel):
    month: str
    income: Amount
    expenses: Amount
    net: Amount
    budget_total: Amount
    budget_utilization: Percent
