"""
Dashboard API endpoints.
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from tally.dependencies import Snapshot, get_snapshot
from tally.models.transaction import TransactionType
from tally.schemas.common import MONTH_PATTERN
from tally.schemas.dashboard import CategoryTotal, MonthlyData, MonthSummary
from tally.schemas.insights import Insights
from tally.services.aggregation_service import (
    aggregate_by_category,
    aggregate_monthly,
    summarize_month,
    transactions_for_month,
)
from tally.services.insights_service import current_month, generate_insights

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/summary", response_model=MonthSummary)
def get_dashboard_summary(
    month: Optional[str] = Query(None, pattern=MONTH_PATTERN, description="YYYY-MM format"),
    snapshot: Snapshot = Depends(get_snapshot)
):
    """
    Get dashboard summary for a month.
    Returns: income, expenses, net, budget_total, budget_utilization
    """
    return summarize_month(snapshot.transactions, snapshot.budgets, month or current_month())


@router.get("/trends", response_model=list[MonthlyData])
def get_monthly_trends(snapshot: Snapshot = Depends(get_snapshot)):
    """
    Get income and expenses for every month with transactions.
    Returns: [{month, income, expenses, net}, ...]
    """
    return aggregate_monthly(snapshot.transactions)


@router.get("/categories", response_model=list[CategoryTotal])
def get_category_breakdown(
    type: TransactionType = Query(TransactionType.expense, description="income or expense"),
    month: Optional[str] = Query(None, pattern=MONTH_PATTERN, description="YYYY-MM format; all time if omitted"),
    snapshot: Snapshot = Depends(get_snapshot)
):
    """Totals per category, largest first"""
    transactions = snapshot.transactions
    if month:
        transactions = transactions_for_month(transactions, month)
    return aggregate_by_category(transactions, type)


@router.get("/insights", response_model=Insights)
def get_insights(
    month: Optional[str] = Query(None, pattern=MONTH_PATTERN, description="YYYY-MM format"),
    snapshot: Snapshot = Depends(get_snapshot)
):
    """Spending trend, top category and budget compliance for a month"""
    return generate_insights(snapshot.transactions, snapshot.budgets, month)
