"""Month-over-month insights built from the aggregation functions."""

import logging
import re
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from tally.categories import category_display
from tally.models.transaction import TransactionType
from tally.schemas.budget import BudgetRecord
from tally.schemas.common import MONTH_PATTERN
from tally.schemas.dashboard import CategoryTotal
from tally.schemas.insights import (
    BudgetCompliance,
    BudgetOverage,
    ComplianceOutcome,
    Insights,
    Severity,
    SpendingTrend,
    TrendDirection,
)
from tally.schemas.transaction import TransactionRecord
from tally.services.aggregation_service import (
    ZERO,
    aggregate_by_category,
    compute_budget_spend,
    total_amount,
    transactions_for_month,
)
from tally.services.budget_service import budgets_for_month

logger = logging.getLogger(__name__)

# Listed overages are capped; the count still covers every over-budget category
MAX_LISTED_OVERAGES = 2
ATTENTION_CHANGE_PCT = Decimal("10")


def current_month(today: Optional[date] = None) -> str:
    """YYYY-MM for today (or the given day)."""
    today = today or date.today()
    return today.strftime("%Y-%m")


def previous_month(month: str) -> str:
    """
    The calendar month before a YYYY-MM month, e.g. 2024-01 -> 2023-12.

    A malformed month comes back unchanged, so it still matches nothing.
    """
    if not re.fullmatch(MONTH_PATTERN, month):
        logger.debug("Malformed month %r, no previous month", month)
        return month
    year, m = map(int, month.split('-'))
    prev_month = m - 1 if m > 1 else 12
    prev_year = year if m > 1 else year - 1
    return f"{prev_year:04d}-{prev_month:02d}"


def spending_trend(transactions: Sequence[TransactionRecord], month: str) -> SpendingTrend:
    """
    Compare a month's expenses with the month before.

    When the previous month has no expenses the change is reported as 0, which
    reads as a decrease.
    """
    prev = previous_month(month)
    current_expenses = total_amount(transactions_for_month(transactions, month), TransactionType.expense)
    previous_expenses = total_amount(transactions_for_month(transactions, prev), TransactionType.expense)

    if previous_expenses > 0:
        change_pct = (current_expenses - previous_expenses) / previous_expenses * 100
    else:
        change_pct = ZERO

    direction = TrendDirection.INCREASE if change_pct > 0 else TrendDirection.DECREASE

    if change_pct > ATTENTION_CHANGE_PCT:
        severity = Severity.ATTENTION
    elif change_pct > 0:
        severity = Severity.WARNING
    else:
        severity = Severity.INFO

    return SpendingTrend(
        month=month,
        previous_month=prev,
        current_expenses=current_expenses,
        previous_expenses=previous_expenses,
        change_pct=change_pct,
        direction=direction,
        severity=severity
    )


def top_spending_category(
    transactions: Sequence[TransactionRecord],
    month: str
) -> Optional[CategoryTotal]:
    """Highest-spend expense category of the month, or None without expenses."""
    totals = aggregate_by_category(transactions_for_month(transactions, month), TransactionType.expense)
    return totals[0] if totals else None


def budget_compliance(
    budgets: Sequence[BudgetRecord],
    transactions: Sequence[TransactionRecord],
    month: str
) -> BudgetCompliance:
    """
    Partition the month's budgets into over-budget and the rest.

    A budget counts as over only when spend strictly exceeds its amount.
    """
    month_budgets = budgets_for_month(budgets, month)

    overages = []
    for budget in month_budgets:
        spent = compute_budget_spend(budget, transactions)
        if spent > budget.amount:
            name, _, _ = category_display(budget.category_id)
            overages.append(BudgetOverage(
                budget_id=budget.id,
                category_id=budget.category_id,
                category_name=name,
                overage=spent - budget.amount
            ))

    if overages:
        outcome = ComplianceOutcome.OVER_BUDGET
    elif month_budgets:
        outcome = ComplianceOutcome.ALL_ON_TRACK
    else:
        outcome = ComplianceOutcome.NO_BUDGETS

    return BudgetCompliance(
        outcome=outcome,
        budget_count=len(month_budgets),
        over_budget_count=len(overages),
        overages=overages[:MAX_LISTED_OVERAGES]
    )


def generate_insights(
    transactions: Sequence[TransactionRecord],
    budgets: Sequence[BudgetRecord],
    month: Optional[str] = None
) -> Insights:
    """
    Build the spending trend, top category and budget compliance insights
    for a month (default: the current month).
    """
    month = month or current_month()

    trend = spending_trend(transactions, month)
    top_category = top_spending_category(transactions, month)
    compliance = budget_compliance(budgets, transactions, month)

    logger.debug(
        "Insights for %s: change=%s%% top=%s compliance=%s",
        month,
        trend.change_pct,
        top_category.category_id if top_category else None,
        compliance.outcome.value
    )

    return Insights(
        month=month,
        previous_month=trend.previous_month,
        spending_trend=trend,
        top_category=top_category,
        budget_compliance=compliance
    )
