"""Budget status classification and progress views."""

import logging
from decimal import Decimal
from typing import Iterable, List, Optional, Sequence

from tally.categories import category_display
from tally.schemas.budget import BudgetProgress, BudgetRecord, BudgetStatus, BudgetStatusKind
from tally.schemas.transaction import TransactionRecord
from tally.services.aggregation_service import ZERO, compute_budget_spend

logger = logging.getLogger(__name__)

NEAR_LIMIT_PERCENT = Decimal("80")
FULL_PERCENT = Decimal("100")


def budget_status(budget: BudgetRecord, spent: Decimal) -> BudgetStatus:
    """
    Classify spend against a budget.

    budget.amount must be positive; callers reject anything else before a
    budget is created.
    """
    percent = spent / budget.amount * 100

    if percent >= FULL_PERCENT:
        status = BudgetStatusKind.OVER_BUDGET
    elif percent >= NEAR_LIMIT_PERCENT:
        status = BudgetStatusKind.NEAR_LIMIT
    else:
        status = BudgetStatusKind.ON_TRACK

    return BudgetStatus(
        status=status,
        percent=percent,
        display_percent=min(percent, FULL_PERCENT)
    )


def budget_progress(
    budget: BudgetRecord,
    transactions: Iterable[TransactionRecord]
) -> BudgetProgress:
    """Join a budget with its spend-to-date and status."""
    spent = compute_budget_spend(budget, transactions)
    status = budget_status(budget, spent)
    name, color, _ = category_display(budget.category_id)

    return BudgetProgress(
        budget_id=budget.id,
        category_id=budget.category_id,
        category_name=name,
        color=color,
        month=budget.month,
        amount=budget.amount,
        spent=spent,
        remaining=budget.amount - spent,
        overage=max(spent - budget.amount, ZERO),
        percent=status.percent,
        display_percent=status.display_percent,
        status=status.status
    )


def budgets_for_month(budgets: Iterable[BudgetRecord], month: str) -> List[BudgetRecord]:
    return [b for b in budgets if b.month == month]


def budgets_progress(
    budgets: Iterable[BudgetRecord],
    transactions: Sequence[TransactionRecord],
    month: Optional[str] = None
) -> List[BudgetProgress]:
    """Progress for every budget, or only the budgets of one month, in list order."""
    if month is not None:
        budgets = budgets_for_month(budgets, month)

    progress = [budget_progress(b, transactions) for b in budgets]
    logger.debug("Computed progress for %d budgets (month=%s)", len(progress), month)
    return progress
