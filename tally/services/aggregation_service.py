"""Pure aggregation over transaction snapshots.

Every function here reads the collections it is given and builds new result
objects. Nothing is cached and inputs are never modified.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence, Union

from tally.categories import category_display
from tally.models.transaction import TransactionType
from tally.schemas.budget import BudgetRecord
from tally.schemas.dashboard import CategoryTotal, MonthlyData, MonthSummary
from tally.schemas.transaction import TransactionRecord

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def month_key(value: Union[date, str]) -> str:
    """
    Return the YYYY-MM prefix of a date or ISO date string.

    Malformed strings are not rejected; their prefix just won't match any
    well-formed month.
    """
    if isinstance(value, date):
        return value.isoformat()[:7]
    return str(value)[:7]


def transactions_for_month(
    transactions: Iterable[TransactionRecord],
    month: str
) -> List[TransactionRecord]:
    """Transactions whose date falls in the given YYYY-MM month."""
    return [t for t in transactions if month_key(t.date) == month]


def total_amount(
    transactions: Iterable[TransactionRecord],
    transaction_type: Optional[TransactionType] = None
) -> Decimal:
    """Sum amounts, optionally restricted to one transaction type."""
    return sum(
        (t.amount for t in transactions if transaction_type is None or t.type == transaction_type),
        ZERO
    )


def aggregate_monthly(transactions: Iterable[TransactionRecord]) -> List[MonthlyData]:
    """
    Income and expense totals per month present in the input.
    Returns: [{month, income, expenses, net}, ...] ascending by month.
    """
    monthly: Dict[str, Dict[str, Decimal]] = {}

    for t in transactions:
        bucket = monthly.setdefault(month_key(t.date), {"income": ZERO, "expenses": ZERO})
        if t.type == TransactionType.income:
            bucket["income"] += t.amount
        else:
            bucket["expenses"] += t.amount

    # YYYY-MM keys are zero-padded so string order is chronological
    return [
        MonthlyData(
            month=month,
            income=totals["income"],
            expenses=totals["expenses"],
            net=totals["income"] - totals["expenses"]
        )
        for month, totals in sorted(monthly.items(), key=lambda item: item[0])
    ]


def aggregate_by_category(
    transactions: Iterable[TransactionRecord],
    transaction_type: TransactionType
) -> List[CategoryTotal]:
    """
    Totals per category for one transaction type, largest first.
    Categories with equal totals keep the order they were first seen in.
    """
    category_totals: Dict[str, Decimal] = {}
    for t in transactions:
        if t.type != transaction_type:
            continue
        category_totals[t.category] = category_totals.get(t.category, ZERO) + t.amount

    results = []
    for category_id, total in category_totals.items():
        name, color, icon = category_display(category_id)
        results.append(CategoryTotal(
            category_id=category_id,
            category_name=name,
            total=total,
            color=color,
            icon=icon
        ))

    return sorted(results, key=lambda c: c.total, reverse=True)


def compute_budget_spend(
    budget: BudgetRecord,
    transactions: Iterable[TransactionRecord]
) -> Decimal:
    """Expenses in the budget's category during the budget's month."""
    return sum(
        (
            t.amount for t in transactions
            if t.category == budget.category_id
            and t.type == TransactionType.expense
            and month_key(t.date) == budget.month
        ),
        ZERO
    )


def summarize_month(
    transactions: Iterable[TransactionRecord],
    budgets: Sequence[BudgetRecord],
    month: str
) -> MonthSummary:
    """
    Income, expenses and net for one month, plus how much of the month's
    combined budget the expenses have used.
    """
    month_transactions = transactions_for_month(transactions, month)

    income = total_amount(month_transactions, TransactionType.income)
    expenses = total_amount(month_transactions, TransactionType.expense)
    budget_total = sum((b.amount for b in budgets if b.month == month), ZERO)
    utilization = expenses / budget_total * 100 if budget_total > 0 else ZERO

    logger.debug(
        "Month %s: %d transactions, income=%s expenses=%s budget_total=%s",
        month, len(month_transactions), income, expenses, budget_total
    )

    return MonthSummary(
        month=month,
        income=income,
        expenses=expenses,
        net=income - expenses,
        budget_total=budget_total,
        budget_utilization=utilization
    )
