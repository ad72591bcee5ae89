"""
Budget API endpoints.
"""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from tally.categories import get_category
from tally.dependencies import Snapshot, get_db, get_snapshot
from tally.models.budget import Budget
from tally.models.transaction import TransactionType
from tally.schemas.budget import BudgetCreate, BudgetProgress, BudgetRecord, BudgetUpdate
from tally.schemas.common import MONTH_PATTERN
from tally.services.budget_service import budget_progress, budgets_progress
from tally.services.storage_service import load_transactions

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/budgets", tags=["budgets"])


def _check_budget_target(db: Session, category_id: str, month: str, exclude_id: Optional[str] = None):
    """Budgets must target an expense category, once per month."""
    category = get_category(category_id)
    if not category:
        logger.warning("Rejected budget for unknown category %s", category_id)
        raise HTTPException(status_code=422, detail=f"Unknown category '{category_id}'")
    if category.type != TransactionType.expense:
        logger.warning("Rejected budget for non-expense category %s", category_id)
        raise HTTPException(status_code=422, detail="Budgets require an expense category")

    query = db.query(Budget).filter(Budget.category_id == category_id, Budget.month == month)
    if exclude_id:
        query = query.filter(Budget.id != exclude_id)
    if query.first():
        logger.warning("Rejected duplicate budget for %s in %s", category_id, month)
        raise HTTPException(
            status_code=409,
            detail=f"A budget for '{category.name}' in {month} already exists"
        )


def _progress(db: Session, budget: Budget) -> BudgetProgress:
    return budget_progress(BudgetRecord.model_validate(budget), load_transactions(db))


@router.get("", response_model=List[BudgetProgress])
def list_budgets(
    month: Optional[str] = Query(None, pattern=MONTH_PATTERN, description="YYYY-MM format"),
    snapshot: Snapshot = Depends(get_snapshot)
):
    """List budgets with spend-to-date and status"""
    return budgets_progress(snapshot.budgets, snapshot.transactions, month)


@router.post("", response_model=BudgetProgress, status_code=201)
def create_budget(
    budget: BudgetCreate,
    db: Session = Depends(get_db)
):
    """Create a monthly budget for an expense category"""
    _check_budget_target(db, budget.category_id, budget.month)

    db_budget = Budget(
        id=str(uuid.uuid4()),
        category_id=budget.category_id,
        amount=budget.amount,
        month=budget.month
    )
    db.add(db_budget)
    db.commit()
    db.refresh(db_budget)

    logger.info("Created budget %s for %s in %s", db_budget.id, db_budget.category_id, db_budget.month)
    return _progress(db, db_budget)


@router.get("/{budget_id}", response_model=BudgetProgress)
def get_budget(
    budget_id: str,
    db: Session = Depends(get_db)
):
    """Get a single budget with its progress"""
    budget = db.query(Budget).filter(Budget.id == budget_id).first()
    if not budget:
        raise HTTPException(status_code=404, detail="Budget not found")
    return _progress(db, budget)


@router.put("/{budget_id}", response_model=BudgetProgress)
def update_budget(
    budget_id: str,
    budget_update: BudgetUpdate,
    db: Session = Depends(get_db)
):
    """Update a budget's category, amount or month"""
    budget = db.query(Budget).filter(Budget.id == budget_id).first()
    if not budget:
        raise HTTPException(status_code=404, detail="Budget not found")

    category_id = budget_update.category_id or budget.category_id
    month = budget_update.month or budget.month
    _check_budget_target(db, category_id, month, exclude_id=budget.id)

    budget.category_id = category_id
    budget.month = month
    if budget_update.amount is not None:
        budget.amount = budget_update.amount

    db.commit()
    db.refresh(budget)
    logger.info("Updated budget %s", budget.id)
    return _progress(db, budget)


@router.delete("/{budget_id}", status_code=204)
def delete_budget(
    budget_id: str,
    db: Session = Depends(get_db)
):
    """Delete a budget"""
    budget = db.query(Budget).filter(Budget.id == budget_id).first()
    if not budget:
        raise HTTPException(status_code=404, detail="Budget not found")

    db.delete(budget)
    db.commit()
    logger.info("Deleted budget %s", budget_id)
    return None
