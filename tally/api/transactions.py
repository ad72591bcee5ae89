"""
Transaction API endpoints.
"""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import Optional

from tally.categories import get_category
from tally.dependencies import get_db
from tally.models.transaction import Transaction, TransactionType
from tally.schemas.common import MONTH_PATTERN
from tally.schemas.transaction import (
    TransactionCreate,
    TransactionRecord,
    TransactionListResponse
)
from tally.services.aggregation_service import month_key
from tally.services.storage_service import load_transactions

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=TransactionListResponse)
def list_transactions(
    month: Optional[str] = Query(None, pattern=MONTH_PATTERN, description="YYYY-MM format"),
    type: Optional[TransactionType] = None,
    category_id: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """List transactions, newest first"""
    transactions = load_transactions(db)

    if month:
        transactions = [t for t in transactions if month_key(t.date) == month]
    if type:
        transactions = [t for t in transactions if t.type == type]
    if category_id:
        transactions = [t for t in transactions if t.category == category_id]

    transactions = sorted(transactions, key=lambda t: t.date, reverse=True)

    return TransactionListResponse(items=transactions, total=len(transactions))


@router.post("", response_model=TransactionRecord, status_code=201)
def create_transaction(
    transaction: TransactionCreate,
    db: Session = Depends(get_db)
):
    """Record a new transaction"""
    category = get_category(transaction.category)
    if not category:
        logger.warning("Rejected transaction with unknown category %s", transaction.category)
        raise HTTPException(status_code=422, detail="Unknown category")
    if category.type != transaction.type:
        logger.warning(
            "Rejected %s transaction in %s category %s",
            transaction.type.value, category.type.value, category.id
        )
        raise HTTPException(
            status_code=422,
            detail=f"Category '{category.name}' is for {category.type.value} transactions"
        )

    db_transaction = Transaction(
        id=str(uuid.uuid4()),
        amount=transaction.amount,
        description=transaction.description,
        date=transaction.date,
        category=transaction.category,
        type=transaction.type
    )
    db.add(db_transaction)
    db.commit()
    db.refresh(db_transaction)

    logger.info("Created %s transaction %s", db_transaction.type.value, db_transaction.id)
    return TransactionRecord.model_validate(db_transaction)


@router.get("/{transaction_id}", response_model=TransactionRecord)
def get_transaction(
    transaction_id: str,
    db: Session = Depends(get_db)
):
    """Get a single transaction"""
    transaction = db.query(Transaction).filter(Transaction.id == transaction_id).first()
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return TransactionRecord.model_validate(transaction)


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: str,
    db: Session = Depends(get_db)
):
    """Delete a transaction"""
    transaction = db.query(Transaction).filter(Transaction.id == transaction_id).first()
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")

    db.delete(transaction)
    db.commit()
    logger.info("Deleted transaction %s", transaction_id)
    return None
