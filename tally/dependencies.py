"""
FastAPI dependencies.
"""

from typing import Generator, List, NamedTuple

from fastapi import Depends
from sqlalchemy.orm import Session

from tally.database import SessionLocal
from tally.schemas.budget import BudgetRecord
from tally.schemas.transaction import TransactionRecord
from tally.services.storage_service import load_budgets, load_transactions


class Snapshot(NamedTuple):
    """Transactions and budgets loaded once for a single request."""
    transactions: List[TransactionRecord]
    budgets: List[BudgetRecord]


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database sessions.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_snapshot(db: Session = Depends(get_db)) -> Snapshot:
    """Dependency for a read-only snapshot of the store."""
    return Snapshot(transactions=load_transactions(db), budgets=load_budgets(db))
