"""
Seed script for sample transactions.
"""

import logging
import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from tally.database import SessionLocal, init_db
from tally.models import Transaction, TransactionType
from tally.schemas.transaction import TransactionRecord
from tally.services.storage_service import save_transactions

logger = logging.getLogger(__name__)


def sample_transactions() -> List[TransactionRecord]:
    """A month of example income and expenses."""
    now = datetime.utcnow()
    samples = [
        (Decimal("3500.00"), "Monthly Salary", date(2024, 1, 15), "salary", TransactionType.income),
        (Decimal("45.50"), "Grocery Store", date(2024, 1, 10), "food", TransactionType.expense),
        (Decimal("120.00"), "Gas Bill", date(2024, 1, 8), "bills", TransactionType.expense),
        (Decimal("25.00"), "Movie Tickets", date(2024, 1, 12), "entertainment", TransactionType.expense),
        (Decimal("800.00"), "Freelance Project", date(2024, 1, 20), "freelance", TransactionType.income),
    ]
    return [
        TransactionRecord(
            id=str(uuid.uuid4()),
            amount=amount,
            description=description,
            date=day,
            category=category,
            type=txn_type,
            created_at=now
        )
        for amount, description, day, category, txn_type in samples
    ]


def seed_sample_data(db: Optional[Session] = None) -> int:
    """
    Seed sample transactions into an empty store.
    Returns the number of transactions added.
    """
    owns_session = db is None
    db = db or SessionLocal()

    try:
        existing_count = db.query(Transaction).count()
        if existing_count > 0:
            logger.info("Transactions already present (%d), skipping sample data", existing_count)
            return 0

        samples = sample_transactions()
        save_transactions(db, samples)
        logger.info("Seeded %d sample transactions", len(samples))
        return len(samples)

    except Exception:
        db.rollback()
        raise
    finally:
        if owns_session:
            db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
    seed_sample_data()
