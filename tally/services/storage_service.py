"""Store for transaction and budget collections.

The aggregation engine never touches the database; callers load a snapshot
here and hand the records to the engine.
"""

import logging
from typing import Iterable, List, Type

from sqlalchemy.orm import Session

from tally.database import Base
from tally.models.budget import Budget
from tally.models.transaction import Transaction
from tally.schemas.budget import BudgetRecord
from tally.schemas.transaction import TransactionRecord

logger = logging.getLogger(__name__)


def load_transactions(db: Session) -> List[TransactionRecord]:
    """All stored transactions in the order they were recorded."""
    rows = db.query(Transaction).order_by(Transaction.created_at, Transaction.id).all()
    return [TransactionRecord.model_validate(row) for row in rows]


def load_budgets(db: Session) -> List[BudgetRecord]:
    """All stored budgets in the order they were created."""
    rows = db.query(Budget).order_by(Budget.created_at, Budget.id).all()
    return [BudgetRecord.model_validate(row) for row in rows]


def _replace_collection(db: Session, model: Type[Base], records: Iterable, fields: tuple) -> int:
    """
    Make the table hold exactly the given records.
    Records are replaced under their id; rows missing from the collection are deleted.
    """
    kept_ids = set()
    for record in records:
        values = {name: getattr(record, name) for name in fields}
        if getattr(record, "created_at", None) is not None:
            values["created_at"] = record.created_at
        db.merge(model(id=record.id, **values))
        kept_ids.add(record.id)

    removed = db.query(model).filter(model.id.notin_(list(kept_ids))).delete(synchronize_session=False)
    db.commit()
    return removed


def save_transactions(db: Session, transactions: Iterable[TransactionRecord]) -> None:
    """Persist a transaction collection, replacing what is stored."""
    transactions = list(transactions)
    removed = _replace_collection(
        db, Transaction, transactions,
        ("amount", "description", "date", "category", "type")
    )
    logger.info("Saved %d transactions (%d removed)", len(transactions), removed)


def save_budgets(db: Session, budgets: Iterable[BudgetRecord]) -> None:
    """Persist a budget collection, replacing what is stored."""
    budgets = list(budgets)
    removed = _replace_collection(db, Budget, budgets, ("category_id", "amount", "month"))
    logger.info("Saved %d budgets (%d removed)", len(budgets), removed)
