"""
Transaction database model.
"""

import uuid
import enum
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Date, Numeric, Text, Enum, Index
from tally.database import Base


class TransactionType(str, enum.Enum):
    """Transaction type enumeration."""
    income = "income"
    expense = "expense"


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    amount = Column(Numeric(12, 2), nullable=False)  # Always non-negative, sign comes from type
    description = Column(Text, nullable=False)
    date = Column(Date, nullable=False, index=True)
    category = Column(String(50), nullable=False)  # Id from the category registry
    type = Column(Enum(TransactionType), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Indexes for common queries
    __table_args__ = (
        Index("idx_transaction_category_type", "category", "type"),
    )
