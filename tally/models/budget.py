"""
Budget database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Numeric, Index
from tally.database import Base


class Budget(Base):
    """Monthly spending cap for one expense category.

    Spent-to-date is derived from transactions on every read and is not stored.
    """

    __tablename__ = "budgets"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    category_id = Column(String(50), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    month = Column(String(7), nullable=False, index=True)  # YYYY-MM
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        Index("idx_budget_category_month", "category_id", "month"),
    )
