"""
Budget schemas.
"""

from enum import Enum
from typing import Optional
from datetime import datetime

from pydantic import BaseModel, Field

from tally.schemas.common import Amount, Percent, MONTH_PATTERN


class BudgetStatusKind(str, Enum):
    ON_TRACK = "on-track"
    NEAR_LIMIT = "near-limit"
    OVER_BUDGET = "over-budget"


class BudgetBase(BaseModel):
    category_id: str
    amount: Amount
    month: str  # YYYY-MM


class BudgetCreate(BudgetBase):
    """Schema for creating a budget."""
    category_id: str = Field(..., min_length=1, max_length=50)
    amount: Amount = Field(..., gt=0, max_digits=12, decimal_places=2)
    month: str = Field(..., pattern=MONTH_PATTERN)


class BudgetUpdate(BaseModel):
    """Schema for updating a budget."""
    category_id: Optional[str] = Field(None, min_length=1, max_length=50)
    amount: Optional[Amount] = Field(None, gt=0, max_digits=12, decimal_places=2)
    month: Optional[str] = Field(None, pattern=MONTH_PATTERN)


class BudgetRecord(BudgetBase):
    """A stored budget. Spend is never part of the record."""
    id: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class BudgetStatus(BaseModel):
    status: BudgetStatusKind
    percent: Percent
    display_percent: Percent


class BudgetProgress(BaseModel):
    """A budget joined with its spend-to-date."""
    budget_id: str
    category_id: str
    category_name: str
    color: str
    month: str
    amount: Amount
    spent: Amount
    remaining: Amount
    overage: Amount
    percent: Percent
    display_percent: Percent
    status: BudgetStatusKind
