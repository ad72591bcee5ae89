"""
Transaction schemas.
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, datetime

from tally.models.transaction import TransactionType
from tally.schemas.common import Amount


class TransactionBase(BaseModel):
    amount: Amount = Field(..., ge=0)
    description: str
    date: date
    category: str
    type: TransactionType


class TransactionCreate(TransactionBase):
    """Schema for recording a new transaction."""
    amount: Amount = Field(..., gt=0, max_digits=12, decimal_places=2)
    description: str = Field(..., min_length=1, max_length=500)
    category: str = Field(..., min_length=1, max_length=50)

    model_config = {"str_strip_whitespace": True}


class TransactionRecord(TransactionBase):
    """A stored transaction, as loaded from the store."""
    id: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class TransactionListResponse(BaseModel):
    items: list[TransactionRecord]
    total: int
