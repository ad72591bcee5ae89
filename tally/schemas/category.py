"""
Category schemas.
"""

from pydantic import BaseModel, Field
from tally.models.transaction import TransactionType


class Category(BaseModel):
    """A fixed, predefined category."""
    id: str
    name: str
    color: str = Field(..., pattern=r"^#[0-9A-Fa-f]{6}$")
    icon: str
    type: TransactionType

    model_config = {"frozen": True}


class CategoryList(BaseModel):
    """Schema for listing categories."""
    items: list[Category]
    total: int
