"""
Category API endpoints.
"""

from fastapi import APIRouter, HTTPException, Query
from typing import Optional

from tally.categories import get_category, list_categories, list_categories_by_type
from tally.models.transaction import TransactionType
from tally.schemas.category import Category, CategoryList

router = APIRouter()


@router.get("", response_model=CategoryList)
def list_all_categories(
    type: Optional[TransactionType] = Query(None, description="income or expense")
):
    """List predefined categories, optionally only one type."""
    categories = list_categories_by_type(type) if type else list_categories()
    return CategoryList(items=categories, total=len(categories))


@router.get("/{category_id}", response_model=Category)
def get_single_category(category_id: str):
    """Get a specific category."""
    category = get_category(category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category
