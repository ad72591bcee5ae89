"""
Predefined category registry.

Categories are fixed for the lifetime of the process and are not stored in the
database. Lookups never raise: an unknown id returns None and callers fall back
to the UNKNOWN_* display values.
"""

from typing import Dict, List, Optional, Tuple

from tally.models.transaction import TransactionType
from tally.schemas.category import Category


UNKNOWN_CATEGORY_NAME = "Unknown"
UNKNOWN_CATEGORY_COLOR = "#BDC3C7"
UNKNOWN_CATEGORY_ICON = "Circle"


PREDEFINED_CATEGORIES: Tuple[Category, ...] = (
    # Expense categories
    Category(id="food", name="Food & Dining", color="#FF6B6B", icon="UtensilsCrossed", type=TransactionType.expense),
    Category(id="transport", name="Transportation", color="#4ECDC4", icon="Car", type=TransactionType.expense),
    Category(id="entertainment", name="Entertainment", color="#45B7D1", icon="Gamepad2", type=TransactionType.expense),
    Category(id="shopping", name="Shopping", color="#96CEB4", icon="ShoppingBag", type=TransactionType.expense),
    Category(id="bills", name="Bills & Utilities", color="#FFEAA7", icon="Receipt", type=TransactionType.expense),
    Category(id="healthcare", name="Healthcare", color="#DDA0DD", icon="Heart", type=TransactionType.expense),
    Category(id="education", name="Education", color="#98D8E8", icon="GraduationCap", type=TransactionType.expense),
    Category(id="travel", name="Travel", color="#F7DC6F", icon="Plane", type=TransactionType.expense),
    Category(id="other-expense", name="Other Expenses", color="#BDC3C7", icon="MoreHorizontal", type=TransactionType.expense),

    # Income categories
    Category(id="salary", name="Salary", color="#2ECC71", icon="Briefcase", type=TransactionType.income),
    Category(id="freelance", name="Freelance", color="#3498DB", icon="Laptop", type=TransactionType.income),
    Category(id="investments", name="Investments", color="#E74C3C", icon="TrendingUp", type=TransactionType.income),
    Category(id="business", name="Business", color="#9B59B6", icon="Building", type=TransactionType.income),
    Category(id="other-income", name="Other Income", color="#1ABC9C", icon="PlusCircle", type=TransactionType.income),
)

_CATEGORIES_BY_ID: Dict[str, Category] = {c.id: c for c in PREDEFINED_CATEGORIES}


def get_category(category_id: str) -> Optional[Category]:
    """Look up a category by id. Returns None for unknown ids."""
    return _CATEGORIES_BY_ID.get(category_id)


def list_categories() -> List[Category]:
    return list(PREDEFINED_CATEGORIES)


def list_categories_by_type(category_type: TransactionType) -> List[Category]:
    """All categories of one type, in registry order."""
    return [c for c in PREDEFINED_CATEGORIES if c.type == category_type]


def category_display(category_id: str) -> Tuple[str, str, str]:
    """Return (name, color, icon) for a category id, with fallbacks for unknown ids."""
    category = get_category(category_id)
    if category is None:
        return UNKNOWN_CATEGORY_NAME, UNKNOWN_CATEGORY_COLOR, UNKNOWN_CATEGORY_ICON
    return category.name, category.color, category.icon
