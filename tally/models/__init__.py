"""
Database models package.
"""

from tally.models.transaction import Transaction, TransactionType
from tally.models.budget import Budget

__all__ = [
    "Transaction",
    "TransactionType",
    "Budget",
]
