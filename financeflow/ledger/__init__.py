"""
In-memory ledger of transactions, savings goals, categories and budget.
"""

from financeflow.ledger.models import (
    Category,
    EntryType,
    SavingsGoal,
    Transaction,
)
from financeflow.ledger.store import (
    DuplicateCategoryError,
    FinanceStore,
    RecordNotFoundError,
)

__all__ = [
    "Category",
    "EntryType",
    "SavingsGoal",
    "Transaction",
    "DuplicateCategoryError",
    "FinanceStore",
    "RecordNotFoundError",
]
