"""
Ledger records - plain dataclasses owned by a FinanceStore.
"""

import enum
import uuid
from datetime import date
from dataclasses import dataclass, field


class EntryType(str, enum.Enum):
    """Whether a transaction or category is income or expense."""
    income = "income"
    expense = "expense"


def generate_uuid() -> str:
    return str(uuid.uuid4())


@dataclass
class Transaction:
    """A single income or expense entry."""

    type: EntryType
    category: str
    amount: float
    date: date
    description: str
    id: str = field(default_factory=generate_uuid)


@dataclass
class SavingsGoal:
    """A named amount the user is saving towards."""

    name: str
    target_amount: float
    id: str = field(default_factory=generate_uuid)


@dataclass(frozen=True)
class Category:
    """A transaction category. Names are unique per entry type."""

    name: str
    type: EntryType
