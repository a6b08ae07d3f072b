"""
Caller-owned store for dashboard session state.

A FinanceStore holds every transaction, savings goal and category along with
the monthly budget. Nothing is persisted: the owner creates one store per
session and passes it to whatever needs it.
"""

import logging
from collections import OrderedDict
from datetime import date
from dataclasses import dataclass, replace
from typing import Dict, List, Optional

from financeflow.ledger.models import Category, EntryType, SavingsGoal, Transaction

logger = logging.getLogger(__name__)

RECENT_TRANSACTION_COUNT = 5


class RecordNotFoundError(LookupError):
    """No record exists with the requested id or name."""

    pass


class DuplicateCategoryError(ValueError):
    """A category with the same name and type already exists."""

    pass


@dataclass(frozen=True)
class LedgerSummary:
    """Totals and budget position across all transactions."""

    total_income: float
    total_expenses: float
    balance: float
    budget: float
    percentage_spent: float
    remaining_budget: float
    over_budget: bool
    spending_by_category: Dict[str, float]
    recent_transactions: List[Transaction]


def _provided(changes: dict) -> dict:
    """Drop the id and any field left as None from an update."""
    return {k: v for k, v in changes.items() if k != "id" and v is not None}


class FinanceStore:
    """Mutable in-memory collection of ledger records."""

    def __init__(self, budget: float = 3000.0):
        self._transactions: "OrderedDict[str, Transaction]" = OrderedDict()
        self._goals: "OrderedDict[str, SavingsGoal]" = OrderedDict()
        self._categories: List[Category] = []
        self.budget = budget

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    def list_transactions(self, entry_type: Optional[EntryType] = None) -> List[Transaction]:
        transactions = list(self._transactions.values())
        if entry_type is not None:
            transactions = [t for t in transactions if t.type == EntryType(entry_type)]
        return transactions

    def get_transaction(self, transaction_id: str) -> Transaction:
        try:
            return self._transactions[transaction_id]
        except KeyError:
            raise RecordNotFoundError(f"Transaction {transaction_id} not found")

    def add_transaction(
        self,
        entry_type: EntryType,
        category: str,
        amount: float,
        on: date,
        description: str,
    ) -> Transaction:
        transaction = Transaction(
            type=EntryType(entry_type),
            category=category,
            amount=amount,
            date=on,
            description=description,
        )
        self._transactions[transaction.id] = transaction
        logger.info(f"Added {transaction.type.value} transaction {transaction.id} for {category}")
        return transaction

    def update_transaction(self, transaction_id: str, **changes) -> Transaction:
        """Replace the given fields of a transaction."""
        current = self.get_transaction(transaction_id)
        changes = _provided(changes)
        if "type" in changes:
            changes["type"] = EntryType(changes["type"])
        updated = replace(current, **changes)
        self._transactions[transaction_id] = updated
        logger.info(f"Updated transaction {transaction_id}")
        return updated

    def delete_transaction(self, transaction_id: str) -> None:
        self.get_transaction(transaction_id)
        del self._transactions[transaction_id]
        logger.info(f"Deleted transaction {transaction_id}")

    # ------------------------------------------------------------------
    # Savings goals
    # ------------------------------------------------------------------

    def list_goals(self) -> List[SavingsGoal]:
        return list(self._goals.values())

    def get_goal(self, goal_id: str) -> SavingsGoal:
        try:
            return self._goals[goal_id]
        except KeyError:
            raise RecordNotFoundError(f"Savings goal {goal_id} not found")

    def add_goal(self, name: str, target_amount: float) -> SavingsGoal:
        goal = SavingsGoal(name=name, target_amount=target_amount)
        self._goals[goal.id] = goal
        logger.info(f"Added savings goal {goal.id} ({name})")
        return goal

    def update_goal(self, goal_id: str, **changes) -> SavingsGoal:
        current = self.get_goal(goal_id)
        changes = _provided(changes)
        updated = replace(current, **changes)
        self._goals[goal_id] = updated
        logger.info(f"Updated savings goal {goal_id}")
        return updated

    def delete_goal(self, goal_id: str) -> None:
        self.get_goal(goal_id)
        del self._goals[goal_id]
        logger.info(f"Deleted savings goal {goal_id}")

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def list_categories(self, entry_type: Optional[EntryType] = None) -> List[Category]:
        if entry_type is None:
            return list(self._categories)
        return [c for c in self._categories if c.type == EntryType(entry_type)]

    def add_category(self, name: str, entry_type: EntryType) -> Category:
        category = Category(name=name, type=EntryType(entry_type))
        if category in self._categories:
            raise DuplicateCategoryError(
                f"{category.type.value.capitalize()} category '{name}' already exists"
            )
        self._categories.append(category)
        logger.info(f"Added {category.type.value} category {name}")
        return category

    def delete_category(self, name: str, entry_type: EntryType) -> None:
        category = Category(name=name, type=EntryType(entry_type))
        if category not in self._categories:
            raise RecordNotFoundError(f"Category {name} not found")
        self._categories.remove(category)
        logger.info(f"Deleted {category.type.value} category {name}")

    # ------------------------------------------------------------------
    # Budget and summary
    # ------------------------------------------------------------------

    def set_budget(self, amount: float) -> float:
        if amount <= 0:
            raise ValueError("Budget must be positive")
        self.budget = amount
        logger.info(f"Monthly budget set to {amount}")
        return self.budget

    def summary(self) -> LedgerSummary:
        """Compute totals, budget usage and the latest transactions."""
        total_income = sum(t.amount for t in self.list_transactions(EntryType.income))
        expenses = self.list_transactions(EntryType.expense)
        total_expenses = sum(t.amount for t in expenses)

        spending: Dict[str, float] = {}
        for t in expenses:
            spending[t.category] = spending.get(t.category, 0.0) + t.amount

        percentage_spent = (total_expenses / self.budget) * 100 if self.budget > 0 else 0.0
        remaining = self.budget - total_expenses

        recent = sorted(self._transactions.values(), key=lambda t: t.date, reverse=True)

        return LedgerSummary(
            total_income=total_income,
            total_expenses=total_expenses,
            balance=total_income - total_expenses,
            budget=self.budget,
            percentage_spent=percentage_spent,
            remaining_budget=remaining,
            over_budget=remaining < 0,
            spending_by_category=spending,
            recent_transactions=recent[:RECENT_TRANSACTION_COUNT],
        )

    def seed_demo_data(self) -> None:
        """Load the sample transactions, goals and categories."""
        for name, entry_type in DEMO_CATEGORIES:
            if Category(name=name, type=entry_type) not in self._categories:
                self.add_category(name, entry_type)
        for entry_type, category, amount, when, description in DEMO_TRANSACTIONS:
            self.add_transaction(entry_type, category, amount, when, description)
        for name, target in DEMO_GOALS:
            self.add_goal(name, target)


DEMO_TRANSACTIONS = [
    (EntryType.income, "Salary", 4500.0, date(2023, 12, 1), "Monthly Salary"),
    (EntryType.expense, "Groceries", 350.0, date(2023, 12, 5), "Weekly grocery shopping"),
    (EntryType.expense, "Rent", 1500.0, date(2023, 12, 1), "Monthly rent"),
    (EntryType.expense, "Utilities", 150.0, date(2023, 12, 10), "Electricity and water bill"),
    (EntryType.expense, "Entertainment", 80.0, date(2023, 12, 15), "Movie tickets"),
    (EntryType.expense, "Transport", 100.0, date(2023, 12, 1), "Monthly bus pass"),
]

DEMO_GOALS = [
    ("Vacation to Hawaii", 3000.0),
    ("New Laptop", 1800.0),
]

DEMO_CATEGORIES = [
    ("Salary", EntryType.income),
    ("Freelance", EntryType.income),
    ("Groceries", EntryType.expense),
    ("Rent", EntryType.expense),
    ("Utilities", EntryType.expense),
    ("Entertainment", EntryType.expense),
    ("Transport", EntryType.expense),
    ("Dining Out", EntryType.expense),
]
