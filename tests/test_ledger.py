"""
Tests for the in-memory ledger store.
"""

import pytest
from datetime import date

from financeflow.ledger import (
    Category,
    DuplicateCategoryError,
    EntryType,
    FinanceStore,
    RecordNotFoundError,
)


class TestTransactions:
    """Test transaction bookkeeping."""

    def test_add_and_get(self, empty_store):
        t = empty_store.add_transaction(
            EntryType.expense, "Seeds", 120.0, date(2024, 6, 1), "Paddy seeds"
        )
        assert t.id
        assert empty_store.get_transaction(t.id) == t
        assert empty_store.list_transactions() == [t]

    def test_ids_unique(self, empty_store):
        a = empty_store.add_transaction("income", "Salary", 1, date(2024, 1, 1), "a")
        b = empty_store.add_transaction("income", "Salary", 1, date(2024, 1, 1), "b")
        assert a.id != b.id

    def test_filter_by_type(self, store):
        income = store.list_transactions(EntryType.income)
        assert [t.category for t in income] == ["Salary"]
        assert len(store.list_transactions(EntryType.expense)) == 5

    def test_update(self, store):
        t = store.list_transactions()[1]
        updated = store.update_transaction(t.id, amount=400.0, description="Bigger shop")
        assert updated.id == t.id
        assert updated.amount == 400.0
        assert updated.category == t.category
        assert store.get_transaction(t.id).description == "Bigger shop"

    def test_update_type_coerced(self, store):
        t = store.list_transactions()[0]
        updated = store.update_transaction(t.id, type="expense")
        assert updated.type == EntryType.expense

    def test_update_ignores_none(self, store):
        t = store.list_transactions()[0]
        updated = store.update_transaction(t.id, amount=None, description="Paycheck")
        assert updated.amount == t.amount
        assert updated.description == "Paycheck"
        assert store.summary().total_income == 4500

    def test_delete(self, store):
        t = store.list_transactions()[0]
        store.delete_transaction(t.id)
        with pytest.raises(RecordNotFoundError):
            store.get_transaction(t.id)

    def test_unknown_id(self, store):
        with pytest.raises(RecordNotFoundError):
            store.update_transaction("missing", amount=1.0)
        with pytest.raises(RecordNotFoundError):
            store.delete_transaction("missing")


class TestGoalsAndCategories:
    """Test savings goals and categories."""

    def test_goal_crud(self, empty_store):
        goal = empty_store.add_goal("Water pump", 800.0)
        assert empty_store.list_goals() == [goal]
        updated = empty_store.update_goal(goal.id, target_amount=950.0)
        assert updated.target_amount == 950.0
        assert empty_store.update_goal(goal.id, name=None).name == "Water pump"
        empty_store.delete_goal(goal.id)
        assert empty_store.list_goals() == []
        with pytest.raises(RecordNotFoundError):
            empty_store.delete_goal(goal.id)

    def test_seeded_categories(self, store):
        assert len(store.list_categories(EntryType.income)) == 2
        assert len(store.list_categories(EntryType.expense)) == 6
        assert Category("Dining Out", EntryType.expense) in store.list_categories()

    def test_duplicate_category_rejected(self, store):
        with pytest.raises(DuplicateCategoryError):
            store.add_category("Rent", EntryType.expense)

    def test_same_name_different_type_allowed(self, store):
        category = store.add_category("Rent", EntryType.income)
        assert category.type == EntryType.income

    def test_delete_category(self, store):
        store.delete_category("Transport", EntryType.expense)
        names = [c.name for c in store.list_categories(EntryType.expense)]
        assert "Transport" not in names
        with pytest.raises(RecordNotFoundError):
            store.delete_category("Transport", EntryType.expense)


class TestSummary:
    """Test totals and budget usage."""

    def test_seeded_totals(self, store):
        summary = store.summary()
        assert summary.total_income == 4500
        assert summary.total_expenses == 2180
        assert summary.balance == 2320
        assert summary.budget == 3000
        assert summary.percentage_spent == pytest.approx(2180 / 3000 * 100)
        assert summary.remaining_budget == 820
        assert not summary.over_budget

    def test_spending_by_category(self, store):
        store.add_transaction(EntryType.expense, "Groceries", 50.0, date(2023, 12, 20), "Milk")
        spending = store.summary().spending_by_category
        assert spending["Groceries"] == 400
        assert spending["Rent"] == 1500
        assert "Salary" not in spending

    def test_recent_transactions(self, store):
        recent = store.summary().recent_transactions
        assert len(recent) == 5
        assert [t.category for t in recent] == [
            "Entertainment",
            "Utilities",
            "Groceries",
            "Salary",
            "Rent",
        ]

    def test_over_budget(self, store):
        store.set_budget(2000)
        summary = store.summary()
        assert summary.over_budget
        assert summary.remaining_budget == -180

    def test_zero_budget_reports_zero_percent(self):
        store = FinanceStore(budget=0)
        store.add_transaction(EntryType.expense, "Rent", 100, date(2024, 1, 1), "Rent")
        assert store.summary().percentage_spent == 0

    def test_empty_store(self, empty_store):
        summary = empty_store.summary()
        assert summary.total_income == 0
        assert summary.recent_transactions == []
        assert summary.spending_by_category == {}

    def test_budget_must_be_positive(self, store):
        with pytest.raises(ValueError):
            store.set_budget(0)
        assert store.budget == 3000
