"""
Transaction, savings goal, category and budget API endpoints.
"""

import datetime
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from financeflow.api.dependencies import get_store
from financeflow.ledger import (
    DuplicateCategoryError,
    EntryType,
    FinanceStore,
    RecordNotFoundError,
)

router = APIRouter()


# ============================================================================
# TRANSACTIONS
# ============================================================================


class TransactionCreate(BaseModel):
    """Schema for recording a transaction."""

    type: EntryType = EntryType.expense
    amount: float = Field(..., gt=0)
    category: str = Field(..., min_length=1)
    date: datetime.date
    description: str = Field(..., min_length=1)


class TransactionUpdate(BaseModel):
    """Schema for updating a transaction."""

    type: Optional[EntryType] = None
    amount: Optional[float] = Field(None, gt=0)
    category: Optional[str] = Field(None, min_length=1)
    date: Optional[datetime.date] = None
    description: Optional[str] = Field(None, min_length=1)


class TransactionResponse(BaseModel):
    id: str
    type: EntryType
    amount: float
    category: str
    date: datetime.date
    description: str

    class Config:
        from_attributes = True


class TransactionListResponse(BaseModel):
    transactions: List[TransactionResponse]
    total: int


@router.get("/transactions", response_model=TransactionListResponse)
async def list_transactions(
    type: Optional[EntryType] = None,
    store: FinanceStore = Depends(get_store),
):
    """List transactions, optionally only income or only expenses."""
    transactions = store.list_transactions(type)
    return TransactionListResponse(
        transactions=[TransactionResponse.model_validate(t) for t in transactions],
        total=len(transactions),
    )


@router.post("/transactions", response_model=TransactionResponse, status_code=201)
async def create_transaction(
    data: TransactionCreate,
    store: FinanceStore = Depends(get_store),
):
    """Record a new transaction."""
    transaction = store.add_transaction(
        data.type, data.category, data.amount, data.date, data.description
    )
    return TransactionResponse.model_validate(transaction)


@router.get("/transactions/{transaction_id}", response_model=TransactionResponse)
async def get_transaction(
    transaction_id: str,
    store: FinanceStore = Depends(get_store),
):
    """Get a transaction by ID."""
    try:
        return TransactionResponse.model_validate(store.get_transaction(transaction_id))
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Transaction not found")


@router.put("/transactions/{transaction_id}", response_model=TransactionResponse)
async def update_transaction(
    transaction_id: str,
    data: TransactionUpdate,
    store: FinanceStore = Depends(get_store),
):
    """Update a transaction."""
    # Update only provided fields
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    try:
        transaction = store.update_transaction(transaction_id, **changes)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return TransactionResponse.model_validate(transaction)


@router.delete("/transactions/{transaction_id}")
async def delete_transaction(
    transaction_id: str,
    store: FinanceStore = Depends(get_store),
):
    """Delete a transaction."""
    try:
        store.delete_transaction(transaction_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return {"deleted": True, "id": transaction_id}


# ============================================================================
# SAVINGS GOALS
# ============================================================================


class GoalCreate(BaseModel):
    name: str = Field(..., min_length=1)
    target_amount: float = Field(..., gt=0)


class GoalUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    target_amount: Optional[float] = Field(None, gt=0)


class GoalResponse(BaseModel):
    id: str
    name: str
    target_amount: float

    class Config:
        from_attributes = True


@router.get("/goals", response_model=List[GoalResponse])
async def list_goals(store: FinanceStore = Depends(get_store)):
    """List savings goals."""
    return [GoalResponse.model_validate(g) for g in store.list_goals()]


@router.post("/goals", response_model=GoalResponse, status_code=201)
async def create_goal(data: GoalCreate, store: FinanceStore = Depends(get_store)):
    """Add a savings goal."""
    return GoalResponse.model_validate(store.add_goal(data.name, data.target_amount))


@router.put("/goals/{goal_id}", response_model=GoalResponse)
async def update_goal(
    goal_id: str,
    data: GoalUpdate,
    store: FinanceStore = Depends(get_store),
):
    """Update a savings goal."""
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    try:
        goal = store.update_goal(goal_id, **changes)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Goal not found")
    return GoalResponse.model_validate(goal)


@router.delete("/goals/{goal_id}")
async def delete_goal(goal_id: str, store: FinanceStore = Depends(get_store)):
    """Delete a savings goal."""
    try:
        store.delete_goal(goal_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Goal not found")
    return {"deleted": True, "id": goal_id}


# ============================================================================
# CATEGORIES
# ============================================================================


class CategorySchema(BaseModel):
    name: str = Field(..., min_length=1)
    type: EntryType = EntryType.expense

    class Config:
        from_attributes = True


@router.get("/categories", response_model=List[CategorySchema])
async def list_categories(
    type: Optional[EntryType] = None,
    store: FinanceStore = Depends(get_store),
):
    """List categories, optionally filtered by type."""
    return [CategorySchema.model_validate(c) for c in store.list_categories(type)]


@router.post("/categories", response_model=CategorySchema, status_code=201)
async def create_category(data: CategorySchema, store: FinanceStore = Depends(get_store)):
    """Add a category."""
    try:
        category = store.add_category(data.name, data.type)
    except DuplicateCategoryError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return CategorySchema.model_validate(category)


@router.delete("/categories/{type}/{name}")
async def delete_category(
    type: EntryType,
    name: str,
    store: FinanceStore = Depends(get_store),
):
    """Delete a category."""
    try:
        store.delete_category(name, type)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Category not found")
    return {"deleted": True, "name": name, "type": type}


# ============================================================================
# BUDGET AND SUMMARY
# ============================================================================


class BudgetSchema(BaseModel):
    amount: float = Field(..., gt=0)


@router.get("/budget", response_model=BudgetSchema)
async def get_budget(store: FinanceStore = Depends(get_store)):
    """Get the monthly budget."""
    return BudgetSchema(amount=store.budget)


@router.put("/budget", response_model=BudgetSchema)
async def set_budget(data: BudgetSchema, store: FinanceStore = Depends(get_store)):
    """Set the monthly budget."""
    return BudgetSchema(amount=store.set_budget(data.amount))


class SummaryResponse(BaseModel):
    total_income: float
    total_expenses: float
    balance: float
    budget: float
    percentage_spent: float
    remaining_budget: float
    over_budget: bool
    spending_by_category: Dict[str, float]
    recent_transactions: List[TransactionResponse]


@router.get("/summary", response_model=SummaryResponse)
async def get_summary(store: FinanceStore = Depends(get_store)):
    """Totals, budget usage, spending by category and recent transactions."""
    summary = store.summary()
    return SummaryResponse(
        total_income=summary.total_income,
        total_expenses=summary.total_expenses,
        balance=summary.balance,
        budget=summary.budget,
        percentage_spent=summary.percentage_spent,
        remaining_budget=summary.remaining_budget,
        over_budget=summary.over_budget,
        spending_by_category=summary.spending_by_category,
        recent_transactions=[
            TransactionResponse.model_validate(t) for t in summary.recent_transactions
        ],
    )
