"""
Loan and investment calculator API endpoints.

Each endpoint validates the submitted form values and returns the result of
one calculator. Defaults match the values the dashboard pre-fills.
"""

from dataclasses import asdict
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from financeflow.calculations import livestock, loans
from financeflow.calculations.loans import RepaymentFrequency, TenureUnit

router = APIRouter()


class EMIInput(BaseModel):
    """Input for the basic loan / EMI calculator."""

    principal: float = Field(100000, gt=0)
    annual_rate_percent: float = Field(10, gt=0)
    tenure_value: float = Field(2, gt=0)
    tenure_unit: TenureUnit = TenureUnit.years
    repayment_frequency: RepaymentFrequency = RepaymentFrequency.monthly
    include_schedule: bool = False
    start_date: Optional[date] = None


class EMIResponse(BaseModel):
    """EMI, totals and an optional monthly amortization breakdown."""

    periodic_payment: float
    total_interest: float
    total_payment: float
    principal: float
    period_count: float
    rate_per_period: float
    amortization_schedule: Optional[List[dict]] = None


@router.post("/emi", response_model=EMIResponse)
async def calculate_emi(inputs: EMIInput):
    """Calculate the installment for a loan."""
    terms = loans.LoanTerms(
        principal=inputs.principal,
        annual_rate_percent=inputs.annual_rate_percent,
        tenure_value=inputs.tenure_value,
        tenure_unit=inputs.tenure_unit,
        repayment_frequency=inputs.repayment_frequency,
    )
    result = loans.calculate_emi(terms)

    schedule = None
    if inputs.include_schedule:
        if inputs.repayment_frequency != RepaymentFrequency.monthly:
            raise HTTPException(
                status_code=400,
                detail="Amortization schedule is only available for monthly repayment",
            )
        if not float(result.period_count).is_integer():
            raise HTTPException(
                status_code=400,
                detail="Amortization schedule requires a whole number of months",
            )
        try:
            schedule = loans.generate_amortization_schedule(
                principal=inputs.principal,
                annual_rate_percent=inputs.annual_rate_percent,
                months=int(result.period_count),
                start=inputs.start_date,
            )
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

    return EMIResponse(**asdict(result), amortization_schedule=schedule)


class CropLoanInput(BaseModel):
    """Input for the crop / seasonal loan planner."""

    principal: float = Field(50000, gt=0)
    annual_rate_percent: float = Field(7, gt=0)
    tenure_value: float = Field(12, gt=0)
    tenure_unit: TenureUnit = TenureUnit.months
    grace_period_months: int = Field(6, ge=0)
    start_date: Optional[date] = None


class ScheduleEntry(BaseModel):
    due_date: date
    amount_due: float


class CropLoanResponse(BaseModel):
    """Crop loan plan with its flat monthly schedule."""

    principal: float
    grace_period_months: int
    grace_interest: float
    new_principal: float
    repayment_months: int
    periodic_payment: float
    total_payment: float
    total_interest: float
    repayment_start_date: Optional[date]
    schedule: List[ScheduleEntry]


@router.post("/crop-loan", response_model=CropLoanResponse)
async def plan_crop_loan(inputs: CropLoanInput):
    """Plan a seasonal loan that starts repayment after a grace period."""
    terms = loans.LoanTerms(
        principal=inputs.principal,
        annual_rate_percent=inputs.annual_rate_percent,
        tenure_value=inputs.tenure_value,
        tenure_unit=inputs.tenure_unit,
        grace_period_months=inputs.grace_period_months,
    )
    try:
        plan = loans.plan_crop_loan(terms, start=inputs.start_date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return CropLoanResponse(**asdict(plan))


class LivestockInput(BaseModel):
    """Input for the livestock investment calculator."""

    purchase_cost_per_unit: float = Field(500, gt=0)
    unit_count: int = Field(10, gt=0)
    monthly_feed_cost_per_unit: float = Field(50, gt=0)
    duration_months: int = Field(12, gt=0)
    sale_value_per_unit: float = Field(1200, gt=0)


class LivestockResponse(BaseModel):
    """Livestock costs, profit and break-even."""

    total_purchase_cost: float
    total_feed_cost: float
    total_investment: float
    total_sale_value: float
    profit_or_loss: float
    break_even_unit_count: float
    break_even_units_rounded: int
    is_profitable: bool


@router.post("/livestock", response_model=LivestockResponse)
async def calculate_livestock(inputs: LivestockInput):
    """Calculate return on a livestock purchase."""
    result = livestock.calculate_livestock_return(
        livestock.LivestockInvestment(**inputs.model_dump())
    )
    return LivestockResponse(**asdict(result), is_profitable=result.is_profitable)


class LoanEntryInput(BaseModel):
    """One loan offer to compare."""

    name: str = Field(..., min_length=1)
    principal: float = Field(..., gt=0)
    annual_rate_percent: float = Field(..., gt=0)
    tenure_value: float = Field(..., gt=0)
    tenure_unit: TenureUnit = TenureUnit.years


class LoanCompareInput(BaseModel):
    """Input for the multi-loan comparer."""

    loans: List[LoanEntryInput] = Field(..., min_length=1)


class ComparedLoanResponse(BaseModel):
    index: int
    name: str
    principal: float
    annual_rate_percent: float
    tenure_months: float
    periodic_payment: float
    total_interest: float
    total_payment: float
    rank: int
    is_cheapest: bool


class LoanCompareResponse(BaseModel):
    """Loans ordered from lowest to highest monthly payment."""

    loans: List[ComparedLoanResponse]
    cheapest: ComparedLoanResponse


@router.post("/compare-loans", response_model=LoanCompareResponse)
async def compare_loans(inputs: LoanCompareInput):
    """Compare loan offers and flag the one with the lowest payment."""
    try:
        comparison = loans.compare_loans(
            [loans.LoanOffer(**entry.model_dump()) for entry in inputs.loans]
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return LoanCompareResponse(**asdict(comparison))
