"""
Loan and EMI Calculations

Implements the equated installment (annuity) formula for basic loans,
grace-period crop loans, and side-by-side comparison of several offers.
Degenerate inputs never produce NaN or infinity: they fall back to 0.
"""

import enum
import math
from typing import List, Optional
from datetime import date
from dataclasses import dataclass, field
from dateutil.relativedelta import relativedelta


class TenureUnit(str, enum.Enum):
    """Unit the loan tenure is expressed in."""
    months = "months"
    years = "years"


class RepaymentFrequency(str, enum.Enum):
    """How often installments are paid."""
    monthly = "monthly"
    weekly = "weekly"


PERIODS_PER_YEAR = {
    RepaymentFrequency.monthly: 12,
    RepaymentFrequency.weekly: 52,
}

# Approximate weeks per month
PERIODS_PER_MONTH = {
    RepaymentFrequency.monthly: 1,
    RepaymentFrequency.weekly: 4.33,
}

# Longest dated schedule that will be generated (100 years)
MAX_SCHEDULE_MONTHS = 1200


@dataclass(frozen=True)
class LoanTerms:
    """Inputs shared by the EMI calculator and the crop loan planner."""

    principal: float
    annual_rate_percent: float  # e.g. 10 for 10% p.a.
    tenure_value: float
    tenure_unit: TenureUnit = TenureUnit.years
    repayment_frequency: RepaymentFrequency = RepaymentFrequency.monthly
    grace_period_months: int = 0


@dataclass(frozen=True)
class LoanResult:
    """Outcome of an EMI calculation."""

    periodic_payment: float
    total_interest: float
    total_payment: float
    principal: float
    period_count: float
    rate_per_period: float


@dataclass(frozen=True)
class RepaymentScheduleEntry:
    """A single installment due on a given date."""

    due_date: date
    amount_due: float


@dataclass(frozen=True)
class CropLoanPlan:
    """Repayment plan for a loan with an initial grace period."""

    principal: float
    grace_period_months: int
    grace_interest: float
    new_principal: float
    repayment_months: int
    periodic_payment: float
    total_payment: float
    total_interest: float
    repayment_start_date: Optional[date]
    schedule: List[RepaymentScheduleEntry] = field(default_factory=list)


@dataclass(frozen=True)
class LoanOffer:
    """One entry in a multi-loan comparison. Repayment is always monthly."""

    name: str
    principal: float
    annual_rate_percent: float
    tenure_value: float
    tenure_unit: TenureUnit = TenureUnit.years


@dataclass(frozen=True)
class ComparedLoan:
    """A loan offer with its computed cost and ranking."""

    index: int  # Position in the submitted list
    name: str
    principal: float
    annual_rate_percent: float
    tenure_months: float
    periodic_payment: float
    total_interest: float
    total_payment: float
    rank: int
    is_cheapest: bool


@dataclass(frozen=True)
class LoanComparison:
    """Comparison results ordered from lowest to highest periodic payment."""

    loans: List[ComparedLoan]
    cheapest: ComparedLoan


def finite_or_zero(value: float) -> float:
    """Return value, or 0.0 when it is NaN or infinite."""
    return value if math.isfinite(value) else 0.0


def tenure_in_months(tenure_value: float, tenure_unit: TenureUnit) -> float:
    """Convert a tenure to months."""
    if TenureUnit(tenure_unit) == TenureUnit.years:
        return tenure_value * 12
    return tenure_value


def check_schedule_length(months: float) -> None:
    """Raise ValueError for a schedule longer than MAX_SCHEDULE_MONTHS."""
    if months > MAX_SCHEDULE_MONTHS:
        raise ValueError(
            f"Repayment schedule cannot be longer than {MAX_SCHEDULE_MONTHS} months"
        )


def calculate_payment(principal: float, rate_per_period: float, periods: float) -> float:
    """
    Calculate the fixed installment that amortizes a loan.

    payment = P * r * (1 + r)^n / ((1 + r)^n - 1)

    Args:
        principal: Loan principal amount
        rate_per_period: Interest rate per period as decimal (e.g., 0.1 / 12)
        periods: Number of periods (may be fractional for weekly repayment)

    Returns:
        Installment amount, or 0.0 when the formula is undefined
        (zero rate, no periods, overflow)
    """
    if rate_per_period == 0 or periods <= 0:
        return 0.0

    try:
        growth = (1 + rate_per_period) ** periods
        payment = principal * rate_per_period * growth / (growth - 1)
    except (OverflowError, ZeroDivisionError):
        return 0.0

    return finite_or_zero(payment)


def calculate_emi(terms: LoanTerms) -> LoanResult:
    """
    Calculate the EMI, total interest and total payment for a loan.

    Weekly repayment uses 52 periods per year for the rate and
    4.33 weeks per month for the period count.
    """
    frequency = RepaymentFrequency(terms.repayment_frequency)
    rate_per_period = terms.annual_rate_percent / 100 / PERIODS_PER_YEAR[frequency]
    months = tenure_in_months(terms.tenure_value, terms.tenure_unit)
    period_count = months * PERIODS_PER_MONTH[frequency]

    payment = calculate_payment(terms.principal, rate_per_period, period_count)
    if payment == 0:
        return LoanResult(
            periodic_payment=0.0,
            total_interest=0.0,
            total_payment=0.0,
            principal=terms.principal,
            period_count=period_count,
            rate_per_period=rate_per_period,
        )

    total_payment = finite_or_zero(payment * period_count)
    total_interest = finite_or_zero(total_payment - terms.principal)

    return LoanResult(
        periodic_payment=payment,
        total_interest=total_interest,
        total_payment=total_payment,
        principal=terms.principal,
        period_count=period_count,
        rate_per_period=rate_per_period,
    )


def plan_crop_loan(terms: LoanTerms, start: Optional[date] = None) -> CropLoanPlan:
    """
    Plan a seasonal loan whose repayment begins after a grace period.

    Simple interest accrues on the principal during the grace period and is
    capitalized; the new principal is then amortized monthly over the
    remaining tenure. Installments are flat, one per month, starting
    grace_period_months after the start date.

    Args:
        terms: Loan terms; repayment frequency is ignored (always monthly)
        start: Date the loan is taken (defaults to today)

    Returns:
        CropLoanPlan. When the grace period consumes the whole tenure the
        schedule is empty and repayment_start_date is None.

    Raises:
        ValueError: If the repayment period exceeds MAX_SCHEDULE_MONTHS or a
            due date falls outside the supported calendar range
    """
    monthly_rate = terms.annual_rate_percent / 100 / 12
    months = tenure_in_months(terms.tenure_value, terms.tenure_unit)
    grace = terms.grace_period_months or 0

    grace_interest = terms.principal * monthly_rate * grace
    new_principal = terms.principal + grace_interest

    repayment_months = math.floor(months - grace)
    if repayment_months <= 0:
        return CropLoanPlan(
            principal=terms.principal,
            grace_period_months=grace,
            grace_interest=grace_interest,
            new_principal=new_principal,
            repayment_months=0,
            periodic_payment=0.0,
            total_payment=0.0,
            total_interest=0.0,
            repayment_start_date=None,
            schedule=[],
        )

    check_schedule_length(repayment_months)
    payment = calculate_payment(new_principal, monthly_rate, repayment_months)

    if start is None:
        start = date.today()
    repayment_start = start + relativedelta(months=grace)

    schedule = [
        RepaymentScheduleEntry(
            due_date=repayment_start + relativedelta(months=i),
            amount_due=payment,
        )
        for i in range(repayment_months)
    ]

    total_payment = payment * repayment_months
    # Grace interest is part of the cost of borrowing
    total_interest = total_payment - terms.principal if payment else 0.0

    return CropLoanPlan(
        principal=terms.principal,
        grace_period_months=grace,
        grace_interest=grace_interest,
        new_principal=new_principal,
        repayment_months=repayment_months,
        periodic_payment=payment,
        total_payment=total_payment,
        total_interest=total_interest,
        repayment_start_date=repayment_start,
        schedule=schedule,
    )


def generate_amortization_schedule(
    principal: float,
    annual_rate_percent: float,
    months: int,
    start: Optional[date] = None,
) -> List[dict]:
    """
    Generate a declining-balance breakdown of a monthly loan.

    Args:
        principal: Loan principal amount
        annual_rate_percent: Annual interest rate in percent
        months: Number of monthly installments
        start: Date of first payment (defaults to today)

    Returns:
        List of amortization rows

    Raises:
        ValueError: If months exceeds MAX_SCHEDULE_MONTHS or a payment date
            falls outside the supported calendar range
    """
    check_schedule_length(months)
    schedule = []
    balance = principal
    monthly_rate = annual_rate_percent / 100 / 12
    payment = calculate_payment(principal, monthly_rate, months)

    if payment == 0:
        return schedule

    if start is None:
        start = date.today()

    for period in range(1, months + 1):
        interest = balance * monthly_rate
        principal_pmt = min(payment - interest, balance)

        # Last installment clears any rounding residue
        if period == months:
            principal_pmt = balance

        ending_balance = balance - principal_pmt

        schedule.append(
            {
                "period": period,
                "date": (start + relativedelta(months=period - 1)).isoformat(),
                "beginning_balance": round(balance, 2),
                "payment": round(principal_pmt + interest, 2),
                "interest": round(interest, 2),
                "principal": round(principal_pmt, 2),
                "ending_balance": round(max(0.0, ending_balance), 2),
            }
        )

        balance = max(0.0, ending_balance)

    return schedule


def compare_loans(offers: List[LoanOffer]) -> LoanComparison:
    """
    Compare loan offers by their monthly installment.

    Each offer is priced independently with monthly repayment. The result is
    sorted by periodic payment (ties keep submission order) and the first
    entry is flagged as the cheapest.

    Raises:
        ValueError: If no offers are given
    """
    if not offers:
        raise ValueError("At least one loan is required for comparison")

    priced = []
    for index, offer in enumerate(offers):
        result = calculate_emi(
            LoanTerms(
                principal=offer.principal,
                annual_rate_percent=offer.annual_rate_percent,
                tenure_value=offer.tenure_value,
                tenure_unit=offer.tenure_unit,
                repayment_frequency=RepaymentFrequency.monthly,
            )
        )
        priced.append((index, offer, result))

    priced.sort(key=lambda item: item[2].periodic_payment)

    loans = [
        ComparedLoan(
            index=index,
            name=offer.name,
            principal=offer.principal,
            annual_rate_percent=offer.annual_rate_percent,
            tenure_months=result.period_count,
            periodic_payment=result.periodic_payment,
            total_interest=result.total_interest,
            total_payment=result.total_payment,
            rank=rank,
            is_cheapest=rank == 1,
        )
        for rank, (index, offer, result) in enumerate(priced, start=1)
    ]

    return LoanComparison(loans=loans, cheapest=loans[0])
