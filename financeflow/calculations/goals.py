"""
Savings Goal Planning

Feasibility check for a single goal and savings allocation across several
prioritized goals, either one after another or all at once.
"""

import enum
import math
from typing import List, Optional
from dataclasses import dataclass

from financeflow.formatting import format_currency, format_months

MIN_PRIORITY = 1
MAX_PRIORITY = 5


class GoalStatus(str, enum.Enum):
    """Outcome of a single-goal feasibility check."""
    already_achieved = "already_achieved"
    feasible = "feasible"
    infeasible = "infeasible"


class PlanningMode(str, enum.Enum):
    """How monthly savings are spread across goals."""
    sequential = "sequential"
    simultaneous = "simultaneous"


@dataclass(frozen=True)
class GoalFeasibilityInput:
    """Inputs for the single-goal planner."""

    goal_cost: float
    current_savings: float
    monthly_income: float
    monthly_expenses: float
    tenure_months: float
    goal_name: str = ""


@dataclass(frozen=True)
class GoalFeasibilityResult:
    """Whether a goal can be met in time, with remediation when it cannot."""

    status: GoalStatus
    remaining_amount: float
    available_monthly_savings: float
    required_monthly_savings: Optional[float]
    suggested_tenure_months: Optional[int]
    suggested_monthly_savings: Optional[float]
    message: str


@dataclass(frozen=True)
class PlannedGoal:
    """A goal in a multi-goal plan. Lower priority number is tackled first."""

    name: str
    cost: float
    priority: int


@dataclass(frozen=True)
class MultiGoalInput:
    """Inputs for the multi-goal planner."""

    goals: List[PlannedGoal]
    mode: PlanningMode
    monthly_savings: float


@dataclass(frozen=True)
class GoalAllocation:
    """Savings allocated to one goal and when it completes."""

    name: str
    cost: float
    priority: int
    allocated_monthly_savings: float
    months_to_achieve: float
    cumulative_months: float


@dataclass(frozen=True)
class MultiGoalPlan:
    """Allocation for every goal plus the overall completion time."""

    mode: PlanningMode
    goals: List[GoalAllocation]
    total_months: float
    summary: str


def assess_goal_feasibility(inputs: GoalFeasibilityInput) -> GoalFeasibilityResult:
    """
    Check whether a savings goal can be reached within the tenure.

    Args:
        inputs: Goal cost, savings so far, monthly income/expenses, tenure

    Returns:
        GoalFeasibilityResult. When the goal is infeasible and there is
        nothing left to save each month, suggested_tenure_months is None.

    Raises:
        ValueError: If the goal is not yet met and tenure is not positive
    """
    available = inputs.monthly_income - inputs.monthly_expenses
    remaining = inputs.goal_cost - inputs.current_savings

    if remaining <= 0:
        return GoalFeasibilityResult(
            status=GoalStatus.already_achieved,
            remaining_amount=0.0,
            available_monthly_savings=available,
            required_monthly_savings=None,
            suggested_tenure_months=None,
            suggested_monthly_savings=None,
            message="Congratulations! You have already achieved this goal.",
        )

    if inputs.tenure_months <= 0:
        raise ValueError("Tenure must be a positive number of months")

    required = remaining / inputs.tenure_months

    if available >= required:
        return GoalFeasibilityResult(
            status=GoalStatus.feasible,
            remaining_amount=remaining,
            available_monthly_savings=available,
            required_monthly_savings=required,
            suggested_tenure_months=None,
            suggested_monthly_savings=None,
            message=(
                f"Yes, this goal is achievable! You need to save "
                f"{format_currency(required)} per month. Your available "
                f"monthly savings are {format_currency(available)}."
            ),
        )

    suggested_tenure = math.ceil(remaining / available) if available > 0 else None

    suggestions = []
    if suggested_tenure is not None:
        suggestions.append(f"- Increase your tenure to {suggested_tenure} months.")
    else:
        suggestions.append("- Reduce your monthly expenses so that part of your income is left to save.")
    suggestions.append(f"- Increase your monthly savings to {format_currency(required)}.")

    message = (
        f"This goal is not achievable with your current savings plan. You need to save "
        f"{format_currency(required)} per month, but you only have "
        f"{format_currency(available)} available.\n\nSuggestions:\n" + "\n".join(suggestions)
    )

    return GoalFeasibilityResult(
        status=GoalStatus.infeasible,
        remaining_amount=remaining,
        available_monthly_savings=available,
        required_monthly_savings=required,
        suggested_tenure_months=suggested_tenure,
        suggested_monthly_savings=required,
        message=message,
    )


def _validate_plan_input(inputs: MultiGoalInput) -> None:
    if not inputs.goals:
        raise ValueError("At least one goal is required")
    if inputs.monthly_savings <= 0:
        raise ValueError("Monthly savings must be positive to plan goals")
    for goal in inputs.goals:
        if not MIN_PRIORITY <= goal.priority <= MAX_PRIORITY:
            raise ValueError(
                f"Goal '{goal.name}' priority must be between {MIN_PRIORITY} and {MAX_PRIORITY}"
            )


def _plan_sequential(goals: List[PlannedGoal], monthly_savings: float) -> List[GoalAllocation]:
    allocations = []
    months = 0.0
    for goal in sorted(goals, key=lambda g: g.priority):
        months_to_achieve = goal.cost / monthly_savings
        months += months_to_achieve
        allocations.append(
            GoalAllocation(
                name=goal.name,
                cost=goal.cost,
                priority=goal.priority,
                allocated_monthly_savings=monthly_savings,
                months_to_achieve=months_to_achieve,
                cumulative_months=months,
            )
        )
    return allocations


def _plan_simultaneous(goals: List[PlannedGoal], monthly_savings: float) -> List[GoalAllocation]:
    total_priority = sum(g.priority for g in goals)
    allocations = []
    for goal in goals:
        allocated = goal.priority / total_priority * monthly_savings
        months_to_achieve = goal.cost / allocated
        allocations.append(
            GoalAllocation(
                name=goal.name,
                cost=goal.cost,
                priority=goal.priority,
                allocated_monthly_savings=allocated,
                months_to_achieve=months_to_achieve,
                cumulative_months=months_to_achieve,
            )
        )
    return allocations


def _render_summary(mode: PlanningMode, allocations: List[GoalAllocation], total: float) -> str:
    if mode == PlanningMode.sequential:
        lines = ["Sequential Plan:"]
        for a in allocations:
            lines.append(
                f'- Goal "{a.name}" ({format_currency(a.cost)}): Achieved in '
                f"{format_months(a.months_to_achieve)} months. "
                f"Total time: {format_months(a.cumulative_months)} months."
            )
        lines.append("")
        lines.append(
            f"Total time to achieve all goals sequentially is {format_months(total)} months."
        )
    else:
        lines = ["Simultaneous Plan:"]
        for a in allocations:
            lines.append(
                f'- Goal "{a.name}" ({format_currency(a.cost)}): Allocate '
                f"{format_currency(a.allocated_monthly_savings)}/month. Achieved in "
                f"{format_months(a.months_to_achieve)} months."
            )
        lines.append("")
        lines.append(f"All goals will be achieved in approximately {format_months(total)} months.")
    return "\n".join(lines)


def plan_multiple_goals(inputs: MultiGoalInput) -> MultiGoalPlan:
    """
    Spread monthly savings across several goals.

    Sequential: goals are funded one at a time in priority order with the
    full monthly savings; total time is the sum of each goal's time.
    Simultaneous: each goal receives savings in proportion to its priority
    weight; total time is the slowest goal's time.

    Raises:
        ValueError: If there are no goals, savings are not positive, or a
            priority is outside 1-5
    """
    _validate_plan_input(inputs)
    mode = PlanningMode(inputs.mode)

    if mode == PlanningMode.sequential:
        allocations = _plan_sequential(inputs.goals, inputs.monthly_savings)
        total = allocations[-1].cumulative_months
    else:
        allocations = _plan_simultaneous(inputs.goals, inputs.monthly_savings)
        total = max(a.months_to_achieve for a in allocations)

    return MultiGoalPlan(
        mode=mode,
        goals=allocations,
        total_months=total,
        summary=_render_summary(mode, allocations, total),
    )
