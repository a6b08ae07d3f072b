"""
Goal planning and recommendation API endpoints.
"""

from dataclasses import asdict
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from financeflow.calculations import goals
from financeflow.calculations.goals import GoalStatus, PlanningMode
from financeflow.services import recommendations
from financeflow.services.recommendations import Location, RiskAppetite, TimeHorizon

router = APIRouter()


class GoalFeasibilityRequest(BaseModel):
    """Input for the single-goal planner."""

    goal_name: str = Field("New Tractor", min_length=1)
    goal_cost: float = Field(10000, gt=0)
    current_savings: float = Field(1000, ge=0)
    monthly_income: float = Field(5000, gt=0)
    monthly_expenses: float = Field(3000, ge=0)
    tenure_months: float = Field(12, gt=0)


class GoalFeasibilityResponse(BaseModel):
    goal_name: str
    status: GoalStatus
    remaining_amount: float
    available_monthly_savings: float
    required_monthly_savings: Optional[float]
    suggested_tenure_months: Optional[int]
    suggested_monthly_savings: Optional[float]
    message: str


@router.post("/goal-feasibility", response_model=GoalFeasibilityResponse)
async def assess_goal(inputs: GoalFeasibilityRequest):
    """Check whether a goal can be reached within the chosen tenure."""
    result = goals.assess_goal_feasibility(goals.GoalFeasibilityInput(**inputs.model_dump()))
    return GoalFeasibilityResponse(goal_name=inputs.goal_name, **asdict(result))


class GoalItem(BaseModel):
    name: str = Field(..., min_length=1)
    cost: float = Field(..., gt=0)
    priority: int = Field(3, ge=goals.MIN_PRIORITY, le=goals.MAX_PRIORITY)


class MultiGoalRequest(BaseModel):
    """Input for the multi-goal planner."""

    goals: List[GoalItem] = Field(..., min_length=1)
    mode: PlanningMode = PlanningMode.simultaneous
    monthly_savings: float = Field(1000, gt=0)


class GoalAllocationResponse(BaseModel):
    name: str
    cost: float
    priority: int
    allocated_monthly_savings: float
    months_to_achieve: float
    cumulative_months: float


class MultiGoalResponse(BaseModel):
    mode: PlanningMode
    goals: List[GoalAllocationResponse]
    total_months: float
    summary: str


@router.post("/multi-goal", response_model=MultiGoalResponse)
async def plan_goals(inputs: MultiGoalRequest):
    """Allocate monthly savings across several goals."""
    try:
        plan = goals.plan_multiple_goals(
            goals.MultiGoalInput(
                goals=[goals.PlannedGoal(**g.model_dump()) for g in inputs.goals],
                mode=inputs.mode,
                monthly_savings=inputs.monthly_savings,
            )
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return MultiGoalResponse(**asdict(plan))


class RecommendationRequest(BaseModel):
    location: Location = Location.rural
    time_horizon: TimeHorizon = TimeHorizon.medium_term
    risk_appetite: RiskAppetite = RiskAppetite.medium


@router.post("/recommendations")
async def get_recommendations(inputs: RecommendationRequest):
    """Return sample investment and loan suggestions for a profile."""
    return {
        "recommendation": recommendations.recommend(
            inputs.location, inputs.time_horizon, inputs.risk_appetite
        )
    }
