"""
Livestock Investment Calculations

Return and break-even figures for goat, cow or poultry purchases.
"""

import math
from dataclasses import dataclass

from financeflow.calculations.loans import finite_or_zero


@dataclass(frozen=True)
class LivestockInvestment:
    """Inputs for a livestock purchase held for a number of months."""

    purchase_cost_per_unit: float
    unit_count: int
    monthly_feed_cost_per_unit: float
    duration_months: int
    sale_value_per_unit: float


@dataclass(frozen=True)
class LivestockResult:
    """Costs, proceeds and break-even for a livestock investment."""

    total_purchase_cost: float
    total_feed_cost: float
    total_investment: float
    total_sale_value: float
    profit_or_loss: float
    break_even_unit_count: float
    break_even_units_rounded: int  # Whole animals that must be sold

    @property
    def is_profitable(self) -> bool:
        return self.profit_or_loss > 0


def calculate_livestock_return(investment: LivestockInvestment) -> LivestockResult:
    """
    Calculate total cost, sale value, profit and break-even point.

    The break-even count is the number of animals whose sale covers the
    total investment; it is 0 when the sale value per animal is 0.
    """
    total_purchase_cost = investment.purchase_cost_per_unit * investment.unit_count
    total_feed_cost = (
        investment.monthly_feed_cost_per_unit
        * investment.unit_count
        * investment.duration_months
    )
    total_investment = total_purchase_cost + total_feed_cost
    total_sale_value = investment.sale_value_per_unit * investment.unit_count

    if investment.sale_value_per_unit == 0:
        break_even = 0.0
    else:
        break_even = finite_or_zero(total_investment / investment.sale_value_per_unit)

    return LivestockResult(
        total_purchase_cost=total_purchase_cost,
        total_feed_cost=total_feed_cost,
        total_investment=total_investment,
        total_sale_value=total_sale_value,
        profit_or_loss=total_sale_value - total_investment,
        break_even_unit_count=break_even,
        break_even_units_rounded=math.ceil(break_even),
    )
