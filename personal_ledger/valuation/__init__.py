"""Investment valuation package."""

from personal_ledger.valuation.engine import (
    FIXED_DEPOSIT_ANNUAL_RATE,
    MONTHS_PER_YEAR,
    RECURRING_PLAN_ANNUAL_RATE,
    fixed_deposit_maturity,
    growth_schedule,
    maturity_value,
    project,
    quantize_money,
    recurring_plan_maturity,
    total_contributed,
)

__all__ = [
    "FIXED_DEPOSIT_ANNUAL_RATE",
    "MONTHS_PER_YEAR",
    "RECURRING_PLAN_ANNUAL_RATE",
    "fixed_deposit_maturity",
    "growth_schedule",
    "maturity_value",
    "project",
    "quantize_money",
    "recurring_plan_maturity",
    "total_contributed",
]
