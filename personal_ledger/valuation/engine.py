"""
Valuation Engine

Closed-form compound-interest formulas for every investment kind.

DESIGN DECISION: Every function here is PURE.
No function reads or writes ledger state; maturity values are
recomputed on demand from an investment's fixed parameters and the
annual rate of its kind.

FIXED DEPOSIT (annual compounding):
    maturity = principal * (1 + rate) ** years

RECURRING PLAN (monthly compounding, contributions at month end):
    r = rate / 12, n = years * 12
    maturity = principal * (1 + r) ** n + monthly * ((1 + r) ** n - 1) / r
"""

from decimal import ROUND_HALF_UP, Decimal

from personal_ledger.models.records import (
    GrowthPoint,
    Investment,
    InvestmentKind,
    MaturityProjection,
)


FIXED_DEPOSIT_ANNUAL_RATE = Decimal("0.071")
RECURRING_PLAN_ANNUAL_RATE = Decimal("0.096")
MONTHS_PER_YEAR = 12

_CENT = Decimal("0.01")


def _require_non_negative(name: str, value) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def fixed_deposit_maturity(principal: Decimal, duration_years: int) -> Decimal:
    """
    Maturity value of a lump sum compounded annually.

    A zero-year term returns the principal unchanged.
    """
    _require_non_negative("principal", principal)
    _require_non_negative("duration_years", duration_years)
    if duration_years == 0:
        return principal
    return principal * (1 + FIXED_DEPOSIT_ANNUAL_RATE) ** duration_years


def recurring_plan_maturity(
    principal: Decimal,
    monthly_contribution: Decimal,
    duration_years: int,
) -> Decimal:
    """
    Maturity value of a lump sum plus monthly contributions.

    The lump sum grows at the monthly rate for n periods; the
    contributions form an ordinary annuity over the same n periods.
    With n == 0 there is nothing to compound and no annuity term,
    so the principal is returned as-is.
    """
    _require_non_negative("principal", principal)
    _require_non_negative("monthly_contribution", monthly_contribution)
    _require_non_negative("duration_years", duration_years)

    periods = duration_years * MONTHS_PER_YEAR
    if periods == 0:
        return principal

    monthly_rate = RECURRING_PLAN_ANNUAL_RATE / MONTHS_PER_YEAR
    growth = (1 + monthly_rate) ** periods
    lump_sum = principal * growth
    contributions = monthly_contribution * ((growth - 1) / monthly_rate)
    return lump_sum + contributions


def _value_after(investment: Investment, years: int) -> Decimal:
    if investment.kind == InvestmentKind.FIXED_DEPOSIT:
        return fixed_deposit_maturity(investment.principal, years)
    if investment.kind == InvestmentKind.RECURRING_PLAN:
        return recurring_plan_maturity(
            investment.principal,
            investment.monthly_contribution,
            years,
        )
    raise TypeError(f"Unsupported investment kind: {investment.kind!r}")


def maturity_value(investment: Investment) -> Decimal:
    """Return the value of the investment at the end of its term."""
    return _value_after(investment, investment.duration_years)


def total_contributed(investment: Investment) -> Decimal:
    """
    Return everything paid into the investment over its term.

    For a fixed deposit this is the principal. A recurring plan adds
    one contribution per month of the term.
    """
    if investment.kind == InvestmentKind.FIXED_DEPOSIT:
        return investment.principal
    if investment.kind == InvestmentKind.RECURRING_PLAN:
        periods = investment.duration_years * MONTHS_PER_YEAR
        return investment.principal + investment.monthly_contribution * periods
    raise TypeError(f"Unsupported investment kind: {investment.kind!r}")


def growth_schedule(investment: Investment) -> list[GrowthPoint]:
    """Return the value at the end of every year, year 0 included."""
    return [
        GrowthPoint(year=year, value=_value_after(investment, year))
        for year in range(investment.duration_years + 1)
    ]


def project(investment: Investment) -> MaturityProjection:
    """Pair an investment with its maturity value."""
    return MaturityProjection(
        investment=investment,
        maturity_value=maturity_value(investment),
        total_contributed=total_contributed(investment),
    )


def quantize_money(value: Decimal) -> Decimal:
    """Round to whole cents for display."""
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


__all__ = [
    "FIXED_DEPOSIT_ANNUAL_RATE",
    "RECURRING_PLAN_ANNUAL_RATE",
    "MONTHS_PER_YEAR",
    "fixed_deposit_maturity",
    "recurring_plan_maturity",
    "maturity_value",
    "total_contributed",
    "growth_schedule",
    "project",
    "quantize_money",
]
