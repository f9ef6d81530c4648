"""Unit tests for the valuation engine"""

import pytest
from decimal import Decimal

from personal_ledger.models.records import FixedDeposit, RecurringPlan
from personal_ledger.valuation import (
    fixed_deposit_maturity,
    growth_schedule,
    maturity_value,
    project,
    quantize_money,
    recurring_plan_maturity,
    total_contributed,
)


def test_fixed_deposit_maturity_five_years():
    """10000 at 7.1% for 5 years compounds annually"""
    value = fixed_deposit_maturity(Decimal("10000"), 5)

    assert value == Decimal("10000") * Decimal("1.071") ** 5
    assert quantize_money(value) == Decimal("14091.18")


def test_fixed_deposit_maturity_one_year():
    """One year is a single application of the rate"""
    assert fixed_deposit_maturity(Decimal("1000"), 1) == Decimal("1071.000")


def test_recurring_plan_contributions_only():
    """Annuity of 1000/month at 0.8% monthly for 12 months"""
    value = recurring_plan_maturity(Decimal("0"), Decimal("1000"), 1)

    assert quantize_money(value) == Decimal("12542.34")


def test_recurring_plan_lump_sum_only():
    """Without contributions only the lump sum compounds monthly"""
    value = recurring_plan_maturity(Decimal("10000"), Decimal("0"), 1)

    assert value == Decimal("10000") * Decimal("1.008") ** 12
    assert quantize_money(value) == Decimal("11003.39")


def test_recurring_plan_combines_both_terms():
    """Lump sum and annuity add up"""
    combined = recurring_plan_maturity(Decimal("10000"), Decimal("500"), 1)
    lump = recurring_plan_maturity(Decimal("10000"), Decimal("0"), 1)
    annuity = recurring_plan_maturity(Decimal("0"), Decimal("500"), 1)

    assert combined == lump + annuity
    assert quantize_money(combined) == Decimal("17274.56")


def test_zero_duration_returns_principal():
    """A zero-year term returns the principal without dividing"""
    assert fixed_deposit_maturity(Decimal("2500"), 0) == Decimal("2500")
    assert recurring_plan_maturity(Decimal("2500"), Decimal("300"), 0) == Decimal("2500")
    assert recurring_plan_maturity(Decimal("0"), Decimal("300"), 0) == Decimal("0")


@pytest.mark.parametrize(
    "principal,monthly,years",
    [
        (Decimal("-1"), Decimal("0"), 1),
        (Decimal("1"), Decimal("-1"), 1),
        (Decimal("1"), Decimal("0"), -1),
    ],
)
def test_negative_inputs_rejected(principal, monthly, years):
    """The engine's domain is non-negative"""
    with pytest.raises(ValueError):
        recurring_plan_maturity(principal, monthly, years)


def test_maturity_value_dispatches_on_kind():
    """maturity_value picks the formula from the investment kind"""
    deposit = FixedDeposit(principal=Decimal("10000"), duration_years=5)
    plan = RecurringPlan(
        principal=Decimal("10000"),
        duration_years=5,
        monthly_contribution=Decimal("0"),
    )

    assert maturity_value(deposit) == fixed_deposit_maturity(Decimal("10000"), 5)
    assert maturity_value(plan) == recurring_plan_maturity(
        Decimal("10000"), Decimal("0"), 5
    )
    # Monthly compounding at 9.6% beats annual at 7.1%
    assert maturity_value(plan) > maturity_value(deposit)


def test_maturity_value_is_pure():
    """Repeated calls give the same result and leave the record alone"""
    plan = RecurringPlan(
        principal=Decimal("1000"),
        duration_years=3,
        monthly_contribution=Decimal("100"),
    )
    before = plan.model_dump()

    assert maturity_value(plan) == maturity_value(plan)
    assert plan.model_dump() == before


def test_total_contributed():
    """Contributions are counted once per month of the term"""
    plan = RecurringPlan(
        principal=Decimal("1000"),
        duration_years=2,
        monthly_contribution=Decimal("100"),
    )
    deposit = FixedDeposit(principal=Decimal("1000"), duration_years=2)

    assert total_contributed(plan) == Decimal("3400")
    assert total_contributed(deposit) == Decimal("1000")


def test_growth_schedule_covers_every_year():
    """Schedule starts at the principal and ends at maturity"""
    deposit = FixedDeposit(principal=Decimal("1000"), duration_years=3)

    points = growth_schedule(deposit)

    assert [p.year for p in points] == [0, 1, 2, 3]
    assert points[0].value == Decimal("1000")
    assert points[-1].value == maturity_value(deposit)
    assert all(a.value < b.value for a, b in zip(points, points[1:]))


def test_project_pairs_investment_with_value():
    """project() bundles value, contributions and gain"""
    deposit = FixedDeposit(principal=Decimal("10000"), duration_years=5)

    projection = project(deposit)

    assert projection.investment == deposit
    assert quantize_money(projection.maturity_value) == Decimal("14091.18")
    assert quantize_money(projection.projected_gain) == Decimal("4091.18")


def test_quantize_money_rounds_half_up():
    """Half a cent rounds away from zero"""
    assert quantize_money(Decimal("1.005")) == Decimal("1.01")
    assert quantize_money(Decimal("1.004")) == Decimal("1.00")
