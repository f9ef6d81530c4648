"""
Core Data Models for Personal Ledger

These models define the strict schemas for every record the ledger holds.
They are designed to:
1. Enforce type safety at runtime
2. Be immutable once created
3. Be serializable for display and logging

DESIGN DECISION: Investment kinds form a CLOSED set.
Each kind is its own frozen model tagged by `kind`, and the `Investment`
alias is a discriminated union over them. Adding a kind means adding a
model here AND a branch in the valuation engine.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Annotated, Literal, Optional, Union
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


# Longest term an investment may run. Keeps the monthly compounding
# factor inside the Decimal exponent range.
MAX_DURATION_YEARS = 100


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class TransactionKind(str, Enum):
    """Direction of a cash-flow transaction."""
    INCOME = "income"
    EXPENDITURE = "expenditure"


class InvestmentKind(str, Enum):
    """
    Supported investment kinds.

    RECURRING_PLAN: lump sum plus monthly contributions, compounded monthly.
    FIXED_DEPOSIT: single lump sum, compounded annually.
    """
    RECURRING_PLAN = "recurring_plan"
    FIXED_DEPOSIT = "fixed_deposit"


# =============================================================================
# TRANSACTIONS
# =============================================================================

class Transaction(BaseModel):
    """
    An income or expenditure event.

    CRITICAL: Only the Account creates these, and only after the
    balance check has passed.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique transaction ID"
    )
    recorded_at: datetime = Field(
        default_factory=_utcnow,
        description="When the transaction was recorded (UTC)"
    )
    kind: TransactionKind = Field(
        ...,
        description="Income or expenditure"
    )
    amount: Decimal = Field(
        ...,
        ge=0,
        description="Amount moved, always non-negative"
    )
    description: str = Field(
        default="",
        description="Free text, e.g. 'Salary' or 'Groceries'"
    )

    @property
    def display_name(self) -> str:
        return self.kind.value.title()


# =============================================================================
# INVESTMENTS
# =============================================================================

class _InvestmentBase(BaseModel):
    """Fields shared by every investment kind."""
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique investment ID"
    )
    created_at: datetime = Field(
        default_factory=_utcnow,
        description="When the investment was made (UTC)"
    )
    principal: Decimal = Field(
        ...,
        gt=0,
        description="Lump sum debited from the balance"
    )
    duration_years: int = Field(
        ...,
        gt=0,
        le=MAX_DURATION_YEARS,
        description="Term of the investment in whole years"
    )


class RecurringPlan(_InvestmentBase):
    """
    Lump sum plus fixed monthly contributions, compounded monthly.

    Only the principal is debited from the balance; contributions are
    assumed to come from future income and only affect the projection.
    """

    kind: Literal[InvestmentKind.RECURRING_PLAN] = InvestmentKind.RECURRING_PLAN
    monthly_contribution: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Amount added at the end of every month"
    )

    @property
    def display_name(self) -> str:
        return "Recurring Plan"


class FixedDeposit(_InvestmentBase):
    """Single lump sum compounded annually for a fixed term."""

    kind: Literal[InvestmentKind.FIXED_DEPOSIT] = InvestmentKind.FIXED_DEPOSIT

    @property
    def display_name(self) -> str:
        return "Fixed Deposit"


Investment = Annotated[
    Union[RecurringPlan, FixedDeposit],
    Field(discriminator="kind"),
]


# =============================================================================
# DERIVED READ MODELS
# =============================================================================

class MaturityProjection(BaseModel):
    """An investment paired with its computed maturity value."""
    model_config = ConfigDict(frozen=True)

    investment: Investment
    maturity_value: Decimal
    total_contributed: Decimal = Field(
        ...,
        description="Principal plus every scheduled contribution"
    )

    @property
    def projected_gain(self) -> Decimal:
        """Return maturity_value minus total_contributed."""
        return self.maturity_value - self.total_contributed


class GrowthPoint(BaseModel):
    """Value of an investment at the end of a given year of its term."""
    model_config = ConfigDict(frozen=True)

    year: int = Field(ge=0)
    value: Decimal


class LedgerSummary(BaseModel):
    """Totals over everything the ledger holds."""
    model_config = ConfigDict(frozen=True)

    total_income: Decimal = Decimal("0")
    total_expenditure: Decimal = Decimal("0")
    total_invested: Decimal = Decimal("0")
    transaction_count: int = Field(default=0, ge=0)
    investment_count: int = Field(default=0, ge=0)

    @property
    def net_cash_flow(self) -> Decimal:
        """Return total_income minus total_expenditure."""
        return self.total_income - self.total_expenditure


# =============================================================================
# OPERATION RESULTS
# =============================================================================

class OperationResult(BaseModel):
    """
    Outcome of a money-moving operation, as seen by the UI.

    success=False means nothing changed; error_code and error_message
    say why.
    """
    model_config = ConfigDict(frozen=True)

    success: bool
    record: Optional[Union[Transaction, RecurringPlan, FixedDeposit]] = None
    balance: Decimal = Field(
        ...,
        description="Balance after the operation (unchanged on failure)"
    )
    error_code: Optional[str] = Field(
        default=None,
        pattern="^(insufficient_funds|invalid_parameter)$"
    )
    error_message: Optional[str] = None
