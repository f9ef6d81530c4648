"""
Account - Balance Holder

The Account is the ONLY component allowed to change the balance.

INVARIANT: after every completed operation,
    balance >= minimum_balance

Every mutating operation follows the same shape:
1. Validate parameters (InvalidParameterError, nothing changed)
2. Compute the projected balance and check the invariant
   (InsufficientFundsError, nothing changed)
3. Build the immutable record
4. Apply the balance change and the ledger append together

The rejection test is strict: `balance - amount < minimum_balance`.
A debit that lands exactly on the minimum is accepted.
"""

from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Context,
    Decimal,
    InvalidOperation,
    localcontext,
)
from typing import Optional, Union

from personal_ledger.ledger import Ledger
from personal_ledger.models.records import (
    MAX_DURATION_YEARS,
    FixedDeposit,
    Investment,
    InvestmentKind,
    LedgerSummary,
    MaturityProjection,
    RecurringPlan,
    Transaction,
    TransactionKind,
)
from personal_ledger.valuation import project


# Balance arithmetic is add and subtract only, so it can run unrounded.
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)

Amount = Union[Decimal, int, float, str]


class LedgerError(Exception):
    """Base exception for ledger operations."""
    pass


class InvalidParameterError(LedgerError):
    """An operation was called with a value outside its domain."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class InsufficientFundsError(LedgerError):
    """A debit would leave the balance below the minimum."""

    def __init__(
        self,
        balance: Decimal,
        amount: Decimal,
        minimum_balance: Decimal,
    ):
        self.balance = balance
        self.amount = amount
        self.minimum_balance = minimum_balance
        super().__init__(
            f"Balance cannot fall below {minimum_balance}: "
            f"debiting {amount} from {balance} would leave {balance - amount}"
        )


def _to_decimal(field: str, value: Amount) -> Decimal:
    """Normalise a user-supplied amount to a finite Decimal."""
    if isinstance(value, bool):
        raise InvalidParameterError(field, f"{field} must be a number")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidParameterError(
                field, f"{field} must be a number, got {value!r}"
            ) from None
    if not result.is_finite():
        raise InvalidParameterError(field, f"{field} must be a finite number")
    return result


def _clean_description(description: str) -> str:
    if not isinstance(description, str):
        raise InvalidParameterError("description", "description must be text")
    return description.strip()


class Account:
    """
    A single-session account: one balance and the ledger behind it.

    Not thread-safe. One operation runs to completion before the
    next one starts.
    """

    def __init__(
        self,
        initial_balance: Amount = Decimal("5000"),
        minimum_balance: Amount = Decimal("1000"),
        ledger: Optional[Ledger] = None,
    ):
        """
        Open an account.

        Args:
            initial_balance: Opening balance, non-negative.
            minimum_balance: Floor enforced on every debit, non-negative.
            ledger: Ledger to record into. A fresh one if None.
        """
        balance = _to_decimal("initial_balance", initial_balance)
        minimum = _to_decimal("minimum_balance", minimum_balance)
        if balance < 0:
            raise InvalidParameterError(
                "initial_balance", "initial_balance must be non-negative"
            )
        if minimum < 0:
            raise InvalidParameterError(
                "minimum_balance", "minimum_balance must be non-negative"
            )

        self._balance = balance
        self._minimum_balance = minimum
        self._ledger = ledger if ledger is not None else Ledger()

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def minimum_balance(self) -> Decimal:
        return self._minimum_balance

    def current_balance(self) -> Decimal:
        return self._balance

    # -------------------------------------------------------------------------
    # Mutating operations
    # -------------------------------------------------------------------------

    def record_income(self, amount: Amount, description: str = "") -> Transaction:
        """
        Credit the balance. Never fails for a valid amount.

        Raises:
            InvalidParameterError: amount is negative or not a number
        """
        value = _to_decimal("amount", amount)
        if value < 0:
            raise InvalidParameterError("amount", "amount must be non-negative")
        description = _clean_description(description)

        transaction = Transaction(
            kind=TransactionKind.INCOME,
            amount=value,
            description=description,
        )
        with localcontext(_EXACT):
            self._balance = self._balance + value
        self._ledger.record_transaction(transaction)
        return transaction

    def record_expenditure(
        self,
        amount: Amount,
        description: str = "",
    ) -> Transaction:
        """
        Debit the balance if the minimum still holds afterwards.

        Raises:
            InvalidParameterError: amount is negative or not a number
            InsufficientFundsError: the debit would break the minimum
        """
        value = _to_decimal("amount", amount)
        if value < 0:
            raise InvalidParameterError("amount", "amount must be non-negative")
        description = _clean_description(description)

        projected = self._check_debit(value)
        transaction = Transaction(
            kind=TransactionKind.EXPENDITURE,
            amount=value,
            description=description,
        )
        self._balance = projected
        self._ledger.record_transaction(transaction)
        return transaction

    def make_investment(
        self,
        kind: Union[InvestmentKind, str],
        principal: Amount,
        duration_years: int,
        monthly_contribution: Optional[Amount] = None,
    ) -> Investment:
        """
        Move the principal out of the balance into a new investment.

        Args:
            kind: InvestmentKind or its string value
            principal: Lump sum to debit, must be positive
            duration_years: Whole years, 1 to MAX_DURATION_YEARS
            monthly_contribution: Recurring plans only, non-negative;
                defaults to 0

        Raises:
            InvalidParameterError: any parameter outside its domain
            InsufficientFundsError: the debit would break the minimum
        """
        try:
            kind = InvestmentKind(kind)
        except ValueError:
            raise InvalidParameterError(
                "kind", f"Unknown investment kind: {kind!r}"
            ) from None

        value = _to_decimal("principal", principal)
        if value <= 0:
            raise InvalidParameterError("principal", "principal must be positive")

        if isinstance(duration_years, bool) or not isinstance(duration_years, int):
            raise InvalidParameterError(
                "duration_years", "duration_years must be a whole number"
            )
        if duration_years <= 0:
            raise InvalidParameterError(
                "duration_years", "duration_years must be positive"
            )
        if duration_years > MAX_DURATION_YEARS:
            raise InvalidParameterError(
                "duration_years",
                f"duration_years must be at most {MAX_DURATION_YEARS}",
            )

        contribution = Decimal("0")
        if monthly_contribution is not None:
            contribution = _to_decimal("monthly_contribution", monthly_contribution)
            if contribution < 0:
                raise InvalidParameterError(
                    "monthly_contribution",
                    "monthly_contribution must be non-negative",
                )
            if kind == InvestmentKind.FIXED_DEPOSIT and contribution != 0:
                raise InvalidParameterError(
                    "monthly_contribution",
                    "fixed deposits take no monthly contribution",
                )

        projected = self._check_debit(value)
        if kind == InvestmentKind.RECURRING_PLAN:
            investment = RecurringPlan(
                principal=value,
                duration_years=duration_years,
                monthly_contribution=contribution,
            )
        else:
            investment = FixedDeposit(
                principal=value,
                duration_years=duration_years,
            )
        self._balance = projected
        self._ledger.record_investment(investment)
        return investment

    def _check_debit(self, amount: Decimal) -> Decimal:
        """Return the balance after the debit, or raise if it breaks the floor."""
        with localcontext(_EXACT):
            projected = self._balance - amount
        if projected < self._minimum_balance:
            raise InsufficientFundsError(
                balance=self._balance,
                amount=amount,
                minimum_balance=self._minimum_balance,
            )
        return projected

    # -------------------------------------------------------------------------
    # Read operations
    # -------------------------------------------------------------------------

    def list_transactions(self) -> tuple[Transaction, ...]:
        return self._ledger.list_transactions()

    def list_investments(self) -> tuple[Investment, ...]:
        return self._ledger.list_investments()

    def projected_maturities(self) -> tuple[MaturityProjection, ...]:
        """Pair every investment with its maturity value, in insertion order."""
        return tuple(
            project(investment)
            for investment in self._ledger.list_investments()
        )

    def summary(self) -> LedgerSummary:
        return self._ledger.summary()
