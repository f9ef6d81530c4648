"""
Main Orchestrator for Personal Ledger

This module ties the account, the valuation engine and the audit
trail together for the presentation layer.

DESIGN DECISION: The UI never handles ledger exceptions itself.
Every money-moving call returns an OperationResult:
- success=True carries the new record and balance
- success=False carries an error code and a message fit for display,
  and guarantees that nothing changed

Only the two domain errors are converted. Anything else is a bug
and propagates.
"""

from decimal import Decimal
from typing import Optional, Union
from uuid import UUID

from personal_ledger.account import (
    Account,
    InsufficientFundsError,
    InvalidParameterError,
)
from personal_ledger.audit import AuditLogger
from personal_ledger.config import LedgerSettings, get_settings
from personal_ledger.models.audit import AuditEvent
from personal_ledger.models.records import (
    GrowthPoint,
    Investment,
    InvestmentKind,
    LedgerSummary,
    MaturityProjection,
    OperationResult,
    Transaction,
)
from personal_ledger.valuation import growth_schedule


class FinanceFlow:
    """
    Orchestrates every user-facing ledger operation.

    Flow for a debit:
    1. Validate → InvalidParameterError becomes a failed result
    2. Check the minimum balance → InsufficientFundsError becomes a failed result
    3. Apply → record returned in a successful result
    4. Audit → every outcome above is logged
    """

    def __init__(
        self,
        account: Account,
        audit_logger: Optional[AuditLogger] = None,
        currency_code: str = "INR",
    ):
        self._account = account
        self._audit_logger = audit_logger or AuditLogger()
        self.currency_code = currency_code

    @property
    def minimum_balance(self) -> Decimal:
        return self._account.minimum_balance

    # -------------------------------------------------------------------------
    # Money-moving operations
    # -------------------------------------------------------------------------

    def record_income(self, amount, description: str = "") -> OperationResult:
        """Record an income. Fails only on invalid input."""
        try:
            transaction = self._account.record_income(amount, description)
        except InvalidParameterError as e:
            return self._invalid("record_income", e)

        self._audit_logger.log_income_recorded(
            transaction_id=transaction.id,
            amount=transaction.amount,
            balance=self._account.balance,
        )
        return self._succeeded(transaction)

    def record_expenditure(self, amount, description: str = "") -> OperationResult:
        """Record an expenditure if the balance allows it."""
        try:
            transaction = self._account.record_expenditure(amount, description)
        except InvalidParameterError as e:
            return self._invalid("record_expenditure", e)
        except InsufficientFundsError as e:
            message = (
                f"Transaction declined. Balance cannot fall below "
                f"{e.minimum_balance} {self.currency_code}."
            )
            self._audit_logger.log_expenditure_declined(
                amount=e.amount,
                balance=e.balance,
                reason=str(e),
            )
            return self._declined(message)

        self._audit_logger.log_expenditure_recorded(
            transaction_id=transaction.id,
            amount=transaction.amount,
            balance=self._account.balance,
        )
        return self._succeeded(transaction)

    def make_investment(
        self,
        kind: Union[InvestmentKind, str],
        principal,
        duration_years: int,
        monthly_contribution=None,
    ) -> OperationResult:
        """Make an investment if the balance allows the principal."""
        try:
            investment = self._account.make_investment(
                kind,
                principal,
                duration_years,
                monthly_contribution,
            )
        except InvalidParameterError as e:
            return self._invalid("make_investment", e)
        except InsufficientFundsError as e:
            message = (
                f"Investment failed. Balance cannot fall below "
                f"{e.minimum_balance} {self.currency_code}."
            )
            self._audit_logger.log_investment_declined(
                kind=InvestmentKind(kind).value,
                principal=e.amount,
                balance=e.balance,
                reason=str(e),
            )
            return self._declined(message)

        self._audit_logger.log_investment_made(
            investment_id=investment.id,
            kind=investment.kind.value,
            principal=investment.principal,
            duration_years=investment.duration_years,
            balance=self._account.balance,
        )
        return self._succeeded(investment)

    def _succeeded(self, record) -> OperationResult:
        return OperationResult(
            success=True,
            record=record,
            balance=self._account.balance,
        )

    def _declined(self, message: str) -> OperationResult:
        return OperationResult(
            success=False,
            balance=self._account.balance,
            error_code="insufficient_funds",
            error_message=message,
        )

    def _invalid(self, operation: str, error: InvalidParameterError) -> OperationResult:
        self._audit_logger.log_invalid_parameter(
            operation=operation,
            field=error.field,
            reason=str(error),
        )
        return OperationResult(
            success=False,
            balance=self._account.balance,
            error_code="invalid_parameter",
            error_message=str(error),
        )

    # -------------------------------------------------------------------------
    # Read paths - never mutate
    # -------------------------------------------------------------------------

    def current_balance(self) -> Decimal:
        return self._account.current_balance()

    def list_transactions(self) -> tuple[Transaction, ...]:
        return self._account.list_transactions()

    def list_investments(self) -> tuple[Investment, ...]:
        return self._account.list_investments()

    def projected_maturities(self) -> tuple[MaturityProjection, ...]:
        return self._account.projected_maturities()

    def growth_schedule(self, investment_id: UUID) -> list[GrowthPoint]:
        """
        Year-by-year value of one investment.

        Raises:
            KeyError: no investment with that ID
        """
        for investment in self._account.list_investments():
            if investment.id == investment_id:
                return growth_schedule(investment)
        raise KeyError(investment_id)

    def summary(self) -> LedgerSummary:
        return self._account.summary()

    def recent_events(self, limit: Optional[int] = None) -> list[AuditEvent]:
        return self._audit_logger.recent_events(limit)


def create_app_components(
    settings: Optional[LedgerSettings] = None,
) -> FinanceFlow:
    """
    Factory function to create a ready-to-use FinanceFlow.

    Args:
        settings: Ledger settings. Loaded from the environment if None.

    Returns:
        A FinanceFlow over a fresh account and audit trail
    """
    settings = settings or get_settings().ledger

    account = Account(
        initial_balance=settings.initial_balance,
        minimum_balance=settings.minimum_balance,
    )
    audit_logger = AuditLogger()
    audit_logger.log_account_opened(
        initial_balance=account.balance,
        minimum_balance=account.minimum_balance,
    )

    return FinanceFlow(
        account=account,
        audit_logger=audit_logger,
        currency_code=settings.currency_code,
    )
