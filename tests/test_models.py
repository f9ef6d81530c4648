"""
Tests for Personal Ledger models

Test strategy:
1. Unit tests for individual components (models, engine, ledger, account)
2. Flow tests for the result-returning facade
3. No UI tests - the Streamlit app only calls FinanceFlow
"""

import pytest
from decimal import Decimal
from uuid import uuid4

from pydantic import TypeAdapter, ValidationError

from personal_ledger.models.records import (
    MAX_DURATION_YEARS,
    FixedDeposit,
    Investment,
    InvestmentKind,
    LedgerSummary,
    MaturityProjection,
    OperationResult,
    RecurringPlan,
    Transaction,
    TransactionKind,
)
from personal_ledger.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)


class TestTransactionModel:
    """Tests for the Transaction model."""

    def test_transaction_creation(self):
        """Test Transaction model creation."""
        txn = Transaction(
            kind=TransactionKind.INCOME,
            amount=Decimal("2500.00"),
            description="Salary",
        )
        assert txn.kind == TransactionKind.INCOME
        assert txn.amount == Decimal("2500.00")
        assert txn.display_name == "Income"

    def test_transaction_strips_whitespace(self):
        """Test that whitespace is stripped from descriptions."""
        txn = Transaction(
            kind=TransactionKind.EXPENDITURE,
            amount=Decimal("10"),
            description="  Groceries  ",
        )
        assert txn.description == "Groceries"

    def test_transaction_rejects_negative_amount(self):
        """Test that negative amounts are rejected."""
        with pytest.raises(ValidationError):
            Transaction(kind=TransactionKind.INCOME, amount=Decimal("-1"))

    def test_transaction_is_immutable(self):
        """Test that a transaction cannot be changed after creation."""
        txn = Transaction(kind=TransactionKind.INCOME, amount=Decimal("1"))
        with pytest.raises(ValidationError):
            txn.amount = Decimal("2")


class TestInvestmentModels:
    """Tests for the investment variants."""

    def test_recurring_plan_defaults(self):
        """Test RecurringPlan defaults its contribution to zero."""
        plan = RecurringPlan(principal=Decimal("1000"), duration_years=2)
        assert plan.kind == InvestmentKind.RECURRING_PLAN
        assert plan.monthly_contribution == Decimal("0")
        assert plan.display_name == "Recurring Plan"

    def test_fixed_deposit_creation(self):
        """Test FixedDeposit model creation."""
        deposit = FixedDeposit(principal=Decimal("10000"), duration_years=5)
        assert deposit.kind == InvestmentKind.FIXED_DEPOSIT
        assert deposit.display_name == "Fixed Deposit"

    @pytest.mark.parametrize("principal", [Decimal("0"), Decimal("-5")])
    def test_principal_must_be_positive(self, principal):
        """Test that principal must be strictly positive."""
        with pytest.raises(ValidationError):
            FixedDeposit(principal=principal, duration_years=1)

    def test_duration_must_be_positive(self):
        """Test that a zero-year term is rejected on the record."""
        with pytest.raises(ValidationError):
            RecurringPlan(principal=Decimal("100"), duration_years=0)

    def test_duration_is_bounded(self):
        """Test that terms longer than MAX_DURATION_YEARS are rejected."""
        FixedDeposit(principal=Decimal("100"), duration_years=MAX_DURATION_YEARS)
        with pytest.raises(ValidationError):
            RecurringPlan(principal=Decimal("100"), duration_years=MAX_DURATION_YEARS + 1)

    def test_negative_contribution_rejected(self):
        """Test that monthly contributions cannot be negative."""
        with pytest.raises(ValidationError):
            RecurringPlan(
                principal=Decimal("100"),
                duration_years=1,
                monthly_contribution=Decimal("-1"),
            )

    def test_discriminated_union_picks_variant(self):
        """Test the Investment union resolves the variant from `kind`."""
        adapter = TypeAdapter(Investment)
        investment = adapter.validate_python({
            "kind": "fixed_deposit",
            "principal": "500",
            "duration_years": 3,
        })
        assert isinstance(investment, FixedDeposit)

        investment = adapter.validate_python({
            "kind": "recurring_plan",
            "principal": "500",
            "duration_years": 3,
            "monthly_contribution": "50",
        })
        assert isinstance(investment, RecurringPlan)
        assert investment.monthly_contribution == Decimal("50")

    def test_investment_is_immutable(self):
        """Test that investments cannot be changed after creation."""
        deposit = FixedDeposit(principal=Decimal("100"), duration_years=1)
        with pytest.raises(ValidationError):
            deposit.duration_years = 10


class TestReadModels:
    """Tests for derived read models."""

    def test_projected_gain(self):
        """Test projected_gain is maturity minus contributions."""
        projection = MaturityProjection(
            investment=FixedDeposit(principal=Decimal("100"), duration_years=1),
            maturity_value=Decimal("107.1"),
            total_contributed=Decimal("100"),
        )
        assert projection.projected_gain == Decimal("7.1")

    def test_net_cash_flow(self):
        """Test LedgerSummary.net_cash_flow."""
        summary = LedgerSummary(
            total_income=Decimal("300"),
            total_expenditure=Decimal("120"),
        )
        assert summary.net_cash_flow == Decimal("180")

    def test_operation_result_error_code_is_restricted(self):
        """Test that only known error codes are accepted."""
        with pytest.raises(ValidationError):
            OperationResult(
                success=False,
                balance=Decimal("0"),
                error_code="something_else",
            )


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        """Test AuditEvent model creation."""
        event = AuditEvent(
            event_type=AuditEventType.INCOME_RECORDED,
            description="Income recorded",
        )
        assert event.event_type == AuditEventType.INCOME_RECORDED
        assert event.severity == AuditSeverity.INFO

    def test_audit_event_to_log_dict(self):
        """Test conversion to log dictionary."""
        event = AuditEvent(
            event_type=AuditEventType.INVESTMENT_MADE,
            description="Investment made",
            details={"kind": "fixed_deposit", "principal": "1000"},
        )
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "investment_made"
        assert log_dict["details"]["principal"] == "1000"

    def test_audit_event_builder_expenditure_declined(self):
        """Test AuditEventBuilder.expenditure_declined."""
        event = AuditEventBuilder.expenditure_declined(
            amount=Decimal("4000.01"),
            balance=Decimal("5000"),
            reason="too much",
        )
        assert event.event_type == AuditEventType.EXPENDITURE_DECLINED
        assert event.severity == AuditSeverity.WARNING
        assert event.error_code == "insufficient_funds"
        assert event.details["amount"] == "4000.01"

    def test_audit_event_builder_income_recorded(self):
        """Test AuditEventBuilder.income_recorded."""
        txn_id = uuid4()
        event = AuditEventBuilder.income_recorded(
            transaction_id=txn_id,
            amount=Decimal("10"),
            balance=Decimal("5010"),
        )
        assert event.entity_id == txn_id
        assert event.entity_type == "transaction"

    def test_audit_severities(self):
        """Test that events are either routine or warnings."""
        assert [s.value for s in AuditSeverity] == ["info", "warning"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
