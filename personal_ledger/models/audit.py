"""
Audit Models for Personal Ledger

Every money-moving action, accepted or declined, is recorded as an
audit event. This provides:
1. Traceability of every balance change
2. A visible record of declined operations
3. Debugging information when things go wrong

DESIGN DECISION: Audit logs are append-only. We never delete or modify them.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    ACCOUNT_OPENED = "account_opened"

    # Cash flow
    INCOME_RECORDED = "income_recorded"
    EXPENDITURE_RECORDED = "expenditure_recorded"
    EXPENDITURE_DECLINED = "expenditure_declined"

    # Investments
    INVESTMENT_MADE = "investment_made"
    INVESTMENT_DECLINED = "investment_declined"

    # Rejected input
    INVALID_PARAMETER = "invalid_parameter"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    INFO = "info"
    WARNING = "warning"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - what record is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'transaction', 'investment')"
    )
    entity_id: Optional[UUID] = Field(
        default=None,
        description="ID of the record this event relates to"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    # Error information (declined operations)
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": str(self.entity_id) if self.entity_id else None,
            "description": self.description,
            "details": self.details,
            "error_code": self.error_code,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.income_recorded(txn_id, amount, balance)
        event = AuditEventBuilder.expenditure_declined(amount, balance, reason)
    """

    @staticmethod
    def account_opened(
        initial_balance: Decimal,
        minimum_balance: Decimal,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ACCOUNT_OPENED,
            entity_type="account",
            description=f"Account opened with balance {initial_balance}",
            details={
                "initial_balance": str(initial_balance),
                "minimum_balance": str(minimum_balance),
            },
        )

    @staticmethod
    def income_recorded(
        transaction_id: UUID,
        amount: Decimal,
        balance: Decimal,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INCOME_RECORDED,
            entity_type="transaction",
            entity_id=transaction_id,
            description=f"Income recorded: {amount}",
            details={
                "amount": str(amount),
                "balance": str(balance),
            },
        )

    @staticmethod
    def expenditure_recorded(
        transaction_id: UUID,
        amount: Decimal,
        balance: Decimal,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENDITURE_RECORDED,
            entity_type="transaction",
            entity_id=transaction_id,
            description=f"Expenditure recorded: {amount}",
            details={
                "amount": str(amount),
                "balance": str(balance),
            },
        )

    @staticmethod
    def expenditure_declined(
        amount: Decimal,
        balance: Decimal,
        reason: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENDITURE_DECLINED,
            severity=AuditSeverity.WARNING,
            entity_type="transaction",
            description=f"Expenditure declined: {amount}",
            details={
                "amount": str(amount),
                "balance": str(balance),
            },
            error_code="insufficient_funds",
            error_message=reason,
        )

    @staticmethod
    def investment_made(
        investment_id: UUID,
        kind: str,
        principal: Decimal,
        duration_years: int,
        balance: Decimal,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVESTMENT_MADE,
            entity_type="investment",
            entity_id=investment_id,
            description=f"Investment made: {kind} of {principal} for {duration_years} yrs",
            details={
                "kind": kind,
                "principal": str(principal),
                "duration_years": duration_years,
                "balance": str(balance),
            },
        )

    @staticmethod
    def investment_declined(
        kind: str,
        principal: Decimal,
        balance: Decimal,
        reason: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVESTMENT_DECLINED,
            severity=AuditSeverity.WARNING,
            entity_type="investment",
            description=f"Investment declined: {kind} of {principal}",
            details={
                "kind": kind,
                "principal": str(principal),
                "balance": str(balance),
            },
            error_code="insufficient_funds",
            error_message=reason,
        )

    @staticmethod
    def invalid_parameter(
        operation: str,
        field: str,
        reason: str,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVALID_PARAMETER,
            severity=AuditSeverity.WARNING,
            description=f"Rejected {operation}: invalid {field}",
            details={
                "operation": operation,
                "field": field,
            },
            error_code="invalid_parameter",
            error_message=reason,
        )
