"""
Audit Logger

DESIGN DECISION: Every money-moving action is logged, including the
ones that were declined.
This provides:
1. Complete traceability of the balance
2. Debugging capability
3. User can see the history of their session in the activity log

The audit logger:
- Is synchronous, like the rest of the ledger
- Always logs locally through structlog
- Keeps an append-only in-memory trail for the current session
"""

from decimal import Decimal
from typing import Optional
from uuid import UUID

import structlog

from personal_ledger.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. The session trail (for the activity log page)
    """

    def __init__(self):
        self._events: list[AuditEvent] = []
        self._logger = structlog.get_logger("personal_ledger.audit")

    def log(self, event: AuditEvent) -> None:
        """Log an audit event locally and append it to the trail."""
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        self._events.append(event)

    def recent_events(self, limit: Optional[int] = None) -> list[AuditEvent]:
        """
        Get the most recent audit events, newest first.

        Args:
            limit: Maximum number of events to return. All if None.
        """
        events = list(reversed(self._events))
        if limit is not None:
            events = events[:limit]
        return events

    def log_account_opened(
        self,
        initial_balance: Decimal,
        minimum_balance: Decimal,
    ) -> None:
        self.log(AuditEventBuilder.account_opened(
            initial_balance=initial_balance,
            minimum_balance=minimum_balance,
        ))

    def log_income_recorded(
        self,
        transaction_id: UUID,
        amount: Decimal,
        balance: Decimal,
    ) -> None:
        self.log(AuditEventBuilder.income_recorded(
            transaction_id=transaction_id,
            amount=amount,
            balance=balance,
        ))

    def log_expenditure_recorded(
        self,
        transaction_id: UUID,
        amount: Decimal,
        balance: Decimal,
    ) -> None:
        self.log(AuditEventBuilder.expenditure_recorded(
            transaction_id=transaction_id,
            amount=amount,
            balance=balance,
        ))

    def log_expenditure_declined(
        self,
        amount: Decimal,
        balance: Decimal,
        reason: str,
    ) -> None:
        self.log(AuditEventBuilder.expenditure_declined(
            amount=amount,
            balance=balance,
            reason=reason,
        ))

    def log_investment_made(
        self,
        investment_id: UUID,
        kind: str,
        principal: Decimal,
        duration_years: int,
        balance: Decimal,
    ) -> None:
        self.log(AuditEventBuilder.investment_made(
            investment_id=investment_id,
            kind=kind,
            principal=principal,
            duration_years=duration_years,
            balance=balance,
        ))

    def log_investment_declined(
        self,
        kind: str,
        principal: Decimal,
        balance: Decimal,
        reason: str,
    ) -> None:
        self.log(AuditEventBuilder.investment_declined(
            kind=kind,
            principal=principal,
            balance=balance,
            reason=reason,
        ))

    def log_invalid_parameter(
        self,
        operation: str,
        field: str,
        reason: str,
    ) -> None:
        self.log(AuditEventBuilder.invalid_parameter(
            operation=operation,
            field=field,
            reason=reason,
        ))
