"""
Data Models Package

This package contains all Pydantic models used in the Personal Ledger.
Every record the ledger holds conforms to these schemas.
"""

from personal_ledger.models.records import (
    FixedDeposit,
    GrowthPoint,
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

__all__ = [
    # Ledger records
    "FixedDeposit",
    "GrowthPoint",
    "Investment",
    "InvestmentKind",
    "LedgerSummary",
    "MaturityProjection",
    "OperationResult",
    "RecurringPlan",
    "Transaction",
    "TransactionKind",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
