"""Audit logging package."""

from personal_ledger.audit.logger import AuditLogger

__all__ = ["AuditLogger"]
