"""Ledger storage package."""

from personal_ledger.ledger.store import Ledger

__all__ = ["Ledger"]
