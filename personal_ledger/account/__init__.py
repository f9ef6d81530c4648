"""Account package: the balance holder and its errors."""

from personal_ledger.account.account import (
    Account,
    InsufficientFundsError,
    InvalidParameterError,
    LedgerError,
)

__all__ = [
    "Account",
    "InsufficientFundsError",
    "InvalidParameterError",
    "LedgerError",
]
