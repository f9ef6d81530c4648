"""
Personal Ledger - Source Package

A personal finance ledger that tracks income, expenditure and
investments against a single running balance.

DESIGN PRINCIPLES:
1. The balance never falls below the configured minimum
2. Records are immutable once written
3. Maturity values are derived, never stored
4. Every money-moving action is auditable
"""

__version__ = "1.0.0"
__author__ = "Personal Ledger Team"
