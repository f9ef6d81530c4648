"""Pytest fixtures for testing"""

from decimal import Decimal

import pytest

from personal_ledger.account import Account
from personal_ledger.audit import AuditLogger
from personal_ledger.config import get_settings
from personal_ledger.orchestrator import FinanceFlow


@pytest.fixture
def account() -> Account:
    """Account with the default opening balance and minimum."""
    return Account(initial_balance=Decimal("5000"), minimum_balance=Decimal("1000"))


@pytest.fixture
def audit_logger() -> AuditLogger:
    return AuditLogger()


@pytest.fixture
def flow(account: Account, audit_logger: AuditLogger) -> FinanceFlow:
    return FinanceFlow(account=account, audit_logger=audit_logger)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; start every test fresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
