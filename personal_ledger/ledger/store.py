"""
In-Memory Ledger

DESIGN DECISION: The ledger is append-only.
There are no update or delete operations - a record, once written,
stays exactly as it was for the rest of the session.

Records are held by value in private lists. Every read returns a
tuple snapshot, so callers cannot mutate ledger state through what
they are given.
"""

from decimal import Decimal
from typing import Union

from personal_ledger.models.records import (
    FixedDeposit,
    Investment,
    LedgerSummary,
    RecurringPlan,
    Transaction,
    TransactionKind,
)


class Ledger:
    """
    Append-only store of transactions and investments.

    Insertion order is preserved and duplicates are allowed
    (two identical grocery runs are two records).
    """

    def __init__(self):
        self._transactions: list[Transaction] = []
        self._investments: list[Union[RecurringPlan, FixedDeposit]] = []

    def record_transaction(self, transaction: Transaction) -> None:
        """Append a transaction."""
        if not isinstance(transaction, Transaction):
            raise TypeError(
                f"Expected Transaction, got {type(transaction).__name__}"
            )
        self._transactions.append(transaction)

    def record_investment(self, investment: Investment) -> None:
        """Append an investment."""
        if not isinstance(investment, (RecurringPlan, FixedDeposit)):
            raise TypeError(
                f"Expected an investment, got {type(investment).__name__}"
            )
        self._investments.append(investment)

    def list_transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    def list_investments(self) -> tuple[Investment, ...]:
        return tuple(self._investments)

    def transactions_of_kind(
        self,
        kind: TransactionKind,
    ) -> tuple[Transaction, ...]:
        """Return the transactions of one kind, in insertion order."""
        return tuple(t for t in self._transactions if t.kind == kind)

    def summary(self) -> LedgerSummary:
        """
        Totals over everything recorded so far.

        Invested totals count principals only; monthly contributions
        never pass through the balance.
        """
        total_income = sum(
            (t.amount for t in self.transactions_of_kind(TransactionKind.INCOME)),
            Decimal("0"),
        )
        total_expenditure = sum(
            (t.amount for t in self.transactions_of_kind(TransactionKind.EXPENDITURE)),
            Decimal("0"),
        )

        total_invested = sum(
            (investment.principal for investment in self._investments),
            Decimal("0"),
        )

        return LedgerSummary(
            total_income=total_income,
            total_expenditure=total_expenditure,
            total_invested=total_invested,
            transaction_count=len(self._transactions),
            investment_count=len(self._investments),
        )
