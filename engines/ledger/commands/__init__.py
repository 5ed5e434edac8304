"""
txledger Ledger Engine — Transaction Records
==============================================
One TransactionRecord per input row.

Funds-moving records (deposit, withdrawal) carry an amount and are
kept by the ledger once applied. Control records (dispute, resolve,
chargeback) carry no amount; their tx_id names an earlier
funds-moving record.

in_dispute is the only field that changes after construction, and
only on funds-moving records.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionType(Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"

    @classmethod
    def parse(cls, text: str) -> "TransactionType":
        """Case-insensitive lookup by name. Raises ValueError if unknown."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown transaction type '{text}'.") from None

    @property
    def moves_funds(self) -> bool:
        return self in FUNDS_MOVING_TYPES


FUNDS_MOVING_TYPES = frozenset({
    TransactionType.DEPOSIT,
    TransactionType.WITHDRAWAL,
})

CONTROL_TYPES = frozenset({
    TransactionType.DISPUTE,
    TransactionType.RESOLVE,
    TransactionType.CHARGEBACK,
})


@dataclass
class TransactionRecord:
    """Single ledger transaction as read from the input stream."""
    tx_type: TransactionType
    client_id: int
    tx_id: int
    amount: Optional[Decimal] = None
    in_dispute: bool = False

    # ── Constructors ──────────────────────────────────────────

    @classmethod
    def deposit(
        cls, client_id: int, tx_id: int, amount: Decimal, in_dispute: bool = False,
    ) -> "TransactionRecord":
        return cls(TransactionType.DEPOSIT, client_id, tx_id, amount, in_dispute)

    @classmethod
    def withdrawal(
        cls, client_id: int, tx_id: int, amount: Decimal, in_dispute: bool = False,
    ) -> "TransactionRecord":
        return cls(TransactionType.WITHDRAWAL, client_id, tx_id, amount, in_dispute)

    @classmethod
    def dispute(cls, client_id: int, tx_id: int) -> "TransactionRecord":
        return cls(TransactionType.DISPUTE, client_id, tx_id)

    @classmethod
    def resolve(cls, client_id: int, tx_id: int) -> "TransactionRecord":
        return cls(TransactionType.RESOLVE, client_id, tx_id)

    @classmethod
    def chargeback(cls, client_id: int, tx_id: int) -> "TransactionRecord":
        return cls(TransactionType.CHARGEBACK, client_id, tx_id)

    # ── Validation ────────────────────────────────────────────

    def validate(self) -> bool:
        """
        True if the record satisfies the contract for its type.

        Looks only at the record's own fields, never at ledger history.
        Amount sign is not checked.
        """
        from engines.ledger.policies import evaluate_transaction_policies
        return evaluate_transaction_policies(self) is None

    # ── Dispute flag ──────────────────────────────────────────

    @property
    def is_disputed(self) -> bool:
        return self.in_dispute

    def set_disputed(self) -> None:
        """No-op for control records."""
        if self.tx_type in FUNDS_MOVING_TYPES:
            self.in_dispute = True

    def clear_disputed(self) -> None:
        """No-op for control records."""
        if self.tx_type in FUNDS_MOVING_TYPES:
            self.in_dispute = False
