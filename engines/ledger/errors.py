"""
txledger Ledger Engine — Errors
=================================
The only two failures that stop a run.

Everything else (insufficient funds, locked account, unknown
transaction, dispute stage out of order) is dropped silently by the
ledger and never reaches this module.
"""

from __future__ import annotations

from core.commands.rejection import RejectionReason


class LedgerError(Exception):
    """Base error for fatal ledger input failures."""
    pass


class TransactionDecodeError(LedgerError):
    """Input stream could not be decoded into a transaction record."""

    def __init__(self, line_number: int, detail: str):
        self.line_number = line_number
        self.detail = detail
        super().__init__(
            f"Cannot decode transaction on line {line_number}: {detail}"
        )


class TransactionValidationError(LedgerError):
    """Decoded record breaks the amount/dispute contract for its type."""

    def __init__(self, record, reason: RejectionReason):
        self.record = record
        self.reason = reason
        super().__init__(
            f"Invalid transaction {record!r}: "
            f"[{reason.code}] {reason.message}"
        )
