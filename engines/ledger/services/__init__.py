"""
txledger Ledger Engine — Service Layer
========================================
The Ledger owns every Account and the history of applied
funds-moving transactions, and maps each incoming record onto
account mutations:

    deposit     → add_funds                     (stored if applied)
    withdrawal  → remove_funds                  (stored if applied)
    dispute     → hold_funds(stored.amount)     (flag set)
    resolve     → restore_funds(stored.amount)  (flag cleared)
    chargeback  → restore + remove + lock       (flag cleared)

Anything the accounts refuse, or any control record pointing at an
unknown or undisputed transaction, is dropped without a trace.

TransactionProcessor is the fail-fast pipeline in front of the
Ledger: validate → apply, strictly in arrival order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from core.primitives.account import Account, AccountSnapshot
from engines.ledger.commands import TransactionRecord, TransactionType
from engines.ledger.policies import validate_transaction

logger = logging.getLogger("txledger.ledger")
processor_logger = logging.getLogger("txledger.processor")


# ══════════════════════════════════════════════════════════════
# LEDGER
# ══════════════════════════════════════════════════════════════

class Ledger:
    """
    In-memory ledger state.

    Single writer. Records must be validated before apply().
    """

    def __init__(self) -> None:
        # client_id → Account (insertion order = first reference)
        self._accounts: Dict[int, Account] = {}
        # tx_id → applied deposit/withdrawal
        self._transactions: Dict[int, TransactionRecord] = {}

    @property
    def account_count(self) -> int:
        return len(self._accounts)

    @property
    def transaction_count(self) -> int:
        return len(self._transactions)

    def get_account(self, client_id: int) -> Optional[Account]:
        return self._accounts.get(client_id)

    def get_transaction(self, tx_id: int) -> Optional[TransactionRecord]:
        return self._transactions.get(tx_id)

    def snapshot(self) -> List[AccountSnapshot]:
        return [account.to_snapshot() for account in self._accounts.values()]

    def _account_for(self, client_id: int) -> Account:
        account = self._accounts.get(client_id)
        if account is None:
            account = Account(client_id)
            self._accounts[client_id] = account
            logger.debug(f"Account {client_id} opened")
        return account

    # ══════════════════════════════════════════════════════════
    # APPLY
    # ══════════════════════════════════════════════════════════

    def apply(self, record: TransactionRecord) -> None:
        """
        Apply one validated record.

        The record's client account is created on first reference,
        whatever the record type. Never raises for valid input.
        """
        account = self._account_for(record.client_id)
        tx_type = record.tx_type

        if tx_type is TransactionType.DEPOSIT:
            if account.add_funds(record.amount):
                self._transactions[record.tx_id] = record

        elif tx_type is TransactionType.WITHDRAWAL:
            if account.remove_funds(record.amount):
                self._transactions[record.tx_id] = record

        elif tx_type is TransactionType.DISPUTE:
            disputed = self._transactions.get(record.tx_id)
            if disputed is not None:
                account.hold_funds(disputed.amount)
                disputed.set_disputed()

        elif tx_type is TransactionType.RESOLVE:
            disputed = self._transactions.get(record.tx_id)
            if disputed is not None and disputed.is_disputed:
                account.restore_funds(disputed.amount)
                disputed.clear_disputed()

        elif tx_type is TransactionType.CHARGEBACK:
            disputed = self._transactions.get(record.tx_id)
            if disputed is not None and disputed.is_disputed:
                # held → available → out: net effect removes held funds from total
                account.restore_funds(disputed.amount)
                account.remove_funds(disputed.amount)
                account.lock()
                disputed.clear_disputed()


# ══════════════════════════════════════════════════════════════
# PROCESSING RESULT
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class ProcessingResult:
    """Counts for a completed stream."""

    records_processed: int
    accounts: int
    stored_transactions: int


# ══════════════════════════════════════════════════════════════
# TRANSACTION PROCESSOR
# ══════════════════════════════════════════════════════════════

class TransactionProcessor:
    """
    Validate-then-apply pipeline over an ordered record stream.

    Usage:
        processor = TransactionProcessor()
        processor.process(read_transactions(stream))
        snapshots = processor.ledger.snapshot()

    The first invalid record aborts the stream with
    TransactionValidationError. Errors raised by the record iterator
    itself (decode failures) propagate unchanged.
    """

    def __init__(self, ledger: Optional[Ledger] = None):
        self._ledger = ledger or Ledger()

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    def process(self, records: Iterable[TransactionRecord]) -> ProcessingResult:
        processor_logger.debug("Processing transaction stream")

        count = 0
        for record in records:
            validate_transaction(record)
            self._ledger.apply(record)
            count += 1

        result = ProcessingResult(
            records_processed=count,
            accounts=self._ledger.account_count,
            stored_transactions=self._ledger.transaction_count,
        )
        processor_logger.info(
            f"Processed {result.records_processed} transactions: "
            f"{result.accounts} accounts, "
            f"{result.stored_transactions} stored"
        )
        return result
