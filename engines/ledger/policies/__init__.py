"""
txledger Ledger Engine — Policies
===================================
Structural checks every record must pass before it reaches the ledger.

Policies are pure: they look at the record alone, never at ledger
state. Each returns None to pass or a RejectionReason to refuse.
Policies run in order; the first rejection wins.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from core.commands.rejection import ReasonCode, RejectionReason
from engines.ledger.commands import (
    CONTROL_TYPES,
    FUNDS_MOVING_TYPES,
    TransactionRecord,
    TransactionType,
)
from engines.ledger.errors import TransactionValidationError

TransactionPolicy = Callable[[TransactionRecord], Optional[RejectionReason]]


def transaction_type_policy(record: TransactionRecord) -> Optional[RejectionReason]:
    """Record type must be one of the five known types."""
    if not isinstance(record.tx_type, TransactionType):
        return RejectionReason(
            code=ReasonCode.INVALID_TRANSACTION_TYPE,
            message=f"Unknown transaction type {record.tx_type!r}.",
            policy_name="transaction_type_policy",
        )
    return None


def amount_required_policy(record: TransactionRecord) -> Optional[RejectionReason]:
    """Deposits and withdrawals must carry an amount. Sign is not checked."""
    if record.tx_type in FUNDS_MOVING_TYPES and record.amount is None:
        return RejectionReason(
            code=ReasonCode.AMOUNT_REQUIRED,
            message=f"{record.tx_type.value} {record.tx_id} has no amount.",
            policy_name="amount_required_policy",
        )
    return None


def amount_not_allowed_policy(record: TransactionRecord) -> Optional[RejectionReason]:
    """Disputes, resolves and chargebacks must not carry an amount."""
    if record.tx_type in CONTROL_TYPES and record.amount is not None:
        return RejectionReason(
            code=ReasonCode.AMOUNT_NOT_ALLOWED,
            message=(
                f"{record.tx_type.value} {record.tx_id} carries amount "
                f"{record.amount}; only deposits and withdrawals may."
            ),
            policy_name="amount_not_allowed_policy",
        )
    return None


def control_not_disputed_policy(record: TransactionRecord) -> Optional[RejectionReason]:
    """A control record is never itself in dispute."""
    if record.tx_type in CONTROL_TYPES and record.in_dispute:
        return RejectionReason(
            code=ReasonCode.CONTROL_RECORD_DISPUTED,
            message=f"{record.tx_type.value} {record.tx_id} is flagged in dispute.",
            policy_name="control_not_disputed_policy",
        )
    return None


TRANSACTION_POLICIES: Tuple[TransactionPolicy, ...] = (
    transaction_type_policy,
    amount_required_policy,
    amount_not_allowed_policy,
    control_not_disputed_policy,
)


def evaluate_transaction_policies(
    record: TransactionRecord,
) -> Optional[RejectionReason]:
    """Run every policy in order. Returns the first rejection, or None."""
    for policy in TRANSACTION_POLICIES:
        rejection = policy(record)
        if rejection is not None:
            return rejection
    return None


def validate_transaction(record: TransactionRecord) -> None:
    """
    Refuse a malformed record.

    Raises:
        TransactionValidationError: carrying the first RejectionReason.

    Returns:
        None — success is silent. Failure is loud.
    """
    rejection = evaluate_transaction_policies(record)
    if rejection is not None:
        raise TransactionValidationError(record, rejection)
