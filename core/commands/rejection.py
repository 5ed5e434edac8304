"""
txledger Command Layer — Rejection Model
==========================================
Structured rejection reasons for transactions that fail validation.

A rejection is NOT a silent drop. Silent drops (insufficient funds,
locked account, unknown transaction) happen inside the ledger and
leave no trace. A rejection means the input itself is malformed and
the whole stream is refused.

The same record always yields the same rejection. TransactionValidationError
carries it to the CLI, which prints "[code] message" and exits non-zero.
"""

from __future__ import annotations

from dataclasses import dataclass


# ══════════════════════════════════════════════════════════════
# REJECTION REASON (frozen explanation structure)
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class RejectionReason:
    """
    Why a transaction record was refused before reaching the ledger.

    code names the broken rule (one of ReasonCode), message quotes the
    offending record's type and tx id, and policy_name is the policy
    function that refused it.
    """

    code: str
    message: str
    policy_name: str

    def __post_init__(self):
        for name in ("code", "message", "policy_name"):
            value = getattr(self, name)
            if not value or not isinstance(value, str):
                raise ValueError(f"{name} must be a non-empty string.")

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "policy_name": self.policy_name,
        }


# ══════════════════════════════════════════════════════════════
# STANDARD REJECTION CODES
# ══════════════════════════════════════════════════════════════

class ReasonCode:
    """Codes raised by engines.ledger.policies."""

    # ── Amount presence ───────────────────────────────────────
    AMOUNT_REQUIRED = "AMOUNT_REQUIRED"
    AMOUNT_NOT_ALLOWED = "AMOUNT_NOT_ALLOWED"

    # ── Dispute flag ──────────────────────────────────────────
    CONTROL_RECORD_DISPUTED = "CONTROL_RECORD_DISPUTED"

    # ── Structure ─────────────────────────────────────────────
    INVALID_TRANSACTION_TYPE = "INVALID_TRANSACTION_TYPE"
