"""
txledger Command Layer
========================
Every incoming transaction is a command against the ledger.
Malformed commands are refused with a structured RejectionReason.
"""

from core.commands.rejection import (
    ReasonCode,
    RejectionReason,
)

__all__ = [
    "RejectionReason",
    "ReasonCode",
]
