"""
txledger Core Primitives — Reusable Ledger Building Blocks
===========================================================
Primitives are the engine-agnostic building blocks the ledger engine
consumes. They are:

- Pure Python
- Decimal-only for money (no floats)
- Free of dispatch and I/O concerns

Primitives:
    amount      — Decimal parsing and fixed-precision display
    account     — Client balances with guarded mutations
"""

from core.primitives.account import Account, AccountSnapshot
from core.primitives.amount import LEDGER_CONTEXT, ZERO, format_amount, parse_amount

__all__ = [
    "Account",
    "AccountSnapshot",
    "LEDGER_CONTEXT",
    "ZERO",
    "format_amount",
    "parse_amount",
]
