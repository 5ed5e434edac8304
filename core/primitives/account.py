"""
txledger Account Primitive — Client Balances
==============================================
One Account per client. Holds available, held and total funds plus a
locked flag.

RULES (NON-NEGOTIABLE):
- total == available + held after every successful mutation
- A locked account refuses every balance mutation
- Mutations are all-or-nothing: a refused call changes nothing
- Mutations report success as a bool — they never raise
- Arithmetic runs under LEDGER_CONTEXT

This file contains NO dispatch logic.
The Ledger decides which mutation a transaction maps to.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext

from core.primitives.amount import LEDGER_CONTEXT, ZERO


# ══════════════════════════════════════════════════════════════
# ACCOUNT SNAPSHOT (read view)
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class AccountSnapshot:
    """
    Point-in-time view of an Account.

    Handed to output encoders. Detached from the live Account —
    later mutations do not show through.
    """
    client_id: int
    available: Decimal
    held: Decimal
    total: Decimal
    locked: bool

    def to_dict(self) -> dict:
        return {
            "client": self.client_id,
            "available": self.available,
            "held": self.held,
            "total": self.total,
            "locked": self.locked,
        }


# ══════════════════════════════════════════════════════════════
# ACCOUNT
# ══════════════════════════════════════════════════════════════

class Account:
    """
    Mutable balance state for a single client.

    Created with all balances at zero and unlocked. Balances change
    only through add/remove/hold/restore.
    """

    def __init__(self, client_id: int):
        self._client_id = client_id
        self._available = ZERO
        self._held = ZERO
        self._total = ZERO
        self._locked = False

    def __repr__(self) -> str:
        return (
            f"Account(client_id={self._client_id}, "
            f"available={self._available}, held={self._held}, "
            f"total={self._total}, locked={self._locked})"
        )

    @property
    def client_id(self) -> int:
        return self._client_id

    @property
    def available(self) -> Decimal:
        return self._available

    @property
    def held(self) -> Decimal:
        return self._held

    @property
    def total(self) -> Decimal:
        """Always available + held."""
        return self._total

    @property
    def locked(self) -> bool:
        return self._locked

    # ── Balance mutations ─────────────────────────────────────

    def add_funds(self, amount: Decimal) -> bool:
        """Credit available funds. Fails only if locked."""
        if self._locked:
            return False
        with localcontext(LEDGER_CONTEXT):
            self._available += amount
            self._total += amount
        return True

    def remove_funds(self, amount: Decimal) -> bool:
        """Debit available funds. Fails if locked or available < amount."""
        if self._locked or self._available < amount:
            return False
        with localcontext(LEDGER_CONTEXT):
            self._available -= amount
            self._total -= amount
        return True

    def hold_funds(self, amount: Decimal) -> bool:
        """
        Move funds from available to held.

        Fails only if locked. Available is allowed to go negative:
        the amount held is always the amount of an earlier
        transaction, not an arbitrary figure.
        """
        if self._locked:
            return False
        with localcontext(LEDGER_CONTEXT):
            self._available -= amount
            self._held += amount
        return True

    def restore_funds(self, amount: Decimal) -> bool:
        """Move funds from held back to available. Fails if locked or held < amount."""
        if self._locked or self._held < amount:
            return False
        with localcontext(LEDGER_CONTEXT):
            self._available += amount
            self._held -= amount
        return True

    # ── Lock state ────────────────────────────────────────────

    def lock(self) -> None:
        self._locked = True

    def unlock(self) -> None:
        """Administrative only. Never reached from transaction processing."""
        self._locked = False

    def to_snapshot(self) -> AccountSnapshot:
        return AccountSnapshot(
            client_id=self._client_id,
            available=self._available,
            held=self._held,
            total=self._total,
            locked=self._locked,
        )
