"""
txledger – Settings
====================
Process-level configuration for the transaction ledger.

Values that an operator may want to change per run are read from the
environment. Values that define the wire format are constants.
"""

import os

# ── Logging ───────────────────────────────────────────────────
# Logging goes to stderr. stdout is reserved for the account CSV.
LOG_LEVEL = os.getenv("TXLEDGER_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = os.getenv(
    "TXLEDGER_LOG_FORMAT",
    "%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ── Output ────────────────────────────────────────────────────
# Unset: accounts are written in the order they were first referenced.
SORT_OUTPUT = os.getenv("TXLEDGER_SORT_OUTPUT", "").strip().lower() in (
    "1", "true", "yes", "on",
)

# ── Wire Format ───────────────────────────────────────────────
AMOUNT_DECIMAL_PLACES = 4

# Amounts with more integer digits than this are refused on input.
# Ledger arithmetic runs at AMOUNT_PRECISION significant digits, which
# keeps sums of bounded amounts exact in their integer part.
AMOUNT_MAX_INTEGER_DIGITS = 48
AMOUNT_PRECISION = 96

MAX_CLIENT_ID = 2**16 - 1
MAX_TRANSACTION_ID = 2**32 - 1

INPUT_FIELDS = ("type", "client", "tx", "amount")
REQUIRED_INPUT_FIELDS = ("type", "client", "tx")
OUTPUT_FIELDS = ("client", "available", "held", "total", "locked")
