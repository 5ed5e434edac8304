"""
txledger CSV adapter.
Thin format glue around the ledger engine.
"""

from adapters.csv_io.reader import decode_row, read_transactions
from adapters.csv_io.writer import encode_account, write_accounts

__all__ = [
    "decode_row",
    "read_transactions",
    "encode_account",
    "write_accounts",
]
