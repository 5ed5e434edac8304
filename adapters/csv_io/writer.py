"""
txledger CSV adapter — Account Writer
=======================================
Encodes account snapshots as ``client, available, held, total, locked``.
"""

from __future__ import annotations

import csv
from typing import Dict, Iterable, TextIO

from config.settings import OUTPUT_FIELDS
from core.primitives.account import AccountSnapshot
from core.primitives.amount import format_amount


def encode_account(snapshot: AccountSnapshot) -> Dict[str, str]:
    return {
        "client": str(snapshot.client_id),
        "available": format_amount(snapshot.available),
        "held": format_amount(snapshot.held),
        "total": format_amount(snapshot.total),
        "locked": "true" if snapshot.locked else "false",
    }


def write_accounts(
    stream: TextIO,
    snapshots: Iterable[AccountSnapshot],
    sort: bool = False,
) -> int:
    """
    Write the header and one row per account. Returns the row count.

    Rows follow the given order unless sort is set, in which case
    they are ordered by client ID.
    """
    if sort:
        snapshots = sorted(snapshots, key=lambda s: s.client_id)

    writer = csv.DictWriter(stream, fieldnames=OUTPUT_FIELDS, lineterminator="\n")
    writer.writeheader()
    rows = 0
    for snapshot in snapshots:
        writer.writerow(encode_account(snapshot))
        rows += 1
    return rows
