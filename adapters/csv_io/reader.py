"""
txledger CSV adapter — Transaction Reader
===========================================
Decodes a ``type, client, tx, amount`` stream into TransactionRecords.

- Header row required; names trimmed and matched case-insensitively
- Every field trimmed; blank lines skipped
- A trailing optional field (amount) may be omitted
- Any decode problem → TransactionDecodeError with the line number

Records are yielded lazily, so a decode error surfaces only when the
processor reaches the offending line.
"""

from __future__ import annotations

import csv
import logging
from typing import Dict, Iterator, List, Optional, TextIO, Tuple

from config.settings import (
    INPUT_FIELDS,
    MAX_CLIENT_ID,
    MAX_TRANSACTION_ID,
    REQUIRED_INPUT_FIELDS,
)
from core.primitives.amount import parse_amount
from engines.ledger.commands import TransactionRecord, TransactionType
from engines.ledger.errors import TransactionDecodeError

logger = logging.getLogger("txledger.csv")


def _parse_id(text: str, field: str, maximum: int) -> int:
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"{field} '{text}' is not an unsigned integer.")
    value = int(text)
    if value > maximum:
        raise ValueError(f"{field} {value} is outside 0..{maximum}.")
    return value


def _is_blank(row: List[str]) -> bool:
    return not any(cell.strip() for cell in row)


def _rows(reader) -> Iterator[Tuple[int, List[str]]]:
    """Non-blank rows with their line numbers; csv errors become decode errors."""
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            raise TransactionDecodeError(reader.line_num, str(exc)) from exc
        if not _is_blank(row):
            yield reader.line_num, row


def _check_header(header: Tuple[str, ...], line_number: int) -> None:
    unknown = [name for name in header if name not in INPUT_FIELDS]
    if unknown:
        raise TransactionDecodeError(
            line_number, f"unknown column(s) {', '.join(unknown)}"
        )
    if len(set(header)) != len(header):
        raise TransactionDecodeError(line_number, "duplicate column name")
    missing = [name for name in REQUIRED_INPUT_FIELDS if name not in header]
    if missing:
        raise TransactionDecodeError(
            line_number, f"missing column(s) {', '.join(missing)}"
        )


def decode_row(fields: Dict[str, str]) -> TransactionRecord:
    """
    Build a record from trimmed field values keyed by column name.

    Raises ValueError on any bad value. The record is NOT validated
    here: an amount on a dispute decodes fine and is refused later.
    """
    tx_type = TransactionType.parse(fields["type"])
    client_id = _parse_id(fields["client"], "client", MAX_CLIENT_ID)
    tx_id = _parse_id(fields["tx"], "tx", MAX_TRANSACTION_ID)
    amount = parse_amount(fields.get("amount"))
    return TransactionRecord(
        tx_type=tx_type,
        client_id=client_id,
        tx_id=tx_id,
        amount=amount,
    )


def _decode_line(
    header: Tuple[str, ...], line_number: int, row: List[str],
) -> TransactionRecord:
    if len(row) > len(header):
        raise TransactionDecodeError(
            line_number,
            f"found {len(row)} fields, header has {len(header)}",
        )

    fields = {name: value.strip() for name, value in zip(header, row)}
    missing = [name for name in REQUIRED_INPUT_FIELDS if name not in fields]
    if missing:
        raise TransactionDecodeError(
            line_number, f"missing field(s) {', '.join(missing)}"
        )

    try:
        return decode_row(fields)
    except ValueError as exc:
        raise TransactionDecodeError(line_number, str(exc)) from exc


def read_transactions(stream: TextIO) -> Iterator[TransactionRecord]:
    """Yield one TransactionRecord per data row of a CSV stream."""
    rows = _rows(csv.reader(stream))

    first: Optional[Tuple[int, List[str]]] = next(rows, None)
    if first is None:
        logger.debug("Empty transaction stream")
        return
    header_line, header_row = first
    header = tuple(cell.strip().lower() for cell in header_row)
    _check_header(header, header_line)

    for line_number, row in rows:
        yield _decode_line(header, line_number, row)
