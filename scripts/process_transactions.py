"""
Process a CSV file of transactions and print the final account states.

Usage:
    python -m scripts.process_transactions transactions.csv > accounts.csv
    python -m scripts.process_transactions transactions.csv --sort
    txledger transactions.csv --log-level INFO

Exit status is 0 on success and 1 when the input cannot be read,
decoded or validated. Nothing is written to stdout on failure.
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from typing import Optional, Sequence

from adapters.csv_io import read_transactions, write_accounts
from config import settings
from engines.ledger.errors import LedgerError
from engines.ledger.services import TransactionProcessor

logger = logging.getLogger("txledger.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="txledger",
        description="Apply a transaction CSV and print account balances.",
    )
    parser.add_argument("path", help="Transaction CSV file.")
    parser.add_argument(
        "--sort",
        action=argparse.BooleanOptionalAction,
        default=settings.SORT_OUTPUT,
        help="Order output rows by client ID (--no-sort keeps first-seen order).",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Log level for stderr diagnostics.",
    )
    return parser


def run(path: str, out, sort: bool = False) -> int:
    """Process one file into out. Raises LedgerError or OSError on failure."""
    processor = TransactionProcessor()
    with open(path, newline="", encoding="utf-8-sig") as handle:
        processor.process(read_transactions(handle))

    # Render fully before touching out: a failed run leaves no partial output.
    buffer = io.StringIO()
    rows = write_accounts(buffer, processor.ledger.snapshot(), sort=sort)
    out.write(buffer.getvalue())
    logger.info(f"Wrote {rows} account rows")
    return rows


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format=settings.LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        run(args.path, sys.stdout, sort=args.sort)
    except LedgerError as exc:
        logger.error(f"Aborted: {exc}")
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        logger.error(f"Cannot read {args.path}: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
