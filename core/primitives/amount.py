"""
txledger Amount Primitive — Decimal Parsing & Display
=======================================================
Every monetary value in the ledger is a ``decimal.Decimal``.

RULES:
- No floats. Text is parsed straight into Decimal.
- Only finite values are accepted (no NaN, no Infinity).
- At most AMOUNT_MAX_INTEGER_DIGITS integer digits are accepted.
- Sign is NOT checked here — zero and negative amounts pass through.
- Ledger arithmetic runs under LEDGER_CONTEXT, never the thread default.
- Display is fixed at AMOUNT_DECIMAL_PLACES fractional digits.
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Context, Decimal, InvalidOperation, localcontext
from typing import Optional

from config.settings import (
    AMOUNT_DECIMAL_PLACES,
    AMOUNT_MAX_INTEGER_DIGITS,
    AMOUNT_PRECISION,
)

ZERO = Decimal(0)

LEDGER_CONTEXT = Context(prec=AMOUNT_PRECISION, rounding=ROUND_HALF_EVEN)

_QUANTUM = Decimal(1).scaleb(-AMOUNT_DECIMAL_PLACES)


def parse_amount(text: Optional[str]) -> Optional[Decimal]:
    """
    Parse an amount field.

    Returns None for a missing or blank field.
    Raises ValueError if the text is not a finite decimal number, or
    if it has more than AMOUNT_MAX_INTEGER_DIGITS integer digits.
    """
    if text is None:
        return None
    text = text.strip()
    if not text:
        return None

    try:
        value = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"'{text}' is not a decimal number.") from None

    if not value.is_finite():
        raise ValueError(f"'{text}' is not a finite amount.")
    if not value.is_zero() and value.adjusted() >= AMOUNT_MAX_INTEGER_DIGITS:
        raise ValueError(
            f"'{text}' exceeds {AMOUNT_MAX_INTEGER_DIGITS} integer digits."
        )
    return value


def format_amount(value: Decimal) -> str:
    """Render an amount with exactly AMOUNT_DECIMAL_PLACES digits."""
    with localcontext(LEDGER_CONTEXT) as ctx:
        # quantize needs room for every integer digit plus the fraction.
        ctx.prec = max(ctx.prec, value.adjusted() + 1 + AMOUNT_DECIMAL_PLACES)
        quantized = value.quantize(_QUANTUM, rounding=ROUND_HALF_EVEN)
    if quantized.is_zero():
        # Decimal keeps the sign of zero; "-0.0000" is never wanted.
        quantized = quantized.copy_abs()
    return f"{quantized:f}"
