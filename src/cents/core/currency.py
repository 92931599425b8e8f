#!/usr/bin/env python3
"""
Integer Cents Helpers

Low-level helpers behind the Money type. Amounts are always held as a
non-negative integer count of cents; floats only appear at the edges
(construction and scaling) and are rounded back to cents immediately.

Key Principles:
- Cents are never negative and never exceed MAX_CENTS
- Float-to-cents conversion rounds half up: int(value + 0.5)
- Formatting is pure integer arithmetic: "$D.CC"
"""

import logging
import math
import re

from .errors import MoneyOverflowError, MoneyParseError, NegativeAmountError

logger = logging.getLogger(__name__)

# Range of an unsigned 64-bit integer
MAX_CENTS = 2**64 - 1

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent
_DECIMAL_NUMERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def check_cents_range(cents: int) -> int:
    """
    Validate a cent count against the representable range.

    Args:
        cents: Candidate cent count

    Returns:
        The same cent count

    Raises:
        NegativeAmountError: If cents is below zero
        MoneyOverflowError: If cents is above MAX_CENTS
    """
    if cents < 0:
        raise NegativeAmountError(f"Money must be non-negative, got {cents} cents")
    if cents > MAX_CENTS:
        raise MoneyOverflowError(f"{cents} cents exceeds the maximum of {MAX_CENTS}")
    return cents


def round_half_up(value: float) -> int:
    """
    Round a non-negative float to the nearest integer, halves going up.

    Shifting by 0.5 before truncation does the rounding, so the float
    arithmetic is exactly int(value + 0.5).

    Example:
        round_half_up(0.995 * 100) -> 100
        round_half_up(3456.7) -> 3457
    """
    if math.isnan(value):
        raise MoneyParseError("Cannot convert NaN to cents")
    if value < 0:
        raise NegativeAmountError(f"Cannot round negative value {value} to cents")
    if math.isinf(value):
        raise MoneyOverflowError("Cannot convert infinity to cents")
    return check_cents_range(int(value + 0.5))


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to a dollar string using integer arithmetic.

    Example:
        cents_to_dollars_str(4599) -> "45.99"
        cents_to_dollars_str(5) -> "0.05"
    """
    dollars, remainder = divmod(cents, 100)
    return f"{dollars}.{remainder:02d}"


def format_cents(cents: int) -> str:
    """Format cents as dollar string with $ prefix."""
    return f"${cents_to_dollars_str(cents)}"


def is_decimal_numeral(text: str) -> bool:
    """
    Check whether text is a plain decimal numeral.

    Surrounding whitespace is ignored. Empty strings, "inf", "nan", hex
    literals and underscore digit grouping are all rejected.
    """
    return _DECIMAL_NUMERAL.fullmatch(text.strip()) is not None


def allocate_evenly(total: int, parts: int) -> list[int]:
    """
    Split a cent total into parts that sum exactly to the total.

    Leftover cents from the integer division go one each to the leading parts.

    Args:
        total: Amount in cents to split
        parts: Number of parts (must be at least 1)

    Returns:
        List of cent amounts, largest first

    Example:
        allocate_evenly(1000, 3) -> [334, 333, 333]
    """
    if parts < 1:
        raise ValueError(f"Cannot split into {parts} parts")

    share, remainder = divmod(total, parts)
    if remainder:
        logger.debug("Distributing %d leftover cents across %d parts", remainder, parts)
    return [share + 1] * remainder + [share] * (parts - remainder)
