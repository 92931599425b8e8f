"""
cents - Non-negative Fixed-Point Money

An immutable money value type that stores whole cents as an integer,
so currency arithmetic never picks up binary floating-point error.

Key Features:
- Half-up rounding from floats and decimal strings
- Add, subtract, scale and whole-multiple division without going negative
- Canonical "$D.CC" formatting
- Explicit error types for every failure

Example Usage:
    from cents import Money

    price = Money.from_string("34.567")    # $34.57
    times, change = price.fits_into(Money.from_float(100))
"""

__version__ = "0.1.0"

from .core.errors import (
    InsufficientFundsError,
    MoneyError,
    MoneyOverflowError,
    MoneyParseError,
    NegativeAmountError,
    NegativeFactorError,
)
from .core.money import Money

__all__ = [
    "Money",
    # Errors
    "MoneyError",
    "NegativeAmountError",
    "MoneyParseError",
    "NegativeFactorError",
    "InsufficientFundsError",
    "MoneyOverflowError",
]
