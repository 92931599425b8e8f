#!/usr/bin/env python3
"""
Money Error Types

Every failure a Money operation can report. All of them derive from
MoneyError, which is a ValueError, so callers can catch broadly or narrowly.
"""


class MoneyError(ValueError):
    """Base class for all Money failures"""

    pass


class NegativeAmountError(MoneyError):
    """Raised when constructing Money from a negative amount"""

    pass


class MoneyParseError(MoneyError):
    """Raised when a string is not a valid decimal numeral"""

    pass


class NegativeFactorError(MoneyError):
    """Raised when multiplying Money by a negative scalar"""

    pass


class InsufficientFundsError(MoneyError):
    """Raised when a subtraction would produce a negative amount"""

    pass


class MoneyOverflowError(MoneyError, OverflowError):
    """Raised when a result does not fit in the cents range"""

    pass
