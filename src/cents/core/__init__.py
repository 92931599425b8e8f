"""
Core Package

The Money value type and the integer cents helpers, error types and
configuration it is built on.
"""

from .config import (
    Config,
    Environment,
    get_config,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import (
    MAX_CENTS,
    allocate_evenly,
    cents_to_dollars_str,
    format_cents,
    is_decimal_numeral,
    round_half_up,
)
from .errors import (
    InsufficientFundsError,
    MoneyError,
    MoneyOverflowError,
    MoneyParseError,
    NegativeAmountError,
    NegativeFactorError,
)
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "InsufficientFundsError",
    # Currency utilities
    "MAX_CENTS",
    "Money",
    # Errors
    "MoneyError",
    "MoneyOverflowError",
    "MoneyParseError",
    "NegativeAmountError",
    "NegativeFactorError",
    "allocate_evenly",
    "cents_to_dollars_str",
    "format_cents",
    "get_config",
    "is_decimal_numeral",
    "is_development",
    "is_production",
    "is_test",
    "reload_config",
    "round_half_up",
]
