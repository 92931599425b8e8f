#!/usr/bin/env python3
"""
Money Primitive Type

Immutable, non-negative currency value that stores an integer count of cents.
Prevents floating-point errors: floats are only accepted at construction and
scaling time, and are rounded half up to whole cents right away.

Every operation returns a new Money; nothing is mutated in place, so values
can be shared freely between threads.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from .currency import (
    allocate_evenly,
    check_cents_range,
    format_cents,
    is_decimal_numeral,
    round_half_up,
)
from .errors import (
    InsufficientFundsError,
    MoneyParseError,
    NegativeAmountError,
    NegativeFactorError,
)


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents (USD).

    Amounts are strictly non-negative. Operations that would go below zero
    raise instead of clamping.

    Examples:
        >>> price = Money.from_float(34.567)
        >>> str(price)
        '$34.57'

        >>> str(Money.from_string("1.50") + Money.from_string("2.75"))
        '$4.25'

        >>> Money.from_cents(333).fits_into(Money.from_cents(1000))
        (3, Money(cents=1))

        >>> Money()
        Money(cents=0)
    """

    cents: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise TypeError(f"Money cents must be an int, got {type(self.cents).__name__}")
        check_cents_range(self.cents)

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_float(cls, amount: float) -> "Money":
        """
        Create Money from a dollar amount, rounding half up to whole cents.

        Args:
            amount: Non-negative dollar amount (e.g. 34.567)

        Returns:
            Money object (34.567 -> $34.57, 0.995 -> $1.00)

        Raises:
            NegativeAmountError: If amount is below zero
            MoneyParseError: If amount is NaN
            MoneyOverflowError: If amount is infinite or too large
        """
        if amount < 0:
            raise NegativeAmountError(f"Money must be non-negative, got {amount}")
        if isinstance(amount, int):
            return cls(cents=amount * 100)
        return cls(cents=round_half_up(amount * 100))

    @classmethod
    def from_string(cls, text: str) -> "Money":
        """
        Parse a decimal numeral like "12.34" into Money.

        Args:
            text: Plain decimal numeral, no "$" prefix or separators

        Returns:
            Money object, rounded half up like from_float

        Raises:
            MoneyParseError: If text is empty or not a decimal numeral
            NegativeAmountError: If the parsed value is negative
        """
        if not is_decimal_numeral(text):
            raise MoneyParseError(f"Not a decimal amount: {text!r}")
        return cls.from_float(float(text))

    @classmethod
    def total(cls, amounts: Iterable["Money"]) -> "Money":
        """Sum Money objects, starting from $0.00."""
        result = cls()
        for amount in amounts:
            result = result.add(amount)
        return result

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_float(self) -> float:
        """Get value in dollars as a float ($1.23 -> 1.23)."""
        return self.cents / 100

    def to_dollars(self) -> str:
        """Get formatted dollar string."""
        return str(self)

    def is_zero(self) -> bool:
        return self.cents == 0

    def add(self, other: "Money") -> "Money":
        """
        Add two Money objects.

        Raises:
            MoneyOverflowError: If the sum exceeds the cents range
        """
        return Money(cents=self.cents + other.cents)

    def sub(self, other: "Money") -> "Money":
        """
        Subtract other from this amount.

        Raises:
            InsufficientFundsError: If other is larger than this amount
        """
        if other.cents > self.cents:
            raise InsufficientFundsError(f"Cannot subtract {other} from {self}")
        return Money(cents=self.cents - other.cents)

    def mul(self, factor: float) -> "Money":
        """
        Scale by a non-negative factor, rounding half up to whole cents.

        Examples:
            $1.00 * 3.456 -> $3.46
            $10.00 * (2 / 3) -> $6.67

        Whole-number factors (int or float) are applied exactly in integer
        arithmetic; other factors go through a float intermediate.

        Raises:
            NegativeFactorError: If factor is below zero
            MoneyOverflowError: If the result exceeds the cents range
        """
        if factor < 0:
            raise NegativeFactorError(f"Cannot multiply {self} by negative factor {factor}")
        if isinstance(factor, float) and factor.is_integer():
            factor = int(factor)
        if isinstance(factor, int):
            return Money(cents=self.cents * factor)
        return Money(cents=round_half_up(float(self.cents) * factor))

    def fits_into(self, total: "Money") -> tuple[int, "Money"]:
        """
        Count how many whole copies of this amount fit into total.

        Args:
            total: Amount to divide

        Returns:
            Tuple of (times, remainder) with times * self + remainder == total.
            A zero divisor or a zero total gives (0, $0.00).

        Example:
            $3.33 fits into $10.00 -> (3, $0.01)
            $100.00 fits into $30.00 -> (0, $30.00)
        """
        if self.cents == 0 or total.cents == 0:
            return 0, Money()

        times, remainder = divmod(total.cents, self.cents)
        return times, Money(cents=remainder)

    def split(self, parts: int) -> list["Money"]:
        """
        Split into parts that sum exactly to this amount.

        Leftover cents go one each to the leading parts:
        $10.00 split 3 ways -> [$3.34, $3.33, $3.33]
        """
        return [Money(cents=c) for c in allocate_evenly(self.cents, parts)]

    def __add__(self, other: object) -> "Money":
        """Add two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Money":
        """Subtract two Money objects."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, factor: object) -> "Money":
        """Multiply Money by a scalar."""
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        return self.mul(factor)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.cents == other.cents

    def __lt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.cents < other.cents

    def __le__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.cents <= other.cents

    def __gt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.cents > other.cents

    def __ge__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.cents >= other.cents

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        """Format as dollar string."""
        return format_cents(self.cents)

    def __repr__(self) -> str:
        """Repr format."""
        return f"Money(cents={self.cents})"
