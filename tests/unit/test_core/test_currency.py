#!/usr/bin/env python3
"""Tests for integer cents helpers."""

import logging

import pytest

from cents.core.currency import (
    MAX_CENTS,
    allocate_evenly,
    cents_to_dollars_str,
    check_cents_range,
    format_cents,
    is_decimal_numeral,
    round_half_up,
)
from cents.core.errors import MoneyOverflowError, MoneyParseError, NegativeAmountError


class TestRounding:
    """Test half-up rounding to whole cents."""

    @pytest.mark.currency
    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.0, 0),
            (0.4, 0),
            (0.5, 1),
            (99.5, 100),
            (0.995 * 100, 100),
            (3456.7, 3457),
            (12.49, 12),
        ],
    )
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    @pytest.mark.currency
    def test_round_half_up_rejects_bad_values(self):
        """Test NaN, negative and infinite values raise."""
        with pytest.raises(MoneyParseError):
            round_half_up(float("nan"))
        with pytest.raises(NegativeAmountError):
            round_half_up(-0.5)
        with pytest.raises(MoneyOverflowError):
            round_half_up(float("inf"))
        with pytest.raises(MoneyOverflowError):
            round_half_up(float(MAX_CENTS) * 2)

    @pytest.mark.currency
    def test_check_cents_range(self):
        assert check_cents_range(0) == 0
        assert check_cents_range(MAX_CENTS) == MAX_CENTS
        with pytest.raises(NegativeAmountError):
            check_cents_range(-1)
        with pytest.raises(MoneyOverflowError):
            check_cents_range(MAX_CENTS + 1)


class TestFormatting:
    """Test dollar string formatting."""

    @pytest.mark.currency
    def test_cents_to_dollars_str(self):
        """Test formatting cents as dollar strings."""
        assert cents_to_dollars_str(4599) == "45.99"
        assert cents_to_dollars_str(100) == "1.00"
        assert cents_to_dollars_str(0) == "0.00"
        assert cents_to_dollars_str(5) == "0.05"
        assert cents_to_dollars_str(100000000) == "1000000.00"

    @pytest.mark.currency
    def test_format_cents(self):
        assert format_cents(4599) == "$45.99"
        assert format_cents(0) == "$0.00"


class TestDecimalNumerals:
    """Test the accepted string grammar."""

    @pytest.mark.currency
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("12.34", True),
            ("12", True),
            ("-1", True),
            ("+.5", True),
            ("1.5e3", True),
            ("  7  ", True),
            ("", False),
            ("abcd", False),
            ("Infinity", False),
            ("NaN", False),
            ("1_000", False),
            ("$12.34", False),
            ("12.34.56", False),
            ("1e", False),
        ],
    )
    def test_is_decimal_numeral(self, text, expected):
        assert is_decimal_numeral(text) is expected


class TestAllocation:
    """Test even allocation of cents."""

    @pytest.mark.currency
    def test_allocate_evenly(self):
        """Test remainder allocation for precise sums."""
        allocated = allocate_evenly(10000, 3)
        assert allocated == [3334, 3333, 3333]
        assert sum(allocated) == 10000

    @pytest.mark.currency
    def test_allocate_evenly_invalid_parts(self):
        with pytest.raises(ValueError):
            allocate_evenly(100, 0)
        with pytest.raises(ValueError):
            allocate_evenly(100, -2)

    @pytest.mark.currency
    def test_allocate_evenly_logs_leftover(self, caplog):
        """Test leftover distribution is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="cents.core.currency"):
            allocate_evenly(100, 3)
            allocate_evenly(99, 3)

        messages = [r.getMessage() for r in caplog.records if r.name == "cents.core.currency"]
        assert messages == ["Distributing 1 leftover cents across 3 parts"]
