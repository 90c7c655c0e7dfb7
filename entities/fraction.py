"""
Exact rational arithmetic on arbitrary-precision integers.

Fractions are never reduced to lowest terms, so equality and ordering are
always computed by cross-multiplication. Integer results truncate toward zero.
"""

import decimal
import math
from decimal import Decimal
from enum import Enum
from typing import Union

from .exc import FractionInvertZeroError, ZeroDenominatorError


class Rounding(Enum):
    ROUND_DOWN = decimal.ROUND_DOWN
    ROUND_HALF_UP = decimal.ROUND_HALF_UP
    ROUND_UP = decimal.ROUND_UP


def div_trunc(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero (Python's ``//`` floors)."""
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def _round_scaled(numerator: int, denominator: int, rounding: Rounding) -> int:
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    quotient, remainder = divmod(abs(numerator), denominator)
    if rounding is Rounding.ROUND_UP and remainder:
        quotient += 1
    elif rounding is Rounding.ROUND_HALF_UP and 2 * remainder >= denominator:
        quotient += 1
    return -quotient if numerator < 0 else quotient


class Fraction:
    """Immutable signed rational ``numerator / denominator``."""

    def __init__(self, numerator: int, denominator: int = 1):
        for value in (numerator, denominator):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Fraction terms must be integers, got {value!r}")
        numerator = int(numerator)
        denominator = int(denominator)
        if denominator == 0:
            raise ZeroDenominatorError()
        self._numerator = numerator
        self._denominator = denominator

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @staticmethod
    def _parse(other: Union['Fraction', int]) -> 'Fraction':
        if isinstance(other, Fraction):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return Fraction(other)
        raise TypeError(f"Could not parse fraction from {other!r}")

    @property
    def quotient(self) -> int:
        """Integer part, truncated toward zero."""
        return div_trunc(self._numerator, self._denominator)

    @property
    def remainder(self) -> 'Fraction':
        """What is left after removing the quotient."""
        return Fraction(self._numerator - self.quotient * self._denominator, self._denominator)

    def invert(self) -> 'Fraction':
        if self._numerator == 0:
            raise FractionInvertZeroError()
        return Fraction(self._denominator, self._numerator)

    def add(self, other) -> 'Fraction':
        other = self._parse(other)
        if self._denominator == other.denominator:
            return Fraction(self._numerator + other.numerator, self._denominator)
        return Fraction(
            self._numerator * other.denominator + other.numerator * self._denominator,
            self._denominator * other.denominator,
        )

    def subtract(self, other) -> 'Fraction':
        other = self._parse(other)
        if self._denominator == other.denominator:
            return Fraction(self._numerator - other.numerator, self._denominator)
        return Fraction(
            self._numerator * other.denominator - other.numerator * self._denominator,
            self._denominator * other.denominator,
        )

    def multiply(self, other) -> 'Fraction':
        other = self._parse(other)
        return Fraction(self._numerator * other.numerator, self._denominator * other.denominator)

    def divide(self, other) -> 'Fraction':
        other = self._parse(other)
        if other.numerator == 0:
            raise ZeroDenominatorError("division by zero")
        return Fraction(self._numerator * other.denominator, self._denominator * other.numerator)

    # Comparisons cross-multiply; the sign of the denominators matters
    def _compare(self, other) -> int:
        other = self._parse(other)
        left = self._numerator * other.denominator
        right = other.numerator * self._denominator
        if (self._denominator < 0) != (other.denominator < 0):
            left, right = right, left
        return (left > right) - (left < right)

    def less_than(self, other) -> bool:
        return self._compare(other) < 0

    def equal_to(self, other) -> bool:
        return self._compare(other) == 0

    def greater_than(self, other) -> bool:
        return self._compare(other) > 0

    def to_significant(self, significant_digits: int, rounding: Rounding = Rounding.ROUND_DOWN) -> str:
        """
        Render with at most ``significant_digits`` significant digits.

        Args:
            significant_digits: Positive number of significant digits
            rounding: Rounding applied to the last digit

        Returns:
            Decimal string without trailing zeros
        """
        if significant_digits <= 0:
            raise ValueError(f"{significant_digits} is not positive")
        with decimal.localcontext() as ctx:
            ctx.prec = significant_digits
            ctx.rounding = rounding.value
            value = (Decimal(self._numerator) / Decimal(self._denominator)).normalize()
            return format(value, 'f')

    def to_fixed(self, decimal_places: int, rounding: Rounding = Rounding.ROUND_DOWN) -> str:
        """
        Render with exactly ``decimal_places`` digits after the point.

        Args:
            decimal_places: Non-negative number of decimals
            rounding: Rounding applied to the last decimal

        Returns:
            Decimal string
        """
        if decimal_places < 0:
            raise ValueError(f"{decimal_places} is negative")
        scaled = _round_scaled(self._numerator * 10 ** decimal_places, self._denominator, rounding)
        sign = '-' if scaled < 0 else ''
        digits = str(abs(scaled)).rjust(decimal_places + 1, '0')
        if decimal_places == 0:
            return f"{sign}{digits}"
        return f"{sign}{digits[:-decimal_places]}.{digits[-decimal_places:]}"

    @property
    def as_fraction(self) -> 'Fraction':
        return Fraction(self._numerator, self._denominator)

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, other):
        return self.multiply(other)

    def __truediv__(self, other):
        return self.divide(other)

    def __eq__(self, other):
        if not isinstance(other, (Fraction, int)) or isinstance(other, bool):
            return NotImplemented
        return self.equal_to(other)

    def __lt__(self, other):
        return self.less_than(other)

    def __le__(self, other):
        return not self.greater_than(other)

    def __gt__(self, other):
        return self.greater_than(other)

    def __ge__(self, other):
        return not self.less_than(other)

    def __hash__(self):
        n, d = self._numerator, self._denominator
        if d < 0:
            n, d = -n, -d
        g = math.gcd(n, d)
        if d == g:
            # integer-valued fractions hash like the int they equal
            return hash(n // g)
        return hash((n // g, d // g))

    def __repr__(self):
        return f"{type(self).__name__}({self._numerator}, {self._denominator})"
