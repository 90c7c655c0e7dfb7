"""
Raw integer amounts bound to a currency's decimal scale.
"""

from typing import Union
from decimal import Decimal

from utils.conversion_utils import convert_amount_to_smallest_unit
from .constants import MAX_UINT256
from .currency import Currency
from .exc import CurrencyMismatchError, InvalidAmountError
from .fraction import Fraction, Rounding


class CurrencyAmount(Fraction):
    """
    An amount of ``currency`` held as a fraction of its smallest unit.

    The fraction is the raw amount; ``decimal_scale`` (10**decimals) is only
    applied when rendering human-readable values.
    """

    def __init__(self, currency: Currency, numerator: int, denominator: int = 1):
        super().__init__(numerator, denominator)
        if self.quotient > MAX_UINT256:
            raise InvalidAmountError(f"{self.quotient} exceeds uint256")
        self.currency = currency
        self.decimal_scale = 10 ** currency.decimals

    @classmethod
    def from_raw_amount(cls, currency: Currency, raw_amount: int) -> 'CurrencyAmount':
        return cls(currency, raw_amount)

    @classmethod
    def from_fractional_amount(cls, currency: Currency, numerator: int, denominator: int) -> 'CurrencyAmount':
        return cls(currency, numerator, denominator)

    @classmethod
    def from_human(cls, currency: Currency, amount: Union[str, Decimal, int]) -> 'CurrencyAmount':
        """
        Parse a human-readable amount such as ``"1.5"``.

        Digits beyond the currency's decimals are truncated.
        """
        return cls(currency, convert_amount_to_smallest_unit(amount, currency.decimals))

    def _check_currency(self, other: 'CurrencyAmount') -> None:
        if not isinstance(other, CurrencyAmount) or not self.currency.equals(other.currency):
            raise CurrencyMismatchError(f"{self.currency!r} vs {getattr(other, 'currency', other)!r}")

    def add(self, other: 'CurrencyAmount') -> 'CurrencyAmount':
        self._check_currency(other)
        added = Fraction.add(self, other)
        return CurrencyAmount(self.currency, added.numerator, added.denominator)

    def subtract(self, other: 'CurrencyAmount') -> 'CurrencyAmount':
        self._check_currency(other)
        subtracted = Fraction.subtract(self, other)
        return CurrencyAmount(self.currency, subtracted.numerator, subtracted.denominator)

    def multiply(self, other) -> 'CurrencyAmount':
        return CurrencyAmount(self.currency, Fraction.multiply(self, other).quotient)

    def divide(self, other) -> 'CurrencyAmount':
        return CurrencyAmount(self.currency, Fraction.divide(self, other).quotient)

    def _human(self) -> Fraction:
        return Fraction(self.numerator, self.denominator * self.decimal_scale)

    def to_significant(self, significant_digits: int = 6, rounding: Rounding = Rounding.ROUND_DOWN) -> str:
        return self._human().to_significant(significant_digits, rounding)

    def to_fixed(self, decimal_places: int = None, rounding: Rounding = Rounding.ROUND_DOWN) -> str:
        if decimal_places is None:
            decimal_places = self.currency.decimals
        if decimal_places > self.currency.decimals:
            raise ValueError("DECIMALS")
        return self._human().to_fixed(decimal_places, rounding)

    def to_exact(self) -> str:
        """Human-readable value with every significant decimal, no trailing zeros."""
        fixed = self.to_fixed(self.currency.decimals)
        if '.' in fixed:
            fixed = fixed.rstrip('0').rstrip('.')
        return fixed

    def __eq__(self, other):
        if not isinstance(other, CurrencyAmount):
            return NotImplemented
        return self.currency.equals(other.currency) and self.equal_to(other)

    def __hash__(self):
        return hash((self.currency, Fraction.__hash__(self)))

    def __repr__(self):
        return f"CurrencyAmount({self.currency!r}, {self.numerator}, {self.denominator})"
