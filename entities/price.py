"""
Exchange rates between two currencies.
"""

from .currency import Currency
from .currency_amount import CurrencyAmount
from .exc import CurrencyMismatchError, FractionInvertZeroError
from .fraction import Fraction, Rounding


class Price(Fraction):
    """
    Quote currency per base currency.

    The fraction holds raw quote over raw base, so multiplying it by a raw base
    amount yields a raw quote amount. ``scalar`` converts that raw ratio into a
    human-readable one by accounting for the two decimal scales.
    """

    def __init__(self, base_currency: Currency, quote_currency: Currency, denominator: int, numerator: int):
        super().__init__(numerator, denominator)
        self.base_currency = base_currency
        self.quote_currency = quote_currency
        self.scalar = Fraction(10 ** base_currency.decimals, 10 ** quote_currency.decimals)

    @classmethod
    def from_amounts(cls, base_amount: CurrencyAmount, quote_amount: CurrencyAmount) -> 'Price':
        raw = Fraction(quote_amount.numerator * base_amount.denominator, quote_amount.denominator * base_amount.numerator)
        return cls(base_amount.currency, quote_amount.currency, raw.denominator, raw.numerator)

    def invert(self) -> 'Price':
        if self.numerator == 0:
            raise FractionInvertZeroError()
        return Price(self.quote_currency, self.base_currency, self.numerator, self.denominator)

    def multiply(self, other: 'Price') -> 'Price':
        """Chain two rates: base->quote times quote->other quote."""
        if not isinstance(other, Price) or not self.quote_currency.equals(other.base_currency):
            raise CurrencyMismatchError("price quote currency must match the other price's base currency")
        fraction = Fraction.multiply(self, other)
        return Price(self.base_currency, other.quote_currency, fraction.denominator, fraction.numerator)

    def quote(self, currency_amount: CurrencyAmount) -> CurrencyAmount:
        """Amount of quote currency received for ``currency_amount`` of base currency."""
        if not isinstance(currency_amount, CurrencyAmount) or not currency_amount.currency.equals(self.base_currency):
            raise CurrencyMismatchError("amount currency must be the price's base currency")
        result = Fraction.multiply(self, currency_amount)
        return CurrencyAmount.from_fractional_amount(self.quote_currency, result.numerator, result.denominator)

    @property
    def adjusted_for_decimals(self) -> Fraction:
        return Fraction.multiply(self, self.scalar)

    def to_significant(self, significant_digits: int = 6, rounding: Rounding = Rounding.ROUND_DOWN) -> str:
        return self.adjusted_for_decimals.to_significant(significant_digits, rounding)

    def to_fixed(self, decimal_places: int = 4, rounding: Rounding = Rounding.ROUND_DOWN) -> str:
        return self.adjusted_for_decimals.to_fixed(decimal_places, rounding)

    def __eq__(self, other):
        if not isinstance(other, Price):
            return NotImplemented
        return (
            self.base_currency.equals(other.base_currency)
            and self.quote_currency.equals(other.quote_currency)
            and self.equal_to(other)
        )

    def __hash__(self):
        return hash((self.base_currency, self.quote_currency, Fraction.__hash__(self)))

    def __repr__(self):
        return f"Price({self.base_currency!r}, {self.quote_currency!r}, {self.denominator}, {self.numerator})"
