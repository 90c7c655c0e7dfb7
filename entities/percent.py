"""
Percent: a fraction read as parts of a whole.
"""

from .fraction import Fraction, Rounding

_ONE_HUNDRED = Fraction(100)


def _to_percent(fraction: Fraction) -> 'Percent':
    return Percent(fraction.numerator, fraction.denominator)


class Percent(Fraction):
    """
    A ratio such as a slippage tolerance or a fee.

    ``Percent(5, 100)`` is five percent. Arithmetic keeps the ``Percent`` type;
    comparisons are the plain fraction comparisons.
    """

    @classmethod
    def from_bps(cls, basis_points: int) -> 'Percent':
        """Build from basis points, e.g. 50 bps is 0.5%."""
        return cls(basis_points, 10000)

    def add(self, other) -> 'Percent':
        return _to_percent(super().add(other))

    def subtract(self, other) -> 'Percent':
        return _to_percent(super().subtract(other))

    def multiply(self, other) -> 'Percent':
        return _to_percent(super().multiply(other))

    def divide(self, other) -> 'Percent':
        return _to_percent(super().divide(other))

    def invert(self) -> 'Percent':
        return _to_percent(super().invert())

    def to_significant(self, significant_digits: int = 5, rounding: Rounding = Rounding.ROUND_DOWN) -> str:
        return Fraction.multiply(self, _ONE_HUNDRED).to_significant(significant_digits, rounding)

    def to_fixed(self, decimal_places: int = 2, rounding: Rounding = Rounding.ROUND_DOWN) -> str:
        return Fraction.multiply(self, _ONE_HUNDRED).to_fixed(decimal_places, rounding)

    def to_wei_base(self, decimals: int) -> int:
        """
        Fixed-point integer representation of the ratio.

        Args:
            decimals: Number of decimals of the fixed-point scale (18 for wei)

        Returns:
            numerator * 10**decimals / denominator, truncated toward zero
        """
        return Fraction(self.numerator * 10 ** decimals, self.denominator).quotient
