import pytest

from entities import CurrencyAmount, CurrencyMismatchError, Fraction, FractionInvertZeroError, Price


def test_raw_fraction_is_quote_over_base(token0, token1):
    price = Price(token0, token1, 100, 90)
    assert price.numerator == 90
    assert price.denominator == 100
    assert price.base_currency == token0
    assert price.quote_currency == token1


def test_from_amounts(token0, token2):
    price = Price.from_amounts(
        CurrencyAmount.from_raw_amount(token0, 100),
        CurrencyAmount.from_raw_amount(token2, 90),
    )
    assert price == Price(token0, token2, 100, 90)


def test_equality_is_by_value_and_currencies(token0, token1, token2):
    assert Price(token0, token1, 100, 90) == Price(token0, token1, 10, 9)
    assert Price(token0, token1, 100, 90) != Price(token0, token2, 100, 90)
    assert Price(token0, token1, 100, 90) != Price(token0, token1, 100, 91)


def test_invert(token0, token1):
    inverted = Price(token0, token1, 100, 90).invert()
    assert inverted.base_currency == token1
    assert inverted.quote_currency == token0
    assert inverted.equal_to(Fraction(100, 90))


def test_invert_zero_price_raises(token0, token1):
    with pytest.raises(FractionInvertZeroError, match="INVERT_ZERO"):
        Price(token0, token1, 100, 0).invert()


def test_multiply_chains_rates(token0, token1, token2):
    chained = Price(token0, token1, 1, 2).multiply(Price(token1, token2, 1, 3))
    assert chained == Price(token0, token2, 1, 6)


def test_multiply_requires_matching_currencies(token0, token1, token2):
    with pytest.raises(CurrencyMismatchError):
        Price(token0, token1, 1, 2).multiply(Price(token2, token0, 1, 3))


def test_quote(token0, token1):
    quoted = Price(token0, token1, 1, 2).quote(CurrencyAmount.from_raw_amount(token0, 100))
    assert quoted == CurrencyAmount.from_raw_amount(token1, 200)


def test_quote_requires_base_currency(token0, token1):
    with pytest.raises(CurrencyMismatchError):
        Price(token0, token1, 1, 2).quote(CurrencyAmount.from_raw_amount(token1, 100))


def test_decimal_scaling(usdc, token0):
    # 1 USDC (6 decimals) buys 2 t0 (18 decimals)
    price = Price(usdc, token0, 10 ** 6, 2 * 10 ** 18)
    assert price.adjusted_for_decimals.equal_to(2)
    assert price.to_significant(5) == "2"
    assert price.to_fixed(2) == "2.00"
    assert price.invert().to_fixed(2) == "0.50"
