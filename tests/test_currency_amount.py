import pytest

from entities import (
    CurrencyAmount,
    CurrencyMismatchError,
    Fraction,
    InvalidAmountError,
    MAX_UINT256,
    Percent,
    Rounding,
)


def test_from_raw_amount(token0):
    amount = CurrencyAmount.from_raw_amount(token0, 100)
    assert amount.currency == token0
    assert amount.quotient == 100
    assert amount.decimal_scale == 10 ** 18


def test_from_fractional_amount(token0):
    amount = CurrencyAmount.from_fractional_amount(token0, 201, 2)
    assert amount.quotient == 100
    assert amount.remainder.equal_to(Fraction(1, 2))


def test_from_human_scales_and_truncates(token0, usdc):
    assert CurrencyAmount.from_human(token0, "1.5").quotient == 15 * 10 ** 17
    assert CurrencyAmount.from_human(usdc, "0.0000019").quotient == 1
    assert CurrencyAmount.from_human(usdc, 3).quotient == 3000000


def test_from_human_rejects_floats(usdc):
    with pytest.raises(TypeError):
        CurrencyAmount.from_human(usdc, 1.5)


def test_raw_amounts_must_be_integers(token0):
    with pytest.raises(TypeError):
        CurrencyAmount.from_raw_amount(token0, 1.9)
    with pytest.raises(TypeError):
        CurrencyAmount.from_fractional_amount(token0, 3, 2.0)


def test_max_uint256_bound(token0):
    assert CurrencyAmount.from_raw_amount(token0, MAX_UINT256).quotient == MAX_UINT256
    with pytest.raises(InvalidAmountError, match="AMOUNT"):
        CurrencyAmount.from_raw_amount(token0, MAX_UINT256 + 1)


def test_add_and_subtract_same_currency(token0):
    a = CurrencyAmount.from_raw_amount(token0, 100)
    b = CurrencyAmount.from_raw_amount(token0, 30)
    assert a.add(b) == CurrencyAmount.from_raw_amount(token0, 130)
    assert a.subtract(b) == CurrencyAmount.from_raw_amount(token0, 70)
    assert isinstance(a + b, CurrencyAmount)


def test_arithmetic_across_currencies_raises(token0, token1):
    a = CurrencyAmount.from_raw_amount(token0, 100)
    b = CurrencyAmount.from_raw_amount(token1, 100)
    with pytest.raises(CurrencyMismatchError, match="CURRENCY"):
        a.add(b)
    with pytest.raises(CurrencyMismatchError):
        a.subtract(b)


def test_multiply_and_divide_floor(token0):
    amount = CurrencyAmount.from_raw_amount(token0, 100)
    assert amount.multiply(Percent(5, 100)).quotient == 5
    assert amount.multiply(Fraction(1, 3)) == CurrencyAmount.from_raw_amount(token0, 33)
    assert amount.divide(3) == CurrencyAmount.from_raw_amount(token0, 33)
    assert amount.multiply(Fraction(1, 3)).currency == token0


def test_equality_includes_currency(token0, token1):
    assert CurrencyAmount.from_raw_amount(token0, 100) != CurrencyAmount.from_raw_amount(token1, 100)
    assert CurrencyAmount.from_raw_amount(token0, 100) == CurrencyAmount.from_fractional_amount(token0, 200, 2)


def test_human_rendering(token0, usdc):
    amount = CurrencyAmount.from_human(token0, "1.5")
    assert amount.to_exact() == "1.5"
    assert amount.to_fixed(2) == "1.50"
    assert CurrencyAmount.from_raw_amount(usdc, 1234567).to_significant(3) == "1.23"
    assert CurrencyAmount.from_raw_amount(usdc, 1235000).to_significant(3, Rounding.ROUND_HALF_UP) == "1.24"
    assert CurrencyAmount.from_raw_amount(usdc, 5000000).to_exact() == "5"
    assert CurrencyAmount.from_raw_amount(usdc, 1).to_fixed() == "0.000001"


def test_to_fixed_beyond_decimals_raises(usdc):
    with pytest.raises(ValueError):
        CurrencyAmount.from_raw_amount(usdc, 1).to_fixed(7)
