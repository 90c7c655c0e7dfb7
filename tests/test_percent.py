import pytest

from entities import Fraction, Percent
from utils.conversion_utils import to_wei_base, to_wei_base10, to_wei_base16


def test_add_keeps_percent_type():
    result = Percent(1, 100).add(Percent(2, 100))
    assert isinstance(result, Percent)
    assert result.equal_to(Percent(3, 100))


def test_subtract_keeps_percent_type():
    result = Percent(1, 100).subtract(Percent(2, 100))
    assert isinstance(result, Percent)
    assert result.equal_to(Percent(-1, 100))


def test_multiply_and_divide_keep_percent_type():
    assert isinstance(Percent(1, 100).multiply(Percent(2, 100)), Percent)
    assert isinstance(Percent(1, 100).divide(Percent(2, 100)), Percent)


def test_comparisons_match_fraction():
    assert Percent(1, 100).less_than(Percent(2, 100))
    assert Percent(2, 100).greater_than(Percent(1, 100))
    assert Percent(1, 100).equal_to(Fraction(10, 1000))
    assert Percent(-1, 100).less_than(0)
    assert not Percent(0, 100).less_than(0)


def test_from_bps():
    assert Percent.from_bps(50).equal_to(Percent(1, 200))
    assert Percent.from_bps(10000).equal_to(Percent(1, 1))


def test_to_significant():
    assert Percent(154, 10000).to_significant(3) == "1.54"
    assert Percent(1, 3).to_significant(5) == "33.333"


def test_to_fixed():
    assert Percent(154, 10000).to_fixed(2) == "1.54"
    assert Percent(1, 3).to_fixed(2) == "33.33"


def test_five_percent_at_eighteen_decimals():
    assert Percent(5, 100).to_wei_base(18) == 50000000000000000
    assert to_wei_base(Percent(5, 100), 18) == 50000000000000000
    assert to_wei_base10(Percent(5, 100), 18) == "50000000000000000"
    encoded = to_wei_base16(Percent(5, 100), 18)
    assert encoded == encoded.lower()
    assert int(encoded, 16) == 50000000000000000


@pytest.mark.parametrize(
    "percent,decimals,expected",
    [
        (Percent(1, 3), 18, 333333333333333333),
        (Percent(2, 3), 4, 6666),
        (Percent(0, 100), 18, 0),
        (Percent(200, 100), 2, 200),
    ],
)
def test_to_wei_base_truncates(percent, decimals, expected):
    assert percent.to_wei_base(decimals) == expected


def test_zero_fee_encodes_as_zero_hex():
    assert to_wei_base16(Percent(0, 100), 18) == '0x0'
