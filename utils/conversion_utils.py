"""
Amount conversion utilities: smallest-unit scaling and hex encoding.
"""

import decimal
from decimal import Decimal
from typing import Union

ZERO_HEX = '0x0'


def convert_amount_to_smallest_unit(amount: Union[str, Decimal, int], decimals: int) -> int:
    """
    Convert human-readable amount to token's smallest unit.
    
    Args:
        amount: Amount in human-readable units, as a decimal string, Decimal or int
        decimals: Number of decimals for the token
        
    Returns:
        Amount in smallest unit, digits past ``decimals`` truncated
    """
    if isinstance(amount, float):
        raise TypeError("floats are not accepted, pass the amount as a decimal string")
    try:
        value = Decimal(str(amount)) if not isinstance(amount, Decimal) else amount
    except decimal.InvalidOperation:
        raise ValueError(f"Invalid amount: {amount!r}") from None
    if not value.is_finite():
        raise ValueError(f"Invalid amount: {amount!r}")
    numerator, denominator = value.as_integer_ratio()
    scaled = abs(numerator) * 10 ** decimals // denominator
    return -scaled if numerator < 0 else scaled


def convert_amount_from_smallest_unit(amount_wei: int, decimals: int) -> Decimal:
    """
    Convert amount from token's smallest unit to human-readable format.
    
    Args:
        amount_wei: Amount in smallest unit
        decimals: Number of decimals for the token
        
    Returns:
        Exact Decimal amount in human-readable units
    """
    amount_wei = int(amount_wei)
    with decimal.localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(str(abs(amount_wei))))
        return Decimal(amount_wei).scaleb(-decimals)


def to_hex_number(x: int) -> str:
    """
    Canonical hex for a non-negative integer: lowercase, ``0x`` prefix, no padding.
    """
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError(f"Expected an integer, got {x!r}")
    if x < 0:
        raise ValueError(f"Cannot hex-encode negative value {x}")
    return hex(x)


def to_hex(currency_amount) -> str:
    """Hex encoding of a currency amount's raw integer quotient."""
    return to_hex_number(currency_amount.quotient)


def to_wei_base(percent, decimals: int) -> int:
    """
    Fixed-point integer for a percent at ``decimals`` decimals.
    
    Args:
        percent: Percent to convert
        decimals: Fixed-point scale, 18 for the aggregator's fee argument
        
    Returns:
        floor(numerator * 10**decimals / denominator) for non-negative percents
    """
    return percent.to_wei_base(decimals)


def to_wei_base10(percent, decimals: int) -> str:
    return str(to_wei_base(percent, decimals))


def to_wei_base16(percent, decimals: int) -> str:
    return to_hex_number(to_wei_base(percent, decimals))
