"""
Call parameters for the limit-order contract.
"""

import logging

from entities import CurrencyAmount
from utils.conversion_utils import ZERO_HEX, to_hex, to_hex_number
from .smart_swap import CallParameters, check_ether_in_out

logger = logging.getLogger(__name__)


def pack_due_time(due_time80: str, v: int, version: int) -> str:
    """
    Pack the order due time, signature ``v`` and order version into one word.
    
    Args:
        due_time80: 80-bit due time, hex or decimal string
        v: Signature recovery id
        version: Order format version
        
    Returns:
        Hex of ``due_time80 << 16 | v << 8 | version``
    """
    if not 0 <= v < 256 or not 0 <= version < 256:
        raise ValueError(f"v and version must fit in a byte, got v={v}, version={version}")
    return to_hex_number((int(due_time80, 0) << 16) | (v << 8) | version)


def get_signer_call_parameters(
    coins_to_maker: str,
    coins_to_taker: str,
    due_time80: str,
    r: str,
    s: str
) -> CallParameters:
    """Call parameters for ``getSigner``; the arguments are forwarded as given."""
    return CallParameters(
        method_name='getSigner',
        args=[coins_to_maker, coins_to_taker, due_time80, r, s],
        value=ZERO_HEX,
    )


def direct_exchange_call_parameters(
    input_amount: CurrencyAmount,
    output_amount: CurrencyAmount,
    coins_to_maker: str,
    coins_to_taker: str,
    due_time80: str,
    r: str,
    s: str,
    v: int,
    version: int
) -> CallParameters:
    """
    Call parameters for filling a signed limit order with ``directExchange``.
    
    Args:
        input_amount: Amount the taker pays, sent as value when native
        output_amount: Amount the taker receives
        coins_to_maker: Packed maker-side coin word
        coins_to_taker: Packed taker-side coin word
        due_time80: Order due time
        r: Signature r
        s: Signature s
        v: Signature recovery id
        version: Order format version
        
    Returns:
        CallParameters for ``directExchange(coinsToMaker, coinsToTaker, dueTime80_v8_version8, r, s)``
    """
    # limit orders do not support both ether in and out
    ether_in = check_ether_in_out(input_amount.currency, output_amount.currency)

    due_time80_v8_version8 = pack_due_time(due_time80, v, version)
    amount_in = to_hex(input_amount)

    value = amount_in if ether_in else ZERO_HEX
    logger.debug("directExchange: packed due time %s, value %s", due_time80_v8_version8, value)
    return CallParameters(
        method_name='directExchange',
        args=[coins_to_maker, coins_to_taker, due_time80_v8_version8, r, s],
        value=value,
    )
