"""
Call parameters for the SmartSwap aggregator contract.

Pure functions that turn a trade quote into the method name, hex-encoded
arguments and native value expected by the aggregator.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

from entities import CurrencyAmount, Currency, EtherInOutError, InvalidTtlError, Percent, TradeQuote
from utils.conversion_utils import ZERO_HEX, to_hex, to_hex_number, to_wei_base16
from utils.token_utils import currency_address

logger = logging.getLogger(__name__)

# Fixed-point decimals of the aggregator's fee argument
FEE_PERCENT_DECIMALS = 18


@dataclass(frozen=True)
class TradeOptions:
    """
    Options for producing the arguments to send a call to the aggregator.
    
    Attributes:
        allowed_slippage: How much the execution price is allowed to move unfavorably
        fee_percent: Aggregator fee deducted from the output
        ttl: How long the swap is valid, in seconds from when the call parameters are generated
    """
    allowed_slippage: Percent
    fee_percent: Percent
    ttl: int


@dataclass(frozen=True)
class TradeOptionsDeadline:
    """
    Same as TradeOptions with an absolute deadline instead of a ttl.
    
    Useful when local time should not be used.
    """
    allowed_slippage: Percent
    fee_percent: Percent
    deadline: int


@dataclass(frozen=True)
class GetExpectedReturnOptions:
    parts: int
    flags: int


@dataclass(frozen=True)
class CallParameters:
    """
    The parameters to use in a call to the aggregator.
    
    Attributes:
        method_name: The method to call on the contract
        args: The arguments to pass to the method, all hex encoded
        value: The amount of wei to send, in hex
    """
    method_name: str
    args: List[Union[str, List[str]]] = field(default_factory=list)
    value: str = ZERO_HEX


def check_ether_in_out(currency_in: Currency, currency_out: Currency) -> bool:
    ether_in = currency_in.is_native
    # the aggregator does not support both ether in and out
    if ether_in and currency_out.is_native:
        raise EtherInOutError()
    return ether_in


def swap_call_parameters(
    trade: TradeQuote,
    options: Union[TradeOptions, TradeOptionsDeadline],
    now: Optional[Callable[[], float]] = None
) -> CallParameters:
    """
    Produce the on-chain method name and hex encoded arguments for a trade.
    
    Args:
        trade: Trade quote to produce call parameters for
        options: Slippage, fee and ttl or absolute deadline
        now: Wall clock in seconds (defaults to time.time), read once when a ttl is given
        
    Returns:
        CallParameters for ``swap(fromToken, destToken, amount, minReturn,
        distribution, flags, deadline, feePercent)``
    """
    ether_in = check_ether_in_out(trade.input_amount.currency, trade.output_amount.currency)
    use_ttl = isinstance(options, TradeOptions)
    if use_ttl and not options.ttl > 0:
        raise InvalidTtlError(f"{options.ttl!r}")

    amount_in = to_hex(trade.maximum_amount_in(options.allowed_slippage, options.fee_percent))
    min_return = to_hex(trade.minimum_amount_out(options.allowed_slippage, options.fee_percent))
    from_token = currency_address(trade.input_amount.currency)
    dest_token = currency_address(trade.output_amount.currency)
    distribution = list(trade.distribution)
    flags = to_hex_number(trade.flags)
    fee_percent = to_wei_base16(options.fee_percent, FEE_PERCENT_DECIMALS)

    if use_ttl:
        clock = now if now is not None else time.time
        deadline = to_hex_number(int(clock()) + options.ttl)
    else:
        deadline = to_hex_number(options.deadline)

    value = amount_in if ether_in else ZERO_HEX
    logger.debug(
        "swap %s -> %s: amount %s, min return %s, deadline %s",
        from_token, dest_token, amount_in, min_return, deadline,
    )
    return CallParameters(
        method_name='swap',
        args=[from_token, dest_token, amount_in, min_return, distribution, flags, deadline, fee_percent],
        value=value,
    )


def get_expected_return_call_parameters(
    currency_amount_in: CurrencyAmount,
    currency_out: Currency,
    options: GetExpectedReturnOptions
) -> CallParameters:
    """
    Produce call parameters for the aggregator's quote method.
    
    Args:
        currency_amount_in: Amount to sell
        currency_out: Currency to buy
        options: Number of distribution parts and routing flags
        
    Returns:
        CallParameters for ``getExpectedReturn(fromToken, destToken, amount, parts, flags)``
    """
    ether_in = check_ether_in_out(currency_amount_in.currency, currency_out)

    amount = to_hex(currency_amount_in)
    from_token = currency_address(currency_amount_in.currency)
    dest_token = currency_address(currency_out)
    flags = to_hex_number(options.flags)
    parts = to_hex_number(options.parts)

    value = amount if ether_in else ZERO_HEX
    logger.debug("getExpectedReturn %s -> %s: amount %s, parts %s", from_token, dest_token, amount, parts)
    return CallParameters(
        method_name='getExpectedReturn',
        args=[from_token, dest_token, amount, parts, flags],
        value=value,
    )
