"""
Call-parameter encoders for the SmartSwap aggregator and limit-order contracts.
"""

from .smart_swap import (
    CallParameters,
    TradeOptions,
    TradeOptionsDeadline,
    GetExpectedReturnOptions,
    swap_call_parameters,
    get_expected_return_call_parameters,
)
from .limit_order import pack_due_time, get_signer_call_parameters, direct_exchange_call_parameters
from .contract import (
    SMART_SWAP_ABI,
    LIMIT_ORDER_ABI,
    decode_args,
    encode_call_data,
    get_aggregator_contract,
    build_transaction,
)

__all__ = [
    'CallParameters',
    'TradeOptions',
    'TradeOptionsDeadline',
    'GetExpectedReturnOptions',
    'swap_call_parameters',
    'get_expected_return_call_parameters',
    'pack_due_time',
    'get_signer_call_parameters',
    'direct_exchange_call_parameters',
    'SMART_SWAP_ABI',
    'LIMIT_ORDER_ABI',
    'decode_args',
    'encode_call_data',
    'get_aggregator_contract',
    'build_transaction',
]
