"""
Contract bindings: ABIs, calldata encoding and unsigned transaction building.

The call parameters carry hex strings; they are converted to ABI values here,
just before the call is handed to web3.
"""

import logging
from typing import Dict, List, Optional

from eth_abi import encode
from eth_utils import function_signature_to_4byte_selector, to_bytes
from web3 import Web3

from utils.conversion_utils import ZERO_HEX
from utils.token_utils import validate_and_parse_address
from .smart_swap import CallParameters

logger = logging.getLogger(__name__)


def _uint_inputs(*names):
    return [{"internalType": "uint256", "name": name, "type": "uint256"} for name in names]


SMART_SWAP_ABI = [
    {
        "inputs": [
            {"internalType": "contract IERC20", "name": "fromToken", "type": "address"},
            {"internalType": "contract IERC20", "name": "destToken", "type": "address"},
            {"internalType": "uint256", "name": "amount", "type": "uint256"},
            {"internalType": "uint256", "name": "minReturn", "type": "uint256"},
            {"internalType": "uint256[]", "name": "distribution", "type": "uint256[]"},
            *_uint_inputs("flags", "deadline", "feePercent"),
        ],
        "name": "swap",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "payable",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "contract IERC20", "name": "fromToken", "type": "address"},
            {"internalType": "contract IERC20", "name": "destToken", "type": "address"},
            *_uint_inputs("amount", "parts", "flags"),
        ],
        "name": "getExpectedReturn",
        "outputs": [
            {"internalType": "uint256", "name": "returnAmount", "type": "uint256"},
            {"internalType": "uint256[]", "name": "distribution", "type": "uint256[]"}
        ],
        "stateMutability": "view",
        "type": "function"
    },
]

LIMIT_ORDER_ABI = [
    {
        "inputs": [
            *_uint_inputs("coinsToMaker", "coinsToTaker", "dueTime80_v8_version8"),
            {"internalType": "bytes32", "name": "r", "type": "bytes32"},
            {"internalType": "bytes32", "name": "s", "type": "bytes32"}
        ],
        "name": "getSigner",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            *_uint_inputs("coinsToMaker", "coinsToTaker", "dueTime80_v8_version8"),
            {"internalType": "bytes32", "name": "r", "type": "bytes32"},
            {"internalType": "bytes32", "name": "s", "type": "bytes32"}
        ],
        "name": "directExchange",
        "outputs": [],
        "stateMutability": "payable",
        "type": "function"
    },
]


def _parse_uint(value) -> int:
    if isinstance(value, int):
        return value
    value = value.strip()
    if value.lower().startswith('0x'):
        return int(value, 16)
    return int(value, 10)


def _to_abi_value(abi_type: str, value):
    if abi_type.endswith('[]'):
        return [_to_abi_value(abi_type[:-2], item) for item in value]
    if abi_type == 'address':
        return validate_and_parse_address(value)
    if abi_type.startswith('uint'):
        return _parse_uint(value)
    if abi_type.startswith('bytes'):
        return to_bytes(hexstr=value)
    raise ValueError(f"Unsupported ABI type: {abi_type}")


def find_function_abi(method_name: str, abi: Optional[List[Dict]] = None) -> Dict:
    """
    Look up a function entry by name.
    
    Args:
        method_name: Function name, e.g. 'swap'
        abi: ABI to search (defaults to the aggregator and limit-order ABIs)
        
    Returns:
        ABI entry of the function
    """
    entries = abi if abi is not None else SMART_SWAP_ABI + LIMIT_ORDER_ABI
    for entry in entries:
        if entry.get('type') == 'function' and entry.get('name') == method_name:
            return entry
    raise ValueError(f"Function {method_name!r} not found in ABI")


def decode_args(params: CallParameters, abi: Optional[List[Dict]] = None) -> list:
    """
    Convert hex string arguments into ABI values.
    
    Args:
        params: Call parameters produced by the encoders
        abi: ABI holding the target function
        
    Returns:
        Argument values in call order (ints, checksummed addresses, bytes)
    """
    inputs = find_function_abi(params.method_name, abi)['inputs']
    if len(inputs) != len(params.args):
        raise ValueError(
            f"{params.method_name} expects {len(inputs)} arguments, got {len(params.args)}"
        )
    return [_to_abi_value(item['type'], arg) for item, arg in zip(inputs, params.args)]


def encode_call_data(params: CallParameters, abi: Optional[List[Dict]] = None) -> str:
    """
    ABI-encode a call: 4-byte selector followed by the encoded arguments.
    
    Args:
        params: Call parameters produced by the encoders
        abi: ABI holding the target function
        
    Returns:
        0x-prefixed calldata
    """
    inputs = find_function_abi(params.method_name, abi)['inputs']
    types = [item['type'] for item in inputs]
    signature = f"{params.method_name}({','.join(types)})"
    selector = function_signature_to_4byte_selector(signature)
    return '0x' + (selector + encode(types, decode_args(params, abi))).hex()


def get_aggregator_contract(w3: Web3, address: str, abi: Optional[List[Dict]] = None):
    """Contract object for the aggregator (or the limit-order contract with its ABI)."""
    return w3.eth.contract(
        address=validate_and_parse_address(address),
        abi=abi if abi is not None else SMART_SWAP_ABI
    )


def build_transaction(
    w3: Web3,
    contract_address: str,
    params: CallParameters,
    sender: str,
    nonce: int,
    gas: int,
    gas_price: int,
    chain_id: int,
    abi: Optional[List[Dict]] = None
) -> Dict:
    """
    Build an unsigned transaction for a call.
    
    Every fee and nonce field is supplied by the caller, so no RPC request is
    made. Signing and sending are left to the caller.
    
    Args:
        w3: Web3 instance
        contract_address: Aggregator or limit-order contract address
        params: Call parameters produced by the encoders
        sender: Address the transaction is sent from
        nonce: Sender nonce
        gas: Gas limit
        gas_price: Gas price in wei
        chain_id: Chain id for replay protection
        abi: ABI of the target contract (defaults to the aggregator's)
        
    Returns:
        Transaction dictionary ready to be signed
    """
    contract = get_aggregator_contract(w3, contract_address, abi)
    function = getattr(contract.functions, params.method_name)
    transaction = function(*decode_args(params, contract.abi)).build_transaction({
        'from': validate_and_parse_address(sender),
        'gas': gas,
        'gasPrice': gas_price,
        'nonce': nonce,
        'chainId': chain_id,
        'value': _parse_uint(params.value or ZERO_HEX)
    })
    logger.debug("Built %s transaction to %s (value %s)", params.method_name, transaction['to'], params.value)
    return transaction
