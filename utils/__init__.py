"""
Utility modules for hex encoding, address handling and pool address derivation.
"""

from .conversion_utils import (
    ZERO_HEX,
    convert_amount_to_smallest_unit,
    convert_amount_from_smallest_unit,
    to_hex,
    to_hex_number,
    to_wei_base,
    to_wei_base10,
    to_wei_base16,
)
from .token_utils import ADDRESS_ZERO, validate_and_parse_address, currency_address
from .pool_utils import (
    get_create2_address,
    compute_pair_address,
    compute_pool_init_code_hash,
    compute_constant_product_pool_address,
)

__all__ = [
    'ZERO_HEX',
    'convert_amount_to_smallest_unit',
    'convert_amount_from_smallest_unit',
    'to_hex',
    'to_hex_number',
    'to_wei_base',
    'to_wei_base10',
    'to_wei_base16',
    'ADDRESS_ZERO',
    'validate_and_parse_address',
    'currency_address',
    'get_create2_address',
    'compute_pair_address',
    'compute_pool_init_code_hash',
    'compute_constant_product_pool_address',
]
