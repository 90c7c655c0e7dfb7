"""
CREATE2 address derivation for pairs and constant-product pools.
"""

from eth_abi import encode
from eth_utils import keccak, to_bytes, to_checksum_address


def _sorted_tokens(token_a, token_b):
    return (token_a, token_b) if token_a.sorts_before(token_b) else (token_b, token_a)


def get_create2_address(deployer_address: str, salt: bytes, init_code_hash: bytes) -> str:
    """
    Address of a contract deployed with CREATE2.
    
    Args:
        deployer_address: Factory/deployer contract address
        salt: 32-byte salt
        init_code_hash: 32-byte keccak of the init code
        
    Returns:
        Checksummed contract address
    """
    if len(salt) != 32 or len(init_code_hash) != 32:
        raise ValueError("salt and init code hash must be 32 bytes")
    digest = keccak(b'\xff' + to_bytes(hexstr=deployer_address) + salt + init_code_hash)
    return to_checksum_address(digest[12:])


def compute_pair_address(factory_address: str, token_a, token_b, init_code_hash: str) -> str:
    """
    Address of the pair contract for two tokens.
    
    Args:
        factory_address: Pair factory address
        token_a: One token of the pair
        token_b: The other token
        init_code_hash: Hex keccak of the pair init code, see INIT_CODE_HASH
        
    Returns:
        Checksummed pair address
    """
    token0, token1 = _sorted_tokens(token_a, token_b)
    salt = keccak(to_bytes(hexstr=token0.address) + to_bytes(hexstr=token1.address))
    return get_create2_address(factory_address, salt, to_bytes(hexstr=init_code_hash))


def compute_pool_init_code_hash(creation_code: str, deploy_data: bytes, master_deployer_address: str) -> bytes:
    """Init code hash of a pool deployed by a master deployer."""
    constructor_args = encode(['bytes', 'address'], [deploy_data, master_deployer_address])
    return keccak(to_bytes(hexstr=creation_code) + constructor_args)


def compute_constant_product_pool_address(
    factory_address: str,
    token_a,
    token_b,
    fee: int,
    twap: bool,
    creation_code: str,
    master_deployer_address: str
) -> str:
    """
    Address of a constant-product pool.
    
    Args:
        factory_address: Pool factory address
        token_a: One token of the pool
        token_b: The other token
        fee: Pool fee in basis points
        twap: Whether the pool tracks a time-weighted average price
        creation_code: Hex pool creation bytecode
        master_deployer_address: Master deployer address
        
    Returns:
        Checksummed pool address
    """
    token0, token1 = _sorted_tokens(token_a, token_b)
    deploy_data = encode(['address', 'address', 'uint256', 'bool'], [token0.address, token1.address, fee, twap])
    init_code_hash = compute_pool_init_code_hash(creation_code, deploy_data, master_deployer_address)
    return get_create2_address(factory_address, keccak(deploy_data), init_code_hash)
