"""
Token address helpers: validation, checksumming and native-asset sentinels.
"""

from eth_utils import is_address, is_checksum_address, is_checksum_formatted_address, to_checksum_address

# Sentinel the aggregator contracts use for the native asset
ADDRESS_ZERO = '0x0000000000000000000000000000000000000000'


def validate_and_parse_address(address: str) -> str:
    """
    Validate an address and return it in checksum form.
    
    Args:
        address: 20-byte hex address, lowercase or correctly checksummed
        
    Returns:
        EIP-55 checksummed address
        
    Raises:
        InvalidAddressError: If the address is malformed or its checksum is wrong
    """
    from entities.exc import InvalidAddressError

    if not isinstance(address, str) or not is_address(address):
        raise InvalidAddressError(f"{address!r} is not a valid address")
    if is_checksum_formatted_address(address) and not is_checksum_address(address):
        raise InvalidAddressError(f"{address!r} has an invalid checksum")
    return to_checksum_address(address)


def currency_address(currency) -> str:
    """
    Address the aggregator expects for a currency.
    
    Args:
        currency: Token or native currency
        
    Returns:
        Token address, or ADDRESS_ZERO for the native asset
    """
    if currency.is_native:
        return ADDRESS_ZERO
    return currency.address
