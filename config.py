"""
Runtime defaults for quoting and encoding, loaded from the environment or a .env file.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from aggregator import GetExpectedReturnOptions, TradeOptions
from entities import ChainId, Percent
from utils.token_utils import validate_and_parse_address


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw.strip(), 0)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """
    Defaults used when the caller does not pass explicit options.
    
    Attributes:
        chain_id: Chain the aggregator is deployed on
        aggregator_address: Aggregator contract address, if configured
        default_ttl: Swap validity in seconds
        default_slippage_bps: Slippage tolerance in basis points
        default_fee_bps: Aggregator fee in basis points
        default_parts: Number of distribution parts for quotes
        default_flags: Routing flags bitmask for quotes
    """
    chain_id: int = ChainId.SMARTBCH
    aggregator_address: Optional[str] = None
    default_ttl: int = 1800
    default_slippage_bps: int = 50
    default_fee_bps: int = 0
    default_parts: int = 10
    default_flags: int = 0

    def trade_options(self) -> TradeOptions:
        return TradeOptions(
            allowed_slippage=Percent.from_bps(self.default_slippage_bps),
            fee_percent=Percent.from_bps(self.default_fee_bps),
            ttl=self.default_ttl,
        )

    def expected_return_options(self) -> GetExpectedReturnOptions:
        return GetExpectedReturnOptions(parts=self.default_parts, flags=self.default_flags)


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Read settings from environment variables.
    
    Loads ``env_file`` (or a .env file found from the working directory) first;
    variables already set in the environment take precedence.
    
    Args:
        env_file: Optional path to a .env file
        
    Returns:
        Settings instance
    """
    load_dotenv(env_file)

    aggregator_address = os.getenv("SMARTSWAP_AGGREGATOR_ADDRESS") or None
    if aggregator_address is not None:
        aggregator_address = validate_and_parse_address(aggregator_address)

    return Settings(
        chain_id=_get_int("SMARTSWAP_CHAIN_ID", ChainId.SMARTBCH),
        aggregator_address=aggregator_address,
        default_ttl=_get_int("SMARTSWAP_TTL", 1800),
        default_slippage_bps=_get_int("SMARTSWAP_SLIPPAGE_BPS", 50),
        default_fee_bps=_get_int("SMARTSWAP_FEE_BPS", 0),
        default_parts=_get_int("SMARTSWAP_PARTS", 10),
        default_flags=_get_int("SMARTSWAP_FLAGS", 0),
    )
