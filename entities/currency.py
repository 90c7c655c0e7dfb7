"""
Currency metadata: native assets and ERC20-style tokens.
"""

from typing import Optional

from utils.token_utils import validate_and_parse_address
from .constants import ChainId


class Currency:
    """Fields shared by native currencies and tokens."""

    is_native = False
    is_token = False

    def __init__(self, chain_id: int, decimals: int, symbol: Optional[str] = None, name: Optional[str] = None):
        if not isinstance(chain_id, int) or isinstance(chain_id, bool):
            raise TypeError(f"chain_id must be an integer, got {chain_id!r}")
        if not isinstance(decimals, int) or not 0 <= decimals < 256:
            raise ValueError(f"decimals must be an integer in [0, 255], got {decimals!r}")
        self.chain_id = chain_id
        self.decimals = decimals
        self.symbol = symbol
        self.name = name

    def equals(self, other: 'Currency') -> bool:
        raise NotImplementedError

    def __eq__(self, other):
        if not isinstance(other, Currency):
            return NotImplemented
        return self.equals(other)

    def __hash__(self):
        raise NotImplementedError


class NativeCurrency(Currency):
    """The chain's base asset. It has no contract address."""

    is_native = True

    def equals(self, other: Currency) -> bool:
        return other.is_native and type(other) is type(self) and other.chain_id == self.chain_id

    def __hash__(self):
        return hash((type(self).__name__, self.chain_id))

    def __repr__(self):
        return f"{type(self).__name__}(chain_id={self.chain_id})"


class Token(Currency):
    """A token contract identified by chain id and address."""

    is_token = True

    def __init__(self, chain_id: int, address: str, decimals: int, symbol: Optional[str] = None, name: Optional[str] = None):
        super().__init__(chain_id, decimals, symbol, name)
        self.address = validate_and_parse_address(address)

    def equals(self, other: Currency) -> bool:
        return other.is_token and other.chain_id == self.chain_id and other.address == self.address

    def sorts_before(self, other: 'Token') -> bool:
        """True when this token's address is lower than ``other``'s."""
        if self.chain_id != other.chain_id:
            raise ValueError("CHAIN_IDS")
        if self.address == other.address:
            raise ValueError("ADDRESSES")
        return self.address.lower() < other.address.lower()

    def __hash__(self):
        return hash(('Token', self.chain_id, self.address))

    def __repr__(self):
        return f"Token(chain_id={self.chain_id}, address={self.address!r}, symbol={self.symbol!r})"


class SmartBCH(NativeCurrency):
    """BCH on smartBCH, 18 decimals."""

    _cache = {}

    def __init__(self, chain_id: int):
        super().__init__(chain_id, 18, 'BCH', 'Bitcoin Cash')

    @classmethod
    def on_chain(cls, chain_id: int = ChainId.SMARTBCH) -> 'SmartBCH':
        chain_id = int(chain_id)
        if chain_id not in cls._cache:
            cls._cache[chain_id] = cls(chain_id)
        return cls._cache[chain_id]
