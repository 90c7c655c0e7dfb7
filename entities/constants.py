"""
Chain identifiers and integer bounds shared by the entities and encoders.
"""

from enum import Enum, IntEnum


class ChainId(IntEnum):
    SMARTBCH = 10000
    SMARTBCH_AMBER = 10001


# Pair init code hashes used for CREATE2 pair address derivation
INIT_CODE_HASH = {
    ChainId.SMARTBCH: '0x2dbeb2ac7fec1a0ca22f2f2facac2c094afa2c7eafa87a518d7d4a6e37f514e8',
    ChainId.SMARTBCH_AMBER: '0x2dbeb2ac7fec1a0ca22f2f2facac2c094afa2c7eafa87a518d7d4a6e37f514e8',
}

ZERO = 0
ONE = 1


class SolidityType(str, Enum):
    uint8 = 'uint8'
    uint256 = 'uint256'


SOLIDITY_TYPE_MAXIMA = {
    SolidityType.uint8: 0xff,
    SolidityType.uint256: 2**256 - 1,
}

MAX_UINT256 = SOLIDITY_TYPE_MAXIMA[SolidityType.uint256]
