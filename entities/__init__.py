"""
Exact-arithmetic entities: fractions, percents, currencies, amounts, prices and trade quotes.
"""

from .constants import ChainId, INIT_CODE_HASH, MAX_UINT256, SOLIDITY_TYPE_MAXIMA, SolidityType
from .exc import (
    SmartSwapError,
    EtherInOutError,
    InvalidSlippageToleranceError,
    InvalidFeePercentError,
    InvalidTtlError,
    FractionInvertZeroError,
    ZeroDenominatorError,
    CurrencyMismatchError,
    InvalidAmountError,
    InvalidAddressError,
    InvalidFlagsError,
)
from .fraction import Fraction, Rounding
from .percent import Percent
from .currency import Currency, NativeCurrency, Token, SmartBCH
from .currency_amount import CurrencyAmount
from .price import Price
from .trade_quote import TradeQuote

__all__ = [
    'ChainId',
    'INIT_CODE_HASH',
    'MAX_UINT256',
    'SOLIDITY_TYPE_MAXIMA',
    'SolidityType',
    'SmartSwapError',
    'EtherInOutError',
    'InvalidSlippageToleranceError',
    'InvalidFeePercentError',
    'InvalidTtlError',
    'FractionInvertZeroError',
    'ZeroDenominatorError',
    'CurrencyMismatchError',
    'InvalidAmountError',
    'InvalidAddressError',
    'InvalidFlagsError',
    'Fraction',
    'Rounding',
    'Percent',
    'Currency',
    'NativeCurrency',
    'Token',
    'SmartBCH',
    'CurrencyAmount',
    'Price',
    'TradeQuote',
]
