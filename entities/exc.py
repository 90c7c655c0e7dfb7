"""
Exception types for trade quoting and call-parameter encoding.

Every error is a precondition failure raised before any arithmetic or
encoding takes place. The ``code`` attribute is a stable identifier that is
also used as the exception message.
"""

__all__ = [
    "SmartSwapError",
    "EtherInOutError",
    "InvalidSlippageToleranceError",
    "InvalidFeePercentError",
    "InvalidTtlError",
    "FractionInvertZeroError",
    "ZeroDenominatorError",
    "CurrencyMismatchError",
    "InvalidAmountError",
    "InvalidAddressError",
    "InvalidFlagsError",
]


class SmartSwapError(Exception):
    """Base class for all SDK precondition failures."""

    code = "INVARIANT"

    def __init__(self, detail: str = None):
        message = self.code if detail is None else f"{self.code}: {detail}"
        super().__init__(message)
        self.detail = detail


class EtherInOutError(SmartSwapError):
    """Raised when both sides of a trade are the chain's native asset."""
    code = "ETHER_IN_OUT"


class InvalidSlippageToleranceError(SmartSwapError):
    """Raised when a slippage tolerance is negative."""
    code = "SLIPPAGE_TOLERANCE"


class InvalidFeePercentError(SmartSwapError):
    """Raised when a fee percent is negative."""
    code = "FEE_PERCENT"


class InvalidTtlError(SmartSwapError):
    """Raised when a relative time-to-live is not strictly positive."""
    code = "TTL"


class FractionInvertZeroError(SmartSwapError):
    """Raised when inverting a fraction whose numerator is zero."""
    code = "INVERT_ZERO"


class ZeroDenominatorError(SmartSwapError):
    """Raised when a fraction would be built with a zero denominator."""
    code = "DENOMINATOR"


class CurrencyMismatchError(SmartSwapError):
    """Raised when amounts or prices of different currencies are combined."""
    code = "CURRENCY"


class InvalidAmountError(SmartSwapError):
    """Raised when a raw amount exceeds the uint256 range."""
    code = "AMOUNT"


class InvalidAddressError(SmartSwapError):
    """Raised when a string is not a valid 20-byte hex address."""
    code = "ADDRESS"


class InvalidFlagsError(SmartSwapError):
    """Raised when a routing flags bitmask is negative or not an integer."""
    code = "FLAGS"
