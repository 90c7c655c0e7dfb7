"""
Trade quotes for the SmartSwap aggregator.
"""

import logging
from typing import Sequence

from .constants import ONE, ZERO
from .currency_amount import CurrencyAmount
from .exc import EtherInOutError, InvalidFeePercentError, InvalidFlagsError, InvalidSlippageToleranceError
from .fraction import Fraction
from .percent import Percent
from .price import Price

logger = logging.getLogger(__name__)


class TradeQuote:
    """
    A trade routed through the aggregator, fixed at construction.
    
    Does not account for slippage, i.e. trades that front run this trade and
    move the price; the bounds below add that buffer on the output side.
    """

    def __init__(
        self,
        input_amount: CurrencyAmount,
        output_amount: CurrencyAmount,
        distribution: Sequence[str],
        flags: int
    ):
        """
        Initialize trade quote.
        
        Args:
            input_amount: Amount sold, assuming no slippage
            output_amount: Amount bought, assuming no slippage
            distribution: Per-source allocation tokens from the route finder
            flags: Aggregator routing flags bitmask
        """
        if input_amount.currency.is_native and output_amount.currency.is_native:
            raise EtherInOutError()
        if isinstance(flags, bool) or not isinstance(flags, int) or flags < 0:
            raise InvalidFlagsError(f"{flags!r}")

        self.input_amount = input_amount
        self.output_amount = output_amount
        self.distribution = tuple(str(part) for part in distribution)
        self.flags = flags

    @property
    def execution_price(self) -> Price:
        """Output amount per input amount. A zero input amount raises ZeroDenominatorError."""
        return Price(
            self.input_amount.currency,
            self.output_amount.currency,
            self.input_amount.quotient,
            self.output_amount.quotient
        )

    @staticmethod
    def _validate(slippage_tolerance: Percent, fee_percent: Percent) -> None:
        if slippage_tolerance.less_than(ZERO):
            raise InvalidSlippageToleranceError(f"{slippage_tolerance!r}")
        if fee_percent.less_than(ZERO):
            raise InvalidFeePercentError(f"{fee_percent!r}")

    def minimum_amount_out(self, slippage_tolerance: Percent, fee_percent: Percent) -> CurrencyAmount:
        """
        Minimum amount that must be received for the given tolerances.
        
        The fee is deducted first and the slippage buffer second, each step
        truncated to an integer amount.
        
        Args:
            slippage_tolerance: Tolerance of unfavorable slippage from the execution price
            fee_percent: Aggregator fee
            
        Returns:
            Output-currency amount
        """
        self._validate(slippage_tolerance, fee_percent)

        fee_adjusted_amount_out = Fraction(ONE).add(fee_percent).invert().multiply(self.output_amount.quotient)
        slippage_adjusted_amount_out = Fraction(ONE).add(slippage_tolerance).invert().multiply(
            fee_adjusted_amount_out.quotient
        )

        logger.debug(
            "minimum_amount_out: raw out %d, after fee %d, after slippage %d",
            self.output_amount.quotient,
            fee_adjusted_amount_out.quotient,
            slippage_adjusted_amount_out.quotient,
        )
        return CurrencyAmount.from_raw_amount(self.output_amount.currency, slippage_adjusted_amount_out.quotient)

    def maximum_amount_in(self, slippage_tolerance: Percent, fee_percent: Percent) -> CurrencyAmount:
        """
        Maximum amount that can be spent for the given tolerances.
        
        The aggregator treats the quoted input as fixed, so this is always the
        input amount; the arguments are still validated.
        """
        self._validate(slippage_tolerance, fee_percent)
        return self.input_amount

    def worst_execution_price(self, slippage_tolerance: Percent, fee_percent: Percent) -> Price:
        """Execution price after accounting for fee and slippage tolerance."""
        return Price(
            self.input_amount.currency,
            self.output_amount.currency,
            self.maximum_amount_in(slippage_tolerance, fee_percent).quotient,
            self.minimum_amount_out(slippage_tolerance, fee_percent).quotient
        )

    def __repr__(self):
        return (
            f"TradeQuote(input_amount={self.input_amount!r}, output_amount={self.output_amount!r}, "
            f"distribution={list(self.distribution)!r}, flags={self.flags})"
        )
