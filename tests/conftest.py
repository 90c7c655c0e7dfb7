import pytest

from entities import CurrencyAmount, SmartBCH, Token, TradeQuote


# -----------------------------
# Currencies
# -----------------------------

@pytest.fixture()
def ether() -> SmartBCH:
    return SmartBCH.on_chain(10000)


@pytest.fixture()
def token0() -> Token:
    return Token(10000, '0x0000000000000000000000000000000000000001', 18, 't0')


@pytest.fixture()
def token1() -> Token:
    return Token(10000, '0x0000000000000000000000000000000000000002', 18, 't1')


@pytest.fixture()
def token2() -> Token:
    return Token(10000, '0x0000000000000000000000000000000000000003', 18, 't2')


@pytest.fixture()
def usdc() -> Token:
    return Token(10000, '0x5aaeb6053f3e94c9b9a09f33669435e7ef1beaed', 6, 'USDC')


# -----------------------------
# Trades
# -----------------------------

@pytest.fixture()
def exact_in(token0, token2) -> TradeQuote:
    """100 t0 for 100 t2, the reference trade."""
    return TradeQuote(
        CurrencyAmount.from_raw_amount(token0, 100),
        CurrencyAmount.from_raw_amount(token2, 100),
        [],
        1
    )
