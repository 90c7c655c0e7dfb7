import pytest

from aggregator import direct_exchange_call_parameters, get_signer_call_parameters, pack_due_time
from entities import CurrencyAmount, EtherInOutError

R = '0x' + '11' * 32
S = '0x' + '22' * 32


def test_pack_due_time():
    assert pack_due_time('0x10', 27, 1) == '0x101b01'
    assert pack_due_time('16', 27, 1) == '0x101b01'
    assert pack_due_time('0x0', 0, 0) == '0x0'


def test_pack_due_time_rejects_oversized_fields():
    with pytest.raises(ValueError):
        pack_due_time('0x10', 256, 1)
    with pytest.raises(ValueError):
        pack_due_time('0x10', 27, -1)


def test_get_signer_forwards_arguments():
    params = get_signer_call_parameters('0x1', '0x2', '0x3', R, S)
    assert params.method_name == 'getSigner'
    assert params.args == ['0x1', '0x2', '0x3', R, S]
    assert params.value == '0x0'


def test_direct_exchange(token0, token1):
    params = direct_exchange_call_parameters(
        CurrencyAmount.from_raw_amount(token0, 1000),
        CurrencyAmount.from_raw_amount(token1, 900),
        '0xaa', '0xbb', '0x10', R, S, 27, 1
    )
    assert params.method_name == 'directExchange'
    assert params.args == ['0xaa', '0xbb', '0x101b01', R, S]
    assert params.value == '0x0'


def test_direct_exchange_native_input_sends_value(ether, token1):
    params = direct_exchange_call_parameters(
        CurrencyAmount.from_raw_amount(ether, 1000),
        CurrencyAmount.from_raw_amount(token1, 900),
        '0xaa', '0xbb', '0x10', R, S, 28, 0
    )
    assert params.value == '0x3e8'


def test_direct_exchange_rejects_ether_in_out(ether):
    with pytest.raises(EtherInOutError):
        direct_exchange_call_parameters(
            CurrencyAmount.from_raw_amount(ether, 1000),
            CurrencyAmount.from_raw_amount(ether, 900),
            '0xaa', '0xbb', '0x10', R, S, 27, 1
        )
