# -*- coding: utf-8 -*-
# tests/test_util.py

import logging
from decimal import Decimal
from urllib.parse import parse_qsl

from kraken_client.drivers.kraken.util import encode_params, format_value, setup_logger


def test_empty():
    assert encode_params(None) == ''
    assert encode_params({}) == ''


def test_insertion_order_is_kept():
    assert encode_params({'nonce': 1, 'b': 'x', 'a': 'y'}) == 'nonce=1&b=x&a=y'


def test_none_values_are_dropped():
    assert encode_params({'pair': 'XBTUSD', 'since': None}) == 'pair=XBTUSD'


def test_bracket_keys_stay_flat():
    encoded = encode_params({'close[price]': 45000, 'close[price2]': 46000})
    assert encoded == 'close%5Bprice%5D=45000&close%5Bprice2%5D=46000'
    assert parse_qsl(encoded) == [('close[price]', '45000'), ('close[price2]', '46000')]


def test_hyphen_keys_pass_through():
    assert encode_params({'fee-info': True}) == 'fee-info=true'


def test_reserved_characters():
    assert encode_params({'pair': 'XBTUSD,ETHUSD', 'oflags': 'post fciq'}) == \
        'pair=XBTUSD%2CETHUSD&oflags=post+fciq'


def test_format_value():
    assert format_value(True) == 'true'
    assert format_value(False) == 'false'
    assert format_value(37500.0) == '37500'
    assert format_value(0.5) == '0.5'
    assert format_value(1616492376594000) == '1616492376594000'
    assert format_value('limit') == 'limit'


def test_small_and_large_floats_never_use_exponents():
    assert format_value(1.234e-05) == '0.00001234'
    assert format_value(5e-05) == '0.00005'
    assert format_value(1e21) == '1000000000000000000000'
    assert format_value(1.5e-10) == '0.00000000015'
    assert encode_params({'price': 0.00001234}) == 'price=0.00001234'


def test_decimal_values():
    assert format_value(Decimal('0.00001234')) == '0.00001234'
    assert format_value(Decimal('1.2500')) == '1.25'
    assert format_value(Decimal('1E-7')) == '0.0000001'
    assert format_value(Decimal('37500')) == '37500'


def test_setup_logger_is_idempotent():
    logger = setup_logger('kraken_client.test_logger', level=logging.DEBUG)
    again = setup_logger('kraken_client.test_logger')
    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
