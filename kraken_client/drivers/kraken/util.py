# -*- coding: utf-8 -*-
# kraken_client/drivers/kraken/util.py

import logging
from decimal import Decimal
from urllib.parse import urlencode


def format_value(value):
    """
    Render one form value the way Kraken expects.

    - bool: 'true' / 'false'
    - integral float: no trailing '.0' (37500.0 -> '37500')
    - float / Decimal: plain positional notation, never an exponent
      (1.234e-05 -> '0.00001234'), Kraken rejects '1.234e-05'
    - everything else: str()
    """
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return _plain_decimal(Decimal(repr(value)))
    if isinstance(value, Decimal):
        return _plain_decimal(value)
    if isinstance(value, str):
        return value
    return str(value)


def _plain_decimal(d):
    text = format(d, 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def encode_params(params):
    """
    URL-encode a flat mapping into a form/query string.

    Keys are kept in insertion order and encoded literally, so a key such as
    'close[price]' becomes 'close%5Bprice%5D' and is never re-nested.
    None values are dropped. Spaces become '+' (urlencode), so the output is
    not byte-identical to other encoders; the signature covers this exact
    string and the same string is sent.

    Args:
        params: dict-like of str -> str/int/float/bool, or None

    Returns:
        str: encoded string, '' for an empty/None mapping
    """
    if not params:
        return ''
    pairs = [(str(k), format_value(v)) for k, v in params.items() if v is not None]
    return urlencode(pairs)


def setup_logger(name='kraken_client', level=logging.INFO):
    """Attach a single stream handler to the named logger (idempotent)."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger
