# -*- coding: utf-8 -*-
# kraken_client/__init__.py
"""
Kraken REST API client.

    from kraken_client import get_client, ApiAuth

    client = get_client()
    client.get_ticker_information(pair='XBTUSD')

    client.upgrade(ApiAuth(public_key='...', private_key='...'))
    client.get_account_balance()
"""

from kraken_client.core.kernel.errors import (
    InvalidKeyEncoding,
    InvalidParameters,
    KrakenError,
    NotAuthenticated,
    TransportError,
)
from kraken_client.core.kernel.transport import RequestsTransport, Response, Transport
from kraken_client.drivers.kraken import (
    ApiAuth,
    KrakenClient,
    NonceGenerator,
    RequestAgent,
    RequestConfig,
    Signer,
    generate_nonce,
    get_client,
    init_KrakenClient,
    sign_message,
)

__version__ = "1.0.0"

__all__ = [
    'ApiAuth',
    'KrakenClient',
    'NonceGenerator',
    'RequestAgent',
    'RequestConfig',
    'Signer',
    'generate_nonce',
    'get_client',
    'init_KrakenClient',
    'sign_message',
    'Transport',
    'RequestsTransport',
    'Response',
    'KrakenError',
    'NotAuthenticated',
    'InvalidKeyEncoding',
    'InvalidParameters',
    'TransportError',
]
