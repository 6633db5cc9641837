# -*- coding: utf-8 -*-
# kraken_client/drivers/kraken/__init__.py
# Kraken REST driver package

from .agent import ApiAuth, RequestAgent, RequestConfig
from .kraken import KrakenClient, get_client
from .nonce import NonceGenerator, generate_nonce
from .signer import Signer, sign_message
from .driver import init_KrakenClient

__all__ = [
    'ApiAuth',
    'RequestAgent',
    'RequestConfig',
    'KrakenClient',
    'get_client',
    'NonceGenerator',
    'generate_nonce',
    'Signer',
    'sign_message',
    'init_KrakenClient',
]
