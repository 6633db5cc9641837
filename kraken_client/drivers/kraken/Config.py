# -*- coding: utf-8 -*-
# kraken_client/drivers/kraken/Config.py
# Kraken REST API defaults. Per-call overrides are laid over these.

API_CONFIG = {
    'root_url': 'https://api.kraken.com',
    'timeout': 15000,   # milliseconds
    'version': 0,
}

USER_AGENT = 'Kraken API Client (kraken-client python package)'

# Environment variable names read by configs/
ENV_ROOT_URL = 'KRAKEN_ROOT_URL'
ENV_TIMEOUT_MS = 'KRAKEN_TIMEOUT_MS'
ENV_API_VERSION = 'KRAKEN_API_VERSION'
ENV_API_KEY = 'KRAKEN_API_KEY'
ENV_API_SECRET = 'KRAKEN_API_SECRET'
ENV_CONFIG_DIR = 'KRAKEN_CONFIG_DIR'
