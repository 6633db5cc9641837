# -*- coding: utf-8 -*-
# tests/conftest.py

import sys
from pathlib import Path

import pytest

# Ensure project root (which contains the `kraken_client/` package directory) is on sys.path
_THIS_FILE = Path(__file__).resolve()
_PROJECT_ROOT = _THIS_FILE.parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from kraken_client.core.kernel.transport import Response, Transport

# base64('privatekey')
PRIVATE_KEY = 'cHJpdmF0ZWtleQ=='
FIXED_NONCE = 1616492376594000


class RecordingTransport(Transport):
    """Records every call instead of touching the network."""

    def __init__(self, response=None, error=None):
        self.calls = []
        self.response = response or Response(200, {}, '{"error":[],"result":{}}')
        self.error = error

    def _record(self, method, url, data, headers, timeout):
        self.calls.append({
            'method': method,
            'url': url,
            'data': data,
            'headers': dict(headers or {}),
            'timeout': timeout,
        })
        if self.error is not None:
            raise self.error
        return self.response

    def get(self, url, headers=None, timeout=None):
        return self._record('GET', url, None, headers, timeout)

    def post(self, url, data, headers=None, timeout=None):
        return self._record('POST', url, data, headers, timeout)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def fixed_nonce():
    return lambda: FIXED_NONCE
