# -*- coding: utf-8 -*-
# kraken_client/drivers/kraken/nonce.py
# Nonces must strictly increase per API key or Kraken rejects the call
# with EAPI:Invalid nonce.

import threading
import time


class NonceGenerator(object):
    """
    Thread-safe, strictly increasing nonce source.

    Values are microseconds since the epoch. Two calls inside the same clock
    tick (or a clock that steps backwards) get last + 1 instead.
    """

    def __init__(self, clock=None):
        self._clock = clock or time.time_ns
        self._lock = threading.Lock()
        self._last = 0

    def next(self):
        with self._lock:
            candidate = self._clock() // 1000
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return candidate

    __call__ = next


# process-wide default shared by every agent
_default_generator = NonceGenerator()


def generate_nonce():
    """Return the next nonce from the process-wide generator."""
    return _default_generator.next()
