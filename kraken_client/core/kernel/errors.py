# -*- coding: utf-8 -*-
# kraken_client/core/kernel/errors.py
# Exceptions raised by the client. Kraken's own {"error": [...]} payloads are
# not exceptions: they come back as ordinary responses.


class KrakenError(Exception):
    """Base class for every error raised by kraken_client."""
    pass


class NotAuthenticated(KrakenError):
    """Private endpoint called before API keys were supplied."""
    pass


class InvalidKeyEncoding(KrakenError, ValueError):
    """The private key is not valid base64."""
    pass


class InvalidParameters(KrakenError, ValueError):
    """Missing/unknown endpoint fields, a caller supplied nonce, bad credentials or config."""
    pass


class TransportError(KrakenError):
    """Network failure, timeout or non-2xx HTTP status."""

    def __init__(self, message, status=None, response=None):
        super(TransportError, self).__init__(message)
        self.status = status
        self.response = response
