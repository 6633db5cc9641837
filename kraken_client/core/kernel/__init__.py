# -*- coding: utf-8 -*-
# kraken_client/core/kernel/__init__.py

from .errors import (  # noqa: F401
    InvalidKeyEncoding,
    InvalidParameters,
    KrakenError,
    NotAuthenticated,
    TransportError,
)
from .transport import RequestsTransport, Response, Transport  # noqa: F401
