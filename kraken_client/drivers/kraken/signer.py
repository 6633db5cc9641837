# -*- coding: utf-8 -*-
# kraken_client/drivers/kraken/signer.py
"""
Request signer for Kraken private endpoints.

    API-Sign = base64( HMAC-SHA512( base64decode(secret),
                                    path + SHA256(nonce + postdata) ) )

sign_message is exported so callers can check how requests get signed
without going through the network path.
"""
import base64
import binascii
import hashlib
import hmac

from kraken_client.core.kernel.errors import InvalidKeyEncoding
from kraken_client.drivers.kraken.util import encode_params


def decode_private_key(private_key):
    """Decode a base64 API secret, raising InvalidKeyEncoding on garbage."""
    try:
        return base64.b64decode(private_key, validate=True)
    except (binascii.Error, ValueError, TypeError) as e:
        raise InvalidKeyEncoding("private key is not valid base64: %s" % e) from e


def sign_message(path, post_body, private_key):
    """
    Compute the API-Sign header value.

    Args:
        path: request path, e.g. '/0/private/Balance'
        post_body: dict of form fields, including 'nonce'
        private_key: base64 encoded API secret

    Returns:
        str: base64 encoded HMAC-SHA512 signature
    """
    return _signature(path, post_body, decode_private_key(private_key))


def _signature(path, post_body, secret):
    message = encode_params(post_body)

    # nonce is not validated here; a missing one just hashes as ''
    nonce = post_body.get('nonce') if post_body else None
    nonce_str = '' if nonce is None else str(nonce)

    hash_digest = hashlib.sha256((nonce_str + message).encode('utf-8')).digest()
    mac = hmac.new(secret, path.encode('utf-8') + hash_digest, digestmod=hashlib.sha512)
    return base64.b64encode(mac.digest()).decode('ascii')


class Signer(object):
    """Holds one API secret and signs request bodies with it."""

    def __init__(self, private_key):
        self._secret = decode_private_key(private_key)

    def sign(self, path, post_body):
        return _signature(path, post_body, self._secret)
