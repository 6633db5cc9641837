# -*- coding: utf-8 -*-
# kraken_client/drivers/kraken/agent.py
"""
RequestAgent - single point of contact for all outbound Kraken calls.

- holds the API keys (optional; attach later with upgrade())
- public endpoints:  GET  {root}/{version}/public/{Endpoint}?{query}
- private endpoints: POST {root}/{version}/private/{Endpoint}, signed
- injects the nonce, signs, dispatches through the transport
- no retries, no rate limiting: failures go straight back to the caller
"""

import logging
from collections import namedtuple

from kraken_client.core.kernel.errors import InvalidParameters, NotAuthenticated
from kraken_client.core.kernel.transport import RequestsTransport
from kraken_client.drivers.kraken.Config import API_CONFIG, USER_AGENT
from kraken_client.drivers.kraken.nonce import generate_nonce
from kraken_client.drivers.kraken.signer import Signer, sign_message
from kraken_client.drivers.kraken.util import encode_params

logger = logging.getLogger(__name__)


class ApiAuth(namedtuple('ApiAuth', ['public_key', 'private_key'])):
    """API key pair. private_key is the base64 secret shown by Kraken."""
    __slots__ = ()

    def __repr__(self):
        # never print the secret
        return "ApiAuth(public_key=%r, private_key='***')" % (self.public_key,)

    @classmethod
    def coerce(cls, auth):
        """Accept an ApiAuth or a dict with public_key/private_key (or publicKey/privateKey)."""
        if auth is None or isinstance(auth, cls):
            return auth
        if isinstance(auth, dict):
            public_key = auth.get('public_key', auth.get('publicKey'))
            private_key = auth.get('private_key', auth.get('privateKey'))
        else:
            try:
                public_key, private_key = auth
            except (TypeError, ValueError):
                raise InvalidParameters("credentials must be ApiAuth, a dict or a (public, private) pair")
        if not public_key or not private_key:
            raise InvalidParameters("credentials need both public_key and private_key")
        return cls(public_key, private_key)


_CONFIG_ALIASES = {
    'root_url': 'root_url',
    'rootUrl': 'root_url',
    'timeout': 'timeout',
    'version': 'version',
}


class RequestConfig(namedtuple('RequestConfig', ['root_url', 'timeout', 'version'])):
    """Immutable request settings. timeout is in milliseconds."""
    __slots__ = ()

    @classmethod
    def default(cls):
        return cls(**API_CONFIG)

    def merge(self, override=None):
        """
        Lay override over this config field by field.

        Args:
            override: RequestConfig, dict (root_url/rootUrl, timeout, version) or None.
                      None fields keep the current value.

        Returns:
            RequestConfig: a new config; self is untouched
        """
        if override is None:
            return self
        if isinstance(override, RequestConfig):
            items = override._asdict().items()
        elif isinstance(override, dict):
            items = override.items()
        else:
            raise InvalidParameters("config override must be a RequestConfig or dict, got %r" % (override,))

        changes = {}
        for key, value in items:
            field = _CONFIG_ALIASES.get(key)
            if field is None:
                raise InvalidParameters("unknown config field: %s" % key)
            if value is not None:
                changes[field] = value
        return self._replace(**changes)

    @property
    def timeout_seconds(self):
        return self.timeout / 1000.0

    def public_path(self, endpoint):
        return "/%s/public/%s" % (self.version, endpoint)

    def private_path(self, endpoint):
        return "/%s/private/%s" % (self.version, endpoint)

    def url(self, path):
        return self.root_url.rstrip('/') + path


class RequestAgent(object):
    """
    Builds, signs and sends Kraken requests.

    One instance may be shared between threads; the only shared mutable
    piece is the nonce generator, which serialises itself.
    """

    def __init__(self, auth=None, config=None, transport=None, nonce_generator=None):
        """
        Args:
            auth: ApiAuth / dict / None (unauthenticated)
            config: RequestConfig or dict override of the defaults
            transport: Transport implementation, RequestsTransport by default
            nonce_generator: zero-arg callable returning the next nonce
        """
        self._auth = ApiAuth.coerce(auth)
        self._signer = None
        self.config = RequestConfig.default().merge(config)
        self.transport = transport or RequestsTransport()
        self._next_nonce = nonce_generator or generate_nonce

    @property
    def auth(self):
        return self._auth

    def is_upgraded(self):
        """True when API keys are present."""
        return self._auth is not None

    def upgrade(self, new_auth):
        """Replace the API keys wholesale. There is no downgrade."""
        auth = ApiAuth.coerce(new_auth)
        if auth is None:
            raise InvalidParameters("upgrade requires credentials")
        self._auth = auth
        logger.info("RequestAgent upgraded with new API keys")

    def _signer_for(self, auth):
        # one Signer per key pair; the secret is decoded once, not per request
        cached = self._signer
        if cached is None or cached[0] is not auth:
            cached = (auth, Signer(auth.private_key))
            self._signer = cached
        return cached[1]

    # kept on the agent for convenience
    sign_message = staticmethod(sign_message)

    def get_public_endpoint(self, endpoint, query_params=None, config_override=None):
        """
        GET a public (unauthenticated) endpoint.

        Args:
            endpoint: e.g. 'Ticker'
            query_params: dict encoded into the query string
            config_override: per-call RequestConfig/dict

        Returns:
            Response: as returned by the transport
        """
        config = self.config.merge(config_override)
        uri = config.public_path(endpoint)
        query = encode_params(query_params)
        if query:
            uri += "?" + query

        headers = {'User-Agent': USER_AGENT}
        logger.debug("GET %s", uri)
        return self.transport.get(config.url(uri), headers=headers, timeout=config.timeout_seconds)

    def post_to_private_endpoint(self, endpoint, data=None, config_override=None):
        """
        POST to a private endpoint with nonce, API-Key and API-Sign.

        Args:
            endpoint: e.g. 'Balance'
            data: dict of endpoint fields; must not contain 'nonce'
            config_override: per-call RequestConfig/dict

        Returns:
            Response: as returned by the transport

        Raises:
            NotAuthenticated: no API keys, nothing is sent
            InvalidParameters: caller supplied a nonce
            InvalidKeyEncoding: private key is not base64
        """
        # read once so a concurrent upgrade() cannot mix two key pairs
        auth = self._auth
        if auth is None:
            logger.warning("refusing private call to %s: api keys are required", endpoint)
            raise NotAuthenticated("api keys are required to access private endpoints")

        data = dict(data or {})
        if 'nonce' in data:
            raise InvalidParameters("nonce is generated by the agent and must not be supplied")

        config = self.config.merge(config_override)
        uri = config.private_path(endpoint)

        body = {'nonce': self._next_nonce()}
        body.update(data)

        headers = {
            'User-Agent': USER_AGENT,
            'Content-Type': 'application/x-www-form-urlencoded; charset=utf-8',
            'API-Key': auth.public_key,
            'API-Sign': self._signer_for(auth).sign(uri, body),
        }

        logger.debug("POST %s nonce=%s", uri, body['nonce'])
        return self.transport.post(
            config.url(uri), encode_params(body), headers=headers, timeout=config.timeout_seconds
        )
