# -*- coding: utf-8 -*-
# kraken_client/core/kernel/transport.py
# Minimal HTTP contract the request agent depends on.
# Plain base class with NotImplementedError, same as the driver interfaces.

import json
import logging

import requests

from kraken_client.core.kernel.errors import TransportError

logger = logging.getLogger(__name__)


class Response(object):
    """Structured HTTP response handed back to callers untouched."""

    def __init__(self, status, headers=None, body=""):
        self.status = status
        self.headers = dict(headers or {})
        self.body = body

    @property
    def ok(self):
        return 200 <= self.status < 300

    def json(self):
        return json.loads(self.body)

    def __repr__(self):
        return "Response(status=%r, body=%r)" % (self.status, self.body[:200])


class Transport(object):
    # ---- HTTP verbs ----
    def get(self, url, headers=None, timeout=None):
        """GET url (query string already encoded), return Response.
           :param url: absolute url
           :param headers: dict of request headers
           :param timeout: deadline in seconds
        """
        raise NotImplementedError

    def post(self, url, data, headers=None, timeout=None):
        """POST an already url-encoded body, return Response.
           :param url: absolute url
           :param data: url-encoded form body (str)
           :param headers: dict of request headers
           :param timeout: deadline in seconds
        """
        raise NotImplementedError

    def close(self):
        pass


class RequestsTransport(Transport):
    """Transport backed by a requests.Session."""

    def __init__(self, session=None):
        self._session = session or requests.Session()

    def get(self, url, headers=None, timeout=None):
        return self._send("GET", url, headers=headers, timeout=timeout)

    def post(self, url, data, headers=None, timeout=None):
        return self._send("POST", url, data=data, headers=headers, timeout=timeout)

    def _send(self, method, url, data=None, headers=None, timeout=None):
        try:
            resp = self._session.request(method, url, data=data, headers=headers, timeout=timeout)
        except requests.Timeout as e:
            raise TransportError("%s %s timed out after %ss" % (method, url, timeout)) from e
        except requests.RequestException as e:
            raise TransportError("%s %s failed: %s" % (method, url, e)) from e

        response = Response(resp.status_code, resp.headers, resp.text)
        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            logger.debug("%s %s -> HTTP %s", method, url, resp.status_code)
            raise TransportError(
                "%s %s returned HTTP %s" % (method, url, resp.status_code),
                status=resp.status_code,
                response=response,
            ) from e
        return response

    def close(self):
        self._session.close()
