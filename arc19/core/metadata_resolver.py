"""Fetch the JSON document (or raw bytes) behind a resolved gateway URL.

Failures never propagate: a network error, a non-2xx status or a body that
is not JSON all come back as ``None``.  Callers walking many snapshots must
be able to lose one document without losing the rest.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from arc19.bridge.http import create_session
from arc19.config import settings

logger = logging.getLogger(__name__)


class MetadataResolver:
    """Fetches JSON metadata over HTTP with a per-request timeout.

    Parameters
    ----------
    session:
        A ``requests.Session`` (or anything with a compatible ``get``).
        A fresh session from :func:`create_session` is used when omitted.
    timeout:
        Seconds ``requests`` waits to connect and between received bytes.
        It bounds each socket read, not the whole transfer: a server that
        keeps trickling data can hold one fetch past this value, but a
        stalled one cannot hang it forever.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        self._session = session or create_session()
        self._timeout = settings.http_timeout_seconds if timeout is None else timeout

    def _get(self, url: str) -> requests.Response | None:
        if not url:
            return None
        try:
            response = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as exc:
            logger.warning("Fetch failed for %s: %s", url, exc)
            return None

        if not 200 <= response.status_code < 300:
            logger.warning("Fetch for %s returned HTTP %s", url, response.status_code)
            return None
        return response

    def fetch_json(self, url: str) -> Any | None:
        """Return the parsed JSON at *url*, or ``None`` on any failure."""
        response = self._get(url)
        if response is None:
            return None
        try:
            return response.json()
        except ValueError as exc:
            logger.warning("Metadata at %s is not valid JSON: %s", url, exc)
            return None

    def fetch_bytes(self, url: str) -> bytes | None:
        """Return the raw body at *url* (e.g. an image), or ``None`` on failure."""
        response = self._get(url)
        return None if response is None else response.content


def fetch_json(url: str, *, timeout: float | None = None) -> Any | None:
    """One-shot convenience wrapper around :class:`MetadataResolver`."""
    return MetadataResolver(timeout=timeout).fetch_json(url)
