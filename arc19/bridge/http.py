"""Shared ``requests`` session factory for gateway and indexer calls."""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from arc19.config import settings

USER_AGENT = "arc19-resolver"


def create_session(max_retries: int | None = None) -> requests.Session:
    """Return a session with the configured retry policy mounted.

    Retries are off by default; a failed fetch is reported to the caller
    rather than hidden.
    """
    retries = settings.http_max_retries if max_retries is None else max_retries
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    if retries > 0:
        retry = Retry(
            total=retries,
            backoff_factor=0.5,
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods=["GET"],
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount("https://", adapter)
        session.mount("http://", adapter)
    return session
