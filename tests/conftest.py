"""Shared test fixtures for arc19."""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from typing import Any

import pytest
import requests

from arc19.bridge.address import encode_address
from arc19.core.metadata_resolver import MetadataResolver
from arc19.models.history import EventPage, ReconfigurationEvent

GATEWAY = "https://gateway.test/ipfs/"


def digest_for(n: int) -> bytes:
    """A distinct, deterministic 32-byte digest per integer."""
    return hashlib.sha256(f"content-{n}".encode()).digest()


def address_for(n: int) -> str:
    return encode_address(digest_for(n))


# ---------------------------------------------------------------------------
# HTTP stubs
# ---------------------------------------------------------------------------


class StubResponse:
    """Just enough of ``requests.Response`` for the resolver and indexer."""

    def __init__(
        self,
        status_code: int = 200,
        payload: Any = None,
        text: str | None = None,
        content: bytes = b"",
    ) -> None:
        self.status_code = status_code
        self.content = content
        self._payload = payload
        self._text = text

    def json(self) -> Any:
        if self._text is not None:
            raise ValueError(f"not JSON: {self._text!r}")
        return self._payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")


class StubSession:
    """Maps URLs to canned responses; records every call.

    Values may be a ``StubResponse``, an exception instance to raise, raw
    ``bytes`` (served as the body) or any JSON-compatible object (served with
    HTTP 200).  Unknown URLs get a 404.
    """

    def __init__(self, routes: dict[str, Any] | None = None) -> None:
        self.routes: dict[str, Any] = dict(routes or {})
        self.calls: list[dict[str, Any]] = []

    def get(self, url: str, **kwargs: Any) -> StubResponse:
        self.calls.append({"url": url, **kwargs})
        route = self.routes.get(url)
        if route is None:
            return StubResponse(status_code=404)
        if isinstance(route, BaseException):
            raise route
        if isinstance(route, StubResponse):
            return route
        if isinstance(route, bytes):
            return StubResponse(content=route)
        return StubResponse(payload=route)


# ---------------------------------------------------------------------------
# Indexer fake
# ---------------------------------------------------------------------------


class FakeIndexer:
    """In-memory ``Indexer``: fixed pages chained by synthetic tokens."""

    def __init__(
        self,
        pages: list[list[ReconfigurationEvent]] | None = None,
        assets: dict[int, dict[str, Any]] | None = None,
    ) -> None:
        self.pages = pages or []
        self.assets = assets or {}
        self.requested_tokens: list[str | None] = []

    def lookup_asset(self, asset_id: int) -> dict[str, Any]:
        return self.assets[asset_id]

    def search_asset_config_transactions(
        self, asset_id: int, next_token: str | None = None
    ) -> EventPage:
        self.requested_tokens.append(next_token)
        index = int(next_token) if next_token else 0
        events = self.pages[index] if index < len(self.pages) else []
        more = index + 1 < len(self.pages)
        return EventPage(events=events, next_token=str(index + 1) if more else None)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def gateway() -> str:
    return GATEWAY


@pytest.fixture
def stub_session() -> StubSession:
    return StubSession()


@pytest.fixture
def resolver(stub_session: StubSession) -> MetadataResolver:
    """A MetadataResolver backed by the stub session."""
    return MetadataResolver(stub_session, timeout=2.5)


@pytest.fixture
def make_event() -> Callable[..., ReconfigurationEvent]:
    """Factory fixture: build a ReconfigurationEvent with sensible defaults."""

    def _factory(
        round_: int,
        reserve: str | None = None,
        url: str | None = None,
        **overrides: Any,
    ) -> ReconfigurationEvent:
        defaults: dict[str, Any] = {
            "round": round_,
            "transaction_id": f"TX{round_}",
            "url": url,
            "reserve": reserve,
        }
        defaults.update(overrides)
        return ReconfigurationEvent(**defaults)

    return _factory


@pytest.fixture
def make_address() -> Callable[[int], str]:
    """Factory fixture: a distinct valid reserve address per integer."""
    return address_for


@pytest.fixture
def make_digest() -> Callable[[int], bytes]:
    """Factory fixture: a distinct 32-byte digest per integer."""
    return digest_for


@pytest.fixture
def make_indexer() -> Callable[..., FakeIndexer]:
    """Factory fixture: a FakeIndexer over the given pages / asset params."""
    return FakeIndexer


@pytest.fixture
def make_response() -> Callable[..., StubResponse]:
    """Factory fixture: a canned HTTP response for StubSession routes."""
    return StubResponse
