"""Chain indexer client: asset lookup and paginated asset-config search.

Bridge boundary
---------------
The history walker and asset loader depend only on the :class:`Indexer`
Protocol.  :class:`IndexerClient` satisfies it against the Algorand
indexer REST v2 API; tests substitute an in-memory fake.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

import requests

from arc19.bridge.http import create_session
from arc19.config import settings
from arc19.core.errors import IndexerError
from arc19.models.history import EventPage, ReconfigurationEvent

logger = logging.getLogger(__name__)

TOKEN_HEADER = "X-Indexer-API-Token"


# ---------------------------------------------------------------------------
# Protocol
# ---------------------------------------------------------------------------


@runtime_checkable
class Indexer(Protocol):
    """What the core needs from an on-chain query client."""

    def lookup_asset(self, asset_id: int) -> dict[str, Any]:
        """Return the asset's current params (``url``, ``reserve``, ...)."""
        ...

    def search_asset_config_transactions(
        self, asset_id: int, next_token: str | None = None
    ) -> EventPage:
        """Return one page of asset-config events, oldest first.

        ``next_token`` on the returned page is ``None`` on the last page.
        """
        ...


# ---------------------------------------------------------------------------
# REST implementation
# ---------------------------------------------------------------------------


class IndexerClient:
    """Algorand indexer v2 client built on ``requests``.

    Parameters
    ----------
    base_url:
        Indexer root, e.g. ``https://mainnet-idx.algonode.cloud``.
        Defaults to the configured network's endpoint.
    token:
        Optional API token sent as ``X-Indexer-API-Token``.
    session:
        Optional preconfigured ``requests.Session``.
    timeout:
        Per-request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        token: str | None = None,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self._base_url = (base_url or settings.resolved_indexer_url).rstrip("/")
        self._token = settings.resolved_indexer_token if token is None else token
        self._session = session or create_session()
        self._timeout = settings.http_timeout_seconds if timeout is None else timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get(self, path: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        url = f"{self._base_url}{path}"
        headers = {TOKEN_HEADER: self._token} if self._token else None
        try:
            response = self._session.get(
                url, params=params, headers=headers, timeout=self._timeout
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as exc:
            raise IndexerError(f"Indexer request GET {url} failed: {exc}") from exc
        except ValueError as exc:
            raise IndexerError(f"Indexer returned invalid JSON for {url}") from exc
        if not isinstance(body, dict):
            raise IndexerError(
                f"Indexer returned {type(body).__name__} for {url}, expected an object"
            )
        return body

    def lookup_asset(self, asset_id: int) -> dict[str, Any]:
        body = self._get(f"/v2/assets/{int(asset_id)}")
        try:
            params = body["asset"]["params"]
        except (KeyError, TypeError) as exc:
            raise IndexerError(f"Asset {asset_id} response has no params") from exc
        if not isinstance(params, dict):
            raise IndexerError(f"Asset {asset_id} params is not an object")
        return params

    def search_asset_config_transactions(
        self, asset_id: int, next_token: str | None = None
    ) -> EventPage:
        params: dict[str, Any] = {"asset-id": int(asset_id), "tx-type": "acfg"}
        if next_token:
            params["next"] = next_token
        body = self._get("/v2/transactions", params=params)
        transactions = body.get("transactions") or []
        if not isinstance(transactions, list):
            raise IndexerError(f"Asset {asset_id} transactions is not a list")

        events: list[ReconfigurationEvent] = []
        for txn in transactions:
            try:
                events.append(ReconfigurationEvent.from_indexer_transaction(txn))
            except (TypeError, ValueError) as exc:
                logger.warning(
                    "Dropping malformed acfg transaction for asset %s: %s", asset_id, exc
                )
        token = body.get("next-token") or None
        if token is not None and not isinstance(token, str):
            raise IndexerError(f"Asset {asset_id} next-token is not a string: {token!r}")
        logger.info(
            "Fetched %d acfg transactions for asset %s (next=%s)",
            len(events),
            asset_id,
            token or "-",
        )
        return EventPage(events=events, next_token=token)
