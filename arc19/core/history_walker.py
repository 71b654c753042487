"""Version history walker: replays an asset's reconfiguration events.

Every asset-config transaction that moved the reserve produces one
:class:`MetadataSnapshot`: the gateway URL decoded from the reserve as of
that round, and the JSON found there.

Behaviour
---------
- Pages are requested strictly in order; each page's continuation token
  comes from the previous response.
- The template string of the very first event (the creation transaction)
  is captured once and used for the whole history.  It is never
  re-validated per event, so a deployment that switched codec or version
  mid-history will decode later snapshots with the stale template.
- An event whose reserve is absent or equal to the reserve already in force
  produces no snapshot.
- A decode or fetch failure for one event is logged and that event is
  skipped.  The walk itself only fails if a page cannot be fetched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor

from arc19.bridge.address import decode_address
from arc19.bridge.indexer import Indexer
from arc19.config import settings
from arc19.core.cid_codec import resolve
from arc19.core.errors import (
    AddressError,
    CidError,
    GrammarError,
    HistoryEventError,
)
from arc19.core.metadata_resolver import MetadataResolver
from arc19.core.template import validate_template
from arc19.models.cid import ParsedTemplate
from arc19.models.history import MetadataSnapshot, ReconfigurationEvent

logger = logging.getLogger(__name__)


class _MetadataUnavailable(Exception):
    """Internal marker: the resolver returned no document."""


class HistoryWalker:
    """Rebuilds the chronological list of content versions of an asset.

    Parameters
    ----------
    indexer:
        Any :class:`~arc19.bridge.indexer.Indexer` implementation.
    resolver:
        Metadata resolver; a default :class:`MetadataResolver` when omitted.
    gateway:
        Gateway prefix for resolved URLs; ``settings.ipfs_gateway`` when
        omitted.
    max_workers:
        When greater than one, the decode+fetch step for the events of a
        single page runs on a thread pool.  Output order is unaffected.
    """

    def __init__(
        self,
        indexer: Indexer,
        resolver: MetadataResolver | None = None,
        *,
        gateway: str | None = None,
        max_workers: int | None = None,
    ) -> None:
        self._indexer = indexer
        self._resolver = resolver or MetadataResolver()
        self._gateway = gateway
        self._max_workers = max(
            1, settings.history_max_workers if max_workers is None else max_workers
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def iter_snapshots(self, asset_id: int) -> Iterator[MetadataSnapshot]:
        """Lazily yield snapshots, pulling the next page only when needed."""
        template_text: str | None = None
        template: ParsedTemplate | GrammarError | None = None
        reserve_in_force: str | None = None
        next_token: str | None = None
        pages = 0

        while True:
            page = self._indexer.search_asset_config_transactions(
                asset_id, next_token=next_token
            )
            pages += 1

            changed: list[ReconfigurationEvent] = []
            for event in page.events:
                if template_text is None:
                    template_text = event.url or ""
                    template = self._parse_template(template_text)
                if event.reserve is None or event.reserve == reserve_in_force:
                    continue
                reserve_in_force = event.reserve
                changed.append(event)

            for snapshot in self._snapshots_for(changed, template):
                if snapshot is not None:
                    yield snapshot

            next_token = page.next_token
            if not next_token:
                logger.info("History walk for asset %s read %d page(s)", asset_id, pages)
                return

    def walk(self, asset_id: int) -> list[MetadataSnapshot]:
        """Return the full version history, ascending by round."""
        snapshots = sorted(self.iter_snapshots(asset_id), key=lambda s: s.round)
        logger.info(
            "Asset %s has %d resolvable version(s)", asset_id, len(snapshots)
        )
        return snapshots

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_template(template_text: str) -> ParsedTemplate | GrammarError:
        try:
            return validate_template(template_text)
        except GrammarError as exc:
            logger.warning("History template %r is not usable: %s", template_text, exc)
            return exc

    def _snapshots_for(
        self,
        events: list[ReconfigurationEvent],
        template: ParsedTemplate | GrammarError | None,
    ) -> list[MetadataSnapshot | None]:
        if self._max_workers > 1 and len(events) > 1:
            with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
                return list(pool.map(lambda e: self._snapshot(e, template), events))
        return [self._snapshot(event, template) for event in events]

    @staticmethod
    def _skip(event: ReconfigurationEvent, cause: Exception | None) -> None:
        error = HistoryEventError(
            event.round, event.transaction_id, cause or ValueError("no template")
        )
        logger.warning("%s", error)

    def _snapshot(
        self,
        event: ReconfigurationEvent,
        template: ParsedTemplate | GrammarError | None,
    ) -> MetadataSnapshot | None:
        if not isinstance(template, ParsedTemplate):
            self._skip(event, template)
            return None
        try:
            url = resolve(template, decode_address(event.reserve or ""), gateway=self._gateway)
            metadata = self._resolver.fetch_json(url)
            if metadata is None:
                raise _MetadataUnavailable(f"no metadata at {url}")
        except (CidError, AddressError, _MetadataUnavailable) as exc:
            self._skip(event, exc)
            return None

        logger.debug("Round %d -> %s", event.round, url)
        return MetadataSnapshot(round=event.round, resolved_url=url, metadata=metadata)


def walk_history(
    asset_id: int,
    indexer: Indexer,
    resolver: MetadataResolver | None = None,
    *,
    gateway: str | None = None,
    max_workers: int | None = None,
) -> list[MetadataSnapshot]:
    """Functional shortcut for ``HistoryWalker(...).walk(asset_id)``."""
    walker = HistoryWalker(indexer, resolver, gateway=gateway, max_workers=max_workers)
    return walker.walk(asset_id)
