"""Reconfiguration events and the metadata snapshots rebuilt from them.

Snapshots are never persisted. They are a read-time reconstruction of
what an asset pointed at as of a given confirmed round.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class ReconfigurationEvent(BaseModel):
    """One asset-config transaction as reported by the indexer."""

    model_config = ConfigDict(frozen=True)

    round: int
    transaction_id: str = ""
    url: str | None = None  # template string, only present on creation
    reserve: str | None = None  # text-form address

    @classmethod
    def from_indexer_transaction(cls, txn: dict[str, Any]) -> ReconfigurationEvent:
        """Build an event from an indexer v2 transaction object.

        Raises ``TypeError`` when the transaction or its params are not JSON
        objects and ``ValueError`` (including pydantic's ``ValidationError``)
        when a field has the wrong type.
        """
        if not isinstance(txn, dict):
            raise TypeError(f"transaction must be an object, got {type(txn).__name__}")
        config = txn.get("asset-config-transaction") or {}
        params = config.get("params") if isinstance(config, dict) else None
        params = params or {}
        if not isinstance(params, dict):
            raise TypeError(f"params must be an object, got {type(params).__name__}")
        return cls(
            round=int(txn.get("confirmed-round") or 0),
            transaction_id=txn.get("id", ""),
            url=params.get("url") or None,
            reserve=params.get("reserve") or None,
        )


class EventPage(BaseModel):
    """A page of events plus the continuation token for the next one."""

    model_config = ConfigDict(frozen=True)

    events: list[ReconfigurationEvent] = []
    next_token: str | None = None


class MetadataSnapshot(BaseModel):
    """The content an asset pointed at as of ``round``."""

    model_config = ConfigDict(frozen=True)

    round: int
    resolved_url: str
    metadata: Any = None  # parsed JSON, None when the fetch failed
