"""arc19 data models: all Pydantic v2, all frozen (immutable)."""

from arc19.models.asset import AssetRecord, UpdatePlan
from arc19.models.cid import ContentIdentifier, ParsedTemplate
from arc19.models.history import EventPage, MetadataSnapshot, ReconfigurationEvent

__all__ = [
    # cid
    "ContentIdentifier",
    "ParsedTemplate",
    # history
    "ReconfigurationEvent",
    "EventPage",
    "MetadataSnapshot",
    # asset
    "AssetRecord",
    "UpdatePlan",
]
