"""Read-only asset record and the update plan produced for a new CID."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from arc19.models.cid import ContentIdentifier


class AssetRecord(BaseModel):
    """Current on-chain params of a mutable asset plus its resolved metadata."""

    model_config = ConfigDict(frozen=True)

    asset_id: int
    url: str
    reserve: str = ""
    manager: str = ""
    name: str = ""
    unit_name: str = ""
    metadata_url: str = ""
    metadata: Any = None

    @property
    def image(self) -> str:
        """The raw ``image`` entry of the metadata document, if any."""
        if isinstance(self.metadata, dict):
            image = self.metadata.get("image")
            if isinstance(image, str):
                return image
        return ""


class UpdatePlan(BaseModel):
    """Values a transaction writer must put on-chain to point at ``cid``.

    ``template_changed`` is ``True`` when the asset's current template names a
    different version or codec, in which case the url field has to be
    rewritten as well as the reserve.
    """

    model_config = ConfigDict(frozen=True, ser_json_bytes="hex", val_json_bytes="hex")

    cid: ContentIdentifier
    template_string: str
    address_field: bytes
    reserve_address: str
    template_changed: bool = False
