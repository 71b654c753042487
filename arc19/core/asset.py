"""Load the current state of a mutable asset."""

from __future__ import annotations

import base64
import logging

from arc19.bridge.address import decode_address
from arc19.bridge.indexer import Indexer
from arc19.core.cid_codec import resolve, resolve_normal_url
from arc19.core.errors import NotMutableAssetError
from arc19.core.metadata_resolver import MetadataResolver
from arc19.core.template import is_well_formed, validate_template
from arc19.models.asset import AssetRecord

logger = logging.getLogger(__name__)


def load_asset(
    asset_id: int,
    indexer: Indexer,
    resolver: MetadataResolver | None = None,
    *,
    gateway: str | None = None,
) -> AssetRecord:
    """Look up an asset, resolve its current metadata URL and fetch it.

    A missing metadata document leaves ``metadata`` as ``None``; it does not
    fail the load.

    Raises
    ------
    NotMutableAssetError
        If the asset's url is not a template-ipfs template.
    AddressError / CidError
        If the reserve cannot be decoded under the template.
    """
    params = indexer.lookup_asset(asset_id)
    url = params.get("url") or ""
    if not is_well_formed(url):
        raise NotMutableAssetError(f"Asset {asset_id} url {url!r} is not a template-ipfs url")

    reserve = params.get("reserve") or ""
    metadata_url = resolve(validate_template(url), decode_address(reserve), gateway=gateway)
    metadata = (resolver or MetadataResolver()).fetch_json(metadata_url)
    if metadata is None:
        logger.warning("Asset %s: no metadata available at %s", asset_id, metadata_url)

    return AssetRecord(
        asset_id=asset_id,
        url=url,
        reserve=reserve,
        manager=params.get("manager") or "",
        name=params.get("name") or "",
        unit_name=params.get("unit-name") or "",
        metadata_url=metadata_url,
        metadata=metadata,
    )


def image_url(record: AssetRecord, *, gateway: str | None = None) -> str:
    """Gateway-fetchable URL of the metadata's ``image``, or ``""``."""
    if not record.image:
        return ""
    return resolve_normal_url(record.image, gateway=gateway)


def image_base64(
    record: AssetRecord,
    resolver: MetadataResolver | None = None,
    *,
    gateway: str | None = None,
) -> str:
    """Fetch the metadata's image and return it base64-encoded.

    Returns ``""`` when there is no usable image URL or the fetch fails.
    """
    url = image_url(record, gateway=gateway)
    if not url:
        return ""
    content = (resolver or MetadataResolver()).fetch_bytes(url)
    if content is None:
        logger.warning("Asset %s: image unavailable at %s", record.asset_id, url)
        return ""
    return base64.b64encode(content).decode("ascii")
