"""Derive the on-chain values that point an asset at new content.

Only the encode direction of the CID codec is used here.  Writing the
values on-chain is the caller's job.
"""

from __future__ import annotations

import logging

from arc19.bridge.address import encode_address
from arc19.core.cid_codec import address_from_digest, build_cid, parse_cid
from arc19.core.codecs import codec_name_to_id
from arc19.core.template import validate_template
from arc19.models.asset import UpdatePlan
from arc19.models.cid import ContentIdentifier, ParsedTemplate

logger = logging.getLogger(__name__)


def prepare_update(
    new_cid: ContentIdentifier | str,
    *,
    current_template: str | None = None,
) -> UpdatePlan:
    """Build the template string and reserve for *new_cid*.

    Parameters
    ----------
    new_cid:
        The CID of freshly stored content, as a model or as text.
    current_template:
        The asset's existing url field.  When given, its sub-path is kept and
        ``template_changed`` reports whether version or codec moved.

    Raises
    ------
    GrammarError
        If *current_template* is not a valid template.
    CidError
        If the CID's codec, version or digest fall outside the whitelist.
    """
    cid = parse_cid(new_cid) if isinstance(new_cid, str) else new_cid
    # Re-check the whitelist rather than trusting a caller-built model.
    codec_name_to_id(cid.codec)
    cid = build_cid(cid.version, cid.codec, cid.digest)

    sub_path = ""
    template_changed = False
    if current_template is not None:
        current = validate_template(current_template)
        sub_path = current.sub_path
        template_changed = (current.version, current.codec) != (cid.version, cid.codec)
        if template_changed:
            logger.warning(
                "New content uses CIDv%d/%s but the asset template says CIDv%d/%s; "
                "the url field must be rewritten as well.",
                cid.version,
                cid.codec,
                current.version,
                current.codec,
            )

    template = ParsedTemplate(version=cid.version, codec=cid.codec, sub_path=sub_path)
    template_string = template.render()
    validate_template(template_string)

    address_field = address_from_digest(cid.digest)
    return UpdatePlan(
        cid=cid,
        template_string=template_string,
        address_field=address_field,
        reserve_address=encode_address(address_field),
        template_changed=template_changed,
    )


def prepare_update_from_digest(
    digest: bytes,
    *,
    version: int = 1,
    codec: str = "raw",
    current_template: str | None = None,
) -> UpdatePlan:
    """Same as :func:`prepare_update` for a bare sha2-256 digest."""
    return prepare_update(
        build_cid(version, codec, digest), current_template=current_template
    )
