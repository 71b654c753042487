"""CID <-> reserve address transform and gateway URL resolution.

Encode needs only the digest: a sha2-256 digest is exactly as long as an
address, so it *is* the reserve value.  Decode needs only the template plus
the current reserve.  The two directions are therefore independent in
time: the reserve can be rewritten on every update while the template stays
put, as long as version and codec do not change between updates.  If they
do, the old template no longer describes the new content and has to be
rewritten too.
"""

from __future__ import annotations

import logging

from arc19.bridge.address import decode_address, encode_address
from arc19.config import settings
from arc19.core.codecs import (
    SHA2_256_CODE,
    SHA2_256_LENGTH,
    codec_id_to_name,
    codec_name_to_id,
)
from arc19.core.errors import (
    CidParseError,
    InvalidDigestLength,
    UnsupportedCidVersion,
)
from arc19.core.multibase import (
    BASE32_PREFIX,
    BASE32_UPPER_PREFIX,
    BASE58_PREFIX,
    base32_decode,
    base58_decode,
    decode_varint,
)
from arc19.core.template import validate_template
from arc19.models.cid import ContentIdentifier, ParsedTemplate

logger = logging.getLogger(__name__)


def _check_digest(digest: bytes) -> bytes:
    if not isinstance(digest, (bytes, bytearray, memoryview)):
        raise InvalidDigestLength(f"digest must be bytes, got {type(digest).__name__}")
    digest = bytes(digest)
    if len(digest) != SHA2_256_LENGTH:
        raise InvalidDigestLength(
            f"digest must be {SHA2_256_LENGTH} bytes, got {len(digest)}"
        )
    return digest


def build_cid(version: int, codec: str, digest: bytes) -> ContentIdentifier:
    """Construct a :class:`ContentIdentifier`, raising this package's errors.

    Going through here instead of the model constructor turns bad input into
    :class:`UnsupportedCodec` / :class:`UnsupportedCidVersion` /
    :class:`InvalidDigestLength` rather than a pydantic ``ValidationError``.
    """
    codec_name_to_id(codec)
    digest = _check_digest(digest)
    if version not in (0, 1):
        raise UnsupportedCidVersion(f"CID version must be 0 or 1, got {version}")
    if version == 0 and codec != "dag-pb":
        raise UnsupportedCidVersion(f"CIDv0 requires codec 'dag-pb', got {codec!r}")
    return ContentIdentifier(version=version, codec=codec, digest=digest)


# ============================================================================
# ENCODE: digest -> reserve
# ============================================================================


def address_from_digest(digest: bytes) -> bytes:
    """Return the 32-byte address field for a sha2-256 digest."""
    return _check_digest(digest)


def reserve_address_from_digest(digest: bytes) -> str:
    """Return the checksummed reserve address text for a digest."""
    return encode_address(address_from_digest(digest))


# ============================================================================
# DECODE: (template, reserve) -> CID -> URL
# ============================================================================


def decode_cid(template: ParsedTemplate, address_field: bytes) -> ContentIdentifier:
    """Rebuild the full CID from a parsed template and a 32-byte reserve."""
    return build_cid(template.version, template.codec, address_field)


def resolve(
    template: ParsedTemplate,
    address_field: bytes,
    *,
    gateway: str | None = None,
) -> str:
    """Build the gateway URL for the content a template/reserve pair points at.

    The URL is ``gateway + cid_text + template.sub_path``; the sub-path is
    appended verbatim.
    """
    cid = decode_cid(template, address_field)
    prefix = settings.ipfs_gateway if gateway is None else gateway
    url = f"{prefix}{cid.encode()}{template.sub_path}"
    logger.debug("Resolved %s -> %s", template.render(), url)
    return url


def resolve_template_url(
    template: str,
    reserve_address: str,
    *,
    gateway: str | None = None,
) -> str:
    """Validate a template string and resolve it against a reserve address."""
    parsed = validate_template(template)
    return resolve(parsed, decode_address(reserve_address), gateway=gateway)


def resolve_normal_url(url: str, *, gateway: str | None = None) -> str:
    """Resolve a plain URL found inside metadata (e.g. the ``image`` entry).

    ``http://`` and ``https://`` pass through, ``ipfs://X`` is rewritten
    onto the gateway and anything else resolves to ``""``.
    """
    if url.startswith(("https://", "http://")):
        return url
    if url.startswith("ipfs://"):
        prefix = settings.ipfs_gateway if gateway is None else gateway
        return f"{prefix}{url[len('ipfs://'):]}"
    return ""


# ============================================================================
# PARSE: CID text -> CID
# ============================================================================


def _split_multihash(multihash: bytes, text: str) -> bytes:
    try:
        code, offset = decode_varint(multihash)
        length, offset = decode_varint(multihash, offset)
    except ValueError as exc:
        raise CidParseError(f"malformed multihash in {text!r}: {exc}") from None
    if code != SHA2_256_CODE:
        raise CidParseError(f"{text!r} is not a sha2-256 multihash (code 0x{code:x})")
    digest = multihash[offset:]
    if length != SHA2_256_LENGTH or len(digest) != SHA2_256_LENGTH:
        raise CidParseError(
            f"{text!r} carries a {len(digest)}-byte digest, expected {SHA2_256_LENGTH}"
        )
    return digest


def parse_cid(text: str) -> ContentIdentifier:
    """Parse a CIDv0 (``Qm...``) or CIDv1 string.

    CIDv1 may be multibase ``b``/``B`` (base32 in either case) or ``z``
    (base58btc).  The parsed identifier always re-encodes to the canonical
    lower-case ``b`` form.

    Raises
    ------
    CidParseError
        For other multibases, malformed framing or a non sha2-256 digest.
    UnknownCodec
        When a v1 CID names a codec outside the whitelist.
    """
    text = (text or "").strip()
    if len(text) == 46 and text.startswith("Qm"):
        try:
            multihash = base58_decode(text)
        except ValueError as exc:
            raise CidParseError(f"invalid CIDv0 {text!r}: {exc}") from None
        return build_cid(0, "dag-pb", _split_multihash(multihash, text))

    if len(text) > 1 and text[0] in (BASE32_PREFIX, BASE32_UPPER_PREFIX, BASE58_PREFIX):
        decode = base58_decode if text[0] == BASE58_PREFIX else base32_decode
        try:
            raw = decode(text[1:])
            version, offset = decode_varint(raw)
            codec_id, offset = decode_varint(raw, offset)
        except ValueError as exc:
            raise CidParseError(f"invalid CIDv1 {text!r}: {exc}") from None
        if version != 1:
            raise CidParseError(f"{text!r} has CID version {version}, expected 1")
        codec = codec_id_to_name(codec_id)
        return build_cid(1, codec, _split_multihash(raw[offset:], text))

    raise CidParseError(f"unsupported CID encoding: {text!r}")
