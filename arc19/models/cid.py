"""Content identifier and parsed template models (frozen)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from arc19.core.codecs import (
    CODEC_IDS,
    SHA2_256_CODE,
    SHA2_256_LENGTH,
    SHA2_256_NAME,
)
from arc19.core.multibase import BASE32_PREFIX, base32_encode, base58_encode, encode_varint

TEMPLATE_SCHEME = "template-ipfs"
TEMPLATE_PREFIX = "{ipfscid:"
RESERVE_FIELD = "reserve"


class ContentIdentifier(BaseModel):
    """A sha2-256 CID: version, content codec and 32-byte digest.

    The digest is what gets written into the reserve address; version and
    codec live in the asset's template string.
    """

    model_config = ConfigDict(frozen=True, ser_json_bytes="hex", val_json_bytes="hex")

    version: int = Field(ge=0, le=1)
    codec: str
    digest_algorithm: str = SHA2_256_NAME
    digest: bytes

    @field_validator("codec")
    @classmethod
    def _codec_whitelisted(cls, value: str) -> str:
        if value not in CODEC_IDS:
            raise ValueError(f"codec must be one of {sorted(CODEC_IDS)}")
        return value

    @field_validator("digest_algorithm")
    @classmethod
    def _sha2_256_only(cls, value: str) -> str:
        if value != SHA2_256_NAME:
            raise ValueError(f"digest_algorithm must be {SHA2_256_NAME!r}")
        return value

    @field_validator("digest")
    @classmethod
    def _digest_length(cls, value: bytes) -> bytes:
        if len(value) != SHA2_256_LENGTH:
            raise ValueError(
                f"digest must be {SHA2_256_LENGTH} bytes, got {len(value)}"
            )
        return value

    @model_validator(mode="after")
    def _v0_is_dag_pb(self) -> ContentIdentifier:
        if self.version == 0 and self.codec != "dag-pb":
            raise ValueError("CIDv0 only supports the dag-pb codec")
        return self

    @property
    def codec_id(self) -> int:
        return CODEC_IDS[self.codec]

    @property
    def multihash(self) -> bytes:
        """``<sha2-256 code><length><digest>`` as raw bytes."""
        return (
            encode_varint(SHA2_256_CODE)
            + encode_varint(SHA2_256_LENGTH)
            + self.digest
        )

    def to_bytes(self) -> bytes:
        """Binary CID. For v0 this is the bare multihash."""
        if self.version == 0:
            return self.multihash
        return encode_varint(self.version) + encode_varint(self.codec_id) + self.multihash

    def encode(self) -> str:
        """Canonical text form: base58btc for v0, ``b``-prefixed base32 for v1."""
        if self.version == 0:
            return base58_encode(self.multihash)
        return BASE32_PREFIX + base32_encode(self.to_bytes())

    def __str__(self) -> str:
        return self.encode()


class ParsedTemplate(BaseModel):
    """The variable parts of a template-ipfs string.

    ``sub_path`` is whatever followed the closing brace, kept verbatim
    (including a leading ``/``) and appended to resolved URLs.
    """

    model_config = ConfigDict(frozen=True)

    version: int = Field(ge=0)
    codec: str
    sub_path: str = ""

    def render(self) -> str:
        """Render back to the canonical template string."""
        return (
            f"{TEMPLATE_SCHEME}://{TEMPLATE_PREFIX}{self.version}:{self.codec}:"
            f"{RESERVE_FIELD}:{SHA2_256_NAME}}}{self.sub_path}"
        )
