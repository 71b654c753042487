"""Whitelisted multicodec table and the single allowed digest algorithm."""

from __future__ import annotations

from arc19.core.errors import UnknownCodec, UnsupportedCodec

# Multicodec ids for the content codecs a template may name.
RAW = 0x55
DAG_PB = 0x70
DAG_CBOR = 0x71

CODEC_IDS: dict[str, int] = {
    "raw": RAW,
    "dag-pb": DAG_PB,
    "dag-cbor": DAG_CBOR,
}
CODEC_NAMES: dict[int, str] = {code: name for name, code in CODEC_IDS.items()}

SHA2_256_NAME = "sha2-256"
SHA2_256_CODE = 0x12
SHA2_256_LENGTH = 32


def codec_name_to_id(name: str) -> int:
    """Map a symbolic codec name to its multicodec id.

    Lookup is exact: ``"RAW"`` or ``"cbor"`` are rejected rather than
    coerced.
    """
    try:
        return CODEC_IDS[name]
    except (KeyError, TypeError):
        raise UnsupportedCodec(
            f"Unsupported codec {name!r}; expected one of {sorted(CODEC_IDS)}"
        ) from None


def codec_id_to_name(code: int) -> str:
    """Map a multicodec id back to its symbolic name."""
    try:
        return CODEC_NAMES[code]
    except (KeyError, TypeError):
        raise UnknownCodec(f"Unknown codec id {code!r}") from None


def is_supported_codec(name: str) -> bool:
    """Return ``True`` if *name* is one of the whitelisted codec names."""
    return name in CODEC_IDS
