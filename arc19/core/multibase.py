"""Binary framing helpers for CIDs: unsigned varints, base58btc and base32.

Only the two multibase encodings a CID can canonically render to are
supported:

* ``base58btc`` (no prefix) for CIDv0, which is a bare multihash;
* ``base32`` lower-case, unpadded, with the ``b`` multibase prefix for CIDv1.

CIDv1 text arriving from elsewhere may also use ``B`` (upper-case base32)
or ``z`` (base58btc); those prefixes are accepted on input only.
"""

from __future__ import annotations

import base64
import binascii

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE58_INDEX = {char: index for index, char in enumerate(BASE58_ALPHABET)}

BASE32_PREFIX = "b"
BASE32_UPPER_PREFIX = "B"
BASE58_PREFIX = "z"


# ============================================================================
# UNSIGNED VARINT
# ============================================================================


def encode_varint(value: int) -> bytes:
    """Encode a non-negative integer as an unsigned LEB128 varint.

    Example:
        >>> encode_varint(0x70).hex()
        '70'
        >>> encode_varint(300).hex()
        'ac02'
    """
    if value < 0:
        raise ValueError(f"varint value must be non-negative, got {value}")
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def decode_varint(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode a varint starting at *offset*.

    Returns ``(value, next_offset)``. Raises ``ValueError`` on truncated
    input or a varint longer than nine bytes.
    """
    value = 0
    shift = 0
    for position in range(offset, min(len(data), offset + 9)):
        byte = data[position]
        value |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return value, position + 1
        shift += 7
    raise ValueError("truncated or oversized varint")


# ============================================================================
# BASE58BTC
# ============================================================================


def base58_encode(data: bytes) -> str:
    """Encode bytes with the bitcoin base58 alphabet.

    Leading zero bytes are preserved as leading ``1`` characters.
    """
    zeros = len(data) - len(data.lstrip(b"\x00"))
    number = int.from_bytes(data, "big")
    chars: list[str] = []
    while number:
        number, remainder = divmod(number, 58)
        chars.append(BASE58_ALPHABET[remainder])
    return "1" * zeros + "".join(reversed(chars))


def base58_decode(text: str) -> bytes:
    """Decode base58btc text; raises ``ValueError`` on foreign characters."""
    number = 0
    for char in text:
        try:
            number = number * 58 + _BASE58_INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    zeros = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\x00" * zeros + body


# ============================================================================
# BASE32 (RFC 4648, lower-case, unpadded)
# ============================================================================


def base32_encode(data: bytes) -> str:
    """Encode bytes as lower-case RFC 4648 base32 without padding."""
    return base64.b32encode(data).decode("ascii").rstrip("=").lower()


def base32_decode(text: str) -> bytes:
    """Decode unpadded base32 in either case."""
    padding = "=" * (-len(text) % 8)
    try:
        return base64.b32decode(text.upper() + padding)
    except binascii.Error as exc:
        raise ValueError(f"invalid base32 text: {exc}") from None
