"""Algorand address text form for 32-byte reserve values.

An address is the unpadded RFC 4648 base32 encoding of
``public_key || checksum`` where the checksum is the last four bytes of the
SHA-512/256 digest of the public key.  The reserve field holds a CID digest
instead of a real public key, but it travels through the same encoding.
"""

from __future__ import annotations

import base64
import binascii
import hashlib

from arc19.core.errors import AddressError

PUBLIC_KEY_LENGTH = 32
CHECKSUM_LENGTH = 4
ADDRESS_LENGTH = 58

ZERO_ADDRESS = "AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAY5HFKQ"


def _checksum(public_key: bytes) -> bytes:
    return hashlib.new("sha512_256", public_key).digest()[-CHECKSUM_LENGTH:]


def encode_address(public_key: bytes) -> str:
    """Encode 32 raw bytes as a checksummed address string."""
    if len(public_key) != PUBLIC_KEY_LENGTH:
        raise AddressError(
            f"address payload must be {PUBLIC_KEY_LENGTH} bytes, got {len(public_key)}"
        )
    raw = bytes(public_key) + _checksum(public_key)
    return base64.b32encode(raw).decode("ascii").rstrip("=")


def decode_address(address: str) -> bytes:
    """Decode an address string back to its 32-byte payload.

    Raises
    ------
    AddressError
        On wrong length, characters outside the base32 alphabet, a checksum
        that does not match or non-zero padding bits.
    """
    if not isinstance(address, str) or len(address) != ADDRESS_LENGTH:
        raise AddressError(f"address must be {ADDRESS_LENGTH} characters: {address!r}")
    try:
        raw = base64.b32decode(address + "=" * (-len(address) % 8))
    except (binascii.Error, ValueError) as exc:
        raise AddressError(f"address is not base32: {address!r}") from exc

    public_key, checksum = raw[:PUBLIC_KEY_LENGTH], raw[PUBLIC_KEY_LENGTH:]
    if _checksum(public_key) != checksum:
        raise AddressError(f"address checksum mismatch: {address!r}")
    # The last character carries two padding bits that must be zero.
    if encode_address(public_key) != address:
        raise AddressError(f"address is not canonical: {address!r}")
    return public_key


def is_valid_address(address: str) -> bool:
    try:
        decode_address(address)
    except AddressError:
        return False
    return True
