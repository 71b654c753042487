"""Exception hierarchy for template parsing, CID handling and history walks.

Everything raised by this package derives from :class:`Arc19Error`.
Validation failures also derive from ``ValueError`` so callers that only
care about "bad input" can catch the builtin.
"""

from __future__ import annotations

from enum import Enum


class Arc19Error(Exception):
    """Base class for all arc19 errors."""


# ---------------------------------------------------------------------------
# Template grammar
# ---------------------------------------------------------------------------


class GrammarErrorKind(str, Enum):
    """Which grammar check rejected a template string."""

    BAD_SCHEME = "bad_scheme"
    BAD_PREFIX = "bad_prefix"
    WRONG_FIELD_COUNT = "wrong_field_count"
    BAD_HASH_NAME = "bad_hash_name"
    BAD_CODEC = "bad_codec"
    BAD_FIELD_NAME = "bad_field_name"
    BAD_VERSION = "bad_version"


class GrammarError(Arc19Error, ValueError):
    """Raised when a template string does not match the template-ipfs grammar."""

    def __init__(self, kind: GrammarErrorKind, template: str, detail: str = "") -> None:
        self.kind = kind
        self.template = template
        self.detail = detail
        message = f"{kind.value}: {template!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


# ---------------------------------------------------------------------------
# CID codec
# ---------------------------------------------------------------------------


class CidError(Arc19Error, ValueError):
    """Base class for CID encode/decode failures."""


class UnsupportedCodec(CidError):
    """A symbolic codec name outside the raw / dag-pb / dag-cbor whitelist."""


class UnknownCodec(CidError):
    """A numeric multicodec id outside the whitelist."""


class InvalidDigestLength(CidError):
    """A digest or address field that is not exactly 32 bytes."""


class UnsupportedCidVersion(CidError):
    """A CID version other than 0 or 1, or a v0 CID with a non dag-pb codec."""


class CidParseError(CidError):
    """CID text that cannot be decoded into a sha2-256 content identifier."""


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------


class AddressError(Arc19Error, ValueError):
    """Malformed address text: bad alphabet, wrong length or checksum mismatch."""


class IndexerError(Arc19Error, RuntimeError):
    """Raised when the chain indexer cannot be queried."""


class NotMutableAssetError(Arc19Error):
    """The asset's url field is not a template-ipfs template."""


class HistoryEventError(Arc19Error):
    """A single reconfiguration event that could not be turned into a snapshot.

    Never propagates out of a history walk; it is logged and the event is
    skipped.
    """

    def __init__(self, round_: int, transaction_id: str, cause: Exception) -> None:
        self.round = round_
        self.transaction_id = transaction_id
        self.cause = cause
        super().__init__(
            f"Event {transaction_id or '<unknown>'} at round {round_} skipped: {cause}"
        )
