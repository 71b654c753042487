"""Template-ipfs grammar validator.

A template has the exact shape::

    template-ipfs://{ipfscid:<version>:<codec>:reserve:sha2-256}[/<sub-path>]

Every check either passes or raises :class:`GrammarError` naming the check
that failed.  There is no best-effort parse: a template that would resolve
to *some* URL but not the right one is worse than a rejected one.
"""

from __future__ import annotations

from arc19.core.codecs import SHA2_256_NAME, is_supported_codec
from arc19.core.errors import GrammarError, GrammarErrorKind
from arc19.models.cid import RESERVE_FIELD, TEMPLATE_PREFIX, TEMPLATE_SCHEME, ParsedTemplate


def validate_template(template: str) -> ParsedTemplate:
    """Parse and validate a template string.

    Raises
    ------
    GrammarError
        With ``kind`` set to the first check that failed.
    """
    if not isinstance(template, str) or "://" not in template:
        raise GrammarError(GrammarErrorKind.BAD_SCHEME, str(template), "missing '://'")

    scheme, rest = template.split("://", 1)
    if scheme != TEMPLATE_SCHEME:
        raise GrammarError(
            GrammarErrorKind.BAD_SCHEME, template, f"expected {TEMPLATE_SCHEME!r}"
        )

    if not rest.startswith(TEMPLATE_PREFIX):
        raise GrammarError(
            GrammarErrorKind.BAD_PREFIX, template, f"expected {TEMPLATE_PREFIX!r}"
        )

    # Only the braced part is split; the sub-path after '}' is opaque.
    head, brace, sub_path = rest.partition("}")
    fields = head.split(":")
    if len(fields) != 5:
        raise GrammarError(
            GrammarErrorKind.WRONG_FIELD_COUNT,
            template,
            f"expected 5 ':'-separated fields, got {len(fields)}",
        )
    _, version, codec, field_name, hash_name = fields

    if not brace:
        raise GrammarError(GrammarErrorKind.BAD_HASH_NAME, template, "missing '}'")
    if hash_name != SHA2_256_NAME:
        raise GrammarError(
            GrammarErrorKind.BAD_HASH_NAME, template, f"expected {SHA2_256_NAME!r}"
        )

    if not is_supported_codec(codec):
        raise GrammarError(GrammarErrorKind.BAD_CODEC, template, f"codec {codec!r}")

    if field_name != RESERVE_FIELD:
        raise GrammarError(
            GrammarErrorKind.BAD_FIELD_NAME, template, f"expected {RESERVE_FIELD!r}"
        )

    if not (version.isascii() and version.isdigit()):
        raise GrammarError(GrammarErrorKind.BAD_VERSION, template, f"version {version!r}")

    return ParsedTemplate(version=int(version), codec=codec, sub_path=sub_path)


def is_well_formed(template: str | None) -> bool:
    """Cheap yes/no check: does *template* follow the template-ipfs grammar?"""
    if not template:
        return False
    try:
        validate_template(template)
    except GrammarError:
        return False
    return True
