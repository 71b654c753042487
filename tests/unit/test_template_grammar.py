"""Tests for the template-ipfs grammar validator."""

from __future__ import annotations

import pytest

from arc19.core.errors import GrammarError, GrammarErrorKind
from arc19.core.template import is_well_formed, validate_template
from arc19.models.cid import ParsedTemplate

RAW_TEMPLATE = "template-ipfs://{ipfscid:1:raw:reserve:sha2-256}"


class TestValidTemplates:
    def test_minimal_raw_template(self):
        parsed = validate_template(RAW_TEMPLATE)
        assert parsed == ParsedTemplate(version=1, codec="raw", sub_path="")

    @pytest.mark.parametrize("codec", ["raw", "dag-pb", "dag-cbor"])
    def test_every_whitelisted_codec(self, codec: str):
        parsed = validate_template(f"template-ipfs://{{ipfscid:1:{codec}:reserve:sha2-256}}")
        assert parsed.codec == codec

    def test_version_zero(self):
        parsed = validate_template("template-ipfs://{ipfscid:0:dag-pb:reserve:sha2-256}")
        assert parsed.version == 0

    def test_sub_path_captured_verbatim(self):
        parsed = validate_template(RAW_TEMPLATE + "/metadata.json")
        assert parsed.sub_path == "/metadata.json"

    def test_sub_path_is_not_validated(self):
        # Colons, braces and query strings after '}' are opaque.
        tail = "/a:b/{c}?x=1#frag"
        parsed = validate_template(RAW_TEMPLATE + tail)
        assert parsed.sub_path == tail

    def test_render_round_trip(self):
        text = "template-ipfs://{ipfscid:1:dag-cbor:reserve:sha2-256}/meta.json"
        assert validate_template(text).render() == text

    def test_large_version_parses(self):
        # The grammar only requires a non-negative integer; CID construction
        # decides later whether the version is usable.
        assert validate_template("template-ipfs://{ipfscid:7:raw:reserve:sha2-256}").version == 7


class TestRejections:
    @pytest.mark.parametrize(
        ("template", "kind"),
        [
            ("ipfs://{ipfscid:1:raw:reserve:sha2-256}", GrammarErrorKind.BAD_SCHEME),
            ("template-ipfs:{ipfscid:1:raw:reserve:sha2-256}", GrammarErrorKind.BAD_SCHEME),
            ("https://example.com/metadata.json", GrammarErrorKind.BAD_SCHEME),
            ("template-ipfs://ipfscid:1:raw:reserve:sha2-256}", GrammarErrorKind.BAD_PREFIX),
            ("template-ipfs://{cid:1:raw:reserve:sha2-256}", GrammarErrorKind.BAD_PREFIX),
            ("template-ipfs://{ipfscid:1:raw:sha2-256}", GrammarErrorKind.WRONG_FIELD_COUNT),
            (
                "template-ipfs://{ipfscid:1:raw:reserve:sha2-256:extra}",
                GrammarErrorKind.WRONG_FIELD_COUNT,
            ),
            ("template-ipfs://{ipfscid:1:raw:reserve:sha3-256}", GrammarErrorKind.BAD_HASH_NAME),
            ("template-ipfs://{ipfscid:1:raw:reserve:sha2-256", GrammarErrorKind.BAD_HASH_NAME),
            ("template-ipfs://{ipfscid:1:cbor:reserve:sha2-256}", GrammarErrorKind.BAD_CODEC),
            ("template-ipfs://{ipfscid:1:RAW:reserve:sha2-256}", GrammarErrorKind.BAD_CODEC),
            ("template-ipfs://{ipfscid:1:raw:manager:sha2-256}", GrammarErrorKind.BAD_FIELD_NAME),
            ("template-ipfs://{ipfscid:one:raw:reserve:sha2-256}", GrammarErrorKind.BAD_VERSION),
            ("template-ipfs://{ipfscid:-1:raw:reserve:sha2-256}", GrammarErrorKind.BAD_VERSION),
            ("template-ipfs://{ipfscid::raw:reserve:sha2-256}", GrammarErrorKind.BAD_VERSION),
        ],
    )
    def test_rejection_kind(self, template: str, kind: GrammarErrorKind):
        with pytest.raises(GrammarError) as excinfo:
            validate_template(template)
        assert excinfo.value.kind is kind
        assert excinfo.value.template == template

    def test_grammar_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_template("ipfs://bafy")

    def test_error_message_names_kind(self):
        with pytest.raises(GrammarError, match="bad_field_name"):
            validate_template("template-ipfs://{ipfscid:1:raw:manager:sha2-256}")


class TestIsWellFormed:
    def test_true_for_valid(self):
        assert is_well_formed(RAW_TEMPLATE + "/x") is True

    @pytest.mark.parametrize(
        "template",
        [None, "", "ipfs://Qm", "template-ipfs://{ipfscid:1:raw:manager:sha2-256}"],
    )
    def test_false_for_invalid(self, template):
        assert is_well_formed(template) is False
