"""
Tests for the Kleene JSON codec.

Decoding accepts booleans, null, Kleene strings and the integers -1, 0, 1.
Encoding always produces one of the canonical strings.
"""

import json

import pytest

from kleene.logic import Kleene
from kleene.serialization import (
    KleeneDecodeError,
    KleeneJSONEncoder,
    kleene_from_json,
    kleene_from_json_value,
    kleene_object_hook,
    kleene_to_json,
    kleene_to_json_value,
)


class TestDecode:
    """Test decoding of accepted token shapes."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("true", Kleene.TRUE),
            ("false", Kleene.FALSE),
            ("null", Kleene.UNKNOWN),
            ('"true"', Kleene.TRUE),
            ('"FALSE"', Kleene.FALSE),
            ('"unknown"', Kleene.UNKNOWN),
            ('" Unknown "', Kleene.UNKNOWN),
            ('"-1"', Kleene.FALSE),
            ('"0"', Kleene.UNKNOWN),
            ('"1"', Kleene.TRUE),
            ("-1", Kleene.FALSE),
            ("0", Kleene.UNKNOWN),
            ("1", Kleene.TRUE),
        ],
    )
    def test_accepted_documents(self, text, expected):
        assert kleene_from_json(text) is expected

    def test_decode_python_tokens(self):
        """Tokens already produced by json.loads decode directly."""
        assert kleene_from_json_value(True) is Kleene.TRUE
        assert kleene_from_json_value(False) is Kleene.FALSE
        assert kleene_from_json_value(None) is Kleene.UNKNOWN
        assert kleene_from_json_value(-1) is Kleene.FALSE


class TestDecodeErrors:
    """Test that malformed tokens are rejected, never defaulted."""

    @pytest.mark.parametrize(
        "text",
        [
            '"yes"', '""', '"maybe"', '"UN\\u212aNOWN"',
            "2", "-2", "1.0", "0.0", "1e0", "-1.0", "{}", "[]", "[1]", "[1.0]",
        ],
    )
    def test_rejected_documents(self, text):
        with pytest.raises(KleeneDecodeError):
            kleene_from_json(text)

    def test_string_error_names_string(self):
        with pytest.raises(KleeneDecodeError, match="Invalid Kleene string value: 'maybe'") as exc_info:
            kleene_from_json('"maybe"')
        assert exc_info.value.token == "maybe"

    def test_integer_error_names_value(self):
        with pytest.raises(KleeneDecodeError, match="Invalid Kleene numeric value: 2"):
            kleene_from_json("2")

    def test_fractional_error_names_value(self):
        """1.0 is rejected even though it equals a valid encoding."""
        with pytest.raises(KleeneDecodeError, match=r"Invalid Kleene numeric value: 1\.0"):
            kleene_from_json("1.0")

    def test_object_error_names_kind(self):
        with pytest.raises(KleeneDecodeError, match="Invalid token for Kleene: object"):
            kleene_from_json("{}")

    def test_array_error_names_kind(self):
        with pytest.raises(KleeneDecodeError, match="Invalid token for Kleene: array"):
            kleene_from_json("[]")

    def test_exponent_error_names_literal(self):
        """The message quotes the number as written, not its float value."""
        with pytest.raises(KleeneDecodeError, match="Invalid Kleene numeric value: 1e0") as exc_info:
            kleene_from_json("1e0")
        assert exc_info.value.token == "1e0"

    def test_parsed_float_token_rejected(self):
        """Floats from a caller's own json.loads are rejected too."""
        with pytest.raises(KleeneDecodeError, match=r"Invalid Kleene numeric value: 1\.0"):
            kleene_from_json_value(1.0)

    def test_non_finite_numbers_rejected(self):
        with pytest.raises(KleeneDecodeError, match="Invalid Kleene numeric value: NaN"):
            kleene_from_json("NaN")

    def test_look_alike_string_rejected(self):
        """KELVIN SIGN lowercases to k but is not an accepted spelling."""
        with pytest.raises(KleeneDecodeError, match="Invalid Kleene string value"):
            kleene_from_json_value("UN\u212aNOWN")

    def test_huge_integer_raises_decode_error(self):
        """Integers too long to print are still reported as decode errors."""
        with pytest.raises(KleeneDecodeError, match="Invalid Kleene numeric value: <16610-bit integer>"):
            kleene_from_json_value(10**5000)
        with pytest.raises(KleeneDecodeError, match="Invalid Kleene numeric value: -<"):
            kleene_from_json_value(-(10**5000))

    def test_decode_error_is_value_error(self):
        with pytest.raises(ValueError):
            kleene_from_json_value(3)

    def test_malformed_json_is_left_to_json_module(self):
        with pytest.raises(json.JSONDecodeError):
            kleene_from_json("tru")


class TestEncode:
    """Test that encoding only ever emits canonical strings."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Kleene.TRUE, '"True"'),
            (Kleene.FALSE, '"False"'),
            (Kleene.UNKNOWN, '"Unknown"'),
        ],
    )
    def test_encode(self, value, expected):
        assert kleene_to_json(value) == expected

    def test_encode_value_is_string(self):
        for value in Kleene:
            assert isinstance(kleene_to_json_value(value), str)

    def test_round_trip(self):
        for value in Kleene:
            assert kleene_from_json(kleene_to_json(value)) is value


class TestJSONIntegration:
    """Test the codec plugged into the json module for whole documents."""

    def test_encoder_writes_nested_values(self):
        doc = {"name": "Rex", "carnivore": Kleene.UNKNOWN, "flags": [Kleene.TRUE, Kleene.FALSE]}
        text = json.dumps(doc, cls=KleeneJSONEncoder, sort_keys=True)
        assert text == '{"carnivore": "Unknown", "flags": ["True", "False"], "name": "Rex"}'

    def test_encoder_still_rejects_unknown_types(self):
        with pytest.raises(TypeError):
            json.dumps({"x": object()}, cls=KleeneJSONEncoder)

    def test_object_hook_decodes_named_fields(self):
        text = '{"name": "Dumbo", "carnivore": false, "tame": null, "legs": 4}'
        doc = json.loads(text, object_hook=kleene_object_hook("carnivore", "tame"))
        assert doc == {"name": "Dumbo", "carnivore": Kleene.FALSE, "tame": Kleene.UNKNOWN, "legs": 4}

    def test_object_hook_ignores_missing_fields(self):
        doc = json.loads('{"name": "Kaa"}', object_hook=kleene_object_hook("tame"))
        assert doc == {"name": "Kaa"}

    def test_object_hook_rejects_malformed_field(self):
        hook = kleene_object_hook("tame")
        with pytest.raises(KleeneDecodeError, match="'sometimes'"):
            json.loads('{"tame": "sometimes"}', object_hook=hook)

    def test_document_round_trip(self):
        animals = [
            {"name": "Simba", "carnivore": Kleene.TRUE, "tame": Kleene.FALSE},
            {"name": "George", "carnivore": Kleene.UNKNOWN, "tame": Kleene.UNKNOWN},
        ]
        text = json.dumps(animals, cls=KleeneJSONEncoder)
        restored = json.loads(text, object_hook=kleene_object_hook("carnivore", "tame"))
        assert restored == animals
