"""Tests for typed enum decoding and vendor extension handling."""

import pytest

from oas_model_generator.model.enums import (
    X_ENUM_DESCRIPTIONS,
    X_ENUM_VARNAMES,
    DecodeError,
    decode_bool,
    decode_float64,
    decode_int32,
    decode_int64,
    decode_str,
    format_number,
    make_consts,
)
from oas_model_generator.model.errors import EnumDecodeError
from oas_model_generator.model.schema import SchemaNode
from oas_model_generator.model.types import EnumConst


def _set_str(const: EnumConst, value: str) -> None:
    const.str_value = value


class TestDecoders:
    """One decoder per literal kind."""

    def test_decode_str(self) -> None:
        assert decode_str("active") == "active"

        with pytest.raises(DecodeError):
            decode_str(["active"])

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(200, "200"), (True, "true"), (False, "false"), (1.5, "1.5"), (1e3, "1000")],
    )
    def test_decode_str_takes_scalars_by_literal_text(self, raw: object, expected: str) -> None:
        """Numbers and booleans in a string enum become their literal text."""
        assert decode_str(raw) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1.0, "1"), (1e-05, "0.00001"), (1e20, "100000000000000000000"), (-2.5, "-2.5"), (7, "7")],
    )
    def test_format_number_is_fixed_point(self, value: float, expected: str) -> None:
        assert format_number(value) == expected

    def test_decode_bool(self) -> None:
        assert decode_bool(False) is False

        with pytest.raises(DecodeError):
            decode_bool(0)

    def test_decode_float64_accepts_ints(self) -> None:
        result = decode_float64(3)

        assert result == 3.0
        assert isinstance(result, float)

    def test_decode_float64_rejects_booleans(self) -> None:
        with pytest.raises(DecodeError):
            decode_float64(True)

    def test_decode_int_accepts_integral_floats(self) -> None:
        assert decode_int64(2.0) == 2

    @pytest.mark.parametrize("raw", [1.5, "1", True, None])
    def test_decode_int_rejects_non_integers(self, raw: object) -> None:
        with pytest.raises(DecodeError):
            decode_int64(raw)

    def test_decode_int32_range(self) -> None:
        assert decode_int32(2**31 - 1) == 2**31 - 1
        assert decode_int32(-(2**31)) == -(2**31)

        with pytest.raises(DecodeError, match="out of range"):
            decode_int32(2**31)

    def test_decode_int64_range(self) -> None:
        assert decode_int64(2**63 - 1) == 2**63 - 1

        with pytest.raises(DecodeError, match="out of range"):
            decode_int64(2**63)


class TestMakeConsts:
    """Constant extraction from enum, x-enum-varnames and x-enum-descriptions."""

    def test_no_enum(self) -> None:
        assert make_consts(SchemaNode({"type": "string"}), decode_str, _set_str) == []

    def test_names_and_docs_align_by_position(self) -> None:
        schema = SchemaNode(
            {
                "type": "string",
                "enum": ["a", "b", "c"],
                X_ENUM_VARNAMES: ["Alpha", "Beta"],
                X_ENUM_DESCRIPTIONS: ["First letter", "", "Third\nletter"],
            },
            "Letter",
        )

        consts = make_consts(schema, decode_str, _set_str)

        assert [c.str_value for c in consts] == ["a", "b", "c"]
        assert [c.name for c in consts] == ["Alpha", "Beta", ""]
        assert [c.doc for c in consts] == [["First letter"], [], ["Third", "letter"]]

    def test_extra_extension_entries_are_ignored(self) -> None:
        schema = SchemaNode({"enum": ["a"], X_ENUM_VARNAMES: ["Alpha", "Beta"]})

        consts = make_consts(schema, decode_str, _set_str)

        assert [c.name for c in consts] == ["Alpha"]

    def test_malformed_extension_is_an_error(self) -> None:
        schema = SchemaNode({"enum": ["a"], X_ENUM_VARNAMES: "Alpha"}, "Letter")

        with pytest.raises(EnumDecodeError, match=X_ENUM_VARNAMES) as exc_info:
            make_consts(schema, decode_str, _set_str)

        assert exc_info.value.location == "Letter"

    def test_bad_value_aborts_with_its_index(self) -> None:
        schema = SchemaNode({"enum": ["a", ["b"]]}, "Letter")

        with pytest.raises(EnumDecodeError, match="failed to decode enum value 1"):
            make_consts(schema, decode_str, _set_str)

    def test_null_is_skipped_and_keeps_alignment(self) -> None:
        """null marks a nullable enum; the remaining values keep their positional names."""
        schema = SchemaNode(
            {"enum": [None, "a", "b"], X_ENUM_VARNAMES: ["None", "Alpha", "Beta"]},
            "Letter",
        )

        consts = make_consts(schema, decode_str, _set_str)

        assert [(c.name, c.str_value) for c in consts] == [("Alpha", "a"), ("Beta", "b")]

    def test_enum_must_be_a_list(self) -> None:
        schema = SchemaNode({"enum": "a"}, "Letter")

        with pytest.raises(EnumDecodeError, match="enum must be a list"):
            make_consts(schema, decode_str, _set_str)


class TestEnumConst:
    def test_value_returns_populated_slot(self) -> None:
        assert EnumConst(int32=0).value == 0
        assert EnumConst(bool_value=False).value is False
        assert EnumConst(str_value="").value == ""

    def test_value_without_slot_is_an_error(self) -> None:
        with pytest.raises(ValueError, match="no literal value"):
            _ = EnumConst().value
