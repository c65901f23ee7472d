"""Tests for declaration and enum constant naming."""

from typing import Any

import pytest

from oas_model_generator.model import (
    DeclarationNamer,
    EnumConst,
    Location,
    assign_names,
    build_registry,
    enum_const_name,
)
from oas_model_generator.utils.string_case import normalize_identifier, pascalcase, snakecase


@pytest.fixture
def namer() -> DeclarationNamer:
    return DeclarationNamer()


class TestDeclarationNamer:
    def test_top_level_name(self, namer: DeclarationNamer) -> None:
        assert namer.name_for(Location(root="user_profile")) == "UserProfile"

    def test_segment_names(self, namer: DeclarationNamer) -> None:
        root = Location(root="User")

        assert namer.name_for(root.with_property("home_address")) == "UserHomeAddress"
        assert namer.name_for(root.with_property("tags").with_items()) == "UserTagsItem"
        assert namer.name_for(Location(root="Labels").with_additional_properties()) == "LabelsEntry"

    def test_collisions_get_a_counter(self, namer: DeclarationNamer) -> None:
        """Names that normalise to the same identifier stay unique."""
        assert namer.name_for(Location(root="user")) == "User"
        assert namer.name_for(Location(root="User")) == "User1"
        assert namer.name_for(Location(root="USER")) == "User2"

    def test_counter_is_per_namer(self) -> None:
        """Separate naming passes do not share state."""
        first, second = DeclarationNamer(), DeclarationNamer()

        assert first.name_for(Location(root="User")) == "User"
        assert second.name_for(Location(root="User")) == "User"

    def test_names_are_identifiers(self, namer: DeclarationNamer) -> None:
        assert namer.name_for(Location(root="2fa.settings")) == "_2faSettings"

    def test_empty_name_falls_back(self, namer: DeclarationNamer) -> None:
        assert namer.name_for(Location(root="")) == "Model"


class TestAssignNames:
    def test_names_follow_registry_order(self) -> None:
        registry = build_registry(
            {
                "components": {
                    "schemas": {
                        "User": {
                            "type": "object",
                            "properties": {"status": {"type": "string", "enum": ["on"]}},
                        },
                        "UserStatus": {"type": "string"},
                    }
                }
            }
        )

        names = assign_names(registry)

        assert names == {
            "User": "User",
            "User/properties/status": "UserStatus",
            "UserStatus": "UserStatus1",
        }

    def test_repeated_passes_agree(self) -> None:
        document: dict[str, Any] = {"components": {"schemas": {"A": {"type": "string"}, "a": {"type": "string"}}}}
        registry = build_registry(document)

        assert assign_names(registry) == assign_names(registry)


class TestEnumConstName:
    def test_named_constant(self) -> None:
        assert enum_const_name("Status", EnumConst(name="IsOn", bool_value=True)) == "StatusIsOn"

    def test_string_literal(self) -> None:
        assert enum_const_name("Status", EnumConst(str_value="in-progress")) == "StatusInProgress"

    @pytest.mark.parametrize(
        ("const", "expected"),
        [
            (EnumConst(float64=0.5), "Ratio0_5"),
            (EnumConst(float64=1.0), "Ratio1"),
            (EnumConst(float64=1e-05), "Ratio0_00001"),
            (EnumConst(float64=1e20), "Ratio100000000000000000000"),
            (EnumConst(float64=-2.5), "RatioMinus2_5"),
            (EnumConst(int64=-1), "RatioMinus1"),
            (EnumConst(bool_value=False), "RatioFalse"),
        ],
    )
    def test_literal_suffixes(self, const: EnumConst, expected: str) -> None:
        assert enum_const_name("Ratio", const) == expected


class TestStringCase:
    def test_snakecase(self) -> None:
        assert snakecase("getHTTPResponse") == "get_http_response"
        assert snakecase("a/b.c-d") == "a_b_c_d"
        assert snakecase(None) == ""

    def test_pascalcase(self) -> None:
        assert pascalcase("hello_world") == "HelloWorld"
        assert pascalcase("best-friend") == "BestFriend"

    def test_normalize_identifier(self) -> None:
        assert normalize_identifier("123invalid") == "_123invalid"
        assert normalize_identifier("valid@name") == "valid_name"
