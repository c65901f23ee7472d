"""
Typed view over a raw OpenAPI schema mapping.

The document is plain ``dict``/``list`` data as produced by ``json`` or
``yaml.safe_load``. ``SchemaNode`` reads the keywords the walker needs and
turns the boolean-or-value unions of OpenAPI 3.0/3.1 into explicit tagged
states, so "not specified" is never confused with "false" or zero.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Final

from oas_model_generator.model.errors import EnumDecodeError, SchemaShapeError

COMPOSITION_KEYWORDS: Final = ("oneOf", "anyOf", "allOf")


class BoundForm(Enum):
    ABSENT = "absent"
    FLAG = "flag"  # OpenAPI 3.0: boolean modifier of minimum/maximum
    VALUE = "value"  # OpenAPI 3.1: standalone numeric bound


@dataclass(frozen=True)
class ExclusiveBound:
    """State of ``exclusiveMinimum``/``exclusiveMaximum``."""

    form: BoundForm
    flag: bool = False
    value: int | float = 0


class SubSchemaForm(Enum):
    ABSENT = "absent"
    FALSE = "false"
    TRUE = "true"
    SCHEMA = "schema"


@dataclass(frozen=True)
class SubSchema:
    """State of ``items``/``additionalProperties``: absent, boolean, or a schema."""

    form: SubSchemaForm
    schema: "SchemaNode | None" = None


def _is_number(value: Any) -> bool:  # noqa: ANN401
    return isinstance(value, int | float) and not isinstance(value, bool)


class SchemaNode:
    """Accessors for one schema object.

    ``location`` is only used to give decode errors context.
    """

    def __init__(self, data: dict[str, Any], location: str = "") -> None:
        self.data = data
        self.location = location

    def __repr__(self) -> str:
        return f"SchemaNode({self.location!r})"

    # References

    @property
    def is_reference(self) -> bool:
        return "$ref" in self.data

    @property
    def reference(self) -> str:
        ref = self.data.get("$ref")
        if not isinstance(ref, str):
            raise SchemaShapeError(self.location, "$ref must be a string")
        return ref

    # Shape

    @property
    def types(self) -> list[str]:
        raw = self.data.get("type")
        if raw is None:
            return []
        if isinstance(raw, str):
            return [raw]
        if isinstance(raw, list) and all(isinstance(t, str) for t in raw):
            return list(raw)
        raise SchemaShapeError(self.location, "type must be a string or a list of strings")

    @property
    def composition_keyword(self) -> str | None:
        for keyword in COMPOSITION_KEYWORDS:
            if keyword in self.data:
                return keyword
        return None

    # Metadata

    @property
    def format(self) -> str:
        return self._str("format")

    @property
    def pattern(self) -> str:
        return self._str("pattern")

    @property
    def description(self) -> str:
        return self._str("description")

    @property
    def deprecated(self) -> bool:
        value = self.data.get("deprecated", False)
        if not isinstance(value, bool):
            raise EnumDecodeError(self.location, "deprecated must be a boolean")
        return value

    @property
    def has_description(self) -> bool:
        return "description" in self.data

    @property
    def has_deprecated(self) -> bool:
        return "deprecated" in self.data

    @property
    def required(self) -> list[str]:
        value = self.data.get("required", [])
        if not isinstance(value, list):
            raise EnumDecodeError(self.location, "required must be a list of property names")
        return [str(name) for name in value]

    @property
    def properties(self) -> dict[str, "SchemaNode"]:
        raw = self.data.get("properties")
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise EnumDecodeError(self.location, "properties must be a mapping")

        properties = {}
        for name, prop in raw.items():
            if not isinstance(prop, dict):
                raise EnumDecodeError(self.location, f"property {name!r} must be a schema object")
            properties[str(name)] = SchemaNode(prop, f"{self.location}/properties/{name}")
        return properties

    # Enums and extensions

    @property
    def enum(self) -> list[Any]:
        value = self.data.get("enum", [])
        if not isinstance(value, list):
            raise EnumDecodeError(self.location, "enum must be a list")
        return value

    def extension(self, name: str) -> Any:  # noqa: ANN401
        """Raw value of an ``x-`` extension, or None when absent."""
        return self.data.get(name)

    # Constraints

    @property
    def min_length(self) -> int | None:
        return self._int("minLength")

    @property
    def max_length(self) -> int | None:
        return self._int("maxLength")

    @property
    def min_items(self) -> int | None:
        return self._int("minItems")

    @property
    def max_items(self) -> int | None:
        return self._int("maxItems")

    @property
    def min_properties(self) -> int | None:
        return self._int("minProperties")

    @property
    def max_properties(self) -> int | None:
        return self._int("maxProperties")

    @property
    def minimum(self) -> float | None:
        return self._number("minimum")

    @property
    def maximum(self) -> float | None:
        return self._number("maximum")

    @property
    def multiple_of(self) -> float | None:
        return self._number("multipleOf")

    @property
    def exclusive_minimum(self) -> ExclusiveBound:
        return self._exclusive("exclusiveMinimum")

    @property
    def exclusive_maximum(self) -> ExclusiveBound:
        return self._exclusive("exclusiveMaximum")

    # Nested schemas

    @property
    def items(self) -> SubSchema:
        return self._sub_schema("items", f"{self.location}/items")

    @property
    def additional_properties(self) -> SubSchema:
        return self._sub_schema("additionalProperties", f"{self.location}/additionalProperties")

    # Helpers

    def _str(self, key: str) -> str:
        value = self.data.get(key)
        if value is None:
            return ""
        if not isinstance(value, str):
            raise EnumDecodeError(self.location, f"{key} must be a string")
        return value

    def _int(self, key: str) -> int | None:
        value = self.data.get(key)
        if value is None:
            return None
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if not isinstance(value, int) or isinstance(value, bool):
            raise EnumDecodeError(self.location, f"{key} must be an integer")
        return value

    def _number(self, key: str) -> float | None:
        value = self.data.get(key)
        if value is None:
            return None
        if not _is_number(value):
            raise EnumDecodeError(self.location, f"{key} must be a number")
        return value

    def _exclusive(self, key: str) -> ExclusiveBound:
        value = self.data.get(key)
        if value is None:
            return ExclusiveBound(BoundForm.ABSENT)
        if isinstance(value, bool):
            return ExclusiveBound(BoundForm.FLAG, flag=value)
        if _is_number(value):
            return ExclusiveBound(BoundForm.VALUE, value=value)
        raise EnumDecodeError(self.location, f"{key} must be a boolean or a number")

    def _sub_schema(self, key: str, location: str) -> SubSchema:
        value = self.data.get(key)
        if value is None:
            return SubSchema(SubSchemaForm.ABSENT)
        if value is True:
            return SubSchema(SubSchemaForm.TRUE)
        if value is False:
            return SubSchema(SubSchemaForm.FALSE)
        if isinstance(value, dict):
            return SubSchema(SubSchemaForm.SCHEMA, SchemaNode(value, location))
        raise EnumDecodeError(self.location, f"{key} must be a boolean or a schema object")
