"""
JSON-ready views of the compiled model.

Unset attributes are omitted so the output stays close to the source schema.
An object whose ``elem`` is absent forbids additional properties; an
``unknown`` elem allows any value.
"""

from typing import Any, Final

from oas_model_generator.model.location import Location
from oas_model_generator.model.naming import enum_const_name
from oas_model_generator.model.registry import Registry
from oas_model_generator.model.types import Declaration, EnumConst, Field, Type

_OPTIONAL_ATTRS: Final = (
    "min",
    "max",
    "multiple_of",
    "length",
    "min_f",
    "max_f",
    "multiple_of_f",
)
_FLAG_ATTRS: Final = ("excl_min", "excl_max")
_STRING_ATTRS: Final = ("ref", "pattern", "format")


def enum_const_to_dict(const: EnumConst, decl_name: str = "") -> dict[str, Any]:
    result: dict[str, Any] = {"value": const.value}
    if const.name:
        result["name"] = const.name
    if decl_name:
        result["identifier"] = enum_const_name(decl_name, const)
    if const.doc:
        result["doc"] = const.doc
    return result


def field_to_dict(field: Field) -> dict[str, Any]:
    result: dict[str, Any] = {
        "name": field.name,
        "type": type_to_dict(field.type),
        "required": field.required,
    }
    if field.deprecated:
        result["deprecated"] = True
    if field.doc:
        result["doc"] = field.doc
    return result


def type_to_dict(typ: Type, decl_name: str = "") -> dict[str, Any]:
    """Convert a Type into plain data.

    Args:
        typ: The type to convert.
        decl_name: Name of the owning declaration, used to name enum constants.
    """
    result: dict[str, Any] = {"kind": typ.kind.value}

    for attr in _STRING_ATTRS:
        if value := getattr(typ, attr):
            result[attr] = value

    for attr in _OPTIONAL_ATTRS:
        value = getattr(typ, attr)
        if value is not None:
            result[attr] = value

    for attr in _FLAG_ATTRS:
        if getattr(typ, attr):
            result[attr] = True

    if typ.enum:
        result["enum"] = [enum_const_to_dict(const, decl_name) for const in typ.enum]
    if typ.fields:
        result["fields"] = [field_to_dict(field) for field in typ.fields]
    if typ.elem is not None:
        result["elem"] = type_to_dict(typ.elem)

    return result


def location_to_dict(loc: Location) -> dict[str, Any]:
    return {
        "root": loc.root,
        "path": [{"kind": segment.kind.value, "name": segment.name} for segment in loc.path],
    }


def declaration_to_dict(decl: Declaration, name: str = "") -> dict[str, Any]:
    result: dict[str, Any] = {"id": decl.id}
    if name:
        result["name"] = name
    result["location"] = location_to_dict(decl.loc)
    result["type"] = type_to_dict(decl.type, name)
    if decl.deprecated:
        result["deprecated"] = True
    if decl.doc:
        result["doc"] = list(decl.doc)
    return result


def registry_to_dict(
    registry: Registry,
    names: dict[str, str] | None = None,
    package_name: str = "",
) -> dict[str, Any]:
    """Convert a registry into plain data, keeping declaration order."""
    names = names or {}
    result: dict[str, Any] = {}
    if package_name:
        result["package"] = package_name
    result["declarations"] = [declaration_to_dict(decl, names.get(decl.id, "")) for decl in registry]
    return result
