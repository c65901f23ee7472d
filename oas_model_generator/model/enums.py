"""
Enum constant extraction.

Enum values are decoded with one typed decoder per primitive kind, chosen
from the schema's type and format. Names and documentation come from the
``x-enum-varnames`` and ``x-enum-descriptions`` vendor extensions, which are
aligned positionally with the enum list.
"""

import math
from collections.abc import Callable
from decimal import Decimal
from typing import Any, Final, TypeVar

from oas_model_generator.model.errors import EnumDecodeError
from oas_model_generator.model.schema import SchemaNode
from oas_model_generator.model.types import EnumConst, to_doc_lines

X_ENUM_VARNAMES: Final = "x-enum-varnames"
X_ENUM_DESCRIPTIONS: Final = "x-enum-descriptions"

_INT32_MIN: Final = -(2**31)
_INT32_MAX: Final = 2**31 - 1
_INT64_MIN: Final = -(2**63)
_INT64_MAX: Final = 2**63 - 1

T = TypeVar("T")


class DecodeError(ValueError):
    """A raw value does not fit the requested literal kind."""


def format_number(value: int | float) -> str:
    """Fixed-point text of a number, without exponent or trailing zeros.

    Examples:
        >>> format_number(1.0)
        '1'
        >>> format_number(1e-05)
        '0.00001'
        >>> format_number(-2.5)
        '-2.5'
    """
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return repr(value)

    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def decode_str(raw: Any) -> str:  # noqa: ANN401
    """Decode a string literal. Other scalars are taken by their literal text."""
    match raw:
        case str():
            return raw
        case bool():
            return "true" if raw else "false"
        case int() | float():
            return format_number(raw)
    msg = f"expected a string, got {type(raw).__name__}"
    raise DecodeError(msg)


def decode_bool(raw: Any) -> bool:  # noqa: ANN401
    if not isinstance(raw, bool):
        msg = f"expected a boolean, got {type(raw).__name__}"
        raise DecodeError(msg)
    return raw


def decode_float64(raw: Any) -> float:  # noqa: ANN401
    if isinstance(raw, bool) or not isinstance(raw, int | float):
        msg = f"expected a number, got {type(raw).__name__}"
        raise DecodeError(msg)
    return float(raw)


def _decode_int(raw: Any, low: int, high: int) -> int:  # noqa: ANN401
    if isinstance(raw, float) and raw.is_integer():
        raw = int(raw)
    if isinstance(raw, bool) or not isinstance(raw, int):
        msg = f"expected an integer, got {raw!r}"
        raise DecodeError(msg)
    if not low <= raw <= high:
        msg = f"{raw} is out of range [{low}, {high}]"
        raise DecodeError(msg)
    return raw


def decode_int32(raw: Any) -> int:  # noqa: ANN401
    return _decode_int(raw, _INT32_MIN, _INT32_MAX)


def decode_int64(raw: Any) -> int:  # noqa: ANN401
    return _decode_int(raw, _INT64_MIN, _INT64_MAX)


def _decode_string_list(schema: SchemaNode, name: str) -> list[str]:
    raw = schema.extension(name)
    if raw is None:
        return []
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise EnumDecodeError(schema.location, f"failed to decode {name}: expected a list of strings")
    return raw


def make_consts(
    schema: SchemaNode,
    decode: Callable[[Any], T],
    build: Callable[[EnumConst, T], None],
) -> list[EnumConst]:
    """Build the enum constants of a schema.

    Args:
        schema: Schema carrying ``enum`` and the optional vendor extensions.
        decode: Typed decoder for the schema's kind.
        build: Stores the decoded value in the matching literal slot.

    Returns:
        One constant per non-null enum value, in enum order. Names and
        descriptions stay aligned with the position in the full enum list.

    Raises:
        EnumDecodeError: If an extension or any single enum value fails to decode.
    """
    values = schema.enum
    if not values:
        return []

    varnames = _decode_string_list(schema, X_ENUM_VARNAMES)
    descriptions = _decode_string_list(schema, X_ENUM_DESCRIPTIONS)

    consts = []
    for i, raw in enumerate(values):
        if raw is None:
            # null in a nullable enum is not a member
            continue

        try:
            value = decode(raw)
        except DecodeError as e:
            raise EnumDecodeError(schema.location, f"failed to decode enum value {i}: {e}") from e

        const = EnumConst(
            name=varnames[i] if i < len(varnames) else "",
            doc=to_doc_lines(descriptions[i] if i < len(descriptions) else ""),
        )
        build(const, value)
        consts.append(const)

    return consts
