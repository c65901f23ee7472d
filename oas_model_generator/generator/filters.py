"""
Jinja2 filters for rendering model reports.

This module provides the filters used by the Markdown report template to
describe declarations, their types and validation constraints.
"""

from __future__ import annotations

import json

from oas_model_generator.model.types import EnumConst, Type, TypeKind


def type_label(typ: Type | None) -> str:
    """Short, human readable description of a Type.

    Examples:
        string, int64, array<string>, map<int32>, object, ref User
    """
    if typ is None:
        return "none"

    match typ.kind:
        case TypeKind.REF:
            return f"ref {typ.ref}"
        case TypeKind.ARRAY:
            return f"array<{type_label(typ.elem)}>"
        case TypeKind.OBJECT if not typ.fields and typ.elem is not None:
            return f"map<{type_label(typ.elem)}>"
        case TypeKind.STRING if typ.format:
            return f"string({typ.format})"
        case _:
            return typ.kind.value


def constraint_labels(typ: Type) -> list[str]:
    """List the validation constraints of a Type.

    Args:
        typ: The type to describe.

    Returns:
        Constraint descriptions, e.g. ``["len = 5", "pattern ^[a-z]+$"]``.
    """
    labels = []

    if typ.length is not None:
        labels.append(f"len = {typ.length}")

    lower = typ.min if typ.min is not None else typ.min_f
    if lower is not None:
        labels.append(f"min {'>' if typ.excl_min else '>='} {lower}")

    upper = typ.max if typ.max is not None else typ.max_f
    if upper is not None:
        labels.append(f"max {'<' if typ.excl_max else '<='} {upper}")

    multiple_of = typ.multiple_of if typ.multiple_of is not None else typ.multiple_of_f
    if multiple_of is not None:
        labels.append(f"multipleOf {multiple_of}")

    if typ.pattern:
        labels.append(f"pattern {typ.pattern}")

    if typ.kind is TypeKind.OBJECT and typ.fields and typ.elem is None:
        labels.append("no additional properties")

    return labels


def enum_literal(const: EnumConst) -> str:
    """Render an enum value as a JSON literal."""
    return json.dumps(const.value)


def doc_text(lines: list[str] | tuple[str, ...]) -> str:
    """Join documentation lines into a single line."""
    return " ".join(line.strip() for line in lines if line.strip())


def md_cell(text: str) -> str:
    """Escape text for use inside a Markdown table cell."""
    return text.replace("|", "\\|")


# Register filters that will be available in Jinja templates
FILTERS = {
    "type_label": type_label,
    "constraint_labels": constraint_labels,
    "enum_literal": enum_literal,
    "doc_text": doc_text,
    "md_cell": md_cell,
}
