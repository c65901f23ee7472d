"""
Schema-to-model compiler.

Processes the schemas of an OpenAPI document into generic declarations
suitable for code generation. It deliberately does not emit any code.

Glossary:
    Declaration: a named, top-level unit of generation. Created for every
        schema in components.schemas and for enums at any depth.
    Type: an anonymous structural description (primitive, object, array, or
        a reference to a Declaration by ID).
    Location: root schema name plus the path of property, items and
        additionalProperties segments that leads to a node. Its string form
        is the Declaration ID.

Example:
    components:
      schemas:
        User:
          type: object
          properties:
            name:
              type: string
            status:
              type: string
              enum: [active, disabled]

    yields two declarations, ``User`` (an object whose ``status`` field is a
    reference) and ``User/properties/status`` (a string enum).
"""

from .errors import (
    EnumDecodeError,
    NumericDomainError,
    SchemaError,
    SchemaShapeError,
    UnresolvedReferenceError,
)
from .location import Location, Segment, SegmentKind
from .naming import DeclarationNamer, assign_names, enum_const_name
from .registry import Registry, build_registry, ref_id
from .types import Declaration, EnumConst, Field, Type, TypeKind

__all__ = [
    "Declaration",
    "DeclarationNamer",
    "EnumConst",
    "EnumDecodeError",
    "Field",
    "Location",
    "NumericDomainError",
    "Registry",
    "SchemaError",
    "SchemaShapeError",
    "Segment",
    "SegmentKind",
    "Type",
    "TypeKind",
    "UnresolvedReferenceError",
    "assign_names",
    "build_registry",
    "enum_const_name",
    "ref_id",
]
