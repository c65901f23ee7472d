"""
Intermediate model produced from OpenAPI schemas.

Types are anonymous structural descriptions. They become named only when a
Declaration wraps them; cycles in the schema graph are broken by ``REF``
types that carry a Declaration ID instead of the referenced Type itself.
"""

from dataclasses import dataclass, field
from enum import Enum

from oas_model_generator.model.location import Location


class TypeKind(Enum):
    """Structural kind of a Type."""

    UNKNOWN = "unknown"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT64 = "float64"
    BOOL = "bool"
    STRING = "string"
    OBJECT = "object"
    ARRAY = "array"
    REF = "ref"


EnumLiteral = str | int | float | bool


@dataclass
class EnumConst:
    """One member of an enumerated Type.

    Exactly one literal slot is populated, matching the kind of the owning
    Type. ``name`` comes from ``x-enum-varnames`` and is empty when unset.
    """

    name: str = ""
    str_value: str | None = None
    int32: int | None = None
    int64: int | None = None
    float64: float | None = None
    bool_value: bool | None = None
    doc: list[str] = field(default_factory=list)

    @property
    def value(self) -> EnumLiteral:
        """The populated literal."""
        for literal in (self.str_value, self.int32, self.int64, self.float64, self.bool_value):
            if literal is not None:
                return literal
        msg = "enum constant has no literal value"
        raise ValueError(msg)


@dataclass
class Field:
    """One member of an object Type, in declared property order."""

    name: str
    type: "Type"
    required: bool = False
    deprecated: bool = False
    doc: list[str] = field(default_factory=list)


@dataclass
class Type:
    """Anonymous structural description of a schema node."""

    kind: TypeKind
    enum: list[EnumConst] = field(default_factory=list)  # simple kinds
    fields: list[Field] = field(default_factory=list)  # object
    elem: "Type | None" = None  # array items, object additionalProperties
    ref: str = ""  # ref: ID of the referenced declaration

    # Validation
    min: int | None = None  # int32, int64, string, object, array
    max: int | None = None
    excl_min: bool = False  # int32, int64, float64
    excl_max: bool = False
    multiple_of: int | None = None  # int32, int64
    length: int | None = None  # string, object, array
    pattern: str = ""  # string
    format: str = ""  # string
    min_f: float | None = None  # float64
    max_f: float | None = None
    multiple_of_f: float | None = None

    @classmethod
    def reference(cls, ref: str) -> "Type":
        return cls(kind=TypeKind.REF, ref=ref)

    @classmethod
    def unknown(cls) -> "Type":
        return cls(kind=TypeKind.UNKNOWN)


@dataclass(frozen=True)
class Declaration:
    """A named, top-level unit of code generation.

    Created for every schema under components.schemas, for every enum schema
    and for the aliases produced by top-level references. The ID is the
    string form of ``loc``.
    """

    id: str
    type: Type
    loc: Location
    doc: tuple[str, ...] = ()
    deprecated: bool = False


def to_doc_lines(doc: str | None) -> list[str]:
    """Split a description into lines, normalising line endings."""
    if not doc:
        return []

    normalized = doc.replace("\r\n", "\n").replace("\r", "\n")
    return normalized.split("\n")
