"""
Schema walker and declaration registry.

The walker visits every schema under ``components.schemas`` depth-first and
maps each node to a ``Type``. Nodes that must be named (every top-level
schema and every enum) are registered as Declarations and replaced by a
``REF`` type pointing at the declaration ID. Everything else is returned
inline.
"""

import logging
from collections.abc import Callable, Iterator
from typing import Any, Final
from urllib.parse import unquote

from oas_model_generator.model.bounds import get_numeric_bounds, to_integral
from oas_model_generator.model.enums import (
    decode_bool,
    decode_float64,
    decode_int32,
    decode_int64,
    decode_str,
    make_consts,
)
from oas_model_generator.model.errors import SchemaShapeError, UnresolvedReferenceError
from oas_model_generator.model.location import Location
from oas_model_generator.model.schema import SchemaNode, SubSchemaForm
from oas_model_generator.model.types import Declaration, EnumConst, Field, Type, TypeKind, to_doc_lines
from oas_model_generator.parser.document import OpenAPIDocument

logger = logging.getLogger(__name__)

SCHEMA_REF_PREFIX: Final = "#/components/schemas/"


def _slot(name: str) -> Callable[[EnumConst, Any], None]:
    def build(const: EnumConst, value: Any) -> None:  # noqa: ANN401
        setattr(const, name, value)

    return build


def is_schema_reference(reference: str) -> bool:
    """Check whether a reference points directly at a component schema."""
    return reference.startswith(SCHEMA_REF_PREFIX) and "/" not in reference[len(SCHEMA_REF_PREFIX) :]


def ref_id(reference: str) -> str:
    """Map a ``$ref`` to the ID of the declaration it names.

    Args:
        reference: The ``$ref`` value (e.g. ``#/components/schemas/Pet``).

    Returns:
        The schema name for references into components.schemas, with JSON
        pointer escapes decoded. Any other reference is returned unchanged.

    Examples:
        >>> ref_id("#/components/schemas/Pet")
        'Pet'
        >>> ref_id("#/components/schemas/a~1b")
        'a/b'
        >>> ref_id("other.yaml#/components/schemas/Pet")
        'other.yaml#/components/schemas/Pet'
    """
    if not is_schema_reference(reference):
        return reference

    name = unquote(reference[len(SCHEMA_REF_PREFIX) :])
    return name.replace("~1", "/").replace("~0", "~")


class Registry:
    """Ordered, ID-keyed collection of the declarations of one document.

    Declarations are ordered pre-order: a top-level object or array reserves
    its slot in ``_ids`` before its children are walked, so ``User`` comes
    before the enum hoisted from ``User/properties/status`` even though the
    enum is registered first. ``_ids`` is therefore slot order, not creation
    order, and a reserved slot is skipped by ``ids``, ``range`` and iteration
    until its declaration is added.

    A registry is filled by a single ``collect`` call and read afterwards.
    If ``collect`` raises, the registry may hold partial results and should
    be discarded.
    """

    def __init__(self) -> None:
        self._decls: dict[str, Declaration] = {}
        self._ids: list[str] = []
        self._reserved: set[str] = set()
        self._schema_refs: list[tuple[str, str, str]] = []
        self._document: OpenAPIDocument | None = None

    def collect(self, document: OpenAPIDocument | dict[str, Any]) -> None:
        """Walk every component schema in document order.

        Raises:
            SchemaError: On the first schema that cannot be compiled, or when a
                reference into components.schemas does not resolve.
        """
        if not isinstance(document, OpenAPIDocument):
            document = OpenAPIDocument(document)
        self._document = document

        for name, raw in document.schemas.items():
            loc = Location(root=name)
            logger.debug("Walking schema %s", name)
            self._visit(loc, self._node(loc, raw))

        self._check_references()

    def get(self, id_: str) -> Declaration | None:
        return self._decls.get(id_)

    def range(self, fn: Callable[[str, Declaration], bool]) -> None:
        """Iterate declarations in insertion order; stop when ``fn`` returns False."""
        for id_ in self._ids:
            decl = self._decls.get(id_)
            if decl is not None and not fn(id_, decl):
                return

    @property
    def ids(self) -> list[str]:
        return [id_ for id_ in self._ids if id_ in self._decls]

    def __iter__(self) -> Iterator[Declaration]:
        return (self._decls[id_] for id_ in self.ids)

    def __len__(self) -> int:
        return len(self._decls)

    def __contains__(self, id_: object) -> bool:
        return id_ in self._decls

    # Bookkeeping

    def _reserve(self, loc: Location) -> None:
        """Fix the position of a declaration before its children are walked."""
        id_ = str(loc)
        self._ids.append(id_)
        self._reserved.add(id_)

    def _add_decl(self, loc: Location, typ: Type, schema: SchemaNode | None) -> str:
        decl = Declaration(
            id=str(loc),
            type=typ,
            loc=loc,
            doc=tuple(to_doc_lines(schema.description)) if schema else (),
            deprecated=schema.deprecated if schema else False,
        )

        self._decls[decl.id] = decl
        if decl.id in self._reserved:
            self._reserved.discard(decl.id)
        else:
            self._ids.append(decl.id)

        logger.debug("Registered declaration %s (%s)", decl.id, typ.kind.value)
        return decl.id

    def _hoist(self, loc: Location, typ: Type, schema: SchemaNode | None) -> Type:
        return Type.reference(self._add_decl(loc, typ, schema))

    def _check_references(self) -> None:
        for location, reference, target in self._schema_refs:
            if target not in self._decls:
                raise UnresolvedReferenceError(location, reference)

    @staticmethod
    def _node(loc: Location, raw: Any) -> SchemaNode:  # noqa: ANN401
        if not isinstance(raw, dict):
            raise SchemaShapeError(str(loc), "schema must be a mapping")
        return SchemaNode(raw, str(loc))

    # Walker

    def _visit(self, loc: Location, schema: SchemaNode) -> Type:
        """Convert a schema node into a Type, registering declarations as needed."""
        if schema.is_reference:
            return self._visit_ref(loc, schema)

        keyword = schema.composition_keyword
        if keyword is not None:
            raise SchemaShapeError(str(loc), f"uses {keyword}, which is not supported")

        types = schema.types
        if not types:
            raise SchemaShapeError(str(loc), "has no type")

        if len(types) > 1:
            raise SchemaShapeError(str(loc), "has multiple types, which is not supported at the moment")

        match types[0]:
            case "string":
                return self._visit_str(loc, schema)
            case "integer":
                return self._visit_int(loc, schema)
            case "number":
                return self._visit_num(loc, schema)
            case "boolean":
                return self._visit_bool(loc, schema)
            case "array":
                return self._visit_arr(loc, schema)
            case "object":
                return self._visit_obj(loc, schema)
            case other:
                raise SchemaShapeError(str(loc), f"unhandled type {other}")

    def _visit_ref(self, loc: Location, schema: SchemaNode) -> Type:
        reference = schema.reference
        typ = Type.reference(ref_id(reference))
        if is_schema_reference(reference):
            self._schema_refs.append((str(loc), reference, typ.ref))

        if loc.is_top_level:
            return self._hoist(loc, typ, None)

        return typ

    def _visit_str(self, loc: Location, schema: SchemaNode) -> Type:
        typ = Type(kind=TypeKind.STRING, pattern=schema.pattern, format=schema.format)

        min_length, max_length = schema.min_length, schema.max_length
        if min_length is not None and min_length == max_length:
            typ.length = max_length
        else:
            typ.min, typ.max = min_length, max_length

        typ.enum = make_consts(schema, decode_str, _slot("str_value"))

        if loc.is_top_level or typ.enum:
            return self._hoist(loc, typ, schema)

        return typ

    def _visit_int(self, loc: Location, schema: SchemaNode) -> Type:
        if schema.format == "int32":
            typ = Type(kind=TypeKind.INT32)
            typ.enum = make_consts(schema, decode_int32, _slot("int32"))
        else:
            typ = Type(kind=TypeKind.INT64)
            typ.enum = make_consts(schema, decode_int64, _slot("int64"))

        bounds = get_numeric_bounds(schema)

        if bounds.max is not None:
            typ.max = to_integral(bounds.max, str(loc), "maximum or exclusiveMaximum")
            typ.excl_max = bounds.excl_max

        if bounds.min is not None:
            typ.min = to_integral(bounds.min, str(loc), "minimum or exclusiveMinimum")
            typ.excl_min = bounds.excl_min

        multiple_of = schema.multiple_of
        if multiple_of is not None:
            typ.multiple_of = to_integral(multiple_of, str(loc), "multipleOf")

        if loc.is_top_level or typ.enum:
            return self._hoist(loc, typ, schema)

        return typ

    def _visit_num(self, loc: Location, schema: SchemaNode) -> Type:
        typ = Type(kind=TypeKind.FLOAT64)
        typ.enum = make_consts(schema, decode_float64, _slot("float64"))

        bounds = get_numeric_bounds(schema)
        if bounds.max is not None:
            typ.max_f, typ.excl_max = float(bounds.max), bounds.excl_max
        if bounds.min is not None:
            typ.min_f, typ.excl_min = float(bounds.min), bounds.excl_min

        multiple_of = schema.multiple_of
        if multiple_of is not None:
            typ.multiple_of_f = float(multiple_of)

        if loc.is_top_level or typ.enum:
            return self._hoist(loc, typ, schema)

        return typ

    def _visit_bool(self, loc: Location, schema: SchemaNode) -> Type:
        typ = Type(kind=TypeKind.BOOL)
        typ.enum = make_consts(schema, decode_bool, _slot("bool_value"))

        if loc.is_top_level or typ.enum:
            return self._hoist(loc, typ, schema)

        return typ

    def _visit_arr(self, loc: Location, schema: SchemaNode) -> Type:
        typ = Type(kind=TypeKind.ARRAY)

        min_items, max_items = schema.min_items, schema.max_items
        if min_items is not None and min_items == max_items:
            typ.length = max_items
        else:
            typ.min, typ.max = min_items, max_items

        if loc.is_top_level:
            self._reserve(loc)

        items = schema.items
        match items.form:
            case SubSchemaForm.ABSENT | SubSchemaForm.TRUE:
                typ.elem = Type.unknown()
            case SubSchemaForm.FALSE:
                # no items allowed
                typ.elem = Type.unknown()
                typ.length, typ.min, typ.max = 0, None, None
            case SubSchemaForm.SCHEMA:
                typ.elem = self._visit(loc.with_items(), items.schema)

        if loc.is_top_level:
            return self._hoist(loc, typ, schema)

        return typ

    def _visit_obj(self, loc: Location, schema: SchemaNode) -> Type:
        typ = Type(kind=TypeKind.OBJECT)

        min_properties, max_properties = schema.min_properties, schema.max_properties
        if min_properties is not None and min_properties == max_properties:
            typ.length = max_properties
        else:
            typ.min, typ.max = min_properties, max_properties

        if loc.is_top_level:
            self._reserve(loc)

        typ.elem = self._visit_additional_props(loc, schema)

        required = set(schema.required)
        for name, prop in schema.properties.items():
            field_type = self._visit(loc.with_property(name), prop)
            description, deprecated = self._field_metadata(prop)

            typ.fields.append(
                Field(
                    name=name,
                    type=field_type,
                    required=name in required,
                    deprecated=deprecated,
                    doc=to_doc_lines(description),
                )
            )

        if loc.is_top_level:
            return self._hoist(loc, typ, schema)

        return typ

    def _visit_additional_props(self, loc: Location, schema: SchemaNode) -> Type | None:
        """Resolve the map value type of an object.

        Returns None when additional properties are forbidden, and an unknown
        type when they are allowed without a schema.
        """
        additional = schema.additional_properties
        match additional.form:
            case SubSchemaForm.FALSE:
                return None
            case SubSchemaForm.ABSENT | SubSchemaForm.TRUE:
                return Type.unknown()
            case SubSchemaForm.SCHEMA:
                return self._visit(loc.with_additional_properties(), additional.schema)

    def _field_metadata(self, prop: SchemaNode) -> tuple[str, bool]:
        """Description and deprecation of a property.

        For a ``$ref`` property, siblings of ``$ref`` win; otherwise the
        referenced component schema supplies them.
        """
        if not prop.is_reference:
            return prop.description, prop.deprecated

        target = None
        reference = prop.reference
        if self._document is not None and is_schema_reference(reference):
            raw = self._document.schema(ref_id(reference))
            if raw is not None:
                target = SchemaNode(raw, ref_id(reference))

        description = prop.description if prop.has_description or target is None else target.description
        deprecated = prop.deprecated if prop.has_deprecated or target is None else target.deprecated
        return description, deprecated


def build_registry(document: OpenAPIDocument | dict[str, Any]) -> Registry:
    """Collect the declarations of a document into a fresh registry."""
    registry = Registry()
    registry.collect(document)
    return registry
