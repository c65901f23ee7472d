"""
Identifier naming for declarations and enum constants.

Declaration IDs are paths (``User/properties/address``); generators need
identifiers (``UserAddress``). Names are derived from the Location and made
unique with a counter that belongs to one naming pass.
"""

from typing import Final

from oas_model_generator.model.enums import format_number
from oas_model_generator.model.location import Location, SegmentKind
from oas_model_generator.model.registry import Registry
from oas_model_generator.model.types import Declaration, EnumConst
from oas_model_generator.utils.string_case import normalize_identifier, pascalcase

ITEM_SUFFIX: Final = "Item"
ENTRY_SUFFIX: Final = "Entry"


class DeclarationNamer:
    """Assigns unique PascalCase names to declarations.

    A namer holds the names handed out so far and the collision counter, so
    one instance must be used per naming pass.
    """

    def __init__(self) -> None:
        self._names: set[str] = set()
        self._counter = 0

    def name_for(self, loc: Location) -> str:
        """Build the name of the declaration at ``loc`` and reserve it.

        Examples:
            User                         -> User
            User/properties/home_address -> UserHomeAddress
            User/properties/tags/items   -> UserTagsItem
            Labels/additionalProperties  -> LabelsEntry
        """
        parts = [pascalcase(loc.root)]
        for segment in loc.path:
            match segment.kind:
                case SegmentKind.PROPERTY:
                    parts.append(pascalcase(segment.name))
                case SegmentKind.ITEMS:
                    parts.append(ITEM_SUFFIX)
                case SegmentKind.ADDITIONAL_PROPERTIES:
                    parts.append(ENTRY_SUFFIX)

        base = normalize_identifier("".join(parts)) or "Model"
        name = base
        while name in self._names:
            self._counter += 1
            name = f"{base}{self._counter}"

        self._names.add(name)
        return name


def assign_names(registry: Registry) -> dict[str, str]:
    """Name every declaration of a registry, in registry order.

    Returns:
        Mapping from declaration ID to its unique name.
    """
    namer = DeclarationNamer()
    names: dict[str, str] = {}

    def visit(id_: str, decl: Declaration) -> bool:
        names[id_] = namer.name_for(decl.loc)
        return True

    registry.range(visit)
    return names


def _literal_suffix(const: EnumConst) -> str:
    value = const.value
    if isinstance(value, bool):
        return "True" if value else "False"
    if isinstance(value, int | float):
        return format_number(value).replace(".", "_").replace("-", "Minus")
    return pascalcase(value)


def enum_const_name(decl_name: str, const: EnumConst) -> str:
    """Identifier of an enum constant.

    The declaration name followed by the PascalCase ``x-enum-varnames`` entry,
    or by the literal value when the constant is unnamed.

    Examples:
        Status + "active"            -> StatusActive
        Status + name "IsOn"         -> StatusIsOn
        Ratio + 0.5                  -> Ratio0_5
    """
    suffix = pascalcase(const.name) if const.name else _literal_suffix(const)
    return normalize_identifier(decl_name + suffix)
