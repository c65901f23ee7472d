"""
Locations of schema nodes within components.schemas.

A Location is the root schema name plus the structural path taken to reach a
nested node. Its string form doubles as the Declaration ID:

    User                                   top-level schema
    User/properties/address                nested property schema
    User/properties/tags/items             items of a nested array
    Labels/additionalProperties            map value schema
"""

from dataclasses import dataclass
from enum import Enum


class SegmentKind(Enum):
    """Kind of a single path segment."""

    PROPERTY = "property"
    ADDITIONAL_PROPERTIES = "additionalProperties"
    ITEMS = "items"


@dataclass(frozen=True)
class Segment:
    """One step of a Location path. Only property segments carry a name."""

    kind: SegmentKind
    name: str = ""

    def __str__(self) -> str:
        match self.kind:
            case SegmentKind.PROPERTY:
                return f"/properties/{self.name}"
            case SegmentKind.ADDITIONAL_PROPERTIES:
                return "/additionalProperties"
            case SegmentKind.ITEMS:
                return "/items"


@dataclass(frozen=True)
class Location:
    """Where a schema node was found.

    Locations are immutable; the ``with_*`` helpers build a new Location with
    one extra segment, so sibling branches never observe each other's path.
    """

    root: str
    path: tuple[Segment, ...] = ()

    def __str__(self) -> str:
        return self.root + "".join(str(segment) for segment in self.path)

    @property
    def is_top_level(self) -> bool:
        return not self.path

    def with_property(self, name: str) -> "Location":
        return self._extend(Segment(SegmentKind.PROPERTY, name))

    def with_additional_properties(self) -> "Location":
        return self._extend(Segment(SegmentKind.ADDITIONAL_PROPERTIES))

    def with_items(self) -> "Location":
        return self._extend(Segment(SegmentKind.ITEMS))

    def _extend(self, segment: Segment) -> "Location":
        return Location(root=self.root, path=(*self.path, segment))
