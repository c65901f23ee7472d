"""
Errors raised while compiling OpenAPI schemas into declarations.

Every error is fatal for the enclosing ``Registry.collect`` call and carries
the string form of the Location where it was detected.
"""


class SchemaError(ValueError):
    """Base class for schema compilation errors."""

    def __init__(self, location: str, message: str) -> None:
        self.location = location
        self.detail = message
        super().__init__(f"schema {location}: {message}")


class SchemaShapeError(SchemaError):
    """Schema has no type, several types, an unsupported type or uses composition."""


class NumericDomainError(SchemaError):
    """Non-integral bound or multipleOf on an integer schema."""


class EnumDecodeError(SchemaError):
    """Enum value, vendor extension or constraint keyword has an unexpected shape."""


class UnresolvedReferenceError(SchemaError):
    """A reference into components.schemas names a schema that does not exist."""

    def __init__(self, location: str, reference: str) -> None:
        self.reference = reference
        super().__init__(location, f"reference {reference!r} does not resolve to a declaration")
