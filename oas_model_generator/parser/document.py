"""In-memory OpenAPI document consumed by the schema compiler."""

from typing import Any


class DocumentError(ValueError):
    """The loaded data is not an OpenAPI document the compiler can read."""


class OpenAPIDocument:
    """Thin wrapper over a parsed OpenAPI document.

    Only ``components.schemas`` is used by the compiler; its key order is the
    order in which top-level declarations are produced.
    """

    def __init__(self, data: dict[str, Any]) -> None:
        if not isinstance(data, dict):
            msg = "OpenAPI document must be a mapping"
            raise DocumentError(msg)

        components = data.get("components") or {}
        if not isinstance(components, dict):
            msg = "components must be a mapping"
            raise DocumentError(msg)

        schemas = components.get("schemas") or {}
        if not isinstance(schemas, dict):
            msg = "components.schemas must be a mapping"
            raise DocumentError(msg)

        self.data = data
        self.schemas: dict[str, Any] = {str(name): schema for name, schema in schemas.items()}

    @property
    def openapi(self) -> str:
        """The declared OpenAPI version, e.g. ``3.1.0``."""
        return str(self.data.get("openapi", ""))

    @property
    def title(self) -> str:
        info = self.data.get("info") or {}
        return str(info.get("title", "")) if isinstance(info, dict) else ""

    def schema(self, name: str) -> dict[str, Any] | None:
        """Raw component schema by name, or None when missing or not a mapping."""
        schema = self.schemas.get(name)
        return schema if isinstance(schema, dict) else None
