"""
OpenAPI Document Module

This module loads OpenAPI documents from JSON or YAML into the in-memory
form consumed by the schema compiler.
"""

from .document import DocumentError, OpenAPIDocument
from .loader import OpenAPILoader, load_document, parse_document

__all__ = [
    "DocumentError",
    "OpenAPIDocument",
    "OpenAPILoader",
    "load_document",
    "parse_document",
]
