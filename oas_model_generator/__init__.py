"""
OpenAPI Model Generator

Compiles the component schemas of an OpenAPI document into a
language-agnostic registry of type declarations for code generators.
"""

from .generator import ModelReportGenerator, ModelTemplateEngine
from .model import Declaration, Registry, Type, TypeKind, build_registry
from .parser import OpenAPIDocument, load_document

__version__ = "1.0.0"

__all__ = [
    "Declaration",
    "ModelReportGenerator",
    "ModelTemplateEngine",
    "OpenAPIDocument",
    "Registry",
    "Type",
    "TypeKind",
    "build_registry",
    "load_document",
]
