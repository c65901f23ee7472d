"""
Model Report Module

This module serializes compiled declarations to JSON and renders them as
Markdown reports with Jinja2.
"""

from .serializer import declaration_to_dict, registry_to_dict, type_to_dict
from .template_engine import ModelReportGenerator, ModelTemplateEngine

__all__ = [
    "ModelReportGenerator",
    "ModelTemplateEngine",
    "declaration_to_dict",
    "registry_to_dict",
    "type_to_dict",
]
