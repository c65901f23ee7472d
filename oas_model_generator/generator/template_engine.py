"""
Template Engine for Model Reports

This module uses Jinja2 templates to render a compiled declaration registry
as a Markdown report, alongside a JSON dump of the model.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from oas_model_generator.generator.filters import FILTERS
from oas_model_generator.generator.serializer import registry_to_dict
from oas_model_generator.model.naming import assign_names, enum_const_name
from oas_model_generator.model.registry import Registry

REPORT_TEMPLATE = "model_report.md.j2"


class ModelTemplateEngine:
    """Template engine for rendering model reports."""

    def __init__(self, template_dir: Path | None = None) -> None:
        """Initialize the template engine."""
        if template_dir is None:
            current_dir = Path(__file__).parent
            template_dir = current_dir.parent / "templates"

        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        self.env.filters.update(FILTERS)
        self.env.globals["enum_const_name"] = enum_const_name

    def render_template(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a template with the given context."""
        template = self.env.get_template(template_name)
        return template.render(**context)


class ModelReportGenerator:
    """Produces the model files for a compiled registry."""

    def __init__(self, template_engine: ModelTemplateEngine | None = None) -> None:
        """Initialize the report generator."""
        self.template_engine = template_engine or ModelTemplateEngine()

    def generate(
        self,
        registry: Registry,
        output_dir: Path,
        package_name: str = "models",
        title: str = "",
    ) -> dict[Path, str]:
        """Render the JSON model and the Markdown report.

        Args:
            registry: The collected declarations.
            output_dir: Directory the files will be written to.
            package_name: Base name of the generated files.
            title: Title of the source document, shown in the report.

        Returns:
            Mapping of file path to file content.
        """
        output_dir = Path(output_dir)
        names = assign_names(registry)

        model = registry_to_dict(registry, names, package_name)
        context = {
            "package_name": package_name,
            "title": title,
            "declarations": list(registry),
            "names": names,
        }

        return {
            output_dir / f"{package_name}.model.json": json.dumps(model, indent=2, ensure_ascii=False) + "\n",
            output_dir / f"{package_name}.md": self.template_engine.render_template(REPORT_TEMPLATE, context),
        }
