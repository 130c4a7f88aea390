"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
of in-memory templates.
"""

from typing import Any, Dict, Mapping, Optional

from jinja2 import DictLoader, Environment, StrictUndefined, select_autoescape


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, templates: Optional[Mapping[str, str]] = None):
        """
        Initialize template engine.

        Args:
            templates: In-memory templates keyed by name
        """
        self._env = None
        self._setup_environment(templates or {})

    def _setup_environment(self, templates: Mapping[str, str]):
        """Setup Jinja2 environment for source text output."""
        # Generated source is not markup; nothing may be escaped
        self._env = Environment(
            loader=DictLoader(dict(templates)),
            autoescape=select_autoescape(["html", "xml"], default_for_string=False),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {e}"
            ) from e


def create_template_engine(
    templates: Optional[Mapping[str, str]] = None,
) -> TemplateEngine:
    """Create a template engine from in-memory templates."""
    return TemplateEngine(templates)
