"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common utilities for code generation.
"""

from typing import Dict, Any, Optional
from pathlib import Path

from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(
        self,
        template_dir: Optional[Path] = None,
        templates: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
            templates: In-memory templates keyed by name
        """
        self.template_dir = template_dir
        self._memory_loader = DictLoader(dict(templates or {}))
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        loaders = [self._memory_loader]
        if self.template_dir and self.template_dir.exists():
            loaders.append(FileSystemLoader(str(self.template_dir)))

        # Generated source must come out verbatim, so no autoescaping
        self._env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            keep_trailing_newline=False,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

        self._env.filters["indent_lines"] = _indent_lines_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except Exception as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {str(e)}"
            ) from e



def _indent_lines_filter(value: str, indent: str = "    ") -> str:
    """Prefix every non-empty line with ``indent``."""
    lines = str(value).split("\n")
    return "\n".join(indent + line if line.strip() else line for line in lines)


def create_template_engine(
    template_dir: Optional[Path] = None, templates: Optional[Dict[str, str]] = None
) -> TemplateEngine:
    """
    Factory function to create template engine.

    Args:
        template_dir: Optional template directory
        templates: Optional in-memory templates

    Returns:
        Configured template engine
    """
    return TemplateEngine(template_dir, templates)
