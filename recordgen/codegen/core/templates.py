"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common utilities for code generation.
"""

from typing import Dict, Any, Mapping, Optional
from pathlib import Path

from jinja2 import DictLoader, Environment, FileSystemLoader, TemplateError as JinjaError

from .errors import GeneratorError
from .naming import NamingCase, convert_case, split_words


class TemplateError(GeneratorError):
    """Exception raised for template-related errors."""

    pass


def string_literal(value: str, escapes: Optional[Mapping[str, str]] = None) -> str:
    """
    Escape a value for use inside a double-quoted string literal.

    Args:
        value: Raw text
        escapes: Extra target-specific replacements, applied after
            backslashes and double quotes (e.g. ``{"$": "\\$"}`` for Kotlin)
    """
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    for sequence, replacement in (escapes or {}).items():
        text = text.replace(sequence, replacement)
    return text


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
        """
        self.template_dir = template_dir
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        if self.template_dir and self.template_dir.exists():
            loader = FileSystemLoader(str(self.template_dir))
        else:
            # Use in-memory templates
            loader = DictLoader({})

        # Generated source is not markup: autoescaping would mangle quotes
        self._env = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )

        # Add custom filters for code generation
        self._env.filters["snake_case"] = self._snake_case_filter
        self._env.filters["camel_case"] = self._camel_case_filter
        self._env.filters["pascal_case"] = self._pascal_case_filter
        self._env.filters["indent"] = self._indent_filter
        self._env.filters["comment"] = self._comment_filter
        self._env.filters["string_literal"] = string_literal

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
        except JinjaError as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def render_string(self, template_string: str, context: Dict[str, Any]) -> str:
        """
        Render a template string with the given context.

        Args:
            template_string: Template content as string
            context: Variables to pass to template

        Returns:
            Rendered content
        """
        try:
            template = self._env.from_string(template_string)
            return template.render(**context)
        except JinjaError as e:
            raise TemplateError(f"Failed to render template string: {e}") from e

    def template_exists(self, template_name: str) -> bool:
        """Check if a template can be loaded."""
        return template_name in self._env.loader.list_templates()

    # Template filters for code generation

    def _snake_case_filter(self, value: str) -> str:
        """Convert string to snake_case."""
        return convert_case(split_words(str(value)), NamingCase.SNAKE_CASE)

    def _camel_case_filter(self, value: str) -> str:
        """Convert string to camelCase."""
        return convert_case(split_words(str(value)), NamingCase.CAMEL_CASE)

    def _pascal_case_filter(self, value: str) -> str:
        """Convert string to PascalCase."""
        return convert_case(split_words(str(value)), NamingCase.PASCAL_CASE)

    def _indent_filter(self, value: str, spaces: int = 4) -> str:
        """Indent all lines in a string."""
        indent = " " * spaces
        lines = str(value).split("\n")
        return "\n".join(indent + line if line.strip() else line for line in lines)

    def _comment_filter(self, value: str, style: str = "//") -> str:
        """Add comment markers to each line."""
        lines = str(value).split("\n")
        return "\n".join(f"{style} {line}" if line.strip() else line for line in lines)


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine over a template directory (or in-memory)."""
    return TemplateEngine(template_dir)


# Shared engine for profile syntax snippets
_default_engine = None


def get_default_template_engine() -> TemplateEngine:
    """Get the default in-memory template engine instance."""
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine()
    return _default_engine


def render_snippet(template_string: str, **context: Any) -> str:
    """Render a one-line profile template such as an optional wrapper."""
    return get_default_template_engine().render_string(template_string, context)
