"""
Base generator interface for all code generation targets.

Defines the contract that all language renderers must implement:
render(plan) turns an EmissionPlan into source text and must not look
at anything but the plan.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional, Union
from pathlib import Path

from ...logging_config import get_logger
from .config import GeneratorConfig, TargetProfile, load_config
from .emitter import EmissionPlan, PlannedField, emit_plan
from .errors import GeneratorError
from .schema import Schema
from .templates import TemplateEngine, create_template_engine, render_snippet, string_literal

logger = get_logger(__name__)


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None):
        """Initialize generator with optional configuration."""
        if config is None:
            config = load_config(self.language_name)
        elif isinstance(config, dict):
            config = load_config(self.language_name, custom_config=config)

        self.config = config
        self.profile = self.default_profile().with_overrides(config.profile)
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go', 'python')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go', '.py')."""
        pass

    @abstractmethod
    def default_profile(self) -> TargetProfile:
        """Return the naming and typing rules of the target language."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @property
    def indent(self) -> str:
        return " " * self.config.indent_size

    def plan(self, schema: Schema) -> EmissionPlan:
        """Build the emission plan of a schema for this generator's profile."""
        return emit_plan(schema, self.profile)

    @abstractmethod
    def render(self, plan: EmissionPlan) -> str:
        """
        Render source code for an emission plan.

        Args:
            plan: Resolved records in emission order

        Returns:
            Generated code as a string
        """
        pass

    def generate(self, schema: Schema) -> str:
        """Plan and render a schema, returning formatted code."""
        return self.format_code(self.render(self.plan(schema)))

    def render_metadata(self, plan: EmissionPlan, field: PlannedField) -> str:
        """Render the original-key binding of a field with the profile template."""
        return render_snippet(
            plan.profile.metadata_syntax,
            key=string_literal(field.source_key, plan.profile.literal_escapes),
            ident=field.identifier,
            required=field.required,
        )

    def build_context(self, plan: EmissionPlan) -> Dict[str, Any]:
        """
        Build the template context shared by all languages.

        Records and fields are plain dicts in emission order; every field
        carries its rendered metadata binding, and templates decide where
        (and whether) to print it.
        """
        records = []
        for record in plan:
            fields = []
            for field in record.fields:
                fields.append(
                    {
                        "ident": field.identifier,
                        "key": field.source_key,
                        "type": field.type.text,
                        "base_type": field.type.base,
                        "required": field.required,
                        "renamed": field.renamed,
                        "metadata": self.render_metadata(plan, field),
                        "description": (
                            field.description if self.config.add_comments else None
                        ),
                    }
                )

            records.append(
                {
                    "name": record.name,
                    "type_name": record.type_name,
                    "is_root": record.is_root,
                    "has_renames": record.has_renames,
                    "description": (
                        record.description if self.config.add_comments else None
                    ),
                    "fields": fields,
                }
            )

        return {
            "records": records,
            "uses_any": plan.uses_any,
            "uses_optional": plan.uses_optional,
            "uses_rename": plan.uses_rename,
            "package_name": self.config.package_name,
            "indent": self.indent,
        }

    def validate_plan(self, plan: EmissionPlan) -> List[str]:
        """
        Collect warnings about a plan.

        Language generators may override this to add language-specific checks.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for record in plan:
            if not record.fields:
                warnings.append(f"Record '{record.name}' has no fields")

            for field in record.declared_fields:
                if field.type.uses_any:
                    warnings.append(
                        f"Opaque type in {record.name}.{field.source_key}: {field.type}"
                    )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply basic formatting to generated code.

        Strips trailing whitespace, collapses runs of more than two blank
        lines and ends the file with a single newline.
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, schema: Schema) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Any GeneratorError yields a failed result with no code; nothing
    partial is ever returned.

    Args:
        generator: Code generator instance
        schema: Schema to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        plan = generator.plan(schema)
        warnings = generator.validate_plan(plan)
        code = generator.format_code(generator.render(plan))
    except GeneratorError as e:
        logger.error("%s generation failed: %s", generator.language_name, e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "record_count": len(plan),
        "root_records": [record.type_name for record in plan if record.is_root],
        "renamed_fields": sum(1 for field in plan.all_fields() if field.renamed),
        "has_opaque_types": plan.uses_any,
    }

    logger.info(
        "Generated %s code for %d record(s)", generator.language_name, len(plan)
    )
    return GenerationResult(code, warnings, metadata)
