"""
Go code generator implementation.

Generates Go structs with JSON tags. Every field is tagged with its
source key, so renamed fields round-trip without extra metadata.
"""

from typing import Any, Dict, List, Optional
from pathlib import Path

from ....logging_config import get_logger
from ...core.config import TargetProfile
from ...core.emitter import EmissionPlan, PlannedField
from ...core.errors import SchemaError
from ...core.generator import CodeGenerator
from .config import GO_IMPORT_MAP, get_go_profile
from .naming import validate_go_package_name

logger = get_logger(__name__)

DEFAULT_PACKAGE = "dto"


class GoGenerator(CodeGenerator):
    """Code generator for Go structs with JSON tags."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "go"

    @property
    def file_extension(self) -> str:
        """Return Go file extension."""
        return ".go"

    @property
    def package_name(self) -> str:
        return self.config.package_name or DEFAULT_PACKAGE

    def default_profile(self) -> TargetProfile:
        return get_go_profile()

    def get_template_directory(self) -> Optional[Path]:
        """Return the Go templates directory."""
        return Path(__file__).parent / "templates"

    def render(self, plan: EmissionPlan) -> str:
        """Render the package, imports and one struct per record."""
        context = self.build_context(plan)
        context["package_name"] = self.package_name
        context["imports"] = self.get_import_statements(plan)
        return self.render_template("file.go.j2", context)

    def render_metadata(self, plan: EmissionPlan, field: PlannedField) -> str:
        """Render the json struct tag, which lives in a raw string literal."""
        if "`" in field.source_key:
            raise SchemaError(
                f"Key {field.source_key!r} cannot appear in a Go struct tag",
                field=field.source_key,
            )
        return super().render_metadata(plan, field)

    def get_import_statements(self, plan: EmissionPlan) -> List[str]:
        """Get required import paths for the struct field types."""
        imports_needed = set()
        for field in plan.all_fields():
            for prefix, import_path in GO_IMPORT_MAP.items():
                if prefix in field.type.text:
                    imports_needed.add(import_path)
        return sorted(imports_needed)

    def validate_plan(self, plan: EmissionPlan) -> List[str]:
        """Validate a plan for Go generation."""
        warnings = super().validate_plan(plan)

        for error in validate_go_package_name(self.package_name):
            logger.warning(error)
            warnings.append(f"Invalid Go package name: {error}")

        return warnings


def create_go_generator(config: Optional[Dict[str, Any]] = None) -> GoGenerator:
    """Create a Go generator with default configuration."""
    return GoGenerator(config)
