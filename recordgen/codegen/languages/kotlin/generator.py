"""
Kotlin code generator implementation.

Generates data classes whose optional parameters default to null, so
they must trail the required ones.
"""

from typing import Any, Dict, List, Optional
from pathlib import Path

from ...core.config import TargetProfile
from ...core.emitter import EmissionPlan
from ...core.generator import CodeGenerator
from .config import JSON_NODE_IMPORT, JSON_PROPERTY_IMPORT, get_kotlin_profile


class KotlinGenerator(CodeGenerator):
    """Code generator for Kotlin data classes with Jackson annotations."""

    @property
    def language_name(self) -> str:
        return "kotlin"

    @property
    def file_extension(self) -> str:
        return ".kt"

    def default_profile(self) -> TargetProfile:
        return get_kotlin_profile()

    def get_template_directory(self) -> Path:
        return Path(__file__).parent / "templates"

    def render(self, plan: EmissionPlan) -> str:
        context = self.build_context(plan)
        context["imports"] = self._get_imports(plan)
        return self.render_template("data_classes.kt.j2", context)

    def _get_imports(self, plan: EmissionPlan) -> List[str]:
        imports = []
        if plan.uses_rename:
            imports.append(JSON_PROPERTY_IMPORT)
        if plan.uses_any:
            imports.append(JSON_NODE_IMPORT)
        return imports

    def validate_plan(self, plan: EmissionPlan) -> List[str]:
        warnings = super().validate_plan(plan)
        for record in plan:
            if not record.fields:
                warnings.append(
                    f"Data class {record.type_name} needs at least one property"
                )
        return warnings


def create_kotlin_generator(config: Optional[Dict[str, Any]] = None) -> KotlinGenerator:
    """Create a Kotlin data class generator."""
    return KotlinGenerator(config)
