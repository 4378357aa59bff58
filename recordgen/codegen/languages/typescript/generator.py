"""
TypeScript code generator implementation.

Generates exported interfaces, 2-space indented by default.
"""

from typing import Any, Dict, Optional
from pathlib import Path

from ...core.config import TargetProfile
from ...core.emitter import EmissionPlan
from ...core.generator import CodeGenerator
from .config import get_typescript_profile


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript interfaces."""

    @property
    def language_name(self) -> str:
        return "typescript"

    @property
    def file_extension(self) -> str:
        return ".ts"

    def default_profile(self) -> TargetProfile:
        return get_typescript_profile()

    def get_template_directory(self) -> Path:
        return Path(__file__).parent / "templates"

    def render(self, plan: EmissionPlan) -> str:
        return self.render_template("interfaces.ts.j2", self.build_context(plan))


def create_typescript_generator(
    config: Optional[Dict[str, Any]] = None,
) -> TypeScriptGenerator:
    """Create a TypeScript interface generator."""
    return TypeScriptGenerator(config)
