"""
Swift code generator implementation.

Generates Codable structs. When a record renames any field its
CodingKeys enum lists every stored property, since Swift derives
coding only from a complete key set. A ``JSONValue`` enum is appended
when any field holds an arbitrary JSON value.
"""

from typing import Any, Dict, Optional
from pathlib import Path

from ...core.config import TargetProfile
from ...core.emitter import EmissionPlan
from ...core.generator import CodeGenerator
from .config import SWIFT_ANY_TYPE, get_swift_profile


class SwiftGenerator(CodeGenerator):
    """Code generator for Swift Codable structs."""

    @property
    def language_name(self) -> str:
        return "swift"

    @property
    def file_extension(self) -> str:
        return ".swift"

    def default_profile(self) -> TargetProfile:
        return get_swift_profile()

    def get_template_directory(self) -> Path:
        return Path(__file__).parent / "templates"

    def render(self, plan: EmissionPlan) -> str:
        context = self.build_context(plan)
        context["uses_json_value"] = plan.uses_any and (
            plan.profile.any_type == SWIFT_ANY_TYPE
        )
        return self.render_template("structs.swift.j2", context)


def create_swift_generator(config: Optional[Dict[str, Any]] = None) -> SwiftGenerator:
    """Create a Swift Codable generator."""
    return SwiftGenerator(config)
