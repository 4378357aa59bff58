"""
Java code generator implementation.

Generates one public class (the last, outermost record) preceded by
package-private classes for the records it references. Renamed fields
carry ``@JsonProperty`` with the source key.
"""

from typing import Any, Dict, List, Optional
from pathlib import Path

from ...core.config import TargetProfile
from ...core.emitter import EmissionPlan
from ...core.generator import CodeGenerator
from .config import (
    JSON_NODE_IMPORT,
    JSON_PROPERTY_IMPORT,
    OPTIONAL_IMPORT,
    get_java_profile,
)


class JavaGenerator(CodeGenerator):
    """Code generator for Java classes with Jackson annotations."""

    @property
    def language_name(self) -> str:
        return "java"

    @property
    def file_extension(self) -> str:
        return ".java"

    def default_profile(self) -> TargetProfile:
        return get_java_profile()

    def get_template_directory(self) -> Path:
        return Path(__file__).parent / "templates"

    def render(self, plan: EmissionPlan) -> str:
        context = self.build_context(plan)
        context["imports"] = self._get_imports(plan)
        return self.render_template("classes.java.j2", context)

    def _get_imports(self, plan: EmissionPlan) -> List[str]:
        imports = []
        if plan.uses_rename:
            imports.append(JSON_PROPERTY_IMPORT)
        if plan.uses_any:
            imports.append(JSON_NODE_IMPORT)
        if plan.uses_optional:
            imports.append(OPTIONAL_IMPORT)
        return imports


def create_java_generator(config: Optional[Dict[str, Any]] = None) -> JavaGenerator:
    """Create a Java class generator."""
    return JavaGenerator(config)
