"""
Python code generator implementation.

Generates Python dataclasses using templates. Optional fields default
to None, and renamed fields keep their source key in field metadata.
"""

from typing import Dict, List, Any
from pathlib import Path

from ...core.config import TargetProfile
from ...core.emitter import EmissionPlan
from ...core.generator import CodeGenerator
from .config import extract_typing_imports, get_python_profile


class PythonGenerator(CodeGenerator):
    """Code generator for Python dataclasses."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "python"

    @property
    def file_extension(self) -> str:
        """Return Python file extension."""
        return ".py"

    def default_profile(self) -> TargetProfile:
        return get_python_profile()

    def get_template_directory(self) -> Path:
        """Return the Python templates directory."""
        return Path(__file__).parent / "templates"

    def render(self, plan: EmissionPlan) -> str:
        """Render dataclasses for every planned record."""
        context = self.build_context(plan)
        context["imports"] = self._get_imports(plan)
        return self.render_template("dataclass_file.py.j2", context)

    def _get_imports(self, plan: EmissionPlan) -> List[str]:
        """Collect import lines for the generated module."""
        imports = ["from dataclasses import dataclass"]
        if plan.uses_rename:
            imports[0] += ", field"

        typing_names = extract_typing_imports(
            [field.type.text for field in plan.all_fields()]
        )
        if typing_names:
            imports.append(f"from typing import {', '.join(typing_names)}")

        return imports


def create_python_generator(config: Dict[str, Any] = None) -> PythonGenerator:
    """Create a Python dataclass generator."""
    return PythonGenerator(config)
