"""
Rust code generator implementation.

Generates serde structs. Optional fields are ``Option<T>`` with
``#[serde(default)]``; renamed fields get ``#[serde(rename = "...")]``.
"""

from typing import Any, Dict, Optional
from pathlib import Path

from ...core.config import TargetProfile
from ...core.emitter import EmissionPlan
from ...core.generator import CodeGenerator
from .config import RUST_DERIVES, RUST_OPTIONAL_ATTRS, get_rust_profile


class RustGenerator(CodeGenerator):
    """Code generator for Rust serde structs."""

    @property
    def language_name(self) -> str:
        return "rust"

    @property
    def file_extension(self) -> str:
        return ".rs"

    def default_profile(self) -> TargetProfile:
        return get_rust_profile()

    def get_template_directory(self) -> Path:
        return Path(__file__).parent / "templates"

    def render(self, plan: EmissionPlan) -> str:
        context = self.build_context(plan)
        context["derives"] = RUST_DERIVES

        for record in context["records"]:
            for field in record["fields"]:
                attrs = [] if field["required"] else list(RUST_OPTIONAL_ATTRS)
                if field["renamed"]:
                    attrs.append(field["metadata"])
                field["serde_attrs"] = attrs

        return self.render_template("struct_file.rs.j2", context)


def create_rust_generator(config: Optional[Dict[str, Any]] = None) -> RustGenerator:
    """Create a Rust serde generator."""
    return RustGenerator(config)
