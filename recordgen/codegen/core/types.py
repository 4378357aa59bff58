"""
Language-neutral type mapping.

Turns semantic types into target type expressions using the
primitive names and wrapper templates of a TargetProfile.
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .config import TargetProfile
from .errors import SchemaError, TypeMapError
from .schema import AnyType, OptionalType, RecordRef, ScalarType, SemanticType
from .templates import render_snippet


@dataclass(frozen=True)
class TargetTypeExpr:
    """
    Immutable target type expression with the metadata renderers need.

    ``base`` is the expression without any optional wrapper, so a
    renderer that marks optionality on the field itself (TypeScript's
    ``name?: T``) can still get at the plain type.
    """

    text: str
    base: str = field(default="")
    nullable: bool = False
    uses_any: bool = False
    record: Optional[str] = None  # Referenced generated type name

    def __post_init__(self):
        if not self.base:
            object.__setattr__(self, "base", self.text)

    def __str__(self) -> str:
        return self.text

    def as_optional(self, wrapper_syntax: str) -> "TargetTypeExpr":
        """Return this type wrapped in the target's optional wrapper."""
        if self.nullable:
            return self

        return TargetTypeExpr(
            text=render_snippet(wrapper_syntax, inner=self.text),
            base=self.base,
            nullable=True,
            uses_any=self.uses_any,
            record=self.record,
        )


class TypeMapper:
    """Maps semantic types to target type expressions for one profile."""

    def __init__(
        self, profile: TargetProfile, type_names: Optional[Mapping[str, str]] = None
    ):
        """
        Args:
            profile: Target language profile
            type_names: Record name -> generated type name
        """
        self.profile = profile
        self.type_names: Dict[str, str] = dict(type_names or {})

    def map_type(self, semantic_type: SemanticType) -> TargetTypeExpr:
        """
        Map a semantic type to a target type expression.

        Raises:
            TypeMapError: If the type is not a supported semantic type
            SchemaError: If a record reference has no generated type
        """
        if isinstance(semantic_type, ScalarType):
            type_name = self.profile.scalar_types.get(semantic_type.kind)
            if type_name is None:
                raise TypeMapError(
                    f"No {self.profile.language} type for scalar {semantic_type}"
                )
            return TargetTypeExpr(type_name)

        if isinstance(semantic_type, OptionalType):
            inner = self.map_type(semantic_type.inner)
            return inner.as_optional(self.profile.optional_wrapper_syntax)

        if isinstance(semantic_type, RecordRef):
            type_name = self.type_names.get(semantic_type.name)
            if type_name is None:
                raise SchemaError(f"Unknown record reference: {semantic_type.name!r}")
            return TargetTypeExpr(type_name, record=type_name)

        if isinstance(semantic_type, AnyType):
            return TargetTypeExpr(self.profile.any_type, uses_any=True)

        raise TypeMapError(f"Unsupported semantic type: {semantic_type!r}")

    def map_field_type(self, semantic_type: SemanticType, required: bool) -> TargetTypeExpr:
        """Map a field type, wrapping it as optional when not required."""
        expr = self.map_type(semantic_type)
        if not required:
            expr = expr.as_optional(self.profile.optional_wrapper_syntax)
        return expr


def map_type(
    semantic_type: SemanticType,
    profile: TargetProfile,
    type_names: Optional[Mapping[str, str]] = None,
) -> TargetTypeExpr:
    """Convenience wrapper around TypeMapper.map_type."""
    return TypeMapper(profile, type_names).map_type(semantic_type)
