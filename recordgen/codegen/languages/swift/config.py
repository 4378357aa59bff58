"""
Swift-specific configuration and type mappings.
"""

from ...core.config import TargetProfile
from ...core.naming import NamingCase
from ...core.schema import ScalarKind
from .naming import SWIFT_RESERVED_WORDS


SWIFT_TYPE_MAP = {
    ScalarKind.STRING: "String",
    ScalarKind.INTEGER: "Int",
    ScalarKind.FLOAT: "Double",
    ScalarKind.BOOLEAN: "Bool",
}

# Defined by json_value.swift.j2, emitted once when a field uses it
SWIFT_ANY_TYPE = "JSONValue"


def get_swift_profile() -> TargetProfile:
    """Target profile for Swift Codable structs."""
    return TargetProfile(
        language="swift",
        reserved_words=SWIFT_RESERVED_WORDS,
        naming_convention=NamingCase.CAMEL_CASE,
        type_naming_convention=NamingCase.PASCAL_CASE,
        optional_wrapper_syntax="{{ inner }}?",
        metadata_syntax='case {{ ident }} = "{{ key }}"',
        scalar_types=dict(SWIFT_TYPE_MAP),
        any_type=SWIFT_ANY_TYPE,
        leading_digit_prefix="field",
    )
