"""
Kotlin-specific configuration and type mappings.
"""

from ...core.config import TargetProfile
from ...core.naming import NamingCase
from ...core.schema import ScalarKind
from .naming import KOTLIN_RESERVED_WORDS


KOTLIN_TYPE_MAP = {
    ScalarKind.STRING: "String",
    ScalarKind.INTEGER: "Long",
    ScalarKind.FLOAT: "Double",
    ScalarKind.BOOLEAN: "Boolean",
}

JSON_PROPERTY_IMPORT = "com.fasterxml.jackson.annotation.JsonProperty"
JSON_NODE_IMPORT = "com.fasterxml.jackson.databind.JsonNode"

# "$name" inside a Kotlin string is a template reference
KOTLIN_LITERAL_ESCAPES = {"$": "\\$"}


def get_kotlin_profile() -> TargetProfile:
    """Target profile for Kotlin data classes bound with Jackson."""
    return TargetProfile(
        language="kotlin",
        reserved_words=KOTLIN_RESERVED_WORDS,
        naming_convention=NamingCase.CAMEL_CASE,
        type_naming_convention=NamingCase.PASCAL_CASE,
        optional_wrapper_syntax="{{ inner }}?",
        metadata_syntax='@JsonProperty("{{ key }}")',
        scalar_types=dict(KOTLIN_TYPE_MAP),
        any_type="JsonNode",
        leading_digit_prefix="field",
        literal_escapes=dict(KOTLIN_LITERAL_ESCAPES),
    )
