"""
Java-specific configuration and type mappings.

Fields use boxed types so that a missing value can be null.
"""

from ...core.config import TargetProfile
from ...core.naming import NamingCase
from ...core.schema import ScalarKind
from .naming import JAVA_RESERVED_WORDS


JAVA_TYPE_MAP = {
    ScalarKind.STRING: "String",
    ScalarKind.INTEGER: "Long",
    ScalarKind.FLOAT: "Double",
    ScalarKind.BOOLEAN: "Boolean",
}

JSON_PROPERTY_IMPORT = "com.fasterxml.jackson.annotation.JsonProperty"
JSON_NODE_IMPORT = "com.fasterxml.jackson.databind.JsonNode"
OPTIONAL_IMPORT = "java.util.Optional"


def get_java_profile() -> TargetProfile:
    """Target profile for Java classes bound with Jackson."""
    return TargetProfile(
        language="java",
        reserved_words=JAVA_RESERVED_WORDS,
        naming_convention=NamingCase.CAMEL_CASE,
        type_naming_convention=NamingCase.PASCAL_CASE,
        optional_wrapper_syntax="Optional<{{ inner }}>",
        metadata_syntax='@JsonProperty("{{ key }}")',
        scalar_types=dict(JAVA_TYPE_MAP),
        any_type="JsonNode",
        leading_digit_prefix="field",
    )
