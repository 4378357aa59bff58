"""
Go-specific configuration and type mappings.
"""

from ...core.config import TargetProfile
from ...core.naming import NamingCase
from ...core.schema import ScalarKind
from .naming import GO_RESERVED_WORDS


GO_TYPE_MAP = {
    ScalarKind.STRING: "string",
    ScalarKind.INTEGER: "int64",
    ScalarKind.FLOAT: "float64",
    ScalarKind.BOOLEAN: "bool",
}

# Qualified type prefixes that require an import
GO_IMPORT_MAP = {
    "json.": '"encoding/json"',
}


def get_go_profile() -> TargetProfile:
    """
    Target profile for Go structs.

    Fields are exported (PascalCase) and every field carries a json tag,
    with omitempty on optional ones.
    """
    return TargetProfile(
        language="go",
        reserved_words=GO_RESERVED_WORDS,
        naming_convention=NamingCase.PASCAL_CASE,
        type_naming_convention=NamingCase.PASCAL_CASE,
        optional_wrapper_syntax="*{{ inner }}",
        metadata_syntax='json:"{{ key }}{% if not required %},omitempty{% endif %}"',
        scalar_types=dict(GO_TYPE_MAP),
        any_type="json.RawMessage",
        escape_suffix="Field",
        leading_digit_prefix="Field",
        fallback_identifier="Field",
    )
