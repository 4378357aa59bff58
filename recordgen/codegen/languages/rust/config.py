"""
Rust-specific configuration and type mappings.
"""

from ...core.config import TargetProfile
from ...core.naming import NamingCase
from ...core.schema import ScalarKind
from .naming import RUST_RESERVED_WORDS


RUST_TYPE_MAP = {
    ScalarKind.STRING: "String",
    ScalarKind.INTEGER: "i64",
    ScalarKind.FLOAT: "f64",
    ScalarKind.BOOLEAN: "bool",
}

RUST_DERIVES = ("Debug", "Clone", "Serialize", "Deserialize")

# serde attributes that let an optional field be absent on input and output
RUST_OPTIONAL_ATTRS = ("default", 'skip_serializing_if = "Option::is_none"')


def get_rust_profile() -> TargetProfile:
    """Target profile for Rust serde structs."""
    return TargetProfile(
        language="rust",
        reserved_words=RUST_RESERVED_WORDS,
        naming_convention=NamingCase.SNAKE_CASE,
        type_naming_convention=NamingCase.PASCAL_CASE,
        optional_wrapper_syntax="Option<{{ inner }}>",
        metadata_syntax='rename = "{{ key }}"',
        scalar_types=dict(RUST_TYPE_MAP),
        any_type="Value",
    )
