"""
TypeScript-specific configuration and type mappings.
"""

from ...core.config import TargetProfile
from ...core.naming import NamingCase
from ...core.schema import ScalarKind
from .naming import TYPESCRIPT_RESERVED_WORDS


TYPESCRIPT_TYPE_MAP = {
    ScalarKind.STRING: "string",
    ScalarKind.INTEGER: "number",
    ScalarKind.FLOAT: "number",
    ScalarKind.BOOLEAN: "boolean",
}

# Keys are quoted inside a doc comment, which "*/" would close
TYPESCRIPT_LITERAL_ESCAPES = {"*/": "*\\/"}


def get_typescript_profile() -> TargetProfile:
    """
    Target profile for TypeScript interfaces.

    The ``| null`` wrapper only shows on required fields whose type is
    itself optional; fields that may be absent render as ``name?: T``.
    """
    return TargetProfile(
        language="typescript",
        reserved_words=TYPESCRIPT_RESERVED_WORDS,
        naming_convention=NamingCase.CAMEL_CASE,
        type_naming_convention=NamingCase.PASCAL_CASE,
        optional_wrapper_syntax="{{ inner }} | null",
        metadata_syntax='/** json: "{{ key }}" */',
        scalar_types=dict(TYPESCRIPT_TYPE_MAP),
        any_type="unknown",
        literal_escapes=dict(TYPESCRIPT_LITERAL_ESCAPES),
    )
