"""
Python-specific configuration and type mappings.

Provides the dataclass target profile and the imports its type
expressions need.
"""

import re
from typing import List

from ...core.config import TargetProfile
from ...core.naming import NamingCase
from ...core.schema import ScalarKind
from .naming import PYTHON_RESERVED_WORDS


# Python type mappings
PYTHON_TYPE_MAP = {
    ScalarKind.STRING: "str",
    ScalarKind.INTEGER: "int",
    ScalarKind.FLOAT: "float",
    ScalarKind.BOOLEAN: "bool",
}

# typing names that require an import, in import-line order
PYTHON_TYPING_NAMES = ("Optional", "Any")

_TYPE_NAME = re.compile(r"\b([A-Z][a-zA-Z0-9_]*)\b")


def get_python_profile() -> TargetProfile:
    """Target profile for Python dataclasses."""
    return TargetProfile(
        language="python",
        reserved_words=PYTHON_RESERVED_WORDS,
        naming_convention=NamingCase.SNAKE_CASE,
        type_naming_convention=NamingCase.PASCAL_CASE,
        optional_wrapper_syntax="Optional[{{ inner }}]",
        metadata_syntax='metadata={"json_key": "{{ key }}"}',
        scalar_types=dict(PYTHON_TYPE_MAP),
        any_type="Any",
    )


def extract_typing_imports(type_strings: List[str]) -> List[str]:
    """
    Find the typing names used by a set of type expressions.

    Example: ["Optional[Any]", "int"] -> ["Optional", "Any"]
    """
    found = set()
    for type_str in type_strings:
        found.update(_TYPE_NAME.findall(type_str))
    return [name for name in PYTHON_TYPING_NAMES if name in found]
