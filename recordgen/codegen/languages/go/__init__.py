"""
Go code generator module.

Generates Go structs with JSON tags from record schemas.
"""

from .generator import GoGenerator, create_go_generator
from .naming import GO_RESERVED_WORDS, validate_go_package_name
from .config import GO_TYPE_MAP, get_go_profile

__all__ = [
    "GoGenerator",
    "create_go_generator",
    "GO_RESERVED_WORDS",
    "validate_go_package_name",
    "GO_TYPE_MAP",
    "get_go_profile",
]
