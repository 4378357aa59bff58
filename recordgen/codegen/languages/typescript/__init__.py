"""
TypeScript code generator module.
"""

from .generator import TypeScriptGenerator, create_typescript_generator
from .naming import TYPESCRIPT_RESERVED_WORDS
from .config import TYPESCRIPT_TYPE_MAP, get_typescript_profile

__all__ = [
    "TypeScriptGenerator",
    "create_typescript_generator",
    "TYPESCRIPT_RESERVED_WORDS",
    "TYPESCRIPT_TYPE_MAP",
    "get_typescript_profile",
]
