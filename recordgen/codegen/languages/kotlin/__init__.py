"""
Kotlin code generator module.
"""

from .generator import KotlinGenerator, create_kotlin_generator
from .naming import KOTLIN_RESERVED_WORDS
from .config import KOTLIN_TYPE_MAP, get_kotlin_profile

__all__ = [
    "KotlinGenerator",
    "create_kotlin_generator",
    "KOTLIN_RESERVED_WORDS",
    "KOTLIN_TYPE_MAP",
    "get_kotlin_profile",
]
