"""
Java code generator module.
"""

from .generator import JavaGenerator, create_java_generator
from .naming import JAVA_RESERVED_WORDS
from .config import JAVA_TYPE_MAP, get_java_profile

__all__ = [
    "JavaGenerator",
    "create_java_generator",
    "JAVA_RESERVED_WORDS",
    "JAVA_TYPE_MAP",
    "get_java_profile",
]
