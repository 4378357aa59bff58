"""
Python code generator module.

Generates Python dataclasses from record schemas.
"""

from .generator import PythonGenerator, create_python_generator
from .naming import PYTHON_RESERVED_WORDS
from .config import PYTHON_TYPE_MAP, get_python_profile, extract_typing_imports

__all__ = [
    # Generator
    "PythonGenerator",
    "create_python_generator",
    # Naming
    "PYTHON_RESERVED_WORDS",
    # Configuration
    "PYTHON_TYPE_MAP",
    "get_python_profile",
    "extract_typing_imports",
]
