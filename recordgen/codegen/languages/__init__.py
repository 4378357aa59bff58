"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .python import PythonGenerator, create_python_generator
from .go import GoGenerator, create_go_generator
from .rust import RustGenerator, create_rust_generator
from .typescript import TypeScriptGenerator, create_typescript_generator
from .java import JavaGenerator, create_java_generator
from .kotlin import KotlinGenerator, create_kotlin_generator
from .swift import SwiftGenerator, create_swift_generator

__all__ = [
    "PythonGenerator",
    "create_python_generator",
    "GoGenerator",
    "create_go_generator",
    "RustGenerator",
    "create_rust_generator",
    "TypeScriptGenerator",
    "create_typescript_generator",
    "JavaGenerator",
    "create_java_generator",
    "KotlinGenerator",
    "create_kotlin_generator",
    "SwiftGenerator",
    "create_swift_generator",
]
