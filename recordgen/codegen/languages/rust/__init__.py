"""
Rust code generator module.

Generates serde-derived structs from record schemas.
"""

from .generator import RustGenerator, create_rust_generator
from .naming import RUST_RESERVED_WORDS
from .config import RUST_TYPE_MAP, get_rust_profile

__all__ = [
    "RustGenerator",
    "create_rust_generator",
    "RUST_RESERVED_WORDS",
    "RUST_TYPE_MAP",
    "get_rust_profile",
]
