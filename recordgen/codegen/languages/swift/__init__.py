"""
Swift code generator module.
"""

from .generator import SwiftGenerator, create_swift_generator
from .naming import SWIFT_RESERVED_WORDS
from .config import SWIFT_TYPE_MAP, get_swift_profile

__all__ = [
    "SwiftGenerator",
    "create_swift_generator",
    "SWIFT_RESERVED_WORDS",
    "SWIFT_TYPE_MAP",
    "get_swift_profile",
]
