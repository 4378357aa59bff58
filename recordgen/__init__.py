"""recordgen: generate typed record definitions for several languages.

A language-neutral record schema is planned once per target (identifier
resolution, type mapping, dependency order) and rendered as Python
dataclasses, Go structs, Rust serde structs, TypeScript interfaces,
Java classes, Kotlin data classes or Swift Codable structs.
"""

__version__ = "0.1.0"
