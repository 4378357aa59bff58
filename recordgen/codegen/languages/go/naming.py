"""
Go-specific naming rules.

Handles Go reserved words and package name validation.
"""

from typing import List


# Go reserved words
GO_RESERVED_WORDS = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)


def validate_go_package_name(name: str) -> List[str]:
    """
    Validate Go package name according to Go naming rules.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not name:
        errors.append("Package name cannot be empty")
        return errors

    if not name.isidentifier():
        errors.append(f"'{name}' is not a valid Go identifier")

    if name[0].isupper():
        errors.append("Package names should be lowercase")

    if "_" in name:
        errors.append("Package names should not contain underscores")

    if name.lower() in GO_RESERVED_WORDS:
        errors.append(f"'{name}' is a Go reserved word")

    return errors
