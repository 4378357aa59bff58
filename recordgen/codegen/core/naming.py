"""
Naming utilities for safe code generation.

Handles case conversion, reserved-word escaping and identifier
validation. Everything here is a pure function of its arguments:
the same key, reserved-word set and grammar always resolve to the
same identifier.
"""

import re
from dataclasses import dataclass
from typing import AbstractSet, List, Optional
from enum import Enum

from .errors import EscapeFailure, SchemaError, SchemaErrorKind


class NamingCase(Enum):
    """Different naming case styles."""

    SNAKE_CASE = "snake"  # user_name
    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName
    SCREAMING_SNAKE = "screaming_snake"  # USER_NAME

    @classmethod
    def parse(cls, value) -> "NamingCase":
        """Parse a case name such as "snake", "snake_case" or "camelCase"."""
        if isinstance(value, cls):
            return value

        normalized = re.sub(r"[^a-z]", "", str(value).lower())
        aliases = {
            "snake": cls.SNAKE_CASE,
            "snakecase": cls.SNAKE_CASE,
            "camel": cls.CAMEL_CASE,
            "camelcase": cls.CAMEL_CASE,
            "pascal": cls.PASCAL_CASE,
            "pascalcase": cls.PASCAL_CASE,
            "screamingsnake": cls.SCREAMING_SNAKE,
            "screamingsnakecase": cls.SCREAMING_SNAKE,
        }
        if normalized not in aliases:
            raise ValueError(f"Unknown naming case: {value!r}")
        return aliases[normalized]


_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_WORD = re.compile(r"[A-Za-z0-9]+")


def split_words(name: str) -> List[str]:
    """
    Split a raw key into words.

    Any non-alphanumeric character separates words, as do camelCase and
    acronym boundaries ("HTTPServer" -> ["HTTP", "Server"]).
    """
    spaced = _ACRONYM_BOUNDARY.sub(r"\1 \2", name)
    spaced = _CAMEL_BOUNDARY.sub(r"\1 \2", spaced)
    return _WORD.findall(spaced)


def convert_case(words: List[str], target_case: NamingCase) -> str:
    """Join words in the target case style."""
    if not words:
        return ""

    if target_case == NamingCase.SNAKE_CASE:
        return "_".join(word.lower() for word in words)
    elif target_case == NamingCase.SCREAMING_SNAKE:
        return "_".join(word.upper() for word in words)
    elif target_case == NamingCase.CAMEL_CASE:
        return words[0].lower() + "".join(word.capitalize() for word in words[1:])
    elif target_case == NamingCase.PASCAL_CASE:
        return "".join(word.capitalize() for word in words)
    else:
        raise ValueError(f"Unsupported naming case: {target_case}")


@dataclass(frozen=True)
class IdentifierGrammar:
    """Identifier rules of one target language."""

    naming_case: NamingCase = NamingCase.SNAKE_CASE
    pattern: str = r"[A-Za-z_][A-Za-z0-9_]*"
    escape_suffix: str = "_"
    leading_digit_prefix: str = "_"
    fallback: str = "field"

    def is_valid(self, name: str) -> bool:
        return re.fullmatch(self.pattern, name) is not None


@dataclass(frozen=True)
class RenamedIdentifier:
    """Resolved identifier, plus the source key when they differ."""

    identifier: str
    original_key: Optional[str] = None

    @property
    def renamed(self) -> bool:
        return self.original_key is not None


def normalize(raw_key: str, grammar: IdentifierGrammar) -> str:
    """Convert a raw key to the grammar's naming convention."""
    name = convert_case(split_words(raw_key), grammar.naming_case)
    if not name:
        name = grammar.fallback
    if name[0].isdigit():
        name = f"{grammar.leading_digit_prefix}{name}"
    return name


def resolve(
    raw_key: str, reserved_words: AbstractSet[str], grammar: IdentifierGrammar
) -> RenamedIdentifier:
    """
    Map a source key to a valid, non-reserved target identifier.

    Args:
        raw_key: Field key exactly as it appears in the source data
        reserved_words: Reserved words of the target language
        grammar: Target identifier rules

    Returns:
        RenamedIdentifier carrying the original key if a rename happened

    Raises:
        SchemaError: If raw_key is empty or cannot become an identifier
        EscapeFailure: If escaping a reserved word collides again
    """
    if not raw_key:
        raise SchemaError("Field key must not be empty", SchemaErrorKind.MALFORMED)

    name = normalize(raw_key, grammar)
    if not grammar.is_valid(name):
        raise SchemaError(
            f"Key {raw_key!r} normalizes to invalid identifier {name!r}",
            SchemaErrorKind.MALFORMED,
        )

    if name in reserved_words:
        escaped = f"{name}{grammar.escape_suffix}"
        if escaped in reserved_words or not grammar.is_valid(escaped):
            raise EscapeFailure(
                f"Escaping reserved word {name!r} produced {escaped!r}, "
                "which is still not usable",
                raw_key=raw_key,
                candidate=escaped,
            )
        name = escaped

    if name == raw_key:
        return RenamedIdentifier(name)
    return RenamedIdentifier(name, original_key=raw_key)
