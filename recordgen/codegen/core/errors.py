"""
Error taxonomy for code generation.

Every failure raised while planning or rendering derives from
GeneratorError, so callers can treat any of them as "nothing was
generated for this schema/target pair".
"""

from enum import Enum
from typing import Optional


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class SchemaErrorKind(Enum):
    """Categories of schema failures."""

    MALFORMED = "malformed"
    CYCLE = "cycle"
    COLLISION = "collision"


class SchemaError(GeneratorError):
    """Malformed or cyclic schema, or an ambiguous identifier mapping."""

    def __init__(
        self,
        message: str,
        kind: SchemaErrorKind = SchemaErrorKind.MALFORMED,
        record: Optional[str] = None,
        field: Optional[str] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.record = record
        self.field = field

    def __str__(self) -> str:
        location = ""
        if self.record and self.field is not None:
            location = f" ({self.record}.{self.field})"
        elif self.record:
            location = f" ({self.record})"
        return f"[{self.kind.value}] {self.args[0]}{location}"


class TypeMapError(GeneratorError):
    """Semantic type that no target type can be produced for."""

    pass


class EscapeFailure(GeneratorError):
    """Reserved-word escaping produced another reserved or invalid name."""

    def __init__(self, message: str, raw_key: str, candidate: str):
        super().__init__(message)
        self.raw_key = raw_key
        self.candidate = candidate
