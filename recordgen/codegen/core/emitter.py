"""
Emission planning.

Walks a schema dependencies-first, resolves every identifier and type
for one target profile and produces the renderer-ready EmissionPlan.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from ...logging_config import get_logger
from .config import TargetProfile
from .errors import SchemaError, SchemaErrorKind
from .naming import resolve
from .schema import Record, Schema
from .types import TargetTypeExpr, TypeMapper

logger = get_logger(__name__)


@dataclass(frozen=True)
class PlannedField:
    """A field with its resolved identifier and target type."""

    source_key: str
    identifier: str
    type: TargetTypeExpr
    required: bool
    original_key: Optional[str] = None  # Set only when renamed
    description: Optional[str] = None
    position: int = 0  # Index in declaration order

    @property
    def renamed(self) -> bool:
        return self.original_key is not None

    @property
    def optional(self) -> bool:
        return not self.required


@dataclass(frozen=True)
class PlannedRecord:
    """One type definition, fields in emission order."""

    name: str
    type_name: str
    fields: Tuple[PlannedField, ...]
    is_root: bool = False
    description: Optional[str] = None

    @property
    def declared_fields(self) -> Tuple[PlannedField, ...]:
        """Fields in source declaration order."""
        return tuple(sorted(self.fields, key=lambda item: item.position))

    @property
    def required_fields(self) -> Tuple[PlannedField, ...]:
        return tuple(item for item in self.fields if item.required)

    @property
    def optional_fields(self) -> Tuple[PlannedField, ...]:
        return tuple(item for item in self.fields if not item.required)

    @property
    def has_renames(self) -> bool:
        return any(item.renamed for item in self.fields)


@dataclass(frozen=True)
class EmissionPlan:
    """Fully resolved, renderer-ready schema for one target."""

    profile: TargetProfile
    records: Tuple[PlannedRecord, ...]

    def __iter__(self) -> Iterator[PlannedRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def language(self) -> str:
        return self.profile.language

    def get(self, name: str) -> Optional[PlannedRecord]:
        """Get a planned record by source record name."""
        for record in self.records:
            if record.name == name:
                return record
        return None

    def all_fields(self) -> Iterator[PlannedField]:
        for record in self.records:
            yield from record.fields

    @property
    def uses_any(self) -> bool:
        return any(item.type.uses_any for item in self.all_fields())

    @property
    def uses_optional(self) -> bool:
        """True if any field type carries the optional wrapper."""
        return any(item.type.nullable for item in self.all_fields())

    @property
    def uses_rename(self) -> bool:
        return any(item.renamed for item in self.all_fields())


def check_references(schema: Schema) -> None:
    """Ensure every record reference names a record of the schema."""
    for record in schema:
        for target in record.dependencies():
            if target not in schema:
                raise SchemaError(
                    f"Reference to unknown record {target!r}",
                    SchemaErrorKind.MALFORMED,
                    record=record.name,
                )


def topological_order(schema: Schema) -> List[str]:
    """
    Order record names so every record follows the records it references.

    Records are visited depth-first in declaration order.

    Raises:
        SchemaError: If a record reaches itself through its references
    """
    ordered: List[str] = []
    visited = set()
    visiting: List[str] = []

    def visit(name: str):
        if name in visited:
            return

        if name in visiting:
            cycle = visiting[visiting.index(name):] + [name]
            raise SchemaError(
                f"Cyclic record reference: {' -> '.join(cycle)}",
                SchemaErrorKind.CYCLE,
                record=name,
            )

        visiting.append(name)
        for dependency in schema.get(name).dependencies():
            visit(dependency)
        visiting.pop()

        visited.add(name)
        ordered.append(name)

    for record in schema:
        visit(record.name)

    return ordered


def resolve_type_names(schema: Schema, profile: TargetProfile) -> Dict[str, str]:
    """Resolve every record name to a generated type name."""
    grammar = profile.type_grammar()
    type_names: Dict[str, str] = {}
    owners: Dict[str, str] = {}

    for record in schema:
        try:
            type_name = resolve(record.name, profile.reserved_words, grammar).identifier
        except SchemaError as e:
            if e.record is None:
                e.record = record.name
            raise

        if type_name in owners:
            raise SchemaError(
                f"Records {owners[type_name]!r} and {record.name!r} both map to "
                f"type {type_name!r}",
                SchemaErrorKind.COLLISION,
                record=record.name,
            )
        owners[type_name] = record.name
        type_names[record.name] = type_name

    return type_names


def _plan_fields(
    record: Record, profile: TargetProfile, mapper: TypeMapper
) -> List[PlannedField]:
    grammar = profile.field_grammar()
    planned = []
    owners: Dict[str, str] = {}

    for position, item in enumerate(record.fields):
        try:
            resolved = resolve(item.name, profile.reserved_words, grammar)
            target_type = mapper.map_field_type(item.type, item.required)
        except SchemaError as e:
            if e.record is None:
                e.record, e.field = record.name, item.name
            raise

        if resolved.identifier in owners:
            raise SchemaError(
                f"Keys {owners[resolved.identifier]!r} and {item.name!r} both "
                f"resolve to {resolved.identifier!r}",
                SchemaErrorKind.COLLISION,
                record=record.name,
                field=item.name,
            )
        owners[resolved.identifier] = item.name

        if resolved.renamed:
            logger.debug(
                "%s: %s.%s renamed to %s",
                profile.language,
                record.name,
                item.name,
                resolved.identifier,
            )

        planned.append(
            PlannedField(
                source_key=item.name,
                identifier=resolved.identifier,
                type=target_type,
                required=item.required,
                original_key=resolved.original_key,
                description=item.description,
                position=position,
            )
        )

    return planned


def emit_plan(schema: Schema, profile: TargetProfile) -> EmissionPlan:
    """
    Build the emission plan of a schema for one target profile.

    Args:
        schema: Tree-shaped record schema
        profile: Target language profile

    Returns:
        EmissionPlan with referenced records before their referrers and
        required fields before optional ones in every record

    Raises:
        SchemaError, TypeMapError, EscapeFailure: Nothing is planned
    """
    check_references(schema)
    order = topological_order(schema)
    type_names = resolve_type_names(schema, profile)
    mapper = TypeMapper(profile, type_names)

    referenced = {name for record in schema for name in record.dependencies()}

    records = []
    for name in order:
        record = schema.get(name)
        fields = _plan_fields(record, profile, mapper)

        # Stable partition: defaulted parameters must trail positional ones
        emission_order = [item for item in fields if item.required] + [
            item for item in fields if not item.required
        ]

        records.append(
            PlannedRecord(
                name=record.name,
                type_name=type_names[record.name],
                fields=tuple(emission_order),
                is_root=record.name not in referenced,
                description=record.description,
            )
        )

    logger.debug(
        "Planned %d record(s) for %s: %s",
        len(records),
        profile.language,
        ", ".join(record.type_name for record in records),
    )
    return EmissionPlan(profile=profile, records=tuple(records))
