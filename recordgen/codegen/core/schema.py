"""
Core schema representation for code generation.

Holds the language-agnostic record model that every target renderer
works from, plus converters that build it from schema documents and
from transformation-rule mappings.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union
from enum import Enum

from .errors import SchemaError, TypeMapError
from .naming import NamingCase, convert_case, split_words


class ScalarKind(Enum):
    """Primitive kinds shared by all target languages."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"


class SemanticType:
    """Base class for semantic type tags."""

    __slots__ = ()


@dataclass(frozen=True)
class ScalarType(SemanticType):
    kind: ScalarKind

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class OptionalType(SemanticType):
    inner: SemanticType

    def __str__(self) -> str:
        return f"optional<{self.inner}>"


@dataclass(frozen=True)
class RecordRef(SemanticType):
    """Reference to another record of the same schema, by record name."""

    name: str

    def __str__(self) -> str:
        return f"record<{self.name}>"


@dataclass(frozen=True)
class AnyType(SemanticType):
    """Opaque content, mapped to the target's most permissive type."""

    def __str__(self) -> str:
        return "any"


STRING = ScalarType(ScalarKind.STRING)
INTEGER = ScalarType(ScalarKind.INTEGER)
FLOAT = ScalarType(ScalarKind.FLOAT)
BOOLEAN = ScalarType(ScalarKind.BOOLEAN)
ANY = AnyType()


def referenced_record(semantic_type: SemanticType) -> Optional[str]:
    """Return the record name a type points at, looking through optionals."""
    while isinstance(semantic_type, OptionalType):
        semantic_type = semantic_type.inner
    if isinstance(semantic_type, RecordRef):
        return semantic_type.name
    return None


@dataclass(frozen=True)
class Field:
    """Represents a single field of a record."""

    name: str  # Raw source key, kept verbatim for round-tripping
    type: SemanticType
    required: bool = True
    description: Optional[str] = None


@dataclass(frozen=True)
class Record:
    """A named, ordered group of fields."""

    name: str
    fields: Tuple[Field, ...] = ()
    description: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise SchemaError("Record name must not be empty")
        object.__setattr__(self, "fields", tuple(self.fields))

        seen = set()
        for item in self.fields:
            if item.name in seen:
                raise SchemaError(
                    f"Duplicate field key {item.name!r}",
                    record=self.name,
                    field=item.name,
                )
            seen.add(item.name)

    def get_field(self, name: str) -> Optional[Field]:
        """Get field by raw source key."""
        for item in self.fields:
            if item.name == name:
                return item
        return None

    def dependencies(self) -> List[str]:
        """Names of records referenced by this record's fields, in order."""
        names = []
        for item in self.fields:
            target = referenced_record(item.type)
            if target is not None and target not in names:
                names.append(target)
        return names


@dataclass(frozen=True)
class Schema:
    """Ordered collection of records, immutable once built."""

    records: Tuple[Record, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "records", tuple(self.records))

        seen = set()
        for record in self.records:
            if record.name in seen:
                raise SchemaError(
                    f"Duplicate record name {record.name!r}", record=record.name
                )
            seen.add(record.name)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def get(self, name: str) -> Optional[Record]:
        for record in self.records:
            if record.name == name:
                return record
        return None

    @property
    def record_names(self) -> List[str]:
        return [record.name for record in self.records]


# Schema documents

_SCALAR_TAGS = {
    "string": STRING,
    "str": STRING,
    "integer": INTEGER,
    "int": INTEGER,
    "float": FLOAT,
    "number": FLOAT,
    "boolean": BOOLEAN,
    "bool": BOOLEAN,
    "any": ANY,
    "json": ANY,
}


def parse_semantic_type(tag: Union[str, Dict[str, Any]]) -> SemanticType:
    """
    Parse a type tag from a schema document.

    Accepts scalar names ("string", "int", ...), "any", and the
    composite forms {"optional": <tag>} and {"record": "Name"}.

    Raises:
        TypeMapError: If the tag is not a known semantic type
    """
    if isinstance(tag, SemanticType):
        return tag

    if isinstance(tag, str):
        semantic_type = _SCALAR_TAGS.get(tag.lower())
        if semantic_type is None:
            raise TypeMapError(f"Unsupported type tag: {tag!r}")
        return semantic_type

    if isinstance(tag, dict) and len(tag) == 1:
        (kind, value), = tag.items()
        if kind == "optional":
            return OptionalType(parse_semantic_type(value))
        if kind == "record" and isinstance(value, str) and value:
            return RecordRef(value)

    raise TypeMapError(f"Unsupported type tag: {tag!r}")


def _parse_required(value: Any, record_name: Optional[str], field_name: str) -> bool:
    if not isinstance(value, bool):
        raise SchemaError(
            f"'required' must be true or false, got {value!r}",
            record=record_name,
            field=field_name,
        )
    return value


def _parse_field(data: Dict[str, Any], record_name: str) -> Field:
    if not isinstance(data, dict) or not isinstance(data.get("name"), str) or not data["name"]:
        raise SchemaError(
            "Field entries must be objects with a non-empty string 'name'",
            record=record_name,
        )
    if "type" not in data:
        raise SchemaError(
            "Field has no 'type'", record=record_name, field=data["name"]
        )

    return Field(
        name=data["name"],
        type=parse_semantic_type(data["type"]),
        required=_parse_required(data.get("required", True), record_name, data["name"]),
        description=data.get("description"),
    )


def schema_from_dict(document: Dict[str, Any]) -> Schema:
    """
    Convert a parsed schema document to the internal Schema.

    Two layouts are accepted:
        {"records": [{"name": "User", "fields": [...]}, ...]}
        {"User": [...fields...], ...}

    Returns:
        Schema with records in document order
    """
    if not isinstance(document, dict):
        raise SchemaError("Schema document must be a JSON object")

    if "records" in document:
        entries = document["records"]
        if not isinstance(entries, list):
            raise SchemaError("'records' must be a list")
    else:
        entries = [
            {"name": name, "fields": fields} for name, fields in document.items()
        ]

    records = []
    for entry in entries:
        name = entry.get("name") if isinstance(entry, dict) else None
        if not isinstance(name, str) or not name:
            raise SchemaError("Record entries must be objects with a 'name'")
        fields = entry.get("fields", [])
        if not isinstance(fields, list):
            raise SchemaError("'fields' must be a list", record=name)

        records.append(
            Record(
                name=name,
                fields=tuple(_parse_field(item, name) for item in fields),
                description=entry.get("description"),
            )
        )

    return Schema(tuple(records))


# Transformation-rule mappings

_PATH_TOKEN = re.compile(
    r"""
    \[(?P<index>\d+)\]
    | \["(?P<dq>(?:[^"\\]|\\.)*)"\]
    | \['(?P<sq>(?:[^'\\]|\\.)*)'\]
    | (?P<key>[^.\[\]]+)
    """,
    re.VERBOSE,
)

_MAPPING_TYPES = {
    "string": STRING,
    "int": INTEGER,
    "float": FLOAT,
    "bool": BOOLEAN,
}


def parse_target_path(path: str) -> List[Union[str, int]]:
    """
    Split a mapping target path into key and index tokens.

    Supports dotted keys, quoted bracket keys (["user-name"]) and
    numeric indexes ([0]).
    """
    if not path:
        raise SchemaError("Target path is empty")

    tokens: List[Union[str, int]] = []
    pos = 0
    segment_start = True

    while pos < len(path):
        if path[pos] == ".":
            if segment_start or pos + 1 == len(path):
                raise SchemaError(f"Target path is invalid: {path!r}")
            pos += 1
            segment_start = True
            continue

        match = _PATH_TOKEN.match(path, pos)
        if match is None or (match.group("key") is not None and not segment_start):
            raise SchemaError(f"Target path is invalid: {path!r}")

        if match.group("index") is not None:
            tokens.append(int(match.group("index")))
        else:
            quoted = match.group("dq")
            if quoted is None:
                quoted = match.group("sq")
            if quoted is not None:
                key = re.sub(r"\\(.)", r"\1", quoted)
                if not key:
                    raise SchemaError(f"Target path has an empty key: {path!r}")
                tokens.append(key)
            else:
                tokens.append(match.group("key"))

        pos = match.end()
        segment_start = False

    return tokens


@dataclass
class _MappingLeaf:
    type: SemanticType
    required: bool


@dataclass
class _MappingNode:
    fields: Dict[str, Union["_MappingLeaf", "_MappingNode"]] = field(
        default_factory=dict
    )

    def insert(self, keys: List[str], leaf: _MappingLeaf, target: str) -> None:
        key = keys[0]
        existing = self.fields.get(key)

        if len(keys) == 1:
            if existing is not None:
                raise SchemaError(f"Duplicate target {target!r}")
            self.fields[key] = leaf
            return

        if existing is None:
            existing = _MappingNode()
            self.fields[key] = existing
        elif isinstance(existing, _MappingLeaf):
            raise SchemaError(f"Target {target!r} conflicts with a non-object field")

        existing.insert(keys[1:], leaf, target)

    def has_required(self) -> bool:
        for child in self.fields.values():
            if isinstance(child, _MappingNode):
                if child.has_required():
                    return True
            elif child.required:
                return True
        return False


class _TypeNames:
    """Assigns unique record names derived from field paths."""

    def __init__(self, base: str):
        self.base = base
        self._used = set()
        self._names: Dict[Tuple[str, ...], str] = {}

    def name_for(self, path: Tuple[str, ...]) -> str:
        if path in self._names:
            return self._names[path]

        name = self.base + "".join(
            convert_case(split_words(segment), NamingCase.PASCAL_CASE)
            for segment in path
        )
        if not name:
            name = "Record"

        unique = name
        suffix = 2
        while unique in self._used:
            unique = f"{name}_{suffix}"
            suffix += 1

        self._used.add(unique)
        self._names[path] = unique
        return unique


def _collect_records(
    node: _MappingNode,
    path: Tuple[str, ...],
    names: _TypeNames,
    out: List[Record],
) -> None:
    fields = []
    for key, child in node.fields.items():
        if isinstance(child, _MappingNode):
            child_path = path + (key,)
            child_name = names.name_for(child_path)
            _collect_records(child, child_path, names, out)
            fields.append(
                Field(name=key, type=RecordRef(child_name), required=child.has_required())
            )
        else:
            fields.append(Field(name=key, type=child.type, required=child.required))

    out.append(Record(name=names.name_for(path), fields=tuple(fields)))


def build_schema_from_mappings(
    mappings: List[Dict[str, Any]], name: str = "Record"
) -> Schema:
    """
    Build a record schema from transformation-rule mappings.

    Each mapping contributes one leaf field at its dotted ``target`` path;
    intermediate segments become nested records named after their path.

    Args:
        mappings: Mapping dicts with ``target`` and optional ``type``,
            ``required``, ``value`` and ``default`` entries
        name: Name of the root record

    Returns:
        Schema with nested records first and the root record last
    """
    root = _MappingNode()

    for mapping in mappings:
        target = mapping.get("target")
        if not isinstance(target, str):
            raise SchemaError("Mapping has no target path")

        tokens = parse_target_path(target)
        if any(isinstance(token, int) for token in tokens):
            raise SchemaError(f"Target path must not include indexes: {target!r}")

        type_tag = mapping.get("type")
        if type_tag is None:
            semantic_type = ANY
        elif type_tag in _MAPPING_TYPES:
            semantic_type = _MAPPING_TYPES[type_tag]
        else:
            raise TypeMapError(f"Unsupported type in mapping: {type_tag!r}")

        required = (
            _parse_required(mapping.get("required", False), None, target)
            or mapping.get("value") is not None
            or mapping.get("default") is not None
        )
        root.insert(list(tokens), _MappingLeaf(semantic_type, required), target)

    records: List[Record] = []
    _collect_records(root, (), _TypeNames(name), records)
    return Schema(tuple(records))
