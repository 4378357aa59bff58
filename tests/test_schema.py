import json

import pytest

from recordgen.codegen import load_schema
from recordgen.codegen.core.errors import SchemaError, SchemaErrorKind, TypeMapError
from recordgen.codegen.core.schema import (
    ANY,
    BOOLEAN,
    FLOAT,
    INTEGER,
    STRING,
    Field,
    OptionalType,
    Record,
    RecordRef,
    Schema,
    build_schema_from_mappings,
    parse_semantic_type,
    parse_target_path,
    schema_from_dict,
)


@pytest.mark.parametrize(
    "tag, expected",
    [
        ("string", STRING),
        ("str", STRING),
        ("int", INTEGER),
        ("number", FLOAT),
        ("bool", BOOLEAN),
        ("json", ANY),
        ({"optional": "float"}, OptionalType(FLOAT)),
        ({"record": "User"}, RecordRef("User")),
        ({"optional": {"record": "User"}}, OptionalType(RecordRef("User"))),
    ],
)
def test_parse_semantic_type(tag, expected):
    assert parse_semantic_type(tag) == expected


@pytest.mark.parametrize("tag", ["date", {"list": "string"}, {"record": ""}, 3])
def test_parse_semantic_type_rejects_unknown_tags(tag):
    with pytest.raises(TypeMapError):
        parse_semantic_type(tag)


def test_schema_document_matches_fixture(dto01_dir, dto01_schema):
    document = json.loads((dto01_dir / "schema.json").read_text(encoding="utf-8"))
    assert schema_from_dict(document) == dto01_schema


def test_schema_document_mapping_layout():
    schema = schema_from_dict(
        {"User": [{"name": "id", "type": "int"}, {"name": "nick", "type": "str", "required": False}]}
    )
    user = schema.get("User")
    assert user.get_field("id") == Field("id", INTEGER)
    assert user.get_field("nick").required is False


def test_schema_document_errors():
    with pytest.raises(SchemaError):
        schema_from_dict(["not", "an", "object"])
    with pytest.raises(SchemaError):
        schema_from_dict({"records": [{"fields": []}]})
    with pytest.raises(SchemaError):
        schema_from_dict({"User": [{"name": "id"}]})


@pytest.mark.parametrize(
    "entry",
    [
        {"name": 5, "type": "string"},
        {"name": "", "type": "string"},
        {"name": None, "type": "string"},
        {"name": "id", "type": "string", "required": "false"},
        {"name": "id", "type": "string", "required": 0},
    ],
)
def test_field_entries_must_be_well_typed(entry):
    with pytest.raises(SchemaError) as excinfo:
        schema_from_dict({"User": [entry]})
    assert excinfo.value.kind is SchemaErrorKind.MALFORMED
    assert excinfo.value.record == "User"


def test_record_names_must_be_strings():
    with pytest.raises(SchemaError):
        schema_from_dict({"records": [{"name": 7, "fields": []}]})


def test_duplicate_keys_and_records_are_rejected():
    with pytest.raises(SchemaError):
        Record("User", (Field("id", STRING), Field("id", INTEGER)))
    with pytest.raises(SchemaError):
        Schema((Record("User"), Record("User")))


def test_record_dependencies_look_through_optionals():
    record = Record(
        "Order",
        (
            Field("user", RecordRef("User")),
            Field("backup", OptionalType(RecordRef("User")), required=False),
            Field("address", RecordRef("Address")),
        ),
    )
    assert record.dependencies() == ["User", "Address"]


@pytest.mark.parametrize(
    "path, tokens",
    [
        ("id", ["id"]),
        ("user.name", ["user", "name"]),
        ('["user-name"]', ["user-name"]),
        ("items[0].id", ["items", 0, "id"]),
        ("meta['a.b']", ["meta", "a.b"]),
    ],
)
def test_parse_target_path(path, tokens):
    assert parse_target_path(path) == tokens


@pytest.mark.parametrize("path", ["", ".id", "user.", "user..name", '[""]'])
def test_parse_target_path_rejects_invalid(path):
    with pytest.raises(SchemaError):
        parse_target_path(path)


def test_mappings_build_dto01_schema(dto01_rules, dto01_schema):
    schema = build_schema_from_mappings(dto01_rules["mappings"])
    assert schema == dto01_schema
    assert schema.record_names[-1] == "Record"


def test_object_without_required_leaf_is_optional():
    schema = build_schema_from_mappings(
        [{"target": "address.city", "type": "string"}, {"target": "id", "type": "int", "required": True}],
        name="Customer",
    )
    root = schema.get("Customer")
    assert root.get_field("address") == Field(
        "address", RecordRef("CustomerAddress"), required=False
    )


def test_nested_record_names_are_unique():
    schema = build_schema_from_mappings(
        [
            {"target": "a_b.x", "type": "string"},
            {"target": "a.b.y", "type": "string"},
        ]
    )
    assert schema.record_names == ["RecordAB", "RecordAB_2", "RecordA", "Record"]


@pytest.mark.parametrize(
    "mappings",
    [
        [{"target": "id"}, {"target": "id"}],
        [{"target": "id"}, {"target": "id.nested"}],
        [{"target": "items[0]"}],
        [{"type": "string"}],
    ],
)
def test_invalid_mappings(mappings):
    with pytest.raises(SchemaError):
        build_schema_from_mappings(mappings)


@pytest.mark.parametrize("required", ["false", 1, None])
def test_mapping_required_must_be_a_boolean(required):
    with pytest.raises(SchemaError) as excinfo:
        build_schema_from_mappings([{"target": "id", "type": "int", "required": required}])
    assert excinfo.value.field == "id"


def test_mapping_with_unknown_type():
    with pytest.raises(TypeMapError):
        build_schema_from_mappings([{"target": "id", "type": "uuid"}])


def test_load_schema_dispatches_on_document_shape(dto01_rules, dto01_schema):
    assert load_schema(dto01_rules) == dto01_schema
    assert load_schema({"User": [{"name": "id", "type": "int"}]}).record_names == ["User"]
    with pytest.raises(SchemaError):
        load_schema({"mappings": {"target": "id"}})
