import pytest

from recordgen.codegen.core.config import TargetProfile
from recordgen.codegen.core.emitter import emit_plan, topological_order
from recordgen.codegen.core.errors import EscapeFailure, SchemaError, SchemaErrorKind
from recordgen.codegen.core.naming import NamingCase
from recordgen.codegen.core.schema import (
    FLOAT,
    STRING,
    Field,
    OptionalType,
    Record,
    RecordRef,
    Schema,
)
from recordgen.codegen.languages.python.config import get_python_profile


def snake_profile(*reserved):
    return TargetProfile(
        language="test",
        reserved_words=frozenset(reserved),
        naming_convention=NamingCase.SNAKE_CASE,
    )


def scenario_schema():
    return Schema(
        (
            Record(
                "Record",
                (
                    Field("id", STRING),
                    Field("price", OptionalType(FLOAT), required=False),
                    Field("status", STRING),
                    Field("user-name", STRING),
                ),
            ),
        )
    )


def test_required_fields_precede_optional_ones():
    plan = emit_plan(scenario_schema(), snake_profile("class"))
    record = plan.get("Record")

    assert [f.identifier for f in record.fields] == ["id", "status", "user_name", "price"]
    user_name = record.fields[2]
    assert user_name.renamed
    assert user_name.original_key == "user-name"
    assert not record.fields[0].renamed


def test_reserved_id_is_escaped_with_metadata():
    plan = emit_plan(scenario_schema(), snake_profile("class", "id"))
    first = plan.get("Record").fields[0]

    assert first.identifier == "id_"
    assert first.original_key == "id"


def test_declaration_order_is_kept_for_documentation():
    plan = emit_plan(scenario_schema(), snake_profile())
    record = plan.get("Record")
    assert [f.source_key for f in record.declared_fields] == [
        "id",
        "price",
        "status",
        "user-name",
    ]
    assert [f.source_key for f in record.optional_fields] == ["price"]


def test_optional_field_type_is_wrapped_once():
    plan = emit_plan(scenario_schema(), get_python_profile())
    price = [f for f in plan.get("Record").fields if f.source_key == "price"][0]
    assert price.type.text == "Optional[float]"


def test_nested_record_is_planned_first():
    schema = Schema(
        (
            Record("Order", (Field("user", RecordRef("UserRecord")),)),
            Record("UserRecord", (Field("name", STRING),)),
        )
    )
    plan = emit_plan(schema, get_python_profile())

    assert [r.type_name for r in plan] == ["UserRecord", "Order"]
    assert plan.get("Order").is_root
    assert not plan.get("UserRecord").is_root


def test_dto01_plan(dto01_schema):
    plan = emit_plan(dto01_schema, get_python_profile())

    assert len(plan) == 2
    assert plan.uses_any
    assert plan.uses_optional
    assert plan.uses_rename
    assert [f.identifier for f in plan.get("RecordUser").fields] == ["age", "name"]
    assert [f.identifier for f in plan.get("Record").fields] == [
        "id",
        "user",
        "active",
        "status",
        "source",
        "price",
        "meta",
        "user_name",
        "class_",
    ]


def test_self_reference_is_a_cycle():
    schema = Schema((Record("RecordA", (Field("child", RecordRef("RecordA")),)),))

    with pytest.raises(SchemaError) as excinfo:
        emit_plan(schema, get_python_profile())
    assert excinfo.value.kind is SchemaErrorKind.CYCLE


def test_indirect_cycle_reports_path():
    schema = Schema(
        (
            Record("A", (Field("b", RecordRef("B")),)),
            Record("B", (Field("a", OptionalType(RecordRef("A")), required=False),)),
        )
    )

    with pytest.raises(SchemaError) as excinfo:
        topological_order(schema)
    assert excinfo.value.kind is SchemaErrorKind.CYCLE
    assert "A -> B -> A" in str(excinfo.value)


def test_unknown_reference_is_malformed():
    schema = Schema((Record("A", (Field("b", RecordRef("Missing")),)),))

    with pytest.raises(SchemaError) as excinfo:
        emit_plan(schema, get_python_profile())
    assert excinfo.value.kind is SchemaErrorKind.MALFORMED
    assert excinfo.value.record == "A"


def test_keys_resolving_to_same_identifier_collide():
    schema = Schema(
        (Record("A", (Field("user-name", STRING), Field("user_name", STRING))),)
    )

    with pytest.raises(SchemaError) as excinfo:
        emit_plan(schema, get_python_profile())
    assert excinfo.value.kind is SchemaErrorKind.COLLISION
    assert excinfo.value.field == "user_name"


def test_record_names_resolving_to_same_type_collide():
    schema = Schema((Record("user-record", ()), Record("UserRecord", ())))

    with pytest.raises(SchemaError) as excinfo:
        emit_plan(schema, get_python_profile())
    assert excinfo.value.kind is SchemaErrorKind.COLLISION


def test_escape_failure_propagates():
    profile = snake_profile("class", "class_")
    schema = Schema((Record("A", (Field("class", STRING),)),))

    with pytest.raises(EscapeFailure):
        emit_plan(schema, profile)


def test_empty_key_error_names_its_record():
    schema = Schema((Record("A", (Field("", STRING),)),))

    with pytest.raises(SchemaError) as excinfo:
        emit_plan(schema, get_python_profile())
    assert excinfo.value.record == "A"


def test_plan_is_deterministic(dto01_schema):
    profile = get_python_profile()
    assert emit_plan(dto01_schema, profile) == emit_plan(dto01_schema, profile)
