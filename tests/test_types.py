import pytest

from recordgen.codegen.core.errors import SchemaError, TypeMapError
from recordgen.codegen.core.schema import (
    ANY,
    BOOLEAN,
    FLOAT,
    INTEGER,
    STRING,
    OptionalType,
    RecordRef,
    SemanticType,
)
from recordgen.codegen.core.types import TargetTypeExpr, TypeMapper, map_type
from recordgen.codegen.languages.go.config import get_go_profile
from recordgen.codegen.languages.python.config import get_python_profile
from recordgen.codegen.languages.rust.config import get_rust_profile
from recordgen.codegen.languages.typescript.config import get_typescript_profile


@pytest.fixture()
def python_mapper():
    return TypeMapper(get_python_profile(), {"RecordUser": "RecordUser"})


def test_scalars_map_to_profile_names(python_mapper):
    assert python_mapper.map_type(STRING).text == "str"
    assert python_mapper.map_type(INTEGER).text == "int"
    assert python_mapper.map_type(FLOAT).text == "float"
    assert python_mapper.map_type(BOOLEAN).text == "bool"


def test_any_is_flagged(python_mapper):
    expr = python_mapper.map_type(ANY)
    assert expr.text == "Any"
    assert expr.uses_any


def test_optional_wraps_inner(python_mapper):
    expr = python_mapper.map_type(OptionalType(FLOAT))
    assert expr.text == "Optional[float]"
    assert expr.base == "float"
    assert expr.nullable


def test_record_reference_uses_type_name():
    mapper = TypeMapper(get_go_profile(), {"user": "User"})
    expr = mapper.map_type(OptionalType(RecordRef("user")))
    assert expr.text == "*User"
    assert expr.record == "User"


def test_unknown_record_reference_fails(python_mapper):
    with pytest.raises(SchemaError):
        python_mapper.map_type(RecordRef("Missing"))


def test_unsupported_semantic_type_fails(python_mapper):
    class ListType(SemanticType):
        pass

    with pytest.raises(TypeMapError):
        python_mapper.map_type(ListType())


def test_non_required_field_is_wrapped(python_mapper):
    assert python_mapper.map_field_type(STRING, required=False).text == "Optional[str]"
    assert python_mapper.map_field_type(STRING, required=True).text == "str"


def test_optional_is_never_wrapped_twice(python_mapper):
    expr = python_mapper.map_field_type(OptionalType(STRING), required=False)
    assert expr.text == "Optional[str]"

    nested = python_mapper.map_type(OptionalType(OptionalType(STRING)))
    assert nested.text == "Optional[str]"


@pytest.mark.parametrize(
    "profile, expected",
    [
        (get_rust_profile(), "Option<i64>"),
        (get_typescript_profile(), "number | null"),
        (get_go_profile(), "*int64"),
    ],
)
def test_wrapper_syntax_per_language(profile, expected):
    assert map_type(OptionalType(INTEGER), profile).text == expected


def test_as_optional_keeps_metadata():
    expr = TargetTypeExpr("User", record="User").as_optional("{{ inner }}?")
    assert expr.text == "User?"
    assert expr.base == "User"
    assert expr.record == "User"
    assert expr.as_optional("{{ inner }}?") is expr
