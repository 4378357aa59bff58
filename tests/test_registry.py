import pytest

from recordgen.codegen import generate, generate_batch, generate_from_mappings, quick_generate
from recordgen.codegen.core.errors import SchemaError
from recordgen.codegen.core.config import GeneratorConfig
from recordgen.codegen.languages import GoGenerator, PythonGenerator
from recordgen.codegen.registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    get_registry,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
)


@pytest.fixture()
def registry():
    registry = GeneratorRegistry()
    registry.register("python", PythonGenerator, aliases=["py"])
    return registry


def test_builtin_languages():
    assert list_supported_languages() == [
        "go",
        "java",
        "kotlin",
        "python",
        "rust",
        "swift",
        "typescript",
    ]


@pytest.mark.parametrize(
    "alias, language",
    [("py", "python"), ("golang", "go"), ("rs", "rust"), ("ts", "typescript"), ("KT", "kotlin")],
)
def test_aliases_resolve(alias, language):
    assert get_registry().resolve_language(alias) == language
    assert is_language_supported(alias)


def test_unknown_language(registry):
    assert not registry.is_supported("cobol")
    with pytest.raises(RegistryError, match="Available: python"):
        registry.get_generator_class("cobol")


def test_register_rejects_non_generators(registry):
    with pytest.raises(RegistryError):
        registry.register("text", str)


def test_alias_conflicts(registry):
    with pytest.raises(RegistryError):
        registry.register("go", GoGenerator, aliases=["py"])
    with pytest.raises(RegistryError):
        registry.register("py", GoGenerator)


def test_replace_and_unregister(registry):
    registry.register("python", GoGenerator, aliases=["py3"], replace=True)
    assert registry.get_generator_class("py3") is GoGenerator
    assert registry.list_all_names() == {"python": ["python", "py", "py3"]}

    registry.unregister("python")
    assert registry.list_languages() == []
    assert not registry.is_supported("py")


def test_create_generator_from_each_config_form(registry, tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"indent_size": 2}', encoding="utf-8")

    assert registry.create_generator("py").config.indent_size == 4
    assert registry.create_generator("py", {"indent_size": 3}).config.indent_size == 3
    assert registry.create_generator("py", str(path)).config.indent_size == 2
    assert registry.create_generator("py", path).config.indent_size == 2
    assert (
        registry.create_generator("py", GeneratorConfig(indent_size=6)).config.indent_size
        == 6
    )


def test_create_generator_wraps_config_errors(registry):
    with pytest.raises(RegistryError):
        registry.create_generator("python", {"naming_convention": "kebab"})
    with pytest.raises(RegistryError):
        registry.create_generator("python", 42)


def test_language_defaults_apply_through_registry():
    assert get_generator("golang").config.package_name == "dto"
    assert get_generator("ts").indent == "  "


def test_language_info():
    info = get_language_info("rs")

    assert info["name"] == "rust"
    assert info["class"] == "RustGenerator"
    assert info["file_extension"] == ".rs"
    assert info["aliases"] == ["rs"]
    assert info["naming_convention"] == "snake"
    assert info["optional_wrapper"] == "Option<{{ inner }}>"
    assert info["reserved_word_count"] > 0


def test_all_language_info():
    infos = list_all_language_info()
    assert set(infos) == set(list_supported_languages())
    assert infos["swift"]["any_type"] == "JSONValue"


def test_generate_unknown_language_returns_failed_result(dto01_schema):
    result = generate(dto01_schema, "cobol")
    assert not result.success
    assert isinstance(result.exception, RegistryError)


def test_generate_batch_keeps_going(dto01_schema, golden):
    results = generate_batch(dto01_schema, ["cobol", "py"])

    assert not results["cobol"].success
    assert results["py"].code == golden("python")


def test_generate_from_mappings(dto01_rules, golden):
    result = generate_from_mappings(dto01_rules["mappings"], "go")
    assert result.code == golden("go")

    failed = generate_from_mappings([{"target": ""}], "go")
    assert not failed.success
    assert failed.error_message.startswith("Invalid mappings")


def test_quick_generate(dto01_rules, golden):
    assert quick_generate(dto01_rules, "kotlin") == golden("kotlin")

    with pytest.raises(SchemaError):
        quick_generate({"Node": [{"name": "next", "type": {"record": "Node"}}]})
