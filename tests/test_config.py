import json

import pytest

from recordgen.codegen.core.config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    TargetProfile,
    load_config,
)
from recordgen.codegen.core.naming import NamingCase
from recordgen.codegen.core.schema import ScalarKind
from recordgen.codegen.languages.go.config import get_go_profile


def test_language_defaults():
    manager = ConfigManager()

    assert manager.get_config("go").package_name == "dto"
    assert manager.get_config("typescript").indent_size == 2
    assert manager.get_config("python").add_comments is True
    assert manager.get_config("unknown") == GeneratorConfig()


def test_custom_keys_are_sorted_into_sections():
    config = ConfigManager().get_config(
        "python",
        custom_config={
            "indent_size": 2,
            "escape_suffix": "_x",
            "frozen_dataclasses": True,
        },
    )

    assert config.indent_size == 2
    assert config.profile == {"escape_suffix": "_x"}
    assert config.custom == {"frozen_dataclasses": True}


def test_config_file_is_merged_under_overrides(tmp_path):
    path = tmp_path / "recordgen.json"
    path.write_text(
        json.dumps({"package_name": "models", "indent_size": 8}), encoding="utf-8"
    )

    config = load_config("go", custom_config={"indent_size": 2}, config_file=path)

    assert config.package_name == "models"
    assert config.indent_size == 2


@pytest.mark.parametrize(
    "name, content",
    [
        ("missing.json", None),
        ("config.yaml", "indent_size: 2"),
        ("broken.json", "{not json"),
        ("list.json", "[1, 2]"),
    ],
)
def test_bad_config_files(tmp_path, name, content):
    path = tmp_path / name
    if content is not None:
        path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config("python", config_file=path)


def test_save_and_reload(tmp_path):
    manager = ConfigManager()
    original = GeneratorConfig(
        package_name="models",
        indent_size=2,
        add_comments=False,
        profile={"escape_suffix": "_x"},
        custom={"frozen_dataclasses": True},
    )
    path = tmp_path / "saved.json"

    manager.save_config(original, path)
    reloaded = manager.get_config(config_file=path)

    assert reloaded == original


def test_validate_config():
    manager = ConfigManager()
    config = GeneratorConfig(
        package_name="my-models", indent_size=0, profile={"colour": "red"}
    )

    warnings = manager.validate_config(config)

    assert "Invalid indent_size: 0" in warnings
    assert "Invalid package name: my-models" in warnings
    assert "Unknown profile option: colour" in warnings
    assert manager.validate_config(GeneratorConfig(package_name="com.example")) == []


def test_profile_overrides():
    profile = get_go_profile().with_overrides(
        {
            "naming_convention": "snake_case",
            "scalar_types": {"integer": "int32"},
            "additional_reserved_words": ["Id"],
        }
    )

    assert profile.naming_convention is NamingCase.SNAKE_CASE
    assert profile.scalar_types[ScalarKind.INTEGER] == "int32"
    assert profile.scalar_types[ScalarKind.STRING] == "string"
    assert "Id" in profile.reserved_words
    assert "func" in profile.reserved_words


def test_literal_escapes_override():
    profile = get_go_profile().with_overrides({"literal_escapes": {"%": "%%"}})
    assert profile.literal_escapes == {"%": "%%"}
    assert get_go_profile().literal_escapes == {}


def test_profile_without_overrides_is_unchanged():
    profile = get_go_profile()
    assert profile.with_overrides({}) is profile


@pytest.mark.parametrize(
    "overrides",
    [
        {"language": "cobol"},
        {"colour": "red"},
        {"naming_convention": "kebab"},
        {"scalar_types": {"decimal": "Decimal"}},
        {"any_type": 3},
        {"literal_escapes": ["$"]},
        {"literal_escapes": {"": "x"}},
    ],
)
def test_invalid_profile_overrides(overrides):
    with pytest.raises(ConfigError):
        TargetProfile(language="test").with_overrides(overrides)


def test_profile_grammars_follow_conventions():
    profile = TargetProfile(
        language="test",
        naming_convention=NamingCase.CAMEL_CASE,
        fallback_identifier="value",
        fallback_type_name="Model",
    )

    assert profile.field_grammar().naming_case is NamingCase.CAMEL_CASE
    assert profile.field_grammar().fallback == "value"
    assert profile.type_grammar().naming_case is NamingCase.PASCAL_CASE
    assert profile.type_grammar().fallback == "Model"
