"""
Configuration management for code generation.

Defines the per-language TargetProfile that drives identifier
resolution and type mapping, and the renderer configuration loaded
and merged from JSON files.
"""

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional, Union

from .errors import GeneratorError
from .naming import IdentifierGrammar, NamingCase
from .schema import ScalarKind


class ConfigError(GeneratorError):
    """Exception raised for configuration-related errors."""

    pass


DEFAULT_SCALAR_TYPES = {
    ScalarKind.STRING: "string",
    ScalarKind.INTEGER: "int",
    ScalarKind.FLOAT: "float",
    ScalarKind.BOOLEAN: "bool",
}


@dataclass(frozen=True)
class TargetProfile:
    """
    Naming and typing rules of one output language.

    ``optional_wrapper_syntax`` is a Jinja2 template rendered with
    ``inner`` (the wrapped type). ``metadata_syntax`` is rendered with
    ``key`` (the original key, escaped for a double-quoted string
    literal plus any ``literal_escapes`` of the target), ``ident`` and
    ``required``.
    """

    language: str
    reserved_words: FrozenSet[str] = frozenset()
    naming_convention: NamingCase = NamingCase.SNAKE_CASE
    type_naming_convention: NamingCase = NamingCase.PASCAL_CASE
    optional_wrapper_syntax: str = "Optional[{{ inner }}]"
    metadata_syntax: str = '"{{ key }}"'
    scalar_types: Dict[ScalarKind, str] = field(
        default_factory=lambda: dict(DEFAULT_SCALAR_TYPES)
    )
    any_type: str = "any"
    escape_suffix: str = "_"
    leading_digit_prefix: str = "_"
    identifier_pattern: str = r"[A-Za-z_][A-Za-z0-9_]*"
    fallback_identifier: str = "field"
    fallback_type_name: str = "Record"
    literal_escapes: Dict[str, str] = field(default_factory=dict)

    def field_grammar(self) -> IdentifierGrammar:
        """Grammar used for field identifiers."""
        return IdentifierGrammar(
            naming_case=self.naming_convention,
            pattern=self.identifier_pattern,
            escape_suffix=self.escape_suffix,
            leading_digit_prefix=self.leading_digit_prefix,
            fallback=self.fallback_identifier,
        )

    def type_grammar(self) -> IdentifierGrammar:
        """Grammar used for generated type names."""
        return IdentifierGrammar(
            naming_case=self.type_naming_convention,
            pattern=self.identifier_pattern,
            escape_suffix=self.escape_suffix,
            leading_digit_prefix=self.leading_digit_prefix,
            fallback=self.fallback_type_name,
        )

    def with_overrides(self, overrides: Optional[Dict[str, Any]]) -> "TargetProfile":
        """
        Return a copy with configuration overrides applied.

        Raises:
            ConfigError: If an override key or value is invalid
        """
        if not overrides:
            return self

        known = {f.name for f in fields(self)} - {"language"}
        changes: Dict[str, Any] = {}
        extra_reserved = set()

        for key, value in overrides.items():
            if key == "additional_reserved_words":
                extra_reserved.update(value)
            elif key not in known:
                raise ConfigError(f"Unknown profile option: {key}")
            elif key == "reserved_words":
                changes[key] = frozenset(value)
            elif key in ("naming_convention", "type_naming_convention"):
                try:
                    changes[key] = NamingCase.parse(value)
                except ValueError as e:
                    raise ConfigError(str(e)) from e
            elif key == "scalar_types":
                changes[key] = self._merge_scalar_types(value)
            elif key == "literal_escapes":
                if not isinstance(value, dict) or not all(
                    isinstance(k, str) and k and isinstance(v, str)
                    for k, v in value.items()
                ):
                    raise ConfigError("literal_escapes must map strings to strings")
                changes[key] = dict(value)
            elif not isinstance(value, str):
                raise ConfigError(f"Profile option {key} must be a string")
            else:
                changes[key] = value

        if extra_reserved:
            base = changes.get("reserved_words", self.reserved_words)
            changes["reserved_words"] = frozenset(base) | extra_reserved

        return replace(self, **changes)

    def _merge_scalar_types(self, value: Dict[str, str]) -> Dict[ScalarKind, str]:
        merged = dict(self.scalar_types)
        for kind_name, type_name in value.items():
            try:
                merged[ScalarKind(kind_name)] = type_name
            except ValueError as e:
                raise ConfigError(f"Unknown scalar kind: {kind_name}") from e
        return merged


PROFILE_KEYS = {f.name for f in fields(TargetProfile)} - {"language"}
PROFILE_KEYS.add("additional_reserved_words")


@dataclass
class GeneratorConfig:
    """Renderer configuration for a code generator."""

    # Output settings
    package_name: Optional[str] = None

    # Code style settings
    indent_size: int = 4
    add_comments: bool = True

    # TargetProfile overrides
    profile: Dict[str, Any] = field(default_factory=dict)

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default renderer configurations for supported languages."""
        self._configs["python"] = {"package_name": None, "indent_size": 4}
        self._configs["go"] = {"package_name": "dto", "indent_size": 4}
        self._configs["rust"] = {"package_name": None, "indent_size": 4}
        self._configs["typescript"] = {"package_name": None, "indent_size": 2}
        self._configs["java"] = {"package_name": None, "indent_size": 4}
        self._configs["kotlin"] = {"package_name": None, "indent_size": 4}
        self._configs["swift"] = {"package_name": None, "indent_size": 4}

    def get_config(
        self,
        language: Optional[str] = None,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        base_config = dict(self._configs.get(language or "", {}))

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args: Dict[str, Any] = {}
        profile_args: Dict[str, Any] = dict(config_dict.get("profile") or {})
        custom_args: Dict[str, Any] = dict(config_dict.get("custom") or {})

        for key, value in config_dict.items():
            if key in ("profile", "custom"):
                continue
            if key in known_fields:
                config_args[key] = value
            elif key in PROFILE_KEYS:
                profile_args[key] = value
            else:
                custom_args[key] = value

        return GeneratorConfig(profile=profile_args, custom=custom_args, **config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = {
            "package_name": config.package_name,
            "indent_size": config.indent_size,
            "add_comments": config.add_comments,
            "profile": config.profile,
        }
        config_dict.update(config.custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except (OSError, TypeError) as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_languages(self) -> List[str]:
        """Get list of languages with default configurations."""
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Validate a renderer configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if not isinstance(config.indent_size, int) or config.indent_size < 1:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        if config.package_name is not None and not str(config.package_name).replace(
            ".", "_"
        ).isidentifier():
            warnings.append(f"Invalid package name: {config.package_name}")

        unknown = set(config.profile) - PROFILE_KEYS
        for key in sorted(unknown):
            warnings.append(f"Unknown profile option: {key}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: Optional[str] = None,
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)
