"""
recordgen code generation module.

Generates record type definitions in various languages from a
language-neutral record schema.
"""

from typing import Any, Dict, Iterable, List, Optional

from ..logging_config import get_logger
from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_registry,
    get_generator,
    list_supported_languages,
    is_language_supported,
)
from .core.errors import GeneratorError, SchemaError, SchemaErrorKind
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.schema import (
    Schema,
    Record,
    Field,
    build_schema_from_mappings,
    schema_from_dict,
)
from .core.config import GeneratorConfig, ConfigManager, load_config

logger = get_logger(__name__)


def load_schema(document: Dict[str, Any], name: str = "Record") -> Schema:
    """
    Build a Schema from a parsed JSON document.

    A document with a ``mappings`` list is read as transformation-rule
    mappings rooted at ``name``; anything else as a schema document.
    """
    if isinstance(document, dict) and "mappings" in document:
        mappings = document["mappings"]
        if not isinstance(mappings, list):
            raise SchemaError("'mappings' must be a list", SchemaErrorKind.MALFORMED)
        return build_schema_from_mappings(mappings, name=name)
    return schema_from_dict(document)


def generate(schema: Schema, language: str = "python", config=None) -> GenerationResult:
    """
    Generate code for one language.

    Args:
        schema: Record schema
        language: Target language name or alias
        config: Generator configuration (GeneratorConfig, dict or file path)

    Returns:
        GenerationResult with generated code, or a failed result
    """
    try:
        generator = get_generator(language, config)
    except GeneratorError as e:
        logger.error("Cannot create %s generator: %s", language, e)
        return GenerationResult.error(str(e), exception=e)

    return generate_code(generator, schema)


def generate_batch(
    schema: Schema,
    languages: Iterable[str],
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, GenerationResult]:
    """
    Generate code for several languages, keeping going after failures.

    Returns:
        Results keyed by the language names as given
    """
    results = {}
    for language in languages:
        results[language] = generate(schema, language, config)
    return results


def generate_from_mappings(
    mappings: List[Dict[str, Any]],
    language: str = "python",
    name: str = "Record",
    config=None,
) -> GenerationResult:
    """
    Generate code from transformation-rule mappings.

    Args:
        mappings: Mapping dicts with ``target`` paths
        language: Target language name
        name: Name for the root record
        config: Generator configuration

    Returns:
        GenerationResult with generated code
    """
    try:
        schema = build_schema_from_mappings(mappings, name=name)
    except GeneratorError as e:
        logger.error("Invalid mappings: %s", e)
        return GenerationResult.error(f"Invalid mappings: {e}", exception=e)

    return generate(schema, language, config)


def quick_generate(document: Dict[str, Any], language: str = "python", **options) -> str:
    """
    Quick code generation from a schema or mappings document.

    Returns:
        Generated code string

    Raises:
        GeneratorError: If generation fails
    """
    schema = load_schema(document, name=options.pop("name", "Record"))
    result = generate(schema, language, options or None)

    if result.success:
        return result.code
    raise result.exception


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "Schema",
    "Record",
    "Field",
    "GeneratorConfig",
    "ConfigManager",
    "load_config",
    "load_schema",
    "generate",
    "generate_batch",
    "generate_from_mappings",
    "quick_generate",
    "get_registry",
    "get_generator",
    "list_supported_languages",
    "is_language_supported",
]
