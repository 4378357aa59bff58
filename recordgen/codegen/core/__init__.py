"""
Core code generation components.

Language-neutral schema model, identifier resolution, type mapping,
emission planning and the renderer interface.
"""

from .errors import (
    GeneratorError,
    SchemaError,
    SchemaErrorKind,
    TypeMapError,
    EscapeFailure,
)
from .schema import (
    ScalarKind,
    SemanticType,
    ScalarType,
    OptionalType,
    RecordRef,
    AnyType,
    STRING,
    INTEGER,
    FLOAT,
    BOOLEAN,
    ANY,
    Field,
    Record,
    Schema,
    parse_semantic_type,
    schema_from_dict,
    parse_target_path,
    build_schema_from_mappings,
)
from .naming import (
    NamingCase,
    IdentifierGrammar,
    RenamedIdentifier,
    split_words,
    convert_case,
    resolve,
)
from .config import (
    ConfigError,
    TargetProfile,
    GeneratorConfig,
    ConfigManager,
    load_config,
)
from .templates import TemplateEngine, TemplateError
from .types import TargetTypeExpr, TypeMapper, map_type
from .emitter import (
    PlannedField,
    PlannedRecord,
    EmissionPlan,
    emit_plan,
    topological_order,
)
from .generator import CodeGenerator, GenerationResult, generate_code

__all__ = [
    # Errors
    "GeneratorError",
    "SchemaError",
    "SchemaErrorKind",
    "TypeMapError",
    "EscapeFailure",
    "ConfigError",
    "TemplateError",
    # Schema
    "ScalarKind",
    "SemanticType",
    "ScalarType",
    "OptionalType",
    "RecordRef",
    "AnyType",
    "STRING",
    "INTEGER",
    "FLOAT",
    "BOOLEAN",
    "ANY",
    "Field",
    "Record",
    "Schema",
    "parse_semantic_type",
    "schema_from_dict",
    "parse_target_path",
    "build_schema_from_mappings",
    # Naming
    "NamingCase",
    "IdentifierGrammar",
    "RenamedIdentifier",
    "split_words",
    "convert_case",
    "resolve",
    # Configuration
    "TargetProfile",
    "GeneratorConfig",
    "ConfigManager",
    "load_config",
    # Templates
    "TemplateEngine",
    # Types
    "TargetTypeExpr",
    "TypeMapper",
    "map_type",
    # Planning
    "PlannedField",
    "PlannedRecord",
    "EmissionPlan",
    "emit_plan",
    "topological_order",
    # Generator
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
]
