"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import (
    CodeGenerator,
    GeneratedArtifact,
    GenerationResult,
    GeneratorError,
    generate_code,
)
from .schema import (
    FieldType,
    ObjectField,
    ObjectSchema,
    SchemaError,
    check_schemas,
    schema_from_dict,
    schemas_from_document,
)
from .naming import substitute_invalid_chars, uppercase, lowercase
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratedArtifact",
    "GenerationResult",
    "GeneratorError",
    "generate_code",
    # Schema system
    "FieldType",
    "ObjectField",
    "ObjectSchema",
    "SchemaError",
    "check_schemas",
    "schema_from_dict",
    "schemas_from_document",
    # Naming utilities - language-agnostic
    "substitute_invalid_chars",
    "uppercase",
    "lowercase",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
