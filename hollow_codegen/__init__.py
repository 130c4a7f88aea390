"""
Hollow code generation.

Generates typed Java accessor classes from object record schemas.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_generator_class,
    list_supported_languages,
    resolve_config,
)
from .core.generator import (
    CodeGenerator,
    GeneratedArtifact,
    GenerationResult,
    GeneratorError,
    generate_code,
)
from .core.schema import (
    FieldType,
    ObjectField,
    ObjectSchema,
    SchemaError,
    check_schemas,
    schema_from_dict,
    schemas_from_document,
)
from .core.config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .languages.java import ObjectJavaGenerator, generate

# Version info
__version__ = "0.1.0"


def generate_from_schemas(
    schemas: Dict[str, ObjectSchema],
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    language: str = "java",
) -> GenerationResult:
    """
    Generate one accessor class per schema.

    Args:
        schemas: Schemas keyed by name
        config: Generator configuration dict, path or instance
        language: Target language name

    Returns:
        GenerationResult with generated artifacts
    """
    generator_class = get_generator_class(language)
    return generate_code(generator_class, schemas, resolve_config(config))


def quick_generate(schema_document: Any, **options) -> str:
    """
    Generate source text for every schema in a JSON document.

    Args:
        schema_document: Parsed JSON (dict/list) or a JSON string
        **options: Generator configuration options

    Returns:
        Concatenated source of all generated classes
    """
    if isinstance(schema_document, str):
        import json

        schema_document = json.loads(schema_document)

    schemas = schemas_from_document(schema_document)
    result = generate_from_schemas(schemas, options)

    if result.success:
        return "\n".join(a.source_text for a in result.artifacts)
    else:
        raise GeneratorError(result.error_message)


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GeneratedArtifact",
    "GenerationResult",
    "GeneratorError",
    "ObjectJavaGenerator",
    "FieldType",
    "ObjectField",
    "ObjectSchema",
    "SchemaError",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "check_schemas",
    "schema_from_dict",
    "schemas_from_document",
    "generate",
    "generate_code",
    "generate_from_schemas",
    "quick_generate",
    "get_generator",
    "list_supported_languages",
    "load_config",
]
