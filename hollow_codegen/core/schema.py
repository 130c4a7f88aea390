"""
Core schema representation for code generation.

Describes object record types as an ordered list of typed fields, and
converts JSON schema documents into that normalized form.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .naming import substitute_invalid_chars


class SchemaError(Exception):
    """Exception raised when a schema document cannot be converted."""

    pass


class FieldType(Enum):
    """Field kinds an object record can hold."""

    BOOLEAN = "BOOLEAN"
    INT = "INT"
    LONG = "LONG"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    BYTES = "BYTES"
    STRING = "STRING"
    REFERENCE = "REFERENCE"


@dataclass(frozen=True)
class ObjectField:
    """A single named, typed field of an object schema."""

    name: str
    type: FieldType
    referenced_type: Optional[str] = None


@dataclass(frozen=True)
class ObjectSchema:
    """Represents the structure of one record type."""

    name: str
    fields: Tuple[ObjectField, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Freeze the field sequence."""
        if not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    @property
    def referenced_types(self) -> List[str]:
        """Referenced schema names, in field order, without repeats."""
        seen = []
        for f in self.fields:
            if f.type == FieldType.REFERENCE and f.referenced_type not in seen:
                seen.append(f.referenced_type)
        return seen

    def get_field(self, name: str) -> Optional[ObjectField]:
        """Get field by name."""
        for f in self.fields:
            if f.name == name:
                return f
        return None


def parse_field_type(value: Any) -> FieldType:
    """Map a type string (any case) to a FieldType."""
    if isinstance(value, FieldType):
        return value
    if not isinstance(value, str):
        raise SchemaError(f"Field type must be a string, got {type(value).__name__}")
    try:
        return FieldType(value.strip().upper())
    except ValueError:
        valid = ", ".join(t.value for t in FieldType)
        raise SchemaError(f"Unknown field type '{value}'. Expected one of: {valid}")


def schema_from_dict(data: Dict[str, Any]) -> ObjectSchema:
    """
    Convert one JSON schema object into an ObjectSchema.

    Expected shape::

        {"name": "Movie",
         "fields": [{"name": "id", "type": "INT"},
                    {"name": "director", "type": "REFERENCE",
                     "referencedType": "Person"}]}

    Args:
        data: Parsed JSON object

    Returns:
        ObjectSchema with fields in document order

    Raises:
        SchemaError: If the document is not shaped like a schema
    """
    if not isinstance(data, dict):
        raise SchemaError(f"Schema must be a JSON object, got {type(data).__name__}")

    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise SchemaError("Schema is missing a non-empty 'name'")

    raw_fields = data.get("fields", [])
    if not isinstance(raw_fields, list):
        raise SchemaError(f"Schema '{name}': 'fields' must be a list")

    fields = []
    for index, raw in enumerate(raw_fields):
        if not isinstance(raw, dict):
            raise SchemaError(f"Schema '{name}': field #{index} must be an object")

        field_name = raw.get("name")
        if not isinstance(field_name, str) or not field_name:
            raise SchemaError(f"Schema '{name}': field #{index} has no name")

        try:
            field_type = parse_field_type(raw.get("type"))
        except SchemaError as e:
            raise SchemaError(f"Schema '{name}', field '{field_name}': {e}") from e

        referenced_type = raw.get("referencedType", raw.get("referenced_type"))
        if field_type == FieldType.REFERENCE:
            if not isinstance(referenced_type, str) or not referenced_type:
                raise SchemaError(
                    f"Schema '{name}': reference field '{field_name}' "
                    f"has no referenced type"
                )
        else:
            referenced_type = None

        fields.append(ObjectField(field_name, field_type, referenced_type))

    return ObjectSchema(name=name, fields=tuple(fields))


def schemas_from_document(document: Any) -> Dict[str, ObjectSchema]:
    """
    Extract every schema from a JSON document.

    Accepts a single schema object, a list of schema objects, or an
    object with a ``schemas`` list.

    Returns:
        Dict mapping schema name to ObjectSchema, in document order
    """
    if isinstance(document, dict) and "schemas" in document:
        items = document["schemas"]
    elif isinstance(document, list):
        items = document
    else:
        items = [document]

    if not isinstance(items, list):
        raise SchemaError("'schemas' must be a list")

    schemas: Dict[str, ObjectSchema] = {}
    for item in items:
        schema = schema_from_dict(item)
        if schema.name in schemas:
            raise SchemaError(f"Duplicate schema name: {schema.name}")
        schemas[schema.name] = schema

    return schemas


def check_schemas(
    schemas: Dict[str, ObjectSchema], known_types: Iterable[str] = ()
) -> List[str]:
    """
    Check schemas for structural issues the generator will not catch.

    Args:
        schemas: Schemas to check
        known_types: Extra type names that references may point to

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []
    available = set(schemas) | set(known_types)

    for schema in schemas.values():
        if not schema.fields:
            warnings.append(f"Schema '{schema.name}' has no fields")

        seen = set()
        for f in schema.fields:
            if f.name in seen:
                warnings.append(f"Duplicate field name in {schema.name}.{f.name}")
            seen.add(f.name)

            if f.type == FieldType.REFERENCE and f.referenced_type not in available:
                warnings.append(
                    f"Reference field {schema.name}.{f.name} points to "
                    f"unknown type '{f.referenced_type}'"
                )

            sanitized = substitute_invalid_chars(f.name)
            if sanitized != f.name:
                warnings.append(
                    f"Field {schema.name}.{f.name} renamed to {sanitized} "
                    f"in generated accessors"
                )

    return warnings
