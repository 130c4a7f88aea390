"""
Java object accessor generator.

Produces the source of a class that extends ``HollowObject`` and exposes
one typed getter (plus boxed or equality variants) per schema field, each
forwarding to the schema's delegate with the record's ordinal.
"""

from functools import lru_cache
from typing import Callable, Dict, List, Optional

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator, GeneratedArtifact
from ...core.naming import substitute_invalid_chars, uppercase
from ...core.schema import FieldType, ObjectField, ObjectSchema
from ...core.templates import TemplateEngine, create_template_engine
from ...logging_config import get_logger
from .naming import delegate_interface_name, hollow_impl_classname, type_api_classname
from .templates import HOLLOW_OBJECT_IMPORT, HOLLOW_OBJECT_SCHEMA_IMPORT, JAVA_TEMPLATES

logger = get_logger(__name__)


# Java primitive and wrapper types per primitive field kind
PRIMITIVE_JAVA_TYPES = {
    FieldType.BOOLEAN: ("boolean", "Boolean"),
    FieldType.INT: ("int", "Integer"),
    FieldType.LONG: ("long", "Long"),
    FieldType.FLOAT: ("float", "Float"),
    FieldType.DOUBLE: ("double", "Double"),
}


@lru_cache(maxsize=None)
def get_java_template_engine() -> TemplateEngine:
    """Shared engine holding the built-in Java templates."""
    return create_template_engine(templates=JAVA_TEMPLATES)


class ObjectJavaGenerator(CodeGenerator):
    """Generates the accessor class for one object schema."""

    def __init__(self, schema: ObjectSchema, config: Optional[GeneratorConfig] = None):
        super().__init__(schema, config)
        self._class_name = hollow_impl_classname(
            schema.name, self.config.class_postfix
        )

    @property
    def language_name(self) -> str:
        return "java"

    @property
    def file_extension(self) -> str:
        return ".java"

    @property
    def class_name(self) -> str:
        return self._class_name

    def create_template_engine(self) -> TemplateEngine:
        return get_java_template_engine()

    def generate(self) -> str:
        """Render the complete class."""
        postfix = self.config.class_postfix

        context = {
            "package_name": self.config.package_name,
            "base_import": HOLLOW_OBJECT_IMPORT,
            "schema_import": HOLLOW_OBJECT_SCHEMA_IMPORT,
            "class_name": self.class_name,
            "delegate_name": delegate_interface_name(self.schema.name, postfix),
            "type_api_name": type_api_classname(self.schema.name, postfix),
            "api_class_name": self.config.api_class_name,
            "accessors": self._generate_accessors(),
        }

        logger.debug(
            "Generating %s with %d field(s)", self.class_name, len(self.schema.fields)
        )
        return self.render_template("object_class.java.j2", context)

    def _generate_accessors(self) -> List[str]:
        accessors = []
        for field in self.schema.fields:
            template_fn = None
            if isinstance(field.type, FieldType):
                template_fn = FIELD_ACCESSOR_TEMPLATES.get(field.type)
            if template_fn is None:
                logger.warning(
                    "Skipping %s.%s: no accessor template for field type %r",
                    self.schema.name,
                    field.name,
                    field.type,
                )
                continue
            accessors.append(template_fn(self, field))
        return accessors

    def _field_context(self, field: ObjectField) -> Dict[str, object]:
        return {
            "name": uppercase(substitute_invalid_chars(field.name)),
            "getter_prefix": self.config.getter_prefix,
        }

    def _render_primitive(self, field: ObjectField) -> str:
        primitive_type, boxed_type = PRIMITIVE_JAVA_TYPES[field.type]
        context = self._field_context(field)
        context["primitive_type"] = primitive_type
        context["boxed_type"] = boxed_type
        return self.render_template("primitive_accessors.java.j2", context)

    def generate_boolean_accessors(self, field: ObjectField) -> str:
        return self._render_primitive(field)

    def generate_int_accessors(self, field: ObjectField) -> str:
        return self._render_primitive(field)

    def generate_long_accessors(self, field: ObjectField) -> str:
        return self._render_primitive(field)

    def generate_float_accessors(self, field: ObjectField) -> str:
        return self._render_primitive(field)

    def generate_double_accessors(self, field: ObjectField) -> str:
        return self._render_primitive(field)

    def generate_bytes_accessor(self, field: ObjectField) -> str:
        return self.render_template(
            "bytes_accessor.java.j2", self._field_context(field)
        )

    def generate_string_accessors(self, field: ObjectField) -> str:
        return self.render_template(
            "string_accessors.java.j2", self._field_context(field)
        )

    def generate_reference_accessor(self, field: ObjectField) -> str:
        """
        Getter resolving a referenced record.

        Returns a type parameter when the referenced type is parameterized,
        otherwise the referenced type's generated class. An ordinal of -1
        means no record and yields null.
        """
        referenced_type = field.referenced_type or ""
        context = self._field_context(field)
        context["parameterize"] = self.config.should_parameterize(referenced_type)
        context["referenced_class"] = hollow_impl_classname(
            referenced_type, self.config.class_postfix
        )
        return self.render_template("reference_accessor.java.j2", context)


# One entry per FieldType member
FIELD_ACCESSOR_TEMPLATES: Dict[
    FieldType, Callable[[ObjectJavaGenerator, ObjectField], str]
] = {
    FieldType.BOOLEAN: ObjectJavaGenerator.generate_boolean_accessors,
    FieldType.INT: ObjectJavaGenerator.generate_int_accessors,
    FieldType.LONG: ObjectJavaGenerator.generate_long_accessors,
    FieldType.FLOAT: ObjectJavaGenerator.generate_float_accessors,
    FieldType.DOUBLE: ObjectJavaGenerator.generate_double_accessors,
    FieldType.BYTES: ObjectJavaGenerator.generate_bytes_accessor,
    FieldType.STRING: ObjectJavaGenerator.generate_string_accessors,
    FieldType.REFERENCE: ObjectJavaGenerator.generate_reference_accessor,
}


def generate(
    schema: ObjectSchema, config: Optional[GeneratorConfig] = None
) -> GeneratedArtifact:
    """
    Generate the accessor class for one schema.

    Pure and deterministic: equal inputs give byte-identical output.

    Args:
        schema: Object schema to generate for
        config: Naming and typing options

    Returns:
        GeneratedArtifact with the class name and source text
    """
    return ObjectJavaGenerator(schema, config).generate_artifact()


# Factory functions
def create_object_generator(
    schema: ObjectSchema, config: Optional[GeneratorConfig] = None, **overrides
) -> ObjectJavaGenerator:
    """Create a generator, optionally overriding single config settings."""
    config = config or GeneratorConfig()
    if overrides:
        config = config.with_overrides(**overrides)
    return ObjectJavaGenerator(schema, config)
