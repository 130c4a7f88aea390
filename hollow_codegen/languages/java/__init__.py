"""
Java code generator module.

Generates Hollow object accessor classes from object schemas.
"""

from .generator import (
    FIELD_ACCESSOR_TEMPLATES,
    ObjectJavaGenerator,
    create_object_generator,
    generate,
)
from .naming import (
    JAVA_RESERVED_WORDS,
    delegate_interface_name,
    hollow_impl_classname,
    is_valid_java_identifier,
    type_api_classname,
    validate_java_package_name,
)

__all__ = [
    # Generator
    "ObjectJavaGenerator",
    "FIELD_ACCESSOR_TEMPLATES",
    "create_object_generator",
    "generate",
    # Naming
    "JAVA_RESERVED_WORDS",
    "hollow_impl_classname",
    "delegate_interface_name",
    "type_api_classname",
    "is_valid_java_identifier",
    "validate_java_package_name",
]
