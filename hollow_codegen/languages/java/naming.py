"""
Java-specific naming utilities.

Computes the names of every generated type for a schema. The object
accessor generator and any sibling generator (delegate contract, type
API, API facade) must go through these functions so cross references
line up.
"""

from ...core.naming import (
    is_valid_identifier,
    substitute_invalid_chars,
    uppercase,
)


# Java reserved words
JAVA_RESERVED_WORDS = {
    "abstract",
    "assert",
    "boolean",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "double",
    "else",
    "enum",
    "extends",
    "false",
    "final",
    "finally",
    "float",
    "for",
    "goto",
    "if",
    "implements",
    "import",
    "instanceof",
    "int",
    "interface",
    "long",
    "native",
    "new",
    "null",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "short",
    "static",
    "strictfp",
    "super",
    "switch",
    "synchronized",
    "this",
    "throw",
    "throws",
    "transient",
    "true",
    "try",
    "void",
    "volatile",
    "while",
}


def _type_stem(type_name: str) -> str:
    return uppercase(substitute_invalid_chars(type_name))


def hollow_impl_classname(type_name: str, class_postfix: str = "") -> str:
    """Name of the generated accessor class for a schema."""
    return f"{_type_stem(type_name)}HollowImpl{class_postfix}"


def delegate_interface_name(type_name: str, class_postfix: str = "") -> str:
    """Name of the delegate contract the accessor class forwards to."""
    return f"{_type_stem(type_name)}Delegate{class_postfix}"


def type_api_classname(type_name: str, class_postfix: str = "") -> str:
    """Name of the type-level API class for a schema."""
    return f"{_type_stem(type_name)}TypeAPI{class_postfix}"


def is_valid_java_identifier(name: str) -> bool:
    """Check a simple (unqualified) Java identifier."""
    return is_valid_identifier(name, JAVA_RESERVED_WORDS)


def validate_java_package_name(name: str) -> list[str]:
    """
    Validate a dotted Java package name.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not name:
        errors.append("Package name cannot be empty")
        return errors

    for segment in name.split("."):
        if not segment:
            errors.append(f"'{name}' contains an empty package segment")
        elif segment in JAVA_RESERVED_WORDS:
            errors.append(f"'{segment}' is a Java reserved word")
        elif not is_valid_identifier(segment) or "$" in segment:
            errors.append(f"'{segment}' is not a valid Java package segment")

    return errors
