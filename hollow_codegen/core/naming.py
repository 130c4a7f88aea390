"""
Naming utilities for safe code generation.

Pure helpers shared by every generator so that names computed for one
artifact always agree with the names other artifacts refer to.
"""

import re
from typing import Iterable, Optional, Set


_INVALID_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_$]")


def substitute_invalid_chars(name: str) -> str:
    """
    Replace characters that cannot appear in an identifier.

    Args:
        name: Raw name from a schema

    Returns:
        Name made only of letters, digits, ``_`` and ``$``
    """
    cleaned = _INVALID_IDENTIFIER_CHARS.sub("_", name)

    # Ensure doesn't start with number
    if cleaned and cleaned[0].isdigit():
        cleaned = f"_{cleaned}"

    # Ensure not empty
    if not cleaned:
        cleaned = "_"

    return cleaned


def uppercase(value: str) -> str:
    """Upper-case the first character only."""
    if not value:
        return value
    return value[0].upper() + value[1:]


def lowercase(value: str) -> str:
    """Lower-case the first character only."""
    if not value:
        return value
    return value[0].lower() + value[1:]


def is_valid_identifier(
    name: str, reserved_words: Optional[Iterable[str]] = None
) -> bool:
    """
    Check whether a name can be used verbatim as an identifier.

    Args:
        name: Candidate identifier
        reserved_words: Words the target language forbids

    Returns:
        True if the name is non-empty, keeps its shape after
        substitution and is not reserved
    """
    if not name:
        return False

    reserved: Set[str] = set(reserved_words or ())
    if name in reserved:
        return False

    return substitute_invalid_chars(name) == name


def has_only_identifier_chars(value: str) -> bool:
    """True if a fragment (prefix, postfix) only holds identifier characters."""
    return _INVALID_IDENTIFIER_CHARS.search(value) is None
