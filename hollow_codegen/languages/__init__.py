"""
Language-specific code generators.

This module contains generators for different target languages.
"""

from .java import ObjectJavaGenerator

__all__ = ["ObjectJavaGenerator"]
