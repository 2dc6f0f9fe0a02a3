"""
Language-specific code generators.

This module contains generators for the supported target languages.
"""

from .java import JavaGenerator, create_java_generator
from .typescript import TypeScriptGenerator, create_typescript_generator

__all__ = [
    "JavaGenerator",
    "TypeScriptGenerator",
    "create_java_generator",
    "create_typescript_generator",
]
