"""
TypeScript code generator module.

Generates exported TypeScript interfaces from JSON samples.
"""

from .generator import (
    PRIMITIVE_TYPES,
    TYPESCRIPT_NAMING,
    TypeScriptGenerator,
    create_typescript_generator,
)

__all__ = [
    "TypeScriptGenerator",
    "TYPESCRIPT_NAMING",
    "PRIMITIVE_TYPES",
    "create_typescript_generator",
]
