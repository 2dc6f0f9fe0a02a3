"""
Java code generator module.

Generates Jackson-annotated Lombok DTO classes from JSON samples.
"""

from .generator import JavaGenerator, create_java_generator
from .naming import JAVA_RESERVED_WORDS, create_java_naming

__all__ = [
    "JavaGenerator",
    "create_java_generator",
    "create_java_naming",
    "JAVA_RESERVED_WORDS",
]
