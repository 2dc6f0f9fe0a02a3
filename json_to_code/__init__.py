"""
JSON to code generation.

Infers declarations from a JSON sample and generates TypeScript interfaces or
Java DTO classes from them.
"""

from typing import List

from .registry import (
    ConfigSource,
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    is_language_supported,
    list_supported_languages,
)
from .core import pipeline
from .core.config import ConfigError, GeneratorConfig, load_config
from .core.generator import CodeGenerator, GeneratorError, InvalidInputError
from .core.pipeline import GeneratedFile, InferredSchema, infer_schema, parse_json
from .core.schema import (
    CollectionOf,
    Declaration,
    DeclarationRef,
    Field,
    Primitive,
    PrimitiveKind,
    TypeRef,
)

__version__ = "0.1.0"


def generate_document(
    json_text: str,
    language: str = "typescript",
    root_name: str = "Root",
    suffix: str = "",
    config: ConfigSource = None,
) -> str:
    """
    Generate code for every declaration inferred from a JSON sample.

    Args:
        json_text: JSON sample
        language: Target language name or alias ('typescript', 'ts', 'java')
        root_name: Name of the root declaration
        suffix: Optional suffix appended to every declaration name
        config: Generator configuration dict, file path or GeneratorConfig

    Returns:
        Declarations separated by blank lines, dependencies first

    Raises:
        InvalidInputError: On empty input, empty root name or invalid JSON
        RegistryError: If the language is not supported
    """
    generator = get_generator(language, config)
    return pipeline.generate_document(json_text, generator, root_name, suffix)


def generate_file_set(
    json_text: str,
    language: str = "typescript",
    root_name: str = "Root",
    suffix: str = "",
    config: ConfigSource = None,
) -> List[GeneratedFile]:
    """
    Generate one file per declaration inferred from a JSON sample.

    Returns:
        (file_name, content) pairs, dependencies first

    Raises:
        InvalidInputError: On empty input, empty root name or invalid JSON
        RegistryError: If the language is not supported
    """
    generator = get_generator(language, config)
    return pipeline.generate_file_set(json_text, generator, root_name, suffix)


__all__ = [
    "generate_document",
    "generate_file_set",
    "infer_schema",
    "parse_json",
    "GeneratedFile",
    "InferredSchema",
    "CodeGenerator",
    "GeneratorError",
    "InvalidInputError",
    "GeneratorRegistry",
    "ConfigSource",
    "RegistryError",
    "GeneratorConfig",
    "ConfigError",
    "load_config",
    "get_generator",
    "get_language_info",
    "is_language_supported",
    "list_supported_languages",
    "TypeRef",
    "Primitive",
    "PrimitiveKind",
    "DeclarationRef",
    "CollectionOf",
    "Field",
    "Declaration",
]
