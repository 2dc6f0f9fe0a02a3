"""
Core code generation components.

Provides the schema model, inference, ordering and the base classes used by
all language generators.
"""

from .generator import CodeGenerator, GeneratorError, InvalidInputError
from .schema import (
    CollectionOf,
    Declaration,
    DeclarationRef,
    Field,
    Primitive,
    PrimitiveKind,
    TypeRef,
)
from .naming import DeclarationNaming, NameSanitizer, synthesize_name
from .shapes import ShapeRegistry
from .inference import SchemaInferrer
from .ordering import DependencyOrderer, VisitState, order_declarations
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "InvalidInputError",
    # Schema model
    "TypeRef",
    "Primitive",
    "PrimitiveKind",
    "DeclarationRef",
    "CollectionOf",
    "Field",
    "Declaration",
    # Naming
    "DeclarationNaming",
    "NameSanitizer",
    "synthesize_name",
    # Inference and ordering
    "ShapeRegistry",
    "SchemaInferrer",
    "DependencyOrderer",
    "VisitState",
    "order_declarations",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
