"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement and the
type rendering they share.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from pathlib import Path

from .config import GeneratorConfig
from .naming import DeclarationNaming
from .schema import (
    CollectionOf,
    Declaration,
    DeclarationRef,
    Primitive,
    PrimitiveKind,
    TypeRef,
)
from .templates import TemplateEngine, create_template_engine


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class InvalidInputError(GeneratorError):
    """Raised when the JSON text or the root name cannot be used."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'typescript', 'java')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.ts', '.java')."""
        pass

    @property
    @abstractmethod
    def naming(self) -> DeclarationNaming:
        """Return the naming convention used for declarations and fields."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    # Type rendering

    @abstractmethod
    def render_primitive(self, primitive: Primitive) -> str:
        """Spell a scalar type."""
        pass

    @abstractmethod
    def render_collection(self, element_type: str) -> str:
        """Spell a collection around an already rendered element type."""
        pass

    def render_type(self, type_ref: TypeRef) -> str:
        """Render a type reference in the target language."""
        depth = 0
        while isinstance(type_ref, CollectionOf):
            type_ref = type_ref.element
            depth += 1

        if isinstance(type_ref, DeclarationRef):
            rendered = type_ref.name
        elif isinstance(type_ref, Primitive):
            rendered = self.render_primitive(type_ref)
        else:
            raise GeneratorError(f"Unsupported type reference: {type_ref!r}")

        for _ in range(depth):
            rendered = self.render_collection(rendered)
        return rendered

    # Emission

    @abstractmethod
    def generate_single_declaration(self, declaration: Declaration) -> str:
        """
        Generate code for a single declaration.

        Args:
            declaration: Declaration to generate code for

        Returns:
            Code for this declaration only, without any file header
        """
        pass

    def generate_header(self, declarations: List[Declaration]) -> str:
        """
        Generate the text preceding the declarations of a document.

        Returns:
            Header text, empty when the language needs none
        """
        return ""

    def generate(self, declarations: List[Declaration]) -> str:
        """
        Generate one document holding all declarations.

        Args:
            declarations: Declarations in emission order

        Returns:
            Header and declarations separated by blank lines
        """
        units = [self.generate_header(declarations)]
        units.extend(self.generate_single_declaration(d) for d in declarations)
        return self.format_code("\n\n".join(unit for unit in units if unit))

    def generate_file(self, declaration: Declaration) -> str:
        """Generate a self-contained file for one declaration."""
        return self.generate([declaration])

    def validate_declarations(self, declarations: List[Declaration]) -> List[str]:
        """
        Validate declarations for structural issues.

        Args:
            declarations: Declarations to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for declaration in declarations:
            if not declaration.fields:
                warnings.append(f"Declaration '{declaration.name}' has no fields")

            for field in declaration.fields:
                element = field.type
                while isinstance(element, CollectionOf):
                    element = element.element

                if isinstance(element, Primitive) and element.kind == PrimitiveKind.ANY:
                    warnings.append(
                        f"Untyped field {declaration.name}.{field.name}: "
                        f"sample was null or an empty array"
                    )

                if field.name != field.original_name:
                    warnings.append(
                        f"Field {declaration.name}.{field.original_name} "
                        f"renamed to {field.name}"
                    )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - remove trailing spaces and excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n")

    # Template helper methods

    def render_template(self, template_name: str, context: dict) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)
