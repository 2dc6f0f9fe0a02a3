"""
TypeScript code generator implementation.

Generates TypeScript interfaces from inferred declarations.
"""

from typing import Any, Dict, List, Optional
from pathlib import Path

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.naming import DeclarationNaming
from ...core.schema import Declaration, Primitive, PrimitiveKind
from ...core.templates import templates_for

TYPESCRIPT_NAMING = DeclarationNaming(prefix="I")

PRIMITIVE_TYPES = {
    PrimitiveKind.STRING: "string",
    PrimitiveKind.NUMBER: "number",
    PrimitiveKind.BOOLEAN: "boolean",
    PrimitiveKind.ANY: "any",
}


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript interfaces."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "typescript"

    @property
    def file_extension(self) -> str:
        """Return TypeScript file extension."""
        return ".ts"

    @property
    def naming(self) -> DeclarationNaming:
        return TYPESCRIPT_NAMING

    def get_template_directory(self) -> Optional[Path]:
        """Return the TypeScript templates directory."""
        return templates_for(__file__)

    def render_primitive(self, primitive: Primitive) -> str:
        return PRIMITIVE_TYPES[primitive.kind]

    def render_collection(self, element_type: str) -> str:
        return f"{element_type}[]"

    def generate_single_declaration(self, declaration: Declaration) -> str:
        """Generate a TypeScript interface for a single declaration."""
        return self._render_interface(declaration, imports=[])

    def generate_file(self, declaration: Declaration) -> str:
        """Generate an interface file importing the interfaces it references."""
        imports = [
            name for name in declaration.dependencies if name != declaration.name
        ]
        return self.format_code(self._render_interface(declaration, imports))

    def _render_interface(self, declaration: Declaration, imports: List[str]) -> str:
        context: Dict[str, Any] = {
            "name": declaration.name,
            "export": self.config.export_declarations,
            "indent": self.config.indent,
            "imports": imports,
            "fields": [
                {"name": field.name, "type": self.render_type(field.type)}
                for field in declaration.fields
            ],
        }
        return self.render_template("interface.ts.j2", context)


def create_typescript_generator(
    config: Optional[GeneratorConfig] = None,
) -> TypeScriptGenerator:
    """Create a TypeScript generator with default configuration."""
    return TypeScriptGenerator(config)
