"""
Java code generator implementation.

Generates Jackson-annotated Lombok DTO classes from inferred declarations.
"""

from typing import Any, Dict, List, Optional
from pathlib import Path

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.naming import DeclarationNaming
from ...core.schema import Declaration, Primitive, PrimitiveKind
from ...core.templates import templates_for
from .naming import create_java_naming

JSON_INCLUDE_IMPORTS = [
    "com.fasterxml.jackson.annotation.JsonInclude",
    "com.fasterxml.jackson.annotation.JsonInclude.Include",
]

JSON_PROPERTY_IMPORT = "com.fasterxml.jackson.annotation.JsonProperty"

LOMBOK_IMPORTS = [
    "lombok.AllArgsConstructor",
    "lombok.Builder",
    "lombok.Data",
    "lombok.NoArgsConstructor",
]

LOMBOK_ANNOTATIONS = ["Data", "AllArgsConstructor", "NoArgsConstructor", "Builder"]

LIST_IMPORT = "java.util.List"


class JavaGenerator(CodeGenerator):
    """Code generator for annotated Java DTO classes.

    ``generate`` joins every class under one header for reading;
    ``generate_file`` yields a compilable unit per class.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Java generator with configuration."""
        super().__init__(config)
        self._naming = create_java_naming()
        self.package_name = self.config.package_name or "com.example.dto"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extension(self) -> str:
        """Return Java file extension."""
        return ".java"

    @property
    def naming(self) -> DeclarationNaming:
        return self._naming

    def get_template_directory(self) -> Optional[Path]:
        """Return the Java templates directory."""
        return templates_for(__file__)

    def render_primitive(self, primitive: Primitive) -> str:
        if primitive.kind == PrimitiveKind.STRING:
            return "String"
        if primitive.kind == PrimitiveKind.NUMBER:
            # Classified from the single sampled value
            return "Long" if primitive.integral else "Double"
        if primitive.kind == PrimitiveKind.BOOLEAN:
            return "Boolean"
        return "Object"

    def render_collection(self, element_type: str) -> str:
        return f"List<{element_type}>"

    def get_import_statements(self, declarations: List[Declaration]) -> List[str]:
        """Get the imports needed by the given declarations."""
        imports = list(JSON_INCLUDE_IMPORTS) if self.config.json_include else []
        imports.append(JSON_PROPERTY_IMPORT)
        if self.config.use_lombok:
            imports.extend(LOMBOK_IMPORTS)
        if any(declaration.uses_collections() for declaration in declarations):
            imports.append(LIST_IMPORT)
        return imports

    def get_annotations(self) -> List[str]:
        """Get the class-level annotations shared by every DTO."""
        annotations = list(LOMBOK_ANNOTATIONS) if self.config.use_lombok else []
        if self.config.json_include:
            annotations.append(f"JsonInclude(Include.{self.config.json_include})")
        return annotations

    def generate_header(self, declarations: List[Declaration]) -> str:
        """Render package declaration and imports."""
        context = {
            "package_name": self.package_name,
            "imports": self.get_import_statements(declarations),
        }
        return self.render_template("header.java.j2", context)

    def generate_single_declaration(self, declaration: Declaration) -> str:
        """Generate a Java class for a single declaration."""
        context: Dict[str, Any] = {
            "name": declaration.name,
            "indent": self.config.indent,
            "annotations": self.get_annotations(),
            "fields": [
                {
                    "name": field.name,
                    "original_name": field.original_name,
                    "type": self.render_type(field.type),
                }
                for field in declaration.fields
            ],
        }
        return self.render_template("class.java.j2", context)


def create_java_generator(config: Optional[GeneratorConfig] = None) -> JavaGenerator:
    """Create a Java generator with default configuration."""
    return JavaGenerator(config)
