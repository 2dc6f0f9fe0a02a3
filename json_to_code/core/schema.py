"""
Core schema representation for code generation.

Holds the intermediate model shared by inference, ordering and every
language generator: type references, fields and named declarations.
"""

from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum


class PrimitiveKind(Enum):
    """Scalar kinds a JSON sample can produce."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ANY = "any"  # null samples and empty arrays


class TypeRef:
    """Base class for the resolved type of a field."""

    def referenced_name(self) -> Optional[str]:
        """Return the declaration this type points at, if any."""
        return None


@dataclass(frozen=True)
class Primitive(TypeRef):
    """A scalar type.

    ``integral`` is only meaningful for numbers: it records whether the sampled
    value had no fractional part.
    """

    kind: PrimitiveKind
    integral: bool = False


@dataclass(frozen=True)
class DeclarationRef(TypeRef):
    """Reference to another declaration by name."""

    name: str

    def referenced_name(self) -> Optional[str]:
        return self.name


@dataclass(frozen=True)
class CollectionOf(TypeRef):
    """Homogeneous collection of ``element``."""

    element: TypeRef

    def referenced_name(self) -> Optional[str]:
        element = self.element
        while isinstance(element, CollectionOf):
            element = element.element
        return element.referenced_name()


ANY = Primitive(PrimitiveKind.ANY)
STRING = Primitive(PrimitiveKind.STRING)
BOOLEAN = Primitive(PrimitiveKind.BOOLEAN)


@dataclass
class Field:
    """Represents a single field in a declaration."""

    name: str
    original_name: str  # Keep original JSON key for annotations
    type: TypeRef

    @property
    def is_reference(self) -> bool:
        """Whether the field points at another declaration."""
        return self.type.referenced_name() is not None


@dataclass
class Declaration:
    """A synthesized named shape."""

    name: str
    fields: List[Field] = field(default_factory=list)
    dependencies: List[str] = field(default_factory=list)

    def add_field(self, field: Field) -> None:
        """Add a field, recording the declaration it references."""
        self.fields.append(field)

        referenced = field.type.referenced_name()
        if referenced is not None and referenced not in self.dependencies:
            self.dependencies.append(referenced)

    def get_field(self, name: str) -> Optional[Field]:
        """Get field by declared name."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def uses_collections(self) -> bool:
        """Check whether any field is a collection."""
        return any(isinstance(field.type, CollectionOf) for field in self.fields)
