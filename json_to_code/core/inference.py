"""
Schema inference from a single JSON sample.

Walks a parsed JSON value, registers a declaration for every object shape it
meets and returns the type of the value.

The walk keeps its own stack of open objects, so the depth of the sample is
bounded only by what the JSON parser accepts.
"""

from typing import Any, Iterator, List, Optional, Tuple

from ..logging_config import get_logger
from .naming import DeclarationNaming, NameSanitizer, synthesize_name
from .schema import (
    ANY,
    BOOLEAN,
    STRING,
    CollectionOf,
    Declaration,
    DeclarationRef,
    Field,
    Primitive,
    PrimitiveKind,
    TypeRef,
)
from .shapes import ShapeRegistry

logger = get_logger(__name__)

# An object whose declaration is registered but whose fields are not walked yet
Pending = Tuple[Declaration, dict]

# Declaration being filled, its field sanitizer and the keys left to walk
_Frame = Tuple[Declaration, NameSanitizer, Iterator[Tuple[str, Any]]]


class SchemaInferrer:
    """Infers declarations from a JSON value into a registry."""

    def __init__(
        self,
        naming: DeclarationNaming,
        suffix: str = "",
        registry: Optional[ShapeRegistry] = None,
    ):
        """
        Args:
            naming: Naming convention of the target language
            suffix: Suffix appended to every synthesized declaration name
            registry: Registry to populate; a new one is created when omitted
        """
        self.naming = naming
        self.suffix = suffix or ""
        self.registry = registry if registry is not None else ShapeRegistry()

    def reset(self) -> None:
        """Forget every declaration registered so far."""
        self.registry.clear()

    def declaration_name(self, path_hint: str, from_key: bool = False) -> str:
        """Name a shape found under ``path_hint``."""
        return synthesize_name(path_hint, self.suffix, self.naming, from_key)

    def infer(
        self, value: Any, path_hint: str, property_key: Optional[str] = None
    ) -> TypeRef:
        """
        Infer the type of ``value``.

        Args:
            value: Parsed JSON value
            path_hint: Name the value would get if it were an object
            property_key: Key the value was found under, if any

        Returns:
            TypeRef describing the value
        """
        type_ref, pending = self._resolve(value, path_hint, property_key)
        if pending is not None:
            self._walk(*pending)
        return type_ref

    def _resolve(
        self, value: Any, path_hint: str, property_key: Optional[str]
    ) -> Tuple[TypeRef, Optional[Pending]]:
        """Type ``value`` without walking into a newly registered object."""
        from_key = property_key is not None
        depth = 0

        # Only the first element of an array is sampled
        while isinstance(value, list) and value:
            path_hint = property_key or f"{path_hint}Item"
            property_key = None
            value = value[0]
            depth += 1

        pending = None
        if isinstance(value, dict):
            type_ref, pending = self._declare(
                value, property_key or path_hint, from_key
            )
        else:
            type_ref = self._scalar_type(value)

        for _ in range(depth):
            type_ref = CollectionOf(type_ref)
        return type_ref, pending

    def _scalar_type(self, value: Any) -> TypeRef:
        if value is None:
            return ANY

        # bool is a subclass of int
        if isinstance(value, bool):
            return BOOLEAN

        if isinstance(value, int):
            return Primitive(PrimitiveKind.NUMBER, integral=True)

        if isinstance(value, float):
            return Primitive(PrimitiveKind.NUMBER, integral=value.is_integer())

        if isinstance(value, str):
            return STRING

        if isinstance(value, list):
            return CollectionOf(ANY)

        raise TypeError(f"Unsupported JSON value type: {type(value).__name__}")

    def _declare(
        self, value: dict, path_hint: str, from_key: bool
    ) -> Tuple[DeclarationRef, Optional[Pending]]:
        name = self.declaration_name(path_hint, from_key)

        if name in self.registry:
            logger.debug("Reusing declaration %s", name)
            return DeclarationRef(name), None

        # Registered before its fields so nested shapes with the same name
        # resolve to this declaration.
        declaration = self.registry.add(Declaration(name=name))
        return DeclarationRef(name), (declaration, value)

    def _walk(self, declaration: Declaration, value: dict) -> None:
        """Fill the fields of ``declaration`` and of every object below it."""
        stack: List[_Frame] = [self._open(declaration, value)]

        while stack:
            declaration, sanitizer, entries = stack[-1]
            entry = next(entries, None)

            if entry is None:
                stack.pop()
                logger.debug(
                    "Registered declaration %s with %d field(s)",
                    declaration.name,
                    len(declaration.fields),
                )
                continue

            key, item = entry
            field_type, pending = self._resolve(item, key, key)
            declaration.add_field(
                Field(
                    name=sanitizer.sanitize_name(key),
                    original_name=key,
                    type=field_type,
                )
            )
            if pending is not None:
                stack.append(self._open(*pending))

    def _open(self, declaration: Declaration, value: dict) -> _Frame:
        return declaration, self.naming.field_sanitizer(), iter(value.items())

    def infer_root(self, value: Any, root_name: str) -> str:
        """
        Infer the root value and return the name of its declaration.

        An object produces its own declaration and an array of objects the
        declaration of its items. Any other root gets a declaration with a
        single ``value`` field holding its type.
        """
        value_type = self.infer(value, root_name)
        if value_type.referenced_name() is not None:
            return value_type.referenced_name()

        name = self.declaration_name(root_name)
        declaration = self.registry.add(Declaration(name=name))
        sanitizer = self.naming.field_sanitizer()
        declaration.add_field(
            Field(
                name=sanitizer.sanitize_name("value"),
                original_name="value",
                type=value_type,
            )
        )
        logger.debug("Wrapped non-object root in declaration %s", name)
        return name
