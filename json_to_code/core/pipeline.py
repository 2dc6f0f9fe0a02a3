"""
Generation pipeline: parse, infer, order and emit.

Every call builds its own registry, so calls never share state.
"""

import json
from dataclasses import dataclass, field
from typing import Any, List, NamedTuple, Tuple

from ..logging_config import get_logger
from .generator import CodeGenerator, InvalidInputError
from .inference import SchemaInferrer
from .ordering import DependencyOrderer
from .schema import Declaration
from .shapes import ShapeRegistry

logger = get_logger(__name__)


class GeneratedFile(NamedTuple):
    """One file of a file set."""

    file_name: str
    content: str


@dataclass
class InferredSchema:
    """Declarations inferred from one JSON sample, in emission order."""

    root_name: str
    declarations: List[Declaration]
    skipped_edges: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def root(self) -> Declaration:
        for declaration in self.declarations:
            if declaration.name == self.root_name:
                return declaration
        raise KeyError(self.root_name)

    def names(self) -> List[str]:
        return [declaration.name for declaration in self.declarations]


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_json(json_text: str) -> Any:
    """
    Parse strict JSON text.

    Raises:
        InvalidInputError: If the text is empty or not valid JSON
    """
    if not json_text or not json_text.strip():
        raise InvalidInputError("JSON text is empty")

    try:
        return json.loads(json_text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise InvalidInputError(
            f"Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})"
        ) from e
    except ValueError as e:
        raise InvalidInputError(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        raise InvalidInputError("Invalid JSON: nesting exceeds the parser limit") from e


def infer_schema(
    json_text: str, generator: CodeGenerator, root_name: str, suffix: str = ""
) -> InferredSchema:
    """
    Parse ``json_text`` and infer its ordered declarations.

    Args:
        json_text: JSON sample
        generator: Target generator, supplies the naming convention
        root_name: Name hint of the root declaration
        suffix: Optional suffix for every declaration name

    Returns:
        InferredSchema with declarations in dependency order

    Raises:
        InvalidInputError: On empty input, empty root name or invalid JSON
    """
    if not root_name or not root_name.strip():
        raise InvalidInputError("Root name is empty")

    data = parse_json(json_text)

    registry = ShapeRegistry()
    inferrer = SchemaInferrer(generator.naming, suffix, registry)

    root = inferrer.infer_root(data, root_name)

    orderer = DependencyOrderer()
    declarations = orderer.order(registry)

    logger.debug(
        "Inferred %d declaration(s) for %s (root %s)",
        len(declarations),
        generator.language_name,
        root,
    )
    return InferredSchema(root, declarations, orderer.skipped_edges)


def generate_document(
    json_text: str,
    generator: CodeGenerator,
    root_name: str,
    suffix: str = "",
) -> str:
    """Generate all declarations as one document."""
    schema = infer_schema(json_text, generator, root_name, suffix)

    for warning in generator.validate_declarations(schema.declarations):
        logger.info(warning)

    return generator.generate(schema.declarations)


def generate_file_set(
    json_text: str,
    generator: CodeGenerator,
    root_name: str,
    suffix: str = "",
) -> List[GeneratedFile]:
    """Generate one file per declaration, in dependency order."""
    schema = infer_schema(json_text, generator, root_name, suffix)

    return [
        GeneratedFile(
            f"{declaration.name}{generator.file_extension}",
            generator.generate_file(declaration),
        )
        for declaration in schema.declarations
    ]
