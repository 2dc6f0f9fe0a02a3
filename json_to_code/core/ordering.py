"""
Dependency ordering of declarations.

Declarations are emitted after everything they reference. Cycles are broken
by skipping edges that point back at a declaration still being visited.
"""

from enum import Enum
from typing import Dict, Iterator, List, Tuple

from ..logging_config import get_logger
from .schema import Declaration
from .shapes import ShapeRegistry

logger = get_logger(__name__)


class VisitState(Enum):
    """Marking used by the depth-first traversal."""

    UNVISITED = "unvisited"
    IN_PROGRESS = "in_progress"
    DONE = "done"


class DependencyOrderer:
    """Topologically sorts a registry, tolerating cycles."""

    def __init__(self):
        self.skipped_edges: List[Tuple[str, str]] = []

    def order(self, registry: ShapeRegistry) -> List[Declaration]:
        """
        Order declarations so dependencies precede dependents.

        Every registry entry is used as an entry point, in insertion order.

        Args:
            registry: Declarations to order

        Returns:
            Each declaration exactly once, dependencies first
        """
        self.skipped_edges = []
        states: Dict[str, VisitState] = {}
        ordered: List[Declaration] = []

        for entry in registry:
            if states.get(entry.name, VisitState.UNVISITED) is not VisitState.UNVISITED:
                continue

            states[entry.name] = VisitState.IN_PROGRESS
            stack: List[Tuple[Declaration, Iterator[str]]] = [
                (entry, iter(entry.dependencies))
            ]

            while stack:
                declaration, pending = stack[-1]

                for dependency_name in pending:
                    state = states.get(dependency_name, VisitState.UNVISITED)

                    if state is VisitState.IN_PROGRESS:
                        logger.debug(
                            "Skipping cyclic edge %s -> %s",
                            declaration.name,
                            dependency_name,
                        )
                        self.skipped_edges.append((declaration.name, dependency_name))
                        continue

                    if state is VisitState.DONE:
                        continue

                    dependency = registry.get(dependency_name)
                    if dependency is None:
                        continue

                    states[dependency_name] = VisitState.IN_PROGRESS
                    stack.append((dependency, iter(dependency.dependencies)))
                    break
                else:
                    stack.pop()
                    states[declaration.name] = VisitState.DONE
                    ordered.append(declaration)

        return ordered


def order_declarations(registry: ShapeRegistry) -> List[Declaration]:
    """Order the declarations of ``registry``, dependencies first."""
    return DependencyOrderer().order(registry)
