"""
Registry of declarations synthesized during one generation run.
"""

from typing import Dict, Iterator, List, Optional

from .schema import Declaration


class ShapeRegistry:
    """Name-keyed, insertion-ordered store of declarations.

    A name is inserted at most once; later insertions under the same name
    return the declaration already stored.
    """

    def __init__(self):
        self._declarations: Dict[str, Declaration] = {}

    def add(self, declaration: Declaration) -> Declaration:
        """Insert declaration unless its name is taken; return the stored one."""
        return self._declarations.setdefault(declaration.name, declaration)

    def get(self, name: str) -> Optional[Declaration]:
        return self._declarations.get(name)

    def names(self) -> List[str]:
        return list(self._declarations)

    def clear(self) -> None:
        self._declarations.clear()

    def __contains__(self, name: str) -> bool:
        return name in self._declarations

    def __iter__(self) -> Iterator[Declaration]:
        return iter(list(self._declarations.values()))

    def __len__(self) -> int:
        return len(self._declarations)
