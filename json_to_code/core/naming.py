"""
Naming utilities for safe code generation.

Handles key sanitization, case conversion, reserved word conflicts and the
synthesis of declaration names from JSON paths.
"""

import re
from dataclasses import dataclass
from typing import FrozenSet, List, Set


# Underscores and anything that is not a letter or digit separate words
_WORD_SEPARATOR = re.compile(r"[\W_]+")


def split_words(name: str) -> List[str]:
    """Split a raw JSON key into words."""
    return [word for word in _WORD_SEPARATOR.split(name) if word]


def capitalize_first(value: str) -> str:
    """Uppercase the first character, leaving the rest untouched."""
    return value[:1].upper() + value[1:]


def to_camel_case(name: str) -> str:
    """Convert to camelCase, keeping the first word as written."""
    words = split_words(name)
    if not words:
        return ""
    return words[0] + "".join(capitalize_first(word) for word in words[1:])


def to_pascal_case(name: str) -> str:
    """Convert to PascalCase."""
    return "".join(capitalize_first(word) for word in split_words(name))


class NameSanitizer:
    """Handles name sanitization and conflict resolution for one scope."""

    def __init__(self, reserved_words: Set[str] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
        """
        self.reserved_words = reserved_words or set()
        self._used_names: Set[str] = set()

    def sanitize_name(self, name: str, suffix_on_conflict: str = "_") -> str:
        """
        Sanitize a name for safe use in target language.

        Args:
            name: Original name to sanitize
            suffix_on_conflict: Suffix to add for conflicts

        Returns:
            Sanitized name, unique within this sanitizer
        """
        cleaned = self._clean_basic(to_camel_case(name))
        final_name = self._resolve_conflicts(cleaned, suffix_on_conflict)

        self._used_names.add(final_name)
        return final_name

    def _clean_basic(self, name: str) -> str:
        """Make sure the name is a usable identifier."""
        # Ensure doesn't start with number
        if name and name[0].isdigit():
            name = f"_{name}"

        # Ensure not empty
        if not name:
            name = "field"

        return name

    def _resolve_conflicts(self, name: str, suffix: str) -> str:
        """Resolve naming conflicts with reserved words and existing names."""
        if name in self.reserved_words:
            name = f"{name}{suffix}"

        original_name = name
        counter = 1
        while name in self._used_names:
            name = f"{original_name}{suffix}{counter}"
            counter += 1

        return name


@dataclass(frozen=True)
class DeclarationNaming:
    """Naming convention of a target language.

    Declaration names are ``prefix + PascalHint + Suffix + postfix``; fields use
    camelCase with ``reserved_words`` escaped.
    """

    prefix: str = ""
    postfix: str = ""
    reserved_words: FrozenSet[str] = frozenset()

    def field_sanitizer(self) -> NameSanitizer:
        """Create a sanitizer scoped to a single declaration."""
        return NameSanitizer(set(self.reserved_words))

    def has_prefix(self, name: str) -> bool:
        """Check whether name already carries the prefix."""
        size = len(self.prefix)
        return (
            bool(self.prefix)
            and name.startswith(self.prefix)
            and name[size : size + 1].isupper()
        )


def synthesize_name(
    path_hint: str, suffix: str, naming: DeclarationNaming, from_key: bool = False
) -> str:
    """
    Build a declaration name from a JSON path hint.

    Args:
        path_hint: Property key or root name the shape was found under
        suffix: Optional suffix applied to every synthesized name
        naming: Target language convention
        from_key: The hint is a JSON key. Keys always get the prefix and
            postfix, so ``IBAN`` becomes ``IIBAN``; a root name that already
            carries them is kept as written.

    Returns:
        Declaration name such as ``IAddressOmie`` or ``AddressOmieDto``
    """
    base = to_pascal_case(path_hint) or "Field"
    if from_key or not naming.has_prefix(base):
        base = f"{naming.prefix}{base}"

    name = f"{base}{to_pascal_case(suffix)}"
    if naming.postfix and (from_key or not name.endswith(naming.postfix)):
        name = f"{name}{naming.postfix}"

    if name[0].isdigit():
        name = f"_{name}"

    return name
