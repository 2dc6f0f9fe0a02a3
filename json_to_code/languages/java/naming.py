"""
Java-specific naming utilities.

Handles Java reserved words and the DTO naming convention.
"""

from ...core.naming import DeclarationNaming


# Java keywords and literals that cannot be used as field names
JAVA_RESERVED_WORDS = frozenset(
    {
        "abstract",
        "assert",
        "boolean",
        "break",
        "byte",
        "case",
        "catch",
        "char",
        "class",
        "const",
        "continue",
        "default",
        "do",
        "double",
        "else",
        "enum",
        "extends",
        "false",
        "final",
        "finally",
        "float",
        "for",
        "goto",
        "if",
        "implements",
        "import",
        "instanceof",
        "int",
        "interface",
        "long",
        "native",
        "new",
        "null",
        "package",
        "private",
        "protected",
        "public",
        "return",
        "short",
        "static",
        "strictfp",
        "super",
        "switch",
        "synchronized",
        "this",
        "throw",
        "throws",
        "transient",
        "true",
        "try",
        "void",
        "volatile",
        "while",
        "_",
    }
)


def create_java_naming() -> DeclarationNaming:
    """Create the naming convention for Java DTO classes."""
    return DeclarationNaming(postfix="Dto", reserved_words=JAVA_RESERVED_WORDS)
