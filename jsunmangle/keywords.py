"""Reserved word classification for ECMAScript identifiers."""

from __future__ import annotations

from typing import FrozenSet

_ES5_KEYWORDS: FrozenSet[str] = frozenset(
    {
        "break",
        "case",
        "catch",
        "continue",
        "debugger",
        "default",
        "delete",
        "do",
        "else",
        "finally",
        "for",
        "function",
        "if",
        "in",
        "instanceof",
        "new",
        "return",
        "switch",
        "this",
        "throw",
        "try",
        "typeof",
        "var",
        "void",
        "while",
        "with",
        # Future reserved words in every mode.
        "class",
        "const",
        "enum",
        "export",
        "extends",
        "import",
        "super",
    }
)

_STRICT_RESERVED: FrozenSet[str] = frozenset(
    {
        "implements",
        "interface",
        "let",
        "package",
        "private",
        "protected",
        "public",
        "static",
        "yield",
    }
)

_LITERALS: FrozenSet[str] = frozenset({"null", "true", "false"})

_RESTRICTED: FrozenSet[str] = frozenset({"eval", "arguments"})


def is_keyword_es5(name: str, strict: bool = False) -> bool:
    if strict and name in _STRICT_RESERVED:
        return True
    return name in _ES5_KEYWORDS


def is_keyword_es6(name: str, strict: bool = False) -> bool:
    if name == "yield" or name == "let":
        return True
    return is_keyword_es5(name, strict)


def is_reserved_word(name: str, strict: bool = False) -> bool:
    """Return ``True`` when *name* can never be a binding name."""

    return name in _LITERALS or is_keyword_es6(name, strict)


def is_restricted_word(name: str) -> bool:
    return name in _RESTRICTED


def is_unusable(name: str, strict: bool = False) -> bool:
    """Combined check used by the allocators."""

    return is_reserved_word(name, strict) or is_restricted_word(name)


__all__ = [
    "is_keyword_es5",
    "is_keyword_es6",
    "is_reserved_word",
    "is_restricted_word",
    "is_unusable",
]
