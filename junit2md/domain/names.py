"""junit2md.domain.names

Display helpers for fully-qualified test names.
"""

from __future__ import annotations

_SEPARATOR = "."


def simplify_name(name: str) -> str:
    """Strip the package prefix from a qualified class or test name.

    ``org.example.FooTest`` becomes ``FooTest``. Names without a separator are
    returned unchanged, and so are names containing whitespace: those are
    descriptive sentences used as test names, not namespaced identifiers.
    A name ending with the separator is degenerate and is also returned as-is.
    """

    if _SEPARATOR not in name or any(ch.isspace() for ch in name):
        return name

    tail = name.rsplit(_SEPARATOR, 1)[1]
    if not tail:
        return name
    return tail
