"""junit2md.io

Boundary with the outside world: JUnit XML input and Markdown output.
"""

from __future__ import annotations

from .fs import read_bytes, read_text, write_markdown, write_text_atomic
from .junit_xml import (
    Classification,
    ClassificationKind,
    JunitParseError,
    classify_document,
    load_document,
    load_singular_suite,
)

__all__ = [
    "Classification",
    "ClassificationKind",
    "JunitParseError",
    "classify_document",
    "load_document",
    "load_singular_suite",
    "read_bytes",
    "read_text",
    "write_markdown",
    "write_text_atomic",
]
