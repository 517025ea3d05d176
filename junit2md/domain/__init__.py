"""junit2md.domain

Canonical, I/O-free representation of JUnit reports.
"""

from __future__ import annotations

from .names import simplify_name
from .report import (
    Document,
    DocumentKind,
    NegativeResult,
    Outcome,
    OutcomeKind,
    Property,
    ResultKind,
    Suite,
    SuiteCounts,
    TestCase,
    percent_of,
)

__all__ = [
    "Document",
    "DocumentKind",
    "NegativeResult",
    "Outcome",
    "OutcomeKind",
    "Property",
    "ResultKind",
    "Suite",
    "SuiteCounts",
    "TestCase",
    "percent_of",
    "simplify_name",
]
