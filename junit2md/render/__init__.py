"""junit2md.render

Markdown rendering (formatting only, no file I/O).

Public API:
- render_report(...)
- render_suite_markdown(...)
- render_aggregated_markdown(...)
- render_table(...)
"""

from __future__ import annotations

from .report_md import (
    RenderOptions,
    render_aggregated_markdown,
    render_report,
    render_suite_markdown,
)
from .table import EmptyCell, IntCell, TextCell, as_cell, render_table

__all__ = [
    "EmptyCell",
    "IntCell",
    "RenderOptions",
    "TextCell",
    "as_cell",
    "render_aggregated_markdown",
    "render_report",
    "render_suite_markdown",
    "render_table",
]
