"""junit2md.render.table

Fixed-width, column-aligned Markdown tables.

GitHub renders a pipe table the same way regardless of padding, but people
also read the raw Markdown (CI logs, ``cat summary.md``), so every cell is
padded to its column width. Widths are measured in code points, so status
glyphs such as ``✓`` count as one character.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

_MIN_WIDTH = 3


@dataclass(frozen=True)
class TextCell:
    text: str

    def display(self) -> str:
        return self.text


@dataclass(frozen=True)
class IntCell:
    value: int

    def display(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class EmptyCell:
    def display(self) -> str:
        return ""


Cell = Union[TextCell, IntCell, EmptyCell]
CellLike = Union[Cell, str, int, None]


def as_cell(value: CellLike) -> Cell:
    """Coerce a plain value into a table cell."""
    if isinstance(value, (TextCell, IntCell, EmptyCell)):
        return value
    if value is None:
        return EmptyCell()
    # bool is an int subclass, but "True" is text as far as tables go.
    if isinstance(value, int) and not isinstance(value, bool):
        return IntCell(value)
    return TextCell(str(value))


def pad_cell(text: str, width: int, *, center: bool = True) -> str:
    """Pad ``text`` with spaces up to ``width`` code points.

    Centered cells put the odd remaining space on the right. Text that is
    already at least ``width`` long is returned unchanged.
    """

    diff = width - len(text)
    if diff <= 0:
        return text
    if not center:
        return text + " " * diff
    left = diff // 2
    return " " * left + text + " " * (diff - left)


def column_widths(rows: Sequence[Sequence[str]]) -> List[int]:
    if not rows:
        return []
    widths = [_MIN_WIDTH] * len(rows[0])
    for row in rows:
        for idx, text in enumerate(row):
            widths[idx] = max(widths[idx], len(text))
    return widths


def render_table(
    rows: Sequence[Sequence[CellLike]],
    *,
    align_left_first_column: bool = False,
) -> str:
    """Render ``rows`` (first row is the header) as a Markdown table.

    Returns an empty string for fewer than two rows: a table needs a header
    and at least one data row. All rows must have the same number of cells.
    The result ends with a blank line.
    """

    if len(rows) < 2:
        return ""

    texts = [[as_cell(c).display() for c in row] for row in rows]
    widths = column_widths(texts)
    header, body = texts[0], texts[1:]

    lines: List[str] = []
    lines.append(_render_row(header, widths))
    lines.append("|" + "|".join("-" * w for w in widths) + "|")
    for row in body:
        lines.append(_render_row(row, widths, left_column=0 if align_left_first_column else None))

    return "\n".join(lines) + "\n\n"


def _render_row(cells: Sequence[str], widths: Sequence[int], *, left_column: Optional[int] = None) -> str:
    padded = [
        pad_cell(text, widths[idx], center=idx != left_column)
        for idx, text in enumerate(cells)
    ]
    return "|" + "|".join(padded) + "|"
