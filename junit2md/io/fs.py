"""junit2md.io.fs

Filesystem helpers for reading reports and writing Markdown artifacts.

Writes are atomic (temp file + ``os.replace``) so a CI job that is killed
mid-run never leaves a truncated summary behind for the next step to publish.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional


def read_bytes(path: Path) -> bytes:
    """Read a whole input document as raw bytes.

    XML carries its own encoding declaration, so decoding is left to the
    parser. ``OSError`` propagates.
    """

    return Path(path).read_bytes()


def read_text(path: Path, *, encoding: str = "utf-8") -> str:
    """Read a text file (e.g. a rendered summary). Errors propagate."""

    return Path(path).read_text(encoding=encoding)


def _atomic_write_text(
    path: Path,
    write_fn,
    *,
    encoding: str = "utf-8",
    newline: Optional[str] = None,
) -> None:
    """Write a file atomically by writing to a temp file and os.replace()."""

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f"{p.name}.", suffix=".tmp", dir=str(p.parent))
    tmp_path = Path(tmp_name)

    try:
        with os.fdopen(fd, "w", encoding=encoding, newline=newline) as f:
            write_fn(f)
            f.flush()
            os.fsync(f.fileno())

        os.replace(tmp_path, p)
    finally:
        # If os.replace fails, best-effort cleanup of the temp file.
        if tmp_path.exists():
            tmp_path.unlink(missing_ok=True)


def write_text_atomic(path: Path, text: str, *, encoding: str = "utf-8") -> Path:
    """Write UTF-8 text atomically and return the written path."""

    def _write(f) -> None:
        f.write(text)

    p = Path(path)
    _atomic_write_text(p, _write, encoding=encoding)
    return p


def write_markdown(path: Path, text: str, *, encoding: str = "utf-8") -> Path:
    """Write a Markdown artifact.

    Alias for :func:`write_text_atomic` to keep call sites semantically clear.
    """

    return write_text_atomic(Path(path), text, encoding=encoding)
