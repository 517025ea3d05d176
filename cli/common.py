from __future__ import annotations

"""cli.common

Small shared helpers for CLI command modules.
"""

from pathlib import Path
from typing import List, Sequence


def as_paths(raw: Sequence[str]) -> List[Path]:
    """Convert positional path arguments, dropping blanks (e.g. from shell globs)."""
    return [Path(x) for x in raw if str(x).strip()]


def describe_os_error(exc: OSError) -> str:
    """Short human-readable reason for a failed file read or write."""
    if isinstance(exc, FileNotFoundError):
        return "no such file"
    if isinstance(exc, IsADirectoryError):
        return "is a directory"
    if isinstance(exc, PermissionError):
        return "permission denied"
    return exc.strerror or str(exc)
