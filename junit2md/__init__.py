"""junit2md

Package namespace for the JUnit XML to Markdown converter.

Layout
------
* :mod:`junit2md.domain` owns the report data model (suites, test cases,
  negative results) and small pure helpers such as name simplification.
* :mod:`junit2md.io` owns the boundary with the outside world: reading JUnit
  XML documents and writing Markdown artifacts.
* :mod:`junit2md.render` owns Markdown formatting (tables, headers, report
  sections). It never touches the filesystem.

The CLI (:mod:`junit2md_cli` and the ``cli`` package) is a thin composition
root that wires these pieces together.
"""

from __future__ import annotations

__version__ = "0.1.0"
