"""junit2md.render.report_md

Markdown rendering for JUnit reports.

This module contains formatting logic only (no file I/O, no logging).

Single-suite report layout::

    <suite name>                      (H1)
    [host/timestamp/properties]       (verbose only)
    Overall status                    (H2 + table)
    Breakdown by testcases            (H2 + table, links to failures)
    Failures                          (H2, omitted when everything passed)

Aggregated report layout::

    Aggregated test report            (H1)
    Totals                            (H2 + one row per suite + total row)
    Failures                          (H2, all suites, shared numbering)

Failures, errors and skips share a single zero-based counter. The breakdown
table links ``[[i]](#c-i)`` and the failures section anchors ``c-i`` are
produced from the same traversal order, so they always agree.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from typing import Iterable, List, Optional, Sequence

from junit2md.domain.names import simplify_name
from junit2md.domain.report import Document, Suite, SuiteCounts, TestCase, percent_of

from .markdown import anchor, anchor_link, details, h1, h2, h3, table_text
from .table import CellLike, EmptyCell, render_table

NOT_APPLICABLE = "N/A"
NOT_SPECIFIED = "Not specified"

AGGREGATED_TITLE = "Aggregated test report"


@dataclass(frozen=True)
class RenderOptions:
    """Rendering switches, fixed for the whole run.

    ``verbose`` adds host/timestamp information, suite properties and the
    captured standard streams of failed tests.
    """

    verbose: bool = False


def render_report(document: Document, options: Optional[RenderOptions] = None) -> str:
    """Render a parsed document, picking the layout from its kind."""

    opts = options or RenderOptions()
    if document.is_aggregated:
        return render_aggregated_markdown(document.suites, opts, duration=document.duration)
    return render_suite_markdown(document.suites[0], opts)


def render_suite_markdown(suite: Suite, options: Optional[RenderOptions] = None) -> str:
    opts = options or RenderOptions()

    parts: List[str] = [h1(simplify_name(suite.name))]
    if opts.verbose:
        parts.append(_suite_properties(suite))
    parts.append(_overall_status(suite.counts))
    parts.append(_testcase_breakdown(suite.testcases))
    parts.append(_failure_details(suite.unsuccessful_cases(), opts))

    return "".join(parts)


def render_aggregated_markdown(
    suites: Sequence[Suite],
    options: Optional[RenderOptions] = None,
    *,
    duration: Optional[str] = None,
) -> str:
    opts = options or RenderOptions()

    parts: List[str] = [h1(AGGREGATED_TITLE)]
    if opts.verbose and duration:
        parts.append(f"Test run took {duration} seconds to finish.\n\n")
    parts.append(_suite_totals(suites))
    parts.append(
        _failure_details(chain.from_iterable(s.unsuccessful_cases() for s in suites), opts)
    )

    return "".join(parts)


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------


def _suite_properties(suite: Suite) -> str:
    parts: List[str] = []

    if suite.hostname and suite.timestamp and suite.time:
        parts.append(
            f"Testset was started on host {suite.hostname} at {suite.timestamp} "
            f"and took {suite.time} seconds to finish.\n\n"
        )

    if suite.properties:
        parts.append("Properties:\n\n")
        for prop in suite.properties:
            parts.append(f"* {prop.name}: {prop.value}\n")
        parts.append("\n")

    if suite.system_out:
        parts.append(details("Standard output", suite.system_out))
    if suite.system_err:
        parts.append(details("Standard error", suite.system_err))

    return "".join(parts)


def _overall_status(counts: SuiteCounts) -> str:
    total = counts.total
    rows: List[List[CellLike]] = [
        ["Type", "Number of tests", "% of total"],
        ["Skipped", counts.skipped, percent_of(counts.skipped, total)],
        ["Disabled", counts.disabled, percent_of(counts.disabled, total)],
        ["Failed", counts.failed, percent_of(counts.failed, total)],
        ["*Successful*", counts.successful, percent_of(counts.successful, total)],
    ]
    return h2("Overall status") + render_table(rows)


def _testcase_breakdown(testcases: Sequence[TestCase]) -> str:
    rows: List[List[CellLike]] = [["Testcase name", "Status", "Time", "Cause"]]

    fail_index = 0
    for tc in testcases:
        cause: CellLike = EmptyCell()
        if not tc.outcome.is_success:
            cause = anchor_link(fail_index)
            fail_index += 1
        rows.append([table_text(simplify_name(tc.name)), tc.outcome.kind.glyph, tc.time or "", cause])

    return h2("Breakdown by testcases") + render_table(rows, align_left_first_column=True)


def _suite_totals(suites: Sequence[Suite]) -> str:
    rows: List[List[CellLike]] = [
        ["Test suite", "Time", "Success", "Skipped", "Disabled", "Failed", "Total"],
    ]
    for suite in suites:
        rows.append([table_text(simplify_name(suite.name)), suite.time or NOT_APPLICABLE, *_counts_cells(suite.counts)])

    total = SuiteCounts.sum(s.counts for s in suites)
    rows.append(["**Total**", NOT_APPLICABLE, *_counts_cells(total)])

    return h2("Totals") + render_table(rows, align_left_first_column=True)


def _counts_cells(counts: SuiteCounts) -> List[CellLike]:
    return [counts.successful, counts.skipped, counts.disabled, counts.failed, counts.total]


def _failure_details(cases: Iterable[TestCase], options: RenderOptions) -> str:
    parts: List[str] = []

    for index, tc in enumerate(cases):
        result = tc.outcome.result
        if result is None:
            continue

        parts.append(anchor(index))
        parts.append(h3(simplify_name(tc.name)))
        if tc.classname:
            parts.append(f"Classname: {simplify_name(tc.classname)}\n\n")
        parts.append(f"Fail reason: {_first_line(result.message) or NOT_SPECIFIED}\n\n")

        if result.body:
            parts.append(details("Details", result.body))
        if options.verbose:
            if tc.system_out:
                parts.append(details("Standard output", tc.system_out))
            if tc.system_err:
                parts.append(details("Standard error", tc.system_err))

    if not parts:
        return ""
    return h2("Failures") + "".join(parts)


def _first_line(text: Optional[str]) -> str:
    if not text:
        return ""
    lines = text.strip().splitlines()
    return lines[0].strip() if lines else ""
