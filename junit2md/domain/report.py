"""junit2md.domain.report

Typed representation of a JUnit test report.

The JUnit XML "schema" is loose in practice: almost every attribute is
optional, counts may disagree with the test cases actually listed, and
producers differ on whether they emit one suite per file or an umbrella
document with many suites. The dataclasses below mirror that looseness with
``Optional`` fields instead of inventing defaults at parse time; rendering
code decides which placeholder to show.

All types are frozen and use tuples for collections, so a parsed report is an
immutable value tree that can be handed to renderers without copying.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple


class ResultKind(str, Enum):
    """Kind of a negative (non-passing) result attached to a test case."""

    ERROR = "error"
    FAILURE = "failure"
    SKIPPED = "skipped"


class OutcomeKind(str, Enum):
    """Classification of a test case outcome."""

    SUCCESS = "success"
    ERROR = "error"
    FAILURE = "failure"
    SKIPPED = "skipped"

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_GLYPHS = {
    OutcomeKind.SUCCESS: "✓",
    OutcomeKind.FAILURE: "✗",
    OutcomeKind.ERROR: "‼",
    OutcomeKind.SKIPPED: "✂",
}


@dataclass(frozen=True)
class NegativeResult:
    """An ``<error>``, ``<failure>`` or ``<skipped>`` element."""

    kind: ResultKind
    message: Optional[str] = None
    type: Optional[str] = None
    body: Optional[str] = None


@dataclass(frozen=True)
class Outcome:
    """Outcome of a single test case.

    ``result`` is ``None`` exactly when ``kind`` is :attr:`OutcomeKind.SUCCESS`.
    """

    kind: OutcomeKind
    result: Optional[NegativeResult] = None

    @property
    def is_success(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @classmethod
    def classify(
        cls,
        *,
        errors: Tuple[NegativeResult, ...],
        failures: Tuple[NegativeResult, ...],
        skipped: Optional[NegativeResult],
    ) -> "Outcome":
        """Pick the outcome from the negative results of a test case.

        Errors win over failures, failures win over a skip. Only the first
        entry of each kind is kept; later duplicates are ignored.
        """

        if errors:
            return cls(OutcomeKind.ERROR, errors[0])
        if failures:
            return cls(OutcomeKind.FAILURE, failures[0])
        if skipped is not None:
            return cls(OutcomeKind.SKIPPED, skipped)
        return cls(OutcomeKind.SUCCESS)


SUCCESS = Outcome(OutcomeKind.SUCCESS)


@dataclass(frozen=True)
class Property:
    name: str
    value: str


@dataclass(frozen=True)
class TestCase:
    """A single ``<testcase>`` element."""

    # Not a pytest test class, despite the name.
    __test__ = False

    name: str
    classname: Optional[str] = None
    # Kept verbatim: producers emit "0.013", "0,013", "13ms"...
    time: Optional[str] = None
    assertions: Optional[str] = None
    status: Optional[str] = None
    system_out: Optional[str] = None
    system_err: Optional[str] = None

    errors: Tuple[NegativeResult, ...] = ()
    failures: Tuple[NegativeResult, ...] = ()
    skipped: Optional[NegativeResult] = None

    outcome: Outcome = field(init=False, repr=False, compare=False, default=SUCCESS)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "outcome",
            Outcome.classify(errors=self.errors, failures=self.failures, skipped=self.skipped),
        )


@dataclass(frozen=True)
class SuiteCounts:
    """Status counts derived from a suite's declared attributes.

    ``successful`` may be negative when a producer over-counts failures; that
    is reported as-is rather than clamped.
    """

    skipped: int = 0
    disabled: int = 0
    failed: int = 0
    successful: int = 0
    total: int = 0

    def __add__(self, other: "SuiteCounts") -> "SuiteCounts":
        if not isinstance(other, SuiteCounts):
            return NotImplemented
        return SuiteCounts(
            skipped=self.skipped + other.skipped,
            disabled=self.disabled + other.disabled,
            failed=self.failed + other.failed,
            successful=self.successful + other.successful,
            total=self.total + other.total,
        )

    @classmethod
    def sum(cls, counts: Iterable["SuiteCounts"]) -> "SuiteCounts":
        out = cls()
        for c in counts:
            out = out + c
        return out


@dataclass(frozen=True)
class Suite:
    """A ``<testsuite>`` element."""

    name: str
    tests: int
    failures: Optional[int] = None
    errors: Optional[int] = None
    disabled: Optional[int] = None
    skipped: Optional[int] = None

    time: Optional[str] = None
    timestamp: Optional[str] = None
    hostname: Optional[str] = None
    id: Optional[str] = None
    package: Optional[str] = None

    properties: Tuple[Property, ...] = ()
    system_out: Optional[str] = None
    system_err: Optional[str] = None

    testcases: Tuple[TestCase, ...] = ()

    @property
    def counts(self) -> SuiteCounts:
        skipped = self.skipped or 0
        disabled = self.disabled or 0
        failed = (self.failures or 0) + (self.errors or 0)
        return SuiteCounts(
            skipped=skipped,
            disabled=disabled,
            failed=failed,
            successful=self.tests - failed - disabled - skipped,
            total=self.tests,
        )

    def unsuccessful_cases(self) -> Iterator[TestCase]:
        """Yield test cases with an error, failure or skip, in declaration order."""
        for tc in self.testcases:
            if not tc.outcome.is_success:
                yield tc


class DocumentKind(str, Enum):
    SINGULAR = "singular"
    AGGREGATED = "aggregated"


@dataclass(frozen=True)
class Document:
    """A parsed report: one suite, or several suites bundled together."""

    kind: DocumentKind
    suites: Tuple[Suite, ...]
    duration: Optional[str] = None

    @classmethod
    def singular(cls, suite: Suite) -> "Document":
        return cls(kind=DocumentKind.SINGULAR, suites=(suite,))

    @classmethod
    def aggregated(cls, suites: Iterable[Suite], *, duration: Optional[str] = None) -> "Document":
        return cls(kind=DocumentKind.AGGREGATED, suites=tuple(suites), duration=duration)

    @property
    def is_aggregated(self) -> bool:
        return self.kind is DocumentKind.AGGREGATED


def percent_of(count: int, total: int) -> int:
    """Integer percentage of ``count`` in ``total``, truncated toward zero.

    A suite declaring zero tests yields 0 for every row instead of dividing
    by zero.
    """

    if total == 0:
        return 0
    q = abs(count) * 100 // abs(total)
    return -q if (count < 0) != (total < 0) else q
