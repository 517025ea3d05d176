"""junit2md.io.junit_xml

Read JUnit XML documents into :mod:`junit2md.domain` objects.

Two document shapes exist in the wild:

* a singular ``<testsuite>`` root, as written per test class by Maven Surefire
  and Gradle (``TEST-org.example.FooTest.xml``)
* an aggregated ``<testsuites>`` root bundling many suites, as produced by CI
  servers and most non-Java runners

Callers should not have to know which one they hold, so
:func:`classify_document` tries both in a fixed order:

1. aggregated, if it yields at least one suite
2. singular
3. give up, quoting the structural diagnostic

Each attempt returns a :class:`_Parsed` value instead of raising, so the
fallback order is visible in one place. Only the public convenience
:func:`load_document` raises (:class:`JunitParseError`).

Validation is structural only: required attributes must be present and
counts must be integers. Unknown elements and attributes are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Generic, List, Optional, Tuple, TypeVar, Union
from xml.etree.ElementTree import Element

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError, fromstring

from junit2md.domain.report import (
    Document,
    NegativeResult,
    Property,
    ResultKind,
    Suite,
    TestCase,
)

logger = logging.getLogger(__name__)

_T = TypeVar("_T")

_COUNT_ATTRS = ("failures", "errors", "disabled", "skipped")


class JunitParseError(ValueError):
    """The document matches neither the singular nor the aggregated shape."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Couldn't parse JUnit XML: {detail}")
        self.detail = detail


class ClassificationKind(str, Enum):
    AGGREGATED = "aggregated"
    SINGULAR = "singular"
    UNPARSABLE = "unparsable"


@dataclass(frozen=True)
class Classification:
    """Result of :func:`classify_document`.

    ``document`` is set for the two parsable kinds, ``error`` for
    :attr:`ClassificationKind.UNPARSABLE`.
    """

    kind: ClassificationKind
    document: Optional[Document] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.document is not None


@dataclass(frozen=True)
class _Parsed(Generic[_T]):
    value: Optional[_T] = None
    error: Optional[str] = None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def classify_document(text: Union[str, bytes]) -> Classification:
    """Interpret ``text`` as an aggregated or a singular JUnit document."""

    root = _parse_xml(text)
    if root.value is None:
        return Classification(ClassificationKind.UNPARSABLE, error=root.error)

    aggregated = _read_aggregated(root.value)
    if aggregated.value is not None and aggregated.value.suites:
        return Classification(ClassificationKind.AGGREGATED, document=aggregated.value)
    if aggregated.error:
        logger.debug("Not an aggregated JUnit document: %s", aggregated.error)
    else:
        logger.debug("Aggregated JUnit document has no suites, trying singular")

    singular = _read_suite(root.value, expect_root=True)
    if singular.value is not None:
        return Classification(ClassificationKind.SINGULAR, document=Document.singular(singular.value))

    # For a <testsuites> root the aggregated diagnostic is the useful one.
    if aggregated.error and _local_name(root.value.tag) == "testsuites":
        return Classification(ClassificationKind.UNPARSABLE, error=aggregated.error)
    return Classification(ClassificationKind.UNPARSABLE, error=singular.error)


def load_document(text: Union[str, bytes]) -> Document:
    """Like :func:`classify_document`, but raise on unparsable input."""

    result = classify_document(text)
    if result.document is None:
        raise JunitParseError(result.error or "unknown error")
    return result.document


def load_singular_suite(text: Union[str, bytes]) -> Suite:
    """Parse ``text`` strictly as a singular ``<testsuite>`` document.

    Used when several files are combined into one aggregated report: every
    file is expected to describe exactly one suite.
    """

    root = _parse_xml(text)
    if root.value is None:
        raise JunitParseError(root.error or "unknown error")

    suite = _read_suite(root.value, expect_root=True)
    if suite.value is None:
        raise JunitParseError(suite.error or "unknown error")
    return suite.value


# ---------------------------------------------------------------------------
# Parse attempts
# ---------------------------------------------------------------------------


def _parse_xml(text: Union[str, bytes]) -> _Parsed[Element]:
    try:
        return _Parsed(value=fromstring(text))
    except ParseError as e:
        return _Parsed(error=f"malformed XML: {e}")
    except DefusedXmlException as e:
        return _Parsed(error=f"forbidden XML construct: {e}")


def _read_aggregated(root: Element) -> _Parsed[Document]:
    tag = _local_name(root.tag)
    if tag != "testsuites":
        return _Parsed(error=f"expected root element <testsuites>, found <{tag}>")

    suites: List[Suite] = []
    for child in root:
        if _local_name(child.tag) != "testsuite":
            continue
        suite = _read_suite(child)
        if suite.value is None:
            return _Parsed(error=suite.error)
        suites.append(suite.value)

    duration = _attr(root, "duration") or _attr(root, "time")
    return _Parsed(value=Document.aggregated(suites, duration=duration))


def _read_suite(elem: Element, *, expect_root: bool = False) -> _Parsed[Suite]:
    tag = _local_name(elem.tag)
    if expect_root and tag != "testsuite":
        return _Parsed(error=f"expected root element <testsuite>, found <{tag}>")

    name = _attr(elem, "name", keep_empty=True)
    if name is None:
        return _Parsed(error="<testsuite>: missing attribute 'name'")
    where = f"<testsuite name={name!r}>"

    tests_raw = _attr(elem, "tests", keep_empty=True)
    if tests_raw is None:
        return _Parsed(error=f"{where}: missing attribute 'tests'")
    tests = _parse_count(tests_raw)
    if tests is None:
        return _Parsed(error=f"{where}: attribute 'tests' is not a non-negative integer: {tests_raw!r}")

    counts = {}
    for key in _COUNT_ATTRS:
        raw = _attr(elem, key)
        if raw is None:
            counts[key] = None
            continue
        value = _parse_count(raw)
        if value is None:
            return _Parsed(error=f"{where}: attribute {key!r} is not a non-negative integer: {raw!r}")
        counts[key] = value

    properties: List[Property] = []
    cases: List[TestCase] = []
    for child in elem:
        child_tag = _local_name(child.tag)
        if child_tag == "properties":
            props = _read_properties(child, where=where)
            if props.value is None:
                return _Parsed(error=props.error)
            properties.extend(props.value)
        elif child_tag == "testcase":
            case = _read_testcase(child, where=where)
            if case.value is None:
                return _Parsed(error=case.error)
            cases.append(case.value)

    return _Parsed(
        value=Suite(
            name=name,
            tests=tests,
            failures=counts["failures"],
            errors=counts["errors"],
            disabled=counts["disabled"],
            skipped=counts["skipped"],
            time=_attr(elem, "time"),
            timestamp=_attr(elem, "timestamp"),
            hostname=_attr(elem, "hostname"),
            id=_attr(elem, "id"),
            package=_attr(elem, "package"),
            properties=tuple(properties),
            system_out=_child_text(elem, "system-out"),
            system_err=_child_text(elem, "system-err"),
            testcases=tuple(cases),
        )
    )


def _read_properties(elem: Element, *, where: str) -> _Parsed[Tuple[Property, ...]]:
    out: List[Property] = []
    for child in elem:
        if _local_name(child.tag) != "property":
            continue
        name = _attr(child, "name", keep_empty=True)
        value = _attr(child, "value", keep_empty=True)
        if name is None:
            return _Parsed(error=f"{where}: <property> is missing attribute 'name'")
        if value is None:
            # Some producers put the value in the element text instead.
            value = _text(child)
        if value is None:
            return _Parsed(error=f"{where}: <property name={name!r}> is missing attribute 'value'")
        out.append(Property(name=name, value=value))
    return _Parsed(value=tuple(out))


def _read_testcase(elem: Element, *, where: str) -> _Parsed[TestCase]:
    name = _attr(elem, "name", keep_empty=True)
    if name is None:
        return _Parsed(error=f"{where}: <testcase> is missing attribute 'name'")

    errors: List[NegativeResult] = []
    failures: List[NegativeResult] = []
    skipped: Optional[NegativeResult] = None
    for child in elem:
        child_tag = _local_name(child.tag)
        if child_tag == "error":
            errors.append(_read_negative(child, ResultKind.ERROR))
        elif child_tag == "failure":
            failures.append(_read_negative(child, ResultKind.FAILURE))
        elif child_tag == "skipped" and skipped is None:
            skipped = _read_negative(child, ResultKind.SKIPPED)

    return _Parsed(
        value=TestCase(
            name=name,
            classname=_attr(elem, "classname"),
            time=_attr(elem, "time"),
            assertions=_attr(elem, "assertions"),
            status=_attr(elem, "status"),
            system_out=_child_text(elem, "system-out"),
            system_err=_child_text(elem, "system-err"),
            errors=tuple(errors),
            failures=tuple(failures),
            skipped=skipped,
        )
    )


def _read_negative(elem: Element, kind: ResultKind) -> NegativeResult:
    return NegativeResult(
        kind=kind,
        message=_attr(elem, "message"),
        type=_attr(elem, "type"),
        body=_text(elem),
    )


# ---------------------------------------------------------------------------
# Element helpers
# ---------------------------------------------------------------------------


def _local_name(tag: object) -> str:
    """Drop an ``{namespace}`` prefix, if any."""
    s = str(tag)
    if s.startswith("{"):
        return s.split("}", 1)[1]
    return s


def _attr(elem: Element, key: str, *, keep_empty: bool = False) -> Optional[str]:
    v = elem.get(key)
    if v is None:
        return None
    if not keep_empty and not v.strip():
        return None
    return v


def _parse_count(raw: str) -> Optional[int]:
    try:
        n = int(raw.strip())
    except ValueError:
        return None
    return n if n >= 0 else None


def _text(elem: Element) -> Optional[str]:
    s = "".join(elem.itertext())
    return s if s.strip() else None


def _child_text(elem: Element, tag: str) -> Optional[str]:
    for child in elem:
        if _local_name(child.tag) == tag:
            return _text(child)
    return None
