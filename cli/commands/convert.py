from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from cli.common import as_paths, describe_os_error
from junit2md.domain.report import Document, Suite
from junit2md.io.fs import read_bytes, write_markdown
from junit2md.io.junit_xml import JunitParseError, classify_document, load_singular_suite
from junit2md.render.report_md import render_report
from junit2md.wiring import build_render_options

logger = logging.getLogger(__name__)


def load_single_input(path: Path) -> Optional[Document]:
    """Read and classify one document. Failures are fatal for the run."""

    try:
        data = read_bytes(path)
    except OSError as e:
        logger.error("Can't read JUnit file %s: %s", str(path), describe_os_error(e))
        return None

    result = classify_document(data)
    if result.document is None:
        logger.error("Couldn't parse JUnit XML %s: %s", str(path), result.error)
        return None

    logger.debug("Parsed %s as %s document", str(path), result.kind.value)
    return result.document


def load_multiple_inputs(paths: Sequence[Path]) -> Document:
    """Combine several singular documents into one aggregated document.

    Files that cannot be read or parsed are skipped with a warning; the
    result may hold no suites at all.
    """

    suites: List[Suite] = []
    for path in paths:
        try:
            data = read_bytes(path)
        except OSError as e:
            logger.warning("Skipping %s: can't read file: %s", str(path), describe_os_error(e))
            continue

        try:
            suites.append(load_singular_suite(data))
        except JunitParseError as e:
            logger.warning("Skipping %s: %s", str(path), e)
            continue

    if not suites:
        logger.warning("None of the %d input files could be parsed", len(paths))
    return Document.aggregated(suites)


def run_convert(args: argparse.Namespace) -> int:
    paths = as_paths(args.inputs)
    if not paths:
        logger.error("No input files given")
        return 1

    options = build_render_options(verbose=args.verbose)

    if len(paths) == 1:
        document = load_single_input(paths[0])
        if document is None:
            return 1
    else:
        document = load_multiple_inputs(paths)

    md = render_report(document, options)

    if args.out:
        try:
            out = write_markdown(Path(args.out), md)
        except OSError as e:
            logger.error("Can't write %s: %s", str(args.out), describe_os_error(e))
            return 1
        logger.info("Wrote %s", str(out))
    else:
        sys.stdout.write(md)
    return 0
