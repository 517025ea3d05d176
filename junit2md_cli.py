#!/usr/bin/env python3
"""
Generate a Markdown summary from JUnit XML test reports.

Usage:
  python junit2md_cli.py build/test-results/TEST-org.example.FooTest.xml
  python junit2md_cli.py -v reports/junit.xml > summary.md
  python junit2md_cli.py build/test-results/TEST-*.xml --out summary.md

A single input may be either a <testsuite> or a <testsuites> document.
Several inputs must each hold one <testsuite>; they are combined into one
aggregated report, and files that fail to parse are skipped.
"""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from cli.args.base import add_base_args
from cli.commands.convert import run_convert
from junit2md.wiring import ENV_VERBOSE, configure_logging, env_flag, load_dotenv_if_present


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="junit2md",
        description="Generates Markdown text from JUnit XML report",
    )
    add_base_args(parser, verbose_default=env_flag(ENV_VERBOSE))
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Load .env before reading defaults so terminal runs behave like CI runs
    load_dotenv_if_present()
    configure_logging()

    args = parse_args(argv)
    return run_convert(args)


if __name__ == "__main__":
    raise SystemExit(main())
