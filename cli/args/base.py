from __future__ import annotations

import argparse

from junit2md import __version__


def add_base_args(parser: argparse.ArgumentParser, *, verbose_default: bool = False) -> None:
    """Register the converter's CLI flags.

    This includes:
    - input documents (one or more JUnit XML files)
    - verbosity of the rendered report
    - output destination
    """

    parser.add_argument(
        "inputs",
        metavar="INPUT",
        nargs="+",
        help=(
            "Input JUnit XML to generate Markdown from. With several inputs, each file must hold "
            "a single <testsuite> and the result is one aggregated report."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=verbose_default,
        help="Verbose output (hostnames, properties, standard streams). Default: $JUNIT2MD_VERBOSE.",
    )
    parser.add_argument(
        "-o",
        "--out",
        default=None,
        help="Write Markdown to this file instead of stdout.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
