# Copyright (c) 2026 ntscj
# SPDX-License-Identifier: MIT

"""
Command-line driver.

    $ ntscjguess 0x9261F8
    To achieve sRGB output of 0x9261F8 use NTSC-J input of 0x...

Exit codes:
    0  success
    1  wrong number of arguments or unknown option
    2  malformed color literal
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import NoReturn, Optional, Sequence

from ntscj.colorimetry import ConversionMatrices
from ntscj.schema import QuantizedColor, SearchResult
from ntscj.optimize import SearchConfig, invert

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_BAD_COLOR = 2

DESCRIPTION = (
    "Find the NTSC-J input color that displays as a given sRGB color once it\n"
    "is converted from the NTSC-J gamut to the sRGB gamut (using the sRGB\n"
    "gamma function in both directions)."
)

EPILOG = (
    "Saturated primaries such as 0xFF0000 clip to the edge of both gamuts, so\n"
    "many inputs display identically and the default tie rule can walk a loop\n"
    "on that plateau forever. Use --strict or --max-iterations N for them."
)

COLOR_HELP = (
    'sRGB pixel you want to get as output, written as "0xRRGGBB" or "RRGGBB" '
    "(exactly six hex digits)"
)

_HEX_RE = re.compile(r"(?:0[xX])?([0-9A-Fa-f]{6})")


class UsageError(Exception):
    """Raised by the parser instead of exiting the interpreter."""


class GuessArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors to the caller."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def parse_hex_color(text: str) -> QuantizedColor:
    """
    Parse a color literal.

    Accepts exactly six hex digits, optionally prefixed with "0x" or "0X".
    Anything else (wrong length, sign, whitespace, trailing characters)
    raises ValueError.
    """
    m = _HEX_RE.fullmatch(text)
    if m is None:
        raise ValueError(f"invalid color literal: {text!r} (expected 0xRRGGBB)")
    return QuantizedColor.from_int(int(m.group(1), 16))


def format_result(target: QuantizedColor, result: SearchResult) -> str:
    """Human-readable one-line answer."""
    c = result.color
    return (
        f"To achieve sRGB output of {target.hex} use NTSC-J input of {c.hex} "
        f"(red: {c.r}, green: {c.g}, blue: {c.b}, error {result.error:f})."
    )


def build_parser() -> GuessArgumentParser:
    parser = GuessArgumentParser(
        prog="ntscjguess",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("color", help=COLOR_HELP)
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full search result as JSON",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Only accept strictly better neighbors (default also accepts "
             "ties, which can cycle forever on saturated primaries)",
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        default=None,
        metavar="N",
        help="Stop after N iterations even if not converged (default: unbounded)",
    )
    parser.add_argument(
        "--precision",
        choices=("float32", "float64"),
        default="float32",
        help="Working precision of the color pipeline (default: float32)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log search progress (-v: summary, -vv: every iteration)",
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the driver; returns the process exit code."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        target = parse_hex_color(args.color)
    except ValueError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        print(DESCRIPTION, file=sys.stderr)
        return EXIT_BAD_COLOR

    try:
        config = SearchConfig(strict=args.strict, max_iterations=args.max_iterations)
    except ValueError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return EXIT_USAGE

    _configure_logging(args.verbose)
    matrices = ConversionMatrices.with_precision(args.precision)

    result = invert(target, config=config, matrices=matrices)

    if args.json:
        print(result.to_json())
    else:
        print(format_result(target, result))
    return EXIT_OK
