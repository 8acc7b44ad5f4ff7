# Copyright (c) 2026 ntscj
# SPDX-License-Identifier: MIT

"""
Command-line runtime for ntscj.

Parses the user's color literal, runs the search and prints the answer.
Malformed input is reported as a usage error and never reaches the core.
"""

from ntscj.runtime.cli import (
    build_parser,
    format_result,
    main,
    parse_hex_color,
)

__all__ = [
    "main",
    "build_parser",
    "parse_hex_color",
    "format_result",
]
