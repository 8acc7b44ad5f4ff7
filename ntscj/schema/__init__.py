# Copyright (c) 2026 ntscj
# SPDX-License-Identifier: MIT

"""
Schema definitions for the inverse search.

All types in this module are immutable (frozen dataclasses).
"""

from ntscj.schema.color import (
    CHANNEL_MAX,
    CHANNEL_MIN,
    Offset,
    QuantizedColor,
    SearchResult,
    SearchStep,
)

__all__ = [
    # Channel bounds
    "CHANNEL_MIN",
    "CHANNEL_MAX",
    # Core types
    "QuantizedColor",
    "Offset",
    # Search records
    "SearchStep",
    "SearchResult",
]
