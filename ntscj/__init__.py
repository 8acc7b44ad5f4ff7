# Copyright (c) 2026 ntscj
# SPDX-License-Identifier: MIT

"""
ntscj -- Find the NTSC-J input color that displays as a given sRGB color.

Colors authored for NTSC-J sets (9300K white) shift when shown through an
sRGB (D65) pipeline. ntscj runs that conversion forward and hill-climbs
over 8-bit inputs until the displayed color is as close as it gets to the
one you asked for.

Quick start::

    from ntscj import QuantizedColor, invert

    result = invert(QuantizedColor.from_hex("0x9261F8"))
    result.color.hex   # NTSC-J input to use
    result.error       # Remaining XYZ distance
"""

from __future__ import annotations

__version__ = "1.0.0"

from ntscj.colorimetry import (
    DEFAULT_MATRICES,
    ConversionMatrices,
    forward_transform,
    to_goal,
)
from ntscj.schema import QuantizedColor, SearchResult, SearchStep
from ntscj.optimize import (
    SearchConfig,
    compute_goal,
    initial_guess,
    invert,
    search,
)

__all__ = [
    # Core API
    "invert",
    "compute_goal",
    "initial_guess",
    "search",
    "SearchConfig",
    # Pipeline
    "forward_transform",
    "to_goal",
    "ConversionMatrices",
    "DEFAULT_MATRICES",
    # Types
    "QuantizedColor",
    "SearchResult",
    "SearchStep",
    # Version
    "__version__",
]
