# Copyright (c) 2026 ntscj
# SPDX-License-Identifier: MIT

"""
One-call inverse: sRGB target → best NTSC-J input.

This is the primary entry point for callers that do not need to hold on
to the goal between searches.
"""

from __future__ import annotations

from typing import Optional

from ntscj.colorimetry import DEFAULT_MATRICES, ConversionMatrices
from ntscj.schema import QuantizedColor, SearchResult
from ntscj.optimize.optimizer import (
    SearchConfig,
    compute_goal,
    initial_guess,
    search,
)


def invert(
    target: QuantizedColor,
    *,
    config: Optional[SearchConfig] = None,
    matrices: ConversionMatrices = DEFAULT_MATRICES,
) -> SearchResult:
    """
    Find the NTSC-J code that displays closest to ``target``.

    Args:
        target: sRGB color the viewer should see
        config: Search settings (uses defaults if None)
        matrices: Conversion matrices and working precision

    Returns:
        SearchResult for the converged (or bounded) search

    Example:
        >>> from ntscj import QuantizedColor, invert
        >>> result = invert(QuantizedColor.from_hex("0x9261F8"))
        >>> result.error <= result.initial_error
        True
    """
    goal = compute_goal(target, matrices)
    return search(goal, initial_guess(target, matrices), config=config, matrices=matrices)
