# Copyright (c) 2026 ntscj
# SPDX-License-Identifier: MIT

"""
Local search for the NTSC-J input that best reproduces an sRGB target.

All operations are deterministic and single-threaded.
"""

from ntscj.optimize.inverse import invert
from ntscj.optimize.optimizer import (
    NO_MOVE,
    SearchConfig,
    compute_goal,
    initial_guess,
    neighbor_offsets,
    search,
)

__all__ = [
    "invert",
    "search",
    "compute_goal",
    "initial_guess",
    "neighbor_offsets",
    "SearchConfig",
    "NO_MOVE",
]
