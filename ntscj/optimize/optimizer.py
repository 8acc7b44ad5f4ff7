# Copyright (c) 2026 ntscj
# SPDX-License-Identifier: MIT

"""
Discrete hill climbing over NTSC-J input codes.

Starting from a guess, each iteration tries every unit step in the 3x3x3
neighborhood of the current best (26 offsets, minus the one that would
undo the previous move) and keeps the last candidate whose error does not
exceed the best error so far. The search ends when an iteration accepts
nothing.

Every offset in an iteration is applied to the same starting point; only
the error threshold tightens as candidates are accepted.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from ntscj.colorimetry import (
    DEFAULT_MATRICES,
    ConversionMatrices,
    distance,
    distance_batch,
    forward_transform,
    quantized_to_unit,
    to_goal,
    unit_to_quantized,
)
from ntscj.schema import Offset, QuantizedColor, SearchResult, SearchStep

logger = logging.getLogger(__name__)

NO_MOVE: Offset = (0, 0, 0)


@dataclass(frozen=True)
class SearchConfig:
    """Configuration for the hill climb."""

    # Accept only strictly better candidates. The default (False) also
    # accepts ties, which can wander along an equal-error plateau.
    strict: bool = False

    # Stop after this many iterations even if not converged.
    # None = unbounded
    max_iterations: Optional[int] = None

    # Keep a SearchStep per iteration in SearchResult.history
    record_history: bool = False

    def __post_init__(self) -> None:
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {self.max_iterations}")


def neighbor_offsets(exclude: Offset = NO_MOVE) -> list[Offset]:
    """
    Unit offsets around a point, in evaluation order.

    Red varies slowest and blue fastest, each from -1 to 1. (0, 0, 0) is
    never included; ``exclude`` is dropped as well.
    """
    return [
        offset
        for offset in itertools.product((-1, 0, 1), repeat=3)
        if offset != NO_MOVE and offset != exclude
    ]


def compute_goal(
    target: QuantizedColor,
    matrices: ConversionMatrices = DEFAULT_MATRICES,
) -> NDArray[np.floating]:
    """
    XYZ goal for an sRGB target.

    The returned array is read-only; it is the fixed reference for one
    search.
    """
    goal = np.array(to_goal(target, matrices))
    goal.flags.writeable = False
    return goal


def initial_guess(
    target: QuantizedColor,
    matrices: ConversionMatrices = DEFAULT_MATRICES,
) -> QuantizedColor:
    """
    Identity starting point: the target code read back as an NTSC-J code.

    Without gamut distortion the answer would be the target itself, so
    the optimum is usually a few steps away.
    """
    return unit_to_quantized(quantized_to_unit(target, matrices.dtype))


def _accepts(error: float, best_error: float, strict: bool) -> bool:
    if strict:
        return error < best_error
    return error <= best_error


def _negate(offset: Offset) -> Offset:
    return (-offset[0], -offset[1], -offset[2])


def search(
    goal: NDArray[np.floating],
    guess: QuantizedColor,
    *,
    config: Optional[SearchConfig] = None,
    matrices: ConversionMatrices = DEFAULT_MATRICES,
) -> SearchResult:
    """
    Hill climb from ``guess`` to a local minimum of XYZ distance to ``goal``.

    Args:
        goal: XYZ goal from compute_goal (same matrices)
        guess: Starting NTSC-J code
        config: Search settings (uses defaults if None)
        matrices: Conversion matrices and working precision

    Returns:
        SearchResult with the best code and its error
    """
    cfg = config or SearchConfig()
    goal = np.asarray(goal)

    best = guess
    best_error = distance(forward_transform(best, matrices), goal)
    initial_error = best_error
    last_move = NO_MOVE

    history: list[SearchStep] = []
    iteration = 0
    converged = False

    logger.debug("[Search] Starting at %s (error %.6f)", best.hex, best_error)

    while True:
        if cfg.max_iterations is not None and iteration >= cfg.max_iterations:
            logger.warning(
                "[Search] Stopped after %d iterations without converging at %s (error %.6f)",
                iteration, best.hex, best_error,
            )
            break
        iteration += 1

        start = best
        excluded = last_move
        offsets: list[Offset] = []
        candidates: list[QuantizedColor] = []
        for offset in neighbor_offsets(exclude=excluded):
            candidate = start.offset(*offset)
            if candidate is None:
                continue
            offsets.append(offset)
            candidates.append(candidate)

        errors: list[float] = []
        if candidates:
            batch = np.stack([c.to_array() for c in candidates])
            errors = [float(e) for e in distance_batch(forward_transform(batch, matrices), goal)]

        move: Optional[Offset] = None
        for offset, candidate, error in zip(offsets, candidates, errors):
            if _accepts(error, best_error, cfg.strict):
                best, best_error = candidate, error
                move = _negate(offset)

        if cfg.record_history:
            history.append(SearchStep(
                iteration=iteration,
                start=start,
                excluded=excluded,
                evaluated=tuple(candidates),
                best=best,
                error=best_error,
                accepted=move is not None,
            ))

        if move is None:
            converged = True
            break

        logger.debug(
            "[Search] Iteration %d: %s -> %s (error %.6f)",
            iteration, start.hex, best.hex, best_error,
        )
        last_move = move

    if converged:
        logger.info(
            "[Search] Converged after %d iterations at %s (error %.6f)",
            iteration, best.hex, best_error,
        )

    return SearchResult(
        color=best,
        error=best_error,
        initial=guess,
        initial_error=initial_error,
        iterations=iteration,
        converged=converged,
        history=tuple(history),
    )
