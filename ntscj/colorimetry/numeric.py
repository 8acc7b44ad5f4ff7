# Copyright (c) 2026 ntscj
# SPDX-License-Identifier: MIT

"""Clamping and the XYZ distance metric."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def clamp_unit(values: NDArray[np.floating]) -> NDArray[np.floating]:
    """Clip to [0, 1], keeping the input's floating point type."""
    values = np.asarray(values)
    return np.clip(values, 0.0, 1.0).astype(values.dtype, copy=False)


def distance(a: NDArray[np.floating], b: NDArray[np.floating]) -> float:
    """
    Euclidean distance between two XYZ colors.

    Only meaningful for outputs of the RGB → XYZ stage. Arithmetic stays
    in the operands' precision; the result is a Python float.

    Args:
        a: Array of shape (3,)
        b: Array of shape (3,)
    """
    return float(distance_batch(a, b))


def distance_batch(
    a: NDArray[np.floating],
    b: NDArray[np.floating],
) -> NDArray[np.floating]:
    """
    Vectorized distance for arrays of XYZ colors.

    Args:
        a: Array of shape (..., 3)
        b: Array broadcastable against ``a``

    Returns:
        Array of shape (...,) with distances
    """
    delta = np.asarray(a) - np.asarray(b)
    return np.sqrt(np.sum(delta * delta, axis=-1))
