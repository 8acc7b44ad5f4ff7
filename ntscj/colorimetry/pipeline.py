# Copyright (c) 2026 ntscj
# SPDX-License-Identifier: MIT

"""
Forward colorimetry pipeline.

Candidate chain: RGB8 → unit → linear → gamut adapted → XYZ
Goal chain:      RGB8 → unit → linear → XYZ

Every stage that produces floats clamps to [0, 1]. All functions are pure
and accept either a single color or a batch of shape (..., 3).
"""

from __future__ import annotations

from typing import Union

import numpy as np
from numpy.typing import DTypeLike, NDArray

from ntscj.colorimetry.matrices import DEFAULT_MATRICES, ConversionMatrices
from ntscj.colorimetry.numeric import clamp_unit
from ntscj.schema import QuantizedColor

QuantizedLike = Union[QuantizedColor, NDArray[np.integer]]


# =============================================================================
# RGB8 ↔ Unit
# =============================================================================


def quantized_to_unit(
    color: QuantizedLike,
    dtype: DTypeLike = np.float32,
) -> NDArray[np.floating]:
    """
    Convert 8-bit channels to [0, 1] by dividing by 255.

    Args:
        color: QuantizedColor or integer array of shape (..., 3)
        dtype: Floating point type of the result

    Returns:
        Array of shape (..., 3)
    """
    if isinstance(color, QuantizedColor):
        values = color.to_array()
    else:
        values = np.asarray(color)
    return (values.astype(np.float64) / 255.0).astype(dtype)


def unit_to_quantized(unit: NDArray[np.floating]) -> QuantizedColor:
    """
    Convert a [0, 1] color to 8 bits by scaling by 255 and truncating.

    Truncation (not rounding) means a value that lands a hair below an
    integer after scaling drops to the code below it.
    """
    unit = np.asarray(unit)
    if unit.shape != (3,):
        raise ValueError(f"Expected shape (3,), got {unit.shape}")
    r, g, b = np.trunc(unit.astype(np.float64) * 255.0).astype(np.int64)
    return QuantizedColor(int(r), int(g), int(b))


# =============================================================================
# Transfer Function and Linear Stages
# =============================================================================


def decode_gamma(unit: NDArray[np.floating]) -> NDArray[np.floating]:
    """
    sRGB inverse transfer function (gamma-encoded → linear light).

    - For values <= 0.04045: value / 12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4

    Evaluated in double precision, clamped to [0, 1], then returned in the
    input's floating point type.
    """
    unit = np.asarray(unit)
    out_dtype = unit.dtype if np.issubdtype(unit.dtype, np.floating) else np.float64
    x = unit.astype(np.float64)
    # Negative inputs would make the power NaN; they take the linear branch
    linear = np.where(
        x <= 0.04045,
        x / 12.92,
        np.power((np.maximum(x, 0.04045) + 0.055) / 1.055, 2.4),
    )
    return clamp_unit(linear).astype(out_dtype)


def apply_matrix(
    matrix: NDArray[np.floating],
    unit: NDArray[np.floating],
) -> NDArray[np.floating]:
    """
    Multiply each color by a 3x3 matrix, then clamp to [0, 1].

    The matrix is cast to the color's floating point type, so a float32
    color is transformed entirely in float32.

    Args:
        matrix: Array of shape (3, 3), applied as ``matrix @ color``
        unit: Array of shape (..., 3)

    Returns:
        Array of shape (..., 3)
    """
    unit = np.asarray(unit)
    if not np.issubdtype(unit.dtype, np.floating):
        unit = unit.astype(np.float64)
    m = np.asarray(matrix, dtype=unit.dtype)
    # Row-wise multiply-and-sum keeps the r, g, b summation order
    out = np.sum(unit[..., np.newaxis, :] * m, axis=-1)
    return clamp_unit(out)


# =============================================================================
# Composed Pipelines
# =============================================================================


def forward_transform(
    color: QuantizedLike,
    matrices: ConversionMatrices = DEFAULT_MATRICES,
) -> NDArray[np.floating]:
    """
    Candidate chain: NTSC-J RGB8 → XYZ as displayed after gamut adaptation.

    Args:
        color: QuantizedColor or integer array of shape (..., 3)
        matrices: Conversion matrices and working precision

    Returns:
        XYZ array of shape (..., 3)
    """
    linear = decode_gamma(quantized_to_unit(color, matrices.dtype))
    adapted = apply_matrix(matrices.gamut_adapt, linear)
    return apply_matrix(matrices.rgb_to_xyz, adapted)


def to_goal(
    color: QuantizedLike,
    matrices: ConversionMatrices = DEFAULT_MATRICES,
) -> NDArray[np.floating]:
    """
    Goal chain: sRGB RGB8 → XYZ, with no gamut adaptation.

    This is what the viewer should end up seeing, so it goes straight to
    XYZ for comparison against candidates.
    """
    linear = decode_gamma(quantized_to_unit(color, matrices.dtype))
    return apply_matrix(matrices.rgb_to_xyz, linear)
