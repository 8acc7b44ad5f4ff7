# Copyright (c) 2026 ntscj
# SPDX-License-Identifier: MIT

"""
Colorimetry pipeline for ntscj.

Pure, stateless conversions between 8-bit color, gamma-encoded and linear
unit color, and CIE XYZ, plus the distance metric the search minimizes.
"""

from ntscj.colorimetry.matrices import (
    DEFAULT_MATRICES,
    NTSCJ_TO_SRGB,
    SRGB_TO_XYZ,
    ConversionMatrices,
)
from ntscj.colorimetry.numeric import clamp_unit, distance, distance_batch
from ntscj.colorimetry.pipeline import (
    apply_matrix,
    decode_gamma,
    forward_transform,
    quantized_to_unit,
    to_goal,
    unit_to_quantized,
)

__all__ = [
    # Matrices
    "ConversionMatrices",
    "DEFAULT_MATRICES",
    "NTSCJ_TO_SRGB",
    "SRGB_TO_XYZ",
    # Stages
    "quantized_to_unit",
    "unit_to_quantized",
    "decode_gamma",
    "apply_matrix",
    "forward_transform",
    "to_goal",
    # Numeric primitives
    "clamp_unit",
    "distance",
    "distance_batch",
]
