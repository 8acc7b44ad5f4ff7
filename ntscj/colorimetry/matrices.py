# Copyright (c) 2026 ntscj
# SPDX-License-Identifier: MIT

"""
Fixed conversion matrices.

NTSC-J → sRGB gamut adaptation was precomputed with the Bradford method,
taking the NTSC-J white point as 9300K+27mpcd (x=0.281, y=0.311), the
white point of NTSC-J television sets, and D65 as x=0.312713, y=0.329016.
NTSC-J broadcasts used 9300K+8mpcd (x=0.2838, y=0.2981) instead; neither
matches CIE 9300K exactly.

RGB → XYZ assumes sRGB primaries and a D65 white.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import DTypeLike, NDArray


def _frozen(rows: list[list[float]]) -> NDArray[np.float64]:
    m = np.array(rows, dtype=np.float64)
    m.flags.writeable = False
    return m


# NTSC-J (9300K+27mpcd) → sRGB (D65), linear light
NTSCJ_TO_SRGB = _frozen([
    [1.34756301456925, -0.276463760747096, -0.071099263267176],
    [-0.031150036968175, 0.956512223260545, 0.074637860817515],
    [-0.024443490594835, -0.048150182045316, 1.07259361295816],
])

# Linear sRGB → CIE XYZ
SRGB_TO_XYZ = _frozen([
    [0.412410846488539, 0.357584567852952, 0.180453803933608],
    [0.212649342720653, 0.715169135705904, 0.072181521573443],
    [0.01933175842915, 0.119194855950984, 0.950390034050337],
])


@dataclass(frozen=True, eq=False)
class ConversionMatrices:
    """
    Matrices and working precision for one pipeline.

    Passed explicitly to every pipeline function so alternate matrices can
    be swapped in for testing without touching module state.

    Attributes:
        gamut_adapt: 3x3 linear-light gamut adaptation (candidate side only)
        rgb_to_xyz: 3x3 linear RGB → XYZ
        dtype: Floating point type used between stages. float32 (default)
            keeps every stage in single precision; float64 gives a
            smoother error surface.
    """
    gamut_adapt: NDArray[np.float64] = field(default_factory=lambda: NTSCJ_TO_SRGB)
    rgb_to_xyz: NDArray[np.float64] = field(default_factory=lambda: SRGB_TO_XYZ)
    dtype: DTypeLike = np.float32

    def __post_init__(self) -> None:
        """Validate shapes and dtype; store read-only float64 copies."""
        for name in ("gamut_adapt", "rgb_to_xyz"):
            m = np.array(getattr(self, name), dtype=np.float64)
            if m.shape != (3, 3):
                raise ValueError(f"{name} must be 3x3, got shape {m.shape}")
            m.flags.writeable = False
            object.__setattr__(self, name, m)
        dtype = np.dtype(self.dtype)
        if not np.issubdtype(dtype, np.floating):
            raise ValueError(f"dtype must be a floating point type, got {dtype}")
        object.__setattr__(self, "dtype", dtype)

    @classmethod
    def with_precision(cls, precision: str) -> ConversionMatrices:
        """Default matrices at "float32" or "float64" precision."""
        if precision not in ("float32", "float64"):
            raise ValueError(f"precision must be float32 or float64, got {precision!r}")
        return cls(dtype=np.dtype(precision))


DEFAULT_MATRICES = ConversionMatrices()
