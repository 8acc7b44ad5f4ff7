# Copyright (c) 2026 ntscj
# SPDX-License-Identifier: MIT

"""
Value types for the NTSC-J inverse search.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same target → same result
- Serializable: JSON-ready via to_dict / to_json

QuantizedColor is the only color type that crosses the package boundary.
Floating-point (unit) colors are plain NumPy arrays of shape (..., 3) and
live only inside the colorimetry pipeline.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Optional

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# Quantized (8-bit) Color
# =============================================================================

CHANNEL_MIN = 0
CHANNEL_MAX = 255

_HEX_DIGITS_RE = re.compile(r"[0-9A-Fa-f]{6}")


def _check_channel(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful channel value
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if not CHANNEL_MIN <= value <= CHANNEL_MAX:
        raise ValueError(f"{name} must be 0-255, got {value}")


@dataclass(frozen=True, slots=True)
class QuantizedColor:
    """
    An 8-bit RGB color.

    Used both for the sRGB target the caller wants to see and for the
    NTSC-J input the search proposes. Which gamut the channels refer to
    depends on context; the type carries no tag.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate channels are integers within [0, 255]."""
        _check_channel("r", self.r)
        _check_channel("g", self.g)
        _check_channel("b", self.b)
        # Normalize NumPy integers so equality and hashing stay plain
        object.__setattr__(self, "r", int(self.r))
        object.__setattr__(self, "g", int(self.g))
        object.__setattr__(self, "b", int(self.b))

    @classmethod
    def from_int(cls, value: int) -> QuantizedColor:
        """Build from a packed 0xRRGGBB integer."""
        if not 0 <= value <= 0xFFFFFF:
            raise ValueError(f"Packed color must be 0x000000-0xFFFFFF, got {value:#x}")
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def from_hex(cls, hex_color: str) -> QuantizedColor:
        """
        Build from a hex string.

        Lenient form for programmatic use: accepts "#RRGGBB", "0xRRGGBB"
        or "RRGGBB". The command line uses the stricter
        ``ntscj.runtime.cli.parse_hex_color``.
        """
        text = hex_color.strip()
        if text[:2].lower() == "0x":
            text = text[2:]
        elif text.startswith("#"):
            text = text[1:]
        if _HEX_DIGITS_RE.fullmatch(text) is None:
            raise ValueError(f"Expected 6 hex digits, got {hex_color!r}")
        return cls.from_int(int(text, 16))

    def to_int(self) -> int:
        """Packed 0xRRGGBB integer."""
        return (self.r << 16) | (self.g << 8) | self.b

    @property
    def hex(self) -> str:
        """Hex string like "0x9261F8"."""
        return f"0x{self.r:02X}{self.g:02X}{self.b:02X}"

    def to_array(self) -> NDArray[np.int64]:
        """Channels as an int array of shape (3,)."""
        return np.array([self.r, self.g, self.b], dtype=np.int64)

    def offset(self, dr: int, dg: int, db: int) -> Optional[QuantizedColor]:
        """
        Neighbor displaced by (dr, dg, db).

        Returns None if any channel would leave [0, 255]. Out-of-range
        neighbors are rejected, never clamped.
        """
        r, g, b = self.r + dr, self.g + dg, self.b + db
        for value in (r, g, b):
            if not CHANNEL_MIN <= value <= CHANNEL_MAX:
                return None
        return QuantizedColor(r, g, b)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b, "hex": self.hex}

    @classmethod
    def from_dict(cls, data: dict) -> QuantizedColor:
        """Deserialize from dictionary."""
        return cls(r=data["r"], g=data["g"], b=data["b"])


Offset = tuple[int, int, int]


# =============================================================================
# Search Records
# =============================================================================


@dataclass(frozen=True, slots=True)
class SearchStep:
    """
    One iteration of the hill climb.

    Attributes:
        iteration: 1-based iteration number
        start: Best color at the start of the iteration (all offsets are
            applied to this point)
        excluded: Offset skipped because it would undo the previous move
        evaluated: In-range candidates that were run through the forward
            transform, in evaluation order
        best: Best color at the end of the iteration
        error: Error of ``best``
        accepted: True if any candidate was accepted this iteration
    """
    iteration: int
    start: QuantizedColor
    excluded: Offset
    evaluated: tuple[QuantizedColor, ...]
    best: QuantizedColor
    error: float
    accepted: bool

    def to_dict(self) -> dict:
        """Serialize to dictionary (evaluated candidates as hex strings)."""
        return {
            "iteration": self.iteration,
            "start": self.start.hex,
            "excluded": list(self.excluded),
            "evaluated": [c.hex for c in self.evaluated],
            "best": self.best.hex,
            "error": self.error,
            "accepted": self.accepted,
        }


@dataclass(frozen=True, slots=True)
class SearchResult:
    """
    Outcome of one search.

    Attributes:
        color: Best NTSC-J input found
        error: XYZ distance between forward_transform(color) and the goal
        initial: Starting guess
        initial_error: Error of the starting guess
        iterations: Number of iterations run (including the final one that
            found nothing better)
        converged: False only if the iteration bound stopped the search
        history: Per-iteration records, empty unless requested
    """
    color: QuantizedColor
    error: float
    initial: QuantizedColor
    initial_error: float
    iterations: int
    converged: bool = True
    history: tuple[SearchStep, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.error < 0.0:
            raise ValueError(f"Error must be >= 0, got {self.error}")
        if self.iterations < 0:
            raise ValueError(f"Iterations must be >= 0, got {self.iterations}")

    @property
    def improvement(self) -> float:
        """How much the search reduced the identity guess error."""
        return self.initial_error - self.error

    def to_dict(self, include_history: bool = False) -> dict:
        """
        Serialize to dictionary.

        Args:
            include_history: If True, include per-iteration records
        """
        d = {
            "color": self.color.to_dict(),
            "error": self.error,
            "initial": self.initial.to_dict(),
            "initial_error": self.initial_error,
            "iterations": self.iterations,
            "converged": self.converged,
        }
        if include_history:
            d["history"] = [step.to_dict() for step in self.history]
        return d

    def to_json(self, indent: Optional[int] = 2, include_history: bool = False) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(include_history=include_history), indent=indent)
