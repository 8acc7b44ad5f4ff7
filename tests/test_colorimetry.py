# Copyright (c) 2026 ntscj
# SPDX-License-Identifier: MIT

"""Tests for the forward colorimetry pipeline (RGB8 → linear → XYZ)."""

import numpy as np
import pytest

from ntscj.colorimetry import (
    DEFAULT_MATRICES,
    NTSCJ_TO_SRGB,
    SRGB_TO_XYZ,
    ConversionMatrices,
    apply_matrix,
    clamp_unit,
    decode_gamma,
    distance,
    distance_batch,
    forward_transform,
    quantized_to_unit,
    to_goal,
    unit_to_quantized,
)
from ntscj.schema import QuantizedColor


class TestQuantization:
    """RGB8 ↔ unit conversions divide by 255 and truncate on the way back."""

    def test_to_unit_divides_by_255(self):
        unit = quantized_to_unit(QuantizedColor(255, 0, 51))
        np.testing.assert_allclose(unit, [1.0, 0.0, 0.2], rtol=1e-6)

    def test_to_unit_default_is_float32(self):
        unit = quantized_to_unit(QuantizedColor(1, 2, 3))
        assert unit.dtype == np.float32

    def test_to_unit_batch(self):
        codes = np.array([[0, 0, 0], [255, 255, 255]])
        unit = quantized_to_unit(codes, np.float64)
        assert unit.shape == (2, 3)
        np.testing.assert_allclose(unit[1], [1.0, 1.0, 1.0])

    def test_to_quantized_truncates(self):
        c = unit_to_quantized(np.array([1.0, 0.0, 0.5]))
        assert c == QuantizedColor(255, 0, 127)

    def test_to_quantized_never_rounds_up(self):
        c = unit_to_quantized(np.array([0.9999, 0.0039, 0.0]))
        assert c == QuantizedColor(254, 0, 0)

    def test_to_quantized_rejects_batch(self):
        with pytest.raises(ValueError):
            unit_to_quantized(np.zeros((2, 3)))

    def test_extremes_survive_roundtrip(self):
        for code in (0, 255):
            c = QuantizedColor(code, code, code)
            assert unit_to_quantized(quantized_to_unit(c)) == c


class TestDecodeGamma:
    """sRGB inverse transfer function, clamped to [0, 1]."""

    def test_linear_segment(self):
        """Values at or below 0.04045 use value / 12.92."""
        out = decode_gamma(np.array([0.03, 0.04045, 0.0]))
        assert float(out[0]) == pytest.approx(0.03 / 12.92, rel=1e-6)
        assert float(out[1]) == pytest.approx(0.04045 / 12.92, rel=1e-6)
        assert float(out[2]) == 0.0

    def test_power_segment(self):
        out = decode_gamma(np.array([0.5], dtype=np.float64))
        expected = ((0.5 + 0.055) / 1.055) ** 2.4
        assert float(out[0]) == pytest.approx(expected, abs=1e-12)

    def test_endpoints(self):
        out = decode_gamma(np.array([0.0, 1.0, 1.0], dtype=np.float64))
        np.testing.assert_allclose(out, [0.0, 1.0, 1.0], atol=1e-12)

    def test_monotonic(self):
        x = np.linspace(0.0, 1.0, 256)
        out = decode_gamma(x)
        assert np.all(np.diff(out) >= 0.0)

    def test_clamp_closure(self):
        out = decode_gamma(np.array([-5.0, 0.5, 7.0, -0.01, 1.5, 1e6]))
        assert np.all(out >= 0.0)
        assert np.all(out <= 1.0)
        assert not np.any(np.isnan(out))

    def test_preserves_dtype(self):
        assert decode_gamma(np.array([0.2, 0.4, 0.6], dtype=np.float32)).dtype == np.float32
        assert decode_gamma(np.array([0.2, 0.4, 0.6], dtype=np.float64)).dtype == np.float64


class TestApplyMatrix:
    """Matrix stages combine rows and clamp to [0, 1]."""

    def test_identity(self):
        unit = np.array([0.1, 0.5, 0.9])
        np.testing.assert_allclose(apply_matrix(np.eye(3), unit), unit)

    def test_row_combination(self):
        m = np.array([
            [0.5, 0.5, 0.0],
            [0.0, 0.0, 1.0],
            [0.2, 0.2, 0.2],
        ])
        out = apply_matrix(m, np.array([0.4, 0.2, 1.0]))
        np.testing.assert_allclose(out, [0.3, 1.0, 0.32], atol=1e-12)

    def test_clamp_closure(self):
        m = np.array([
            [10.0, 0.0, 0.0],
            [-10.0, 0.0, 0.0],
            [1.0, -1.0, 0.5],
        ])
        out = apply_matrix(m, np.array([0.7, 0.3, 0.9]))
        assert np.all(out >= 0.0)
        assert np.all(out <= 1.0)
        np.testing.assert_allclose(out, [1.0, 0.0, 0.85], atol=1e-12)

    def test_batch_shape(self):
        unit = np.random.RandomState(7).random((5, 4, 3))
        out = apply_matrix(SRGB_TO_XYZ, unit)
        assert out.shape == (5, 4, 3)

    def test_float32_stays_float32(self):
        unit = np.array([0.2, 0.4, 0.6], dtype=np.float32)
        assert apply_matrix(NTSCJ_TO_SRGB, unit).dtype == np.float32


class TestComposedPipelines:
    """Candidate and goal chains land in the same XYZ space."""

    def test_black_maps_to_origin(self):
        black = QuantizedColor(0, 0, 0)
        np.testing.assert_array_equal(forward_transform(black), [0.0, 0.0, 0.0])
        np.testing.assert_array_equal(to_goal(black), [0.0, 0.0, 0.0])

    def test_goal_white_is_clamped(self):
        """sRGB white has Z ≈ 1.089, which the clamp pulls down to 1."""
        goal = to_goal(QuantizedColor(255, 255, 255))
        assert float(goal[0]) == pytest.approx(0.9504, abs=1e-3)
        assert float(goal[1]) == pytest.approx(1.0, abs=1e-5)
        assert float(goal[2]) == 1.0

    def test_white_is_near_fixed_point(self):
        """Gamut adaptation rows sum to ~1, so white stays white."""
        white = QuantizedColor(255, 255, 255)
        np.testing.assert_allclose(forward_transform(white), to_goal(white), atol=1e-5)

    def test_goal_skips_gamut_adaptation(self):
        c = QuantizedColor(146, 97, 248)
        identity = ConversionMatrices(gamut_adapt=np.eye(3))
        np.testing.assert_allclose(
            forward_transform(c, identity), to_goal(c, identity), atol=1e-7
        )
        assert distance(forward_transform(c), to_goal(c)) > 0.0

    def test_gamut_shift_boosts_red(self):
        """NTSC-J red reads as more saturated red after adaptation."""
        red = QuantizedColor(200, 0, 0)
        assert float(forward_transform(red)[0]) > float(to_goal(red)[0])

    def test_batch_matches_single(self):
        codes = [QuantizedColor(10, 200, 30), QuantizedColor(146, 97, 248)]
        batch = forward_transform(np.stack([c.to_array() for c in codes]))
        for row, c in zip(batch, codes):
            np.testing.assert_allclose(row, forward_transform(c), rtol=1e-6)

    def test_output_in_unit_range(self):
        codes = np.random.RandomState(3).randint(0, 256, size=(200, 3))
        out = forward_transform(codes)
        assert np.all(out >= 0.0)
        assert np.all(out <= 1.0)

    def test_precision_follows_matrices(self):
        c = QuantizedColor(12, 34, 56)
        assert forward_transform(c).dtype == np.float32
        assert forward_transform(c, ConversionMatrices.with_precision("float64")).dtype == np.float64


class TestConversionMatrices:
    """Matrix sets are validated, copied and read-only."""

    def test_defaults_are_read_only(self):
        with pytest.raises(ValueError):
            DEFAULT_MATRICES.gamut_adapt[0, 0] = 1.0

    def test_rejects_wrong_shape(self):
        with pytest.raises(ValueError):
            ConversionMatrices(gamut_adapt=np.eye(2))

    def test_rejects_integer_dtype(self):
        with pytest.raises(ValueError):
            ConversionMatrices(dtype=np.int32)

    def test_rejects_unknown_precision(self):
        with pytest.raises(ValueError):
            ConversionMatrices.with_precision("float16")

    def test_copies_caller_matrix(self):
        m = np.eye(3)
        matrices = ConversionMatrices(gamut_adapt=m)
        m[0, 0] = 5.0
        assert matrices.gamut_adapt[0, 0] == 1.0


class TestDistance:
    """Euclidean XYZ distance, scalar and batched."""

    def test_self_distance_is_zero(self):
        x = np.random.RandomState(11).random((20, 3)).astype(np.float32)
        for row in x:
            assert distance(row, row) == 0.0

    def test_pythagorean(self):
        a = np.array([0.0, 0.0, 0.0])
        b = np.array([0.3, 0.4, 0.0])
        assert distance(a, b) == pytest.approx(0.5, abs=1e-12)

    def test_symmetric(self):
        a = np.array([0.1, 0.7, 0.3])
        b = np.array([0.9, 0.2, 0.6])
        assert distance(a, b) == distance(b, a)

    def test_returns_python_float(self):
        assert isinstance(distance(np.zeros(3), np.ones(3)), float)

    def test_batch_matches_scalar(self):
        a = np.array([[0.1, 0.2, 0.3], [0.5, 0.5, 0.5]])
        goal = np.array([0.2, 0.2, 0.2])
        batch = distance_batch(a, goal)
        assert batch.shape == (2,)
        assert batch[0] == pytest.approx(distance(a[0], goal), abs=1e-12)
        assert batch[1] == pytest.approx(distance(a[1], goal), abs=1e-12)


class TestClampUnit:
    """Clamping keeps the working precision."""

    def test_clips_and_keeps_dtype(self):
        out = clamp_unit(np.array([-0.5, 0.25, 3.0], dtype=np.float32))
        assert out.dtype == np.float32
        np.testing.assert_array_equal(out, [0.0, 0.25, 1.0])
