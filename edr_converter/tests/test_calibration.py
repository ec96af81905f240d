"""Tests for the affine calibration transform."""

from __future__ import annotations

import numpy as np
import pytest

from edr_converter.analysis.calibration import scale_channel, scale_sample


@pytest.mark.parametrize(
    "r, z, a, f, g, m",
    [
        (128, 0, 1, 1.0, 1, 255),
        (-32768, 12, 10, 0.05, 100, 4095),
        (32767, -7, 5, 1e-3, 3, 2047),
        (0, 0, 20, 2.5, 1, 65535),
        (1234, 1234, 7, 0.1, 2, 4095),
    ],
)
def test_scale_sample_matches_formula_exactly(r, z, a, f, g, m) -> None:
    expected = ((r - z) * a) / (f * g * (m + 1))
    assert scale_sample(r, z, a, f, g, m) == expected


def test_twelve_bit_levels() -> None:
    # 4096 levels: a full-scale code maps to (4095/4096) * resolution
    assert scale_sample(4095, 0, 10, 1.0, 1, 4095) == 10 * 4095 / 4096


def test_scale_sample_returns_float() -> None:
    assert isinstance(scale_sample(1, 0, 1, 1.0, 1, 1), float)


@pytest.mark.parametrize("f, g, m", [(0.0, 1, 255), (1.0, 0, 255), (1.0, 1, -1)])
def test_zero_denominator_is_non_finite(f, g, m) -> None:
    assert scale_sample(10, 0, 1, f, g, m) == np.inf
    assert scale_sample(-10, 0, 1, f, g, m) == -np.inf
    assert np.isnan(scale_sample(0, 0, 1, f, g, m))


def test_zero_denominator_does_not_warn() -> None:
    with np.errstate(all="raise"):
        x = scale_channel(np.array([1, 0, -1], dtype="<i2"), 0, 1, 0.0, 1, 255)
    assert x[0] == np.inf
    assert np.isnan(x[1])
    assert x[2] == -np.inf


def test_scale_channel_equals_scalar() -> None:
    raw = np.array([-32768, -1, 0, 1, 100, 32767], dtype="<i2")
    args = dict(zero_offset=-3, resolution=5, calibration_factor=0.02, gain=4, adc_max=2047)
    out = scale_channel(raw, **args)
    assert out.dtype == np.float64
    expected = [scale_sample(int(r), **args) for r in raw]
    np.testing.assert_array_equal(out, np.array(expected))


def test_scale_channel_no_int16_overflow() -> None:
    # (raw - zero_offset) must not wrap around in int16 arithmetic
    out = scale_channel(np.array([-32768], dtype="<i2"), 32767, 1, 1.0, 1, 0)
    assert out[0] == -65535.0
