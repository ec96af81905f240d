from __future__ import annotations

import numpy as np


def _denominator(calibration_factor: float, gain: int, adc_max: int) -> np.float64:
    return np.float64(calibration_factor) * np.float64(gain) * (np.float64(adc_max) + 1.0)


def scale_sample(
    raw: int,
    zero_offset: int,
    resolution: int,
    calibration_factor: float,
    gain: int,
    adc_max: int,
) -> float:
    """Convert one raw ADC code to physical units.

    ``((raw - zero_offset) * resolution) / (calibration_factor * gain * (adc_max + 1))``

    ``adc_max + 1`` is the number of ADC levels (12-bit: adc_max=4095, 4096 levels).
    A zero denominator yields inf/nan instead of raising.
    """
    num = (np.float64(raw) - np.float64(zero_offset)) * np.float64(resolution)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(num / _denominator(calibration_factor, gain, adc_max))


def scale_channel(
    raw: np.ndarray,
    zero_offset: int,
    resolution: int,
    calibration_factor: float,
    gain: int,
    adc_max: int,
) -> np.ndarray:
    """Vectorised :func:`scale_sample` over one channel; returns float64."""
    x = np.asarray(raw).astype(np.float64)
    num = (x - np.float64(zero_offset)) * np.float64(resolution)
    with np.errstate(divide="ignore", invalid="ignore"):
        return num / _denominator(calibration_factor, gain, adc_max)
