from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

from edr_converter.errors import ChannelArrayMismatchError


@dataclass(frozen=True)
class RecordingMetadata:
    """Typed view of the EDR header block.

    Fields
    ------
    analog_to_digital_resolution : int
        Shared full-scale reference (header tag ``AD``).
    adc_max : int
        Maximum digital code (``ADCMAX``); the ADC has ``adc_max + 1`` levels.
    sample_interval : float
        Time between samples (``DT``). Carried through, not used by calibration.
    channel_gain, channel_calibration_factor, channel_zero_offset : tuple
        Per-channel constants (``YAG``, ``YCF``, ``YZ``) in header order.

    Notes
    -----
    - Fields absent from the header keep their zero defaults. Parsing is
      permissive; a channel with ``factor=0`` calibrates to inf/nan.
    - ``channel_zero_offset`` defines the channel count.
    """

    analog_to_digital_resolution: int = 0
    adc_max: int = 0
    sample_interval: float = 0.0
    channel_gain: Tuple[int, ...] = ()
    channel_calibration_factor: Tuple[float, ...] = ()
    channel_zero_offset: Tuple[int, ...] = ()

    @property
    def channel_count(self) -> int:
        return len(self.channel_zero_offset)

    def check_channel_arrays(self) -> None:
        """Raise ChannelArrayMismatchError unless all per-channel arrays have equal length."""
        lengths = {
            "channel_gain": len(self.channel_gain),
            "channel_calibration_factor": len(self.channel_calibration_factor),
            "channel_zero_offset": len(self.channel_zero_offset),
        }
        if len(set(lengths.values())) != 1:
            raise ChannelArrayMismatchError(lengths)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict (tuples become lists)."""
        d = asdict(self)
        for k in ("channel_gain", "channel_calibration_factor", "channel_zero_offset"):
            d[k] = list(d[k])
        return d
