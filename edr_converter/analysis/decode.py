"""Sample stream decoding: raw bytes -> de-interleaved, calibrated channels."""
from __future__ import annotations

from typing import List, Tuple

import numpy as np

from edr_converter.analysis.calibration import scale_channel
from edr_converter.models.frames import DecodedDataset
from edr_converter.models.metadata import RecordingMetadata


SAMPLE_DTYPE = np.dtype("<i2")


def raw_samples(data: bytes) -> Tuple[np.ndarray, List[str]]:
    """Reinterpret ``data`` as signed 16-bit little-endian samples.

    A trailing odd byte is discarded. Returns (samples, warnings).
    """
    warnings: List[str] = []
    buf = memoryview(data).cast("B")
    rem = len(buf) % SAMPLE_DTYPE.itemsize
    if rem:
        warnings.append(f"discarded {rem} trailing byte(s) (sample stream not a multiple of 2 bytes)")
        buf = buf[: len(buf) - rem]
    return np.frombuffer(buf, dtype=SAMPLE_DTYPE), warnings


def deinterleave(raw: np.ndarray, channel_count: int) -> Tuple[np.ndarray, ...]:
    """Split a round-robin multiplexed stream into per-channel arrays.

    Channel c owns flat indices ``c, c + n, c + 2n, ...``. Samples after the
    last complete frame are dropped so every channel has the same length.
    Returned arrays are strided views into ``raw``.
    """
    n = int(channel_count)
    if n <= 0:
        return ()
    raw = np.asarray(raw)
    n_frames = raw.size // n
    frames = raw[: n_frames * n].reshape((n_frames, n))
    return tuple(frames[:, c] for c in range(n))


def decode_samples(data: bytes, metadata: RecordingMetadata) -> DecodedDataset:
    """
    Decode the sample tail of an EDR file into calibrated channels.

    Contract:
      - channel count is ``len(metadata.channel_zero_offset)``
      - zero channels -> empty dataset (no division by the channel count)
      - per-channel arrays must agree in length (ChannelArrayMismatchError otherwise)
      - output channel order == header declaration order
    """
    raw, warnings = raw_samples(data)

    n_ch = metadata.channel_count
    if n_ch == 0:
        warnings.append("header declares no channels (no YZ entries); dataset is empty")
        return DecodedDataset(channels=(), metadata=metadata, warnings=tuple(warnings))

    metadata.check_channel_arrays()

    rem = raw.size % n_ch
    if rem:
        warnings.append(f"dropped {rem} trailing sample(s) not forming a complete {n_ch}-channel frame")

    channels = []
    for c, ch_raw in enumerate(deinterleave(raw, n_ch)):
        phys = scale_channel(
            ch_raw,
            zero_offset=metadata.channel_zero_offset[c],
            resolution=metadata.analog_to_digital_resolution,
            calibration_factor=metadata.channel_calibration_factor[c],
            gain=metadata.channel_gain[c],
            adc_max=metadata.adc_max,
        )
        phys.flags.writeable = False
        channels.append(phys)

    return DecodedDataset(channels=tuple(channels), metadata=metadata, warnings=tuple(warnings))
