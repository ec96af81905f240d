"""Decoding and calibration of the EDR sample stream.

Design principle:
  - Ingest parses the header into :class:`~edr_converter.models.metadata.RecordingMetadata`.
  - Analysis turns the raw sample tail plus that metadata into a
    :class:`~edr_converter.models.frames.DecodedDataset`.

Everything here is a pure function of its inputs (no file I/O).
"""

from .calibration import scale_channel, scale_sample
from .decode import deinterleave, decode_samples, raw_samples

__all__ = [
    "scale_sample",
    "scale_channel",
    "raw_samples",
    "deinterleave",
    "decode_samples",
]
