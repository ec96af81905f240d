"""EDR Converter -- decode EDR electrophysiology recordings into calibrated CSV tables.

An EDR file is a fixed 2048-byte ASCII header (``TAG=value`` lines) followed by
signed 16-bit little-endian samples, with channels interleaved round-robin.

This package provides tools for:
- Parsing the header into typed RecordingMetadata
- De-interleaving the sample stream into per-channel arrays
- Calibrating raw ADC codes into physical units
- Writing the result as a comma-separated table

Key principles:
- The decoding core works on bytes in memory; file access stays in the reader
- Header parsing is permissive: absent fields default to zero
- Non-finite calibration results (zero gain/factor) are propagated, not hidden

Main subpackages:
- ingest: Header parser, pipeline driver and file reader
- analysis: Calibration transform and sample decoder
- models: Data models (RecordingMetadata, DecodedDataset)
- export: CSV writer
"""

__all__ = []
