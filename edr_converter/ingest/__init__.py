"""Ingest package - EDR file access and header parsing.

This package handles:
- Parsing the fixed-size ASCII header into RecordingMetadata
- Size checks that separate "too short" from "header only" files
- Reading *.EDR files from disk with filename/extension checks

Key entry points:
- parse_header: header bytes -> RecordingMetadata
- decode_edr: whole file bytes -> DecodedDataset
- EdrReader: path -> DecodedDataset

Design principle:
- The decoding core never touches the filesystem; EdrReader is the only
  place where files are opened.
"""
