"""Shared fixtures: synthetic EDR byte buffers."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np
import pytest

from edr_converter.ingest.header import HEADER_SIZE


def build_header(lines: Iterable[str], size: int = HEADER_SIZE, pad: bytes = b"\x00") -> bytes:
    text = "".join(f"{ln}\n" for ln in lines).encode("latin-1")
    if len(text) > size:
        raise ValueError(f"header text is {len(text)} bytes, does not fit in {size}")
    return text + pad * (size - len(text))


def build_edr(lines: Iterable[str], samples: Sequence[int] = (), tail: bytes = b"") -> bytes:
    return build_header(lines) + np.asarray(samples, dtype="<i2").tobytes() + tail


@pytest.fixture
def make_header():
    return build_header


@pytest.fixture
def make_edr():
    return build_edr
