"""Error taxonomy for EDR decoding.

Every error is terminal for the file being processed. All of them derive from
``ValueError`` so callers that already guard bad input data with
``except ValueError`` keep working.
"""

from __future__ import annotations

from typing import Optional


class EdrError(ValueError):
    """Base class for everything that can go wrong while decoding EDR bytes."""


class TooShortError(EdrError):
    def __init__(self, n_bytes: int, header_size: int) -> None:
        super().__init__(f"file contents too short: {n_bytes} bytes, header needs {header_size}.")
        self.n_bytes = n_bytes
        self.header_size = header_size


class HeaderOnlyError(EdrError):
    def __init__(self, header_size: int) -> None:
        super().__init__(f"file contains only a header ({header_size} bytes) with no sample data.")
        self.header_size = header_size


class HeaderTagMalformedError(EdrError):
    """A recognised header tag line has no ``=`` separator."""

    def __init__(self, tag: str, line: str) -> None:
        super().__init__(f"header tag '{tag}' has no '=' separator: {line!r}")
        self.tag = tag
        self.line = line


class FieldParseError(EdrError):
    """The value of a recognised header tag is not a valid number.

    ``field`` is the semantic field name (e.g. ``adc_max``), not the raw tag.
    """

    def __init__(self, field: str, value: str, reason: Optional[str] = None) -> None:
        msg = f"header field '{field}' could not be parsed from {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
        self.field = field
        self.value = value


class ChannelArrayMismatchError(EdrError):
    """Per-channel calibration arrays disagree in length."""

    def __init__(self, lengths: dict) -> None:
        txt = ", ".join(f"{k}={v}" for k, v in lengths.items())
        super().__init__(f"per-channel header arrays disagree in length: {txt}")
        self.lengths = dict(lengths)


# ---------------------------------------------------------------------------
# File-level errors (raised before any byte is decoded)
# ---------------------------------------------------------------------------


class EdrReadError(EdrError):
    """Base class for filename and file-access problems."""


class EmptyFileNameError(EdrReadError):
    def __init__(self) -> None:
        super().__init__("empty file name.")


class ExtensionError(EdrReadError):
    def __init__(self, name: str, expected: tuple) -> None:
        super().__init__(f"invalid file extension for '{name}' (expected one of {', '.join(expected)}).")
        self.name = name
        self.expected = tuple(expected)


class FileReadError(EdrReadError):
    """The file exists but could not be read (permissions, I/O failure)."""

    def __init__(self, name: str, cause: OSError) -> None:
        super().__init__(f"error reading file '{name}': {cause.strerror or cause}")
        self.name = name
        self.cause = cause
