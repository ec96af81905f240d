from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from edr_converter.analysis.decode import decode_samples
from edr_converter.errors import EmptyFileNameError, ExtensionError, FileReadError, HeaderOnlyError, TooShortError
from edr_converter.ingest.header import HEADER_SIZE, parse_header
from edr_converter.models.frames import DecodedDataset

logger = logging.getLogger(__name__)


def decode_edr(data: bytes, header_size: int = HEADER_SIZE) -> DecodedDataset:
    """
    Decode a complete in-memory EDR file.

    Raises TooShortError when ``data`` is shorter than the header, and
    HeaderOnlyError when it holds the header and nothing else.
    """
    n = len(data)
    if n < header_size:
        raise TooShortError(n, header_size)
    if n == header_size:
        raise HeaderOnlyError(header_size)

    metadata = parse_header(data[:header_size])
    return decode_samples(data[header_size:], metadata)


@dataclass(frozen=True)
class EdrReaderConfig:
    """
    Reader configuration for EDR files.

    header_size:
      Size of the fixed ASCII header block in bytes.
    extensions:
      Accepted filename suffixes.
    case_sensitive_extension:
      - True: "rec.edr" is rejected when only ".EDR" is accepted.
      - False: suffixes are compared case-insensitively.
    """
    header_size: int = HEADER_SIZE
    extensions: Tuple[str, ...] = (".EDR",)
    case_sensitive_extension: bool = True


class EdrReader:
    """
    Reader for EDR recordings.

    The whole file is read into memory and handed to :func:`decode_edr`;
    the reader itself only deals with the filename and file access.
    """

    def __init__(self, config: Optional[EdrReaderConfig] = None):
        self.config = config or EdrReaderConfig()

    def check_filename(self, file_path: str | Path) -> Path:
        if file_path is None or str(file_path) == "":
            raise EmptyFileNameError()
        path = Path(file_path).expanduser()

        cfg = self.config
        name = path.name
        if cfg.case_sensitive_extension:
            ok = any(name.endswith(ext) for ext in cfg.extensions)
        else:
            ok = any(name.lower().endswith(ext.lower()) for ext in cfg.extensions)
        if not ok:
            raise ExtensionError(name, cfg.extensions)
        return path

    def read(self, file_path: str | Path) -> DecodedDataset:
        path = self.check_filename(file_path)
        if not path.is_file():
            raise FileNotFoundError(str(path))

        try:
            data = path.read_bytes()
        except FileNotFoundError:
            raise
        except OSError as e:
            raise FileReadError(str(path), e) from e
        logger.info("read %s (%d bytes)", path, len(data))

        ds = decode_edr(data, header_size=self.config.header_size)
        logger.info("decoded %d channel(s) x %d sample(s)", ds.channel_count, ds.n_samples)
        for w in ds.warnings:
            logger.warning("%s: %s", path.name, w)
        return ds
