"""CSV export of decoded EDR recordings.

Row i of the output holds sample i of every channel, in header order,
separated by commas. No index column is written.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from edr_converter.models.frames import DecodedDataset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CsvWriterConfig:
    """
    header:
      Write a first row with the column names (``ch0, ch1, ...``).
    include_time:
      Prepend a ``t`` column (sample index times DT from the header).
    float_format:
      printf-style format passed to pandas (e.g. "%.6g"); None keeps full precision.
    na_rep:
      Text written for NaN samples (0/0 calibration), never an empty cell.
    """
    header: bool = False
    include_time: bool = False
    float_format: Optional[str] = None
    na_rep: str = "NaN"
    separator: str = ","


def default_output_path(edr_path: str | Path) -> Path:
    """``recording.EDR`` -> ``recording.csv`` in the same folder."""
    return Path(edr_path).with_suffix(".csv")


def write_csv(dataset: DecodedDataset, out_path: str | Path, config: Optional[CsvWriterConfig] = None) -> Path:
    cfg = config or CsvWriterConfig()
    out = Path(out_path)

    if dataset.channel_count == 0:
        logger.warning("dataset has no channels; writing empty file %s", out)
        out.write_text("", encoding="ascii")
        return out

    df = dataset.to_frame(include_time=cfg.include_time)
    # written to a sibling file and moved into place: a failed write leaves no CSV behind
    tmp = out.with_name(out.name + ".part")
    try:
        df.to_csv(
            tmp,
            sep=cfg.separator,
            header=cfg.header,
            index=False,
            float_format=cfg.float_format,
            na_rep=cfg.na_rep,
            lineterminator="\n",
        )
        tmp.replace(out)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise
    logger.info("wrote %d row(s) x %d column(s) to %s", len(df), df.shape[1], out)
    return out
