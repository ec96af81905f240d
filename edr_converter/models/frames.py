from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np
import pandas as pd

from edr_converter.models.metadata import RecordingMetadata


@dataclass(frozen=True)
class DecodedDataset:
    """
    In-memory representation of one decoded EDR file.

    Notes
    - ``channels[c]`` holds channel c in physical units, header declaration order.
    - All channel arrays are float64, read-only and have the same length.
    - ``warnings`` collects non-fatal decoding notes (dropped bytes/samples).
    """
    channels: Tuple[np.ndarray, ...]
    metadata: RecordingMetadata = field(default_factory=RecordingMetadata)
    warnings: Tuple[str, ...] = ()

    @property
    def channel_count(self) -> int:
        return len(self.channels)

    @property
    def n_samples(self) -> int:
        """Samples per channel."""
        if not self.channels:
            return 0
        return int(self.channels[0].size)

    @property
    def channel_names(self) -> List[str]:
        return [f"ch{c}" for c in range(self.channel_count)]

    def time_axis(self) -> np.ndarray:
        """Sample index times ``metadata.sample_interval``."""
        return np.arange(self.n_samples, dtype=np.float64) * float(self.metadata.sample_interval)

    def to_frame(self, include_time: bool = False) -> pd.DataFrame:
        """One column per channel, row i = sample i."""
        cols = {name: ch for name, ch in zip(self.channel_names, self.channels)}
        df = pd.DataFrame(cols, columns=self.channel_names)
        if include_time:
            df.insert(0, "t", self.time_axis())
        return df
