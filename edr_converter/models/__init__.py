from .metadata import RecordingMetadata
from .frames import DecodedDataset

__all__ = [
    "RecordingMetadata",
    "DecodedDataset",
]
