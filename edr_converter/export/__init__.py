from .csv_writer import CsvWriterConfig, default_output_path, write_csv

__all__ = [
    "CsvWriterConfig",
    "default_output_path",
    "write_csv",
]
