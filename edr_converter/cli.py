"""CLI for converting an EDR recording to CSV."""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from edr_converter.errors import EdrError, EdrReadError, FileReadError
from edr_converter.export.csv_writer import CsvWriterConfig, default_output_path, write_csv
from edr_converter.ingest.readers_edr import EdrReader, EdrReaderConfig


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="edr2csv", description="Convert an EDR recording to CSV.")
    p.add_argument("edr", help="Path to the .EDR file")
    p.add_argument("-o", "--output", help="Output CSV path (default: <input stem>.csv)")
    p.add_argument("--header", action="store_true", help="Write a column-name row")
    p.add_argument("--time", action="store_true", help="Prepend a time column computed from DT")
    p.add_argument("--float-format", default=None, help="printf-style float format, e.g. %%.6g")
    p.add_argument("--ignore-case", action="store_true", help="Accept .edr as well as .EDR")
    p.add_argument("-v", "--verbose", action="store_true", help="Log progress at INFO level")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    """Decode an EDR file and write it as CSV.

    Exit codes:
    - 0: Success
    - 1: File could not be decoded (bad header or sample data)
    - 2: Input file not found
    - 3: Invalid filename or extension
    - 4: Output could not be written
    - 5: Input file exists but could not be read
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s: %(message)s",
    )

    reader = EdrReader(EdrReaderConfig(case_sensitive_extension=not args.ignore_case))
    try:
        dataset = reader.read(args.edr)
    except FileReadError as exc:
        logging.error("Error: %s", exc)
        raise SystemExit(5)
    except EdrReadError as exc:
        logging.error("Error: %s", exc)
        raise SystemExit(3)
    except FileNotFoundError as exc:
        logging.error("Error: input file not found: %s", exc)
        raise SystemExit(2)
    except EdrError as exc:
        logging.error("Error: %s", exc)
        raise SystemExit(1)

    out = Path(args.output) if args.output else default_output_path(args.edr)
    cfg = CsvWriterConfig(header=args.header, include_time=args.time, float_format=args.float_format)
    try:
        write_csv(dataset, out, cfg)
    except OSError as exc:
        logging.exception("Error: failed to write %s: %s", out, exc)
        raise SystemExit(4)

    print(f"Completed: {out}")


if __name__ == "__main__":
    main()
