import unittest
import tempfile
from pathlib import Path
from unittest import mock
import numpy as np

from edr_converter.errors import EmptyFileNameError, ExtensionError, FileReadError, HeaderOnlyError, TooShortError
from edr_converter.ingest.readers_edr import EdrReader, EdrReaderConfig


class TestEdrReader(unittest.TestCase):
    def _write_edr(self, path: Path, lines, samples, header_size: int = 2048):
        text = "".join(f"{ln}\n" for ln in lines).encode("latin-1")
        header = text + b"\x00" * (header_size - len(text))
        path.write_bytes(header + np.asarray(samples, dtype="<i2").tobytes())

    def test_reads_two_channel_file(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "rec.EDR"
            n = 100
            ch0 = np.arange(n, dtype=np.int16)
            ch1 = -np.arange(n, dtype=np.int16)
            inter = np.column_stack([ch0, ch1]).ravel()
            lines = ["AD=10", "ADCMAX=4095", "DT=0.001", "YCF=1.0", "YAG=1", "YZ=0", "YCF=2.0", "YAG=5", "YZ=0"]
            self._write_edr(p, lines, inter)

            ds = EdrReader().read(p)
            self.assertEqual(ds.channel_count, 2)
            self.assertEqual(ds.n_samples, n)
            np.testing.assert_allclose(ds.channels[0], ch0 * 10 / 4096.0, rtol=0, atol=0)
            np.testing.assert_allclose(ds.channels[1], ch1 * 10 / (2.0 * 5 * 4096.0), rtol=0, atol=0)
            self.assertAlmostEqual(ds.metadata.sample_interval, 0.001, places=12)

    def test_empty_file_name(self):
        with self.assertRaises(EmptyFileNameError):
            EdrReader().read("")

    def test_incorrect_file_extension(self):
        with self.assertRaises(ExtensionError):
            EdrReader().read("not_an_edr.txt")

    def test_extension_case_sensitive_by_default(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "rec.edr"
            self._write_edr(p, ["AD=1", "YZ=0", "YAG=1", "YCF=1.0"], [1, 2])
            with self.assertRaises(ExtensionError):
                EdrReader().read(p)

            ds = EdrReader(EdrReaderConfig(case_sensitive_extension=False)).read(p)
            self.assertEqual(ds.n_samples, 2)

    def test_file_does_not_exist(self):
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(FileNotFoundError):
                EdrReader().read(Path(d) / "non_existent.EDR")

    def test_unreadable_file(self):
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "rec.EDR"
            self._write_edr(p, ["AD=1", "YZ=0", "YAG=1", "YCF=1.0"], [1])
            denied = PermissionError(13, "Permission denied")
            with mock.patch.object(Path, "read_bytes", side_effect=denied):
                with self.assertRaises(FileReadError) as cm:
                    EdrReader().read(p)
            self.assertIs(cm.exception.cause, denied)
            self.assertIn("Permission denied", str(cm.exception))

    def test_too_short_and_header_only(self):
        with tempfile.TemporaryDirectory() as d:
            short = Path(d) / "short.EDR"
            short.write_bytes(b"\x01\x02\x03\x04")
            with self.assertRaises(TooShortError):
                EdrReader().read(short)

            only = Path(d) / "only.EDR"
            self._write_edr(only, ["AD=1"], [])
            with self.assertRaises(HeaderOnlyError):
                EdrReader().read(only)


if __name__ == "__main__":
    unittest.main()
