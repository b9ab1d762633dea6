import os
import tempfile
import unittest
from unittest.mock import MagicMock, patch

from hexx.core.errors import FileOpenError, FileReadError
from hexx.core.reader import read_file


class TestReader(unittest.TestCase):
    def test_read_whole_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "blob.bin")
            with open(path, "wb") as handle:
                handle.write(b"\x00\x01hexx\xff")
            self.assertEqual(read_file(path), b"\x00\x01hexx\xff")

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "nope.bin")
            with self.assertRaises(FileOpenError) as ctx:
                read_file(path)
        self.assertIn("Failed in opening file", str(ctx.exception))
        self.assertEqual(ctx.exception.path, path)

    def test_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(FileOpenError):
                read_file(tmpdir)

    def test_read_failure(self):
        handle = MagicMock()
        handle.__enter__.return_value = handle
        handle.read.side_effect = OSError(5, "Input/output error")
        with patch("hexx.core.reader.open", return_value=handle, create=True):
            with self.assertRaises(FileReadError) as ctx:
                read_file("/dev/broken")
        self.assertIn("Input/output error", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
