"""Tests for pipeline_log_viewer/reader.py"""

import io
import os
import tempfile
import unittest
from unittest import mock

from pipeline_log_viewer.reader import expand_paths, read_stdin, read_text


class TestExpandPaths(unittest.TestCase):
    """Verify glob expansion, dedup, and validation."""

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def _touch(self, name: str) -> str:
        path = os.path.join(self.tmpdir, name)
        with open(path, "w") as f:
            f.write("1 0 0 [x] -1\n")
        return path

    def test_plain_file(self):
        f = self._touch("app.log")
        self.assertEqual(expand_paths([f]), [f])

    def test_glob_expansion(self):
        for name in ("a.log", "b.log", "c.txt"):
            self._touch(name)
        result = expand_paths([os.path.join(self.tmpdir, "*.log")])
        self.assertEqual(len(result), 2)
        self.assertTrue(all(r.endswith(".log") for r in result))

    def test_deduplication(self):
        f = self._touch("app.log")
        self.assertEqual(len(expand_paths([f, f, os.path.join(self.tmpdir, "*.log")])), 1)

    def test_nonexistent_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            expand_paths(["/nonexistent/file.log"])

    def test_empty_glob_raises(self):
        with self.assertRaises(FileNotFoundError):
            expand_paths([os.path.join(self.tmpdir, "*.zzz")])


class TestReadText(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def test_concatenates_in_order(self):
        a = os.path.join(self.tmpdir, "a.log")
        b = os.path.join(self.tmpdir, "b.log")
        with open(a, "w") as f:
            f.write("1 0 0 [a] -1")  # no trailing newline
        with open(b, "w") as f:
            f.write("1 1 0 [b] 0\n")
        self.assertEqual(read_text([a, b]), "1 0 0 [a] -1\n1 1 0 [b] 0\n")

    def test_invalid_utf8_replaced(self):
        path = os.path.join(self.tmpdir, "latin1.log")
        with open(path, "wb") as f:
            f.write(b"1 a 0 [caf\xe9] -1\n")
        self.assertEqual(read_text([path]), "1 a 0 [caf\ufffd] -1\n")

    def test_empty_file(self):
        path = os.path.join(self.tmpdir, "empty.log")
        open(path, "w").close()
        self.assertEqual(read_text([path]), "")


class TestReadStdin(unittest.TestCase):
    def test_reads_all(self):
        with mock.patch("sys.stdin", io.StringIO("1 0 0 [x] -1\n")):
            self.assertEqual(read_stdin(), "1 0 0 [x] -1\n")


if __name__ == "__main__":
    unittest.main()
