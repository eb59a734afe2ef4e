"""
Unit tests for the file reader.
"""

import tempfile
from pathlib import Path

from case_converter.reader import read_file


class TestReadFile:
    """Tests for read_file function."""

    def test_reads_lines_in_order(self):
        """Returns every line in order without terminators."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "demo.txt"
            path.write_text("Hello World\nFOO bar\n")

            result = read_file(path)

            assert result.success
            assert result.lines == ["Hello World", "FOO bar"]

    def test_last_line_without_newline(self):
        """A final line without a terminator is still read."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "demo.txt"
            path.write_text("one\ntwo")

            result = read_file(path)

            assert result.lines == ["one", "two"]

    def test_mixed_line_endings(self):
        """CRLF and CR terminators are stripped like LF."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "demo.txt"
            path.write_bytes(b"one\r\ntwo\rthree\n")

            result = read_file(path)

            assert result.lines == ["one", "two", "three"]

    def test_blank_lines_kept(self):
        """Blank lines count as lines."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "demo.txt"
            path.write_text("a\n\n\nb\n")

            result = read_file(path)

            assert result.lines == ["a", "", "", "b"]

    def test_empty_file(self):
        """An empty file is a successful read with no lines."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "empty.txt"
            path.write_text("")

            result = read_file(path)

            assert result.success
            assert result.lines == []

    def test_missing_file(self, caplog):
        """A missing file is reported, not raised."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "missing.txt"

            result = read_file(path)

            assert not result.success
            assert result.lines == []
            assert "FileNotFoundError" in result.error
            assert "Failed to read" in caplog.text

    def test_directory_instead_of_file(self):
        """Reading a directory fails gracefully."""
        with tempfile.TemporaryDirectory() as tmp:
            result = read_file(tmp)

            assert not result.success
            assert result.lines == []
