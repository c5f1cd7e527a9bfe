"""
Test suite for file utility functions
"""

import pytest

from pdfbib.core.exceptions import FileAccessError
from pdfbib.utils.file_utils import (
    append_entry,
    ensure_directory,
    insert_at_line,
    line_to_offset,
    read_text_file,
    write_text_file,
)


class TestDirectoryOperations:
    """Test directory operations"""

    def test_ensure_directory(self, temp_dir):
        """Test directory creation"""
        test_dir = temp_dir / "test_subdir" / "nested"
        ensure_directory(test_dir)
        assert test_dir.exists()
        assert test_dir.is_dir()

    def test_ensure_directory_existing(self, temp_dir):
        """Test directory creation when already exists"""
        ensure_directory(temp_dir)
        assert temp_dir.exists()


class TestTextFiles:
    """Test reading and writing text files"""

    def test_read_missing_file(self, temp_dir):
        assert read_text_file(temp_dir / "missing.bib") is None

    def test_write_and_read(self, temp_dir):
        path = temp_dir / "sub" / "refs.bib"
        write_text_file(path, "@misc{k,}\n")
        assert read_text_file(path) == "@misc{k,}\n"

    def test_read_undecodable_file(self, temp_dir):
        """A file in another encoding is an error, not an empty file"""
        path = temp_dir / "latin1.bib"
        path.write_bytes("% Caf\xe9\n".encode("latin-1"))

        with pytest.raises(FileAccessError, match="Cannot decode"):
            read_text_file(path)

    def test_read_directory(self, temp_dir):
        with pytest.raises(FileAccessError, match="Cannot read"):
            read_text_file(temp_dir)

    def test_write_into_directory(self, temp_dir):
        with pytest.raises(FileAccessError, match="Cannot write"):
            write_text_file(temp_dir, "x")


class TestAppendEntry:
    """Test blank-line separated appends"""

    @pytest.mark.parametrize("existing, expected", [
        ("", "@misc{b,}\n"),
        ("@misc{a,}", "@misc{a,}\n\n@misc{b,}\n"),
        ("@misc{a,}\n", "@misc{a,}\n\n@misc{b,}\n"),
        ("@misc{a,}\n\n", "@misc{a,}\n\n@misc{b,}\n"),
    ])
    def test_append_entry(self, temp_dir, existing, expected):
        path = temp_dir / "refs.bib"
        path.write_text(existing, encoding="utf-8")

        offset = append_entry(path, "\n@misc{b,}\n")

        text = path.read_text(encoding="utf-8")
        assert text == expected
        assert text[offset:] == "@misc{b,}\n"

    def test_append_creates_file(self, temp_dir):
        path = temp_dir / "new" / "refs.bib"
        assert append_entry(path, "@misc{b,}") == 0
        assert path.read_text(encoding="utf-8") == "@misc{b,}\n"

    def test_append_to_undecodable_file(self, temp_dir):
        """The file is left untouched"""
        path = temp_dir / "refs.bib"
        original = "@misc{a, title={Caf\xe9}}\n".encode("latin-1")
        path.write_bytes(original)

        with pytest.raises(FileAccessError):
            append_entry(path, "@misc{b,}")

        assert path.read_bytes() == original


class TestLineOffsets:
    """Test line/offset conversion and insertion"""

    def test_line_to_offset(self):
        text = "one\ntwo\nthree"
        assert line_to_offset(text, 1) == 0
        assert line_to_offset(text, 2) == 4
        assert line_to_offset(text, 3) == 8
        assert line_to_offset(text, 10) == len(text)

    def test_insert_at_line(self):
        new_text, offset = insert_at_line("one\ntwo\n", 2, "X")
        assert new_text == "one\nX\ntwo\n"
        assert offset == 4

    def test_insert_past_end_without_newline(self):
        new_text, offset = insert_at_line("one", 5, "X")
        assert new_text == "one\nX\n"
        assert offset == 4
