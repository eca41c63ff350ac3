"""Tests for binary file detection."""

import pytest

from dirins.tree.binary_detector import (
    BINARY_EXTENSIONS,
    TEXT_EXTENSIONS,
    classify_by_extension,
    is_binary_file,
    looks_binary,
)


class TestExtensionClassification:
    """Test the extension fast path."""

    @pytest.mark.parametrize("name", ["app.exe", "Logo.PNG", "lib.jar", "font.woff2", "data.sqlite"])
    def test_binary_extensions(self, name):
        assert classify_by_extension(name) is True

    @pytest.mark.parametrize("name", ["main.py", "App.KT", "build.gradle", "README.md", "config.json"])
    def test_text_extensions(self, name):
        assert classify_by_extension(name) is False

    @pytest.mark.parametrize("name", ["Makefile", "data.xyz", ".gitignore"])
    def test_unknown_extensions(self, name):
        assert classify_by_extension(name) is None

    def test_extension_sets_are_disjoint(self):
        assert not BINARY_EXTENSIONS & TEXT_EXTENSIONS


class TestContentSniffing:
    """Test classification of file content."""

    def test_empty_chunk_is_text(self):
        assert not looks_binary(b"")

    def test_plain_text(self):
        assert not looks_binary(b"Hello, world!\nThis is a text file.\n")

    def test_utf8_text(self):
        assert not looks_binary("héllo wörld ✓\n".encode("utf-8"))

    def test_null_bytes(self):
        assert looks_binary(b"Hello\x00World")

    def test_many_control_characters(self):
        assert looks_binary(b"\x01\x02\x03\x04abc" * 10)

    def test_whitespace_controls_are_text(self):
        assert not looks_binary(b"col1\tcol2\r\nvalue\tvalue\r\n")


class TestBinaryFileDetection:
    """Test detection on real files."""

    def test_known_extension_is_not_read(self, tmp_path):
        # Extension decides; the file does not even need to exist
        assert is_binary_file(tmp_path / "missing.png")
        assert not is_binary_file(tmp_path / "missing.py")

    def test_unknown_extension_text(self, tmp_path):
        path = tmp_path / "Makefile"
        path.write_text("all:\n\techo hi\n")
        assert not is_binary_file(path)

    def test_unknown_extension_binary(self, tmp_path):
        path = tmp_path / "blob.xyz"
        path.write_bytes(b"\x7fELF\x02\x01\x01\x00\x00\x00")
        assert is_binary_file(path)

    def test_empty_file_is_text(self, tmp_path):
        path = tmp_path / "empty"
        path.touch()
        assert not is_binary_file(path)

    def test_unreadable_unknown_file_raises(self, tmp_path):
        with pytest.raises(OSError):
            is_binary_file(tmp_path / "missing.xyz")
