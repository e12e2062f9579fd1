"""Tests for the leaf renderables: text, doctype and raw file includes."""

import pytest

from htmltree import DOCTYPE, Doctype, File, IncludeError, Text
from htmltree.tags import Div, Root


class TestText:
    """Tests for Text."""

    def test_verbatim(self):
        assert Text("a < b & c").render() == "a < b & c"

    def test_ignores_depth(self):
        assert Text("x").render(7) == "x"


class TestDoctype:
    """Tests for Doctype."""

    def test_default(self):
        assert DOCTYPE == "<!DOCTYPE html>"
        assert Doctype().render() == "<!DOCTYPE html>"

    def test_ignores_depth(self):
        assert Doctype().render(3) == "<!DOCTYPE html>"

    def test_custom_text(self):
        assert Doctype("<!doctype html>").render() == "<!doctype html>"


class TestFile:
    """Tests for File (raw include)."""

    def test_reads_content(self, tmp_path):
        path = tmp_path / "snippet.html"
        path.write_text("<b>bold</b>\n", encoding="utf-8")
        assert File(str(path)).render() == "<b>bold</b>\n"

    def test_content_is_verbatim(self, tmp_path):
        """Test line endings and indentation are left untouched."""
        path = tmp_path / "snippet.html"
        path.write_bytes(b"  a\r\n\tb")
        assert File(str(path)).render(4) == "  a\r\n\tb"

    def test_utf8(self, tmp_path):
        path = tmp_path / "snippet.html"
        path.write_bytes("café".encode("utf-8"))
        assert File(str(path)).render() == "café"

    def test_reread_on_every_render(self, tmp_path):
        path = tmp_path / "snippet.html"
        path.write_text("one", encoding="utf-8")
        f = File(str(path))
        assert f.render() == "one"
        path.write_text("two", encoding="utf-8")
        assert f.render() == "two"

    def test_inside_element(self, tmp_path):
        """Test an include is a leaf: no block line break around it."""
        path = tmp_path / "snippet.html"
        path.write_text("<p>x</p>", encoding="utf-8")
        assert Div(File(str(path))).render() == "\n<div><p>x</p></div>"

    def test_missing_file(self, tmp_path):
        """Test a missing file is a fatal error, not empty text."""
        path = str(tmp_path / "missing.html")
        with pytest.raises(IncludeError, match="missing.html") as excinfo:
            File(path).render()
        assert isinstance(excinfo.value.__cause__, OSError)
        assert excinfo.value.path == path

    def test_missing_file_aborts_document(self, tmp_path):
        root = Root(Div(Text("before")), File(str(tmp_path / "missing.html")))
        with pytest.raises(IncludeError):
            root.render()

    def test_directory(self, tmp_path):
        with pytest.raises(IncludeError):
            File(str(tmp_path)).render()

    def test_undecodable(self, tmp_path):
        path = tmp_path / "binary.bin"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(IncludeError) as excinfo:
            File(str(path)).render()
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
