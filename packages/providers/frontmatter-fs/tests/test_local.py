"""Tests for frontmatter_fs.local."""

from pathlib import Path
from unittest.mock import patch

import pytest

from frontmatter_core import (
    DEFAULT_TABLE,
    Convention,
    DelimiterResolver,
    DocumentTooLargeError,
    InvalidConfigError,
    UnknownConventionError,
    WrapperConfig,
)
from frontmatter_fs import parse_file, read_document

# ------------------------------------------------------------------
# Helpers: create documents on disk
# ------------------------------------------------------------------

SAMPLE_FM = {"title": "hello"}

DOCUMENTS = {
    "slim": "/\n  ---\n  title: hello\n  ---\nh1 Content\n",
    "coffee": "# ---\n# title: hello\n# ---\nconsole.log 'Content'\n",
    "html": "<!--\n---\ntitle: hello\n---\n-->\n<h1>Content</h1>\n",
    "haml": "-#\n  ---\n  title: hello\n  ---\n%h1 Content\n",
    "liquid": "<% comment %>\n---\ntitle: hello\n---\n<% endcomment %>\n<h1>Content</h1>\n",
    "sass": "// ---\n// title: hello\n// ---\nh1\n  color: red\n",
    "scss": "// ---\n// title: hello\n// ---\nh1 { color: red; }\n",
    "md": "---\ntitle: hello\n---\n# Content\n",
}


def _write(root: Path, name: str, text: str) -> Path:
    path = root / name
    path.write_text(text, encoding="utf-8")
    return path


# ------------------------------------------------------------------
# Tests
# ------------------------------------------------------------------


class TestParseFile:
    @pytest.mark.parametrize("extension", list(DOCUMENTS))
    def test_autodetect(self, tmp_path: Path, extension: str):
        path = _write(tmp_path, f"example.{extension}", DOCUMENTS[extension])
        result = parse_file(path)
        assert result.front_matter == SAMPLE_FM
        assert "Content" in result.content or "color" in result.content
        assert "---" not in result.content

    @pytest.mark.parametrize("extension", list(DOCUMENTS))
    def test_autodetect_passes_resolved_syntax(self, tmp_path: Path, extension: str):
        path = _write(tmp_path, f"example.{extension}", DOCUMENTS[extension])
        with patch("frontmatter_fs.local.parse") as mock_parse:
            parse_file(path)
        args, kwargs = mock_parse.call_args
        assert args == (DOCUMENTS[extension], None)
        assert kwargs["syntax"] is Convention(extension)

    def test_uppercase_extension(self, tmp_path: Path):
        path = _write(tmp_path, "INDEX.HTML", DOCUMENTS["html"])
        assert parse_file(path).front_matter == SAMPLE_FM

    def test_unknown_extension_raises(self, tmp_path: Path):
        path = _write(tmp_path, "example.foo", DOCUMENTS["md"])
        with pytest.raises(UnknownConventionError):
            parse_file(path)

    def test_no_extension_raises_when_autodetecting(self, tmp_path: Path):
        path = _write(tmp_path, "README", DOCUMENTS["md"])
        with pytest.raises(UnknownConventionError):
            parse_file(path)

    def test_autodetect_false_parses_without_wrapper(self, tmp_path: Path):
        path = _write(tmp_path, "example.foo", DOCUMENTS["md"])
        with patch("frontmatter_fs.local.parse") as mock_parse:
            parse_file(path, autodetect=False)
        args, kwargs = mock_parse.call_args
        assert args == (DOCUMENTS["md"], None)
        assert kwargs["syntax"] is None

    def test_autodetect_false_with_unknown_extension(self, tmp_path: Path):
        path = _write(tmp_path, "example.foo", DOCUMENTS["md"])
        result = parse_file(path, autodetect=False)
        assert result.front_matter == SAMPLE_FM
        assert result.content == "# Content\n"

    def test_explicit_config_wins_over_extension(self, tmp_path: Path):
        path = _write(tmp_path, "example.txt", DOCUMENTS["coffee"])
        result = parse_file(path, WrapperConfig(comment="#"))
        assert result.front_matter == SAMPLE_FM

    def test_explicit_syntax_wins_over_extension(self, tmp_path: Path):
        path = _write(tmp_path, "example.md", DOCUMENTS["scss"])
        result = parse_file(path, syntax="scss")
        assert result.front_matter == SAMPLE_FM
        assert result.content == "h1 { color: red; }\n"

    def test_config_and_syntax_raise(self, tmp_path: Path):
        path = _write(tmp_path, "example.md", DOCUMENTS["md"])
        with pytest.raises(InvalidConfigError):
            parse_file(path, WrapperConfig(), syntax="md")

    def test_custom_resolver(self, tmp_path: Path):
        erb = WrapperConfig(start_comment="<%#", end_comment="%>")
        resolver = DelimiterResolver(DEFAULT_TABLE.extend({"erb": erb}, {"erb": "erb"}))
        path = _write(tmp_path, "page.erb", "<%#\n---\ntitle: hello\n---\n%>\n<p>Content</p>\n")
        result = parse_file(path, resolver=resolver)
        assert result.front_matter == SAMPLE_FM
        assert result.content == "<p>Content</p>\n"

    def test_accepts_string_path(self, tmp_path: Path):
        path = _write(tmp_path, "example.md", DOCUMENTS["md"])
        assert parse_file(str(path)).front_matter == SAMPLE_FM

    def test_utf8_bom_is_stripped(self, tmp_path: Path):
        path = tmp_path / "example.md"
        path.write_bytes(b"\xef\xbb\xbf" + DOCUMENTS["md"].encode("utf-8"))
        result = parse_file(path)
        assert result.front_matter == SAMPLE_FM
        assert result.content == "# Content\n"

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            parse_file(tmp_path / "missing.md")


class TestReadDocument:
    def test_reads_text(self, tmp_path: Path):
        path = _write(tmp_path, "doc.md", "héllo\n")
        assert read_document(path) == "héllo\n"

    def test_oversized_file_raises(self, tmp_path: Path):
        path = _write(tmp_path, "big.md", "x" * 101)
        with pytest.raises(DocumentTooLargeError):
            read_document(path, max_file_bytes=100)

    def test_file_at_limit_passes(self, tmp_path: Path):
        path = _write(tmp_path, "exact.md", "x" * 100)
        assert read_document(path, max_file_bytes=100) == "x" * 100

    def test_directory_raises(self, tmp_path: Path):
        with pytest.raises(IsADirectoryError):
            read_document(tmp_path)

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            read_document(tmp_path / "nope.md")
