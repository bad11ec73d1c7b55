"""Tests for the rendering pipeline."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pydantic import ValidationError

from cheatpage.exceptions import (
    DuplicateAnchorError,
    FrontMatterError,
    InputNotFoundError,
    OutputWriteError,
    ParseError,
)
from cheatpage.pipeline import RenderOptions, parse_document, render_file, render_text
from cheatpage.schemas import TocMarker


class TestParseDocument:
    """Tests for parse_document function."""

    def test_front_matter_and_blocks(self, cheatsheet_text: str) -> None:
        """Front matter and body are parsed together."""
        document = parse_document(cheatsheet_text)

        assert document.front_matter.title == "Gleam for Elixir users"
        assert document.front_matter.layout == "page"
        assert isinstance(document.blocks[0], TocMarker)
        assert len(document.headings()) == 10

    def test_block_lines_refer_to_source_file(self, page: str) -> None:
        """Line numbers count the front-matter lines."""
        document = parse_document(page + "\n## Notes\n")

        assert document.blocks[0].line == 6

    def test_document_is_immutable(self, page: str) -> None:
        """Parsed documents cannot be modified."""
        document = parse_document(page + "Text\n")

        with pytest.raises(ValidationError):
            document.blocks = ()


class TestRenderText:
    """Tests for render_text function."""

    def test_cheatsheet_render(self, cheatsheet_text: str) -> None:
        """The sample page renders headings, TOC, table and code."""
        result = render_text(cheatsheet_text)

        soup = BeautifulSoup(result.html, "lxml")
        anchors = [entry.anchor_id for entry in result.toc]
        assert anchors == [
            "comments",
            "elixir",
            "gleam",
            "variables",
            "elixir-1",
            "gleam-1",
            "match-operator",
            "operators",
            "notes",
            "notes-1",
        ]
        assert [a["href"] for a in soup.select("nav.toc a")] == [f"#{anchor}" for anchor in anchors]
        assert soup.find(id="match-operator").name == "h3"
        assert len(soup.select("table thead th")) == 4
        assert all(len(row.find_all("td")) == 4 for row in soup.select("table tbody tr"))
        assert result.warnings == []

    def test_elixir_code_block_preserved(self, cheatsheet_text: str) -> None:
        """Fenced elixir code keeps its text and language."""
        result = render_text(cheatsheet_text)

        assert (
            '<pre><code class="language-elixir" data-lang="elixir">'
            "size = 50\nsize = size + 100\nsize = 1</code></pre>"
        ) in result.html

    def test_rendering_twice_is_byte_identical(self, cheatsheet_text: str) -> None:
        """Rendering is deterministic."""
        assert render_text(cheatsheet_text).html == render_text(cheatsheet_text).html

    def test_anchor_ids_unique(self, cheatsheet_text: str) -> None:
        """Every id in the output is unique."""
        soup = BeautifulSoup(render_text(cheatsheet_text).html, "lxml")

        ids = [tag["id"] for tag in soup.find_all(id=True)]
        assert len(ids) == len(set(ids))

    def test_summary(self, cheatsheet_text: str) -> None:
        """The summary describes the page."""
        summary = render_text(cheatsheet_text).summary

        assert summary.splitlines() == [
            "Title: Gleam for Elixir users",
            "Layout: page",
            "Headings: 10",
            "Blocks: 23",
            "Code samples: 4 (elixir, gleam)",
            "Warnings: 0",
        ]

    def test_full_page(self, page: str) -> None:
        """Full-page mode wraps the fragment."""
        result = render_text(page + "Hello\n", RenderOptions(full_page=True))

        assert result.html.startswith("<!DOCTYPE html>")
        assert "<title>Test page</title>" in result.html
        assert "<p>Hello</p>" in result.html

    def test_toc_disabled(self, cheatsheet_text: str) -> None:
        """The TOC marker is dropped when the TOC is off."""
        result = render_text(cheatsheet_text, RenderOptions(include_toc=False))

        assert "<nav" not in result.html
        assert len(result.toc) == 10

    def test_strict_anchors(self, cheatsheet_text: str) -> None:
        """Duplicate headings fail when disambiguation is off."""
        with pytest.raises(DuplicateAnchorError):
            render_text(cheatsheet_text, RenderOptions(disambiguate_anchors=False))

    def test_warnings_are_logged(self, page: str, caplog: pytest.LogCaptureFixture) -> None:
        """Recovered problems reach the log and the result."""
        source = page + "| a | b |\n|---|---|\n| 1 |\n\n```cobol\nDISPLAY 'HI'.\n```\n"

        with caplog.at_level(logging.WARNING, logger="cheatpage.pipeline"):
            result = render_text(source)

        assert len(result.warnings) == 2
        assert "ragged-table-row" in caplog.text
        assert "unknown-code-language" in caplog.text
        assert "line 7" in caplog.text

    def test_ragged_row_line_without_separator(self, page: str) -> None:
        """Warnings point at the real row when the table has no separator."""
        result = render_text(page + "| a | b |\n| 1 |\n")

        assert [warning.line for warning in result.warnings] == [6]

    def test_missing_front_matter(self) -> None:
        """Input without front matter fails."""
        with pytest.raises(FrontMatterError):
            render_text("## Comments\n")


class TestRenderFile:
    """Tests for render_file function."""

    def test_writes_output(self, cheatsheet_path: Path, tmp_path: Path) -> None:
        """The rendered HTML is written to the output path."""
        output = tmp_path / "out" / "index.html"

        result = render_file(cheatsheet_path, output)

        assert output.read_text(encoding="utf-8") == result.html

    def test_without_output_path(self, cheatsheet_path: Path) -> None:
        """The result is returned when no output is given."""
        result = render_file(cheatsheet_path)

        assert "<h2" in result.html

    def test_missing_input(self, tmp_path: Path) -> None:
        """A missing input path raises InputNotFoundError."""
        output = tmp_path / "index.html"

        with pytest.raises(InputNotFoundError, match="missing.md"):
            render_file(tmp_path / "missing.md", output)

        assert not output.exists()

    def test_directory_input(self, tmp_path: Path) -> None:
        """A directory is not a readable input file."""
        with pytest.raises(InputNotFoundError):
            render_file(tmp_path)

    def test_front_matter_error_writes_nothing(self, tmp_path: Path) -> None:
        """No output artifact is produced when the front matter is missing."""
        source = tmp_path / "page.md"
        source.write_text("## Comments\n\nNo metadata.\n", encoding="utf-8")
        output = tmp_path / "index.html"

        with pytest.raises(FrontMatterError):
            render_file(source, output)

        assert not output.exists()

    def test_undecodable_input(self, tmp_path: Path) -> None:
        """Bytes that are not valid UTF-8 raise ParseError naming the file."""
        source = tmp_path / "page.md"
        source.write_bytes(b"---\nlayout: page\ntitle: T\n---\ncaf\xe9\n")

        with pytest.raises(ParseError, match="page.md"):
            render_file(source)

    def test_output_path_is_directory(self, cheatsheet_path: Path, tmp_path: Path) -> None:
        """A directory cannot be written as the output file."""
        with pytest.raises(OutputWriteError, match="Cannot write output file"):
            render_file(cheatsheet_path, tmp_path)
