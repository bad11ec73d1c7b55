"""Tests for BeautifulSoup helpers."""

from __future__ import annotations

from cheatpage.exceptions import CheatpageError, DependencyError
from cheatpage.html_utils import Tag, new_soup, parse_fragment


class TestParseFragment:
    """Tests for parse_fragment function."""

    def test_returns_detached_top_level_nodes(self) -> None:
        """Top-level tags and text come back in order, free to re-parent."""
        nodes = parse_fragment("<h2 id=\"a\">A</h2>\n<p>b</p>\n")

        assert [node.name for node in nodes if isinstance(node, Tag)] == ["h2", "p"]
        assert all(node.parent is None for node in nodes)

        soup = new_soup()
        body = soup.new_tag("body")
        body.extend(nodes)
        assert str(body) == '<body><h2 id="a">A</h2>\n<p>b</p>\n</body>'

    def test_empty_fragment(self) -> None:
        """An empty fragment has no nodes."""
        assert parse_fragment("") == []


class TestDependencyError:
    """Tests for the missing-library error."""

    def test_is_reported_like_other_errors(self) -> None:
        """The CLI reports it through the common error path."""
        assert issubclass(DependencyError, CheatpageError)
