"""Shared BeautifulSoup access for building HTML."""

from __future__ import annotations

from cheatpage.exceptions import DependencyError

try:
    from bs4 import BeautifulSoup
    from bs4.element import Doctype, NavigableString, PageElement, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise DependencyError(
        "BeautifulSoup4 is required for HTML rendering (pip install beautifulsoup4)."
    ) from exc

__all__ = ["BeautifulSoup", "Doctype", "NavigableString", "PageElement", "Tag", "new_soup", "parse_fragment"]


def new_soup() -> BeautifulSoup:
    """Return an empty document to create tags in."""
    return BeautifulSoup("", "html.parser")


def parse_fragment(html: str) -> list[PageElement]:
    """Parse an HTML fragment into detached top-level nodes."""
    return [node.extract() for node in list(BeautifulSoup(html, "html.parser").contents)]
