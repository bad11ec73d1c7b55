"""Heading anchors and table of contents."""

from __future__ import annotations

import re
from typing import Iterable

from cheatpage.config import CHEATPAGE_TOC_MAX_LEVEL
from cheatpage.exceptions import DuplicateAnchorError
from cheatpage.html_utils import BeautifulSoup, Tag, new_soup
from cheatpage.inline import plain_text
from cheatpage.schemas import Heading, TocEntry


_WHITESPACE_RE = re.compile(r"\s+")
# \w minus underscore: letters and digits in any script.
_DISALLOWED_RE = re.compile(r"[^\w-]|_")
FALLBACK_ANCHOR = "section"


def slugify(text: str) -> str:
    """Derive an anchor id from heading text.

    Lower-cases, turns whitespace runs into one hyphen, and drops every
    character that is not a letter, digit or hyphen.
    """
    slug = plain_text(text).strip().lower()
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _DISALLOWED_RE.sub("", slug)
    return slug or FALLBACK_ANCHOR


def build_toc(headings: Iterable[Heading], *, disambiguate: bool = True) -> list[TocEntry]:
    """Create one entry per heading, in document order, with unique anchors.

    Colliding anchors get a numeric suffix: ``notes``, ``notes-1``,
    ``notes-2``.

    Raises:
        DuplicateAnchorError: If ``disambiguate`` is False and two headings
            produce the same anchor.
    """
    used: set[str] = set()
    suffixes: dict[str, int] = {}
    entries: list[TocEntry] = []

    for heading in headings:
        base = slugify(heading.text)
        anchor = base
        if anchor in used:
            if not disambiguate:
                raise DuplicateAnchorError(
                    f"Heading '{heading.text}' duplicates anchor '#{anchor}'"
                )
            suffix = suffixes.get(base, 0)
            while anchor in used:
                suffix += 1
                anchor = f"{base}-{suffix}"
            suffixes[base] = suffix
        used.add(anchor)
        entries.append(TocEntry(anchor_id=anchor, text=plain_text(heading.text).strip(), level=heading.level))

    return entries


def build_toc_nav(
    soup: BeautifulSoup, entries: list[TocEntry], *, max_level: int = CHEATPAGE_TOC_MAX_LEVEL
) -> Tag | None:
    """Build a ``<nav class="toc">`` with nested lists of anchor links."""
    shown = [entry for entry in entries if entry.level <= max_level]
    if not shown:
        return None

    nav = soup.new_tag("nav", attrs={"class": "toc"})
    root = soup.new_tag("ul")
    nav.append(root)

    # Each frame: [level, <ul>, last <li> appended to that <ul>]
    stack: list[list] = [[min(entry.level for entry in shown), root, None]]
    for entry in shown:
        while len(stack) > 1 and entry.level < stack[-1][0]:
            stack.pop()
        if entry.level > stack[-1][0] and stack[-1][2] is not None:
            nested = soup.new_tag("ul")
            stack[-1][2].append(nested)
            stack.append([entry.level, nested, None])

        item = soup.new_tag("li")
        link = soup.new_tag("a", attrs={"href": f"#{entry.anchor_id}"})
        link.string = entry.text
        item.append(link)
        stack[-1][1].append(item)
        stack[-1][2] = item

    return nav


def render_toc(entries: list[TocEntry], *, max_level: int = CHEATPAGE_TOC_MAX_LEVEL) -> str:
    """Render the table of contents as an HTML string."""
    nav = build_toc_nav(new_soup(), entries, max_level=max_level)
    return str(nav) if nav is not None else ""
