"""Inline markdown: emphasis, code spans, links."""

from __future__ import annotations

import re
from typing import Iterator

from cheatpage.html_utils import BeautifulSoup, NavigableString, PageElement


_INLINE_RE = re.compile(
    r"\\(?P<escaped>[\\`*_{}\[\]()#+\-.!|<>])"
    r"|(?P<ticks>`+)(?P<code>.+?)(?<!`)(?P=ticks)(?!`)"
    r"|\[(?P<link_text>(?:[^\[\]]|\[[^\[\]]*\])+)\]"
    r"\((?P<href>[^()\s]+)(?:\s+\"(?P<link_title>[^\"]*)\")?\)"
    r"|<(?P<autolink>(?:https?|mailto):[^\s<>]+)>"
    r"|\*\*(?P<strong>[^*\s](?:.*?[^\s])?)\*\*"
    r"|(?<!\w)__(?P<strong_u>[^_\s](?:.*?[^\s])?)__(?!\w)"
    r"|\*(?P<em>[^*\s](?:[^*]*[^*\s])?)\*"
    r"|(?<!\w)_(?P<em_u>[^_\s](?:[^_]*[^_\s])?)_(?!\w)",
    re.DOTALL,
)

# (kind, text, href, title)
InlineToken = tuple[str, str, str | None, str | None]


def iter_inline(text: str) -> Iterator[InlineToken]:
    """Split inline markdown into tokens.

    Kinds are ``text``, ``code``, ``link``, ``strong`` and ``em``. For
    ``link``, ``strong`` and ``em`` the text is still markdown and may
    contain further inline markup.
    """
    position = 0
    for match in _INLINE_RE.finditer(text):
        if match.start() > position:
            yield ("text", text[position : match.start()], None, None)
        position = match.end()

        if match.group("escaped") is not None:
            yield ("text", match.group("escaped"), None, None)
        elif match.group("ticks") is not None:
            yield ("code", _strip_code_span(match.group("code")), None, None)
        elif match.group("link_text") is not None:
            yield ("link", match.group("link_text"), match.group("href"), match.group("link_title"))
        elif match.group("autolink") is not None:
            url = match.group("autolink")
            yield ("link", url, url, None)
        elif match.group("strong") is not None or match.group("strong_u") is not None:
            yield ("strong", match.group("strong") or match.group("strong_u"), None, None)
        else:
            yield ("em", match.group("em") or match.group("em_u"), None, None)

    if position < len(text):
        yield ("text", text[position:], None, None)


def _strip_code_span(content: str) -> str:
    content = content.replace("\n", " ")
    if len(content) > 2 and content.startswith(" ") and content.endswith(" ") and content.strip():
        return content[1:-1]
    return content


def plain_text(text: str) -> str:
    """Return ``text`` with inline markup removed."""
    parts: list[str] = []
    for kind, value, _href, _title in iter_inline(text):
        if kind in {"text", "code"}:
            parts.append(value)
        else:
            parts.append(plain_text(value))
    return "".join(parts)


def render_inline(soup: BeautifulSoup, text: str) -> list[PageElement]:
    """Build HTML nodes for inline markdown."""
    nodes: list[PageElement] = []
    for kind, value, href, title in iter_inline(text):
        if kind == "text":
            nodes.append(NavigableString(value))
            continue

        if kind == "code":
            tag = soup.new_tag("code")
            tag.string = value
        elif kind == "link":
            tag = soup.new_tag("a", attrs={"href": href})
            if title:
                tag["title"] = title
            tag.extend(render_inline(soup, value))
        else:
            tag = soup.new_tag("strong" if kind == "strong" else "em")
            tag.extend(render_inline(soup, value))
        nodes.append(tag)
    return nodes
