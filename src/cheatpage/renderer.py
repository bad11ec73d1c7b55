"""Render a parsed document as HTML."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass, field

from cheatpage.config import CHEATPAGE_KNOWN_LANGUAGES, CHEATPAGE_TOC_MAX_LEVEL
from cheatpage.html_utils import BeautifulSoup, Doctype, Tag, new_soup, parse_fragment
from cheatpage.inline import render_inline
from cheatpage.schemas import (
    Block,
    CodeBlock,
    Document,
    FrontMatter,
    Heading,
    ListBlock,
    Paragraph,
    RenderWarning,
    Table,
    TocEntry,
    TocMarker,
    WarningCode,
)
from cheatpage.toc import build_toc_nav


PLAINTEXT_LANGUAGE = "plaintext"


@dataclass
class _RenderContext:
    soup: BeautifulSoup
    toc_entries: list[TocEntry]
    include_toc: bool
    toc_max_level: int
    known_languages: Collection[str]
    warnings: list[RenderWarning] = field(default_factory=list)
    heading_index: int = 0


def render_document(
    document: Document,
    *,
    toc_entries: list[TocEntry],
    include_toc: bool = True,
    toc_max_level: int = CHEATPAGE_TOC_MAX_LEVEL,
    known_languages: Collection[str] = CHEATPAGE_KNOWN_LANGUAGES,
) -> tuple[str, list[RenderWarning]]:
    """Render every block of ``document`` into an HTML fragment.

    Args:
        document: The parsed page.
        toc_entries: One entry per heading, in document order; supplies the
            heading ids.
        include_toc: Whether TOC markers produce a navigation list.
        toc_max_level: Deepest heading level listed in the TOC.
        known_languages: Code languages passed to the highlighter as-is.

    Returns:
        Tuple of (html, warnings). Warnings describe problems that were
        rendered around rather than treated as errors.
    """
    heading_count = len(document.headings())
    if len(toc_entries) != heading_count:
        raise ValueError(
            f"Expected {heading_count} TOC entries for the document headings, got {len(toc_entries)}"
        )

    context = _RenderContext(
        soup=new_soup(),
        toc_entries=toc_entries,
        include_toc=include_toc,
        toc_max_level=toc_max_level,
        known_languages={language.lower() for language in known_languages},
    )

    parts: list[str] = []
    for block in document.blocks:
        element = _render_block(block, context)
        if element is not None:
            parts.append(str(element))

    html = "\n".join(parts)
    return (html + "\n" if html else ""), context.warnings


def _render_block(block: Block, context: _RenderContext) -> Tag | None:
    if isinstance(block, Heading):
        return _render_heading(block, context)
    if isinstance(block, Paragraph):
        paragraph = context.soup.new_tag("p")
        paragraph.extend(render_inline(context.soup, block.text))
        return paragraph
    if isinstance(block, ListBlock):
        return _render_list(block, context)
    if isinstance(block, Table):
        return _render_table(block, context)
    if isinstance(block, CodeBlock):
        return _render_code(block, context)
    if isinstance(block, TocMarker):
        if not context.include_toc:
            return None
        return build_toc_nav(context.soup, context.toc_entries, max_level=context.toc_max_level)
    raise TypeError(f"Unsupported block type: {type(block).__name__}")


def _render_heading(block: Heading, context: _RenderContext) -> Tag:
    entry = context.toc_entries[context.heading_index]
    context.heading_index += 1
    heading = context.soup.new_tag(f"h{block.level}", attrs={"id": entry.anchor_id})
    heading.extend(render_inline(context.soup, block.text))
    return heading


def _render_list(block: ListBlock, context: _RenderContext) -> Tag:
    soup = context.soup
    list_tag = soup.new_tag("ol" if block.ordered else "ul")
    if block.ordered and block.start != 1:
        list_tag["start"] = str(block.start)
    for item in block.items:
        item_tag = soup.new_tag("li")
        item_tag.extend(render_inline(soup, item.text))
        for child in item.children:
            item_tag.append(_render_list(child, context))
        list_tag.append(item_tag)
    return list_tag


def _render_table(block: Table, context: _RenderContext) -> Tag:
    soup = context.soup
    table = soup.new_tag("table")

    thead = soup.new_tag("thead")
    header_row = soup.new_tag("tr")
    for text in block.header:
        cell = soup.new_tag("th")
        cell.extend(render_inline(soup, text))
        header_row.append(cell)
    thead.append(header_row)
    table.append(thead)

    if block.rows:
        tbody = soup.new_tag("tbody")
        for offset, row in enumerate(block.rows):
            if len(row) != len(block.header):
                context.warnings.append(
                    RenderWarning(
                        code=WarningCode.RAGGED_TABLE_ROW,
                        message=(
                            f"Table row {offset + 1} has {len(row)} cells, "
                            f"header has {len(block.header)}"
                        ),
                        line=_row_line(block, offset),
                    )
                )
            row_tag = soup.new_tag("tr")
            for text in row:
                cell = soup.new_tag("td")
                cell.extend(render_inline(soup, text))
                row_tag.append(cell)
            tbody.append(row_tag)
        table.append(tbody)

    return table


def _row_line(block: Table, offset: int) -> int | None:
    if block.body_line is None:
        return None
    return block.body_line + offset


def _render_code(block: CodeBlock, context: _RenderContext) -> Tag:
    soup = context.soup
    pre = soup.new_tag("pre")
    code = soup.new_tag("code")
    if block.language:
        if block.language.lower() in context.known_languages:
            code["class"] = f"language-{block.language}"
        else:
            code["class"] = f"language-{PLAINTEXT_LANGUAGE}"
            context.warnings.append(
                RenderWarning(
                    code=WarningCode.UNKNOWN_CODE_LANGUAGE,
                    message=f"Unknown code language '{block.language}', rendered as plain text",
                    line=block.line,
                )
            )
        code["data-lang"] = block.language
    code.string = block.text
    pre.append(code)
    return pre


def wrap_page(fragment: str, front_matter: FrontMatter) -> str:
    """Wrap an HTML fragment in a standalone page titled from the front matter."""
    soup = new_soup()
    soup.append(Doctype("html"))

    html = soup.new_tag("html")
    head = soup.new_tag("head")
    head.append("\n")
    head.append(soup.new_tag("meta", attrs={"charset": "utf-8"}))
    head.append("\n")
    title = soup.new_tag("title")
    title.string = front_matter.title
    head.append(title)
    head.append("\n")

    body = soup.new_tag("body", attrs={"data-layout": front_matter.layout})
    body.append("\n")
    body.extend(parse_fragment(fragment))

    html.append("\n")
    html.append(head)
    html.append("\n")
    html.append(body)
    html.append("\n")
    soup.append(html)
    soup.append("\n")
    return str(soup)
