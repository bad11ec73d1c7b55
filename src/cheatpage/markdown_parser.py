"""Parse a markdown body into blocks."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from cheatpage.schemas import (
    Block,
    CodeBlock,
    Heading,
    ListBlock,
    ListItem,
    Paragraph,
    Table,
    TocMarker,
)

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^(?P<indent> {0,3})(?P<fence>`{3,}|~{3,})[ \t]*(?P<info>.*?)[ \t]*$")
_HEADING_RE = re.compile(r"^ {0,3}(?P<hashes>#{1,6})(?:[ \t]+(?P<text>.*?))?[ \t]*$")
_CLOSING_HASHES_RE = re.compile(r"(?:^|[ \t]+)#+$")
_LIST_ITEM_RE = re.compile(r"^(?P<indent>[ \t]*)(?P<marker>[-*+]|\d{1,9}[.)])(?:[ \t]+(?P<text>.*)|$)")
_TABLE_SEPARATOR_RE = re.compile(r"^\|?[ \t]*:?-+:?[ \t]*(?:\|[ \t]*:?-+:?[ \t]*)*\|?$")
_THEMATIC_BREAK_RE = re.compile(r"^ {0,3}([-*_])(?:[ \t]*\1){2,}[ \t]*$")
_TOC_LINES = {"[toc]", "{:toc}"}
_KRAMDOWN_TOC_ITEM_RE = re.compile(r"^[ \t]*(?:[-*+]|\d+[.)])[ \t]+.+$")
_TAB_WIDTH = 4


@dataclass
class _RawItem:
    indent: int
    ordered: bool
    number: int
    lines: list[str] = field(default_factory=list)


def parse_markdown(body: str, *, line_offset: int = 0) -> list[Block]:
    """Parse markdown text into a list of blocks.

    Args:
        body: Markdown text without front matter.
        line_offset: Number of source lines preceding ``body``. Block line
            numbers are 1-based positions in the original file.
    """
    lines = body.splitlines()
    blocks: list[Block] = []
    index = 0

    while index < len(lines):
        line = lines[index]
        stripped = line.strip()
        line_no = line_offset + index + 1

        if not stripped:
            index += 1
            continue

        if _is_toc_marker(lines, index):
            blocks.append(TocMarker(line=line_no))
            index += 1 if stripped.lower() in _TOC_LINES else 2
            continue

        fence = _FENCE_RE.match(line)
        if fence:
            block, index = _parse_fenced_code(lines, index, fence, line_no)
            blocks.append(block)
            continue

        heading = _HEADING_RE.match(line)
        if heading:
            blocks.append(_make_heading(heading, line_no))
            index += 1
            continue

        if _THEMATIC_BREAK_RE.match(line):
            logger.debug("Skipping thematic break on line %d", line_no)
            index += 1
            continue

        if _is_table_start(lines, index):
            block, index = _parse_table(lines, index, line_no)
            blocks.append(block)
            continue

        if _LIST_ITEM_RE.match(line):
            list_blocks, index = _parse_list(lines, index, line_no)
            blocks.extend(list_blocks)
            continue

        block, index = _parse_paragraph(lines, index, line_no)
        blocks.append(block)

    return blocks


def _is_toc_marker(lines: list[str], index: int) -> bool:
    stripped = lines[index].strip()
    if stripped.lower() in _TOC_LINES:
        return True
    # kramdown: "* TOC" followed by "{:toc}"
    if index + 1 < len(lines) and lines[index + 1].strip().lower() == "{:toc}":
        return bool(_KRAMDOWN_TOC_ITEM_RE.match(lines[index]))
    return False


def _is_block_start(lines: list[str], index: int) -> bool:
    line = lines[index]
    return bool(
        _FENCE_RE.match(line)
        or _HEADING_RE.match(line)
        or _THEMATIC_BREAK_RE.match(line)
        or _is_toc_marker(lines, index)
        or _is_table_start(lines, index)
    )


def _make_heading(match: re.Match[str], line_no: int) -> Heading:
    text = match.group("text") or ""
    text = _CLOSING_HASHES_RE.sub("", text).strip()
    return Heading(level=len(match.group("hashes")), text=text, line=line_no)


def _parse_fenced_code(
    lines: list[str], index: int, fence: re.Match[str], line_no: int
) -> tuple[CodeBlock, int]:
    marker = fence.group("fence")
    indent = len(fence.group("indent"))
    info = fence.group("info")
    if marker[0] == "`" and "`" in info:
        # Backtick fences cannot carry backticks in the info string.
        info = info.split("`", 1)[0].strip()
    language = info.split()[0] if info else None

    content: list[str] = []
    index += 1
    closed = False
    while index < len(lines):
        line = lines[index]
        candidate = line.strip()
        if (
            candidate
            and set(candidate) == {marker[0]}
            and len(candidate) >= len(marker)
            and len(line) - len(line.lstrip(" ")) <= 3
        ):
            closed = True
            index += 1
            break
        content.append(_remove_indent(line, indent))
        index += 1

    if not closed:
        logger.debug("Code fence opened on line %d runs to end of input", line_no)

    return CodeBlock(language=language, text="\n".join(content), line=line_no), index


def _remove_indent(line: str, width: int) -> str:
    removed = 0
    while removed < width and line[removed : removed + 1] == " ":
        removed += 1
    return line[removed:]


def _is_table_start(lines: list[str], index: int) -> bool:
    stripped = lines[index].strip()
    if stripped.startswith("|"):
        return True
    if "|" in stripped and index + 1 < len(lines):
        return bool(_TABLE_SEPARATOR_RE.match(lines[index + 1].strip()))
    return False


def _parse_table(lines: list[str], index: int, line_no: int) -> tuple[Table, int]:
    start = index
    header = split_table_row(lines[index])
    index += 1
    if index < len(lines) and _TABLE_SEPARATOR_RE.match(lines[index].strip()):
        index += 1
    body_line = line_no + (index - start)

    rows: list[tuple[str, ...]] = []
    while index < len(lines):
        line = lines[index]
        stripped = line.strip()
        if not stripped or "|" not in stripped:
            break
        if _FENCE_RE.match(line) or _HEADING_RE.match(line):
            break
        rows.append(tuple(split_table_row(line)))
        index += 1

    return Table(header=tuple(header), rows=tuple(rows), line=line_no, body_line=body_line), index


def split_table_row(line: str) -> list[str]:
    """Split a pipe-table row into cell texts.

    Pipes escaped as ``\\|`` or inside code spans do not split cells.
    """
    row = line.strip()
    if row.startswith("|"):
        row = row[1:]
    if row.endswith("|") and not row.endswith("\\|"):
        row = row[:-1]

    cells: list[str] = []
    current: list[str] = []
    ticks = 0
    position = 0
    while position < len(row):
        char = row[position]
        if char == "\\" and row[position + 1 : position + 2] == "|":
            current.append("|")
            position += 2
            continue
        if char == "`":
            rest = row[position:]
            run = len(rest) - len(rest.lstrip("`"))
            run_text = row[position : position + run]
            if ticks == 0:
                closing = row.find(run_text, position + run)
                if closing != -1:
                    ticks = run
            elif run == ticks:
                ticks = 0
            current.append(run_text)
            position += run
            continue
        if char == "|" and ticks == 0:
            cells.append("".join(current).strip())
            current = []
            position += 1
            continue
        current.append(char)
        position += 1

    cells.append("".join(current).strip())
    return cells


def _indent_width(text: str) -> int:
    return len(text.expandtabs(_TAB_WIDTH)) - len(text.expandtabs(_TAB_WIDTH).lstrip(" "))


def _parse_list(lines: list[str], index: int, line_no: int) -> tuple[list[ListBlock], int]:
    items: list[_RawItem] = []
    base_indent = _indent_width(lines[index])

    while index < len(lines):
        line = lines[index]

        if not line.strip():
            next_index = index + 1
            while next_index < len(lines) and not lines[next_index].strip():
                next_index += 1
            if next_index >= len(lines):
                index = next_index
                break
            following = lines[next_index]
            if _LIST_ITEM_RE.match(following) and _indent_width(following) >= base_indent:
                index = next_index
                continue
            if _indent_width(following) > base_indent and items:
                items[-1].lines.append("")
                index = next_index
                continue
            break

        item = _LIST_ITEM_RE.match(line)
        if item and _indent_width(line) >= base_indent:
            marker = item.group("marker")
            ordered = marker[0].isdigit()
            items.append(
                _RawItem(
                    indent=_indent_width(line),
                    ordered=ordered,
                    number=int(marker[:-1]) if ordered else 1,
                    lines=[(item.group("text") or "").strip()],
                )
            )
            index += 1
            continue

        if item or _is_block_start(lines, index):
            break

        # Continuation or lazy line of the previous item.
        items[-1].lines.append(line.strip())
        index += 1

    blocks: list[ListBlock] = []
    position = 0
    while position < len(items):
        block, position = _build_list(items, position, items[position].indent, line_no)
        blocks.append(block)
    return blocks, index


def _build_list(
    items: list[_RawItem], position: int, indent: int, line_no: int | None
) -> tuple[ListBlock, int]:
    first = items[position]
    entries: list[tuple[str, list[ListBlock]]] = []

    while position < len(items):
        item = items[position]
        if item.indent < indent:
            break
        if item.indent > indent:
            child, position = _build_list(items, position, item.indent, None)
            if entries:
                entries[-1][1].append(child)
            else:
                entries.append(("", [child]))
            continue
        if item.ordered != first.ordered:
            break
        entries.append((_join_item_lines(item.lines), []))
        position += 1

    block = ListBlock(
        ordered=first.ordered,
        start=first.number,
        items=tuple(ListItem(text=text, children=tuple(children)) for text, children in entries),
        line=line_no,
    )
    return block, position


def _join_item_lines(lines: list[str]) -> str:
    while lines and not lines[-1]:
        lines = lines[:-1]
    return "\n".join(lines)


def _parse_paragraph(lines: list[str], index: int, line_no: int) -> tuple[Paragraph, int]:
    collected = [lines[index].strip()]
    index += 1
    while index < len(lines):
        line = lines[index]
        if not line.strip():
            break
        if _is_block_start(lines, index) or _LIST_ITEM_RE.match(line):
            break
        collected.append(line.strip())
        index += 1
    return Paragraph(text="\n".join(collected), line=line_no), index
