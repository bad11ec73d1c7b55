"""Rendering pipeline: markdown page -> HTML."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from cheatpage.config import CHEATPAGE_KNOWN_LANGUAGES, CHEATPAGE_TOC_MAX_LEVEL
from cheatpage.front_matter import split_front_matter
from cheatpage.loader import load_source, write_output
from cheatpage.markdown_parser import parse_markdown
from cheatpage.renderer import render_document, wrap_page
from cheatpage.schemas import CodeBlock, Document, RenderResult, RenderWarning, TocEntry
from cheatpage.toc import build_toc

logger = logging.getLogger(__name__)


@dataclass
class RenderOptions:
    """Options for page rendering.

    Attributes:
        include_toc: If True, TOC markers in the page become a navigation list.
        full_page: If True, wrap the output in a standalone HTML document.
        disambiguate_anchors: If True, suffix colliding heading anchors;
            otherwise a collision raises DuplicateAnchorError.
        toc_max_level: Deepest heading level listed in the TOC.
        known_languages: Code block languages kept for syntax highlighting.
    """

    include_toc: bool = True
    full_page: bool = False
    disambiguate_anchors: bool = True
    toc_max_level: int = CHEATPAGE_TOC_MAX_LEVEL
    known_languages: frozenset[str] = field(default_factory=lambda: CHEATPAGE_KNOWN_LANGUAGES)


def parse_document(text: str) -> Document:
    """Split front matter and parse the markdown body.

    Raises:
        FrontMatterError: If the front-matter block is missing or invalid.
    """
    front_matter, body, line_offset = split_front_matter(text)
    blocks = parse_markdown(body, line_offset=line_offset)
    return Document(front_matter=front_matter, blocks=tuple(blocks))


def render(document: Document, options: RenderOptions | None = None) -> RenderResult:
    """Build the TOC and render ``document``."""
    opts = options or RenderOptions()

    toc = build_toc(document.headings(), disambiguate=opts.disambiguate_anchors)
    html, warnings = render_document(
        document,
        toc_entries=toc,
        include_toc=opts.include_toc,
        toc_max_level=opts.toc_max_level,
        known_languages=opts.known_languages,
    )
    if opts.full_page:
        html = wrap_page(html, document.front_matter)

    for warning in warnings:
        logger.warning("%s", warning)

    return RenderResult(
        html=html,
        toc=toc,
        warnings=warnings,
        summary=format_summary(document, toc, warnings),
    )


def render_text(text: str, options: RenderOptions | None = None) -> RenderResult:
    """Parse and render markdown source text."""
    return render(parse_document(text), options)


def render_file(
    input_path: Path | str,
    output_path: Path | str | None = None,
    options: RenderOptions | None = None,
) -> RenderResult:
    """Render a markdown file, writing the HTML to ``output_path`` if given.

    ``"-"`` reads stdin or writes stdout. Nothing is written unless the
    whole render succeeds.

    Raises:
        InputNotFoundError: If ``input_path`` does not exist.
        FrontMatterError: If the front-matter block is missing or invalid.
        DuplicateAnchorError: If anchors collide with disambiguation off.
    """
    text = load_source(input_path)
    result = render_text(text, options)
    if output_path is not None:
        write_output(output_path, result.html)
        logger.info("Rendered %s -> %s (%d warnings)", input_path, output_path, len(result.warnings))
    return result


def format_summary(document: Document, toc: list[TocEntry], warnings: list[RenderWarning]) -> str:
    """Describe a rendered page in a few lines."""
    code_blocks = [block for block in document.blocks if isinstance(block, CodeBlock)]
    languages = sorted({block.language for block in code_blocks if block.language})

    summary_lines = [
        f"Title: {document.front_matter.title}",
        f"Layout: {document.front_matter.layout}",
        f"Headings: {len(toc)}",
        f"Blocks: {len(document.blocks)}",
    ]
    code_line = f"Code samples: {len(code_blocks)}"
    if languages:
        code_line += f" ({', '.join(languages)})"
    summary_lines.append(code_line)
    summary_lines.append(f"Warnings: {len(warnings)}")
    return "\n".join(summary_lines)
