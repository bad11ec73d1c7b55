"""cheatpage: render markdown cheatsheet pages into HTML."""

from cheatpage.exceptions import (
    CheatpageError,
    DuplicateAnchorError,
    FrontMatterError,
    InputNotFoundError,
    OutputWriteError,
    ParseError,
)
from cheatpage.pipeline import (
    RenderOptions,
    parse_document,
    render,
    render_file,
    render_text,
)
from cheatpage.schemas import Document, RenderResult, RenderWarning, TocEntry
from cheatpage.toc import build_toc, slugify

__all__ = [
    "CheatpageError",
    "Document",
    "DuplicateAnchorError",
    "FrontMatterError",
    "InputNotFoundError",
    "OutputWriteError",
    "ParseError",
    "RenderOptions",
    "RenderResult",
    "RenderWarning",
    "TocEntry",
    "build_toc",
    "parse_document",
    "render",
    "render_file",
    "render_text",
    "slugify",
]
