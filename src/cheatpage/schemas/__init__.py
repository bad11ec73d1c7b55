"""Shared schemas for cheatpage."""

from cheatpage.schemas.document import (
    Block,
    CodeBlock,
    Document,
    FrontMatter,
    Heading,
    ListBlock,
    ListItem,
    Paragraph,
    Table,
    TocMarker,
)
from cheatpage.schemas.render import RenderResult, RenderWarning, WarningCode
from cheatpage.schemas.toc import TocEntry

__all__ = [
    "Block",
    "CodeBlock",
    "Document",
    "FrontMatter",
    "Heading",
    "ListBlock",
    "ListItem",
    "Paragraph",
    "RenderResult",
    "RenderWarning",
    "Table",
    "TocEntry",
    "TocMarker",
    "WarningCode",
]
