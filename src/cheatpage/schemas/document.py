"""Document and block models."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class FrontMatter(BaseModel):
    """Page metadata from the YAML block at the top of the source file.

    Attributes:
        layout: Page layout name (e.g. "page").
        title: Page title, used for the HTML ``<title>`` in full-page mode.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    layout: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)

    def extras(self) -> dict[str, Any]:
        """Return keys other than layout and title."""
        return dict(self.model_extra or {})


class Heading(BaseModel):
    """An ATX heading."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=6)
    text: str
    line: int | None = None


class Paragraph(BaseModel):
    """A run of non-blank text lines."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["paragraph"] = "paragraph"
    text: str
    line: int | None = None


class ListItem(BaseModel):
    """A list item with optional nested list."""

    model_config = ConfigDict(frozen=True)

    text: str
    children: tuple[ListBlock, ...] = ()


class ListBlock(BaseModel):
    """A bullet or ordered list."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["list"] = "list"
    ordered: bool = False
    start: int = 1
    items: tuple[ListItem, ...] = ()
    line: int | None = None


class Table(BaseModel):
    """A pipe table. Rows may be ragged; the renderer reports them.

    ``body_line`` is the source line of the first data row; rows follow on
    consecutive lines.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["table"] = "table"
    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()
    line: int | None = None
    body_line: int | None = None


class CodeBlock(BaseModel):
    """A fenced code block. ``text`` is kept exactly as written."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["code"] = "code"
    language: str | None = None
    text: str
    line: int | None = None


class TocMarker(BaseModel):
    """Where the generated table of contents goes."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["toc"] = "toc"
    line: int | None = None


Block = Annotated[
    Union[Heading, Paragraph, ListBlock, Table, CodeBlock, TocMarker],
    Field(discriminator="kind"),
]


class Document(BaseModel):
    """A parsed page: front matter plus blocks in source order."""

    model_config = ConfigDict(frozen=True)

    front_matter: FrontMatter
    blocks: tuple[Block, ...] = ()

    def headings(self) -> list[Heading]:
        """Heading blocks in document order."""
        return [block for block in self.blocks if isinstance(block, Heading)]


ListItem.model_rebuild()
