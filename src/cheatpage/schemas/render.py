"""Render output models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from cheatpage.schemas.toc import TocEntry


class WarningCode(str, Enum):
    """Kinds of recoverable rendering problems."""

    RAGGED_TABLE_ROW = "ragged-table-row"
    UNKNOWN_CODE_LANGUAGE = "unknown-code-language"


class RenderWarning(BaseModel):
    """A problem the renderer recovered from."""

    code: WarningCode
    message: str
    line: int | None = None

    def __str__(self) -> str:
        location = f"line {self.line}: " if self.line is not None else ""
        return f"{location}{self.message} [{self.code.value}]"


class RenderResult(BaseModel):
    """Final render output."""

    html: str
    toc: list[TocEntry] = Field(default_factory=list)
    warnings: list[RenderWarning] = Field(default_factory=list)
    summary: str = ""
