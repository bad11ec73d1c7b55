"""Table of contents models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TocEntry(BaseModel):
    """A heading's navigation entry.

    Attributes:
        anchor_id: Unique id placed on the heading element.
        text: Heading text with inline markup removed.
        level: Heading level, 1 to 6.
    """

    model_config = ConfigDict(frozen=True)

    anchor_id: str
    text: str
    level: int = Field(..., ge=1, le=6)
