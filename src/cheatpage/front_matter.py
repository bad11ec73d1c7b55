"""Split and validate the YAML front-matter block."""

from __future__ import annotations

import re
from typing import Iterable

import yaml
from pydantic import ValidationError

from cheatpage.config import CHEATPAGE_REQUIRED_FRONT_MATTER_KEYS
from cheatpage.exceptions import FrontMatterError
from cheatpage.schemas import FrontMatter

_OPEN_RE = re.compile(r"^---[ \t]*$")
_CLOSE_RE = re.compile(r"^(?:---|\.\.\.)[ \t]*$")


def split_front_matter(
    text: str,
    *,
    required_keys: Iterable[str] = CHEATPAGE_REQUIRED_FRONT_MATTER_KEYS,
) -> tuple[FrontMatter, str, int]:
    """Separate front matter from the markdown body.

    Returns:
        Tuple of (front matter, body text, number of lines consumed before
        the body) so block line numbers can refer to the source file.

    Raises:
        FrontMatterError: If the block is missing, unterminated, not a
            mapping, or lacks a required key.
    """
    lines = text.lstrip("\ufeff").splitlines(keepends=True)
    if not lines or not _OPEN_RE.match(lines[0].rstrip("\r\n")):
        raise FrontMatterError("Missing front-matter block: input must start with '---'")

    closing = None
    for index in range(1, len(lines)):
        if _CLOSE_RE.match(lines[index].rstrip("\r\n")):
            closing = index
            break
    if closing is None:
        raise FrontMatterError("Unterminated front-matter block: no closing '---' line")

    raw = "".join(lines[1:closing])
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"Malformed front matter: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterError("Front matter must be a mapping of keys to values")

    for key in required_keys:
        value = data.get(key)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise FrontMatterError(f"Front matter is missing required key '{key}'")
        if isinstance(value, (dict, list)):
            raise FrontMatterError(f"Front matter key '{key}' must be a scalar value")

    normalized = {str(key): value for key, value in data.items()}
    for key in ("layout", "title"):
        if key in normalized and not isinstance(normalized[key], str):
            normalized[key] = str(normalized[key])

    try:
        front_matter = FrontMatter.model_validate(normalized)
    except ValidationError as exc:
        raise FrontMatterError(f"Invalid front matter: {exc}") from exc

    body = "".join(lines[closing + 1 :])
    return front_matter, body, closing + 1
