"""Local configuration for cheatpage."""

from __future__ import annotations

import os


DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_TOC_MAX_LEVEL = 6
DEFAULT_REQUIRED_FRONT_MATTER_KEYS = "layout,title"
DEFAULT_KNOWN_LANGUAGES = ",".join(
    (
        "bash",
        "c",
        "console",
        "css",
        "diff",
        "elixir",
        "erlang",
        "gleam",
        "haskell",
        "html",
        "javascript",
        "js",
        "json",
        "markdown",
        "ocaml",
        "plaintext",
        "python",
        "ruby",
        "rust",
        "sh",
        "shell",
        "sql",
        "text",
        "toml",
        "typescript",
        "yaml",
    )
)


def clamp_heading_level(value: int) -> int:
    """Keep a heading level within 1..6."""
    return min(max(value, 1), 6)


def _split_csv(value: str) -> frozenset[str]:
    return frozenset(item.strip().lower() for item in value.split(",") if item.strip())


CHEATPAGE_ENCODING = os.getenv("CHEATPAGE_ENCODING", DEFAULT_ENCODING)
CHEATPAGE_LOG_LEVEL = os.getenv("CHEATPAGE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
CHEATPAGE_TOC_MAX_LEVEL = clamp_heading_level(
    int(os.getenv("CHEATPAGE_TOC_MAX_LEVEL", str(DEFAULT_TOC_MAX_LEVEL)))
)
CHEATPAGE_KNOWN_LANGUAGES = _split_csv(os.getenv("CHEATPAGE_KNOWN_LANGUAGES", DEFAULT_KNOWN_LANGUAGES))
# Keys kept in file order; front-matter errors report the first missing one.
CHEATPAGE_REQUIRED_FRONT_MATTER_KEYS = tuple(
    key.strip()
    for key in os.getenv("CHEATPAGE_REQUIRED_FRONT_MATTER_KEYS", DEFAULT_REQUIRED_FRONT_MATTER_KEYS).split(",")
    if key.strip()
)
