"""Test setup for cheatpage."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def cheatsheet_path() -> Path:
    """Path to the sample Gleam/Elixir cheatsheet page."""
    return FIXTURES / "cheatsheet.md"


@pytest.fixture
def cheatsheet_text(cheatsheet_path: Path) -> str:
    """Contents of the sample cheatsheet page."""
    return cheatsheet_path.read_text(encoding="utf-8")


@pytest.fixture
def page() -> str:
    """Minimal front matter for building pages inline in tests."""
    return "---\nlayout: page\ntitle: Test page\n---\n"
