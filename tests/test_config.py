"""Tests for environment configuration."""

from __future__ import annotations

import importlib
from collections.abc import Iterator

import pytest

from cheatpage import config


@pytest.fixture
def reload_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Reload the config module, then restore it from the real environment."""
    yield
    monkeypatch.undo()
    importlib.reload(config)


class TestClampHeadingLevel:
    """Tests for clamp_heading_level function."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0, 1), (-3, 1), (1, 1), (3, 3), (6, 6), (9, 6)],
    )
    def test_clamps_to_heading_range(self, value: int, expected: int) -> None:
        """Levels outside 1..6 snap to the nearest bound."""
        assert config.clamp_heading_level(value) == expected


class TestTocMaxLevel:
    """Tests for the CHEATPAGE_TOC_MAX_LEVEL setting."""

    def test_out_of_range_env_is_clamped(
        self, monkeypatch: pytest.MonkeyPatch, reload_config: None
    ) -> None:
        """An environment value above 6 becomes 6."""
        monkeypatch.setenv("CHEATPAGE_TOC_MAX_LEVEL", "9")

        assert importlib.reload(config).CHEATPAGE_TOC_MAX_LEVEL == 6

    def test_zero_env_is_clamped(self, monkeypatch: pytest.MonkeyPatch, reload_config: None) -> None:
        """An environment value below 1 becomes 1."""
        monkeypatch.setenv("CHEATPAGE_TOC_MAX_LEVEL", "0")

        assert importlib.reload(config).CHEATPAGE_TOC_MAX_LEVEL == 1
