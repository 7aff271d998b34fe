"""Shared test fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE_LINES = [
    "2024-01-15 ERROR: Connection failed",
    "2024-01-15 INFO: Server started",
    "",
    "2024-01-15 DEBUG: Processing request",
    "   ",
    "2024-01-15 ERROR: Timeout occurred",
    "  2024-01-15 INFO: Request completed  ",
    "2024-01-15 WARN: High memory usage",
]

SAMPLE_TEXT = "\n".join(SAMPLE_LINES)


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT


@pytest.fixture
def sample_text_file(tmp_path: Path) -> Path:
    """Create a temporary text file with sample content."""
    text_file = tmp_path / "sample.txt"
    text_file.write_text(SAMPLE_TEXT + "\n", encoding="utf-8")
    return text_file


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep tests away from the real user config directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("TEXTSIFT_CONFIG_DIR", str(config_dir))
    return config_dir
