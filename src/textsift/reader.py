"""Source text loading (file, async file, stdin)."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import aiofiles

if TYPE_CHECKING:
    from pathlib import Path


def read_text(path: Path) -> str:
    """Read a whole file as UTF-8 text.

    Raises OSError or UnicodeDecodeError; callers report these and keep
    their current text.
    """
    return path.read_text(encoding="utf-8")


async def read_text_async(path: Path) -> str:
    """Read a whole file as UTF-8 text without blocking the event loop."""
    async with aiofiles.open(path, encoding="utf-8") as f:
        return await f.read()


def is_pipe() -> bool:
    """Check if stdin is a pipe (not a terminal)."""
    return not sys.stdin.isatty()


def read_stdin() -> str:
    """Read all of stdin."""
    return sys.stdin.read()
