"""CLI entry point for textsift."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Annotated

import typer

from textsift.reader import is_pipe, read_stdin, read_text

app = typer.Typer(add_completion=False)


def _reattach_tty() -> None:
    """Point fd 0 at /dev/tty so Textual can read the keyboard after a pipe."""
    tty_fd = os.open("/dev/tty", os.O_RDONLY)
    os.dup2(tty_fd, sys.stdin.fileno())
    os.close(tty_fd)
    sys.stdin = os.fdopen(0)


@app.command()
def run(
    file: Annotated[Path | None, typer.Argument(help="Text file to load")] = None,
) -> None:
    """Filter the lines of a text by keyword rules in a terminal UI."""
    if file is not None and not file.is_file():
        typer.echo(f"Error: {file} is not a file")
        raise typer.Exit(1)

    if file is not None:
        try:
            text = read_text(file)
        except (OSError, UnicodeDecodeError) as e:
            typer.echo(f"Error: cannot read {file}: {e}")
            raise typer.Exit(1) from e
        source = str(file)
    elif is_pipe():
        text = read_stdin()
        _reattach_tty()
        source = "stdin"
    else:
        text = ""
        source = ""

    from textsift.app import TextSiftApp  # noqa: PLC0415

    TextSiftApp(text=text, source=source).run()


def main() -> None:
    """Entry point for the CLI."""
    app()
