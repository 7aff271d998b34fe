"""Export matched lines as text or CSV."""

from __future__ import annotations

import csv
import io
import os
import stat
import tempfile
from datetime import UTC, datetime
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from textsift.models import MatchedLine


class ExportFormat(StrEnum):
    """Supported export formats."""

    PLAIN = "plain"
    NUMBERED = "numbered"
    CSV = "csv"


EXPORT_LABELS: dict[ExportFormat, str] = {
    ExportFormat.PLAIN: "Plain text",
    ExportFormat.NUMBERED: "With line numbers",
    ExportFormat.CSV: "CSV",
}

CSV_HEADER = "lineNumber,content,matchedKeywords"


def _format_plain(matches: list[MatchedLine]) -> str:
    return "\n".join(m.content for m in matches)


def _format_numbered(matches: list[MatchedLine]) -> str:
    return "\n".join(f"{m.line_number}: {m.content}" for m in matches)


def _format_csv(matches: list[MatchedLine]) -> str:
    """Header plus one row per match; text columns are always quoted."""
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    for m in matches:
        writer.writerow([m.line_number, m.content, ";".join(m.matched_keywords)])
    rows = buf.getvalue().removesuffix("\n")
    return f"{CSV_HEADER}\n{rows}"


_FORMATTERS: dict[ExportFormat, Callable[[list[MatchedLine]], str]] = {
    ExportFormat.PLAIN: _format_plain,
    ExportFormat.NUMBERED: _format_numbered,
    ExportFormat.CSV: _format_csv,
}


def format_matches(matches: list[MatchedLine], fmt: ExportFormat) -> str:
    """Render matches as a single string in the given format."""
    return _FORMATTERS[fmt](matches)


def export_matches(matches: list[MatchedLine], fmt: ExportFormat, output_path: Path) -> int:
    """Write formatted matches to output_path. Returns the number of lines written.

    The file is written to a temporary sibling and moved into place, so a
    failed export never leaves a partial file behind.
    """
    content = format_matches(matches, fmt)
    mode = _target_mode(output_path)
    fd, tmp = tempfile.mkstemp(dir=output_path.parent, prefix=f".{output_path.name}.")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            os.fchmod(f.fileno(), mode)
            f.write(content)
        os.replace(tmp, output_path)
    except BaseException:
        os.unlink(tmp)
        raise
    return len(matches)


def _target_mode(path: Path) -> int:
    """Permissions for the exported file: kept from an existing file, else 0o666 minus umask."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def default_export_name(fmt: ExportFormat, now: datetime | None = None) -> str:
    """Suggested output file name for an export."""
    ts = (now or datetime.now(tz=UTC)).strftime("%Y%m%d-%H%M%S")
    suffix = "csv" if fmt == ExportFormat.CSV else "txt"
    return f"textsift-export-{ts}.{suffix}"
