"""Rich rendering of matched lines with keyword highlights."""

from __future__ import annotations

from rich.style import Style
from rich.text import Text

from textsift.models import MatchedLine

KEYWORD_STYLE = Style(color="blue", bgcolor="grey23", bold=True)
CHIP_STYLE = Style(color="blue", bgcolor="grey15")
_LINENO_STYLE = Style(dim=True)


def highlight_keywords(content: str, keywords: list[str]) -> Text:
    """Style the first case-insensitive occurrence of each keyword in content."""
    text = Text(content)
    folded, offsets = _fold_with_offsets(content)
    for keyword in dict.fromkeys(keywords):
        needle = keyword.casefold()
        if not needle:
            continue
        pos = folded.find(needle)
        if pos >= 0:
            text.stylize(KEYWORD_STYLE, offsets[pos], offsets[pos + len(needle) - 1] + 1)
    return text


def _fold_with_offsets(content: str) -> tuple[str, list[int]]:
    """Casefold content, mapping each folded character back to its source index.

    Folding can expand a character ("ß" -> "ss"), so positions in the folded
    string do not line up with content.
    """
    parts: list[str] = []
    offsets: list[int] = []
    for i, char in enumerate(content):
        folded = char.casefold()
        parts.append(folded)
        offsets.extend([i] * len(folded))
    return "".join(parts), offsets


def keyword_chips(keywords: list[str]) -> Text:
    """Render the attribution list as space-separated tags."""
    text = Text()
    for i, keyword in enumerate(dict.fromkeys(keywords)):
        if i > 0:
            text.append(" ")
        text.append(f" {keyword} ", style=CHIP_STYLE)
    return text


def render_match(match: MatchedLine, lineno_width: int = 6) -> Text:
    """Render one result row: line number, highlighted content, keyword tags."""
    text = Text()
    text.append(f"{match.line_number:>{lineno_width}} ", style=_LINENO_STYLE)
    text.append_text(highlight_keywords(match.content, match.matched_keywords))
    if match.matched_keywords:
        text.append("  ")
        text.append_text(keyword_chips(match.matched_keywords))
    return text
