"""Bottom status bar."""

from __future__ import annotations

from rich.text import Text
from textual.widget import Widget


class StatusBar(Widget):
    """Bottom status bar showing match counts and source info."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        dock: bottom;
        background: #264f78;
        color: #ffffff;
        padding: 0 1;
    }
    """

    def __init__(self, source: str = "", id: str | None = None) -> None:
        super().__init__(id=id)
        self._total: int = 0
        self._matched: int | None = None
        self._source = source

    def set_source(self, source: str) -> None:
        self._source = source
        self.refresh()

    def update_counts(self, total: int, matched: int | None = None) -> None:
        """Update line counts. matched is None until a filter has run."""
        self._total = total
        self._matched = matched
        self.refresh()

    def render(self) -> Text:
        text = Text()
        text.append(f"{self._total} lines")
        if self._matched is not None:
            text.append(f"  {self._matched} matched", style="bold")

        right_part = self._source
        if right_part:
            used = len(text.plain)
            padding = max(1, self.size.width - used - len(right_part))
            text.append(" " * padding)
            text.append(right_part)

        return text
