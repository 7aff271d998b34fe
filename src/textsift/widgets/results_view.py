"""Matched line list."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from rich.text import Text
from textual.binding import Binding
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from textsift.highlight import render_match

if TYPE_CHECKING:
    from textual.binding import BindingType

    from textsift.models import MatchedLine

_EMPTY_HINT = "No results yet. Enter text and keyword rules, then press Ctrl+R to filter."


class ResultsView(OptionList):
    """Scrollable list of matched lines with highlighted keywords."""

    DEFAULT_CSS = """
    ResultsView {
        height: 1fr;
        border: none;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("c", "copy_line", "Copy"),
        Binding("y", "copy_line", "Copy", show=False),
    ]

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._matches: list[MatchedLine] = []

    @property
    def matches(self) -> list[MatchedLine]:
        return self._matches

    def on_mount(self) -> None:
        self.set_matches([])

    def set_matches(self, matches: list[MatchedLine]) -> None:
        """Replace the displayed results."""
        self._matches = matches
        self.clear_options()
        if not matches:
            self.add_option(Option(Text(_EMPTY_HINT, style="dim italic"), disabled=True))
            return
        width = len(str(matches[-1].line_number))
        self.add_options(Option(render_match(m, width)) for m in matches)
        self.highlighted = 0

    @property
    def current(self) -> MatchedLine | None:
        """The highlighted match, if any."""
        idx = self.highlighted
        if idx is None or not 0 <= idx < len(self._matches):
            return None
        return self._matches[idx]

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        self.action_copy_line()

    def action_copy_line(self) -> None:
        """Copy the highlighted line's original content to the clipboard."""
        match = self.current
        if match is None:
            return
        self.app.copy_to_clipboard(match.content)
        self.app.notify(f"Copied line {match.line_number}")
