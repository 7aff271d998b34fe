"""Theme picker with a live preview."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from rich.text import Text
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, OptionList, Static
from textual.widgets.option_list import Option

from textsift.highlight import render_match
from textsift.models import MatchedLine

if TYPE_CHECKING:
    from textual.app import ComposeResult
    from textual.binding import BindingType

_SAMPLE = [
    MatchedLine(line_number=3, content="2024-01-15 ERROR: Connection failed", matched_keywords=["error"]),
    MatchedLine(line_number=8, content="retry timeout after error", matched_keywords=["timeout", "error"]),
]


class ThemeDialog(ModalScreen[str | None]):
    """Apply each highlighted theme immediately; Escape puts the old one back."""

    DEFAULT_CSS = """
    ThemeDialog {
        align: center middle;
    }

    ThemeDialog > Vertical {
        width: 90;
        height: 20;
        background: $surface;
        border: tall $accent;
        padding: 1 2;
    }

    ThemeDialog Horizontal {
        height: 1fr;
    }

    ThemeDialog #theme-list {
        width: 30;
    }

    ThemeDialog #theme-sample {
        width: 1fr;
        padding: 0 1;
        background: $panel;
    }

    ThemeDialog .hint {
        color: $text-muted;
        margin-top: 1;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, current_theme: str) -> None:
        super().__init__()
        self._original = current_theme

    def compose(self) -> ComposeResult:
        sample = Text("\n").join(render_match(m, 2) for m in _SAMPLE)
        with Vertical():
            with Horizontal():
                yield OptionList(*(Option(name, id=name) for name in sorted(self.app.available_themes)), id="theme-list")
                yield Static(sample, id="theme-sample")
            yield Label(f"Current: {self._original}. Enter keeps the highlighted theme, Escape restores", classes="hint")

    def on_mount(self) -> None:
        ol = self.query_one("#theme-list", OptionList)
        names = sorted(self.app.available_themes)
        if self._original in names:
            ol.highlighted = names.index(self._original)
        ol.focus()

    def on_option_list_option_highlighted(self, event: OptionList.OptionHighlighted) -> None:
        name = event.option.id
        if name in self.app.available_themes:
            self.app.theme = name

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.dismiss(event.option.id)

    def action_cancel(self) -> None:
        self.app.theme = self._original
        self.dismiss(None)
