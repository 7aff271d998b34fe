"""Modal dialog for choosing a text file to load."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Label

if TYPE_CHECKING:
    from textual.app import ComposeResult
    from textual.binding import BindingType


class OpenDialog(ModalScreen[Path | None]):
    """Ask for the path of a UTF-8 text file."""

    DEFAULT_CSS = """
    OpenDialog {
        align: center middle;
    }

    OpenDialog > Vertical {
        width: 70;
        height: auto;
        background: $surface;
        border: tall $accent;
        padding: 1 2;
    }

    OpenDialog > Vertical > .title {
        margin-bottom: 1;
        text-style: bold;
    }

    OpenDialog > Vertical > Input {
        width: 100%;
    }

    OpenDialog > Vertical > .hint {
        color: $text-muted;
        margin-top: 1;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        ("escape", "cancel", "Cancel"),
    ]

    def __init__(self, initial: str = "") -> None:
        super().__init__()
        self._initial = initial

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label("Open text file", classes="title")
            yield Input(value=self._initial, placeholder="file path...", id="path-input")
            yield Label("Enter to open, Escape to cancel", classes="hint")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        path = event.value.strip()
        if not path:
            self.notify("No file path", severity="error")
            return
        self.dismiss(Path(path).expanduser())

    def action_cancel(self) -> None:
        self.dismiss(None)
