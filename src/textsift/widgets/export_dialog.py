"""Modal dialog for exporting matched lines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from textual.containers import Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Input, Label, Select, Static

from textsift.export import EXPORT_LABELS, ExportFormat, default_export_name, format_matches

if TYPE_CHECKING:
    from textual.app import ComposeResult
    from textual.binding import BindingType

    from textsift.models import MatchedLine

_PREVIEW_LINES = 50


@dataclass
class ExportResult:
    """Result from the export dialog."""

    path: str
    fmt: ExportFormat


class ExportDialog(ModalScreen[ExportResult | None]):
    """Dialog for choosing an export format and output file, with a preview."""

    DEFAULT_CSS = """
    ExportDialog {
        align: center middle;
    }

    ExportDialog > Vertical {
        width: 80;
        height: auto;
        max-height: 90%;
        background: $surface;
        border: tall $accent;
        padding: 1 2;
    }

    ExportDialog > Vertical > .title {
        text-style: bold;
    }

    ExportDialog > Vertical > Label {
        margin-top: 1;
    }

    ExportDialog > Vertical > Select {
        width: 100%;
    }

    ExportDialog > Vertical > Input {
        width: 100%;
    }

    ExportDialog > Vertical > VerticalScroll {
        height: 10;
        background: $panel;
    }

    ExportDialog > Vertical > .hint {
        color: $text-muted;
        margin-top: 1;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        ("escape", "cancel", "Cancel"),
    ]

    def __init__(self, matches: list[MatchedLine]) -> None:
        super().__init__()
        self._matches = matches
        self._fmt = ExportFormat.PLAIN
        self._default_path = default_export_name(self._fmt)

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(f"Export {len(self._matches)} matched lines", classes="title")

            yield Label("Format:")
            yield Select[ExportFormat](
                [(EXPORT_LABELS[fmt], fmt) for fmt in ExportFormat],
                value=self._fmt,
                allow_blank=False,
                id="format-select",
            )

            yield Label("Preview:")
            with VerticalScroll():
                yield Static(self._preview(), markup=False, id="preview")

            yield Label("Output file:")
            yield Input(value=self._default_path, placeholder="file path...", id="path-input")

            yield Label("Enter to export, Escape to cancel", classes="hint")

    def on_mount(self) -> None:
        self.query_one("#path-input", Input).focus()

    def _preview(self) -> str:
        return format_matches(self._matches[:_PREVIEW_LINES], self._fmt)

    def on_select_changed(self, event: Select.Changed) -> None:
        if not isinstance(event.value, ExportFormat):
            return
        self._fmt = event.value
        self.query_one("#preview", Static).update(self._preview())

        # Follow the format's extension unless the user typed their own path
        path_input = self.query_one("#path-input", Input)
        if path_input.value == self._default_path:
            self._default_path = default_export_name(self._fmt)
            path_input.value = self._default_path

    def on_input_submitted(self, _event: Input.Submitted) -> None:
        path = self.query_one("#path-input", Input).value.strip()
        if not path:
            self.notify("No output path", severity="error")
            return
        self.dismiss(ExportResult(path, self._fmt))

    def action_cancel(self) -> None:
        self.dismiss(None)
