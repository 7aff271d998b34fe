"""Help screen showing keyboard shortcuts and matching rules."""

from __future__ import annotations

from typing import ClassVar

from textual.app import ComposeResult
from textual.binding import BindingType
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static

HELP_TEXT = """\
[bold]Text[/bold]
  Ctrl+O        Open a UTF-8 text file
  Ctrl+L        Clear the text and results
  Tab           Switch between text and results

[bold]Rules[/bold]
  Ctrl+G        Add an include group (keywords, AND/OR)
  Ctrl+B        Edit exclude keywords
  Ctrl+N        Manage include groups (toggle, AND/OR, reorder, delete)

  Keywords are entered one per line and matched case-insensitively
  as plain substrings. A line is shown when every include group
  matches and no exclude keyword appears in it. Blank lines are
  never shown.

[bold]Results[/bold]
  Ctrl+R        Run the filter
  c, Enter      Copy the highlighted line
  Ctrl+S        Export results (plain, numbered, CSV)

[bold]General[/bold]
  Ctrl+T        Choose theme
  F1            Show this help
  Ctrl+Q        Quit
"""


class HelpScreen(ModalScreen[None]):
    """Modal help screen with keyboard shortcuts."""

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    HelpScreen > VerticalScroll {
        width: 72;
        height: 80%;
        max-height: 32;
        background: $surface;
        border: tall $accent;
        padding: 1 2;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        ("escape", "dismiss_help", "Close"),
        ("f1", "dismiss_help", "Close"),
        ("q", "dismiss_help", "Close"),
    ]

    def compose(self) -> ComposeResult:
        with VerticalScroll():
            yield Static(HELP_TEXT, markup=True)

    def action_dismiss_help(self) -> None:
        self.dismiss(None)
