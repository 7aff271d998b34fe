"""Modal dialog for editing one keyword group."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, Select, TextArea

from textsift.models import FilterGroup, FilterLogic

if TYPE_CHECKING:
    from textual.app import ComposeResult
    from textual.binding import BindingType

_LOGIC_OPTIONS: list[tuple[str, FilterLogic]] = [
    ("OR: any keyword", FilterLogic.OR),
    ("AND: all keywords", FilterLogic.AND),
]


class GroupDialog(ModalScreen[FilterGroup | None]):
    """Modal dialog for entering keywords, one per line.

    In exclude mode there is no logic selector: any exclude keyword rejects
    a line.
    """

    DEFAULT_CSS = """
    GroupDialog {
        align: center middle;
    }

    GroupDialog > Vertical {
        width: 70;
        height: auto;
        max-height: 24;
        background: $surface;
        border: tall $accent;
        padding: 1 2;
    }

    GroupDialog > Vertical > .title {
        margin-bottom: 1;
        text-style: bold;
    }

    GroupDialog > Vertical > TextArea {
        height: 8;
    }

    GroupDialog > Vertical > Select {
        width: 100%;
        margin-top: 1;
    }

    GroupDialog > Vertical > .hint {
        color: $text-muted;
        margin-top: 1;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("ctrl+s", "apply", "Apply"),
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, group: FilterGroup | None = None, *, exclude: bool = False) -> None:
        super().__init__()
        self._group = group or FilterGroup()
        self._exclude = exclude

    def compose(self) -> ComposeResult:
        title = "Exclude keywords (hide matching lines)" if self._exclude else "Include group (show matching lines)"
        with Vertical():
            yield Label(title, classes="title")
            yield TextArea("\n".join(self._group.keywords), id="keywords-input")
            if not self._exclude:
                yield Select[FilterLogic](
                    _LOGIC_OPTIONS,
                    value=self._group.logic,
                    allow_blank=False,
                    id="logic-select",
                )
            yield Label("One keyword per line. Ctrl+S to apply, Escape to cancel", classes="hint")

    def on_mount(self) -> None:
        self.query_one("#keywords-input", TextArea).focus()

    def action_apply(self) -> None:
        text = self.query_one("#keywords-input", TextArea).text
        logic = self._group.logic
        if not self._exclude:
            value = self.query_one("#logic-select", Select).value
            logic = value if isinstance(value, FilterLogic) else FilterLogic.OR
        group = FilterGroup.from_text(text, logic)
        self.dismiss(group.model_copy(update={"enabled": self._group.enabled}))

    def action_cancel(self) -> None:
        self.dismiss(None)
