"""Modal dialog for managing include groups."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding, BindingType
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, OptionList
from textual.widgets.option_list import Option

from textsift.models import FilterGroup, FilterLogic
from textsift.widgets.rule_bar import format_group

if TYPE_CHECKING:
    from collections.abc import Sequence


class GroupManageDialog(ModalScreen[list[FilterGroup] | None]):
    """Modal dialog for managing groups: toggle, flip logic, reorder, delete."""

    DEFAULT_CSS = """
    GroupManageDialog {
        align: center middle;
    }

    GroupManageDialog > Vertical {
        width: 80;
        height: 80%;
        max-height: 25;
        background: $surface;
        border: tall $accent;
        padding: 1 2;
    }

    GroupManageDialog > Vertical > .title {
        margin-bottom: 1;
        text-style: bold;
    }

    GroupManageDialog > Vertical > OptionList {
        height: 1fr;
    }

    GroupManageDialog > Vertical > .hint {
        color: $text-muted;
        margin-top: 1;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("escape", "done", "Done"),
        Binding("space", "toggle_group", "Toggle"),
        Binding("a", "flip_logic", "AND/OR"),
        Binding("d", "delete_group", "Delete"),
        Binding("c", "clear_all", "Clear all"),
        Binding("k", "move_up", "Move up"),
        Binding("j", "move_down", "Move down"),
    ]

    def __init__(self, groups: Sequence[FilterGroup]) -> None:
        super().__init__()
        self._groups = list(groups)

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label("Include groups (all must match)", classes="title")
            yield OptionList(id="group-list")
            yield Label("Space: toggle  a: AND/OR  d: delete  c: clear all  k/j: move  Esc: done", classes="hint")

    def on_mount(self) -> None:
        self._rebuild_list(0)

    def _rebuild_list(self, highlight: int | None = None) -> None:
        ol = self.query_one("#group-list", OptionList)
        if highlight is None:
            highlight = ol.highlighted
        ol.clear_options()
        for i, group in enumerate(self._groups):
            ol.add_option(Option(self._format_group(i, group)))
        if highlight is not None and self._groups:
            ol.highlighted = min(highlight, len(self._groups) - 1)

    def _format_group(self, index: int, group: FilterGroup) -> Text:
        text = Text()
        text.append(f"[{index + 1}] ", style="dim")

        status = "ON " if group.enabled else "OFF"
        text.append(f"{status} ", style="green bold" if group.enabled else "red")
        text.append(f"{group.logic.value.upper():<3} ", style="bold")
        text.append(format_group(group), style="green" if group.enabled else "dim")
        return text

    def _get_highlighted(self) -> int | None:
        idx = self.query_one("#group-list", OptionList).highlighted
        if idx is not None and 0 <= idx < len(self._groups):
            return idx
        return None

    def action_toggle_group(self) -> None:
        idx = self._get_highlighted()
        if idx is not None:
            group = self._groups[idx]
            self._groups[idx] = group.model_copy(update={"enabled": not group.enabled})
            self._rebuild_list()

    def action_flip_logic(self) -> None:
        idx = self._get_highlighted()
        if idx is not None:
            group = self._groups[idx]
            logic = FilterLogic.OR if group.logic == FilterLogic.AND else FilterLogic.AND
            self._groups[idx] = group.model_copy(update={"logic": logic})
            self._rebuild_list()

    def action_delete_group(self) -> None:
        idx = self._get_highlighted()
        if idx is not None:
            self._groups.pop(idx)
            self._rebuild_list()

    def action_clear_all(self) -> None:
        if self._groups:
            self._groups.clear()
            self._rebuild_list()

    def action_move_up(self) -> None:
        idx = self._get_highlighted()
        if idx is not None and idx > 0:
            self._groups[idx], self._groups[idx - 1] = self._groups[idx - 1], self._groups[idx]
            self._rebuild_list(idx - 1)

    def action_move_down(self) -> None:
        idx = self._get_highlighted()
        if idx is not None and idx < len(self._groups) - 1:
            self._groups[idx], self._groups[idx + 1] = self._groups[idx + 1], self._groups[idx]
            self._rebuild_list(idx + 1)

    def action_done(self) -> None:
        self.dismiss(self._groups)
