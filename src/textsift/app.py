"""Textual application for textsift."""

from __future__ import annotations

import time
from pathlib import Path
from typing import ClassVar

from textual.app import App, ComposeResult
from textual.binding import Binding, BindingType
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Label, TextArea

from textsift.config import load_config, save_config
from textsift.export import export_matches
from textsift.filters import filter_text, normalize_keywords
from textsift.models import FilterGroup, MatchedLine, RuleSet
from textsift.reader import read_text_async
from textsift.widgets.export_dialog import ExportDialog, ExportResult
from textsift.widgets.group_dialog import GroupDialog
from textsift.widgets.group_manage_dialog import GroupManageDialog
from textsift.widgets.help_screen import HelpScreen
from textsift.widgets.open_dialog import OpenDialog
from textsift.widgets.results_view import ResultsView
from textsift.widgets.rule_bar import RuleBar
from textsift.widgets.status_bar import StatusBar
from textsift.widgets.theme_dialog import ThemeDialog


class TextSiftApp(App[None]):
    """Keyword line filter TUI application."""

    CSS_PATH = "styles/app.tcss"
    ENABLE_COMMAND_PALETTE = False

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("ctrl+r", "run_filter", "Filter"),
        Binding("ctrl+g", "add_group", "Include"),
        Binding("ctrl+b", "edit_exclude", "Exclude"),
        Binding("ctrl+n", "manage_groups", "Groups"),
        Binding("ctrl+o", "open_file", "Open"),
        Binding("ctrl+s", "export", "Export"),
        Binding("ctrl+l", "clear_text", "Clear", show=False),
        Binding("ctrl+t", "choose_theme", "Theme", show=False),
        Binding("f1", "show_help", "Help"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, text: str = "", source: str = "") -> None:
        super().__init__()
        self._initial_text = text
        self._source = source
        self._rules = RuleSet()
        self._matches: list[MatchedLine] = []
        self._has_run = False
        self._config = load_config()
        if self._config.theme in self.available_themes:
            self.theme = self._config.theme

    @property
    def rules(self) -> RuleSet:
        return self._rules

    @property
    def matches(self) -> list[MatchedLine]:
        return self._matches

    def compose(self) -> ComposeResult:
        yield RuleBar(id="rule-bar")
        with Horizontal(id="panes"):
            with Vertical(id="source-pane"):
                yield Label("Source text", classes="pane-title")
                yield TextArea(self._initial_text, id="source-text")
            with Vertical(id="results-pane"):
                yield Label("Results", classes="pane-title", id="results-title")
                yield ResultsView(id="results")
        yield StatusBar(source=self._source, id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        self._update_status_bar()

    @property
    def _source_area(self) -> TextArea:
        return self.query_one("#source-text", TextArea)

    def on_text_area_changed(self, _event: TextArea.Changed) -> None:
        self._update_status_bar()

    def _update_status_bar(self) -> None:
        status_bar = self.query_one("#status-bar", StatusBar)
        total = len(self._source_area.text.splitlines())
        status_bar.update_counts(total, len(self._matches) if self._has_run else None)

    def _set_rules(self, rules: RuleSet) -> None:
        self._rules = rules
        self.query_one("#rule-bar", RuleBar).update_rules(rules)
        self.log(f"rules: {len(rules.groups)} groups, {len(rules.active_exclude)} exclude keywords")

    def _set_matches(self, matches: list[MatchedLine], *, ran: bool = False) -> None:
        self._matches = matches
        self._has_run = ran
        self.query_one("#results", ResultsView).set_matches(matches)
        title = f"Results: {len(matches)} matching lines" if matches else "Results"
        self.query_one("#results-title", Label).update(title)
        self._update_status_bar()

    # --- Filtering ---

    def action_run_filter(self) -> None:
        text = self._source_area.text
        if not text:
            self.notify("No text to filter", severity="warning")
            return
        if self._rules.is_empty:
            self.notify("Add an include group or exclude keywords first", severity="warning")
            return

        start = time.perf_counter()
        matches = filter_text(text, self._rules)
        self.log(f"filtered {len(text.splitlines())} lines in {time.perf_counter() - start:.4f}s")

        self._set_matches(matches, ran=True)
        if matches:
            self.query_one("#results", ResultsView).focus()
        else:
            self.notify("No matching lines")

    # --- Rule actions ---

    def action_add_group(self) -> None:
        self.push_screen(GroupDialog(), callback=self._on_group_result)

    def _on_group_result(self, result: FilterGroup | None) -> None:
        if result is None:
            return
        if result.is_inert:
            self.notify("Group has no keywords", severity="warning")
            return
        self._set_rules(self._rules.with_group(result))

    def action_edit_exclude(self) -> None:
        current = FilterGroup(keywords=self._rules.exclude)
        self.push_screen(GroupDialog(current, exclude=True), callback=self._on_exclude_result)

    def _on_exclude_result(self, result: FilterGroup | None) -> None:
        if result is not None:
            self._set_rules(self._rules.with_exclude(normalize_keywords(result.keywords)))

    def action_manage_groups(self) -> None:
        if not self._rules.groups:
            self.notify("No include groups to manage", severity="warning")
            return
        self.push_screen(GroupManageDialog(self._rules.groups), callback=self._on_manage_result)

    def _on_manage_result(self, result: list[FilterGroup] | None) -> None:
        if result is None:
            return
        self._set_rules(self._rules.with_groups(result))
        if self._rules.is_empty:
            self._set_matches([])

    # --- Text actions ---

    def action_clear_text(self) -> None:
        self._source_area.clear()
        self._set_matches([])

    def action_open_file(self) -> None:
        self.push_screen(OpenDialog(self._source), callback=self._on_open_result)

    def _on_open_result(self, result: Path | None) -> None:
        if result is not None:
            self.run_worker(self._load_file(result), exclusive=True)

    async def _load_file(self, path: Path) -> None:
        """Load a file into the text area; on failure the current text is kept."""
        try:
            text = await read_text_async(path)
        except UnicodeDecodeError:
            self.notify(f"{path} is not valid UTF-8 text", severity="error")
            return
        except OSError as e:
            self.notify(f"Cannot read {path}: {e.strerror or e}", severity="error")
            return
        self._source_area.load_text(text)
        self._source = str(path)
        self.query_one("#status-bar", StatusBar).set_source(self._source)
        self._update_status_bar()
        self.notify(f"Loaded {path.name}")

    # --- Export ---

    def action_export(self) -> None:
        if not self._matches:
            self.notify("No results to export", severity="warning")
            return
        self.push_screen(ExportDialog(self._matches), callback=self._on_export_result)

    def _on_export_result(self, result: ExportResult | None) -> None:
        if result is None:
            return
        path = Path(result.path).expanduser()
        try:
            count = export_matches(self._matches, result.fmt, path)
        except OSError as e:
            self.notify(f"Export failed: {e.strerror or e}", severity="error")
            return
        self.notify(f"Exported {count} lines to {path}")

    # --- Theme ---

    def action_choose_theme(self) -> None:
        self.push_screen(ThemeDialog(self.theme), callback=self._on_theme_result)

    def _on_theme_result(self, result: str | None) -> None:
        if result is None:
            return
        self.theme = result
        self._config = self._config.model_copy(update={"theme": result})
        try:
            save_config(self._config)
        except OSError as e:
            self.notify(f"Cannot save config: {e.strerror or e}", severity="warning")

    # --- Help ---

    def action_show_help(self) -> None:
        self.push_screen(HelpScreen())
