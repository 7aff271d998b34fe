"""Tests for the Textual application wiring."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
from textual.widgets import Input, Select

from textsift.app import TextSiftApp
from textsift.config import load_config
from textsift.export import ExportFormat
from textsift.models import FilterGroup, FilterLogic, RuleSet
from textsift.widgets.export_dialog import ExportDialog, ExportResult
from textsift.widgets.group_dialog import GroupDialog
from textsift.widgets.group_manage_dialog import GroupManageDialog
from textsift.widgets.results_view import ResultsView
from textsift.widgets.rule_bar import RuleBar, format_group
from textsift.widgets.theme_dialog import ThemeDialog

if TYPE_CHECKING:
    from pathlib import Path

TEXT = "alpha error\n\nbeta info\ngamma error timeout\n"


class TestTextSiftApp:
    @pytest.mark.asyncio
    async def test_run_filter(self) -> None:
        app = TextSiftApp(text=TEXT)
        async with app.run_test() as pilot:
            app._set_rules(RuleSet(groups=[FilterGroup(keywords=["error"])], exclude=["timeout"]))
            app.action_run_filter()
            await pilot.pause()
            assert [m.line_number for m in app.matches] == [1]
            results = app.query_one("#results", ResultsView)
            assert results.current is not None
            assert results.current.content == "alpha error"
            assert app.query_one("#rule-bar", RuleBar).render().plain == "[1] +(error)  -(timeout)"

    @pytest.mark.asyncio
    async def test_run_without_rules_keeps_results_empty(self) -> None:
        app = TextSiftApp(text=TEXT)
        async with app.run_test() as pilot:
            app.action_run_filter()
            await pilot.pause()
            assert app.matches == []

    @pytest.mark.asyncio
    async def test_clear_text_clears_results(self) -> None:
        app = TextSiftApp(text=TEXT)
        async with app.run_test() as pilot:
            app._set_rules(RuleSet(groups=[FilterGroup(keywords=["a"])]))
            app.action_run_filter()
            await pilot.pause()
            assert app.matches
            app.action_clear_text()
            await pilot.pause()
            assert app.matches == []

    @pytest.mark.asyncio
    async def test_export(self, tmp_path: Path) -> None:
        out = tmp_path / "out.csv"
        app = TextSiftApp(text=TEXT)
        async with app.run_test() as pilot:
            app._set_rules(RuleSet(groups=[FilterGroup(keywords=["info"])]))
            app.action_run_filter()
            await pilot.pause()
            app._on_export_result(ExportResult(str(out), ExportFormat.CSV))
        assert out.read_text(encoding="utf-8") == 'lineNumber,content,matchedKeywords\n3,"beta info","info"'

    @pytest.mark.asyncio
    async def test_open_missing_file_keeps_text(self, tmp_path: Path) -> None:
        app = TextSiftApp(text=TEXT)
        async with app.run_test() as pilot:
            await app._load_file(tmp_path / "missing.txt")
            await pilot.pause()
            assert app._source_area.text == TEXT


class TestCopyResult:
    @pytest.mark.asyncio
    async def test_copy_keys_copy_content_verbatim(self) -> None:
        app = TextSiftApp(text="  alpha error  \nbeta\ngamma ERROR\n")
        with patch.object(TextSiftApp, "copy_to_clipboard") as copy:
            async with app.run_test() as pilot:
                app._set_rules(RuleSet(groups=[FilterGroup(keywords=["error"])]))
                app.action_run_filter()
                await pilot.pause()
                await pilot.press("c")
                copy.assert_called_once_with("  alpha error  ")
                await pilot.press("down", "enter")
                assert copy.call_args.args == ("gamma ERROR",)


class TestGroupDialogs:
    @pytest.mark.asyncio
    async def test_add_group(self) -> None:
        app = TextSiftApp(text=TEXT)
        async with app.run_test() as pilot:
            app.action_add_group()
            await pilot.pause()
            assert isinstance(app.screen, GroupDialog)
            await pilot.press("e", "r", "r", "ctrl+s")
            await pilot.pause()
            assert app.rules.groups == (FilterGroup(keywords=("err",)),)

    @pytest.mark.asyncio
    async def test_group_without_keywords_rejected(self) -> None:
        app = TextSiftApp(text=TEXT)
        async with app.run_test() as pilot:
            app.action_add_group()
            await pilot.pause()
            await pilot.press("space", "enter", "space", "ctrl+s")
            await pilot.pause()
            assert not isinstance(app.screen, GroupDialog)
            assert app.rules.groups == ()
            assert app.rules.is_empty

    @pytest.mark.asyncio
    async def test_exclude_keywords_normalized(self) -> None:
        app = TextSiftApp(text=TEXT)
        async with app.run_test() as pilot:
            app.action_edit_exclude()
            await pilot.pause()
            assert isinstance(app.screen, GroupDialog)
            await pilot.press("space", "x", "space", "enter", "enter", "y", "ctrl+s")
            await pilot.pause()
            assert app.rules.exclude == ("x", "y")


class TestGroupManageDialog:
    @pytest.mark.asyncio
    async def test_toggle_flip_and_reorder(self) -> None:
        app = TextSiftApp(text=TEXT)
        async with app.run_test() as pilot:
            app._set_rules(RuleSet(groups=[FilterGroup(keywords=["error"]), FilterGroup(keywords=["info"])]))
            app.action_manage_groups()
            await pilot.pause()
            assert isinstance(app.screen, GroupManageDialog)
            await pilot.press("space", "a", "j", "escape")
            await pilot.pause()
            first, second = app.rules.groups
            assert first == FilterGroup(keywords=("info",))
            assert second.keywords == ("error",)
            assert second.enabled is False
            assert second.logic == FilterLogic.AND

    @pytest.mark.asyncio
    async def test_move_up_and_delete(self) -> None:
        app = TextSiftApp(text=TEXT)
        groups = [FilterGroup(keywords=["a"]), FilterGroup(keywords=["b"]), FilterGroup(keywords=["c"])]
        async with app.run_test() as pilot:
            app._set_rules(RuleSet(groups=groups))
            app.action_manage_groups()
            await pilot.pause()
            await pilot.press("j", "j", "k", "d", "escape")
            await pilot.pause()
            assert [g.keywords for g in app.rules.groups] == [("b",), ("c",)]

    @pytest.mark.asyncio
    async def test_clear_all_clears_results(self) -> None:
        app = TextSiftApp(text=TEXT)
        async with app.run_test() as pilot:
            app._set_rules(RuleSet(groups=[FilterGroup(keywords=["error"])]))
            app.action_run_filter()
            await pilot.pause()
            assert len(app.matches) == 2
            app.action_manage_groups()
            await pilot.pause()
            await pilot.press("c", "escape")
            await pilot.pause()
            assert app.rules.is_empty
            assert app.matches == []
            assert app.query_one("#results", ResultsView).current is None

    @pytest.mark.asyncio
    async def test_escape_without_changes_keeps_groups(self) -> None:
        rules = RuleSet(groups=[FilterGroup(keywords=["error"], logic=FilterLogic.AND)], exclude=["x"])
        app = TextSiftApp(text=TEXT)
        async with app.run_test() as pilot:
            app._set_rules(rules)
            app.action_manage_groups()
            await pilot.pause()
            await pilot.press("escape")
            await pilot.pause()
            assert app.rules == rules


class TestExportDialog:
    @pytest.mark.asyncio
    async def test_path_follows_format_extension(self) -> None:
        app = TextSiftApp(text=TEXT)
        async with app.run_test() as pilot:
            app._set_rules(RuleSet(groups=[FilterGroup(keywords=["error"])]))
            app.action_run_filter()
            await pilot.pause()
            app.action_export()
            await pilot.pause()
            dialog = app.screen
            assert isinstance(dialog, ExportDialog)
            path_input = dialog.query_one("#path-input", Input)
            assert path_input.value.endswith(".txt")

            dialog.query_one("#format-select", Select).value = ExportFormat.CSV
            await pilot.pause()
            assert path_input.value.startswith("textsift-export-")
            assert path_input.value.endswith(".csv")

    @pytest.mark.asyncio
    async def test_typed_path_kept_on_format_change(self) -> None:
        app = TextSiftApp(text=TEXT)
        async with app.run_test() as pilot:
            app._set_rules(RuleSet(groups=[FilterGroup(keywords=["error"])]))
            app.action_run_filter()
            await pilot.pause()
            app.action_export()
            await pilot.pause()
            dialog = app.screen
            assert isinstance(dialog, ExportDialog)
            path_input = dialog.query_one("#path-input", Input)
            path_input.value = "results.txt"
            dialog.query_one("#format-select", Select).value = ExportFormat.CSV
            await pilot.pause()
            assert path_input.value == "results.txt"


class TestThemeDialog:
    @pytest.mark.asyncio
    async def test_highlight_previews_and_escape_restores(self) -> None:
        app = TextSiftApp()
        async with app.run_test() as pilot:
            original = app.theme
            names = sorted(app.available_themes)
            app.action_choose_theme()
            await pilot.pause()
            assert isinstance(app.screen, ThemeDialog)
            await pilot.press("down")
            await pilot.pause()
            assert app.theme == names[names.index(original) + 1]
            await pilot.press("escape")
            await pilot.pause()
            assert app.theme == original
        assert load_config().theme == "textual-dark"

    @pytest.mark.asyncio
    async def test_enter_keeps_and_saves_theme(self) -> None:
        app = TextSiftApp()
        async with app.run_test() as pilot:
            names = sorted(app.available_themes)
            expected = names[names.index(app.theme) + 1]
            app.action_choose_theme()
            await pilot.pause()
            await pilot.press("down", "enter")
            await pilot.pause()
            assert app.theme == expected
        assert load_config().theme == expected


class TestFormatGroup:
    def test_or(self) -> None:
        assert format_group(FilterGroup(keywords=["a", " ", "b"])) == "a | b"

    def test_and(self) -> None:
        assert format_group(FilterGroup(keywords=["a", "b"], logic=FilterLogic.AND)) == "a & b"

    def test_empty(self) -> None:
        assert format_group(FilterGroup()) == "(empty)"
