"""Active rule display bar."""

from __future__ import annotations

from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

from textsift.models import FilterGroup, FilterLogic, RuleSet


def format_group(group: FilterGroup) -> str:
    """Compact one-line form of a group, e.g. ``error & timeout``."""
    joiner = " & " if group.logic == FilterLogic.AND else " | "
    keywords = [k.strip() for k in group.keywords if k.strip()]
    return joiner.join(keywords) if keywords else "(empty)"


class RuleBar(Widget):
    """Horizontal bar showing include groups and exclude keywords."""

    DEFAULT_CSS = """
    RuleBar {
        height: 1;
        dock: top;
        background: $surface-darken-1;
        display: none;
    }

    RuleBar.has-rules {
        display: block;
    }
    """

    rules: reactive[RuleSet] = reactive(RuleSet, always_update=True)

    def update_rules(self, rules: RuleSet) -> None:
        """Update the displayed rules."""
        self.rules = rules
        self.set_class(bool(rules.groups or rules.active_exclude), "has-rules")

    def render(self) -> Text:
        text = Text()
        for i, group in enumerate(self.rules.groups):
            style = "green" if group.enabled else "dim"
            if i > 0:
                text.append(" AND ", style="dim")
            text.append(f"[{i + 1}] ", style="dim")
            text.append(f"+({format_group(group)})", style=style)

        exclude = self.rules.active_exclude
        if exclude:
            if self.rules.groups:
                text.append("  ")
            text.append(f"-({' | '.join(exclude)})", style="red")

        return text
