"""Pydantic models for textsift."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from collections.abc import Iterable


class FilterLogic(StrEnum):
    """How the keywords of one include group combine."""

    AND = "and"
    OR = "or"


class FilterGroup(BaseModel):
    """A single include rule: keywords combined with AND or OR."""

    model_config = ConfigDict(frozen=True)

    keywords: tuple[str, ...] = ()
    logic: FilterLogic = FilterLogic.OR
    enabled: bool = True

    @classmethod
    def from_text(cls, text: str, logic: FilterLogic = FilterLogic.OR) -> FilterGroup:
        """Build a group from a multi-line keyword box, one keyword per line."""
        return cls(keywords=tuple(text.splitlines()), logic=logic)

    @property
    def active_keywords(self) -> list[str]:
        """Trimmed, non-empty keywords. Empty for a disabled group."""
        if not self.enabled:
            return []
        return [k.strip() for k in self.keywords if k.strip()]

    @property
    def is_inert(self) -> bool:
        """Whether the group has no effect on matching."""
        return not self.active_keywords


class RuleSet(BaseModel):
    """Include groups combined with AND, plus an optional exclude group."""

    model_config = ConfigDict(frozen=True)

    groups: tuple[FilterGroup, ...] = ()
    exclude: tuple[str, ...] = ()

    @property
    def active_exclude(self) -> list[str]:
        return [k.strip() for k in self.exclude if k.strip()]

    @property
    def is_empty(self) -> bool:
        """True when no keyword anywhere can affect matching."""
        return all(g.is_inert for g in self.groups) and not self.active_exclude

    def with_group(self, group: FilterGroup) -> RuleSet:
        return self.model_copy(update={"groups": (*self.groups, group)})

    def with_groups(self, groups: Iterable[FilterGroup]) -> RuleSet:
        return self.model_copy(update={"groups": tuple(groups)})

    def with_exclude(self, keywords: Iterable[str]) -> RuleSet:
        return self.model_copy(update={"exclude": tuple(keywords)})


class MatchedLine(BaseModel):
    """A source line that passed the rule set."""

    line_number: int
    content: str
    matched_keywords: list[str] = []


class AppConfig(BaseModel):
    """Application configuration persisted to disk."""

    theme: str = "textual-dark"
