"""Filter engine for text lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textsift.models import FilterGroup, FilterLogic, MatchedLine, RuleSet

if TYPE_CHECKING:
    from collections.abc import Iterable


def normalize_keywords(keywords: Iterable[str]) -> list[str]:
    """Trim keywords and drop the ones left empty."""
    return [k.strip() for k in keywords if k.strip()]


def line_matches_keyword(line: str, keyword: str) -> bool:
    """Case-insensitive substring check."""
    return keyword.casefold() in line.casefold()


def filter_text(source_text: str, rule_set: RuleSet) -> list[MatchedLine]:
    """Filter the non-blank lines of source_text through rule_set.

    Include groups are combined with AND; each group combines its own
    keywords with its AND/OR logic. Any exclude keyword rejects a line.
    Groups without usable keywords always pass, so an empty rule set
    keeps every non-blank line.

    Line numbers are 1-based positions in the original text; blank lines
    are skipped but still counted.
    """
    groups = [g for g in rule_set.groups if not g.is_inert]
    excludes = rule_set.active_exclude

    result: list[MatchedLine] = []
    for i, line in enumerate(source_text.splitlines()):
        trimmed = line.strip()
        if not trimmed:
            continue

        if any(line_matches_keyword(trimmed, k) for k in excludes):
            continue

        matched: list[str] = []
        for group in groups:
            hits = match_group(trimmed, group)
            if hits is None:
                break
            matched.extend(hits)
        else:
            result.append(MatchedLine(line_number=i + 1, content=line, matched_keywords=matched))

    return result


def match_group(line: str, group: FilterGroup) -> list[str] | None:
    """Return the group's keywords found in line, or None if the group fails.

    An inert group passes with no keywords.
    """
    keywords = group.active_keywords
    hits = [k for k in keywords if line_matches_keyword(line, k)]
    if not keywords:
        return hits
    if group.logic == FilterLogic.AND:
        return hits if len(hits) == len(keywords) else None
    return hits or None
