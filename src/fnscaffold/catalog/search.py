"""Template search and selector entry construction."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from fnscaffold.catalog.catalog import TemplateCatalog
from fnscaffold.contracts.prompt import SelectorEntry
from fnscaffold.contracts.template import TemplateDescriptor

URL_CHOICE = "url"
REPORT_CHOICE = "report"

SPECIAL_ENTRIES: tuple[SelectorEntry, ...] = (
    SelectorEntry(title="----[Special Commands]----", separator=True),
    SelectorEntry(title="*** Clone template from Github URL ***", value=URL_CHOICE, short="gh-url"),
    SelectorEntry(title="*** Report issue with, or suggest a new template ***", value=REPORT_CHOICE, short="gh-report"),
)


class Scorer(Protocol):
    def score(self, query: str, candidate: str) -> float | None:
        """Return a match score (higher is better) or None when there is no match."""


class SubsequenceScorer:
    """Case-insensitive subsequence matcher that rewards consecutive runs.

    Every matched character adds the length-weighted value of the current run,
    so contiguous matches outrank scattered ones. An exact match scores infinity.
    """

    def score(self, query: str, candidate: str) -> float | None:
        pattern = query.lower()
        compare = candidate.lower()
        pattern_idx = 0
        total = 0
        current = 0
        for ch in compare:
            if pattern_idx < len(pattern) and ch == pattern[pattern_idx]:
                pattern_idx += 1
                current += 1 + current
            else:
                current = 0
            total += current

        if pattern_idx != len(pattern):
            return None
        if compare == pattern:
            return math.inf
        return float(total)


@dataclass(frozen=True)
class ScoredTemplate:
    template: TemplateDescriptor
    score: float


def filter_templates(templates: Iterable[TemplateDescriptor], query: str, scorer: Scorer) -> list[ScoredTemplate]:
    scored: list[ScoredTemplate] = []
    for template in templates:
        score = scorer.score(query, template.search_text)
        if score is not None:
            scored.append(ScoredTemplate(template=template, score=score))
    return sorted(scored, key=lambda s: s.score, reverse=True)


def template_entry(template: TemplateDescriptor) -> SelectorEntry:
    return SelectorEntry(
        title=f"[{template.name}] {template.description}",
        value=template,
        short=f"{template.lang}-{template.name}",
    )


def build_selector_entries(catalog: TemplateCatalog, query: str, scorer: Scorer) -> list[SelectorEntry]:
    """Rows for the template picker; special commands always come last."""
    entries: list[SelectorEntry] = []
    if not query:
        for lang in catalog.languages:
            entries.append(SelectorEntry(title=f"----[{lang.upper()}]----", separator=True))
            entries.extend(template_entry(t) for t in catalog.for_language(lang))
    else:
        entries.extend(template_entry(s.template) for s in filter_templates(catalog, query, scorer))
    entries.extend(SPECIAL_ENTRIES)
    return entries
