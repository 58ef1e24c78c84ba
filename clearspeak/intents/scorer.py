"""
Contextual re-ranking and in-session learning.

Raw match quality is blended with a usage signal derived from what the user
has committed to so far in this process:

    context    = min((category_count + phrase_count) / 10, 0.5)
    confidence = clamp(match * 0.7 + context * 0.3, 0, 1)

Usage state lives only as long as the scorer; nothing is persisted.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .catalog import POPULAR_IDS, CatalogEntry, Category, IntentCatalog
from .matcher import Match

HISTORY_CAP = 100
HISTORY_KEEP = 50

MATCH_WEIGHT = 0.7
CONTEXT_WEIGHT = 0.3
CONTEXT_DIVISOR = 10.0
CONTEXT_CAP = 0.5

DEFAULT_CATEGORY_LIMIT = 3
EMERGENCY_LIMIT = 4


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class Suggestion:
    """A catalog entry as surfaced for one query."""
    entry: CatalogEntry
    confidence: float

    @property
    def id(self) -> str:
        return self.entry.id

    @property
    def phrase(self) -> str:
        return self.entry.phrase

    @property
    def enhanced_phrase(self) -> str:
        return self.entry.enhanced_phrase

    @property
    def category(self) -> Category:
        return self.entry.category


@dataclass
class UsageState:
    """Committed-phrase history plus usage counters keyed by category or phrase."""
    history: List[str] = field(default_factory=list)
    counts: Dict[str, int] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def record(self, entry: CatalogEntry) -> None:
        with self._lock:
            self.history.append(entry.phrase)
            if len(self.history) > HISTORY_CAP:
                self.history = self.history[-HISTORY_KEEP:]
            for token in (entry.category.value, entry.phrase):
                self.counts[token] = self.counts.get(token, 0) + 1

    def count(self, token: str) -> int:
        with self._lock:
            return self.counts.get(token, 0)

    def counts_for(self, entry: CatalogEntry) -> Tuple[int, int]:
        with self._lock:
            return self.counts.get(entry.category.value, 0), self.counts.get(entry.phrase, 0)

    def snapshot(self) -> Tuple[List[str], Dict[str, int]]:
        with self._lock:
            return list(self.history), dict(self.counts)


class ContextualScorer:
    def __init__(self, catalog: IntentCatalog, state: Optional[UsageState] = None):
        self.catalog = catalog
        self.state = state if state is not None else UsageState()

    def context_score(self, entry: CatalogEntry) -> float:
        category_count, phrase_count = self.state.counts_for(entry)
        return min((category_count + phrase_count) / CONTEXT_DIVISOR, CONTEXT_CAP)

    def rank(self, candidates: Iterable[Match | Tuple[CatalogEntry, float]], limit: int) -> List[Suggestion]:
        limit = max(0, int(limit))
        scored: List[Tuple[float, int, Suggestion]] = []
        for entry, match_score in candidates:
            confidence = clamp(match_score * MATCH_WEIGHT + self.context_score(entry) * CONTEXT_WEIGHT)
            scored.append((confidence, self.catalog.index_of(entry.id), Suggestion(entry, confidence)))
        scored.sort(key=lambda item: (-item[0], item[1]))
        return [suggestion for _, _, suggestion in scored[:limit]]

    def popular(self, limit: int) -> List[Suggestion]:
        return self._surface((self.catalog.get(entry_id) for entry_id in POPULAR_IDS), limit)

    def by_category(self, category: Category | str, limit: int = DEFAULT_CATEGORY_LIMIT) -> List[Suggestion]:
        entries = sorted(self.catalog.by_category(category), key=lambda e: -e.base_confidence)
        return self._surface(entries, limit)

    def emergency(self) -> List[Suggestion]:
        return self.by_category(Category.EMERGENCY, EMERGENCY_LIMIT)

    def record_selection(self, entry: CatalogEntry) -> None:
        self.state.record(entry)

    @staticmethod
    def _surface(entries: Iterable[Optional[CatalogEntry]], limit: int) -> List[Suggestion]:
        found: Sequence[CatalogEntry] = [entry for entry in entries if entry is not None]
        return [Suggestion(entry, clamp(entry.base_confidence)) for entry in found[:max(0, int(limit))]]


__all__ = [
    "HISTORY_CAP",
    "HISTORY_KEEP",
    "ContextualScorer",
    "Suggestion",
    "UsageState",
    "clamp",
]
