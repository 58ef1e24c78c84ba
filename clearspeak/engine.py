"""
Intent engine: the object callers own and pass around.

One engine holds one session's worth of state (usage counters and the remote
enhancement cache). Construct a fresh engine for an independent session.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from clearspeak.config import Settings
from clearspeak.enhance import Enhancement, EnhancementCache, EnhancementResolver
from clearspeak.enhance.resolver import DEFAULT_DIRECT_MATCH_CONFIDENCE
from clearspeak.intents import (
    CatalogEntry,
    Category,
    ContextualScorer,
    FuzzyMatcher,
    IntentCatalog,
    Suggestion,
    UsageState,
)
from clearspeak.intents.matcher import DEFAULT_DISTANCE_TOLERANCE, DEFAULT_MIN_MATCH_CHARS
from clearspeak.providers import EnhancerMisconfiguredError, RemoteEnhancer, create_enhancer

logger = logging.getLogger(__name__)

DEFAULT_SUGGESTION_LIMIT = 5


class IntentEngine:
    def __init__(
        self,
        catalog: Optional[IntentCatalog] = None,
        *,
        enhancer: Optional[RemoteEnhancer] = None,
        state: Optional[UsageState] = None,
        cache: Optional[EnhancementCache] = None,
        distance_tolerance: float = DEFAULT_DISTANCE_TOLERANCE,
        min_match_chars: int = DEFAULT_MIN_MATCH_CHARS,
        direct_match_confidence: float = DEFAULT_DIRECT_MATCH_CONFIDENCE,
        suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT,
    ):
        self.catalog = catalog if catalog is not None else IntentCatalog()
        self.matcher = FuzzyMatcher(
            self.catalog,
            distance_tolerance=distance_tolerance,
            min_match_chars=min_match_chars,
        )
        self.scorer = ContextualScorer(self.catalog, state)
        self.resolver = EnhancementResolver(
            self.matcher,
            self.scorer,
            cache=cache,
            enhancer=enhancer,
            direct_match_confidence=direct_match_confidence,
        )
        self.suggestion_limit = suggestion_limit

    @classmethod
    def from_settings(cls, settings: Settings, *, enhancer: Optional[RemoteEnhancer] = None) -> "IntentEngine":
        if enhancer is None:
            try:
                enhancer = create_enhancer(settings)
            except EnhancerMisconfiguredError as exc:
                # heuristic tier still works; surface the problem at startup
                logger.error("[CFG] remote enhancer misconfigured, continuing without it", extra={"error": str(exc)})
        return cls(
            enhancer=enhancer,
            distance_tolerance=settings.match_distance_tolerance,
            min_match_chars=settings.match_min_chars,
            direct_match_confidence=settings.direct_match_confidence,
            suggestion_limit=settings.suggestion_limit,
        )

    @property
    def state(self) -> UsageState:
        return self.scorer.state

    @property
    def cache(self) -> EnhancementCache:
        return self.resolver.cache

    def suggest(self, text: str, limit: Optional[int] = None) -> List[Suggestion]:
        """Ranked suggestions for ``text``; popular ones when nothing matches."""
        if limit is None:
            limit = self.suggestion_limit
        ranked = self.scorer.rank(self.matcher.search(text), limit)
        if ranked:
            return ranked
        return self.scorer.popular(limit)

    def popular(self, limit: Optional[int] = None) -> List[Suggestion]:
        return self.scorer.popular(self.suggestion_limit if limit is None else limit)

    def by_category(self, category: Category | str, limit: int = 3) -> List[Suggestion]:
        return self.scorer.by_category(category, limit)

    def emergency(self) -> List[Suggestion]:
        return self.scorer.emergency()

    def select(self, entry_id: str) -> CatalogEntry:
        entry = self.catalog.get(entry_id)
        if entry is None:
            raise KeyError(entry_id)
        self.scorer.record_selection(entry)
        logger.info("[INTENT] selection recorded", extra={"entry_id": entry.id, "category": entry.category.value})
        return entry

    def enhance(self, text: str) -> str:
        return self.resolver.resolve(text)

    def enhance_detailed(self, text: str) -> Enhancement:
        return self.resolver.resolve_detailed(text)


__all__ = ["IntentEngine"]
