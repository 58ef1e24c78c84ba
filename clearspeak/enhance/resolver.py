"""
Tiered enhancement resolution.

1. Direct intent match: the top ranked suggestion wins when its confidence
   exceeds ``direct_match_confidence``.
2. Remote enhancer, memoized by exact input text.
3. Local heuristic rewrite, which always succeeds.

``resolve`` never raises; every failure downgrades to the next tier.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from clearspeak.intents.matcher import FuzzyMatcher
from clearspeak.intents.scorer import ContextualScorer
from clearspeak.observability import structured_log
from clearspeak.providers.base import RemoteEnhancer
from clearspeak.providers.errors import RemoteEnhancerError

from .cache import EnhancementCache
from .heuristic import rewrite

logger = logging.getLogger(__name__)

DEFAULT_DIRECT_MATCH_CONFIDENCE = 0.7


class EnhancementTier(str, Enum):
    DIRECT = "direct"
    CACHE = "cache"
    REMOTE = "remote"
    HEURISTIC = "heuristic"


@dataclass(frozen=True)
class Enhancement:
    text: str
    tier: EnhancementTier
    confidence: Optional[float] = None
    entry_id: Optional[str] = None


class EnhancementResolver:
    def __init__(
        self,
        matcher: FuzzyMatcher,
        scorer: ContextualScorer,
        *,
        cache: Optional[EnhancementCache] = None,
        enhancer: Optional[RemoteEnhancer] = None,
        direct_match_confidence: float = DEFAULT_DIRECT_MATCH_CONFIDENCE,
    ):
        self.matcher = matcher
        self.scorer = scorer
        self.cache = cache if cache is not None else EnhancementCache()
        self.enhancer = enhancer
        self.direct_match_confidence = direct_match_confidence

    def resolve(self, raw_text: str) -> str:
        return self.resolve_detailed(raw_text).text

    def resolve_detailed(self, raw_text: str) -> Enhancement:
        raw_text = raw_text if raw_text is not None else ""

        result = self._direct_match(raw_text)
        if result is None:
            result = self._remote(raw_text)
        if result is None:
            result = Enhancement(text=rewrite(raw_text), tier=EnhancementTier.HEURISTIC)

        structured_log(
            {
                "event": "enhance.resolved",
                "tier": result.tier.value,
                "entry_id": result.entry_id,
                "raw_text": raw_text,
            }
        )
        return result

    def _direct_match(self, raw_text: str) -> Optional[Enhancement]:
        try:
            top = self.scorer.rank(self.matcher.search(raw_text), limit=1)
        except Exception as exc:  # noqa: BLE001
            logger.warning("[ENHANCE] intent match failed", extra={"error": type(exc).__name__})
            return None

        if top and top[0].confidence > self.direct_match_confidence:
            best = top[0]
            return Enhancement(
                text=best.enhanced_phrase,
                tier=EnhancementTier.DIRECT,
                confidence=best.confidence,
                entry_id=best.id,
            )
        return None

    def _remote(self, raw_text: str) -> Optional[Enhancement]:
        enhancer = self.enhancer
        if enhancer is None or not raw_text.strip():
            return None
        if not enhancer.is_available():
            logger.info("[ENHANCE] remote enhancer unavailable", extra={"provider": enhancer.name})
            return None

        cached = self.cache.get(raw_text)
        if cached is not None:
            return Enhancement(text=cached, tier=EnhancementTier.CACHE)

        try:
            enhanced = enhancer.enhance(raw_text)
        except RemoteEnhancerError as exc:
            logger.warning(
                "[ENHANCE] remote enhancement failed, falling back to heuristic",
                extra={"provider": exc.provider, "error": type(exc).__name__},
            )
            return None
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "[ENHANCE] remote enhancer raised unexpectedly, falling back to heuristic",
                extra={"provider": enhancer.name, "error": type(exc).__name__},
            )
            return None

        if not isinstance(enhanced, str) or not enhanced.strip():
            logger.warning("[ENHANCE] remote enhancer returned no text", extra={"provider": enhancer.name})
            return None

        if not self.cache.put(raw_text, enhanced):
            # a concurrent caller stored first; every caller returns the stored value
            return Enhancement(text=self.cache.get(raw_text), tier=EnhancementTier.CACHE)
        return Enhancement(text=enhanced, tier=EnhancementTier.REMOTE)


__all__ = [
    "DEFAULT_DIRECT_MATCH_CONFIDENCE",
    "Enhancement",
    "EnhancementResolver",
    "EnhancementTier",
]
