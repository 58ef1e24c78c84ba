"""
Approximate matching of free-form input against the intent catalog.

Scores are ``1 - normalized Levenshtein distance`` taken over three
alignments of the query with each catalog field (phrase and enhanced phrase):

- the whole field;
- the field with its words sorted, for word-order variation;
- the best window of consecutive field words of about the query's word count,
  scaled by how much of the field the query covers, so that a fragment found
  inside a longer field never ties an exact full-field match.

An entry's score is the best score over its fields. Entries below
``1 - distance_tolerance`` are dropped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Sequence, Tuple

from rapidfuzz.distance import Levenshtein

from .catalog import CatalogEntry, IntentCatalog

DEFAULT_DISTANCE_TOLERANCE = 0.4
DEFAULT_MIN_MATCH_CHARS = 2

REORDER_WEIGHT = 0.95
WINDOW_BASE_WEIGHT = 0.8

_PUNCT_RE = re.compile(r"[^\w\s']+")
_SPACE_RE = re.compile(r"\s+")


class Match(NamedTuple):
    entry: CatalogEntry
    score: float


@dataclass(frozen=True)
class _Prepared:
    text: str
    tokens: Tuple[str, ...]
    sorted_text: str


def normalize(text: str | None) -> str:
    """Lowercase, drop punctuation (apostrophes kept), collapse whitespace."""
    if not text:
        return ""
    text = _PUNCT_RE.sub(" ", text.lower())
    return _SPACE_RE.sub(" ", text).strip()


def _prepare(text: str) -> _Prepared:
    norm = normalize(text)
    tokens = tuple(norm.split())
    return _Prepared(text=norm, tokens=tokens, sorted_text=" ".join(sorted(tokens)))


def _windows(tokens: Sequence[str], query_len: int) -> Iterator[str]:
    lo = max(1, query_len - 1)
    hi = min(len(tokens), query_len + 1)
    for size in range(lo, hi + 1):
        for start in range(len(tokens) - size + 1):
            yield " ".join(tokens[start:start + size])


class FuzzyMatcher:
    """Indexes a catalog once and answers ``search`` queries against it."""

    def __init__(
        self,
        catalog: IntentCatalog,
        *,
        distance_tolerance: float = DEFAULT_DISTANCE_TOLERANCE,
        min_match_chars: int = DEFAULT_MIN_MATCH_CHARS,
    ):
        if not 0.0 <= distance_tolerance <= 1.0:
            raise ValueError("distance_tolerance must be within [0, 1]")
        self.catalog = catalog
        self.distance_tolerance = distance_tolerance
        self.min_match_chars = max(1, int(min_match_chars))
        self._index: List[Tuple[CatalogEntry, Tuple[_Prepared, ...]]] = [
            (entry, (_prepare(entry.phrase), _prepare(entry.enhanced_phrase)))
            for entry in catalog
        ]

    @property
    def threshold(self) -> float:
        return 1.0 - self.distance_tolerance

    def search(self, query: str | None) -> List[Match]:
        prepared = _prepare(query or "")
        if not prepared.text:
            return []

        threshold = self.threshold
        matches: List[Match] = []
        for entry, fields in self._index:
            score = max(self._field_score(prepared, field) for field in fields)
            if score <= 0.0 or score < threshold:
                continue
            matches.append(Match(entry, min(1.0, score)))

        # sorted() is stable, so equal scores keep catalog order
        return sorted(matches, key=lambda m: -m.score)

    def _field_score(self, query: _Prepared, field: _Prepared) -> float:
        if min(len(query.text), len(field.text)) < self.min_match_chars:
            return 0.0

        best = Levenshtein.normalized_similarity(query.text, field.text)
        if best >= 1.0:
            return 1.0

        if len(query.tokens) > 1 or len(field.tokens) > 1:
            reordered = Levenshtein.normalized_similarity(query.sorted_text, field.sorted_text)
            best = max(best, reordered * REORDER_WEIGHT)

        if len(query.text) < len(field.text):
            coverage = len(query.text) / len(field.text)
            weight = WINDOW_BASE_WEIGHT + (1.0 - WINDOW_BASE_WEIGHT) * coverage
            for window in _windows(field.tokens, len(query.tokens)):
                best = max(best, Levenshtein.normalized_similarity(query.text, window) * weight)

        return best


__all__ = [
    "DEFAULT_DISTANCE_TOLERANCE",
    "DEFAULT_MIN_MATCH_CHARS",
    "FuzzyMatcher",
    "Match",
    "normalize",
]
