from .catalog import INTENT_TABLE, POPULAR_IDS, CatalogEntry, Category, IntentCatalog
from .matcher import FuzzyMatcher, Match, normalize
from .scorer import ContextualScorer, Suggestion, UsageState

__all__ = [
    "INTENT_TABLE",
    "POPULAR_IDS",
    "CatalogEntry",
    "Category",
    "IntentCatalog",
    "FuzzyMatcher",
    "Match",
    "normalize",
    "ContextualScorer",
    "Suggestion",
    "UsageState",
]
