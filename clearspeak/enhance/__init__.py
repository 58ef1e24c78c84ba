from .cache import EnhancementCache
from .heuristic import rewrite
from .resolver import Enhancement, EnhancementResolver, EnhancementTier

__all__ = [
    "EnhancementCache",
    "rewrite",
    "Enhancement",
    "EnhancementResolver",
    "EnhancementTier",
]
