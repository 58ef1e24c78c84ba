"""
In-memory memo of remote enhancement results.

Keys are the raw input text, compared byte for byte (no canonicalization).
The cache is unbounded for the process lifetime and write-once: a second
``put`` for an existing key is ignored.
"""

from __future__ import annotations

import threading
from typing import Dict, Optional


class EnhancementCache:
    def __init__(self) -> None:
        self._cache: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        """
        Get value from cache.

        Args:
            key: Raw input text

        Returns:
            Cached enhancement or None if miss
        """
        with self._lock:
            return self._cache.get(key)

    def put(self, key: str, value: str) -> bool:
        """
        Store a value unless the key is already present.

        Returns:
            True if the value was written, False if an earlier value won
        """
        with self._lock:
            if key in self._cache:
                return False
            self._cache[key] = value
            return True

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache

    def size(self) -> int:
        with self._lock:
            return len(self._cache)


__all__ = ["EnhancementCache"]
