"""
Memo tables for the recursive operators.

Each table has its own lock, held only for the instant of a single read or
write. Recursive evaluation therefore never holds a lock across a nested
call on the same table. Two threads may compute the same entry at once;
results are interned, so both arrive at the same value and the first write
is kept.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Hashable, Mapping, Optional
import logging
import threading


logger = logging.getLogger("game_values.cache")


@dataclass
class CacheStats:
    """Hit/miss counters for one memo table."""
    name: str
    hits: int = 0
    misses: int = 0
    size: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0


class MemoCache:
    """Thread-safe dictionary with hit/miss accounting; can be switched off."""

    def __init__(self, name: str, enabled: bool = True):
        self.name = name
        self.enabled = enabled
        self._entries: Dict[Hashable, Any] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: Hashable) -> Optional[Any]:
        """Return the cached value or None. Stored values are never None."""
        if not self.enabled:
            return None
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self._misses += 1
            else:
                self._hits += 1
            return value

    def put(self, key: Hashable, value: Any) -> Any:
        """Store value unless already present; return whichever is kept."""
        if not self.enabled:
            return value
        with self._lock:
            return self._entries.setdefault(key, value)

    def put_many(self, items: Mapping[Hashable, Any]) -> None:
        if not self.enabled:
            return
        with self._lock:
            for key, value in items.items():
                self._entries.setdefault(key, value)

    def clear(self) -> None:
        with self._lock:
            size = len(self._entries)
            self._entries.clear()
            self._hits = 0
            self._misses = 0
        logger.debug("Cleared %s cache (%d entries)", self.name, size)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                name=self.name,
                hits=self._hits,
                misses=self._misses,
                size=len(self._entries),
            )
