"""
Evaluation context: one canonical store plus the three operator caches.

Values built in one context can only be combined with values of the same
context. Tests build a fresh context each so that cache state never leaks
between them; everyday use goes through the process-wide default.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Union
import logging
import threading

from .arithmetic import Arithmetic
from .cache import CacheStats
from .comparison import Comparator
from .hashing import HashCombiner
from .store import CanonicalStore, StoreStats


logger = logging.getLogger("game_values.context")


@dataclass
class GameConfig:
    """Configuration for a GameContext."""
    memoize: bool = True            # False: every query is a fresh recursion
    negation_marker: str = "-"      # prefix applied to labels by negation


class GameContext:
    """Owns the store, comparator and arithmetic shared by a family of values."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        combiner: Optional[HashCombiner] = None,
    ):
        self.config = config or GameConfig()
        self.store = CanonicalStore(combiner)
        self.comparator = Comparator(self.store, memoize=self.config.memoize)
        self.arithmetic = Arithmetic(self.store, memoize=self.config.memoize)

    def clear_caches(self) -> None:
        """Drop every memoized result; nodes held only by caches become collectable."""
        self.comparator.cache.clear()
        self.arithmetic.sum_cache.clear()
        self.arithmetic.negation_cache.clear()

    def stats(self) -> Dict[str, Union[CacheStats, StoreStats]]:
        return {
            "store": self.store.stats(),
            "leq": self.comparator.cache.stats(),
            "sum": self.arithmetic.sum_cache.stats(),
            "negation": self.arithmetic.negation_cache.stats(),
        }

    def __repr__(self) -> str:
        return f"GameContext(memoize={self.config.memoize}, nodes={len(self.store)})"


_default_context: Optional[GameContext] = None
_default_lock = threading.Lock()


def get_default_context() -> GameContext:
    """Return the process-wide context, creating it on first use."""
    global _default_context
    with _default_lock:
        if _default_context is None:
            _default_context = GameContext()
            logger.debug("Created default context")
        return _default_context


def set_default_context(context: Optional[GameContext]) -> None:
    """Replace the process-wide context; None resets it to a fresh one on next use."""
    global _default_context
    with _default_lock:
        _default_context = context
