"""
game_values: Combinatorial Game Theory Values

Positions of partizan combinatorial games, built recursively from a set of
Left options and a set of Right options:

    G = { GL1, GL2, ... | GR1, GR2, ... }

This package provides:
- HashCombiner: 64-bit structural digest of a position's options
- CanonicalStore: hash-consing registry (one live node per structure)
- GameValue: immutable handle with operators +, -, <=, >=, ==, !=, <, >
- Comparator: memoized partial order, relations and outcome classes
- Arithmetic: memoized disjunctive sum, negation and difference
- GameContext: explicit evaluation context (store + caches)

Key facts:
- Structurally identical positions share one canonical node
- Equality is the game equivalence G <= H and H <= G, not identity
- The order is partial: star is confused with zero

Example usage:
    from game_values import GameValue, make

    zero = GameValue.zero()
    one = make([zero], [], "1")
    star = make([zero], [zero], "*")

    assert one > zero
    assert star + star == zero
    assert star.confused_with(zero)
    print(star)   # {{|}|{|}}
"""

__version__ = "0.1.0"
__author__ = "game_values Team"

from .hashing import (
    HashCombiner,
    MIXER,
    DIFFERENTIATOR,
)

from .store import (
    CanonicalStore,
    GameNode,
    StoreStats,
)

from .cache import (
    MemoCache,
    CacheStats,
)

from .comparison import (
    Comparator,
    Relation,
    Outcome,
)

from .arithmetic import Arithmetic

from .context import (
    GameConfig,
    GameContext,
    get_default_context,
    set_default_context,
)

from .values import (
    GameValue,
    make,
    confused,
    comparison_table,
)

from .display import render

__all__ = [
    # Hashing
    "HashCombiner",
    "MIXER",
    "DIFFERENTIATOR",
    # Store
    "CanonicalStore",
    "GameNode",
    "StoreStats",
    # Caches
    "MemoCache",
    "CacheStats",
    # Order
    "Comparator",
    "Relation",
    "Outcome",
    # Arithmetic
    "Arithmetic",
    # Context
    "GameConfig",
    "GameContext",
    "get_default_context",
    "set_default_context",
    # Values
    "GameValue",
    "make",
    "confused",
    "comparison_table",
    # Display
    "render",
]
