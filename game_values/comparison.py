"""
The partial order on game positions.

    G <= H  iff  no Left option GL of G has H <= GL
            and  no Right option HR of H has HR <= G

There is no closed form; the relation is evaluated by mutual recursion over
both option sets. Every call, including nested ones, goes through a memo
table keyed by the ordered pair of nodes, since the same sub-pair shows up
in many branches of a large tree. Recursion always descends into a strict
sub-option of one operand, so it terminates on finite trees and its depth
is bounded by the combined height of the two operands.

The order is partial: two positions can be confused (neither G <= H nor
H <= G). It must never be used as a sort or deduplication key.
"""

from __future__ import annotations
from enum import IntEnum
from typing import Sequence

import numpy as np

from .cache import MemoCache
from .recursion import headroom
from .store import CanonicalStore, GameNode


class Relation(IntEnum):
    """How G stands with respect to H."""
    EQUAL = 0
    LESS = 1
    GREATER = 2
    CONFUSED = 3


class Outcome(IntEnum):
    """Outcome class of a position, i.e. its relation to zero."""
    ZERO = 0        # second player wins
    POSITIVE = 1    # Left wins
    NEGATIVE = 2    # Right wins
    FUZZY = 3       # first player wins


_OUTCOME_BY_RELATION = {
    Relation.EQUAL: Outcome.ZERO,
    Relation.GREATER: Outcome.POSITIVE,
    Relation.LESS: Outcome.NEGATIVE,
    Relation.CONFUSED: Outcome.FUZZY,
}


class Comparator:
    """Memoized `<=` with the relations derived from it."""

    def __init__(self, store: CanonicalStore, memoize: bool = True):
        self.store = store
        self.cache = MemoCache("leq", enabled=memoize)
        self.zero = store.intern((), ())

    def leq(self, g: GameNode, h: GameNode) -> bool:
        with headroom(g.height + h.height + 1):
            return self._leq(g, h)

    def _leq(self, g: GameNode, h: GameNode) -> bool:
        key = (g, h)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        result = True
        for gl in g.left:
            if self._leq(h, gl):
                result = False
                break
        if result:
            for hr in h.right:
                if self._leq(hr, g):
                    result = False
                    break

        self.cache.put(key, result)
        return result

    def geq(self, g: GameNode, h: GameNode) -> bool:
        return self.leq(h, g)

    def eq(self, g: GameNode, h: GameNode) -> bool:
        return self.leq(g, h) and self.leq(h, g)

    def neq(self, g: GameNode, h: GameNode) -> bool:
        return not self.eq(g, h)

    def lt(self, g: GameNode, h: GameNode) -> bool:
        return self.leq(g, h) and not self.leq(h, g)

    def gt(self, g: GameNode, h: GameNode) -> bool:
        return self.lt(h, g)

    def confused(self, g: GameNode, h: GameNode) -> bool:
        return not self.leq(g, h) and not self.leq(h, g)

    def relation(self, g: GameNode, h: GameNode) -> Relation:
        below = self.leq(g, h)
        above = self.leq(h, g)
        if below and above:
            return Relation.EQUAL
        if below:
            return Relation.LESS
        if above:
            return Relation.GREATER
        return Relation.CONFUSED

    def outcome(self, g: GameNode) -> Outcome:
        return _OUTCOME_BY_RELATION[self.relation(g, self.zero)]

    def table(self, nodes: Sequence[GameNode]) -> np.ndarray:
        """
        Pairwise relation matrix.

        Entry [i, j] is the Relation code of nodes[i] against nodes[j];
        the diagonal is EQUAL.
        """
        n = len(nodes)
        table = np.zeros((n, n), dtype=np.int8)
        for i in range(n):
            for j in range(i + 1, n):
                rel = self.relation(nodes[i], nodes[j])
                table[i, j] = rel
                if rel == Relation.LESS:
                    table[j, i] = Relation.GREATER
                elif rel == Relation.GREATER:
                    table[j, i] = Relation.LESS
                else:
                    table[j, i] = rel
        return table
