"""
Disjunctive sum and negation.

    G + H = { G + HL, GL + H | G + HR, GR + H }
    -G    = { -GR | -GL }
    G - H = G + (-H)

Sum and negation recurse into themselves and each keeps a memo table.
Sums are commutative by construction: the option sets of G + H and H + G
coincide and the store canonicalizes their order, so both orderings intern
to the same node. The sum table records a result under both orderings.
A negation also records the reverse mapping, since -(-G) is G itself.
"""

from __future__ import annotations

from .cache import MemoCache
from .recursion import headroom
from .store import CanonicalStore, GameNode


class Arithmetic:
    """Memoized sum, negation and difference over canonical nodes."""

    def __init__(self, store: CanonicalStore, memoize: bool = True):
        self.store = store
        self.sum_cache = MemoCache("sum", enabled=memoize)
        self.negation_cache = MemoCache("negation", enabled=memoize)

    def add(self, g: GameNode, h: GameNode) -> GameNode:
        with headroom(g.height + h.height + 1):
            return self._add(g, h)

    def _add(self, g: GameNode, h: GameNode) -> GameNode:
        cached = self.sum_cache.get((g, h))
        if cached is not None:
            return cached

        left = []
        for hl in h.left:
            left.append(self._add(g, hl))
        for gl in g.left:
            left.append(self._add(h, gl))
        right = []
        for hr in h.right:
            right.append(self._add(g, hr))
        for gr in g.right:
            right.append(self._add(h, gr))
        total = self.store.intern(left, right)

        self.sum_cache.put_many({(g, h): total, (h, g): total})
        return total

    def negate(self, g: GameNode) -> GameNode:
        with headroom(g.height + 1):
            return self._negate(g)

    def _negate(self, g: GameNode) -> GameNode:
        cached = self.negation_cache.get(g)
        if cached is not None:
            return cached

        left = []
        for gr in g.right:
            left.append(self._negate(gr))
        right = []
        for gl in g.left:
            right.append(self._negate(gl))
        negated = self.store.intern(left, right)

        self.negation_cache.put_many({g: negated, negated: g})
        return negated

    def subtract(self, g: GameNode, h: GameNode) -> GameNode:
        return self.add(g, self.negate(h))
