"""
GameValue: the client-facing handle on a canonical position.

A GameValue pairs a shared GameNode with a descriptive label. The label is
not part of identity, digest or equality: two values with different labels
and the same options share one node and compare equal.

Comparison operators implement the game-theoretic partial order, so
`G == H` may hold for structurally different positions (for instance
`star + star == zero`). For that reason GameValue is not hashable; use
`.node` (identity) or `.digest` when a dictionary key is needed.

Preconditions: options must be existing GameValues of the same context, so
option trees are finite and acyclic by construction. The recursive
operators raise the interpreter recursion limit for the height of their
operands (see recursion.headroom), so tall trees such as integer(1000)
are handled. Equality against a value of another context is False rather
than an error; ordering and arithmetic across contexts raise ValueError.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple
import itertools

import numpy as np

from .comparison import Outcome, Relation
from .context import GameContext, get_default_context
from .display import render
from .store import GameNode


@dataclass(frozen=True, eq=False, repr=False)
class GameValue:
    """Immutable handle: canonical node, owning context, display label."""
    node: GameNode
    context: GameContext
    label: str = ""

    __hash__ = None

    @classmethod
    def make(
        cls,
        left: Iterable[GameValue] = (),
        right: Iterable[GameValue] = (),
        label: str = "",
        context: Optional[GameContext] = None,
    ) -> GameValue:
        """Build {left|right}, reusing the existing node for identical structure."""
        left = list(left)
        right = list(right)
        options = left + right
        for option in options:
            if not isinstance(option, GameValue):
                raise TypeError(f"Options must be GameValue, got {type(option).__name__}")

        if context is None:
            context = options[0].context if options else get_default_context()
        for option in options:
            if option.context is not context:
                raise ValueError("Cannot combine values from different contexts")

        node = context.store.intern(
            [option.node for option in left],
            [option.node for option in right],
        )
        return cls(node, context, label)

    @classmethod
    def zero(cls, context: Optional[GameContext] = None) -> GameValue:
        """0 = { | }"""
        return cls.make((), (), "0", context)

    @classmethod
    def star(cls, context: Optional[GameContext] = None) -> GameValue:
        """* = {0 | 0}"""
        return cls.nimber(1, context)

    @classmethod
    def integer(cls, n: int, context: Optional[GameContext] = None) -> GameValue:
        """n = {n-1 | } for n > 0, -n = { | -(n-1)} for n < 0."""
        value = cls.zero(context)
        for k in range(1, abs(n) + 1):
            if n > 0:
                value = cls.make([value], [], str(k), value.context)
            else:
                value = cls.make([], [value], str(-k), value.context)
        return value

    @classmethod
    def nimber(cls, n: int, context: Optional[GameContext] = None) -> GameValue:
        """*n = {0, *1, ..., *(n-1) | 0, *1, ..., *(n-1)}"""
        if n < 0:
            raise ValueError(f"Nimber heap size must be non-negative, got {n}")
        heaps: List[GameValue] = [cls.zero(context)]
        for k in range(1, n + 1):
            label = "*" if k == 1 else f"*{k}"
            heaps.append(cls.make(heaps, heaps, label, heaps[0].context))
        return heaps[n]

    @classmethod
    def switch(cls, left: GameValue, right: GameValue) -> GameValue:
        """{left | right}"""
        return cls.make([left], [right])

    # ---------- queries ----------

    @property
    def left_options(self) -> Tuple[GameValue, ...]:
        return tuple(GameValue(node, self.context) for node in self.node.left)

    @property
    def right_options(self) -> Tuple[GameValue, ...]:
        return tuple(GameValue(node, self.context) for node in self.node.right)

    @property
    def digest(self) -> int:
        return self.node.digest

    def with_label(self, label: str) -> GameValue:
        return GameValue(self.node, self.context, label)

    def is_identical(self, other: GameValue) -> bool:
        """Same canonical node (structural identity, not game equality)."""
        return self.node is other.node

    def outcome(self) -> Outcome:
        return self.context.comparator.outcome(self.node)

    def relation(self, other: GameValue) -> Relation:
        self._check_context(other)
        return self.context.comparator.relation(self.node, other.node)

    # ---------- arithmetic ----------

    def _check_context(self, other: GameValue) -> None:
        if other.context is not self.context:
            raise ValueError("Cannot combine values from different contexts")

    def add(self, other: GameValue, label: str = "") -> GameValue:
        self._check_context(other)
        return GameValue(self.context.arithmetic.add(self.node, other.node), self.context, label)

    def negate(self) -> GameValue:
        """
        -G, labelled by prefixing the negation marker to a non-empty label.

        The marker is prefixed unconditionally, so negating twice gives the
        original value under the label "--x".
        """
        label = self.context.config.negation_marker + self.label if self.label else ""
        return GameValue(self.context.arithmetic.negate(self.node), self.context, label)

    def subtract(self, other: GameValue, label: str = "") -> GameValue:
        self._check_context(other)
        return GameValue(self.context.arithmetic.subtract(self.node, other.node), self.context, label)

    def __add__(self, other):
        if not isinstance(other, GameValue):
            return NotImplemented
        return self.add(other)

    def __neg__(self) -> GameValue:
        return self.negate()

    def __sub__(self, other):
        if not isinstance(other, GameValue):
            return NotImplemented
        return self.subtract(other)

    # ---------- order ----------

    def __le__(self, other):
        if not isinstance(other, GameValue):
            return NotImplemented
        self._check_context(other)
        return self.context.comparator.leq(self.node, other.node)

    def __ge__(self, other):
        if not isinstance(other, GameValue):
            return NotImplemented
        self._check_context(other)
        return self.context.comparator.geq(self.node, other.node)

    def __eq__(self, other):
        # Values of another context fall back to identity, so containers work
        if not isinstance(other, GameValue) or other.context is not self.context:
            return NotImplemented
        return self.context.comparator.eq(self.node, other.node)

    def __ne__(self, other):
        if not isinstance(other, GameValue) or other.context is not self.context:
            return NotImplemented
        return self.context.comparator.neq(self.node, other.node)

    def __lt__(self, other):
        if not isinstance(other, GameValue):
            return NotImplemented
        self._check_context(other)
        return self.context.comparator.lt(self.node, other.node)

    def __gt__(self, other):
        if not isinstance(other, GameValue):
            return NotImplemented
        self._check_context(other)
        return self.context.comparator.gt(self.node, other.node)

    def confused_with(self, other: GameValue) -> bool:
        """Neither G <= H nor H <= G."""
        self._check_context(other)
        return self.context.comparator.confused(self.node, other.node)

    # ---------- display ----------

    def __str__(self) -> str:
        return render(self.node)

    def __repr__(self) -> str:
        if self.label:
            return f"GameValue({self.label!r}, {render(self.node)})"
        return f"GameValue({render(self.node)})"


make = GameValue.make


def confused(g: GameValue, h: GameValue) -> bool:
    return g.confused_with(h)


def comparison_table(values: Sequence[GameValue]) -> np.ndarray:
    """int8 matrix of Relation codes; entry [i, j] relates values[i] to values[j]."""
    if not values:
        return np.zeros((0, 0), dtype=np.int8)
    context = values[0].context
    for value in itertools.islice(values, 1, None):
        if value.context is not context:
            raise ValueError("Cannot combine values from different contexts")
    return context.comparator.table([value.node for value in values])
