"""
Canonical Store: hash-consing for game positions

Every distinct structural content {L|R} has at most one live GameNode at a
time. Nodes are created on demand and registered weakly, so the registry
never keeps a position alive on its own; once the last handle, option tuple
or cache entry lets go of a node, the garbage collector reclaims it and the
registry forgets it the next time that digest is looked up.

Digests are not trusted as identity. A lookup that finds live nodes under
the requested digest still compares their option tuples element by element;
a mismatch is a genuine collision and the new node is chained under the same
digest.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple
import itertools
import logging
import threading
import weakref

from .hashing import HashCombiner


logger = logging.getLogger("game_values.store")


class GameNode:
    """
    Immutable canonical representation of a position.

    Options are tuples of GameNode, duplicate-free by identity and sorted by
    (digest, serial). Equality and hashing are by identity: the store
    guarantees that identical structure means the identical object.
    `height` is the length of the longest chain of options below the node,
    0 for {|}.
    """

    __slots__ = ("left", "right", "digest", "serial", "height", "__weakref__")

    def __init__(
        self,
        left: Tuple[GameNode, ...],
        right: Tuple[GameNode, ...],
        digest: int,
        serial: int,
        height: int = 0,
    ):
        object.__setattr__(self, "left", left)
        object.__setattr__(self, "right", right)
        object.__setattr__(self, "digest", digest)
        object.__setattr__(self, "serial", serial)
        object.__setattr__(self, "height", height)

    def __setattr__(self, name, value):
        raise AttributeError("GameNode is immutable")

    def __delattr__(self, name):
        raise AttributeError("GameNode is immutable")

    def same_structure(self, left: Tuple[GameNode, ...], right: Tuple[GameNode, ...]) -> bool:
        """Element-wise identity comparison of canonical option tuples."""
        if len(self.left) != len(left) or len(self.right) != len(right):
            return False
        return (all(a is b for a, b in zip(self.left, left)) and
                all(a is b for a, b in zip(self.right, right)))

    def __repr__(self) -> str:
        return (f"GameNode(#{self.serial}, digest={self.digest:#018x}, "
                f"left={len(self.left)}, right={len(self.right)})")


@dataclass
class StoreStats:
    """Counters describing store activity."""
    created: int = 0
    reused: int = 0
    collisions: int = 0     # verified mismatches under an existing digest
    evicted: int = 0        # dead weak references dropped
    live: int = 0


def canonical_order(options: Iterable[GameNode]) -> Tuple[GameNode, ...]:
    """
    Deduplicate by identity and sort by (digest, serial).

    The serial breaks ties between colliding digests, so the order depends
    only on which nodes are present, never on how the caller listed them.
    """
    unique = dict.fromkeys(options)
    return tuple(sorted(unique, key=lambda node: (node.digest, node.serial)))


def _height(left: Tuple[GameNode, ...], right: Tuple[GameNode, ...]) -> int:
    return 1 + max((node.height for node in left + right), default=-1)


class CanonicalStore:
    """Weak, collision-verified registry of GameNode instances."""

    def __init__(self, combiner: Optional[HashCombiner] = None):
        self.combiner = combiner or HashCombiner()
        self._registry: Dict[int, List[weakref.ref]] = {}
        self._lock = threading.Lock()
        self._serials = itertools.count()
        self._stats = StoreStats()

    def intern(self, left: Iterable[GameNode], right: Iterable[GameNode]) -> GameNode:
        """Return the unique live node for {left|right}, creating it if needed."""
        left = canonical_order(left)
        right = canonical_order(right)
        digest = self.combiner.digest(
            [node.digest for node in left],
            [node.digest for node in right],
        )

        with self._lock:
            chain = self._registry.get(digest, [])
            live: List[weakref.ref] = []
            found = None
            dead = 0
            for ref in chain:
                node = ref()
                if node is None:
                    dead += 1
                    continue
                live.append(ref)
                if found is None and node.same_structure(left, right):
                    found = node

            if found is not None:
                self._stats.reused += 1
            else:
                if live:
                    self._stats.collisions += 1
                    logger.warning(
                        "Digest collision at %#018x: chaining entry %d",
                        digest, len(live) + 1,
                    )
                found = GameNode(left, right, digest, next(self._serials), _height(left, right))
                live.append(weakref.ref(found))
                self._stats.created += 1
                logger.debug("Created %r", found)

            if dead:
                self._stats.evicted += dead
                logger.debug("Evicted %d stale entries at %#018x", dead, digest)
            self._registry[digest] = live
            return found

    def purge(self) -> int:
        """Drop every dead weak reference; return how many were removed."""
        removed = 0
        with self._lock:
            for digest in list(self._registry):
                chain = self._registry[digest]
                live = [ref for ref in chain if ref() is not None]
                removed += len(chain) - len(live)
                if live:
                    self._registry[digest] = live
                else:
                    del self._registry[digest]
            self._stats.evicted += removed
        if removed:
            logger.debug("Purged %d stale entries", removed)
        return removed

    def _count_live(self) -> int:
        # Caller holds the lock
        return sum(
            1 for chain in self._registry.values() for ref in chain if ref() is not None
        )

    def __len__(self) -> int:
        with self._lock:
            return self._count_live()

    def stats(self) -> StoreStats:
        """Consistent snapshot: counters and live count are read under one lock."""
        with self._lock:
            return StoreStats(
                created=self._stats.created,
                reused=self._stats.reused,
                collisions=self._stats.collisions,
                evicted=self._stats.evicted,
                live=self._count_live(),
            )
