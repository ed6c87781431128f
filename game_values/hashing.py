"""
Structural Digests for Game Positions

A position is identified by the digests of its Left options followed by the
digests of its Right options. The combine step is the classic
boost-style fold:

    seed ^= h + MIXER + (seed << 6) + (seed >> 2)

performed in unsigned 64-bit arithmetic. Between the Left and Right halves a
separate differentiator constant is folded in, so that {A|B} and {B|A} do not
collide trivially.

The fold is order-sensitive: callers must pass option digests in the
canonical option order (see store.CanonicalStore).
"""

from __future__ import annotations
from typing import Iterable

import numpy as np


MIXER = np.uint64(0x9E3779B9)
DIFFERENTIATOR = np.uint64(0x9E3779B97F4A7C13)

_SHIFT_LEFT = np.uint64(6)
_SHIFT_RIGHT = np.uint64(2)


class HashCombiner:
    """
    Deterministic 64-bit digest of an ordered pair of option collections.

    Subclasses may override `digest`; the store only relies on it being a
    pure function of its arguments.
    """

    def _fold(self, seed: np.uint64, value: np.uint64) -> np.uint64:
        return seed ^ (value + MIXER + (seed << _SHIFT_LEFT) + (seed >> _SHIFT_RIGHT))

    def digest(self, left: Iterable[int], right: Iterable[int]) -> int:
        """Combine Left then Right option digests into one value in [0, 2**64)."""
        seed = np.uint64(0)
        # Wrap-around is the point of the mixing step
        with np.errstate(over="ignore"):
            for h in left:
                seed = self._fold(seed, np.uint64(h))
            seed = seed ^ (DIFFERENTIATOR + (seed << _SHIFT_LEFT) + (seed >> _SHIFT_RIGHT))
            for h in right:
                seed = self._fold(seed, np.uint64(h))
        return int(seed)
