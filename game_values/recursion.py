"""
Recursion headroom for the structural recursions.

Order, sum and negation recurse once per level of the option tree, so the
stack they need grows with the height of their operands. Each public entry
point runs inside `headroom(levels)`, which raises the interpreter recursion
limit far enough for that many levels on top of whatever the caller already
uses. The limit is process-wide: raises are reference-counted and the limit
seen before the first one comes back when the last evaluation finishes.
"""

from __future__ import annotations
from contextlib import contextmanager
from typing import Iterator, Optional
import logging
import sys
import threading


logger = logging.getLogger("game_values.recursion")

FRAMES_PER_LEVEL = 2        # recursive frame plus a transient helper call
SLACK = 64                  # intern, digest and cache calls at the deepest level
SHALLOW = 100               # trees this low never need a raise

_lock = threading.Lock()
_active = 0
_saved: Optional[int] = None


def required_limit(base: int, levels: int) -> int:
    return base + FRAMES_PER_LEVEL * levels + SLACK


@contextmanager
def headroom(levels: int) -> Iterator[None]:
    """Keep the recursion limit high enough for `levels` nested evaluations."""
    global _active, _saved
    if levels < SHALLOW:
        yield
        return

    with _lock:
        if _active == 0:
            _saved = sys.getrecursionlimit()
        _active += 1
        target = required_limit(_saved, levels)
        if target > sys.getrecursionlimit():
            sys.setrecursionlimit(target)
            logger.debug("Raised recursion limit to %d for %d levels", target, levels)
    try:
        yield
    finally:
        with _lock:
            _active -= 1
            if _active == 0:
                if sys.getrecursionlimit() != _saved:
                    sys.setrecursionlimit(_saved)
                    logger.debug("Restored recursion limit to %d", _saved)
                _saved = None
