import pytest

from game_values import GameContext, GameValue, make


@pytest.fixture
def context():
    """Fresh context per test: no cache or store state leaks between tests."""
    return GameContext()


@pytest.fixture
def games(context):
    """The basic positions used throughout the tests."""
    zero = GameValue.zero(context)
    one = make([zero], [], "1")
    minus_one = make([], [zero], "-1")
    star = make([zero], [zero], "*")
    return {
        "zero": zero,
        "one": one,
        "minus_one": minus_one,
        "star": star,
        "up": make([zero], [], "Up"),
        "down": make([], [zero], "Down"),
        "fuzzy": make([one], [minus_one], "Fuzzy"),
        "two": make([one], [], "2"),
        "half": make([zero], [one], "1/2"),
    }
