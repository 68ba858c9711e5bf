"""
lies.py

Feedback corruption for Fibble mode: exactly one tile of every reported
row is false.

The random generator is always passed in. Nothing here touches global
random state, so scoring and filtering stay reproducible.
"""

import numpy as np

from fibble.patterns import Tile, TileState


def other_states(state: TileState) -> tuple[TileState, TileState]:
    """The two states a tile can lie about, in digit order."""
    return tuple(s for s in TileState if s != state)


def inject_lie(pattern, rng: np.random.Generator) -> tuple[Tile, ...]:
    """
    Return a copy of *pattern* with one tile changed to a different state.

    The position is uniform over the pattern, and the replacement is one of
    the two other states with equal probability. The letter is kept.
    """
    tiles = tuple(pattern)
    if not tiles:
        raise ValueError("cannot inject a lie into an empty pattern")

    index = int(rng.integers(len(tiles)))
    original = tiles[index]
    choices = other_states(original.state)
    lie = Tile(choices[int(rng.integers(2))], original.letter)
    return tiles[:index] + (lie,) + tiles[index + 1 :]


def hamming_distance(left, right) -> int:
    """Number of positions whose states differ."""
    return sum(1 for a, b in zip(left, right) if a.state != b.state)
