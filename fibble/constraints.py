"""
constraints.py

Filters the secret list down to the words consistent with a guess history.

WORDLE: a secret survives if, for every row, scoring the row's guess against
it gives exactly the reported pattern.

FIBBLE: a secret survives if, for every row on its own, the true pattern and
the reported pattern differ in exactly one tile. A row that matches perfectly
rules the secret out just like a row with two or more differences.

Nothing is cached: the candidate set is recomputed from the dictionary and
the history every time.
"""

import numpy as np

from fibble.game import GameMode
from fibble.lies import hamming_distance
from fibble.patterns import codes_to_digits, compute_pattern, encode_words, pattern_codes


def row_allows(secret: str, row, mode=GameMode.WORDLE) -> bool:
    """Whether a single *secret* is consistent with one reported row."""
    truth = compute_pattern(secret, row.guess)
    if mode is GameMode.FIBBLE:
        return hamming_distance(truth, row.tiles) == 1
    return truth == tuple(row.tiles)


def remaining_mask(dictionary, history, mode=GameMode.WORDLE) -> np.ndarray:
    """Boolean mask over dictionary.secrets of words consistent with *history*."""
    secret_codes = dictionary.secret_codes
    mask = np.ones(len(dictionary.secrets), dtype=bool)

    for row in history:
        guess_codes = encode_words([row.guess])[0]
        truth = pattern_codes(guess_codes, secret_codes)

        if mode is GameMode.FIBBLE:
            reported = np.array([int(tile.state) for tile in row.tiles], dtype=np.int64)
            mismatches = np.count_nonzero(codes_to_digits(truth) != reported, axis=1)
            mask &= mismatches == 1
        else:
            mask &= truth == row.pattern_code

    return mask


def remaining_secrets(dictionary, history, mode=GameMode.WORDLE) -> list[str]:
    """Secrets consistent with *history*, in the dictionary's order."""
    mask = remaining_mask(dictionary, history, mode)
    return [word for word, keep in zip(dictionary.secrets, mask) if keep]
