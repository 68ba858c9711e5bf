"""
patterns.py

Scores a guess against a secret and encodes the feedback pattern.

A pattern is a tuple of WORD_LENGTH tiles. Each tile carries the guessed
letter and one of three states, which double as base-3 digits:

    0 = absent  (gray)
    1 = present (yellow)
    2 = correct (green)

The pattern code is the base-3 number formed by the digits, most significant
position first, so every code lies in 0..PATTERN_SPACE - 1.

Two implementations of the same two-pass scoring rule live here: a plain
Python one that returns tiles for display and history, and a Numba kernel
that scores one guess against a whole array of encoded secrets at once.
Everything that needs entropy or filtering over many words goes through the
kernel.
"""

from enum import IntEnum
from typing import NamedTuple

import numpy as np
from numba import njit

from fibble.errors import InvalidLengthError


WORD_LENGTH = 5
ALPHABET_SIZE = 26
PATTERN_SPACE = 3**WORD_LENGTH

# Place value of each position, most significant first: 81, 27, 9, 3, 1
PLACE_VALUES = 3 ** np.arange(WORD_LENGTH - 1, -1, -1, dtype=np.int64)

_RESET = "\x1b[0m"


class TileState(IntEnum):
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def color_code(self) -> str:
        return _COLOR_CODES[self]


_SYMBOLS = {
    TileState.ABSENT: "B",
    TileState.PRESENT: "Y",
    TileState.CORRECT: "G",
}

_COLOR_CODES = {
    TileState.CORRECT: "\x1b[48;5;34m\x1b[97m",  # green background, bright text
    TileState.PRESENT: "\x1b[48;5;178m\x1b[30m",  # yellow background, dark text
    TileState.ABSENT: "\x1b[48;5;240m\x1b[97m",  # gray background, bright text
}


class Tile(NamedTuple):
    """Feedback for one position: the state and the guessed letter."""

    state: TileState
    letter: str

    def colored_block(self) -> str:
        return f"{self.state.color_code} {self.letter} {_RESET}"


def _letter_index(letter: str) -> int:
    return ord(letter) - ord("A")


def compute_digits(secret: str, guess: str) -> list[int]:
    """
    Return the per-position base-3 digits for *guess* against *secret*.

    Both words must already be normalized (uppercase, WORD_LENGTH letters).

    1. Greens first. Every secret letter that is not matched in place goes
       into a 26-bucket leftover count.
    2. Then yellows, left to right, while leftovers of that letter remain.
       Later duplicates of an exhausted letter stay gray.
    """
    digits = [int(TileState.ABSENT)] * WORD_LENGTH
    leftovers = [0] * ALPHABET_SIZE

    for i in range(WORD_LENGTH):
        if guess[i] == secret[i]:
            digits[i] = int(TileState.CORRECT)
        else:
            leftovers[_letter_index(secret[i])] += 1

    for i in range(WORD_LENGTH):
        if digits[i] == TileState.CORRECT:
            continue
        lookup = _letter_index(guess[i])
        if leftovers[lookup] > 0:
            digits[i] = int(TileState.PRESENT)
            leftovers[lookup] -= 1

    return digits


def compute_pattern(secret: str, guess: str) -> tuple[Tile, ...]:
    """Score *guess* against *secret* as a tuple of tiles."""
    digits = compute_digits(secret, guess)
    return tuple(Tile(TileState(d), letter) for d, letter in zip(digits, guess))


def encode_digits(digits) -> int:
    code = 0
    for d in digits:
        code = code * 3 + int(d)
    return code


def encode_pattern(pattern) -> int:
    """Encode a tuple of tiles as a single integer in 0..PATTERN_SPACE - 1."""
    return encode_digits(tile.state for tile in pattern)


def code_to_digits(code: int) -> tuple[int, ...]:
    digits = [0] * WORD_LENGTH
    for i in range(WORD_LENGTH - 1, -1, -1):
        digits[i] = code % 3
        code //= 3
    return tuple(digits)


def decode_pattern_code(code: int) -> str:
    """Render a pattern code as a G/Y/B display string, e.g. 242 -> 'GGGGG'."""
    return "".join(TileState(d).symbol for d in code_to_digits(code))


def pattern_to_string(pattern) -> str:
    return "".join(tile.state.symbol for tile in pattern)


def pattern_from_code(code: int, guess: str) -> tuple[Tile, ...]:
    """Rebuild the tiles for *guess* from a pattern code."""
    return tuple(
        Tile(TileState(d), letter) for d, letter in zip(code_to_digits(code), guess)
    )


def colored_string(pattern) -> str:
    return " ".join(tile.colored_block() for tile in pattern)


def normalize_letters(word: str) -> str:
    """
    Trim and uppercase *word*; it must then be WORD_LENGTH ASCII letters.

    Raises InvalidLengthError for the wrong length and ValueError for any
    other character.
    """
    normalized = word.strip().upper()
    if len(normalized) != WORD_LENGTH:
        raise InvalidLengthError(WORD_LENGTH, len(normalized))
    if not (normalized.isascii() and normalized.isalpha()):
        raise ValueError(f"not a word of ASCII letters: {word!r}")
    return normalized


def encode_words(words) -> np.ndarray:
    """
    Encode words as an (n, WORD_LENGTH) uint8 array of letter indices 0..25.

    Every word goes through normalize_letters first, so the kernels never
    see an index outside the alphabet.
    """
    words = [normalize_letters(word) for word in words]
    if not words:
        return np.empty((0, WORD_LENGTH), dtype=np.uint8)
    raw = np.frombuffer("".join(words).encode("ascii"), dtype=np.uint8)
    return (raw - ord("A")).astype(np.uint8).reshape(-1, WORD_LENGTH)


@njit(cache=True)
def pattern_codes(guess, secrets):
    """
    Pattern codes for one encoded guess against every row of *secrets*.

    Same two-pass rule as compute_digits, one uint8 code per secret row.
    """
    n = secrets.shape[0]
    codes = np.empty(n, dtype=np.uint8)
    digits = np.zeros(WORD_LENGTH, dtype=np.int64)
    leftovers = np.zeros(ALPHABET_SIZE, dtype=np.int64)

    for row in range(n):
        leftovers[:] = 0

        for i in range(WORD_LENGTH):
            if guess[i] == secrets[row, i]:
                digits[i] = 2
            else:
                digits[i] = 0
                leftovers[secrets[row, i]] += 1

        code = 0
        for i in range(WORD_LENGTH):
            if digits[i] == 0:
                letter = guess[i]
                if leftovers[letter] > 0:
                    digits[i] = 1
                    leftovers[letter] -= 1
            code = code * 3 + digits[i]

        codes[row] = code

    return codes


def codes_to_digits(codes: np.ndarray) -> np.ndarray:
    """Expand an array of pattern codes into an (n, WORD_LENGTH) digit array."""
    return (codes.astype(np.int64)[:, None] // PLACE_VALUES) % 3
