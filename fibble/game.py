"""
game.py

A single Wordle or Fibble round: the secret word, the rules, and the
append-only history of reported rows.
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from fibble.lies import inject_lie
from fibble.patterns import (
    Tile,
    TileState,
    colored_string,
    compute_pattern,
    encode_pattern,
    pattern_to_string,
)


WORDLE_MAX_ATTEMPTS = 6
FIBBLE_MAX_ATTEMPTS = 9


class GameMode(Enum):
    """
    WORDLE reports the true pattern for every guess.
    FIBBLE reports a pattern with exactly one false tile.
    """

    WORDLE = "wordle"
    FIBBLE = "fibble"

    @property
    def max_attempts(self) -> int:
        if self is GameMode.FIBBLE:
            return FIBBLE_MAX_ATTEMPTS
        return WORDLE_MAX_ATTEMPTS

    @classmethod
    def parse(cls, value: str) -> "GameMode":
        try:
            return cls(value.strip().lower())
        except ValueError as exc:
            raise ValueError(f"unknown mode: {value}") from exc


@dataclass(frozen=True)
class GuessRow:
    """A normalized guess and the pattern that was reported for it."""

    guess: str
    tiles: tuple[Tile, ...]

    @property
    def pattern_code(self) -> int:
        return encode_pattern(self.tiles)

    @property
    def is_correct(self) -> bool:
        """Whether every reported tile is green."""
        return all(tile.state == TileState.CORRECT for tile in self.tiles)

    def pattern_string(self) -> str:
        return pattern_to_string(self.tiles)

    def colored_string(self) -> str:
        return colored_string(self.tiles)

    def __str__(self):
        return self.colored_string()


class Game:
    """
    One round against a fixed secret.

    Parameters
    ----------
    dictionary : Dictionary
        Word lists; both the secret and every guess must be allowed words.
    secret : str
        Any casing; normalized and validated like a guess.
    mode : GameMode
    rng : numpy.random.Generator or None
        Source for Fibble lies. A fresh generator is created when omitted.
    """

    def __init__(self, dictionary, secret, mode=GameMode.WORDLE, rng=None):
        self._dictionary = dictionary
        self._secret = dictionary.validate(secret)
        self._mode = mode
        self._rng = rng if rng is not None else np.random.default_rng()
        self._history: list[GuessRow] = []

    @property
    def dictionary(self):
        return self._dictionary

    @property
    def secret(self) -> str:
        return self._secret

    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def history(self) -> tuple[GuessRow, ...]:
        return tuple(self._history)

    @property
    def max_attempts(self) -> int:
        return self._mode.max_attempts

    @property
    def attempts_left(self) -> int:
        return max(0, self.max_attempts - len(self._history))

    @property
    def is_solved(self) -> bool:
        return bool(self._history) and self._history[-1].guess == self._secret

    @property
    def is_over(self) -> bool:
        return self.is_solved or self.attempts_left == 0

    def submit_guess(self, guess: str) -> GuessRow:
        """
        Score *guess* and append the reported row to the history.

        The guess is fully validated before anything is recorded, so an
        InvalidLengthError or UnknownWordError leaves the history untouched.
        Once the game is over every further guess raises RuntimeError.
        """
        if self.is_over:
            raise RuntimeError("Game is already over")
        word = self._dictionary.validate(guess)
        tiles = compute_pattern(self._secret, word)
        if self._mode is GameMode.FIBBLE:
            tiles = inject_lie(tiles, self._rng)

        row = GuessRow(word, tiles)
        self._history.append(row)
        return row
