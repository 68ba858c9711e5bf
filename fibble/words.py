"""
words.py

Handles loading, normalizing and validating the word lists.

The Dictionary built here is the only place word-list invariants are
checked. Everything downstream assumes every secret is also an allowed guess.
"""

from pathlib import Path

import numpy as np

from fibble.errors import FatalConfigError, InvalidLengthError, UnknownWordError
from fibble.patterns import WORD_LENGTH, encode_words


DATA_DIR = Path(__file__).resolve().parent.parent / "data"
ALLOWED_PATH = DATA_DIR / "allowed.txt"
SECRETS_PATH = DATA_DIR / "secrets.txt"


def normalize(word: str) -> str:
    """
    Trim and uppercase *word*, then check its length.

    Raises InvalidLengthError when the trimmed word is not WORD_LENGTH long.
    """
    normalized = word.strip().upper()
    if len(normalized) != WORD_LENGTH:
        raise InvalidLengthError(WORD_LENGTH, len(normalized))
    return normalized


class Dictionary:
    """
    Immutable pair of ordered word lists: allowed guesses and secrets.

    Construction fails with FatalConfigError if any secret is missing from
    the allowed list, or if either list is empty.
    """

    def __init__(self, allowed, secrets):
        self._allowed = tuple(allowed)
        self._secrets = tuple(secrets)

        if not self._allowed:
            raise FatalConfigError("allowed word list is empty")
        if not self._secrets:
            raise FatalConfigError("secret word list is empty")

        for word in self._allowed:
            if not is_word(word):
                raise FatalConfigError(f"malformed word {word!r} in allowed list")

        self._allowed_set = frozenset(self._allowed)
        for word in self._secrets:
            if word not in self._allowed_set:
                raise FatalConfigError(f"secret word {word} missing from allowed list")

        self._allowed_codes = _read_only(encode_words(self._allowed))
        self._secret_codes = _read_only(encode_words(self._secrets))
        self._allowed_index = {word: i for i, word in enumerate(self._allowed)}

    @property
    def allowed(self) -> tuple[str, ...]:
        return self._allowed

    @property
    def secrets(self) -> tuple[str, ...]:
        return self._secrets

    @property
    def allowed_codes(self) -> np.ndarray:
        return self._allowed_codes

    @property
    def secret_codes(self) -> np.ndarray:
        return self._secret_codes

    def __contains__(self, word) -> bool:
        return word in self._allowed_set

    def __repr__(self):
        return f"Dictionary(allowed={len(self._allowed)}, secrets={len(self._secrets)})"

    def index_of(self, word: str) -> int:
        """Position of a normalized word in the allowed list."""
        return self._allowed_index[word]

    def validate(self, word: str) -> str:
        """
        Normalize *word* and check it is an allowed guess.

        Raises InvalidLengthError or UnknownWordError, in that order.
        """
        normalized = normalize(word)
        if normalized not in self._allowed_set:
            raise UnknownWordError(normalized)
        return normalized


def _read_only(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


def load_word_list(path):
    """Load a newline-separated word list, skipping blank lines."""
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def is_word(word: str) -> bool:
    """True for exactly WORD_LENGTH uppercase ASCII letters."""
    return (
        len(word) == WORD_LENGTH
        and word.isascii()
        and word.isalpha()
        and word.isupper()
    )


def load_dictionary(allowed_path=ALLOWED_PATH, secrets_path=SECRETS_PATH) -> Dictionary:
    """
    Build the Dictionary from two word-list files.

    Lines are trimmed and uppercased; anything that is not a WORD_LENGTH
    ASCII word is dropped, as are repeats. A secret that is not an allowed
    guess is fatal.
    """
    try:
        raw_allowed = load_word_list(allowed_path)
        raw_secrets = load_word_list(secrets_path)
    except OSError as exc:
        raise FatalConfigError(f"could not read word list: {exc}") from exc

    # dict.fromkeys drops repeats and keeps first-seen order
    allowed = dict.fromkeys(w.upper() for w in raw_allowed if is_word(w.upper()))
    secrets = dict.fromkeys(w.upper() for w in raw_secrets if is_word(w.upper()))
    print(f"Loaded {len(allowed)} allowed guesses and {len(secrets)} secret words.")
    return Dictionary(allowed, secrets)
