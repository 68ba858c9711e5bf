"""
errors.py

Exceptions raised while validating words and building dictionaries.
"""


class WordleError(ValueError):
    """A guess or secret that cannot be played. Callers may re-prompt."""


class InvalidLengthError(WordleError):
    def __init__(self, expected: int, found: int):
        self.expected = expected
        self.found = found
        super().__init__(f"expected a {expected}-letter word, but found {found} letters")


class UnknownWordError(WordleError):
    def __init__(self, word: str):
        self.word = word
        super().__init__("that word is not in the Wordle list")


class FatalConfigError(RuntimeError):
    """Word lists violate the dictionary invariant. Not recoverable."""
