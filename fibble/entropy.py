"""
entropy.py

Shannon entropy of the feedback distribution a guess produces over a set of
candidate secrets.

For a guess, every candidate falls into one of PATTERN_SPACE buckets by its
pattern code. The bucket counts are a probability distribution over the
feedback we could see; its entropy is the expected information gain in bits.
"""

from dataclasses import dataclass
from functools import cached_property

import numpy as np

from fibble.patterns import PATTERN_SPACE, decode_pattern_code, encode_words, pattern_codes


def entropy_from_counts(counts):
    """Compute Shannon entropy from bucket counts. An empty distribution is 0.0."""
    total = counts.sum()
    if total == 0:
        return 0.0
    probs = counts[counts > 0] / total
    # + 0.0 turns the -0.0 of a single bucket into 0.0
    return float(-np.sum(probs * np.log2(probs))) + 0.0


@dataclass(frozen=True, eq=False)
class GuessEntropy:
    """
    Snapshot of one guess scored against a candidate set.

    counts[code] is how many candidates would answer the guess with that
    pattern code. The array is read-only.
    """

    guess: str
    counts: np.ndarray

    @cached_property
    def total_secrets(self) -> int:
        return int(self.counts.sum())

    @cached_property
    def distinct_patterns(self) -> int:
        return int(np.count_nonzero(self.counts))

    @cached_property
    def entropy_bits(self) -> float:
        return entropy_from_counts(self.counts)

    def pattern_counts(self) -> list[tuple[str, int]]:
        """Each observed pattern as a G/Y/B string with its count, in code order."""
        return [
            (decode_pattern_code(int(code)), int(self.counts[code]))
            for code in np.flatnonzero(self.counts)
        ]


def pattern_histogram(guess_codes, candidate_codes) -> np.ndarray:
    """Bucket counts of pattern codes for one encoded guess over encoded candidates."""
    codes = pattern_codes(guess_codes, candidate_codes)
    counts = np.bincount(codes, minlength=PATTERN_SPACE).astype(np.int64)
    counts.flags.writeable = False
    return counts


def score_encoded(guess, guess_codes, candidate_codes) -> GuessEntropy:
    """Score an already validated, encoded guess. Shared by every scan."""
    return GuessEntropy(guess, pattern_histogram(guess_codes, candidate_codes))


def analyze_guess(dictionary, guess, candidates=None) -> GuessEntropy:
    """
    Entropy of *guess* against *candidates* (default: every secret word).

    The guess is normalized and must be an allowed word; otherwise
    InvalidLengthError or UnknownWordError is raised. Candidates are
    normalized words, or an array already produced by encode_words.
    """
    word = dictionary.validate(guess)
    guess_codes = dictionary.allowed_codes[dictionary.index_of(word)]

    if candidates is None:
        candidate_codes = dictionary.secret_codes
    elif isinstance(candidates, np.ndarray):
        candidate_codes = candidates
    else:
        candidate_codes = encode_words(candidates)

    return score_encoded(word, guess_codes, candidate_codes)
