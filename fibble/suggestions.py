"""
suggestions.py

What the player is shown before each guess: the most informative word
overall, and the best few words that could still be the answer.

Before any guess has been made the candidates are the full secret list, so
the ranking is read from (or written to) the first-guess cache.
"""

from dataclasses import dataclass, field

from fibble.cache import load_first_guess_cache, try_write_first_guess_cache
from fibble.constraints import remaining_secrets
from fibble.game import GameMode
from fibble.selector import rank_guesses


TOP_SECRET_GUESSES = 4


@dataclass(frozen=True)
class GuessSuggestion:
    word: str
    entropy_bits: float
    matching_secrets: int


@dataclass(frozen=True)
class GuessInsights:
    best_guess: GuessSuggestion | None = None
    top_secret_guesses: list[GuessSuggestion] = field(default_factory=list)


def _insights_from_ranking(ranked, candidates):
    matching = len(candidates)
    candidate_lookup = set(candidates)
    best = None
    if ranked:
        word, bits = ranked[0]
        best = GuessSuggestion(word, bits, matching)

    top = []
    for word, bits in ranked:
        if word in candidate_lookup:
            top.append(GuessSuggestion(word, bits, matching))
            if len(top) == TOP_SECRET_GUESSES:
                break

    return GuessInsights(best, top)


def suggest(
    dictionary,
    history,
    mode=GameMode.WORDLE,
    *,
    workers=1,
    progress=False,
    use_cache=True,
    cache_path=None,
) -> GuessInsights:
    """
    Suggestions for the next guess given *history*.

    No candidates left gives empty insights. One candidate is suggested
    directly at 0.0 bits. With an empty history the full ranking comes from
    the first-guess cache when it is valid and is written back when not.
    """
    history = tuple(history)
    candidates = remaining_secrets(dictionary, history, mode)

    if not candidates:
        return GuessInsights()
    if len(candidates) == 1:
        only = GuessSuggestion(candidates[0], 0.0, 1)
        return GuessInsights(only, [only])

    # ranked[0] is the same word best_guess would pick: both break ties by list order
    if history or not use_cache:
        ranked = rank_guesses(dictionary, candidates, workers=workers, progress=progress)
        return _insights_from_ranking(ranked, candidates)

    total_secrets = len(candidates)
    allowed_words = len(dictionary.allowed)
    entries = load_first_guess_cache(
        total_secrets, allowed_words, cache_path, allowed=dictionary.allowed
    )
    if entries is not None:
        ranked = [(entry.guess, entry.entropy_bits) for entry in entries]
        return _insights_from_ranking(ranked, candidates)

    ranked = rank_guesses(dictionary, candidates, workers=workers, progress=progress)
    try_write_first_guess_cache(ranked, total_secrets, allowed_words, cache_path)
    return _insights_from_ranking(ranked, candidates)
