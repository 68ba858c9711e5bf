"""
selector.py

Greedy one-ply guess selection: score every allowed word against the
current candidates and keep the one with the most expected information.

The whole allowed list is scanned, not just the candidates, since a word
that cannot be the answer can still split the candidates well.

Ties keep the earliest word in list order. The parallel scan splits the list
into index chunks and reduces on (entropy, -index), so the winner does not
depend on which worker finishes first.
"""

import multiprocessing as mp
import os

from tqdm import tqdm

from fibble.entropy import score_encoded
from fibble.patterns import encode_words, normalize_letters


DEFAULT_CHUNK_SIZE = 512


_SCAN_WORKER_STATE = {}


def _init_scan_worker(allowed, allowed_codes, candidate_codes):
    _SCAN_WORKER_STATE["allowed"] = allowed
    _SCAN_WORKER_STATE["allowed_codes"] = allowed_codes
    _SCAN_WORKER_STATE["candidate_codes"] = candidate_codes


def _score_range(allowed, allowed_codes, candidate_codes, start, end):
    return [
        (index, score_encoded(allowed[index], allowed_codes[index], candidate_codes).entropy_bits)
        for index in range(start, end)
    ]


def _worker_scan_chunk(task):
    start, end = task
    return _score_range(
        _SCAN_WORKER_STATE["allowed"],
        _SCAN_WORKER_STATE["allowed_codes"],
        _SCAN_WORKER_STATE["candidate_codes"],
        start,
        end,
    )


def _resolve_allowed(dictionary, allowed):
    if allowed is None:
        return dictionary.allowed, dictionary.allowed_codes
    words = tuple(dictionary.validate(word) for word in allowed)
    return words, encode_words(words)


def _iter_scores(allowed, allowed_codes, candidate_codes, workers, chunk_size, progress):
    """
    Yield chunks of (index, entropy_bits) for every allowed word.

    Chunks arrive in completion order when workers > 1; callers must not
    rely on the order.
    """
    n_allowed = len(allowed)
    chunk_size = max(1, int(chunk_size))
    tasks = [
        (start, min(start + chunk_size, n_allowed))
        for start in range(0, n_allowed, chunk_size)
    ]
    worker_count = workers if workers is not None else (os.cpu_count() or 1)
    worker_count = max(1, min(int(worker_count), len(tasks)))

    with tqdm(
        total=n_allowed,
        desc="Analyzing guesses",
        disable=not progress,
        leave=False,
    ) as bar:
        if worker_count == 1:
            for start, end in tasks:
                chunk = _score_range(allowed, allowed_codes, candidate_codes, start, end)
                bar.update(end - start)
                yield chunk
            return

        start_methods = mp.get_all_start_methods()
        start_method = "fork" if "fork" in start_methods else "spawn"
        ctx = mp.get_context(start_method)
        with ctx.Pool(
            processes=worker_count,
            initializer=_init_scan_worker,
            initargs=(allowed, allowed_codes, candidate_codes),
        ) as pool:
            for chunk in pool.imap_unordered(_worker_scan_chunk, tasks, chunksize=1):
                bar.update(len(chunk))
                yield chunk


def best_guess(
    dictionary,
    candidates,
    *,
    allowed=None,
    workers=1,
    chunk_size=DEFAULT_CHUNK_SIZE,
    progress=False,
):
    """
    Return the GuessEntropy of the most informative allowed word, or None.

    Parameters
    ----------
    dictionary : Dictionary
    candidates : sequence of str
        Secrets still possible. Normalized and checked before scoring.
    allowed : sequence of str or None
        Words to scan, in tie-break order. Defaults to dictionary.allowed.
        An empty list raises ValueError.
    workers : int or None
        Processes for the scan. None uses the CPU count.
    progress : bool
        Show a tqdm bar over the scan.

    With no candidates there is nothing to learn and None is returned. With
    exactly one candidate every word scores 0.0 bits, so that candidate is
    returned directly.
    """
    candidates = [normalize_letters(word) for word in candidates]
    if not candidates:
        return None

    allowed, allowed_codes = _resolve_allowed(dictionary, allowed)
    if not allowed:
        raise ValueError("no words to scan")
    candidate_codes = encode_words(candidates)
    if len(candidates) == 1:
        return score_encoded(candidates[0], candidate_codes[0], candidate_codes)

    best_key = None
    for chunk in _iter_scores(
        allowed, allowed_codes, candidate_codes, workers, chunk_size, progress
    ):
        for index, bits in chunk:
            key = (bits, -index)
            if best_key is None or key > best_key:
                best_key = key

    best_index = -best_key[1]
    return score_encoded(allowed[best_index], allowed_codes[best_index], candidate_codes)


def rank_guesses(
    dictionary,
    candidates,
    *,
    allowed=None,
    workers=1,
    chunk_size=DEFAULT_CHUNK_SIZE,
    progress=False,
):
    """
    Score every allowed word and return (word, entropy_bits) pairs, best first.

    Equal entropies keep list order.
    """
    allowed, allowed_codes = _resolve_allowed(dictionary, allowed)
    candidate_codes = encode_words(candidates)

    scores = [0.0] * len(allowed)
    for chunk in _iter_scores(
        allowed, allowed_codes, candidate_codes, workers, chunk_size, progress
    ):
        for index, bits in chunk:
            scores[index] = bits

    order = sorted(range(len(allowed)), key=lambda i: (-scores[i], i))
    return [(allowed[i], scores[i]) for i in order]
