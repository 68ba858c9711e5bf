"""
cache.py

On-disk cache for the one expensive query that never changes between games:
the entropy of every allowed word against the full, unfiltered secret list.

The file is only trusted if its format version and both word-list sizes
match the running dictionary, and it ranks every allowed word exactly once.
Anything else (missing, stale, corrupt, unreadable, a ranking of some other
word list) is treated as a miss, so results never depend on the cache.
"""

import json
import os
import sys
from dataclasses import dataclass
from pathlib import Path


FIRST_GUESS_CACHE_VERSION = 1
FIRST_GUESS_CACHE_FILE = "first_guess_entropies.json"


@dataclass(frozen=True)
class CacheEntry:
    guess: str
    entropy_bits: float


def cache_dir() -> Path:
    """FIBBLE_CACHE_DIR if set, else <XDG cache home>/fibble."""
    override = os.environ.get("FIBBLE_CACHE_DIR")
    if override:
        return Path(override)
    base = os.environ.get("XDG_CACHE_HOME") or Path.home() / ".cache"
    return Path(base) / "fibble"


def cache_file_path() -> Path:
    return cache_dir() / FIRST_GUESS_CACHE_FILE


def load_first_guess_cache(total_secrets, allowed_words, path=None, allowed=None):
    """
    Return the cached entries, best first, or None on any mismatch.

    There must be exactly *allowed_words* distinct guesses. When *allowed*
    is given, every cached guess must also be one of its words.
    """
    path = Path(path) if path is not None else cache_file_path()
    try:
        with open(path, "r", encoding="utf-8") as handle:
            cache = json.load(handle)
    except (OSError, ValueError):
        return None

    if not isinstance(cache, dict):
        return None
    if (
        cache.get("version") != FIRST_GUESS_CACHE_VERSION
        or cache.get("total_secrets") != total_secrets
        or cache.get("allowed_words") != allowed_words
    ):
        return None

    try:
        entries = [
            CacheEntry(str(entry["guess"]), float(entry["entropy_bits"]))
            for entry in cache["entries"]
        ]
    except (KeyError, TypeError, ValueError):
        return None

    guesses = {entry.guess for entry in entries}
    if len(entries) != allowed_words or len(guesses) != allowed_words:
        return None
    if allowed is not None and not guesses <= set(allowed):
        return None
    return entries


def write_first_guess_cache(ranked, total_secrets, allowed_words, path=None):
    """
    Persist (guess, entropy_bits) pairs sorted by descending entropy.

    Ties keep their incoming order.
    """
    path = Path(path) if path is not None else cache_file_path()
    entries = sorted(ranked, key=lambda pair: -pair[1])

    path.parent.mkdir(parents=True, exist_ok=True)
    cache = {
        "version": FIRST_GUESS_CACHE_VERSION,
        "total_secrets": total_secrets,
        "allowed_words": allowed_words,
        "entries": [
            {"guess": guess, "entropy_bits": bits} for guess, bits in entries
        ],
    }
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(cache, handle, indent=2)


def try_write_first_guess_cache(ranked, total_secrets, allowed_words, path=None):
    """Write the cache, reporting failures on stderr instead of raising."""
    try:
        write_first_guess_cache(ranked, total_secrets, allowed_words, path)
    except OSError as exc:
        print(f"Failed to cache first-guess entropies: {exc}", file=sys.stderr)
        return False
    return True
