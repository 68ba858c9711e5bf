"""
fibble_entropy.py

Entropy analysis against the full secret list.

Modes:
WORD: entropy report for one guess (total secrets, distinct patterns, bits).
-top N (default when no WORD): the N highest-entropy opening guesses.
-best: the single most informative opener, via the greedy selector.

Optional:
-patterns: with WORD, list every observed pattern and its count.
-workers N: processes for dictionary-wide scans (default 1).
-allowed / -secrets: alternative word-list files.
"""

import argparse

from fibble.errors import FatalConfigError, WordleError
from fibble.entropy import analyze_guess
from fibble.selector import DEFAULT_CHUNK_SIZE, best_guess, rank_guesses
from fibble.words import ALLOWED_PATH, SECRETS_PATH, load_dictionary


TOP_SINGLE = 20


def run_analyze(dictionary, word, show_patterns):
    try:
        analysis = analyze_guess(dictionary, word)
    except WordleError as exc:
        raise SystemExit(f"Error: {exc}") from exc

    print(f"Guess: {analysis.guess}")
    print(f"Total secrets: {analysis.total_secrets}")
    print(f"Distinct patterns: {analysis.distinct_patterns}")
    print(f"Entropy: {analysis.entropy_bits:.4f} bits")

    if show_patterns:
        print("\nPattern counts (G=correct, Y=present, B=absent):")
        for pattern, count in analysis.pattern_counts():
            print(f"{pattern}: {count}")


def run_top(dictionary, top, workers, chunk_size, progress):
    secret_set = set(dictionary.secrets)

    print("Computing single-guess entropies...")
    ranked = rank_guesses(
        dictionary,
        dictionary.secrets,
        workers=workers,
        chunk_size=chunk_size,
        progress=progress,
    )

    print("\nTop single guesses:")
    print("Legend: word [flag]: entropy bits")
    print("flag: [+] possible secret, [-] guess-only")
    for word, bits in ranked[:top]:
        flag = "+" if word in secret_set else "-"
        print(f"{word} [{flag}]: {bits:.4f} bits")


def run_best(dictionary, workers, chunk_size, progress):
    best = best_guess(
        dictionary,
        dictionary.secrets,
        workers=workers,
        chunk_size=chunk_size,
        progress=progress,
    )
    print(
        f"Best opener: {best.guess} ({best.total_secrets} possible secrets, "
        f"{best.entropy_bits:.4f} bits, {best.distinct_patterns} patterns)"
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Entropy of Wordle guesses against every possible secret."
    )
    parser.add_argument(
        "word",
        nargs="?",
        help="Guess to analyze. Without it, the top openers are listed.",
    )
    parser.add_argument(
        "-top",
        type=int,
        default=TOP_SINGLE,
        help=f"How many openers to list (default: {TOP_SINGLE}).",
    )
    parser.add_argument(
        "-best",
        action="store_true",
        help="Print only the single most informative opener.",
    )
    parser.add_argument(
        "-patterns",
        action="store_true",
        help="With WORD, list the count of every observed pattern.",
    )
    parser.add_argument(
        "-workers",
        type=int,
        default=1,
        help="Worker processes for dictionary-wide scans (default: 1).",
    )
    parser.add_argument(
        "-chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help="Allowed words per worker task.",
    )
    parser.add_argument(
        "-no-progress",
        action="store_true",
        help="Hide the progress bar.",
    )
    parser.add_argument("-allowed", default=str(ALLOWED_PATH), help="Allowed-guess list.")
    parser.add_argument("-secrets", default=str(SECRETS_PATH), help="Secret-word list.")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    try:
        dictionary = load_dictionary(args.allowed, args.secrets)
    except FatalConfigError as exc:
        raise SystemExit(f"Error: {exc}") from exc

    progress = not args.no_progress

    if args.word is not None:
        run_analyze(dictionary, args.word, args.patterns)
        return

    if args.best:
        run_best(dictionary, args.workers, args.chunk_size, progress)
        return

    run_top(dictionary, args.top, args.workers, args.chunk_size, progress)


if __name__ == "__main__":
    main()
