"""
play.py

Play Wordle or Fibble in the terminal with an entropy-based hint each turn.

Modes:
-mode wordle (default): true feedback, 6 attempts.
-mode fibble: one tile of every row lies, 9 attempts, random opener played
  automatically.

Optional:
-secret WORD (or a positional WORD): fix the secret instead of drawing one.
-seed N: seed the random source for the secret, the opener and the lies.
-workers N: processes for the hint scan.
-no-cache: ignore and do not write the first-guess cache.
"""

import argparse

import numpy as np

from fibble.errors import FatalConfigError, InvalidLengthError, UnknownWordError
from fibble.game import Game, GameMode
from fibble.patterns import WORD_LENGTH
from fibble.suggestions import suggest
from fibble.words import ALLOWED_PATH, SECRETS_PATH, load_dictionary


def random_secret(dictionary, rng):
    return dictionary.secrets[int(rng.integers(len(dictionary.secrets)))]


def perform_fibble_auto_guess(game, rng):
    """Submit a random secret word, other than the real one, as the opener."""
    guess = random_secret(game.dictionary, rng)
    while guess == game.secret and len(game.dictionary.secrets) > 1:
        guess = random_secret(game.dictionary, rng)
    print(f"Automatic opener: {guess}")
    row = game.submit_guess(guess)
    print(row)
    return row


def print_guess_summary(label, insights):
    best = insights.best_guess
    if best is not None:
        print(
            f"{label}: {best.word} ({best.matching_secrets} possible secrets, "
            f"{best.entropy_bits:.2f} bits of information)"
        )
    else:
        print(f"{label}: (no remaining candidates)")

    if not insights.top_secret_guesses:
        print("Top secret guesses: (no remaining candidates)")
    else:
        description = ", ".join(
            f"{s.word} ({s.entropy_bits:.2f} bits)" for s in insights.top_secret_guesses
        )
        print(f"Top secret guesses: {description}")


def play(game, rng, *, workers=1, use_cache=True, input_fn=input):
    """Run the prompt loop until the game is solved, lost, or abandoned."""
    print("Welcome to Fibble!")
    print(
        f"Try to guess the {WORD_LENGTH}-letter word in {game.max_attempts} attempts. "
        "Type 'quit' to exit."
    )
    if game.mode is GameMode.FIBBLE:
        print("Fibble mode: expect one lied tile per guess, and enjoy the automatic opener.")
    print()

    if game.mode is GameMode.FIBBLE:
        perform_fibble_auto_guess(game, rng)

    while game.attempts_left > 0:
        insights = suggest(
            game.dictionary,
            game.history,
            game.mode,
            workers=workers,
            progress=True,
            use_cache=use_cache,
        )
        print_guess_summary("Suggested guess", insights)

        attempt = len(game.history) + 1
        try:
            line = input_fn(f"Guess {attempt}/{game.max_attempts}: ")
        except EOFError:
            print("\nNo input detected, exiting.")
            return False

        guess = line.strip()
        if guess.lower() == "quit":
            print("Come back soon!")
            return False

        try:
            row = game.submit_guess(guess)
        except InvalidLengthError:
            print(f"Please enter a {WORD_LENGTH}-letter word.")
            continue
        except UnknownWordError:
            print("That's not one of the allowed Wordle guesses.")
            continue

        print(row)
        if game.is_solved:
            suffix = "" if attempt == 1 else "es"
            print(f"Nice! You solved it in {attempt} guess{suffix}.")
            return True

    print(f"Out of guesses! The word was {game.secret}.")
    return False


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Wordle in the terminal.")
    parser.add_argument("word", nargs="?", help="Secret word (same as -secret).")
    parser.add_argument(
        "-mode",
        choices=[m.value for m in GameMode],
        default=GameMode.WORDLE.value,
        help="'wordle' (default) or 'fibble'.",
    )
    parser.add_argument("-secret", help="Secret word. Random when omitted.")
    parser.add_argument("-seed", type=int, default=None, help="Random seed.")
    parser.add_argument(
        "-workers",
        type=int,
        default=1,
        help="Worker processes for the hint scan (default: 1).",
    )
    parser.add_argument(
        "-no-cache",
        action="store_true",
        help="Do not read or write the first-guess cache.",
    )
    parser.add_argument("-allowed", default=str(ALLOWED_PATH), help="Allowed-guess list.")
    parser.add_argument("-secrets", default=str(SECRETS_PATH), help="Secret-word list.")

    args = parser.parse_args(argv)
    if args.word is not None and args.secret is not None:
        parser.error("multiple secrets provided")
    return args


def main(argv=None):
    args = parse_args(argv)
    try:
        dictionary = load_dictionary(args.allowed, args.secrets)
    except FatalConfigError as exc:
        raise SystemExit(f"Error: {exc}") from exc

    rng = np.random.default_rng(args.seed)
    mode = GameMode.parse(args.mode)
    secret = args.secret or args.word or random_secret(dictionary, rng)

    try:
        game = Game(dictionary, secret, mode, rng)
    except (InvalidLengthError, UnknownWordError) as exc:
        raise SystemExit(f"Error: {exc}") from exc

    play(game, rng, workers=args.workers, use_cache=not args.no_cache)


if __name__ == "__main__":
    main()
