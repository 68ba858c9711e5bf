import pytest

from fibble.constraints import remaining_secrets
from fibble.entropy import analyze_guess
from fibble.errors import InvalidLengthError, UnknownWordError
from fibble.game import GameMode, GuessRow
from fibble.patterns import encode_digits, pattern_from_code
from fibble.selector import best_guess, rank_guesses


def test_no_candidates_gives_none(dictionary):
    assert best_guess(dictionary, []) is None


def test_none_exactly_when_no_secrets_remain(dictionary):
    impossible = [GuessRow("CIGAR", pattern_from_code(encode_digits([2, 2, 2, 2, 0]), "CIGAR"))]
    candidates = remaining_secrets(dictionary, impossible)
    assert candidates == []
    assert best_guess(dictionary, candidates) is None


def test_single_candidate_is_returned(dictionary):
    best = best_guess(dictionary, ["REBUT"])
    assert best.guess == "REBUT"
    assert best.entropy_bits == 0.0
    assert best.total_secrets == 1


def test_scans_guess_only_words(dictionary):
    best = best_guess(dictionary, dictionary.secrets)
    expected = max(
        analyze_guess(dictionary, word).entropy_bits for word in dictionary.allowed
    )
    assert best.entropy_bits == pytest.approx(expected)
    assert best.total_secrets == len(dictionary.secrets)


def test_ties_keep_earliest_word(dictionary):
    candidates = ["CIGAR", "REBUT"]
    first = best_guess(dictionary, candidates, allowed=["HUMPH", "CIGAR", "REBUT"])
    assert first.guess == "HUMPH"
    assert first.entropy_bits == pytest.approx(1.0)
    second = best_guess(dictionary, candidates, allowed=["CIGAR", "HUMPH", "REBUT"])
    assert second.guess == "CIGAR"


def test_best_matches_first_ranked(dictionary):
    ranked = rank_guesses(dictionary, dictionary.secrets)
    best = best_guess(dictionary, dictionary.secrets)
    assert ranked[0] == (best.guess, best.entropy_bits)
    bits = [b for _, b in ranked]
    assert bits == sorted(bits, reverse=True)
    assert len(ranked) == len(dictionary.allowed)


def test_scan_order_does_not_change_best_entropy(dictionary):
    forward = best_guess(dictionary, dictionary.secrets, allowed=dictionary.allowed)
    backward = best_guess(
        dictionary, dictionary.secrets, allowed=list(reversed(dictionary.allowed))
    )
    assert forward.entropy_bits == backward.entropy_bits


@pytest.mark.parametrize("workers,chunk_size", [(2, 1), (3, 4), (None, 2)])
def test_parallel_scan_matches_serial(dictionary, workers, chunk_size):
    history = [GuessRow("SOARE", pattern_from_code(encode_digits([0, 0, 0, 0, 1]), "SOARE"))]
    for mode in GameMode:
        candidates = remaining_secrets(dictionary, history, mode)
        serial = best_guess(dictionary, candidates)
        parallel = best_guess(dictionary, candidates, workers=workers, chunk_size=chunk_size)
        if serial is None:
            assert parallel is None
            continue
        assert (parallel.guess, parallel.entropy_bits) == (serial.guess, serial.entropy_bits)

        ranked = rank_guesses(dictionary, candidates, workers=workers, chunk_size=chunk_size)
        assert ranked == rank_guesses(dictionary, candidates)


def test_rejects_invalid_allowed_words(dictionary):
    with pytest.raises(UnknownWordError):
        best_guess(dictionary, ["CIGAR", "REBUT"], allowed=["ZZZZZ"])


def test_lowercase_candidates_match_uppercase(dictionary):
    lower = best_guess(dictionary, ["cigar", "rebut", " sissy"])
    upper = best_guess(dictionary, ["CIGAR", "REBUT", "SISSY"])
    assert (lower.guess, lower.entropy_bits) == (upper.guess, upper.entropy_bits)
    assert lower.counts.tolist() == upper.counts.tolist()
    assert best_guess(dictionary, ["rebut"]).guess == "REBUT"


def test_wrong_length_candidates_raise(dictionary):
    with pytest.raises(InvalidLengthError):
        best_guess(dictionary, ["CIGAR", "REBUTX"])
    with pytest.raises(InvalidLengthError):
        best_guess(dictionary, ["AWAK"])


def test_empty_scan_list_raises(dictionary):
    with pytest.raises(ValueError):
        best_guess(dictionary, ["CIGAR", "REBUT"], allowed=[])
    assert best_guess(dictionary, [], allowed=[]) is None
