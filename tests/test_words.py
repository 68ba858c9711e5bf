import pytest

from fibble.errors import FatalConfigError, InvalidLengthError, UnknownWordError
from fibble.words import Dictionary, is_word, load_dictionary, normalize


class TestNormalize:
    def test_trims_and_uppercases(self):
        assert normalize("  cigar \n") == "CIGAR"

    def test_rejects_wrong_length(self):
        with pytest.raises(InvalidLengthError) as info:
            normalize("tool")
        assert info.value.expected == 5
        assert info.value.found == 4
        assert str(info.value) == "expected a 5-letter word, but found 4 letters"


class TestDictionary:
    def test_validate_checks_length_before_membership(self, dictionary):
        with pytest.raises(InvalidLengthError):
            dictionary.validate("longer")
        with pytest.raises(UnknownWordError) as info:
            dictionary.validate("zzzzz")
        assert info.value.word == "ZZZZZ"

    def test_validate_returns_normalized(self, dictionary):
        assert dictionary.validate(" cAiRn") == "CAIRN"

    def test_secret_missing_from_allowed_is_fatal(self):
        with pytest.raises(FatalConfigError):
            Dictionary(["CIGAR"], ["CIGAR", "REBUT"])

    def test_empty_lists_are_fatal(self):
        with pytest.raises(FatalConfigError):
            Dictionary([], [])
        with pytest.raises(FatalConfigError):
            Dictionary(["CIGAR"], [])

    def test_malformed_word_is_fatal(self):
        with pytest.raises(FatalConfigError):
            Dictionary(["CIGAR", "cigar"], ["CIGAR"])

    def test_encoded_arrays_are_read_only(self, dictionary):
        assert dictionary.secret_codes.shape == (len(dictionary.secrets), 5)
        with pytest.raises(ValueError):
            dictionary.secret_codes[0, 0] = 1

    def test_keeps_order(self, dictionary):
        assert dictionary.secrets[0] == "CIGAR"
        assert dictionary.index_of("CIGAR") == 0
        assert "ALLOT" in dictionary
        assert "ZZZZZ" not in dictionary


def test_is_word():
    assert is_word("CIGAR")
    assert not is_word("cigar")
    assert not is_word("CIGA1")
    assert not is_word("CIGARS")
    assert not is_word("ÉCLAT")


class TestLoadDictionary:
    def test_loads_and_normalizes(self, word_files):
        allowed, secrets = word_files
        dictionary = load_dictionary(allowed, secrets)
        assert dictionary.secrets[0] == "CIGAR"
        assert "HUMPH" in dictionary
        assert "HUMPH" not in dictionary.secrets

    def test_drops_bad_lines_and_repeats(self, tmp_path):
        allowed = tmp_path / "allowed.txt"
        secrets = tmp_path / "secrets.txt"
        allowed.write_text("cigar\nrebut\ntoolong\nab1de\ncigar\n")
        secrets.write_text("rebut\nfour\n")
        dictionary = load_dictionary(allowed, secrets)
        assert dictionary.allowed == ("CIGAR", "REBUT")
        assert dictionary.secrets == ("REBUT",)

    def test_secret_not_allowed_is_fatal(self, tmp_path):
        allowed = tmp_path / "allowed.txt"
        secrets = tmp_path / "secrets.txt"
        allowed.write_text("cigar\n")
        secrets.write_text("cigar\nrebut\n")
        with pytest.raises(FatalConfigError):
            load_dictionary(allowed, secrets)

    def test_missing_file_is_fatal(self, tmp_path):
        with pytest.raises(FatalConfigError):
            load_dictionary(tmp_path / "nope.txt", tmp_path / "nope.txt")

    def test_bundled_lists_are_consistent(self):
        dictionary = load_dictionary()
        assert set(dictionary.secrets) <= set(dictionary.allowed)
