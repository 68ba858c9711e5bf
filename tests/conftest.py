import numpy as np
import pytest

from fibble.words import Dictionary


SECRETS = [
    "CIGAR",
    "REBUT",
    "SISSY",
    "AWAKE",
    "BLUSH",
    "FOCAL",
    "EVADE",
    "APPLE",
    "TIGAR",
    "LEVEL",
    "SCOOP",
    "CRANE",
]

GUESS_ONLY = ["ALLOT", "CAIRN", "HUMPH", "SOARE", "BELLE", "COOLS", "RAISE", "STARE"]


@pytest.fixture
def dictionary():
    return Dictionary(SECRETS + GUESS_ONLY, SECRETS)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def word_files(tmp_path):
    """Allowed and secret lists on disk, in messy casing with blank lines."""
    allowed = tmp_path / "allowed.txt"
    secrets = tmp_path / "secrets.txt"
    allowed.write_text("\n".join(w.lower() for w in SECRETS + GUESS_ONLY) + "\n\n")
    secrets.write_text("\n".join(f"  {w.lower()} " for w in SECRETS) + "\n")
    return allowed, secrets


@pytest.fixture(autouse=True)
def isolated_cache(tmp_path, monkeypatch):
    """Keep the first-guess cache out of the real user cache directory."""
    monkeypatch.setenv("FIBBLE_CACHE_DIR", str(tmp_path / "cache"))
