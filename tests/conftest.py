import random
import pytest
from fivewords.signatures import build_catalog, sign_words

TOY_WORDS = ["aaaaa", "abcde", "cadeb", "fghij", "klmno", "pqrst", "uvwxy", "zebra"]

@pytest.fixture
def toy_words():
    return sorted(TOY_WORDS)

@pytest.fixture
def toy_signed(toy_words):
    return sign_words(toy_words)

@pytest.fixture
def toy_catalog(toy_signed):
    return build_catalog(toy_signed)

def _random_words(seed: int, partitions: int, extras: int):
    # Alphabet partitions guarantee solutions exist; extras add collisions.
    rng = random.Random(seed)
    letters = list("abcdefghijklmnopqrstuvwxyz")
    words = set()
    for _ in range(partitions):
        rng.shuffle(letters)
        for i in range(5):
            words.add("".join(letters[i * 5:(i + 1) * 5]))
    while len(words) < partitions * 5 + extras:
        words.add("".join(rng.sample(letters, 5)))
    return sorted(words)

@pytest.fixture
def random_words():
    return _random_words(seed=7, partitions=6, extras=10)

@pytest.fixture
def make_random_words():
    return _random_words
