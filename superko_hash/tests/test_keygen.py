"""KeyGenerator uniqueness, reproducibility, and bounded retries."""

import random

import pytest

from superko_hash.engine.errors import KeySpaceExhaustion
from superko_hash.zobrist.keygen import IDENTITY_KEY, KeyGenerator, init_keys


class FixedRng:
    """Returns a scripted sequence of draws."""

    def __init__(self, draws):
        self._draws = list(draws)

    def getrandbits(self, k):
        return self._draws.pop(0)


def test_same_seed_same_keys():
    a = init_keys(KeyGenerator(seed=7), set(), 10, 64)
    b = init_keys(KeyGenerator(seed=7), set(), 10, 64)
    assert a == b
    assert a[0] == IDENTITY_KEY


def test_injected_rng_is_used():
    gen = KeyGenerator(rng=random.Random(3))
    expected = random.Random(3).getrandbits(64)
    assert gen.next_unique(64, set()) == expected


def test_retries_past_collisions_and_identity():
    gen = KeyGenerator(rng=FixedRng([5, 0, 5, 9]))
    used = set()
    assert gen.next_unique(8, used) == 5
    assert gen.next_unique(8, used) == 9
    assert used == {5, 9}
    assert gen.collisions == 2


def test_full_key_space_refused_up_front():
    gen = KeyGenerator(seed=1)
    used = {1, 2, 3}
    with pytest.raises(KeySpaceExhaustion):
        gen.next_unique(2, used)


def test_retry_budget_is_bounded():
    gen = KeyGenerator(rng=FixedRng([4] * 10), max_retries=3)
    with pytest.raises(KeySpaceExhaustion):
        gen.next_unique(8, {4})


def test_small_space_fills_exactly():
    gen = KeyGenerator(seed=0, max_retries=10_000)
    used = set()
    row = init_keys(gen, used, 7, 3)
    assert sorted(row[1:]) == list(range(1, 8))
    with pytest.raises(KeySpaceExhaustion):
        gen.next_unique(3, used)
