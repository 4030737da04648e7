"""Unique random key source for Zobrist tables."""

import logging
import random

from superko_hash.engine import referee
from superko_hash.engine.errors import KeySpaceExhaustion


LOGGER = logging.getLogger(__name__)

IDENTITY_KEY = 0
DEFAULT_KEY_BITS = 64
DEFAULT_MAX_RETRIES = 64
SAFE_KEY_BITS = 53  # below this, birthday collisions become plausible on big boards


class KeyGenerator:
    """Draws uniformly random unsigned keys that are absent from an exclusion set.

    The random source is injected (anything with ``getrandbits``) so tables can be
    reproduced from a seed without touching the module-level ``random`` state.
    """

    def __init__(self, rng=None, seed=None, max_retries=DEFAULT_MAX_RETRIES):
        if rng is None:
            rng = random.Random(seed)
        self.rng = rng
        self.max_retries = referee.check_retries(max_retries)
        self.collisions = 0

    def next_unique(self, width_bits, exclusion):
        """
        Return a non-zero key of width_bits bits not in exclusion, and add it there.
        Raises KeySpaceExhaustion when the space is full or max_retries draws all collide.
        """
        # identity (0) is reserved, so 2^width - 1 usable keys
        if len(exclusion) >= (1 << width_bits) - 1:
            raise KeySpaceExhaustion(
                f"{width_bits}-bit key space exhausted after {len(exclusion)} keys"
            )
        for _ in range(self.max_retries):
            key = self.rng.getrandbits(width_bits)
            if key != IDENTITY_KEY and key not in exclusion:
                exclusion.add(key)
                return key
            self.collisions += 1
            LOGGER.warning("key collision on %d-bit draw (%d so far)", width_bits, self.collisions)
        raise KeySpaceExhaustion(
            f"no unique {width_bits}-bit key after {self.max_retries} draws "
            f"({len(exclusion)} keys in use)"
        )


def init_keys(generator, exclusion, count, width_bits):
    """Return a row (IDENTITY_KEY, k1, ..., k_count) of fresh keys drawn against exclusion."""
    row = [IDENTITY_KEY]
    for _ in range(count):
        row.append(generator.next_unique(width_bits, exclusion))
    return tuple(row)
