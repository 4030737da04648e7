"""Zobrist hash table handler for positional and situational superko detection."""

from superko_hash.zobrist.hasher import Hasher
from superko_hash.zobrist.key_table import KeyTable
from superko_hash.zobrist.keygen import DEFAULT_KEY_BITS, DEFAULT_MAX_RETRIES
from superko_hash.zobrist.registry import PositionRegistry


class KoHash:
    """
    Builds one key table for a fixed board geometry and tracks which positions
    have been seen in the current game line.

    size: number of vertices on the board.
    values: number of possible non-empty values at each vertex.
    situational: 0 for positional superko (to-play ignored), or the number of
        players for situational superko.
    """

    def __init__(
        self,
        size,
        values,
        situational=0,
        key_bits=DEFAULT_KEY_BITS,
        seed=None,
        rng=None,
        max_retries=DEFAULT_MAX_RETRIES,
    ):
        self.table = KeyTable.build(
            size,
            values,
            situational,
            key_bits=key_bits,
            seed=seed,
            rng=rng,
            max_retries=max_retries,
        )
        self.hasher = Hasher(self.table)
        self.registry = PositionRegistry(self.hasher)

    @property
    def size(self):
        return self.table.size

    @property
    def values(self):
        return self.table.values

    @property
    def situational(self):
        return self.table.situational

    @property
    def hashes(self):
        """One key row per vertex; index 0 of each row is the identity."""
        return self.table.rows

    @property
    def to_play(self):
        """Identity followed by one key per player, or None for positional superko."""
        return self.table.to_play

    @property
    def keys(self):
        return self.registry.keys

    def hash(self, state, to_play=0):
        return self.hasher.hash(state, to_play)

    def add(self, state, to_play=0):
        """Register the position and return its fingerprint; raises DuplicateFingerprint on a repeat."""
        return self.registry.add(state, to_play)

    def remove(self, key):
        return self.registry.remove(key)

    def __contains__(self, key):
        return key in self.registry

    def __len__(self):
        return len(self.registry)
