"""XOR-fold of a board state (and player to move) through a KeyTable."""

from functools import reduce
from operator import xor

from superko_hash.engine import referee
from .keygen import IDENTITY_KEY


class Hasher:
    """Pure fingerprint function over one immutable KeyTable; safe to share across threads."""

    def __init__(self, table):
        self.table = table

    @property
    def size(self):
        return self.table.size

    @property
    def situational(self):
        return self.table.situational

    def hash(self, state, to_play=0):
        """
        Fold state through the table with XOR, seeded with the identity key so
        an all-empty state (with to_play 0) hashes to 0.
        """
        cells = referee.check_state(state, self.table.size, self.table.values)
        to_play = referee.check_to_play(to_play, self.situational)
        rows = self.table.rows
        h = reduce(xor, (rows[v][x] for v, x in enumerate(cells)), IDENTITY_KEY)
        return h ^ self.table.to_play_key(to_play)

    def update(self, fingerprint, vertex, old, new):
        """Return fingerprint after vertex changes from old to new, in O(1)."""
        vertex = referee.check_vertex(vertex, self.table.size)
        old = referee.check_value(old, self.table.values, vertex=vertex)
        new = referee.check_value(new, self.table.values, vertex=vertex)
        row = self.table.rows[vertex]
        return fingerprint ^ row[old] ^ row[new]

    def switch_to_play(self, fingerprint, old, new):
        """Return fingerprint after the player to move changes; no-op in positional mode."""
        old = referee.check_to_play(old, self.situational)
        new = referee.check_to_play(new, self.situational)
        return fingerprint ^ self.table.to_play_key(old) ^ self.table.to_play_key(new)
