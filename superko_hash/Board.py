"""Flat board state vector whose fingerprint is kept current on every change."""

from superko_hash.engine import referee


class Board:
    def __init__(self, hasher, to_play=0):
        # Cells hold 0 (empty) or a value in [1, hasher.table.values]
        self.hasher = hasher
        self.size = hasher.size
        self.cells = [0] * self.size
        self.to_play = referee.check_to_play(to_play, hasher.situational)
        self.fingerprint = hasher.hash(self.cells, self.to_play)
        self.history = []

    def place(self, vertex, value):
        """Set vertex to value (0 clears it) and update the fingerprint incrementally."""
        vertex = referee.check_vertex(vertex, self.size)
        old = self.cells[vertex]
        self.fingerprint = self.hasher.update(self.fingerprint, vertex, old, value)
        self.cells[vertex] = value
        self.history.append(("cell", vertex, old))

    def clear(self, vertex):
        self.place(vertex, 0)

    def set_to_play(self, player):
        player = referee.check_to_play(player, self.hasher.situational)
        self.fingerprint = self.hasher.switch_to_play(self.fingerprint, self.to_play, player)
        self.history.append(("to_play", None, self.to_play))
        self.to_play = player

    def undo(self):
        """Revert the most recent place/set_to_play; raise if there is nothing to undo."""
        if not self.history:
            raise IndexError("nothing to undo")
        kind, vertex, old = self.history.pop()
        if kind == "cell":
            self.fingerprint = self.hasher.update(self.fingerprint, vertex, self.cells[vertex], old)
            self.cells[vertex] = old
        else:
            self.fingerprint = self.hasher.switch_to_play(self.fingerprint, self.to_play, old)
            self.to_play = old

    def commit(self, registry):
        """Register the current position; raises DuplicateFingerprint on a repeat."""
        return registry.add_fingerprint(self.fingerprint)

    def clone(self):
        new_board = Board.__new__(Board)
        new_board.hasher = self.hasher
        new_board.size = self.size
        new_board.cells = self.cells[:]
        new_board.to_play = self.to_play
        new_board.fingerprint = self.fingerprint
        new_board.history = self.history[:]
        return new_board