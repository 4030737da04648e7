"""Board keeps its fingerprint in step with a full rehash through place/undo/to-play changes."""

import pytest

from superko_hash.Board import Board
from superko_hash.engine.errors import DuplicateFingerprint, StateShapeError
from superko_hash.zobrist.hasher import Hasher
from superko_hash.zobrist.key_table import KeyTable
from superko_hash.zobrist.registry import PositionRegistry


@pytest.fixture
def hasher():
    return Hasher(KeyTable.build(9, 2, situational=2, seed=17))


def test_new_board_is_empty(hasher):
    b = Board(hasher)
    assert b.cells == [0] * 9
    assert b.fingerprint == 0


def test_place_and_undo_track_full_hash(hasher):
    b = Board(hasher, to_play=1)
    moves = [(4, 1), (0, 2), (4, 0), (8, 1)]
    for vertex, value in moves:
        b.place(vertex, value)
        assert b.fingerprint == hasher.hash(b.cells, b.to_play)
    b.set_to_play(2)
    assert b.fingerprint == hasher.hash(b.cells, 2)

    while b.history:
        b.undo()
        assert b.fingerprint == hasher.hash(b.cells, b.to_play)
    assert b.cells == [0] * 9
    assert b.to_play == 1


def test_undo_on_fresh_board_raises(hasher):
    with pytest.raises(IndexError):
        Board(hasher).undo()


def test_bad_place_leaves_board_unchanged(hasher):
    b = Board(hasher)
    with pytest.raises(StateShapeError):
        b.place(9, 1)
    with pytest.raises(StateShapeError):
        b.place(0, 3)
    assert b.cells == [0] * 9
    assert b.history == []


def test_clone_is_independent(hasher):
    b = Board(hasher)
    b.place(3, 1)
    c = b.clone()
    c.place(4, 2)
    assert b.cells[4] == 0
    assert b.fingerprint != c.fingerprint
    assert c.fingerprint == hasher.hash(c.cells)


def test_commit_detects_recurrence(hasher):
    registry = PositionRegistry(hasher)
    b = Board(hasher)
    b.commit(registry)
    b.place(2, 1)
    b.commit(registry)
    # capture returns the board to the empty position
    b.clear(2)
    with pytest.raises(DuplicateFingerprint):
        b.commit(registry)
