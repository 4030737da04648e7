"""Set of fingerprints live in the current game line, with undo support."""

import logging
import threading

from superko_hash.engine.errors import DuplicateFingerprint


LOGGER = logging.getLogger(__name__)


class PositionRegistry:
    """
    Holds each fingerprint at most once. add() raises DuplicateFingerprint on a
    repeat and leaves the set unchanged; remove() takes a position back.
    Each call holds an internal lock, so check-then-insert is atomic across threads.
    """

    def __init__(self, hasher):
        self.hasher = hasher
        self._keys = set()
        self._lock = threading.Lock()

    def add(self, state, to_play=0):
        return self.add_fingerprint(self.hasher.hash(state, to_play))

    def add_fingerprint(self, fingerprint):
        """Register a fingerprint computed elsewhere (e.g. maintained incrementally)."""
        with self._lock:
            if fingerprint in self._keys:
                raise DuplicateFingerprint(fingerprint)
            self._keys.add(fingerprint)
        LOGGER.debug("registered %d (%d live)", fingerprint, len(self._keys))
        return fingerprint

    def remove(self, fingerprint):
        """Drop fingerprint; return whether it was present."""
        with self._lock:
            try:
                self._keys.remove(fingerprint)
            except KeyError:
                return False
        LOGGER.debug("removed %d (%d live)", fingerprint, len(self._keys))
        return True

    def seen(self, state, to_play=0):
        """True if the position is registered; does not modify the registry."""
        return self.hasher.hash(state, to_play) in self

    def clear(self):
        with self._lock:
            self._keys.clear()

    @property
    def keys(self):
        """Read-only snapshot of registered fingerprints."""
        with self._lock:
            return frozenset(self._keys)

    def __contains__(self, fingerprint):
        return fingerprint in self._keys

    def __len__(self):
        return len(self._keys)

    def __iter__(self):
        return iter(self.keys)
