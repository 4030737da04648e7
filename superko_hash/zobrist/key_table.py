"""Immutable per-vertex, per-value Zobrist key table with optional to-play keys."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from superko_hash.engine import referee
from .keygen import (
    DEFAULT_KEY_BITS,
    DEFAULT_MAX_RETRIES,
    IDENTITY_KEY,
    SAFE_KEY_BITS,
    KeyGenerator,
    init_keys,
)


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyTable:
    """
    rows[v][x] is the key for value x at vertex v; rows[v][0] is the identity.
    to_play[p] is the key for player p to move (index 0 identity), or None in
    positional mode. Every non-identity key in the table is distinct.
    """

    size: int
    values: int
    key_bits: int
    rows: Tuple[Tuple[int, ...], ...]
    to_play: Optional[Tuple[int, ...]] = None

    @classmethod
    def build(
        cls,
        size,
        values,
        situational=0,
        key_bits=DEFAULT_KEY_BITS,
        seed=None,
        rng=None,
        max_retries=DEFAULT_MAX_RETRIES,
        generator: KeyGenerator | None = None,
    ) -> "KeyTable":
        size, values, situational, key_bits = referee.check_config(size, values, situational, key_bits)
        if key_bits < SAFE_KEY_BITS:
            LOGGER.warning(
                "key_bits=%d is below %d; fingerprint collisions are likely on large tables",
                key_bits,
                SAFE_KEY_BITS,
            )
        if generator is None:
            generator = KeyGenerator(rng=rng, seed=seed, max_retries=max_retries)

        # one exclusion set spans vertex rows and to-play keys alike
        used = set()
        rows = tuple(init_keys(generator, used, values, key_bits) for _ in range(size))
        to_play = init_keys(generator, used, situational, key_bits) if situational else None

        LOGGER.debug(
            "built %d-bit key table: size=%d values=%d situational=%d keys=%d collisions=%d",
            key_bits,
            size,
            values,
            situational,
            len(used),
            generator.collisions,
        )
        return cls(size=size, values=values, key_bits=key_bits, rows=rows, to_play=to_play)

    @property
    def situational(self) -> int:
        return len(self.to_play) - 1 if self.to_play else 0

    def to_play_key(self, player) -> int:
        if self.to_play is None:
            return IDENTITY_KEY
        return self.to_play[player]

    def all_keys(self) -> Iterator[int]:
        """Yield every non-identity key: vertex rows first, then to-play keys."""
        for row in self.rows:
            yield from row[1:]
        if self.to_play:
            yield from self.to_play[1:]