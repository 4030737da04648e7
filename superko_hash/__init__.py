"""superko_hash package exports."""

from .Board import Board
from .KoHash import KoHash
from .engine.errors import (
    ConfigurationError,
    DuplicateFingerprint,
    KeySpaceExhaustion,
    KoHashError,
    StateShapeError,
)
from .zobrist.hasher import Hasher
from .zobrist.key_table import KeyTable
from .zobrist.keygen import KeyGenerator
from .zobrist.registry import PositionRegistry

# Subpackages for key generation/hashing, validation, and CLI helpers
from . import engine, utils, zobrist

__all__ = [
    "Board",
    "KoHash",
    "Hasher",
    "KeyTable",
    "KeyGenerator",
    "PositionRegistry",
    "KoHashError",
    "ConfigurationError",
    "StateShapeError",
    "DuplicateFingerprint",
    "KeySpaceExhaustion",
    "engine",
    "utils",
    "zobrist",
]
