"""Error types raised by table construction, hashing, and the position registry."""


class KoHashError(Exception):
    """Base class for all superko_hash errors."""


class ConfigurationError(KoHashError, ValueError):
    """Invalid size/values/situational/key width at construction."""


class StateShapeError(KoHashError, ValueError):
    """State vector has the wrong length or holds an out-of-range value."""


class DuplicateFingerprint(KoHashError):
    """Position already registered: a repetition (superko violation)."""

    def __init__(self, fingerprint):
        super().__init__(f"{fingerprint} already in registry")
        self.fingerprint = fingerprint


class KeySpaceExhaustion(KoHashError, RuntimeError):
    """No unique key could be drawn for the requested bit width."""
