"""Validation for table configuration, state vectors, and player-to-move values."""

import operator

from .errors import ConfigurationError, StateShapeError


def _as_int(value, what, error):
    if isinstance(value, bool):
        raise error(f"{what} must be an integer, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise error(f"{what} must be an integer, got {type(value).__name__}") from None


def check_config(size, values, situational=0, key_bits=64):
    """
    Validate construction parameters.
    Raises ConfigurationError on non-positive size/values/key width or negative situational.
    """
    size = _as_int(size, "size", ConfigurationError)
    values = _as_int(values, "values", ConfigurationError)
    situational = _as_int(situational or 0, "situational", ConfigurationError)
    key_bits = _as_int(key_bits, "key_bits", ConfigurationError)

    if size <= 0:
        raise ConfigurationError(f"size must be > 0, got {size}")
    if values < 1:
        raise ConfigurationError(f"values must be >= 1, got {values}")
    if situational < 0:
        raise ConfigurationError(f"situational must be >= 0, got {situational}")
    if key_bits < 1:
        raise ConfigurationError(f"key_bits must be >= 1, got {key_bits}")
    return size, values, situational, key_bits


def check_retries(max_retries):
    max_retries = _as_int(max_retries, "max_retries", ConfigurationError)
    if max_retries < 1:
        raise ConfigurationError(f"max_retries must be >= 1, got {max_retries}")
    return max_retries


def check_vertex(vertex, size):
    vertex = _as_int(vertex, "vertex", StateShapeError)
    if not 0 <= vertex < size:
        raise StateShapeError(f"vertex {vertex} out of range [0, {size})")
    return vertex


def check_value(value, values, vertex=None):
    value = _as_int(value, "value", StateShapeError)
    if not 0 <= value <= values:
        where = "" if vertex is None else f" at vertex {vertex}"
        raise StateShapeError(f"value {value}{where} out of range [0, {values}]")
    return value


def check_state(state, size, values):
    """Return the state as a list of ints; raise StateShapeError on length or range mismatch."""
    try:
        length = len(state)
    except TypeError:
        raise StateShapeError(f"state must be a sequence, got {type(state).__name__}") from None
    if length != size:
        raise StateShapeError(f"state length {length} does not match board size {size}")
    return [check_value(v, values, vertex=i) for i, v in enumerate(state)]


def check_to_play(to_play, situational):
    """In positional mode (situational == 0) to_play is ignored and normalized to 0."""
    if not situational:
        return 0
    to_play = _as_int(to_play, "to_play", StateShapeError)
    if not 0 <= to_play <= situational:
        raise StateShapeError(f"to_play {to_play} out of range [0, {situational}]")
    return to_play
