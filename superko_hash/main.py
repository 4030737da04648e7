"""Entry point for the superko audit. Load settings and a game record, replay positions through KoHash."""

import json
import sys
from pathlib import Path

import yaml

from superko_hash.KoHash import KoHash
from superko_hash.engine.errors import DuplicateFingerprint, KoHashError
from superko_hash.utils.cli import parse_args
from superko_hash.utils.logger import configure_logging, log_event


PROJECT_DIR = Path(__file__).resolve().parent

EXIT_OK = 0
EXIT_REPETITION = 1
EXIT_BAD_INPUT = 2


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `superko_hash/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        settings = yaml.safe_load(f) or {}
    if not isinstance(settings, dict):
        raise ValueError(f"settings file {path} must hold a mapping")
    return settings


def load_record(path):
    """Read a game record: {"size", "values", "situational"?, "positions": [{"state", "to_play"?}]}."""
    with open(path, "r", encoding="utf-8") as f:
        record = json.load(f)
    if not isinstance(record, dict):
        raise ValueError("game record must be a JSON object")
    for field in ("size", "values", "positions"):
        if field not in record:
            raise ValueError(f"game record is missing '{field}'")
    if not isinstance(record["positions"], list):
        raise ValueError("'positions' must be a list")
    return record


def audit(ko, positions):
    """
    Add each position in order. Returns (first_index, repeat_index) for the first
    repetition, or None when every position is unique.
    """
    first_seen = {}
    for index, entry in enumerate(positions):
        state = entry["state"]
        to_play = entry.get("to_play", 0)
        try:
            fingerprint = ko.add(state, to_play)
        except DuplicateFingerprint as exc:
            first = first_seen.get(exc.fingerprint)
            log_event(f"Repetition: position {index} repeats position {first} (fingerprint {exc.fingerprint:#x})")
            return first, index
        first_seen[fingerprint] = index
        log_event(f"Position {index}: to_play={to_play} fingerprint={fingerprint:#x}")
    return None


def main(argv=None):
    args = parse_args(argv)
    try:
        settings = load_settings(args.settings)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        configure_logging(args.log_level or "INFO")
        log_event(f"Invalid settings: {exc}")
        return EXIT_BAD_INPUT
    configure_logging(args.log_level or settings.get("log_level", "INFO"))

    key_bits = args.key_bits or settings.get("key_bits", 64)
    seed = args.seed if args.seed is not None else settings.get("seed")
    max_retries = args.max_retries or settings.get("max_retries", 64)

    try:
        record = load_record(args.record)
        if args.situational is not None:
            situational = args.situational
        else:
            situational = record.get("situational", settings.get("situational", 0))
        ko = KoHash(
            record["size"],
            record["values"],
            situational,
            key_bits=key_bits,
            seed=seed,
            max_retries=max_retries,
        )
        result = audit(ko, record["positions"])
    except (OSError, ValueError, KeyError, TypeError, KoHashError) as exc:
        log_event(f"Invalid input: {exc}")
        return EXIT_BAD_INPUT

    if result is None:
        log_event(f"No repetition in {len(record['positions'])} positions")
        return EXIT_OK
    return EXIT_REPETITION


if __name__ == "__main__":
    sys.exit(main())
