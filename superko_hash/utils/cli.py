"""CLI options for the superko audit: record path, key width, seed, and settings path."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Superko audit: report the first repeated position in a game record")
    parser.add_argument("record", help="Path to a JSON game record")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--key-bits", type=int, help="Key width in bits (default from settings, 64)")
    parser.add_argument("--seed", type=int, help="PRNG seed for a reproducible key table")
    parser.add_argument("--max-retries", type=int, help="Collision retries per key before giving up")
    parser.add_argument(
        "--situational",
        type=int,
        default=None,
        help="Number of players for situational superko; 0 for positional (overrides the record)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING)")
    return parser.parse_args(argv)
