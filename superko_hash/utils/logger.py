"""Logging setup and event reporting for the audit CLI."""

import logging


LOGGER = logging.getLogger("superko_hash")


def configure_logging(level="INFO"):
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="[%(asctime)s] %(levelname)s %(message)s", datefmt="%H:%M:%S")


def log_event(message):
    LOGGER.info(message)
