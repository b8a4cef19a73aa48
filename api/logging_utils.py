"""Logging setup for the deck service."""

import logging

from config import config


def log_level() -> str:
    """Return the configured level name, DEBUG when debug mode is on."""
    return "DEBUG" if config.debug else config.logging.level


def setup_logging(level: str | None = None) -> None:
    """Call once at program start."""
    level = level or log_level()
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
