"""Parsing of ``-L/--logger-level NAME=LEVEL`` options.

Values may be repeated on the command line or given as one comma/space
separated string (as from ``PROXYCTL_LOGGER_LEVEL``). The HTTP stack is
chatty at DEBUG, so httpx and httpcore default to WARNING unless overridden.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"httpx": logging.WARNING, "httpcore": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten a string or sequence of strings into non-empty NAME=LEVEL items."""
    chunks = value if isinstance(value, (tuple, list)) else [value]
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL items into a logger-name -> level map.

    Starts from DEFAULT_LIB_LEVELS; later items override earlier ones.
    Level names are case-insensitive.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is not a
            standard logging level name.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in split_items(value):
        name, sep, level_name = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        level = logging.getLevelNamesMapping().get(level_name.strip().upper())
        if level is None:
            raise click.BadParameter(f"Invalid log level: {level_name}")
        levels[name.strip()] = level
    return levels
