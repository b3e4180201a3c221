"""
Logging configuration shared by the cargo-switch entrypoints.

Levels are resolved in precedence order:
    CLI flag  >  CARGO_SWITCH_LOG_LEVEL env var  >  WARNING (default)

Progress meant for the user (link reports, install results) is printed,
not logged; the loggers carry diagnostics only.
"""

from __future__ import annotations

import logging
import sys

_FMT_MINIMAL = "%(levelname)s: %(message)s"
_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d - %(message)s"
_DATEFMT = "%H:%M:%S"

_PACKAGE_LOGGERS = ("cswitch_core", "cswitch_cli")


def setup_logging(level: str = "WARNING") -> None:
    """Attach a single stderr handler to the cargo-switch loggers."""
    numeric_level = _parse_level(level)

    if numeric_level <= logging.DEBUG:
        fmt, datefmt = _FMT_DEBUG, _DATEFMT
    elif numeric_level <= logging.INFO:
        fmt, datefmt = _FMT_VERBOSE, _DATEFMT
    else:
        fmt, datefmt = _FMT_MINIMAL, None

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    for name in _PACKAGE_LOGGERS:
        package_logger = logging.getLogger(name)
        package_logger.handlers.clear()
        package_logger.addHandler(console)
        package_logger.setLevel(numeric_level)


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
