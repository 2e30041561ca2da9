# ==============================================================================
# Clothoid Transitions - Euler Spiral Transition Curves
# Copyright (c) 2025 Michael Yoder / Desert Springs Civil Engineering PLLC
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
#
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
# You should have received a copy of the GNU General Public License along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# Primary Author: Michael Yoder
# Company: Desert Springs Civil Engineering PLLC
# ==============================================================================

"""
Logging Configuration Module
=============================

All engine modules log under one ``clothoid`` namespace logger that owns
a single stream handler and does not propagate. Module loggers are named
after the module with the package name shortened to that prefix, so
``clothoid_transitions.core.equation`` logs as ``clothoid.core.equation``.

Usage:
    from clothoid_transitions.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("Line/circle transition length %.9g", length)

Temporarily raise verbosity around a single computation:
    with log_level(logging.DEBUG):
        connect_circles(c1, c2)

Log Levels:
    DEBUG    - Connection outcomes, solver windows and fit rejections
    WARNING  - A solver hit its iteration cap and returned its estimate
"""

import logging
import sys
from contextlib import contextmanager
from typing import IO, Iterator, Optional

LOGGER_PREFIX = "clothoid"
PACKAGE_NAME = "clothoid_transitions"

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
DETAILED_FORMAT = "[%(levelname)s] %(asctime)s - %(name)s:%(lineno)d - %(message)s"


def _namespace_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_PREFIX)


def _logger_name(name: str) -> str:
    head, _, tail = name.partition(".")
    if head == PACKAGE_NAME:
        head = LOGGER_PREFIX
    elif head != LOGGER_PREFIX:
        return f"{LOGGER_PREFIX}.{name}"
    return f"{head}.{tail}" if tail else head


def _make_handler(level: int, detailed: bool, stream: Optional[IO[str]]) -> logging.Handler:
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DETAILED_FORMAT if detailed else DEFAULT_FORMAT))
    return handler


def setup_logging(
    level: int = logging.INFO,
    detailed: bool = False,
    stream: Optional[IO[str]] = None
) -> logging.Logger:
    """(Re)configure the namespace logger.

    Any handler from an earlier call is replaced, so repeated setup
    never duplicates output.

    Args:
        level: Level applied to the logger and its handler
        detailed: Add timestamps and line numbers to each record
        stream: Output stream, sys.stderr when omitted

    Returns:
        The ``clothoid`` namespace logger
    """
    namespace = _namespace_logger()
    namespace.handlers.clear()
    namespace.addHandler(_make_handler(level, detailed, stream))
    namespace.setLevel(level)
    namespace.propagate = False
    return namespace


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, configuring the namespace on first use.

    Args:
        name: Module name, usually __name__
    """
    if not _namespace_logger().handlers:
        setup_logging()
    return logging.getLogger(_logger_name(name))


def set_log_level(level: int) -> None:
    """Change the level of the namespace logger and its handlers."""
    namespace = _namespace_logger()
    namespace.setLevel(level)
    for handler in namespace.handlers:
        handler.setLevel(level)


@contextmanager
def log_level(level: int) -> Iterator[logging.Logger]:
    """Apply a level for the duration of a with-block.

    The logger and handler levels in effect on entry are restored on
    exit, even when the block raises.
    """
    namespace = _namespace_logger()
    saved = [(namespace, namespace.level)] + [(h, h.level) for h in namespace.handlers]
    set_log_level(level)
    try:
        yield namespace
    finally:
        for item, previous in saved:
            item.setLevel(previous)


def enable_debug() -> None:
    set_log_level(logging.DEBUG)


def disable_debug() -> None:
    set_log_level(logging.INFO)


__all__ = [
    "setup_logging",
    "get_logger",
    "set_log_level",
    "log_level",
    "enable_debug",
    "disable_debug",
    "LOGGER_PREFIX",
]
