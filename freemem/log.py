#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import logging
import sys
from typing import IO

# Just for reference, the predefined logging levels:
#
# Python         added here
# -------------------------
# CRITICAL 50
# ERROR    40
# WARNING  30                 <= used without -v
# INFO     20                 <= -v
#                VERBOSE  15  <= -vv
# DEBUG    10                 <= -vvv and more
#
# The check result itself goes to stdout, so all log output is written to
# stderr.
VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")

logger = logging.getLogger("freemem")


def get_formatter(format_str: str = "%(levelname)s: %(message)s") -> logging.Formatter:
    return logging.Formatter(format_str)


def clear_console_logging() -> None:
    logger.handlers[:] = []
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.WARNING)


# Set default logging handler to avoid "No handler found" warnings.
clear_console_logging()


def setup_console_logging(verbosity: int, stream: IO[str] | None = None) -> None:
    """Write log messages of the requested verbosity to stderr (or the given stream)"""
    handler = logging.StreamHandler(stream=sys.stderr if stream is None else stream)
    handler.setFormatter(get_formatter())

    del logger.handlers[:]  # Remove all previously existing handlers
    logger.addHandler(handler)
    logger.setLevel(verbosity_to_log_level(verbosity))


def verbosity_to_log_level(verbosity: int) -> int:
    """Values for "verbosity":

      0: enables WARNING and above
      1: enables INFO and above
      2: enables VERBOSE and above
      3 or more: enables DEBUG and above (ALL messages)

    >>> verbosity_to_log_level(0) == logging.WARNING
    True
    >>> verbosity_to_log_level(5) == logging.DEBUG
    True
    """
    if verbosity < 0:
        raise ValueError(verbosity)
    if verbosity == 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    if verbosity == 2:
        return VERBOSE
    return logging.DEBUG
