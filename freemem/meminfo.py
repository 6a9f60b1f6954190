#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Reading /proc/meminfo

Example lines from /proc/meminfo:
MemTotal:       16318432 kB
MemFree:         1253428 kB
MemAvailable:    9421740 kB
Buffers:          712408 kB
"""

import os
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from freemem.exceptions import MemInfoParseError, MemInfoReadError
from freemem.log import logger, VERBOSE

MEMINFO_PATH = Path("/proc/meminfo")

_VALUE = re.compile(r":\s+(\d+)(?:\s|$)")


@dataclass(frozen=True)
class MemInfo:
    total: int
    available: int


def read_meminfo(path: Path = MEMINFO_PATH) -> list[str]:
    if not os.access(path, os.R_OK):
        raise MemInfoReadError(f"Cannot read {path}")

    logger.info("Reading %s", path)
    try:
        with path.open(encoding="utf-8") as meminfo:
            lines = [line.rstrip("\r\n") for line in meminfo]
    except OSError as e:
        raise MemInfoReadError(f"Cannot read {path}: {e.strerror or e}") from e

    logger.debug("Read %d lines from %s", len(lines), path)
    return lines


def get_value(label: str, lines: Sequence[str]) -> int:
    """Return the value of the one line starting with the given label

    >>> get_value("MemTotal", ["MemTotal:       16384000 kB", "MemFree: 1000 kB"])
    16384000
    >>> get_value("MemFree", ["MemTotal:       16384000 kB", "MemFree: 1000 kB"])
    1000
    """
    prefix = f"{label}:"
    matching = [line for line in lines if line.startswith(prefix)]

    if not matching:
        raise MemInfoParseError(f"{label} not found")
    if len(matching) > 1:
        raise MemInfoParseError(f"{label} is ambiguous ({len(matching)} matching lines)")

    if (match := _VALUE.match(matching[0], len(label))) is None:
        raise MemInfoParseError(f"Invalid value for {label}: {matching[0]!r}")

    value = int(match.group(1))
    logger.log(VERBOSE, "%s: %d kB", label, value)
    return value


def parse_meminfo(lines: Sequence[str]) -> MemInfo:
    return MemInfo(
        total=get_value("MemTotal", lines),
        available=get_value("MemAvailable", lines),
    )
