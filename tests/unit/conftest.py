#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

import pytest

from freemem import log

MEMINFO_LINES = [
    "MemTotal:        1000000 kB",
    "MemFree:          100000 kB",
    "MemAvailable:     150000 kB",
    "Buffers:           20000 kB",
    "Cached:            30000 kB",
    "SwapTotal:             0 kB",
    "SwapFree:              0 kB",
]

MeminfoFactory = Callable[[Sequence[str]], Path]


@pytest.fixture(autouse=True)
def fixture_console_logging() -> Iterator[None]:
    """Ensure every test starts and ends without console log handlers"""
    log.clear_console_logging()
    try:
        yield
    finally:
        log.clear_console_logging()


@pytest.fixture(name="make_meminfo")
def fixture_make_meminfo(tmp_path: Path) -> MeminfoFactory:
    def _make(lines: Sequence[str]) -> Path:
        path = tmp_path / "meminfo"
        path.write_text("".join(f"{line}\n" for line in lines))
        return path

    return _make


@pytest.fixture(name="meminfo_path")
def fixture_meminfo_path(make_meminfo: MeminfoFactory) -> Path:
    return make_meminfo(MEMINFO_LINES)
