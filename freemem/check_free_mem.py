#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""check_free_mem - Monitor the percentage of free memory of a Linux host"""

# Reads MemTotal and MemAvailable from /proc/meminfo, e.g.
# MemTotal:        1000000 kB
# MemAvailable:     150000 kB
# and reports the free percentage against levels of free memory:
#
# $ check_free_mem --critical 10 --warning 20
# WARNING - free 15% | total=1000000kB;;;; free=150000kB;;;;

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import NoReturn

import pydantic

from freemem import __version__
from freemem.exceptions import CheckError, ConfigurationError, MemInfoParseError
from freemem.levels import Thresholds
from freemem.log import logger, setup_console_logging
from freemem.meminfo import MEMINFO_PATH, MemInfo, parse_meminfo, read_meminfo
from freemem.state import State, state_name

Perfdata = tuple[str, int, str]


def main(
    argv: Sequence[str] | None = None,
    meminfo_path: Path = MEMINFO_PATH,
) -> int:
    context = parse_arguments(sys.argv[1:] if argv is None else argv, meminfo_path)
    setup_console_logging(context.verbosity)

    result = _check_free_mem_main(context)
    _output_check_result(result)
    return int(result.state)


@dataclass(frozen=True)
class RunContext:
    thresholds: Thresholds
    meminfo_path: Path
    verbosity: int = 0
    debug: bool = False


@dataclass(frozen=True)
class CheckResult:
    state: State
    summary: str
    perfdata: Sequence[Perfdata] = field(default_factory=tuple)


class ArgParser(argparse.ArgumentParser):
    # The monitoring core treats everything but a check result as UNKNOWN,
    # this includes --help and --version.
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stdout)
        self.exit(State.UNKNOWN, f"{self.prog}: error: {message}\n")

    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        if message:
            sys.stdout.write(message)
        sys.exit(int(State.UNKNOWN))


def _build_parser() -> ArgParser:
    parser = ArgParser(
        prog="check_free_mem",
        description="Check the percentage of free memory of a Linux host.",
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "-?",
        "--help",
        action="help",
        help="Show this help message and exit",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Verbose mode (can be given multiple times)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Debug mode: let Python exceptions come through",
    )
    parser.add_argument(
        "-c",
        "--critical",
        type=int,
        required=True,
        metavar="PERCENT",
        help="Critical if less than PERCENT of the memory is free",
    )
    parser.add_argument(
        "-w",
        "--warning",
        type=int,
        required=True,
        metavar="PERCENT",
        help="Warning if less than PERCENT of the memory is free "
        "(must not be less than the critical level)",
    )
    return parser


def parse_arguments(argv: Sequence[str], meminfo_path: Path = MEMINFO_PATH) -> RunContext:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        thresholds = _make_thresholds(args.critical, args.warning)
    except ConfigurationError as e:
        parser.error(str(e))

    return RunContext(
        thresholds=thresholds,
        meminfo_path=meminfo_path,
        verbosity=args.verbose,
        debug=args.debug,
    )


def _make_thresholds(critical: int, warning: int) -> Thresholds:
    """
    >>> _make_thresholds(10, 20)
    Thresholds(critical=10, warning=20)
    """
    try:
        return Thresholds(critical=critical, warning=warning)
    except pydantic.ValidationError as e:
        raise ConfigurationError(
            "; ".join(
                "{}{}".format(
                    "".join(f"{loc}: " for loc in error["loc"]),
                    error["msg"].removeprefix("Value error, "),
                )
                for error in e.errors()
            )
        ) from e


def _check_free_mem_main(context: RunContext) -> CheckResult:
    logger.info(
        "Levels: warning below %d%% free, critical below %d%% free",
        context.thresholds.warning,
        context.thresholds.critical,
    )
    try:
        return check_free_memory(
            parse_meminfo(read_meminfo(context.meminfo_path)),
            context.thresholds,
        )

    except CheckError as e:
        logger.info("Check failed: %s", e)
        return CheckResult(e.state, str(e))

    except Exception as e:
        if context.debug:
            raise
        return CheckResult(State.UNKNOWN, f"Unhandled exception: {e}")


def check_free_memory(meminfo: MemInfo, thresholds: Thresholds) -> CheckResult:
    """
    >>> check_free_memory(MemInfo(total=1000000, available=900000), Thresholds(critical=10, warning=20))
    CheckResult(state=<State.OK: 0>, summary='free 90%', perfdata=[('total', 1000000, 'kB'), ('free', 900000, 'kB')])
    """
    total, free = meminfo.total, meminfo.available
    if total == 0:
        raise MemInfoParseError("MemTotal is zero")

    used_percent = 100.0 * (total - free) / total
    return CheckResult(
        state=thresholds.classify(used_percent),
        summary=f"free {round(100.0 * free / total)}%",
        perfdata=[("total", total, "kB"), ("free", free, "kB")],
    )


def format_check_result(result: CheckResult) -> str:
    """
    >>> format_check_result(CheckResult(State.WARN, "free 15%", [("total", 1000000, "kB"), ("free", 150000, "kB")]))
    'WARNING - free 15% | total=1000000kB;;;; free=150000kB;;;;'
    >>> format_check_result(CheckResult(State.UNKNOWN, "MemAvailable not found"))
    'UNKNOWN - MemAvailable not found'
    """
    s = f"{state_name(result.state)} - {result.summary}"
    if result.perfdata:
        s += " | %s" % " ".join(f"{name}={value}{unit};;;;" for name, value, unit in result.perfdata)
    return s


def _output_check_result(result: CheckResult) -> None:
    sys.stdout.write("%s\n" % format_check_result(result))


if __name__ == "__main__":
    sys.exit(main())
