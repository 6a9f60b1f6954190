#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from freemem.state import State


# never used directly in the code. Just some wrapper to make all of our
# exceptions handleable with one call
class FreeMemException(Exception):
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class CheckError(FreeMemException):
    """A failure that ends the check run with a definite state"""

    state = State.UNKNOWN

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)

    def __str__(self) -> str:
        return self.reason


class ConfigurationError(CheckError):
    pass


class MemInfoReadError(CheckError):
    pass


class MemInfoParseError(CheckError):
    pass
