#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Monitoring states and the names the core expects for them."""

import enum


class State(enum.IntEnum):
    OK = 0
    WARN = 1
    CRIT = 2
    UNKNOWN = 3


def core_state_names() -> dict[int, str]:
    return {
        State.OK: "OK",
        State.WARN: "WARNING",
        State.CRIT: "CRITICAL",
        State.UNKNOWN: "UNKNOWN",
    }


def state_name(state: int, deflt: str = "") -> str:
    return core_state_names().get(state, deflt)


def short_state_names() -> dict[int, str]:
    return {
        State.OK: "OK",
        State.WARN: "WARN",
        State.CRIT: "CRIT",
        State.UNKNOWN: "UNKN",
    }


def short_state_name(state: int, deflt: str = "") -> str:
    return short_state_names().get(state, deflt)
