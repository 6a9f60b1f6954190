#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import pydantic
import pytest

from freemem.levels import Thresholds
from freemem.state import State


def test_bounds_for_all_valid_levels() -> None:
    for critical in range(101):
        for warning in range(critical, 101):
            thresholds = Thresholds(critical=critical, warning=warning)
            assert thresholds.warning_bound == 100 - warning
            assert thresholds.critical_bound == 100 - critical
            assert thresholds.warning_bound <= thresholds.critical_bound


@pytest.mark.parametrize(
    "critical, warning",
    [
        pytest.param(21, 20, id="critical above warning"),
        pytest.param(100, 0, id="inverted extremes"),
        pytest.param(-1, 20, id="negative critical"),
        pytest.param(10, 101, id="warning above 100"),
        pytest.param("10", 20, id="string"),
        pytest.param(10.0, 20, id="float"),
        pytest.param(True, 20, id="bool"),
    ],
)
def test_invalid_levels(critical: object, warning: object) -> None:
    with pytest.raises(pydantic.ValidationError):
        Thresholds(critical=critical, warning=warning)


def test_levels_are_immutable() -> None:
    thresholds = Thresholds(critical=10, warning=20)
    with pytest.raises(pydantic.ValidationError):
        thresholds.warning = 30  # type: ignore[misc]


@pytest.mark.parametrize(
    "used_percent, expected",
    [
        (0, State.OK),
        (10, State.OK),
        (79.99, State.OK),
        (80, State.WARN),
        (85, State.WARN),
        (89.99, State.WARN),
        (90, State.CRIT),
        (100, State.CRIT),
    ],
)
def test_classify(used_percent: float, expected: State) -> None:
    assert Thresholds(critical=10, warning=20).classify(used_percent) is expected


def test_classify_equal_levels() -> None:
    thresholds = Thresholds(critical=20, warning=20)
    assert thresholds.classify(79) is State.OK
    assert thresholds.classify(80) is State.CRIT


def test_classify_zero_levels() -> None:
    thresholds = Thresholds(critical=0, warning=0)
    assert thresholds.classify(99.9) is State.OK
    assert thresholds.classify(100) is State.CRIT
