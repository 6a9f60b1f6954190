#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Free memory levels

The levels are given as percentages of *free* memory ("alert if less than
this is free"), but the check classifies the *used* percentage. The bounds
are therefore inverted: a free level of 20% becomes a used bound of 80%.
"""

from typing import Annotated, Self

import pydantic

from freemem.log import logger
from freemem.state import short_state_name, State

Percentage = Annotated[int, pydantic.Field(strict=True, ge=0, le=100)]


class Thresholds(pydantic.BaseModel, frozen=True):
    critical: Percentage
    warning: Percentage

    @pydantic.model_validator(mode="after")
    def _critical_below_warning(self) -> Self:
        if self.critical > self.warning:
            raise ValueError(
                f"critical ({self.critical}%) must not be greater than warning ({self.warning}%)"
            )
        return self

    @property
    def warning_bound(self) -> int:
        """
        >>> Thresholds(critical=10, warning=20).warning_bound
        80
        """
        return 100 - self.warning

    @property
    def critical_bound(self) -> int:
        """
        >>> Thresholds(critical=10, warning=20).critical_bound
        90
        """
        return 100 - self.critical

    def classify(self, used_percent: float) -> State:
        """
        >>> levels = Thresholds(critical=10, warning=20)
        >>> [levels.classify(v) for v in (79.9, 80, 89.9, 90, 100)]
        [<State.OK: 0>, <State.WARN: 1>, <State.WARN: 1>, <State.CRIT: 2>, <State.CRIT: 2>]
        """
        if used_percent >= self.critical_bound:
            state = State.CRIT
        elif used_percent >= self.warning_bound:
            state = State.WARN
        else:
            state = State.OK

        logger.debug(
            "Used %.2f%% (warn/crit at %d%%/%d%%): %s",
            used_percent,
            self.warning_bound,
            self.critical_bound,
            short_state_name(state),
        )
        return state
