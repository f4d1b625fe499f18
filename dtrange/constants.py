"""Constants shared by the dtrange iterators and command line."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Tuple

ZERO = timedelta(0)

@dataclass(frozen=True)
class StepUnit:
    suffix: str
    label: str
    delta: timedelta

STEP_UNITS: Tuple[StepUnit, ...] = (
    StepUnit("s", "seconds", timedelta(seconds=1)),
    StepUnit("m", "minutes", timedelta(minutes=1)),
    StepUnit("h", "hours", timedelta(hours=1)),
    StepUnit("d", "days", timedelta(days=1)),
    StepUnit("w", "weeks", timedelta(weeks=1)),
)

DEFAULT_STEP = "1h"
WINDOW_COLUMNS: Tuple[str, ...] = ("start", "end", "duration")
