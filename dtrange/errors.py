"""Exceptions raised by the dtrange iterators."""

from __future__ import annotations

from typing import Any


class DatetimeIterError(Exception):
    """Base class for every error raised by this package."""


class InvalidStep(DatetimeIterError, ValueError):
    """The step duration is zero, so the iterator could never advance."""

    def __init__(self, step: Any) -> None:
        super().__init__(f"Step duration cannot be zero (got {step!r})")
        self.step = step


class DirectionMismatch(DatetimeIterError, ValueError):
    """The sign of the step disagrees with the order of start and end."""

    def __init__(self, start: Any, end: Any, step: Any) -> None:
        if end < start:
            hint = "a negative step is required when start is after end"
        else:
            hint = "a positive step is required when start is before end"
        super().__init__(f"Invalid range: start {start} / end {end} with step {step}; {hint}")
        self.start = start
        self.end = end
        self.step = step


class StepOverflow(DatetimeIterError, OverflowError):
    """The next point is outside the range the point type can represent."""

    def __init__(self, current: Any, step: Any) -> None:
        super().__init__(f"Stepping {current} by {step} leaves the representable range")
        self.current = current
        self.step = step


__all__ = ["DatetimeIterError", "InvalidStep", "DirectionMismatch", "StepOverflow"]
