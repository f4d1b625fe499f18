"""Public API surface for the dtrange package."""

from .errors import DatetimeIterError, DirectionMismatch, InvalidStep, StepOverflow
from .frame import windows_frame
from .models import Window
from .stepper import PointStepper, step_points
from .windows import PointRange, RangeWindower, count_windows, iter_points, iter_windows

__all__ = [
    "DatetimeIterError",
    "DirectionMismatch",
    "InvalidStep",
    "PointRange",
    "PointStepper",
    "RangeWindower",
    "StepOverflow",
    "Window",
    "count_windows",
    "iter_points",
    "iter_windows",
    "step_points",
    "windows_frame",
]
