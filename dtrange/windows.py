"""Partition a directed span of time into fixed-size windows."""

from __future__ import annotations

import logging
from typing import Any, Iterator

from .models import Window
from .utils import advance, clamp, reached, steps_between, validate_direction

logger = logging.getLogger(__name__)


class RangeWindower(Iterator[Window]):
    """Yield contiguous windows of ``step`` from ``start`` until ``end``.

    With a positive step the windows tile ``[start, end)`` going forward;
    with a negative step they tile ``(end, start]`` going backward. The
    last window is clamped so it ends exactly at ``end`` and may therefore
    be shorter than ``step``.
    """

    def __init__(self, start: Any, end: Any, step: Any) -> None:
        self._sign = validate_direction(start, end, step)
        self._cursor = start
        self._bound = end
        self._step = step
        self._exhausted = False
        logger.debug("RangeWindower created start=%s end=%s step=%s", start, end, step)

    @property
    def cursor(self) -> Any:
        """Start of the next window."""
        return self._cursor

    @property
    def bound(self) -> Any:
        return self._bound

    @property
    def step(self) -> Any:
        return self._step

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def remaining(self) -> int:
        """Number of windows still to be produced."""
        if self._exhausted or reached(self._cursor, self._bound, self._sign):
            return 0
        return steps_between(self._cursor, self._bound, self._step)

    def __length_hint__(self) -> int:
        return self.remaining()

    def __iter__(self) -> "RangeWindower":
        return self

    def __next__(self) -> Window:
        if self._exhausted:
            raise StopIteration
        if reached(self._cursor, self._bound, self._sign):
            self._exhausted = True
            logger.debug("RangeWindower exhausted at %s", self._bound)
            raise StopIteration

        window_start = self._cursor
        candidate = advance(window_start, self._step)
        # An unrepresentable candidate always lies past the bound.
        if candidate is None:
            candidate = self._bound
        self._cursor = candidate
        return Window(window_start, clamp(candidate, self._bound, self._sign))


class PointRange(Iterator[Any]):
    """Yield the boundaries of the windows between ``start`` and ``end``.

    ``start`` comes first, then every ``start + k*step`` short of ``end``,
    then ``end`` itself. Both endpoints are always included, so
    ``start == end`` yields one point.
    """

    def __init__(self, start: Any, end: Any, step: Any) -> None:
        self._sign = validate_direction(start, end, step)
        self._cursor = start
        self._bound = end
        self._step = step
        self._done = False
        logger.debug("PointRange created start=%s end=%s step=%s", start, end, step)

    def __iter__(self) -> "PointRange":
        return self

    def __next__(self) -> Any:
        if self._done:
            raise StopIteration

        result = self._cursor
        if reached(result, self._bound, self._sign):
            self._done = True
            return result

        following = advance(result, self._step)
        if following is None:
            following = self._bound
        self._cursor = clamp(following, self._bound, self._sign)
        return result


def iter_windows(start: Any, end: Any, step: Any) -> Iterator[Window]:
    """Return an iterator over the windows covering ``start``..``end``."""
    return RangeWindower(start, end, step)


def iter_points(start: Any, end: Any, step: Any) -> Iterator[Any]:
    return PointRange(start, end, step)


def count_windows(start: Any, end: Any, step: Any) -> int:
    """Return how many windows :func:`iter_windows` would produce."""
    return RangeWindower(start, end, step).remaining()


__all__ = ["RangeWindower", "PointRange", "iter_windows", "iter_points", "count_windows"]
