"""Unbounded stepping through time from a single starting point."""

from __future__ import annotations

import logging
from itertools import islice
from typing import Any, Iterator, Optional

from .errors import StepOverflow
from .utils import advance, validate_step

logger = logging.getLogger(__name__)


class PointStepper(Iterator[Any]):
    """Yield ``start``, ``start + step``, ``start + 2*step``, ... forever.

    A negative ``step`` walks backward. The sequence never ends on its own;
    bound it with ``itertools.islice`` or :func:`step_points`. The point
    type's representable range is the only limit: the call that would
    produce an unrepresentable point raises :class:`StepOverflow`, and so
    does every call after it.
    """

    def __init__(self, start: Any, step: Any) -> None:
        validate_step(step)
        self._current = start
        self._step = step
        self._overflowed = False
        logger.debug("PointStepper created start=%s step=%s", start, step)

    @property
    def current(self) -> Any:
        """The point the next call will return."""
        return self._current

    @property
    def step(self) -> Any:
        return self._step

    def __iter__(self) -> "PointStepper":
        return self

    def __next__(self) -> Any:
        if self._overflowed:
            raise StepOverflow(self._current, self._step)

        result = self._current
        following = advance(result, self._step)
        if following is None:
            logger.warning("PointStepper reached the representable limit at %s", result)
            self._overflowed = True
        else:
            self._current = following
        return result


def step_points(start: Any, step: Any, *, limit: Optional[int] = None) -> Iterator[Any]:
    """Generator form of :class:`PointStepper`, optionally capped at ``limit`` points."""
    stepper = PointStepper(start, step)
    if limit is None:
        return stepper
    return islice(stepper, limit)


__all__ = ["PointStepper", "step_points"]
