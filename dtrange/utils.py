"""Utility helpers for the dtrange iterators."""

from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import Any, Optional

from pandas.errors import OutOfBoundsDatetime

from .constants import STEP_UNITS, ZERO
from .errors import DirectionMismatch, InvalidStep

_STEP_PATTERN = re.compile(r"^\s*([+-]?)(\d+)\s*([a-z])\s*$", re.IGNORECASE)
_UNITS = {unit.suffix: unit for unit in STEP_UNITS}
_OVERFLOW_ERRORS = (OverflowError, OutOfBoundsDatetime)


def step_sign(step: Any) -> int:
    """Return 1, -1 or 0 for a positive, negative or zero duration."""
    if step > ZERO:
        return 1
    if step < ZERO:
        return -1
    return 0


def validate_step(step: Any) -> int:
    sign = step_sign(step)
    if sign == 0:
        raise InvalidStep(step)
    return sign


def validate_direction(start: Any, end: Any, step: Any) -> int:
    """Check ``step`` against the order of ``start``/``end`` and return its sign."""
    sign = validate_step(step)
    if (sign > 0 and start > end) or (sign < 0 and start < end):
        raise DirectionMismatch(start, end, step)
    return sign


def reached(cursor: Any, bound: Any, sign: int) -> bool:
    """True once ``cursor`` is at or beyond ``bound`` in the direction of ``sign``."""
    if sign > 0:
        return cursor >= bound
    return cursor <= bound


def clamp(candidate: Any, bound: Any, sign: int) -> Any:
    """Pull ``candidate`` back to ``bound`` if it lies beyond it."""
    if sign > 0:
        return min(candidate, bound)
    return max(candidate, bound)


def advance(point: Any, step: Any) -> Optional[Any]:
    """Return ``point + step``, or ``None`` when the result is not representable."""
    try:
        return point + step
    except _OVERFLOW_ERRORS:
        return None


def steps_between(cursor: Any, bound: Any, step: Any) -> int:
    """Number of ``step``-sized windows needed to cover ``cursor``..``bound``."""
    whole, rest = divmod(abs(bound - cursor), abs(step))
    return int(whole) + (1 if rest else 0)


def parse_datetime(value: str) -> datetime:
    """Parse an ISO-8601 string into a naive ``datetime``."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        raise ValueError(f"Expected a naive date-time, got {value}")
    return parsed


def parse_step(value: str) -> timedelta:
    """Parse ``[-]<int><unit>`` (``1h``, ``-1d``, ``90m``) into a ``timedelta``."""
    match = _STEP_PATTERN.match(value or "")
    if not match:
        raise ValueError(f"Unrecognized step format: {value}")

    sign, amount, suffix = match.groups()
    unit = _UNITS.get(suffix.lower())
    if unit is None:
        raise ValueError(f"Unknown step unit {suffix!r} in {value}")
    delta = unit.delta * int(amount)
    return -delta if sign == "-" else delta


__all__ = [
    "step_sign",
    "validate_step",
    "validate_direction",
    "reached",
    "clamp",
    "advance",
    "steps_between",
    "parse_datetime",
    "parse_step",
]
