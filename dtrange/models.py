"""Data models for dtrange windows."""

from __future__ import annotations

from typing import Any, Dict, NamedTuple, Tuple


class Window(NamedTuple):
    """A ``(start, end)`` pair emitted by :class:`~dtrange.windows.RangeWindower`.

    ``start`` is where the cursor stood before the window was produced and
    ``end`` is where the window stops, so for backward iteration ``end`` is
    earlier than ``start``. Compares equal to the plain tuple.
    """

    start: Any
    end: Any

    @property
    def duration(self) -> Any:
        """Signed length of the window, ``end - start``."""
        return self.end - self.start

    def ordered(self) -> Tuple[Any, Any]:
        """Return the window as ``(earlier, later)`` regardless of direction."""
        if self.end < self.start:
            return self.end, self.start
        return self.start, self.end

    def contains(self, point: Any) -> bool:
        lower, upper = self.ordered()
        return lower <= point < upper

    def as_dict(self) -> Dict[str, str]:
        return {
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
        }


__all__ = ["Window"]
