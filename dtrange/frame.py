"""Tabulate windows into a pandas DataFrame for reporting and batching."""

from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from .constants import WINDOW_COLUMNS
from .windows import RangeWindower


def windows_frame(start: Any, end: Any, step: Any) -> pd.DataFrame:
    """One row per window with ``start``, ``end`` and signed ``duration`` columns."""
    rows: List[Dict[str, Any]] = []
    for window in RangeWindower(start, end, step):
        rows.append(
            {
                "start": window.start,
                "end": window.end,
                "duration": window.duration,
            }
        )
    return pd.DataFrame(rows, columns=list(WINDOW_COLUMNS))


__all__ = ["windows_frame"]
