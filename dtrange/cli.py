"""Command-line entry point for printing date-time windows and points."""

from __future__ import annotations

import argparse
import json
import logging
from itertools import islice
from pathlib import Path
from typing import Any, Dict, Sequence

from .constants import DEFAULT_STEP
from .errors import DatetimeIterError
from .stepper import PointStepper
from .utils import parse_datetime, parse_step
from .windows import PointRange, RangeWindower

logger = logging.getLogger(__name__)


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--start",
        required=True,
        help="Start of the span as an ISO-8601 date-time (e.g. 2023-01-01T00:00:00).",
    )
    parser.add_argument(
        "--step",
        default=DEFAULT_STEP,
        help="Signed step such as 1h or 90m; pass negative steps as --step=-1d (default: %(default)s).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional path to write JSON results. Defaults to stdout.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Split a date-time span into fixed-size windows")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    commands = parser.add_subparsers(dest="command", required=True)

    windows = commands.add_parser("windows", help="Print the windows between --start and --end")
    _add_common_args(windows)
    windows.add_argument("--end", required=True, help="End of the span (ISO-8601).")

    points = commands.add_parser("points", help="Print points stepped from --start")
    _add_common_args(points)
    points.add_argument("--end", help="Stop at this point, inclusive (ISO-8601).")
    points.add_argument("--count", type=int, help="Number of points to print when --end is omitted.")
    return parser


def _collect_windows(args: argparse.Namespace) -> Dict[str, Any]:
    start = parse_datetime(args.start)
    end = parse_datetime(args.end)
    step = parse_step(args.step)
    rows = [window.as_dict() for window in RangeWindower(start, end, step)]
    return {
        "meta": {
            "start": start.isoformat(),
            "end": end.isoformat(),
            "step_seconds": step.total_seconds(),
            "total_windows": len(rows),
        },
        "windows": rows,
    }


def _collect_points(args: argparse.Namespace) -> Dict[str, Any]:
    start = parse_datetime(args.start)
    step = parse_step(args.step)
    if args.end is not None:
        end = parse_datetime(args.end)
        points = list(PointRange(start, end, step))
    else:
        end = None
        points = list(islice(PointStepper(start, step), args.count))
    return {
        "meta": {
            "start": start.isoformat(),
            "end": end.isoformat() if end is not None else None,
            "step_seconds": step.total_seconds(),
            "total_points": len(points),
        },
        "points": [point.isoformat() for point in points],
    }


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "points":
        if args.end is None and args.count is None:
            parser.error("points requires --end or --count")
        if args.count is not None and args.count < 0:
            parser.error("--count must be >= 0")

    try:
        if args.command == "windows":
            payload = _collect_windows(args)
        else:
            payload = _collect_points(args)
    except DatetimeIterError as exc:
        parser.error(str(exc))
    except (ValueError, OverflowError) as exc:
        parser.error(f"invalid argument: {exc}")

    logger.info("Produced %s for %s", args.command, payload["meta"])

    if args.output:
        args.output.write_text(json.dumps(payload, indent=2))
    else:
        print(json.dumps(payload, indent=2))

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
