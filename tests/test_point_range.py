from datetime import datetime, timedelta

import pytest

from dtrange import DirectionMismatch, InvalidStep, PointRange, RangeWindower, iter_points


def test_ascending_points_include_both_ends():
    start = datetime(2023, 1, 1)
    end = datetime(2023, 1, 3)
    assert list(PointRange(start, end, timedelta(days=1))) == [
        datetime(2023, 1, 1),
        datetime(2023, 1, 2),
        datetime(2023, 1, 3),
    ]


def test_descending_points():
    start = datetime(2023, 1, 3)
    end = datetime(2023, 1, 1)
    assert list(PointRange(start, end, timedelta(days=-1))) == [
        datetime(2023, 1, 3),
        datetime(2023, 1, 2),
        datetime(2023, 1, 1),
    ]


def test_non_integer_step_ends_on_bound():
    start = datetime(2023, 1, 1)
    end = datetime(2023, 1, 3, 12)
    assert list(iter_points(start, end, timedelta(days=1))) == [
        datetime(2023, 1, 1),
        datetime(2023, 1, 2),
        datetime(2023, 1, 3),
        datetime(2023, 1, 3, 12),
    ]


def test_equal_endpoints_yield_one_point():
    point = datetime(2023, 1, 1)
    assert list(PointRange(point, point, timedelta(hours=-1))) == [point]


def test_points_are_the_window_boundaries():
    start = datetime(2023, 1, 1)
    end = datetime(2023, 1, 1, 20)
    step = timedelta(hours=3)
    windows = list(RangeWindower(start, end, step))
    boundaries = [windows[0].start] + [window.end for window in windows]
    assert list(PointRange(start, end, step)) == boundaries


def test_exhausted_range_stays_exhausted():
    points = PointRange(datetime(2023, 1, 1), datetime(2023, 1, 2), timedelta(days=1))
    assert len(list(points)) == 2
    assert list(points) == []


def test_validation_matches_windower():
    with pytest.raises(InvalidStep):
        PointRange(datetime(2023, 1, 1), datetime(2023, 1, 2), timedelta(0))
    with pytest.raises(DirectionMismatch):
        iter_points(datetime(2023, 1, 2), datetime(2023, 1, 1), timedelta(hours=1))


def test_overflow_lands_on_bound():
    start = datetime.max - timedelta(minutes=30)
    assert list(PointRange(start, datetime.max, timedelta(hours=1))) == [start, datetime.max]
