from datetime import datetime, timedelta

from dtrange import Window


def test_window_equals_plain_tuple():
    window = Window(datetime(2023, 1, 1), datetime(2023, 1, 2))
    assert window == (datetime(2023, 1, 1), datetime(2023, 1, 2))
    start, end = window
    assert end - start == timedelta(days=1)


def test_backward_window_duration_is_negative():
    window = Window(datetime(2023, 1, 3), datetime(2023, 1, 2))
    assert window.duration == timedelta(days=-1)
    assert window.ordered() == (datetime(2023, 1, 2), datetime(2023, 1, 3))


def test_contains_is_half_open():
    window = Window(datetime(2023, 1, 1, 0), datetime(2023, 1, 1, 1))
    assert window.contains(datetime(2023, 1, 1, 0))
    assert window.contains(datetime(2023, 1, 1, 0, 59))
    assert not window.contains(datetime(2023, 1, 1, 1))


def test_as_dict_uses_isoformat():
    window = Window(datetime(2023, 1, 1), datetime(2023, 1, 1, 1, 30))
    assert window.as_dict() == {"start": "2023-01-01T00:00:00", "end": "2023-01-01T01:30:00"}
