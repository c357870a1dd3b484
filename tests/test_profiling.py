from datetime import timedelta

import pytest

from profiling import profile, format_duration


def test_profile_returns_result_and_duration():
    calls = []

    def f():
        calls.append(1)
        return [1, 2, 3]

    result, elapsed = profile(f)
    assert result == [1, 2, 3]
    assert isinstance(elapsed, timedelta)
    assert elapsed >= timedelta(0)
    assert calls == [1]


def test_profile_propagates_exceptions():
    def boom():
        raise ValueError("nope")

    with pytest.raises(ValueError, match="nope"):
        profile(boom)


@pytest.mark.parametrize("duration,expected", [
    (timedelta(0), "0µs"),
    (timedelta(microseconds=12), "12µs"),
    (timedelta(microseconds=2250), "2.250ms"),
    (timedelta(seconds=3), "3.000s"),
])
def test_format_duration(duration, expected):
    assert format_duration(duration) == expected


def test_format_duration_negative():
    with pytest.raises(ValueError):
        format_duration(timedelta(seconds=-1))
