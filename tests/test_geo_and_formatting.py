import pytest

from tools.walks.formatting import format_distance, format_duration, format_journal_duration
from tools.walks.geo import haversine_distance


def test_haversine_same_point_is_zero():
    assert haversine_distance(55.75, 37.61, 55.75, 37.61) == 0


def test_haversine_one_degree_of_longitude_on_equator():
    assert haversine_distance(0, 0, 0, 1) == pytest.approx(111_195, rel=1e-4)


def test_haversine_is_symmetric():
    there = haversine_distance(55.75, 37.61, 59.93, 30.31)
    back = haversine_distance(59.93, 30.31, 55.75, 37.61)
    assert there == pytest.approx(back)
    # Москва - Петербург, около 634 км по прямой
    assert there == pytest.approx(634_000, rel=0.02)


@pytest.mark.parametrize(
    "seconds, expected",
    [(0, "0:00"), (5, "0:05"), (65, "1:05"), (3599, "59:59"), (3600, "1:00:00"), (3725, "1:02:05"), (-3, "0:00")],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


@pytest.mark.parametrize(
    "meters, expected",
    [(0, "0 m"), (12.4, "12 m"), (999.4, "999 m"), (1000, "1.00 km"), (2345.6, "2.35 km")],
)
def test_format_distance(meters, expected):
    assert format_distance(meters) == expected


def test_format_journal_duration():
    assert format_journal_duration(45) == "45m"
    assert format_journal_duration(65) == "1h 5m"
    assert format_journal_duration(0) == "0m"
