from datetime import datetime, timedelta, timezone

import pytest

from sincap.timeutils import (
    date_equal,
    days_in_month,
    parse_unix,
    time_bod,
    time_bom,
    time_mon_sun_weekday,
)


@pytest.mark.parametrize(
    "moment",
    [datetime(1, 1, 1), datetime(2021, 3, 17, 13, 45, 12, 5000, tzinfo=timezone.utc)],
)
def test_time_bod(moment):
    got = time_bod(moment)
    assert (got.hour, got.minute, got.second, got.microsecond) == (0, 0, 0, 0)
    assert got.date() == moment.date()
    assert got.tzinfo == moment.tzinfo


@pytest.mark.parametrize(
    "moment", [datetime(1, 1, 1), datetime(2021, 3, 17, 13, 45, 12, 5000)]
)
def test_time_bom(moment):
    got = time_bom(moment)
    assert (got.day, got.hour, got.minute, got.second, got.microsecond) == (1, 0, 0, 0, 0)
    assert (got.year, got.month) == (moment.year, moment.month)


@pytest.mark.parametrize(
    "day, expected",
    [(1, 0), (2, 1), (3, 2), (4, 3), (5, 4), (6, 5), (7, 6)],
)
def test_time_mon_sun_weekday(day, expected):
    assert time_mon_sun_weekday(datetime(2021, 3, day)) == expected


def test_date_equal():
    base = datetime(2021, 3, 1)
    assert date_equal(base, base) is True
    assert date_equal(base, base - timedelta(days=1)) is False
    assert date_equal(base, base.replace(hour=23)) is True


def test_parse_unix():
    assert parse_unix("1614556800000") == datetime(2021, 3, 1, tzinfo=timezone.utc)
    assert parse_unix("0") == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert parse_unix("-1000") == datetime(1969, 12, 31, 23, 59, 59, tzinfo=timezone.utc)


def test_parse_unix_round_trip():
    moment = datetime(2021, 3, 1, 12, 30, 15, 123000, tzinfo=timezone.utc)
    millis = (moment - datetime(1970, 1, 1, tzinfo=timezone.utc)) // timedelta(milliseconds=1)
    assert parse_unix(str(millis)) == moment


@pytest.mark.parametrize("text", ["life", "", "1.5", "99999999999999999999"])
def test_parse_unix_invalid(text):
    with pytest.raises(ValueError):
        parse_unix(text)


@pytest.mark.parametrize(
    "month, year, expected",
    [(2, 2020, 29), (2, 2021, 28), (4, 2021, 30), (12, 2021, 31), (13, 2021, 31), (0, 2021, 31)],
)
def test_days_in_month(month, year, expected):
    assert days_in_month(month, year) == expected